"""
Finding Data Models — A single line-addressed pattern match.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, model_validator

from ai_detector.models.pattern_models import Severity


class FindingKind(str, Enum):
    STYLE = "style"
    DEFECT = "defect"


DEFAULT_SEVERITY: dict[FindingKind, Severity] = {
    FindingKind.DEFECT: Severity.MAJOR,
    FindingKind.STYLE: Severity.INFO,
}

# Matched text is truncated to this many characters
SNIPPET_LENGTH = 80


class Finding(BaseModel):
    """One reported match: where it is, what it means, and how much it weighs."""

    kind: FindingKind
    name: str = Field(..., description="Pattern name, e.g. 'Unsafe eval() Usage'")
    line: int = Field(..., ge=1, description="1-based line of the match's first character")
    message: str = Field(..., description="Pattern description or synthetic message")
    code: str = Field(default="", description="Matched text, truncated to 80 characters")
    weight: int = Field(..., gt=0)
    severity: Severity | None = None

    @model_validator(mode="after")
    def _default_severity(self) -> Finding:
        if self.severity is None:
            self.severity = DEFAULT_SEVERITY[self.kind]
        return self
