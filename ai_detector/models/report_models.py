"""
Report Models — SonarQube generic issue import format.

Field names follow the external format exactly, hence the camelCase.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from ai_detector.models.pattern_models import Severity
from ai_detector.models.result_models import AnalysisError, DirectoryResult, FileResult


ENGINE_ID = "AI-Detector"


class TextRange(BaseModel):
    startLine: int = Field(..., ge=1)  # noqa: N815 — external format


class PrimaryLocation(BaseModel):
    message: str
    filePath: str  # noqa: N815 — external format
    textRange: TextRange  # noqa: N815 — external format


class GenericIssue(BaseModel):
    """One issue record in the dashboard import document."""

    engineId: str = ENGINE_ID  # noqa: N815 — external format
    ruleId: str  # noqa: N815 — external format
    severity: Severity
    type: Literal["VULNERABILITY", "CODE_SMELL"]
    primaryLocation: PrimaryLocation  # noqa: N815 — external format


class SonarDocument(BaseModel):
    """The import document itself: nothing but the issue list."""

    issues: list[GenericIssue] = Field(default_factory=list)


class Report(BaseModel):
    """Issue list bundled with the analysis summary it was derived from."""

    issues: list[GenericIssue] = Field(default_factory=list)
    summary: FileResult | DirectoryResult | AnalysisError

    def to_sonar_document(self) -> SonarDocument:
        return SonarDocument(issues=self.issues)

    def to_sonar_json(self, indent: int | None = 2) -> str:
        """Serialize only the issue list, ready for sonar.externalIssuesReportPaths."""
        return self.to_sonar_document().model_dump_json(indent=indent)
