"""
Pattern Data Models — Severities, pattern definitions, and the loaded pattern set.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, PositiveInt


class Severity(str, Enum):
    BLOCKER = "BLOCKER"
    CRITICAL = "CRITICAL"
    MAJOR = "MAJOR"
    INFO = "INFO"


class PatternKind(str, Enum):
    """Which collection a pattern belongs to."""

    STYLE = "style"
    DEFECT = "defect"


class PatternRecord(BaseModel):
    """One raw entry of the JSON pattern definitions document."""

    name: str
    pattern: str = Field(..., description="Regex, optionally PCRE-delimited: /expr/flags")
    weight: PositiveInt
    description: str
    severity: Severity | None = None
    check: str | None = Field(default=None, description="Reserved secondary check tag")


class PatternDocument(BaseModel):
    """The JSON pattern definitions document: style patterns plus defect patterns."""

    patterns: list[PatternRecord] = Field(default_factory=list)
    errors: list[PatternRecord] = Field(default_factory=list)


class PatternDefinition(BaseModel):
    """A compiled, immutable detection pattern."""

    model_config = ConfigDict(frozen=True)

    kind: PatternKind
    name: str
    regex: re.Pattern[str]
    weight: PositiveInt
    description: str
    severity: Severity | None = Field(
        default=None, description="Defect patterns only; style patterns carry none"
    )
    check: str | None = None


class PatternSet(BaseModel):
    """Both pattern collections, loaded once per analyzer session."""

    model_config = ConfigDict(frozen=True)

    style: tuple[PatternDefinition, ...] = ()
    defect: tuple[PatternDefinition, ...] = ()
    source: Literal["file", "default"] = "default"
