"""
Analysis Result Models — Per-file results, error results, and directory aggregates.

Every failure the analyzer can hit is represented by an AnalysisError value,
never by an exception crossing the analysis boundary.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from ai_detector.models.finding_models import Finding


ErrorCode = Literal["path_not_found", "outside_root", "unsupported_file_type", "read_failed", "skipped"]


class FileSummary(BaseModel):
    style_findings: int = 0
    defect_findings: int = 0
    total_findings: int = 0


class FileResult(BaseModel):
    """Outcome of analyzing one file."""

    file: str
    ai_probability: int = Field(..., ge=0, le=100, description="AI probability in percent")
    is_likely_ai: bool
    findings: list[Finding] = Field(default_factory=list)
    summary: FileSummary = Field(default_factory=FileSummary)


class AnalysisError(BaseModel):
    """A file or directory that could not be analyzed."""

    file: str
    error: str = Field(..., description="Human-readable error message")
    code: ErrorCode


class DirectoryResult(BaseModel):
    """Aggregate over every analyzable file under a directory."""

    directory: str
    ai_probability: int = Field(..., ge=0, le=100)
    is_likely_ai: bool
    files_analyzed: int = 0
    ai_flagged_files: int = 0
    files_skipped: int = 0
    total_style_findings: int = 0
    total_defect_findings: int = 0
    findings: list[Finding] = Field(
        default_factory=list,
        description="All per-file findings concatenated, without file attribution",
    )
    errors: list[AnalysisError] = Field(
        default_factory=list, description="Files excluded from the aggregate"
    )
    file_results: list[FileResult] | None = Field(
        default=None, description="Per-file results, only when attribution is requested"
    )


AnalysisResult = FileResult | DirectoryResult | AnalysisError
