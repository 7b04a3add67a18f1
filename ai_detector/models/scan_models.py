"""
Scan Request/Response Models — API contract schemas.

These are the public-facing Pydantic models used by FastAPI endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from ai_detector.models.result_models import AnalysisError, DirectoryResult, FileResult


class FileInput(BaseModel):
    """A single file submitted inline for scanning."""

    path: str = Field(..., description="File path (absolute or relative)")
    content: str = Field(..., description="File source content")


class AnalyzeRequest(BaseModel):
    """Request body for /analyze: a file or directory on the server's filesystem."""

    path: str = Field(..., min_length=1)


class ReportRequest(AnalyzeRequest):
    """Request body for /report."""

    attribute: bool = Field(
        default=False, description="Attribute directory issues to their own files"
    )


class ScanRequest(BaseModel):
    """Request body for /scan: inline file contents, no filesystem access."""

    files: list[FileInput] = Field(default_factory=list)


class ScanResponse(BaseModel):
    """Response for /scan: one result per submitted file plus the aggregate."""

    message: str = "scan_complete"
    results: list[FileResult | AnalysisError] = Field(default_factory=list)
    aggregate: DirectoryResult | None = None
