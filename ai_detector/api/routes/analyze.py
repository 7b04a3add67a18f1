"""
Analysis Routes — POST /analyze, POST /report, POST /scan

/analyze and /report read from the server's filesystem, confined to the
configured analysis root. /scan analyzes inline content. Analysis failures
are returned as data with status 200.
"""

from __future__ import annotations

import logging
from pathlib import PurePath

from fastapi import APIRouter, Depends

from ai_detector.api.dependencies import get_analyzer
from ai_detector.core.analyzer import Analyzer
from ai_detector.core.report import build_report
from ai_detector.core.scorer import aggregate_results
from ai_detector.models.result_models import AnalysisError, DirectoryResult, FileResult
from ai_detector.models.scan_models import AnalyzeRequest, ReportRequest, ScanRequest, ScanResponse

logger = logging.getLogger("ai_detector.api.analyze")

router = APIRouter()


@router.post("/analyze", response_model=FileResult | DirectoryResult | AnalysisError)
def analyze(request: AnalyzeRequest, analyzer: Analyzer = Depends(get_analyzer)):
    """Analyze a file or directory by path."""
    result = analyzer.analyze_path(request.path)
    if isinstance(result, AnalysisError):
        logger.info(f"Analysis of {request.path} failed: {result.error}")
    return result


@router.post("/report")
def report(request: ReportRequest, analyzer: Analyzer = Depends(get_analyzer)):
    """
    Dashboard report for a file or directory.

    Returns the generic issue list plus the summary it was derived from.
    """
    result = analyzer.analyze_path(request.path, attribute=request.attribute)
    built = build_report(result, request.path)
    return {
        **built.to_sonar_document().model_dump(mode="json"),
        "summary": built.summary.model_dump(mode="json"),
    }


@router.post("/scan", response_model=ScanResponse)
def scan(request: ScanRequest, analyzer: Analyzer = Depends(get_analyzer)):
    """
    Inline scan: analyze submitted file contents without touching the filesystem.

    Files with a non-analyzable extension are reported as unsupported.
    """
    if not request.files:
        return ScanResponse(message="error")

    results: list[FileResult | AnalysisError] = []
    for f in request.files:
        if PurePath(f.path).suffix != analyzer.extension:
            results.append(
                AnalysisError(
                    file=f.path,
                    error=f"Unsupported file type: only {analyzer.extension} files are supported ({f.path})",
                    code="unsupported_file_type",
                )
            )
            continue
        results.append(analyzer.analyze_source(f.content, f.path))

    aggregate = aggregate_results(results, directory="<inline>")
    logger.info(
        f"Inline scan of {len(request.files)} files: "
        f"{aggregate.files_analyzed} analyzed, {aggregate.ai_flagged_files} flagged"
    )
    return ScanResponse(results=results, aggregate=aggregate)
