"""
Score Aggregator — AI probability per file and per directory.

Per file:
    score_ai    = Σ finding.weight
    total_score = 10 × number of findings
    probability = min(100, round(100 × score_ai / total_score)), or 0 with no findings

Every finding counts against the same fixed baseline of 10, whatever the
pattern's own weight, so weights above 10 push the probability towards 100.

Per directory:
    probability = round(100 × ai_flagged_files / files_analyzed), or 0 with no files

Rounding is half-up, computed on integers so results are exact.
"""

from __future__ import annotations

from typing import Iterable

from ai_detector.models.finding_models import Finding, FindingKind
from ai_detector.models.result_models import (
    AnalysisError,
    DirectoryResult,
    FileResult,
    FileSummary,
)


SCORE_PER_FINDING = 10
LIKELY_AI_THRESHOLD = 50


def round_half_up(numerator: int, denominator: int) -> int:
    """Round ``numerator / denominator`` to the nearest int, halves away from zero."""
    if denominator <= 0:
        raise ValueError("denominator must be positive")
    if numerator < 0:
        return -round_half_up(-numerator, denominator)
    return (2 * numerator + denominator) // (2 * denominator)


def compute_probability(score_ai: int, total_score: int) -> int:
    if total_score <= 0:
        return 0
    return min(100, round_half_up(100 * score_ai, total_score))


def is_likely_ai(probability: int) -> bool:
    return probability > LIKELY_AI_THRESHOLD


def summarize(findings: list[Finding]) -> FileSummary:
    style = sum(1 for f in findings if f.kind is FindingKind.STYLE)
    defect = sum(1 for f in findings if f.kind is FindingKind.DEFECT)
    return FileSummary(style_findings=style, defect_findings=defect, total_findings=len(findings))


def score_file(file: str, findings: list[Finding]) -> FileResult:
    """Accumulate weights against the fixed per-finding baseline."""
    score_ai = 0
    total_score = 0
    for finding in findings:
        score_ai += finding.weight
        total_score += SCORE_PER_FINDING

    probability = compute_probability(score_ai, total_score)
    return FileResult(
        file=file,
        ai_probability=probability,
        is_likely_ai=is_likely_ai(probability),
        findings=findings,
        summary=summarize(findings),
    )


def aggregate_results(
    results: Iterable[FileResult | AnalysisError],
    directory: str,
    attribute: bool = False,
) -> DirectoryResult:
    """
    Combine per-file results into a directory aggregate.

    Error results are excluded from every count and from the denominator.
    Findings are concatenated in result order without file attribution;
    ``attribute=True`` additionally keeps the per-file results.

    Args:
        results: Per-file outcomes, in discovery order.
        directory: The directory path as requested.
        attribute: Keep the attributed per-file results on the aggregate.

    Returns:
        DirectoryResult for the batch.
    """
    files_analyzed = 0
    ai_flagged = 0
    total_style = 0
    total_defect = 0
    all_findings: list[Finding] = []
    analyzed: list[FileResult] = []
    errors: list[AnalysisError] = []

    for result in results:
        if isinstance(result, AnalysisError):
            errors.append(result)
            continue

        files_analyzed += 1
        total_style += result.summary.style_findings
        total_defect += result.summary.defect_findings
        if result.is_likely_ai:
            ai_flagged += 1
        all_findings.extend(result.findings)
        analyzed.append(result)

    probability = round_half_up(100 * ai_flagged, files_analyzed) if files_analyzed > 0 else 0

    return DirectoryResult(
        directory=directory,
        ai_probability=probability,
        is_likely_ai=is_likely_ai(probability),
        files_analyzed=files_analyzed,
        ai_flagged_files=ai_flagged,
        files_skipped=sum(1 for e in errors if e.code == "skipped"),
        total_style_findings=total_style,
        total_defect_findings=total_defect,
        findings=all_findings,
        errors=errors,
        file_results=analyzed if attribute else None,
    )
