"""
Tests for Score Aggregator — probability formula, rounding, and directory aggregation.
"""

import pytest

from ai_detector.core.scorer import (
    aggregate_results,
    compute_probability,
    round_half_up,
    score_file,
)
from ai_detector.models.finding_models import Finding, FindingKind
from ai_detector.models.result_models import AnalysisError


def _finding(weight, kind=FindingKind.STYLE, line=1):
    return Finding(kind=kind, name="Test", line=line, message="m", weight=weight)


def _file_result(name, weights):
    return score_file(name, [_finding(w) for w in weights])


def test_round_half_up():
    assert round_half_up(1, 2) == 1
    assert round_half_up(5, 2) == 3
    assert round_half_up(1, 3) == 0
    assert round_half_up(2, 3) == 1
    assert round_half_up(-5, 2) == -3


def test_round_half_up_rejects_zero_denominator():
    with pytest.raises(ValueError):
        round_half_up(1, 0)


def test_probability_zero_without_findings():
    assert compute_probability(0, 0) == 0
    result = score_file("empty.php", [])
    assert result.ai_probability == 0
    assert result.is_likely_ai is False
    assert result.summary.total_findings == 0


def test_probability_formula():
    # 22 / 40 = 55%
    assert compute_probability(22, 40) == 55
    # 62.5% rounds half up
    assert compute_probability(25, 40) == 63


def test_probability_capped_at_100():
    assert compute_probability(15, 10) == 100
    result = score_file("x.php", [_finding(10, FindingKind.DEFECT), _finding(9, FindingKind.DEFECT)])
    assert result.ai_probability == 95
    result = score_file("x.php", [_finding(10, FindingKind.DEFECT) for _ in range(3)] + [_finding(50)])
    assert result.ai_probability == 100


def test_probability_monotonic_in_score():
    total = 80
    previous = -1
    for score in range(0, 200):
        probability = compute_probability(score, total)
        assert probability >= previous
        assert probability <= 100
        previous = probability


def test_score_file_uses_fixed_baseline_per_finding():
    findings = [
        _finding(4),
        _finding(10, FindingKind.DEFECT),
        _finding(3, FindingKind.DEFECT),
        _finding(5, FindingKind.DEFECT),
    ]
    result = score_file("vuln.php", findings)
    assert result.ai_probability == 55
    assert result.is_likely_ai is True
    assert result.summary.style_findings == 1
    assert result.summary.defect_findings == 3
    assert result.summary.total_findings == 4


def test_exactly_fifty_percent_is_not_likely_ai():
    result = _file_result("half.php", [5])
    assert result.ai_probability == 50
    assert result.is_likely_ai is False


def test_aggregate_probability_from_flagged_files():
    results = [
        _file_result("a.php", [10]),
        _file_result("b.php", [1]),
        _file_result("c.php", [8]),
    ]
    aggregate = aggregate_results(results, "src")
    assert aggregate.files_analyzed == 3
    assert aggregate.ai_flagged_files == 2
    assert aggregate.ai_probability == 67
    assert aggregate.is_likely_ai is True


def test_aggregate_excludes_errors_from_denominator():
    results = [
        _file_result("a.php", [10]),
        AnalysisError(file="b.php", error="Could not read b.php", code="read_failed"),
        _file_result("c.php", [1]),
    ]
    aggregate = aggregate_results(results, "src")
    assert aggregate.files_analyzed == 2
    assert aggregate.ai_flagged_files == 1
    assert aggregate.ai_probability == 50
    assert aggregate.is_likely_ai is False
    assert len(aggregate.errors) == 1
    assert aggregate.files_skipped == 0


def test_aggregate_counts_skipped_files():
    results = [
        _file_result("a.php", [1]),
        AnalysisError(file="b.php", error="Skipped", code="skipped"),
    ]
    aggregate = aggregate_results(results, "src")
    assert aggregate.files_analyzed == 1
    assert aggregate.files_skipped == 1


def test_aggregate_empty_is_zero():
    aggregate = aggregate_results([], "src")
    assert aggregate.files_analyzed == 0
    assert aggregate.ai_probability == 0
    assert aggregate.is_likely_ai is False
    assert aggregate.findings == []


def test_aggregate_concatenates_findings_in_order():
    first = score_file("a.php", [_finding(1, line=1), _finding(2, line=2)])
    second = score_file("b.php", [_finding(3, FindingKind.DEFECT, line=7)])
    aggregate = aggregate_results([first, second], "src")
    assert [f.weight for f in aggregate.findings] == [1, 2, 3]
    assert aggregate.total_style_findings == 2
    assert aggregate.total_defect_findings == 1
    assert aggregate.file_results is None


def test_aggregate_attributed_keeps_file_results():
    first = _file_result("a.php", [1])
    second = _file_result("b.php", [2])
    aggregate = aggregate_results([first, second], "src", attribute=True)
    assert [r.file for r in aggregate.file_results] == ["a.php", "b.php"]
