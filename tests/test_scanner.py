"""
Tests for Scanner — matching order, line mapping, comment suppression, comment density.
"""

from ai_detector.core.checks import CheckRegistry
from ai_detector.core.scanner import (
    collect_findings,
    comment_density_check,
    count_comment_and_code_lines,
    is_suppressed_by_comment,
    offset_to_line,
    scan,
)
from ai_detector.models.finding_models import FindingKind
from ai_detector.models.pattern_models import Severity


def test_offset_to_line():
    content = "a\nbb\n\nccc"
    assert offset_to_line(content, 0) == 1
    assert offset_to_line(content, 1) == 1  # the newline itself is still line 1
    assert offset_to_line(content, 2) == 2
    assert offset_to_line(content, 5) == 3
    assert offset_to_line(content, 6) == 4


def test_every_finding_line_matches_newline_count(vulnerable_php_code, pattern_set):
    for raw in scan(vulnerable_php_code, pattern_set.defect + pattern_set.style):
        assert offset_to_line(vulnerable_php_code, raw.offset) == vulnerable_php_code[: raw.offset].count("\n") + 1


def test_scan_orders_by_pattern_then_position(pattern_set):
    content = "$data = 1;\n$temp = $data;\n"
    names = [(raw.pattern.name, raw.text, raw.offset) for raw in scan(content, pattern_set.style)]
    assert names == [
        ("Generic Variable Names", "$data", 0),
        ("Generic Variable Names", "$temp", 11),
        ("Generic Variable Names", "$data", 19),
    ]


def test_vulnerable_sample_findings(vulnerable_php_code, pattern_set):
    findings = collect_findings(vulnerable_php_code, pattern_set)
    assert [(f.name, f.line, f.kind, f.weight) for f in findings] == [
        ("Template Comments", 2, FindingKind.STYLE, 4),
        ("Unsafe eval() Usage", 5, FindingKind.DEFECT, 10),
        ("Missing Strict Types", 1, FindingKind.DEFECT, 3),
        ("Use of @ to Suppress Errors", 6, FindingKind.DEFECT, 5),
    ]


def test_clean_sample_has_no_findings(clean_php_code, pattern_set):
    assert collect_findings(clean_php_code, pattern_set) == []


def test_eval_of_variable_is_critical_at_line_one(pattern_set):
    findings = collect_findings("eval($code);", pattern_set)
    critical = [f for f in findings if f.kind is FindingKind.DEFECT and f.severity is Severity.CRITICAL]
    assert len(critical) >= 1
    assert critical[0].line == 1
    assert critical[0].code == "eval($"


def test_defect_behind_line_comment_is_suppressed(pattern_set):
    findings = collect_findings("<?php\ndeclare(strict_types=1);\n// eval($code);\n", pattern_set)
    assert not any(f.name == "Unsafe eval() Usage" for f in findings)


def test_trailing_comment_suppresses_defect_on_later_line(pattern_set):
    # The marker's column (13) is below the match's file offset (31)
    content = "<?php\ndeclare(strict_types=1);\neval($code); // run it\n"
    findings = collect_findings(content, pattern_set)
    assert not any(f.name == "Unsafe eval() Usage" for f in findings)


def test_trailing_comment_keeps_defect_when_comparing_columns(pattern_set):
    content = "<?php\ndeclare(strict_types=1);\neval($code); // run it\n"
    findings = collect_findings(content, pattern_set, suppress_by_column=True)
    evals = [f for f in findings if f.name == "Unsafe eval() Usage"]
    assert len(evals) == 1
    assert evals[0].line == 3


def test_trailing_comment_on_first_line_keeps_defect(pattern_set):
    content = "eval($code); // run it\n"
    findings = collect_findings(content, pattern_set)
    assert [f.name for f in findings if f.kind is FindingKind.DEFECT] == ["Unsafe eval() Usage"]


def test_defect_inside_block_comment_is_not_suppressed(pattern_set):
    content = "<?php\ndeclare(strict_types=1);\n/*\n eval($code);\n*/\n"
    findings = collect_findings(content, pattern_set)
    evals = [f for f in findings if f.name == "Unsafe eval() Usage"]
    assert len(evals) == 1
    assert evals[0].line == 4


def test_style_matches_are_never_suppressed(pattern_set):
    findings = collect_findings("<?php\ndeclare(strict_types=1);\n$x = 1; // $data\n$y = 2;\n", pattern_set)
    assert [f.name for f in findings] == ["Generic Variable Names"]


def test_is_suppressed_by_comment_compares_marker_column_with_offset():
    content = "<?php\ndeclare(strict_types=1);\neval($code); // run it\n"
    assert content.index("eval") == 31
    assert is_suppressed_by_comment(content, 31)
    assert not is_suppressed_by_comment(content, 0)


def test_is_suppressed_by_comment_by_column():
    content = "$a = 1;\n// eval($b);\neval($c); // note\n"
    assert is_suppressed_by_comment(content, content.index("eval($b)"), by_column=True)
    assert not is_suppressed_by_comment(content, content.index("eval($c)"), by_column=True)
    assert is_suppressed_by_comment(content, content.index("eval($c)"))


def test_is_suppressed_by_comment_accepts_line_text():
    content = "x; // eval($y)"
    offset = content.index("eval")
    assert is_suppressed_by_comment(content, offset, line_text=content)


def test_snippet_truncated_to_80_characters(pattern_set):
    content = "<?php\ndeclare(strict_types=1);\n/*" + " long" * 60 + " */\n"
    findings = collect_findings(content, pattern_set)
    excessive = [f for f in findings if f.name == "Excessive Comments"]
    assert len(excessive) == 1
    assert len(excessive[0].code) == 80


def test_count_comment_and_code_lines():
    content = "<?php\n// one\n/* two\n * three\n */\n# four\n$a = 1;\n\n$b = 2;\n"
    assert count_comment_and_code_lines(content) == (5, 2)


def test_comment_density_fires_above_threshold():
    finding = comment_density_check("<?php\n// a\n// b\n$x = 1;\n$y = 2;\n")
    assert finding is not None
    assert finding.name == "High Comment Ratio"
    assert finding.kind is FindingKind.STYLE
    assert finding.weight == 3
    assert finding.line == 1
    assert finding.severity is Severity.INFO
    assert finding.message == "Comment-to-code ratio of 100% suggests AI generation"


def test_comment_density_exactly_at_threshold_does_not_fire():
    content = "// a\n// b\n" + "$v = 1;\n" * 5
    assert comment_density_check(content) is None


def test_comment_density_just_above_threshold_rounds_percentage():
    # 1 comment / 2 code lines = 50%
    finding = comment_density_check("// a\n$x = 1;\n$y = 2;\n")
    assert finding is not None
    assert "50%" in finding.message


def test_comment_density_without_code_is_zero():
    assert comment_density_check("// only\n// comments\n") is None


def test_comment_density_ignores_opening_tag_lines():
    # Only the tag and one comment: no code lines at all
    assert comment_density_check("<?php // header\n// note\n") is None


def test_density_finding_sits_between_style_and_defects(pattern_set):
    content = "<?php\n// a\n// b\neval($x);\n"
    findings = collect_findings(content, pattern_set)
    assert [f.name for f in findings] == ["High Comment Ratio", "Unsafe eval() Usage", "Missing Strict Types"]


def test_check_validator_can_reject_matches(pattern_set):
    checks = CheckRegistry()
    checks.register("type_juggling", lambda content, match: False)
    content = "<?php\ndeclare(strict_types=1);\nif ($a == $b) {}\n"

    default_names = [f.name for f in collect_findings(content, pattern_set)]
    filtered_names = [f.name for f in collect_findings(content, pattern_set, checks=checks)]

    assert "Type Juggling" in default_names
    assert "Type Juggling" not in filtered_names
