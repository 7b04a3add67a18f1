"""
Scanner — Applies pattern collections to one file's full text.

Pipeline for a single file:
1. Style patterns are matched against the whole text
2. A synthetic comment-density finding is added when comments dominate
3. Defect patterns are matched, dropping matches behind a same-line ``//``

Matching is purely textual. Only single-line ``//`` comments suppress defect
matches; a match inside a ``/* ... */`` block is still reported. By default
the marker's column is compared with the match's file offset, so a trailing
``//`` on any line past the first suppresses the whole line.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

from ai_detector.core.checks import DEFAULT_CHECKS, CheckRegistry
from ai_detector.core.scorer import round_half_up
from ai_detector.models.finding_models import SNIPPET_LENGTH, Finding, FindingKind
from ai_detector.models.pattern_models import PatternDefinition, PatternKind, PatternSet


LINE_COMMENT_MARKER = "//"
COMMENT_PREFIXES = ("//", "/*", "*", "#")
DEFAULT_OPENING_TAG = "<?php"

COMMENT_RATIO_THRESHOLD = 0.4
COMMENT_RATIO_FINDING = "High Comment Ratio"
COMMENT_RATIO_WEIGHT = 3

# Characters stripped from both ends of a line before classifying it
_TRIM_CHARS = " \t\n\r\0\x0b"


@dataclass(frozen=True)
class RawMatch:
    """A regex hit before line mapping and suppression."""

    pattern: PatternDefinition
    text: str
    offset: int
    match: re.Match[str]


def scan(content: str, patterns: Iterable[PatternDefinition]) -> list[RawMatch]:
    """
    Find all non-overlapping matches of every pattern.

    Ordered by pattern first, then left to right within each pattern.
    """
    matches: list[RawMatch] = []
    for pattern in patterns:
        for m in pattern.regex.finditer(content):
            matches.append(RawMatch(pattern=pattern, text=m.group(0), offset=m.start(), match=m))
    return matches


def offset_to_line(content: str, offset: int) -> int:
    """1-based line number of ``offset``: newlines strictly before it, plus one."""
    return content.count("\n", 0, offset) + 1


def _line_bounds(content: str, offset: int) -> tuple[int, int]:
    start = content.rfind("\n", 0, offset) + 1
    end = content.find("\n", offset)
    return start, len(content) if end == -1 else end


def is_suppressed_by_comment(
    content: str,
    offset: int,
    line_text: str | None = None,
    by_column: bool = False,
) -> bool:
    """
    True if the match's line holds a ``//`` whose column is below ``offset``.

    ``offset`` is the match's position in the whole file while the marker's
    position is a column within its line, so on every line after the first a
    trailing ``// ...`` also suppresses the code in front of it. Pass
    ``by_column=True`` to compare the marker against the match's own column
    instead, which only suppresses matches that sit after the marker.

    ``line_text`` may be passed when the caller already split the content.
    """
    line_start, line_end = _line_bounds(content, offset)
    if line_text is None:
        line_text = content[line_start:line_end]

    marker = line_text.find(LINE_COMMENT_MARKER)
    if marker == -1:
        return False
    if by_column:
        return marker < offset - line_start
    return marker < offset


def count_comment_and_code_lines(content: str, opening_tag: str = DEFAULT_OPENING_TAG) -> tuple[int, int]:
    """Classify every line as comment, code, or neither (blank / opening tag)."""
    comment_lines = 0
    code_lines = 0
    for line in content.split("\n"):
        trimmed = line.strip(_TRIM_CHARS)
        if trimmed.startswith(COMMENT_PREFIXES):
            comment_lines += 1
        elif trimmed and opening_tag not in trimmed:
            code_lines += 1
    return comment_lines, code_lines


def comment_density_check(content: str, opening_tag: str = DEFAULT_OPENING_TAG) -> Finding | None:
    """Synthetic style finding when comment lines exceed 40% of code lines."""
    comment_lines, code_lines = count_comment_and_code_lines(content, opening_tag)
    ratio = comment_lines / code_lines if code_lines > 0 else 0

    if ratio <= COMMENT_RATIO_THRESHOLD:
        return None

    percent = round_half_up(100 * comment_lines, code_lines)
    return Finding(
        kind=FindingKind.STYLE,
        name=COMMENT_RATIO_FINDING,
        line=1,
        message=f"Comment-to-code ratio of {percent}% suggests AI generation",
        weight=COMMENT_RATIO_WEIGHT,
    )


def _to_finding(content: str, raw: RawMatch) -> Finding:
    pattern = raw.pattern
    return Finding(
        kind=FindingKind.DEFECT if pattern.kind is PatternKind.DEFECT else FindingKind.STYLE,
        name=pattern.name,
        line=offset_to_line(content, raw.offset),
        message=pattern.description,
        code=raw.text[:SNIPPET_LENGTH],
        weight=pattern.weight,
        severity=pattern.severity,
    )


def collect_findings(
    content: str,
    pattern_set: PatternSet,
    checks: CheckRegistry | None = None,
    opening_tag: str = DEFAULT_OPENING_TAG,
    suppress_by_column: bool = False,
) -> list[Finding]:
    """
    Run both collections over ``content`` and return a fresh finding list.

    Order: style matches, the comment-density finding, then defect matches.
    ``suppress_by_column`` is passed through to ``is_suppressed_by_comment``.
    """
    checks = checks or DEFAULT_CHECKS
    findings: list[Finding] = []

    for raw in scan(content, pattern_set.style):
        if checks.accepts(raw.pattern.check, content, raw.match):
            findings.append(_to_finding(content, raw))

    density = comment_density_check(content, opening_tag)
    if density is not None:
        findings.append(density)

    lines = content.split("\n")
    for raw in scan(content, pattern_set.defect):
        line_text = lines[offset_to_line(content, raw.offset) - 1]
        if is_suppressed_by_comment(content, raw.offset, line_text, by_column=suppress_by_column):
            continue
        if not checks.accepts(raw.pattern.check, content, raw.match):
            continue
        findings.append(_to_finding(content, raw))

    return findings
