"""
Pattern Store — Loads the style and defect pattern collections.

Definitions come from a JSON document:

    {"patterns": [...style records...], "errors": [...defect records...]}

Loading is fail-soft: a missing, unreadable or malformed document (including
one with a regex that does not compile) silently yields the built-in default
set. Callers that want to know why can pass ``on_warning``.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Callable, Iterable

from pydantic import ValidationError

from ai_detector.config import settings
from ai_detector.core.default_patterns import DEFAULT_DEFECT_PATTERNS, DEFAULT_STYLE_PATTERNS
from ai_detector.models.pattern_models import (
    PatternDefinition,
    PatternDocument,
    PatternKind,
    PatternRecord,
    PatternSet,
)

logger = logging.getLogger("ai_detector.patterns")

WarningCallback = Callable[[str], None]

# PCRE-style "/expr/flags" as written in legacy definition files
_DELIMITED = re.compile(r"([/#~])(.*)\1([a-zA-Z]*)", re.DOTALL)

_PCRE_FLAGS: dict[str, re.RegexFlag] = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
}


def compile_pattern(text: str, allow_delimiters: bool = True) -> re.Pattern[str]:
    """
    Compile a pattern string, accepting both PCRE-delimited and plain syntax.

    Matching is ASCII-only for ``\\w``/``\\s``/``\\b`` unless the delimited
    form carries the ``u`` flag. With ``allow_delimiters=False`` the text is
    always plain Python syntax, so a leading ``/`` is part of the expression.

    Raises:
        re.error: If the expression does not compile or a flag is unsupported.
    """
    delimited = _DELIMITED.fullmatch(text) if allow_delimiters else None
    if delimited is None:
        return re.compile(text, re.ASCII)

    _, body, modifiers = delimited.groups()
    flags = re.RegexFlag(0) if "u" in modifiers else re.ASCII
    for modifier in modifiers:
        if modifier == "u":
            continue
        if modifier not in _PCRE_FLAGS:
            raise re.error(f"Unsupported pattern modifier: {modifier!r}")
        flags |= _PCRE_FLAGS[modifier]
    return re.compile(body, flags)


def build_definitions(
    records: Iterable[PatternRecord],
    kind: PatternKind,
    allow_delimiters: bool = True,
) -> tuple[PatternDefinition, ...]:
    """Compile raw records into immutable definitions, preserving order."""
    return tuple(
        PatternDefinition(
            kind=kind,
            name=record.name,
            regex=compile_pattern(record.pattern, allow_delimiters),
            weight=record.weight,
            description=record.description,
            # Style findings never carry a severity of their own
            severity=record.severity if kind is PatternKind.DEFECT else None,
            check=record.check,
        )
        for record in records
    )


def default_pattern_set() -> PatternSet:
    """The built-in 8 style and 12 defect patterns."""
    return PatternSet(
        style=build_definitions(DEFAULT_STYLE_PATTERNS, PatternKind.STYLE, allow_delimiters=False),
        defect=build_definitions(DEFAULT_DEFECT_PATTERNS, PatternKind.DEFECT, allow_delimiters=False),
        source="default",
    )


def parse_pattern_document(text: str | bytes) -> PatternSet:
    """
    Parse and compile a JSON definitions document.

    A collection missing from the document is treated as empty.

    Raises:
        ValidationError: If the document is not valid JSON or fails the schema.
        re.error: If any pattern does not compile.
    """
    document = PatternDocument.model_validate_json(text)
    return PatternSet(
        style=build_definitions(document.patterns, PatternKind.STYLE),
        defect=build_definitions(document.errors, PatternKind.DEFECT),
        source="file",
    )


def load_patterns(
    source: str | Path | None = None,
    on_warning: WarningCallback | None = None,
) -> PatternSet:
    """
    Load pattern collections from ``source``, falling back to the defaults.

    Args:
        source: Path to the JSON definitions document. Defaults to
            ``settings.patterns_file``.
        on_warning: Optional diagnostic callback, invoked with the reason
            whenever the defaults are used instead of the document.

    Returns:
        The loaded PatternSet. Never raises.
    """
    path = Path(source if source is not None else settings.patterns_file)

    def fall_back(reason: str) -> PatternSet:
        logger.debug(f"Using built-in patterns: {reason}")
        if on_warning is not None:
            on_warning(reason)
        return default_pattern_set()

    if not path.is_file():
        return fall_back(f"pattern file not found: {path}")

    try:
        text = path.read_bytes()
    except OSError as e:
        return fall_back(f"pattern file unreadable: {path}: {e}")

    try:
        pattern_set = parse_pattern_document(text)
    except ValidationError as e:
        return fall_back(f"pattern file malformed: {path}: {e.error_count()} error(s)")
    except re.error as e:
        return fall_back(f"pattern file has an invalid regex: {path}: {e}")

    logger.debug(
        f"Loaded {len(pattern_set.style)} style and {len(pattern_set.defect)} "
        f"defect patterns from {path}"
    )
    return pattern_set
