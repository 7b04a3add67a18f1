"""
Check Validators — Secondary checks keyed by a pattern's ``check`` tag.

A validator sees the full file content and the regex match, and returns True
to keep the match. The built-in tags are reserved hooks: they accept every
match, so detection is purely textual until a real validator is registered.
"""

from __future__ import annotations

import re
from typing import Callable

# Type for a check validator
CheckFn = Callable[[str, re.Match[str]], bool]


def accept_all(content: str, match: re.Match[str]) -> bool:
    return True


# Tags referenced by the built-in patterns
RESERVED_CHECKS: tuple[str, ...] = (
    "unused_imports",
    "type_juggling",
    "input_validation",
    "return_value",
    "return_type",
)


class CheckRegistry:
    """
    Maps check tags to validators.

    Unknown tags resolve to ``accept_all`` so that definitions written for a
    newer validator set still load and match.
    """

    def __init__(self, validators: dict[str, CheckFn] | None = None) -> None:
        self._validators: dict[str, CheckFn] = {tag: accept_all for tag in RESERVED_CHECKS}
        if validators:
            self._validators.update(validators)

    def register(self, tag: str, validator: CheckFn) -> None:
        self._validators[tag] = validator

    def get(self, tag: str) -> CheckFn:
        return self._validators.get(tag, accept_all)

    def accepts(self, tag: str | None, content: str, match: re.Match[str]) -> bool:
        """True if the match survives the check named by ``tag`` (no tag always passes)."""
        if tag is None:
            return True
        return self.get(tag)(content, match)


# Shared default registry, read-only in practice
DEFAULT_CHECKS = CheckRegistry()
