"""
Test fixtures shared across all AI Detector tests.
"""

import pytest

from ai_detector.core.analyzer import Analyzer
from ai_detector.core.pattern_store import default_pattern_set


# Known findings, in order:
#   Template Comments            line 2  style   weight 4
#   Unsafe eval() Usage          line 5  defect  weight 10  CRITICAL
#   Missing Strict Types         line 1  defect  weight 3   MAJOR
#   Use of @ to Suppress Errors  line 6  defect  weight 5   MAJOR
# The eval() on line 7 sits behind a // comment and is suppressed.
VULNERABLE_PHP = (
    "<?php\n"
    "// This function loads a user\n"
    "function load($id)\n"
    "{\n"
    "    eval($code);\n"
    "    $x = @file_get_contents($path);\n"
    "    // eval($commented);\n"
    "    return $id;\n"
    "}\n"
)

CLEAN_PHP = (
    "<?php\n"
    "\n"
    "declare(strict_types=1);\n"
    "\n"
    "function greet($name)\n"
    "{\n"
    "    return sprintf('Hello, %s', htmlspecialchars($name));\n"
    "}\n"
)


@pytest.fixture
def vulnerable_php_code():
    """PHP source with known style and defect findings (55% AI probability)."""
    return VULNERABLE_PHP


@pytest.fixture
def clean_php_code():
    """PHP source producing no findings at all."""
    return CLEAN_PHP


@pytest.fixture
def pattern_set():
    return default_pattern_set()


@pytest.fixture
def analyzer(pattern_set):
    """Sequential analyzer on the built-in patterns, independent of any local config."""
    return Analyzer(pattern_set=pattern_set, extension=".php", opening_tag="<?php", max_workers=1)


@pytest.fixture
def php_project(tmp_path):
    """
    A small project tree:
        project/a/clean.php     no findings
        project/b/vuln.php      4 findings, flagged as AI
        project/b/notes.txt     not analyzable, must be ignored
    """
    root = tmp_path / "project"
    (root / "a").mkdir(parents=True)
    (root / "b").mkdir()
    (root / "a" / "clean.php").write_text(CLEAN_PHP)
    (root / "b" / "vuln.php").write_text(VULNERABLE_PHP)
    (root / "b" / "notes.txt").write_text("eval($code);\n")
    return root
