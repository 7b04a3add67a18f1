"""
Built-in Pattern Definitions — Used whenever no valid definitions document is found.

Names, weights and severities feed directly into scoring and rule ids, so they
must stay stable. The regexes are Python syntax with inline flags.
"""

from __future__ import annotations

from ai_detector.models.pattern_models import PatternRecord, Severity


# ---------------------------------------------------------------------------
# Style patterns (AI-authorship heuristics)
# ---------------------------------------------------------------------------

DEFAULT_STYLE_PATTERNS: list[PatternRecord] = [
    PatternRecord(
        name="Excessive Comments",
        pattern=r"/\*[\s\S]{200,}?\*/",
        weight=3,
        description="AI code often has very long, detailed comments",
    ),
    PatternRecord(
        name="Generic Variable Names",
        pattern=r"(\$data|\$result|\$output|\$item|\$temp)\b",
        weight=2,
        description="AI tends to use generic variable names",
    ),
    PatternRecord(
        name="Magic Numbers in Loops",
        pattern=r"for\s*\(\s*\$i\s*=\s*0;\s*\$i\s*<\s*[0-9]+;",
        weight=2,
        description="Magic numbers often appear in AI-generated loops",
    ),
    PatternRecord(
        name="Template Comments",
        pattern=r"(?i)(//|[/*])\s*(This method|This function|The following|In this section)",
        weight=4,
        description="Generic template comments are AI hallmarks",
    ),
    PatternRecord(
        name="Overly Perfect Formatting",
        pattern=r"\{\s*[\r\n]+\s*[\r\n]+\s*\}",
        weight=2,
        description="Excessive whitespace in empty blocks",
    ),
    PatternRecord(
        name="Chained Method Calls",
        pattern=r"->\w+\(\)->\w+\(\)->\w+\(\)",
        weight=3,
        description="Long method chains are common in AI code",
    ),
    PatternRecord(
        name="Generic Error Messages",
        pattern=r"throw new Exception\s*\(\s*[\"']Error[\"']\s*\)",
        weight=3,
        description="Generic error messages suggest AI generation",
    ),
    PatternRecord(
        name="Unused Imports/Requires",
        pattern=r"require\s+[^\n]+\s*[;\n]",
        weight=1,
        check="unused_imports",
        description="May have unused dependencies",
    ),
]


# ---------------------------------------------------------------------------
# Defect patterns (security / quality heuristics)
# ---------------------------------------------------------------------------

DEFAULT_DEFECT_PATTERNS: list[PatternRecord] = [
    PatternRecord(
        name="Empty Try-Catch",
        pattern=r"(?s)try\s*\{[^}]*\}\s*catch\s*\([^)]*\)\s*\{[^}]{0,50}\}",
        weight=5,
        severity=Severity.BLOCKER,
        description="Empty or minimal catch blocks - common AI mistake",
    ),
    PatternRecord(
        name="SQL Injection Risk",
        pattern=r"->prepare\s*\(\s*[\"'][^\"']*\$.*[\"']",
        weight=10,
        severity=Severity.CRITICAL,
        description="Potential SQL injection - variable interpolation in SQL",
    ),
    PatternRecord(
        name="XSS Vulnerability",
        pattern=r"echo\s+.*\$_(?:GET|POST|REQUEST)\[",
        weight=8,
        severity=Severity.CRITICAL,
        description="Direct output of user input without escaping",
    ),
    PatternRecord(
        name="Type Juggling",
        pattern=r"==\s*(?![\"'])",
        weight=3,
        severity=Severity.MAJOR,
        check="type_juggling",
        description="Loose comparison instead of strict equality",
    ),
    PatternRecord(
        name="Missing Input Validation",
        pattern=r"\$_(?:GET|POST|REQUEST)\[",
        weight=4,
        severity=Severity.MAJOR,
        check="input_validation",
        description="Direct access to superglobals without validation",
    ),
    PatternRecord(
        name="Unsafe eval() Usage",
        pattern=r"eval\s*\(\s*\$",
        weight=10,
        severity=Severity.CRITICAL,
        description="eval() with variable input - security risk",
    ),
    PatternRecord(
        name="File Include with User Input",
        pattern=r"(?:include|require|include_once|require_once)\s*\([^)]*\$_(?:GET|POST|REQUEST)",
        weight=9,
        severity=Severity.CRITICAL,
        description="File inclusion with user-controlled path",
    ),
    PatternRecord(
        name="Hardcoded Passwords",
        pattern=r"[\"'](?:password|passwd|pwd)[\"']\s*=>\s*[\"'][^\"']+[\"']",
        weight=8,
        severity=Severity.CRITICAL,
        description="Hardcoded credentials detected",
    ),
    PatternRecord(
        name="Missing Strict Types",
        pattern=r"(?i)<\?php\s*(?!\s*declare\s*\(\s*strict_types\s*=\s*1\s*\))",
        weight=3,
        severity=Severity.MAJOR,
        description="Missing strict_types declaration",
    ),
    PatternRecord(
        name="Unchecked Return Values",
        pattern=r"->\w+\(\)\s*;",
        weight=4,
        severity=Severity.MAJOR,
        check="return_value",
        description="Function return value not checked",
    ),
    PatternRecord(
        name="Use of @ to Suppress Errors",
        pattern=r"@[a-z_]+\s*\(",
        weight=5,
        severity=Severity.MAJOR,
        description="Error suppression operator used",
    ),
    PatternRecord(
        name="Incorrect Return Type",
        pattern=r"function\s+\w+\s*\([^)]*\)\s*:\s*\w+\s*\{",
        weight=4,
        severity=Severity.MAJOR,
        check="return_type",
        description="Function with return type but may not return correctly",
    ),
]
