"""
AI Code Analyzer CLI.

Usage:
    ai-code-analyzer                       # analyze the default target (src)
    ai-code-analyzer path/to/file.php
    ai-code-analyzer path/to/project --format json
    ai-code-analyzer path/to/project --output sonar-issues.json --attribute

Exit Codes:
    0 - Analysis completed, whatever the verdict
    1 - The path does not exist, the file could not be analyzed, or the report could not be written
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from dotenv import load_dotenv

from ai_detector.config import settings
from ai_detector.core.analyzer import Analyzer
from ai_detector.core.pattern_store import load_patterns
from ai_detector.core.report import build_report
from ai_detector.models.finding_models import FindingKind
from ai_detector.models.result_models import AnalysisError, AnalysisResult, DirectoryResult, FileResult

logger = logging.getLogger("ai_detector.cli")

SEPARATOR_WIDTH = 50


def _format_text_output(result: FileResult | DirectoryResult) -> str:
    lines: list[str] = []
    lines.append("=== AI Detection Results ===")
    lines.append(f"AI Probability: {result.ai_probability}%")
    lines.append(f"Likely AI Generated: {'YES' if result.is_likely_ai else 'NO'}")
    lines.append("")

    if isinstance(result, DirectoryResult):
        lines.append(f"Files Analyzed: {result.files_analyzed}")
        lines.append(f"AI-Generated Files: {result.ai_flagged_files}")
        if result.files_skipped:
            lines.append(f"Files Skipped: {result.files_skipped}")
        style, defect = result.total_style_findings, result.total_defect_findings
        total = len(result.findings)
    else:
        style, defect = result.summary.style_findings, result.summary.defect_findings
        total = result.summary.total_findings

    lines.append("")
    lines.append("=== Summary ===")
    lines.append(f"AI Patterns Found: {style}")
    lines.append(f"AI Errors Found: {defect}")
    lines.append(f"Total Findings: {total}")
    lines.append("")

    if result.findings:
        lines.append("=== Detailed Findings ===")
        for finding in result.findings:
            icon = "[!]" if finding.kind is FindingKind.DEFECT else "[?]"
            lines.append(f"{icon} [{finding.severity.value}] Line {finding.line}: {finding.name}")
            lines.append(f"    {finding.message}")
            lines.append("")

    return "\n".join(lines)


def _format_output(result: AnalysisResult, output_format: str, target: str) -> str:
    if output_format == "json":
        return result.model_dump_json(indent=2)
    if output_format == "sonar":
        return build_report(result, target).model_dump_json(indent=2)
    return _format_text_output(result)


def main(args: list[str] | None = None) -> int:
    """CLI entry point.

    Args:
        args: Command line arguments (uses sys.argv if None).

    Returns:
        Exit code: 1 if the target is missing, cannot be analyzed, or the
        report cannot be written, else 0.
    """
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Detect AI-generated code patterns and common AI coding errors",
        prog="ai-code-analyzer",
    )
    parser.add_argument(
        "target",
        nargs="?",
        default=None,
        help=f"File or directory to analyze (default: {settings.default_target})",
    )
    parser.add_argument(
        "--patterns",
        "-p",
        type=Path,
        default=None,
        metavar="PATH",
        help=f"Pattern definitions JSON (default: {settings.patterns_file})",
    )
    parser.add_argument(
        "--format",
        "-f",
        choices=("text", "json", "sonar"),
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        metavar="PATH",
        help="Also write the SonarQube generic issue report to this file",
    )
    parser.add_argument(
        "--workers",
        "-w",
        type=int,
        default=None,
        help=f"Worker threads for directory analysis (default: {settings.max_workers})",
    )
    parser.add_argument(
        "--deadline",
        type=float,
        default=None,
        metavar="SECONDS",
        help="Skip files not analyzed within this many seconds",
    )
    parser.add_argument(
        "--attribute",
        action="store_true",
        help="Attribute directory issues to their own files in the report",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log pattern loading and per-file analysis",
    )

    parsed_args = parser.parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if parsed_args.verbose else logging.WARNING,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    target = parsed_args.target or settings.default_target
    if not Path(target).exists():
        print(f"Error: Path not found: {target}", file=sys.stderr)
        return 1

    analyzer = Analyzer(
        pattern_set=load_patterns(
            parsed_args.patterns,
            on_warning=lambda reason: logger.info(f"Using built-in patterns ({reason})"),
        ),
        max_workers=parsed_args.workers,
        deadline_seconds=parsed_args.deadline,
    )

    text_mode = parsed_args.format == "text"
    if text_mode:
        print("AI Code Analyzer - Starting analysis...")
        print(f"Target: {target}")
        print("-" * SEPARATOR_WIDTH)
        print()

    start = time.monotonic()
    result = analyzer.analyze_path(target, attribute=parsed_args.attribute)
    duration_ms = round((time.monotonic() - start) * 1000, 2)

    if text_mode:
        print(f"Analysis completed in {duration_ms}ms")
        print()

    if isinstance(result, AnalysisError):
        print(f"Error: {result.error}", file=sys.stderr)
        return 1

    print(_format_output(result, parsed_args.format, target))

    if parsed_args.output is not None:
        try:
            parsed_args.output.write_text(build_report(result, target).to_sonar_json())
        except OSError as e:
            print(f"Error: Could not write report to {parsed_args.output}: {e}", file=sys.stderr)
            return 1
        logger.info(f"Wrote report to {parsed_args.output}")

    # Verdict does not affect the exit status
    return 0


if __name__ == "__main__":
    sys.exit(main())
