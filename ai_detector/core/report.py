"""
Report Formatter — Findings to SonarQube generic issues.

Each finding becomes one issue:
    ruleId    name lower-cased, spaces replaced by hyphens
    severity  the finding's own severity (MAJOR defect / INFO style by default)
    type      VULNERABILITY for defects, CODE_SMELL for style findings
    filePath  the path that was requested, unless attribution is asked for
"""

from __future__ import annotations

from pathlib import Path

from ai_detector.core.analyzer import Analyzer
from ai_detector.models.finding_models import DEFAULT_SEVERITY, Finding, FindingKind
from ai_detector.models.report_models import GenericIssue, PrimaryLocation, Report, TextRange
from ai_detector.models.result_models import AnalysisError, AnalysisResult, DirectoryResult


def rule_id(name: str) -> str:
    return name.lower().replace(" ", "-")


def to_generic_issue(finding: Finding, file_path: str) -> GenericIssue:
    return GenericIssue(
        ruleId=rule_id(finding.name),
        severity=finding.severity or DEFAULT_SEVERITY[finding.kind],
        type="VULNERABILITY" if finding.kind is FindingKind.DEFECT else "CODE_SMELL",
        primaryLocation=PrimaryLocation(
            message=finding.message,
            filePath=file_path,
            textRange=TextRange(startLine=finding.line),
        ),
    )


def build_report(result: AnalysisResult, requested_path: str) -> Report:
    """
    Wrap an analysis result with its issue list.

    Directory results carrying ``file_results`` (attributed mode) produce
    issues pointing at each file; otherwise every issue points at
    ``requested_path``. Error results produce no issues.
    """
    if isinstance(result, AnalysisError):
        return Report(issues=[], summary=result)

    if isinstance(result, DirectoryResult) and result.file_results is not None:
        issues = [
            to_generic_issue(finding, file_result.file)
            for file_result in result.file_results
            for finding in file_result.findings
        ]
    else:
        issues = [to_generic_issue(finding, requested_path) for finding in result.findings]

    return Report(issues=issues, summary=result)


def generate_report(
    path: str | Path,
    analyzer: Analyzer | None = None,
    attribute: bool = False,
) -> Report:
    """Analyze ``path`` (file or directory) and produce the dashboard report."""
    analyzer = analyzer or Analyzer.from_settings()
    result = analyzer.analyze_path(path, attribute=attribute)
    return build_report(result, str(path))
