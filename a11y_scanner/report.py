"""Report exporters for audit results."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

from .result import AuditReport, AuditResult


def to_json(report: AuditReport) -> str:
    return json.dumps(report.to_dict(), indent=2)


def _audit_text(audit: AuditResult) -> str:
    summary = audit.summary
    lines: List[str] = [
        "ACCESSIBILITY AUDIT REPORT",
        "===========================",
        f"File: {audit.file_name}",
        f"Date: {audit.timestamp.strftime('%Y-%m-%d %H:%M:%S %Z')}",
        f"Status: {audit.status.upper()}",
        "",
        "SUMMARY",
        "-------",
        f"Total Issues: {summary.total}",
        f"Critical: {summary.critical}",
        f"Major: {summary.major}",
        f"Minor: {summary.minor}",
        f"Enhancement: {summary.enhancement}",
        f"Fixed: {summary.fixed}",
        f"Passed Checks: {audit.passed}",
        f"Estimated Fix Time: {audit.estimated_fix_time}",
        "",
        "ISSUES",
        "------",
    ]
    for issue in audit.issues:
        marker = " (fixed)" if issue.is_fixed else ""
        lines.append(f"[{issue.severity.value.upper()}] {issue.type}{marker}")
        lines.append(f"Line {issue.line_number}: {issue.message}")
        lines.append(f"Recommendation: {issue.recommendation}")
        lines.append(f"WCAG: {issue.wcag_criteria}")
        lines.append("")
    return "\n".join(lines)


def to_text(report: AuditReport) -> str:
    """Render a plain-text report, one section per audited file."""

    return "\n\n".join(_audit_text(audit) for audit in report.audits) + "\n"


def render(report: AuditReport, report_format: str) -> str:
    if report_format == "text":
        return to_text(report)
    return to_json(report)


def write_report(report: AuditReport, report_format: str, output_path: Optional[str] = None) -> str:
    """Render the report and write it to ``output_path`` when one is given."""

    payload = render(report, report_format)
    if output_path:
        output_file = Path(output_path)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(payload, encoding="utf-8")
    return payload
