"""Core result data structures for the scanner."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, asdict
from datetime import datetime, timezone
from typing import Any, Collection, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .severity import Severity

SEVERITY_ORDER: Sequence[Severity] = (
    Severity.CRITICAL,
    Severity.MAJOR,
    Severity.MINOR,
    Severity.ENHANCEMENT,
)

PASSED = "passed"
FAILED = "failed"

_ISSUE_KEYS = (
    ("id", "id"),
    ("rule_id", "ruleId"),
    ("type", "type"),
    ("severity", "severity"),
    ("message", "message"),
    ("line_number", "lineNumber"),
    ("code_snippet", "codeSnippet"),
    ("recommendation", "recommendation"),
    ("fix_example", "fixExample"),
    ("wcag_criteria", "wcagCriteria"),
    ("wcag_link", "wcagLink"),
    ("is_fixed", "isFixed"),
)


def new_issue_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:8]}"


@dataclass
class Issue:
    """Capture a single accessibility finding.

    Everything except ``is_fixed`` is set once by the rule that produced the
    issue. ``is_fixed`` belongs to whoever tracks remediation (see
    :mod:`a11y_scanner.history`).
    """

    id: str
    rule_id: str
    type: str
    severity: Severity
    message: str
    line_number: int
    code_snippet: str
    recommendation: str
    fix_example: str
    wcag_criteria: str
    wcag_link: str
    is_fixed: bool = False

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["severity"] = self.severity.value
        return {key: data[attr] for attr, key in _ISSUE_KEYS}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Issue":
        values = {attr: data.get(key) for attr, key in _ISSUE_KEYS}
        values["severity"] = Severity(values["severity"])
        values["line_number"] = int(values["line_number"] or 1)
        values["is_fixed"] = bool(values["is_fixed"])
        values["rule_id"] = values["rule_id"] or ""
        return cls(**values)


def estimate_fix_time(issues: Iterable[Issue]) -> str:
    """Return a remediation estimate label for the unfixed issues."""

    total_minutes = sum(issue.severity.fix_minutes for issue in issues if not issue.is_fixed)
    if total_minutes < 60:
        return f"{total_minutes} minutes"
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours}h {minutes}m"


def classify(issues: Iterable[Issue]) -> str:
    """Return ``failed`` when any unfixed critical issue remains, else ``passed``."""

    for issue in issues:
        if issue.severity is Severity.CRITICAL and not issue.is_fixed:
            return FAILED
    return PASSED


@dataclass
class Summary:
    """Aggregate unfixed issue counts by severity."""

    critical: int = 0
    major: int = 0
    minor: int = 0
    enhancement: int = 0
    fixed: int = 0

    @classmethod
    def from_issues(cls, issues: Iterable[Issue]) -> "Summary":
        summary = cls()
        for issue in issues:
            summary.increment(issue)
        return summary

    def increment(self, issue: Issue) -> None:
        if issue.is_fixed:
            self.fixed += 1
            return
        attr = issue.severity.value
        setattr(self, attr, getattr(self, attr) + 1)

    def merge(self, other: "Summary") -> "Summary":
        return Summary(**{key: value + getattr(other, key) for key, value in asdict(self).items()})

    def to_dict(self) -> Dict[str, int]:
        data = asdict(self)
        data["total"] = self.total
        return data

    def as_rows(self) -> List[Tuple[str, int]]:
        """Return severity/count pairs ordered for reporting."""

        return [(severity.value, getattr(self, severity.value)) for severity in SEVERITY_ORDER]

    @property
    def total(self) -> int:
        return sum(getattr(self, severity.value) for severity in SEVERITY_ORDER)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class AuditResult:
    """Bundle the issues found in one scanned text."""

    file_name: str = "untitled.html"
    issues: List[Issue] = field(default_factory=list)
    rules: List[str] = field(default_factory=list)
    timestamp: datetime = field(default_factory=_utcnow)
    id: str = field(default_factory=lambda: uuid.uuid4().hex[:9])

    @property
    def summary(self) -> Summary:
        return Summary.from_issues(self.issues)

    @property
    def status(self) -> str:
        return classify(self.issues)

    @property
    def passed(self) -> int:
        """Count the selected rules that reported nothing."""

        failing = {issue.rule_id for issue in self.issues}
        return sum(1 for rule_id in self.rules if rule_id not in failing)

    @property
    def estimated_fix_time(self) -> str:
        return estimate_fix_time(self.issues)

    def find_issue(self, issue_id: str) -> Optional[Issue]:
        for issue in self.issues:
            if issue.id == issue_id:
                return issue
        return None

    def mark_fixed(self, issue_id: str) -> bool:
        issue = self.find_issue(issue_id)
        if issue is None:
            return False
        issue.is_fixed = True
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "fileName": self.file_name,
            "timestamp": self.timestamp.isoformat(),
            "rules": list(self.rules),
            "issues": [issue.to_dict() for issue in self.issues],
            "passed": self.passed,
            "status": self.status,
            "summary": self.summary.to_dict(),
            "estimatedFixTime": self.estimated_fix_time,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AuditResult":
        timestamp = data.get("timestamp")
        return cls(
            id=str(data["id"]),
            file_name=str(data.get("fileName", "untitled.html")),
            issues=[Issue.from_dict(item) for item in data.get("issues", [])],
            rules=[str(rule_id) for rule_id in data.get("rules", [])],
            timestamp=datetime.fromisoformat(timestamp) if timestamp else _utcnow(),
        )


@dataclass
class AuditReport:
    """Bundle every audit produced by one scanner run."""

    audits: List[AuditResult] = field(default_factory=list)

    @property
    def issues(self) -> List[Issue]:
        return [issue for audit in self.audits for issue in audit.issues]

    @property
    def summary(self) -> Summary:
        total = Summary()
        for audit in self.audits:
            total = total.merge(audit.summary)
        return total

    @property
    def status(self) -> str:
        return classify(self.issues)

    def add_audit(self, audit: AuditResult) -> None:
        self.audits.append(audit)

    def to_dict(self) -> Dict[str, object]:
        return {
            "summary": self.summary.to_dict(),
            "status": self.status,
            "estimatedFixTime": estimate_fix_time(self.issues),
            "audits": [audit.to_dict() for audit in self.audits],
        }

    def exit_code(
        self,
        thresholds: Optional[Mapping[str, int]] = None,
        gated_rules: Optional[Collection[str]] = None,
    ) -> int:
        """Return 2 for too many criticals, 1 for too many majors, else 0.

        Only unfixed issues from ``gated_rules`` count; ``None`` gates every rule.
        """

        limits = {"critical": 0, "major": 0}
        limits.update(thresholds or {})
        gated = [
            issue
            for issue in self.issues
            if gated_rules is None or issue.rule_id in gated_rules
        ]
        summary = Summary.from_issues(gated)
        if summary.critical > limits["critical"]:
            return 2
        if summary.major > limits["major"]:
            return 1
        return 0

    def top_issues(self, limit: int = 5) -> List[Tuple[AuditResult, Issue]]:
        """Return unfixed issues ordered by severity ranking."""

        pending = [
            (audit, issue)
            for audit in self.audits
            for issue in audit.issues
            if not issue.is_fixed
        ]
        ordered = sorted(pending, key=lambda pair: (pair[1].severity.rank, pair[0].file_name, pair[1].line_number))
        return ordered[:limit]


def format_summary_table(report: AuditReport, max_issues: int = 5) -> str:
    """Create a human-readable summary table for console output."""

    summary = report.summary
    lines: List[str] = []
    lines.append("Accessibility Audit Summary")
    lines.append("=" * 40)
    header = f"{'Severity':<12} | {'Count':>5}"
    lines.append(header)
    lines.append("-" * len(header))
    for severity, count in summary.as_rows():
        lines.append(f"{severity:<12} | {count:>5}")
    lines.append("-" * len(header))
    lines.append(f"Status    : {report.status.upper()}")
    lines.append(f"Files     : {len(report.audits)}")
    lines.append(f"Issues    : {summary.total} ({summary.fixed} fixed)")
    lines.append(f"Fix time  : {estimate_fix_time(report.issues)}")

    top = report.top_issues(max_issues)
    if top:
        lines.append("")
        lines.append("Top Issues")
        lines.append("-" * 40)
        for audit, issue in top:
            lines.append(f"[{issue.severity.value.upper()}] {issue.id} {issue.type} ({issue.rule_id})")
            lines.append(f"  Location: {audit.file_name}:{issue.line_number}")
    return "\n".join(lines)
