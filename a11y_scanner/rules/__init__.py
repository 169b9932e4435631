"""Rule contract shared by every accessibility detector."""

from __future__ import annotations

from typing import Iterator, List, Optional, Protocol, Tuple

from a11y_scanner.result import Issue, new_issue_id
from a11y_scanner.severity import Severity

WCAG_UNDERSTANDING = "https://www.w3.org/WAI/WCAG21/Understanding/"


class Rule(Protocol):
    """Protocol implemented by all rule evaluators."""

    id: str
    name: str

    def check(self, text: str) -> List[Issue]:
        """Return the issues found in ``text``, in discovery order."""


def iter_lines(text: str) -> Iterator[Tuple[int, str]]:
    """Yield ``(line_number, line)`` pairs, 1-based, split on line feeds only."""

    for index, line in enumerate(text.split("\n")):
        yield index + 1, line


class BaseRule:
    """Carry the static guidance every issue of a rule shares.

    Subclasses either implement ``check_line`` (evaluated per line) or
    override ``check`` to look at the whole document.
    """

    id = ""
    name = ""
    prefix = "A11Y"
    issue_type = ""
    severity = Severity.MAJOR
    message = ""
    recommendation = ""
    fix_example = ""
    wcag_criteria = ""
    wcag_link = ""

    def check(self, text: str) -> List[Issue]:
        issues: List[Issue] = []
        for line_number, line in iter_lines(text):
            issues.extend(self.check_line(line, line_number))
        return issues

    def check_line(self, line: str, line_number: int) -> List[Issue]:
        return []

    def _issue(
        self,
        line_number: int,
        code_snippet: str,
        *,
        issue_type: Optional[str] = None,
        severity: Optional[Severity] = None,
        message: Optional[str] = None,
        recommendation: Optional[str] = None,
        fix_example: Optional[str] = None,
    ) -> Issue:
        return Issue(
            id=new_issue_id(self.prefix),
            rule_id=self.id,
            type=issue_type or self.issue_type,
            severity=severity or self.severity,
            message=message or self.message,
            line_number=line_number,
            code_snippet=code_snippet,
            recommendation=recommendation or self.recommendation,
            fix_example=self.fix_example if fix_example is None else fix_example,
            wcag_criteria=self.wcag_criteria,
            wcag_link=self.wcag_link,
        )
