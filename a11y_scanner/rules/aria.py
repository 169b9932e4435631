"""Detect controls whose role or accessible name is broken."""

from __future__ import annotations

import re
from typing import List

from a11y_scanner.result import Issue
from a11y_scanner.severity import Severity

from . import WCAG_UNDERSTANDING, BaseRule

NAME_ROLE_VALUE_LINK = WCAG_UNDERSTANDING + "name-role-value.html"
NAME_ROLE_VALUE = "4.1.2 Name, Role, Value (Level A)"

# role attribute -> native element that should replace it
SEMANTIC_ROLES = {
    'role="button"': "<button>Click me</button>",
    'role="link"': '<a href="#">Link text</a>',
}
NATIVE_OPENERS = ("<button", "<a ")
GENERIC_OPENERS = ("<div", "<span")
BUTTON_PATTERN = re.compile(r"<button[^>]*>(.*?)</button>")


class AriaRoleRule(BaseRule):
    """Flag generic elements that imitate buttons or links through ``role``."""

    id = "aria-roles"
    name = "ARIA Roles"
    prefix = "ARIA"
    issue_type = "Incorrect ARIA Role Usage"
    severity = Severity.MAJOR
    recommendation = "Use native HTML elements (<button>, <a>) instead of ARIA roles when possible"
    wcag_criteria = NAME_ROLE_VALUE
    wcag_link = NAME_ROLE_VALUE_LINK

    def check_line(self, line: str, line_number: int) -> List[Issue]:
        if any(opener in line for opener in NATIVE_OPENERS):
            return []
        if not any(opener in line for opener in GENERIC_OPENERS):
            return []
        return [
            self._issue(
                line_number,
                line.strip(),
                message=f"Using {role} on a non-semantic element. Use the native element instead.",
                fix_example=replacement,
            )
            for role, replacement in SEMANTIC_ROLES.items()
            if role in line
        ]


class EmptyButtonRule(BaseRule):
    """Flag single-line ``<button>`` elements with no content.

    Buttons whose body spans several lines are not analyzed.
    """

    id = "empty-buttons"
    name = "Empty Buttons"
    prefix = "BTN"
    issue_type = "Empty Button"
    severity = Severity.CRITICAL
    message = "Button has no accessible name"
    recommendation = "Add text content or aria-label to the button"
    fix_example = '<button aria-label="Close dialog">×</button>'
    wcag_criteria = NAME_ROLE_VALUE
    wcag_link = NAME_ROLE_VALUE_LINK

    def check_line(self, line: str, line_number: int) -> List[Issue]:
        if "<button" not in line or "</button>" not in line:
            return []
        match = BUTTON_PATTERN.search(line)
        if match is None or match.group(1).strip():
            return []
        return [self._issue(line_number, line.strip())]
