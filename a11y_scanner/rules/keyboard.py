"""Detect focus and keyboard navigation problems."""

from __future__ import annotations

import re
from typing import List

from a11y_scanner.result import Issue
from a11y_scanner.severity import Severity

from . import WCAG_UNDERSTANDING, BaseRule

CLICK_HANDLERS = ("onclick", "onClick")
TABINDEX_PATTERN = re.compile(r"tabindex=[\"']?(\d+)[\"']?", re.IGNORECASE)


class KeyboardTrapRule(BaseRule):
    """Flag clickable elements removed from the tab order."""

    id = "keyboard-traps"
    name = "Keyboard Traps"
    prefix = "KBD"
    issue_type = "Potential Keyboard Trap"
    severity = Severity.CRITICAL
    message = 'Interactive element with tabindex="-1" may not be keyboard accessible'
    recommendation = 'Remove tabindex="-1" or ensure keyboard access through other means'
    fix_example = "<button onClick={handleClick}>Accessible button</button>"
    wcag_criteria = "2.1.2 No Keyboard Trap (Level A)"
    wcag_link = WCAG_UNDERSTANDING + "no-keyboard-trap.html"

    def check_line(self, line: str, line_number: int) -> List[Issue]:
        if 'tabindex="-1"' in line and any(handler in line for handler in CLICK_HANDLERS):
            return [self._issue(line_number, line.strip())]
        return []


class TabIndexRule(BaseRule):
    """Flag positive ``tabindex`` values."""

    id = "tab-index"
    name = "Tab Index Issues"
    prefix = "TAB"
    issue_type = "Positive Tab Index"
    severity = Severity.MAJOR
    recommendation = 'Use tabindex="0" or remove tabindex and rely on DOM order'
    fix_example = '<button tabindex="0">Properly ordered button</button>'
    wcag_criteria = "2.4.3 Focus Order (Level A)"
    wcag_link = WCAG_UNDERSTANDING + "focus-order.html"

    def check_line(self, line: str, line_number: int) -> List[Issue]:
        match = TABINDEX_PATTERN.search(line)
        if match is None or int(match.group(1)) <= 0:
            return []
        value = match.group(1)
        return [
            self._issue(
                line_number,
                line.strip(),
                message=f"Positive tabindex ({value}) disrupts natural tab order",
            )
        ]
