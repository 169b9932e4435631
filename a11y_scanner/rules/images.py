"""Detect images without a text alternative."""

from __future__ import annotations

import re
from typing import List

from a11y_scanner.result import Issue
from a11y_scanner.severity import Severity

from . import WCAG_UNDERSTANDING, BaseRule

IMG_TAG_PATTERN = re.compile(r"<img[^>]*>", re.IGNORECASE)
IMG_OPEN_PATTERN = re.compile(r"<img", re.IGNORECASE)
EMPTY_ALT_VALUES = ('alt=""', "alt=''")


class AltTextRule(BaseRule):
    """Flag every ``<img>`` tag with a missing or empty ``alt`` attribute."""

    id = "alt-text"
    name = "Alt Text Issues"
    prefix = "ALT"
    issue_type = "Missing Alt Text"
    severity = Severity.CRITICAL
    message = "Image is missing alt attribute or has empty alt text"
    recommendation = "Add descriptive alt text that conveys the purpose of the image"
    wcag_criteria = "1.1.1 Non-text Content (Level A)"
    wcag_link = WCAG_UNDERSTANDING + "non-text-content.html"

    def check_line(self, line: str, line_number: int) -> List[Issue]:
        issues: List[Issue] = []
        for tag in IMG_TAG_PATTERN.findall(line):
            if "alt=" in tag and not any(empty in tag for empty in EMPTY_ALT_VALUES):
                continue
            issues.append(
                self._issue(
                    line_number,
                    tag,
                    fix_example=IMG_OPEN_PATTERN.sub('<img alt="Descriptive text here"', tag, count=1),
                )
            )
        return issues
