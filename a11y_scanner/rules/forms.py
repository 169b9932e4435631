"""Detect form inputs without an accessible label."""

from __future__ import annotations

import re
from typing import List

from a11y_scanner.result import Issue
from a11y_scanner.severity import Severity

from . import WCAG_UNDERSTANDING, BaseRule

INPUT_TAG_PATTERN = re.compile(r"<input[^>]*>", re.IGNORECASE)
LABEL_ATTRIBUTES = ("aria-label=", "aria-labelledby=")
UNLABELLED_TYPES = ('type="hidden"', 'type="submit"')


class FormLabelRule(BaseRule):
    """Flag ``<input>`` tags that carry no ARIA label.

    A matching ``<label for=...>`` elsewhere in the document is not looked up,
    so an ``id`` on its own does not silence the issue.
    """

    id = "form-labels"
    name = "Form Labels"
    prefix = "FORM"
    issue_type = "Missing Form Label"
    severity = Severity.CRITICAL
    message = "Form input is missing an associated label"
    recommendation = "Add a <label> element with a \"for\" attribute matching the input's id, or use aria-label"
    fix_example = '<label for="inputId">Label text</label>\n<input id="inputId" type="text" />'
    wcag_criteria = "1.3.1 Info and Relationships (Level A)"
    wcag_link = WCAG_UNDERSTANDING + "info-and-relationships.html"

    def check_line(self, line: str, line_number: int) -> List[Issue]:
        issues: List[Issue] = []
        for tag in INPUT_TAG_PATTERN.findall(line):
            if any(attr in tag for attr in LABEL_ATTRIBUTES):
                continue
            if any(input_type in tag for input_type in UNLABELLED_TYPES):
                continue
            issues.append(self._issue(line_number, tag))
        return issues
