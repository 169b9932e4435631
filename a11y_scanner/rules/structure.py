"""Detect document structure problems: headings, landmarks and language."""

from __future__ import annotations

import re
from typing import List, Optional

from a11y_scanner.result import Issue
from a11y_scanner.severity import Severity

from . import WCAG_UNDERSTANDING, BaseRule, iter_lines

HEADING_PATTERN = re.compile(r"<h([1-6])[^>]*>", re.IGNORECASE)
INFO_AND_RELATIONSHIPS = "1.3.1 Info and Relationships (Level A)"
INFO_AND_RELATIONSHIPS_LINK = WCAG_UNDERSTANDING + "info-and-relationships.html"
DOCUMENT_SNIPPET = "Document structure"


class HeadingStructureRule(BaseRule):
    """Flag headings that jump more than one level below the previous heading."""

    id = "heading-structure"
    name = "Heading Structure"
    prefix = "HDG"
    issue_type = "Skipped Heading Level"
    severity = Severity.MAJOR
    recommendation = "Ensure heading levels follow a logical order without skipping levels"
    wcag_criteria = INFO_AND_RELATIONSHIPS
    wcag_link = INFO_AND_RELATIONSHIPS_LINK

    def check(self, text: str) -> List[Issue]:
        issues: List[Issue] = []
        last_level: Optional[int] = None
        for line_number, line in iter_lines(text):
            # first heading on the line only; every heading moves the tracker
            match = HEADING_PATTERN.search(line)
            if match is None:
                continue
            level = int(match.group(1))
            if last_level is not None and level > last_level + 1:
                expected = last_level + 1
                issues.append(
                    self._issue(
                        line_number,
                        line.strip(),
                        message=f"Heading level skipped from h{last_level} to h{level}",
                        fix_example=f"<h{expected}>Your heading text</h{expected}>",
                    )
                )
            last_level = level
        return issues


class LandmarkRule(BaseRule):
    """Flag documents without main or navigation landmarks.

    Evaluated once on the whole text; issues are reported on line 1.
    """

    id = "landmarks"
    name = "Landmark Regions"
    prefix = "LMK"
    wcag_criteria = INFO_AND_RELATIONSHIPS
    wcag_link = INFO_AND_RELATIONSHIPS_LINK

    def check(self, text: str) -> List[Issue]:
        issues: List[Issue] = []
        if "<main" not in text and 'role="main"' not in text:
            issues.append(
                self._issue(
                    1,
                    DOCUMENT_SNIPPET,
                    issue_type="Missing Main Landmark",
                    severity=Severity.MAJOR,
                    message="Page is missing a main landmark region",
                    recommendation="Add a <main> element to wrap the primary content",
                    fix_example="<main>\n  {/* Main content here */}\n</main>",
                )
            )
        if "<nav" not in text and 'role="navigation"' not in text:
            issues.append(
                self._issue(
                    1,
                    DOCUMENT_SNIPPET,
                    issue_type="Missing Navigation Landmark",
                    severity=Severity.MINOR,
                    message="Consider adding navigation landmarks for better screen reader navigation",
                    recommendation="Wrap navigation links in a <nav> element",
                    fix_example='<nav aria-label="Main navigation">\n  {/* Navigation links */}\n</nav>',
                )
            )
        return issues


class LangAttributeRule(BaseRule):
    """Flag an ``<html>`` document that never declares its language."""

    id = "lang-attribute"
    name = "Language Attribute"
    prefix = "LANG"
    issue_type = "Missing Language Attribute"
    severity = Severity.MAJOR
    message = "HTML element is missing the lang attribute"
    recommendation = "Add a lang attribute to the html element"
    fix_example = '<html lang="en">'
    wcag_criteria = "3.1.1 Language of Page (Level A)"
    wcag_link = WCAG_UNDERSTANDING + "language-of-page.html"

    def check(self, text: str) -> List[Issue]:
        if "<html" in text and "lang=" not in text:
            return [self._issue(1, "<html>")]
        return []
