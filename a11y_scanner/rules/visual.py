"""Detect visual presentation risks: contrast and motion."""

from __future__ import annotations

from typing import List

from a11y_scanner.result import Issue
from a11y_scanner.severity import Severity

from . import WCAG_UNDERSTANDING, BaseRule

LOW_CONTRAST_CLASSES = ("text-gray-400", "text-gray-300")
ANIMATION_TRIGGERS = ("infinite", "spin", "bounce")


class ColorContrastRule(BaseRule):
    """Flag light gray text utility classes."""

    id = "color-contrast"
    name = "Color Contrast"
    prefix = "CLR"
    issue_type = "Potential Low Contrast"
    severity = Severity.MAJOR
    message = "Light gray text may have insufficient contrast"
    recommendation = "Ensure text has a contrast ratio of at least 4.5:1 for normal text"
    fix_example = "Use text-gray-600 or darker for better contrast"
    wcag_criteria = "1.4.3 Contrast (Minimum) (Level AA)"
    wcag_link = WCAG_UNDERSTANDING + "contrast-minimum.html"

    def check_line(self, line: str, line_number: int) -> List[Issue]:
        if any(token in line for token in LOW_CONTRAST_CLASSES):
            return [self._issue(line_number, line.strip())]
        return []


class MotionRule(BaseRule):
    """Flag looping or bouncing animations not guarded by ``prefers-reduced-motion``."""

    id = "motion-warnings"
    name = "Motion/Animation Warnings"
    prefix = "MOT"
    issue_type = "Uncontrolled Animation"
    severity = Severity.ENHANCEMENT
    message = "Animation may cause issues for users with vestibular disorders"
    recommendation = "Wrap animations in a prefers-reduced-motion media query"
    fix_example = "@media (prefers-reduced-motion: no-preference) {\n  .animate { animation: spin 1s infinite; }\n}"
    wcag_criteria = "2.3.3 Animation from Interactions (Level AAA)"
    wcag_link = WCAG_UNDERSTANDING + "animation-from-interactions.html"

    def check_line(self, line: str, line_number: int) -> List[Issue]:
        if "animation" not in line or "prefers-reduced-motion" in line:
            return []
        if not any(trigger in line for trigger in ANIMATION_TRIGGERS):
            return []
        return [self._issue(line_number, line.strip())]
