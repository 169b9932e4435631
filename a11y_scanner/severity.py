"""Severity definitions for accessibility issues."""

from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    """Enumerate the supported severity levels for issues."""

    CRITICAL = "critical"
    MAJOR = "major"
    MINOR = "minor"
    ENHANCEMENT = "enhancement"

    @property
    def fix_minutes(self) -> int:
        """Return the estimated remediation effort for one issue."""

        weights = {
            Severity.CRITICAL: 15,
            Severity.MAJOR: 10,
            Severity.MINOR: 5,
            Severity.ENHANCEMENT: 3,
        }
        return weights[self]

    @property
    def rank(self) -> int:
        """Return an integer ranking, lower is more urgent."""

        ordering = {
            Severity.CRITICAL: 0,
            Severity.MAJOR: 1,
            Severity.MINOR: 2,
            Severity.ENHANCEMENT: 3,
        }
        return ordering[self]
