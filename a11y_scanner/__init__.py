"""Lexical accessibility scanner for markup and stylesheet sources."""

from importlib.metadata import version, PackageNotFoundError

from .engine import audit_text, list_rules, scan
from .result import classify, estimate_fix_time

try:
    __version__ = version("a11y-audit-scanner")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.1.0-dev"

__all__ = [
    "__version__",
    "audit_text",
    "classify",
    "estimate_fix_time",
    "list_rules",
    "scan",
]
