"""Persist past audits and track which issues have been fixed."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional

from .result import AuditResult

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_FILENAME = ".a11y-audit-history.json"


class HistoryError(ValueError):
    """Raised when the history file is unreadable or an id is unknown."""


class AuditHistory:
    """JSON-backed list of audits, newest first."""

    def __init__(self, path: str = DEFAULT_HISTORY_FILENAME) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> List[AuditResult]:
        if not self._path.exists():
            return []
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise HistoryError(f"{self._path}: unreadable history ({exc})") from exc
        if not isinstance(data, list):
            raise HistoryError(f"{self._path}: expected a list of audits")
        try:
            return [AuditResult.from_dict(item) for item in data]
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise HistoryError(f"{self._path}: malformed audit entry ({exc})") from exc

    def save(self, audits: List[AuditResult]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps([audit.to_dict() for audit in audits], indent=2)
        self._path.write_text(payload, encoding="utf-8")

    def add(self, audit: AuditResult) -> None:
        audits = self.load()
        audits.insert(0, audit)
        self.save(audits)
        logger.debug("recorded audit %s in %s", audit.id, self._path)

    def get(self, audit_id: str) -> Optional[AuditResult]:
        for audit in self.load():
            if audit.id == audit_id:
                return audit
        return None

    def mark_fixed(self, audit_id: str, issue_id: str) -> AuditResult:
        """Flag one issue of a stored audit as fixed and persist the change."""

        audits = self.load()
        for audit in audits:
            if audit.id != audit_id:
                continue
            if not audit.mark_fixed(issue_id):
                raise HistoryError(f"audit {audit_id} has no issue {issue_id}")
            self.save(audits)
            logger.info("marked issue %s of audit %s as fixed", issue_id, audit_id)
            return audit
        raise HistoryError(f"no audit with id {audit_id}")
