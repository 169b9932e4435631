import json

import pytest

from a11y_scanner.engine import audit_text
from a11y_scanner.history import AuditHistory, HistoryError


def test_history_prepends_and_reloads(tmp_path):
    history = AuditHistory(str(tmp_path / "history.json"))
    first = audit_text('<img src="a.png">', ["alt-text"], file_name="first.html")
    second = audit_text("<button></button>", ["empty-buttons"], file_name="second.html")

    history.add(first)
    history.add(second)

    audits = history.load()
    assert [audit.file_name for audit in audits] == ["second.html", "first.html"]
    assert history.get(first.id).issues[0].type == "Missing Alt Text"
    assert history.get("unknown") is None


def test_mark_fixed_persists_and_flips_status(tmp_path):
    history = AuditHistory(str(tmp_path / "history.json"))
    audit = audit_text('<img src="a.png">', ["alt-text"])
    history.add(audit)

    updated = history.mark_fixed(audit.id, audit.issues[0].id)

    assert updated.status == "passed"
    stored = history.get(audit.id)
    assert stored.issues[0].is_fixed is True
    assert stored.to_dict()["estimatedFixTime"] == "0 minutes"


def test_mark_fixed_unknown_ids(tmp_path):
    history = AuditHistory(str(tmp_path / "history.json"))
    audit = audit_text('<img src="a.png">', ["alt-text"])
    history.add(audit)

    with pytest.raises(HistoryError):
        history.mark_fixed("nope", audit.issues[0].id)
    with pytest.raises(HistoryError):
        history.mark_fixed(audit.id, "nope")


def test_missing_history_is_empty_and_corrupt_history_raises(tmp_path):
    path = tmp_path / "history.json"
    history = AuditHistory(str(path))

    assert history.load() == []

    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(HistoryError):
        history.load()

    path.write_text(json.dumps({"audits": []}), encoding="utf-8")
    with pytest.raises(HistoryError):
        history.load()


def test_undecodable_or_malformed_entries_raise_history_error(tmp_path):
    path = tmp_path / "history.json"
    history = AuditHistory(str(path))

    path.write_bytes(b"\xff\xfe\x00not utf-8")
    with pytest.raises(HistoryError):
        history.load()

    path.write_text(json.dumps([{"id": "abc", "issues": ["not-a-mapping"]}]), encoding="utf-8")
    with pytest.raises(HistoryError):
        history.load()

    path.write_text(json.dumps(["not-a-mapping"]), encoding="utf-8")
    with pytest.raises(HistoryError):
        history.load()
