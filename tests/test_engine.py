import pytest

from a11y_scanner import engine
from a11y_scanner.engine import audit_text, list_rules, scan
from a11y_scanner.severity import Severity

ALL_RULES = [rule["id"] for rule in list_rules()]

SAMPLE = "\n".join(
    [
        "<html>",
        "<h1>Title</h1>",
        '<img src="x.png">',
        "<h3>Sub</h3>",
        "<button></button>",
        '<a href="/" tabindex="2">Home</a>',
    ]
)


def fingerprint(issues):
    return [
        (issue.type, issue.severity, issue.line_number, issue.message, issue.code_snippet)
        for issue in issues
    ]


def test_list_rules_in_registration_order():
    rules = list_rules()

    assert [rule["id"] for rule in rules] == [
        "alt-text",
        "aria-roles",
        "heading-structure",
        "form-labels",
        "keyboard-traps",
        "color-contrast",
        "landmarks",
        "empty-buttons",
        "lang-attribute",
        "motion-warnings",
        "tab-index",
    ]
    assert rules[0] == {"id": "alt-text", "name": "Alt Text Issues"}
    assert len({rule["id"] for rule in rules}) == len(rules)


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        engine.RULES["custom"] = engine.RULES["alt-text"]


def test_missing_alt_text_scenario():
    issues = scan('<img src="x.png">', {"alt-text"})

    assert len(issues) == 1
    assert issues[0].severity is Severity.CRITICAL
    assert issues[0].line_number == 1
    assert issues[0].type == "Missing Alt Text"
    assert issues[0].rule_id == "alt-text"


def test_empty_button_scenario():
    issues = scan("<button></button>", {"empty-buttons"})

    assert [(issue.type, issue.severity, issue.line_number) for issue in issues] == [
        ("Empty Button", Severity.CRITICAL, 1)
    ]


def test_heading_scenario():
    issues = scan("<h1>A</h1>\n<h3>B</h3>", {"heading-structure"})

    assert len(issues) == 1
    assert issues[0].line_number == 2
    assert "h1" in issues[0].message and "h3" in issues[0].message


def test_document_rules_without_html_tag():
    issues = scan("<div>plain fragment</div>", {"landmarks", "lang-attribute"})

    assert [(issue.type, issue.severity, issue.line_number) for issue in issues] == [
        ("Missing Main Landmark", Severity.MAJOR, 1),
        ("Missing Navigation Landmark", Severity.MINOR, 1),
    ]


def test_empty_selection_yields_nothing():
    assert scan(SAMPLE, set()) == []


def test_unknown_and_duplicate_ids_are_ignored():
    issues = scan('<img src="x.png">', ["alt-text", "alt-text", "no-such-rule"])

    assert len(issues) == 1


def test_empty_text_only_document_rules_fire():
    assert scan("", [rule_id for rule_id in ALL_RULES if rule_id != "landmarks"]) == []
    assert len(scan("", ALL_RULES)) == 2


def test_results_follow_registration_order_not_selection_order():
    issues = scan(SAMPLE, ["tab-index", "empty-buttons", "alt-text"])

    assert [issue.rule_id for issue in issues] == ["alt-text", "empty-buttons", "tab-index"]


def test_scan_is_deterministic():
    first = scan(SAMPLE, ALL_RULES)
    second = scan(SAMPLE, ALL_RULES)

    assert fingerprint(first) == fingerprint(second)
    assert len({issue.id for issue in first}) == len(first)


def test_selection_monotonicity():
    narrow = scan(SAMPLE, {"alt-text", "tab-index"})
    wide = scan(SAMPLE, ALL_RULES)

    kept = [issue for issue in wide if issue.rule_id in {"alt-text", "tab-index"}]
    assert fingerprint(narrow) == fingerprint(kept)


def test_scan_does_not_raise_on_arbitrary_text():
    text = "\x00<<<img\r\n</button><h9>" + "{" * 500 + "\n\n"

    issues = scan(text, ALL_RULES)

    assert all(issue.line_number >= 1 for issue in issues)


def test_audit_text_wraps_issues():
    audit = audit_text(SAMPLE, ["alt-text", "form-labels", "unknown"], file_name="page.html")

    assert audit.file_name == "page.html"
    assert audit.rules == ["alt-text", "form-labels"]
    assert len(audit.issues) == 1
    assert audit.passed == 1
    assert audit.status == "failed"


def test_carriage_returns_stay_in_lines_and_leave_snippets_trimmed():
    text = '<img src="x">\r\n<button></button>\r\n<h1>A</h1>\r\n<h3>B</h3>\r\n'

    issues = scan(text, ["alt-text", "heading-structure", "empty-buttons"])

    assert [(issue.rule_id, issue.line_number, issue.code_snippet) for issue in issues] == [
        ("alt-text", 1, '<img src="x">'),
        ("heading-structure", 4, "<h3>B</h3>"),
        ("empty-buttons", 2, "<button></button>"),
    ]
