from a11y_scanner.rules.keyboard import KeyboardTrapRule, TabIndexRule
from a11y_scanner.rules.visual import ColorContrastRule, MotionRule
from a11y_scanner.severity import Severity


def test_keyboard_trap_requires_negative_tabindex_and_click_handler():
    rule = KeyboardTrapRule()

    issues = rule.check('<div tabindex="-1" onClick={open}>Open</div>')

    assert len(issues) == 1
    assert issues[0].severity is Severity.CRITICAL
    assert rule.check('<div tabindex="-1">Static</div>') == []
    assert rule.check('<div onclick="open()">Open</div>') == []


def test_positive_tab_index_cites_value():
    issues = TabIndexRule().check('<p>a</p>\n<a href="/" tabindex="5">Home</a>')

    assert len(issues) == 1
    assert issues[0].line_number == 2
    assert issues[0].message == "Positive tabindex (5) disrupts natural tab order"
    assert issues[0].severity is Severity.MAJOR


def test_tab_index_zero_negative_and_unquoted():
    rule = TabIndexRule()

    assert rule.check('<div tabindex="0">x</div>') == []
    assert rule.check('<div tabindex="-1">x</div>') == []
    assert len(rule.check("<div TABINDEX=2>x</div>")) == 1


def test_low_contrast_classes_are_major():
    issues = ColorContrastRule().check('<p class="text-gray-300">Muted</p>\n<p class="text-gray-700">Fine</p>')

    assert len(issues) == 1
    assert issues[0].line_number == 1
    assert issues[0].severity is Severity.MAJOR


def test_motion_flags_looping_animation():
    issues = MotionRule().check(".loader { animation: bounce 2s infinite; }")

    assert len(issues) == 1
    assert issues[0].severity is Severity.ENHANCEMENT
    assert issues[0].type == "Uncontrolled Animation"


def test_motion_ignores_guarded_or_finite_animation():
    rule = MotionRule()

    assert rule.check("@media (prefers-reduced-motion: no-preference) { .a { animation: spin 1s infinite; } }") == []
    assert rule.check(".fade { animation: fade-in 300ms ease-out; }") == []
    assert rule.check(".spin { transform: rotate(90deg); }") == []
