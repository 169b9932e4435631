"""Rule catalog and scan orchestration."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping

from .result import AuditResult, Issue
from .rules import Rule
from .rules.aria import AriaRoleRule, EmptyButtonRule
from .rules.forms import FormLabelRule
from .rules.images import AltTextRule
from .rules.keyboard import KeyboardTrapRule, TabIndexRule
from .rules.structure import HeadingStructureRule, LandmarkRule, LangAttributeRule
from .rules.visual import ColorContrastRule, MotionRule

logger = logging.getLogger(__name__)


def load_rules() -> List[Rule]:
    return [
        AltTextRule(),
        AriaRoleRule(),
        HeadingStructureRule(),
        FormLabelRule(),
        KeyboardTrapRule(),
        ColorContrastRule(),
        LandmarkRule(),
        EmptyButtonRule(),
        LangAttributeRule(),
        MotionRule(),
        TabIndexRule(),
    ]


def _build_catalog(rules: Iterable[Rule]) -> Mapping[str, Rule]:
    catalog: Dict[str, Rule] = {}
    for rule in rules:
        if rule.id in catalog:
            raise ValueError(f"Duplicate rule id: {rule.id}")
        catalog[rule.id] = rule
    return MappingProxyType(catalog)


RULES: Mapping[str, Rule] = _build_catalog(load_rules())


def list_rules() -> List[Dict[str, str]]:
    """Return ``{id, name}`` for every registered rule, in registration order."""

    return [{"id": rule.id, "name": rule.name} for rule in RULES.values()]


def known_rule_ids(selected_ids: Iterable[str]) -> List[str]:
    """Return the selected ids that exist, deduplicated, in registration order."""

    wanted = set(selected_ids)
    return [rule_id for rule_id in RULES if rule_id in wanted]


def scan(text: str, selected_ids: Iterable[str]) -> List[Issue]:
    """Run the selected rules over ``text`` and concatenate their issues.

    Rules run in registration order regardless of the order of
    ``selected_ids``; unknown ids are ignored and an empty selection yields
    no issues.
    """

    issues: List[Issue] = []
    for rule_id in known_rule_ids(selected_ids):
        found = RULES[rule_id].check(text)
        logger.debug("rule %s reported %d issue(s)", rule_id, len(found))
        issues.extend(found)
    return issues


def audit_text(text: str, selected_ids: Iterable[str], file_name: str = "untitled.html") -> AuditResult:
    """Scan ``text`` and wrap the issues in an :class:`AuditResult`."""

    rules = known_rule_ids(selected_ids)
    issues = scan(text, rules)
    audit = AuditResult(file_name=file_name, issues=issues, rules=rules)
    logger.info("audited %s: %d issue(s), status %s", file_name, len(issues), audit.status)
    return audit
