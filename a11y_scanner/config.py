"""Audit configuration loaded from ``.a11y-audit.yaml``."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .engine import RULES
from .utils import read_yaml_file

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = ".a11y-audit.yaml"
DEFAULT_INCLUDE = ("**/*.html", "**/*.htm", "**/*.jsx", "**/*.tsx", "**/*.vue", "**/*.css")
DEFAULT_EXCLUDE = ("node_modules", "dist", "**/*.test.tsx")
DEFAULT_THRESHOLDS = {"critical": 0, "major": 5}
OUTPUT_FORMATS = ("json", "text")
CONFIG_KEYS = ("rules", "include", "exclude", "thresholds", "output")

ERROR = "error"
WARN = "warn"
OFF = "off"
RULE_LEVELS = (ERROR, WARN, OFF)


class ConfigError(ValueError):
    """Raised when the configuration file cannot be used."""


@dataclass
class AuditConfig:
    """Resolved scanner configuration."""

    rules: Dict[str, str] = field(default_factory=lambda: {rule_id: ERROR for rule_id in RULES})
    include: List[str] = field(default_factory=lambda: list(DEFAULT_INCLUDE))
    exclude: List[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDE))
    thresholds: Dict[str, int] = field(default_factory=lambda: dict(DEFAULT_THRESHOLDS))
    output_format: str = "json"
    output_file: Optional[str] = None

    def selected_rules(self) -> List[str]:
        return [rule_id for rule_id in RULES if self.rules.get(rule_id, ERROR) != OFF]

    def gated_rules(self) -> List[str]:
        return [rule_id for rule_id in RULES if self.rules.get(rule_id, ERROR) == ERROR]


def _parse_rules(raw: Any) -> Dict[str, str]:
    levels = {rule_id: ERROR for rule_id in RULES}
    if raw is None:
        return levels
    if not isinstance(raw, dict):
        raise ConfigError("rules: expected a mapping of rule id to error/warn/off")
    for rule_id, level in raw.items():
        if rule_id not in RULES:
            raise ConfigError(f"rules: unknown rule id {rule_id!r}")
        # YAML 1.1 reads bare off/on as booleans
        if level is False:
            level = OFF
        elif level is True:
            level = ERROR
        if level not in RULE_LEVELS:
            raise ConfigError(f"rules.{rule_id}: level must be one of {', '.join(RULE_LEVELS)}")
        levels[rule_id] = level
    return levels


def _parse_patterns(raw: Any, key: str, default: tuple) -> List[str]:
    if raw is None:
        return list(default)
    if isinstance(raw, str):
        return [raw]
    if not isinstance(raw, list) or not all(isinstance(item, str) for item in raw):
        raise ConfigError(f"{key}: expected a list of glob patterns")
    return list(raw)


def _parse_thresholds(raw: Any) -> Dict[str, int]:
    thresholds = dict(DEFAULT_THRESHOLDS)
    if raw is None:
        return thresholds
    if not isinstance(raw, dict):
        raise ConfigError("thresholds: expected a mapping")
    for key, value in raw.items():
        if key not in DEFAULT_THRESHOLDS:
            raise ConfigError(f"thresholds: unknown severity {key!r}")
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ConfigError(f"thresholds.{key}: expected a non-negative integer")
        thresholds[key] = value
    return thresholds


def parse_config(data: Any) -> AuditConfig:
    """Validate a loaded YAML document and build an :class:`AuditConfig`."""

    if data is None:
        return AuditConfig()
    if not isinstance(data, dict):
        raise ConfigError("configuration must be a mapping")
    for key in data:
        if key not in CONFIG_KEYS:
            raise ConfigError(f"unknown configuration key {key!r}")

    output = data.get("output") or {}
    if not isinstance(output, dict):
        raise ConfigError("output: expected a mapping")
    output_format = output.get("format", "json")
    if output_format not in OUTPUT_FORMATS:
        raise ConfigError(f"output.format: must be one of {', '.join(OUTPUT_FORMATS)}")
    output_file = output.get("file")
    if output_file is not None and not isinstance(output_file, str):
        raise ConfigError("output.file: expected a path or null")

    return AuditConfig(
        rules=_parse_rules(data.get("rules")),
        include=_parse_patterns(data.get("include"), "include", DEFAULT_INCLUDE),
        exclude=_parse_patterns(data.get("exclude"), "exclude", DEFAULT_EXCLUDE),
        thresholds=_parse_thresholds(data.get("thresholds")),
        output_format=output_format,
        output_file=output_file,
    )


def load_config(path: Optional[str] = None) -> AuditConfig:
    """Load configuration from ``path``, falling back to defaults when absent."""

    config_path = Path(path or DEFAULT_CONFIG_FILENAME)
    try:
        data = read_yaml_file(config_path)
    except yaml.YAMLError as exc:
        raise ConfigError(f"{config_path}: {exc}") from exc
    if data is None:
        logger.debug("no configuration at %s, using defaults", config_path)
    else:
        logger.info("loaded configuration from %s", config_path)
    return parse_config(data)