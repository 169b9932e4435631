import pytest

from a11y_scanner.config import ConfigError, load_config, parse_config


def test_missing_file_gives_defaults(tmp_path):
    config = load_config(str(tmp_path / "absent.yaml"))

    assert len(config.selected_rules()) == 11
    assert config.gated_rules() == config.selected_rules()
    assert config.thresholds == {"critical": 0, "major": 5}
    assert config.output_format == "json"
    assert "node_modules" in config.exclude


def test_rule_levels_select_and_gate(tmp_path):
    path = tmp_path / ".a11y-audit.yaml"
    path.write_text(
        """
rules:
  heading-structure: warn
  color-contrast: off
  motion-warnings: "off"
thresholds:
  major: 2
output:
  format: text
  file: reports/a11y.txt
        """.strip(),
        encoding="utf-8",
    )

    config = load_config(str(path))

    assert "color-contrast" not in config.selected_rules()
    assert "motion-warnings" not in config.selected_rules()
    assert "heading-structure" in config.selected_rules()
    assert "heading-structure" not in config.gated_rules()
    assert config.thresholds == {"critical": 0, "major": 2}
    assert config.output_format == "text"
    assert config.output_file == "reports/a11y.txt"


@pytest.mark.parametrize(
    "data, key",
    [
        (["alt-text"], "mapping"),
        ({"rules": {"no-such-rule": "error"}}, "no-such-rule"),
        ({"rules": {"alt-text": "fatal"}}, "rules.alt-text"),
        ({"thresholds": {"critical": -1}}, "thresholds.critical"),
        ({"thresholds": {"minor": 1}}, "minor"),
        ({"include": [1, 2]}, "include"),
        ({"output": {"format": "pdf"}}, "output.format"),
        ({"output": {"file": 5}}, "output.file"),
        ({"output": {"file": ["a"]}}, "output.file"),
        ({"threshold": {"major": 2}}, "threshold"),
    ],
)
def test_invalid_configuration_is_rejected(data, key):
    with pytest.raises(ConfigError) as excinfo:
        parse_config(data)

    assert key in str(excinfo.value)


def test_malformed_yaml_raises_config_error(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("rules: [unclosed", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(str(path))


def test_cli_rejects_non_path_output_file(tmp_path, capsys):
    from a11y_scanner import cli

    config_path = tmp_path / "audit.yaml"
    config_path.write_text("output:\n  file: 5\n", encoding="utf-8")
    page = tmp_path / "page.html"
    page.write_text('<img src="x.png">\n', encoding="utf-8")

    assert cli.main([str(page), "--config", str(config_path)]) == 3
    assert "output.file: expected a path or null" in capsys.readouterr().err
