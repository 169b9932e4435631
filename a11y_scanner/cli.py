"""Command-line entry point for the accessibility scanner."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

from .config import WARN, AuditConfig, ConfigError, load_config
from .engine import RULES, audit_text, list_rules
from .history import AuditHistory, HistoryError
from .report import write_report
from .result import AuditReport, format_summary_table
from .utils import iter_source_files, read_text_file

logger = logging.getLogger(__name__)

STDIN_NAME = "<stdin>"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class UsageError(ValueError):
    """Raised when the request cannot produce a meaningful scan."""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="a11y-scan",
        description="Lexical accessibility scanner for HTML, JSX and CSS sources",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        help="Files or directories to scan; '-' or nothing reads standard input.",
    )
    parser.add_argument(
        "--config",
        "-c",
        default=None,
        help="Path to the audit configuration (defaults to .a11y-audit.yaml).",
    )
    parser.add_argument(
        "--rule",
        "-r",
        dest="rules",
        action="append",
        default=[],
        help="Rule id to run (repeatable); overrides the configured selection.",
    )
    parser.add_argument(
        "--list-rules",
        action="store_true",
        help="Print the available rules and exit.",
    )
    parser.add_argument(
        "--format",
        choices=["json", "text"],
        default=None,
        help="Report format for file output (defaults to the configured format, json).",
    )
    parser.add_argument(
        "--out",
        "--output",
        dest="output_path",
        type=str,
        default=None,
        help="Path to write the report (e.g., artifacts/a11y-audit.json).",
    )
    parser.add_argument(
        "--history",
        default=None,
        help="JSON file that keeps past audits; new audits are prepended.",
    )
    parser.add_argument(
        "--mark-fixed",
        nargs=2,
        metavar=("AUDIT_ID", "ISSUE_ID"),
        default=None,
        help="Mark an issue of a stored audit as fixed (requires --history).",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log scanner activity to stderr.",
    )
    return parser


def resolve_rules(requested: Sequence[str], config: AuditConfig) -> Tuple[List[str], List[str]]:
    """Return the rules to run and the subset that gates the exit code."""

    if requested:
        unknown = sorted(set(requested) - set(RULES))
        if unknown:
            raise UsageError(f"unknown rule id(s): {', '.join(unknown)}")
        wanted = set(requested)
        selected = [rule_id for rule_id in RULES if rule_id in wanted]
    else:
        selected = config.selected_rules()
    if not selected:
        raise UsageError("no rules selected")
    gated = [rule_id for rule_id in selected if config.rules.get(rule_id) != WARN]
    return selected, gated


def collect_inputs(paths: Sequence[str], config: AuditConfig) -> List[Tuple[str, str]]:
    """Return ``(file_name, text)`` pairs for every input to audit."""

    if not paths or list(paths) == ["-"]:
        return [(STDIN_NAME, sys.stdin.read())]
    missing = [path for path in paths if not Path(path).exists()]
    if missing:
        raise UsageError(f"no such file or directory: {', '.join(missing)}")
    inputs = []
    for path in iter_source_files(paths, include=config.include, exclude=config.exclude):
        inputs.append((str(path), read_text_file(path)))
    return inputs


def run_audit(inputs: Iterable[Tuple[str, str]], rule_ids: Sequence[str]) -> AuditReport:
    report = AuditReport()
    for file_name, text in inputs:
        report.add_audit(audit_text(text, rule_ids, file_name=file_name))
    return report


def write_output(report: AuditReport, output_path: Optional[str], report_format: str) -> None:
    print(format_summary_table(report))

    payload = write_report(report, report_format, output_path)
    if output_path:
        print(f"\nReport written to {output_path}")
    else:
        print(f"\n{report_format.upper()} Report")
        print(payload)


def _print_rules() -> None:
    for rule in list_rules():
        print(f"{rule['id']:<18} {rule['name']}")


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT)

    if args.list_rules:
        _print_rules()
        return 0

    try:
        config = load_config(args.config)
        history = AuditHistory(args.history) if args.history else None

        if args.mark_fixed:
            if history is None:
                raise UsageError("--mark-fixed requires --history")
            audit_id, issue_id = args.mark_fixed
            audit = history.mark_fixed(audit_id, issue_id)
            print(f"Marked {issue_id} as fixed; audit {audit.id} is now {audit.status}")
            return 0

        selected, gated = resolve_rules(args.rules, config)
        inputs = collect_inputs(args.paths, config)
        if not any(text.strip() for _, text in inputs):
            raise UsageError("no input text provided")
        report = run_audit(inputs, selected)
        if history is not None:
            for audit in report.audits:
                history.add(audit)
    except (ConfigError, HistoryError, UsageError) as exc:
        logger.debug("scan aborted", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 3

    report_format = args.format or config.output_format
    write_output(report, args.output_path or config.output_file, report_format)
    return report.exit_code(config.thresholds, gated)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
