"""Command-line interface for scoring passwords.

Provides subcommands for checking passwords from arguments or stdin
and for running the reference harness against the scoring rules.
"""

import argparse
import json
import sys
from dataclasses import asdict
from typing import TextIO

from src.strength.evaluator import StrengthReport, evaluate
from src.strength.harness import DEFAULT_TOLERANCE, HarnessSummary, run_harness
from src.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


def _read_passwords(stream: TextIO) -> list[str]:
    """Read one password per line, dropping the trailing newline.

    Args:
        stream: Text stream to read from.

    Returns:
        Passwords in input order.
    """
    return [line.rstrip("\r\n") for line in stream]


def check_passwords(passwords: list[str]) -> list[StrengthReport]:
    """Score every password in order."""
    reports = [evaluate(p) for p in passwords]
    logger.debug("Checked %d passwords", len(reports))
    return reports


def _format_report(index: int, report: StrengthReport) -> str:
    """Render a report as human-readable text.

    The password itself is never echoed.
    """
    label = report.label or "(empty)"
    lines = [f"[{index}] {label} ({report.score}/100)"]
    lines.extend(f"    - {s}" for s in report.suggestions)
    return "\n".join(lines)


def _print_reports(reports: list[StrengthReport], as_json: bool) -> None:
    """Print reports to stdout as text or JSON.

    Args:
        reports: Reports to print.
        as_json: Whether to emit a JSON array instead of text.
    """
    if as_json:
        print(json.dumps([asdict(r) for r in reports], indent=2))
        return
    for i, report in enumerate(reports, 1):
        print(_format_report(i, report))


def _print_summary(summary: HarnessSummary) -> None:
    """Print per-case harness results and totals to stdout.

    Args:
        summary: Harness outcomes to print.
    """
    print("Password Strength Reference Cases\n")
    for i, outcome in enumerate(summary.outcomes, 1):
        case = outcome.case
        report = outcome.report
        status = "PASS" if outcome.passed else "FAIL"
        print(f"{status} {i}: {case.description}")
        print(f'   Password: "{case.password}" -> {report.label} ({report.score})')
        if not outcome.passed:
            print(f"   Expected: {case.expected_label} (~{case.expected_score})")
        if report.suggestions:
            print(f"   Suggestions: {', '.join(report.suggestions[:3])}")

    print(f"\n{'=' * 50}")
    print(f"Results: {summary.passed} passed, {summary.failed} failed")
    print(f"{'=' * 50}")


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and dispatch to the appropriate command.

    Args:
        argv: Command-line arguments (defaults to sys.argv).
    """
    parser = argparse.ArgumentParser(
        description="Password Strength Checker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    check_parser = subparsers.add_parser("check", help="Score one or more passwords")
    check_parser.add_argument(
        "passwords",
        nargs="*",
        help="Passwords to score (default: one per line from stdin)",
    )
    check_parser.add_argument(
        "--json", action="store_true", dest="as_json", help="Emit JSON output"
    )

    selftest_parser = subparsers.add_parser(
        "selftest", help="Run the reference password cases"
    )
    selftest_parser.add_argument(
        "--tolerance",
        type=int,
        default=DEFAULT_TOLERANCE,
        help=f"Allowed score difference per case (default: {DEFAULT_TOLERANCE})",
    )

    args = parser.parse_args(argv)

    setup_logging(stream=sys.stderr)

    if args.command == "check":
        passwords = args.passwords or _read_passwords(sys.stdin)
        if not passwords:
            print("Error: no passwords given", file=sys.stderr)
            sys.exit(1)
        _print_reports(check_passwords(passwords), args.as_json)
    elif args.command == "selftest":
        if args.tolerance < 0:
            print("Error: tolerance must be non-negative", file=sys.stderr)
            sys.exit(1)
        summary = run_harness(tolerance=args.tolerance)
        _print_summary(summary)
        if not summary.all_passed:
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(0)


if __name__ == "__main__":
    main()
