"""CLI entry point — ``stylechecker check`` and ``stylechecker tokens``."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from stylechecker import __version__
from stylechecker.analysis.source import SourceFile, load_source
from stylechecker.analysis.tokens import iter_tokens
from stylechecker.config import Settings
from stylechecker.constants import BANNER_TITLE, OutputFormat
from stylechecker.errors import SourceFileError
from stylechecker.logging_config import set_level, setup_logging
from stylechecker.rules.catalog import CheckOptions


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"stylechecker {__version__}")
        return 0

    settings = Settings()
    setup_logging(settings.log_level)
    if getattr(args, "verbose", False):
        set_level("DEBUG")

    if args.command == "check":
        return _run_check(args, settings)
    if args.command == "tokens":
        return _run_tokens(args)
    parser.print_help()
    return 0


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="stylechecker",
        description=(
            "Check a C++ source file against the house style "
            "(header, indentation, naming, comments, length)."
        ),
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit",
    )

    sub = parser.add_subparsers(dest="command")

    check = sub.add_parser(
        "check",
        help="Check one source file",
    )
    check.add_argument(
        "file",
        type=str,
        help="Path to the source file",
    )
    check.add_argument(
        "--no-function-length",
        "-f",
        action="store_true",
        help="Suppress the function length check",
    )
    check.add_argument(
        "--no-lead-comments",
        "-c",
        action="store_true",
        help="Suppress the function lead-in comment check",
    )
    check.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.TEXT.value,
        help="Report format (default: text)",
    )
    check.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log pipeline events to stderr",
    )

    tokens = sub.add_parser(
        "tokens",
        help="Print the tokens of every line (debugging aid)",
    )
    tokens.add_argument(
        "file",
        type=str,
        help="Path to the source file",
    )

    return parser


def _load(path_arg: str) -> SourceFile | None:
    try:
        return load_source(Path(path_arg))
    except SourceFileError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None


def _run_check(args: argparse.Namespace, settings: Settings) -> int:
    """Execute the check command."""
    from stylechecker.export import export_report
    from stylechecker.services.check_service import check_source

    source = _load(args.file)
    if source is None:
        return 1

    options = CheckOptions(
        check_function_length=not args.no_function_length,
        check_lead_comments=not args.no_lead_comments,
    )
    report = check_source(source, settings, options)

    if args.format == OutputFormat.TEXT:
        print(BANNER_TITLE)
        print("-" * len(BANNER_TITLE))
    print(
        export_report(report, args.format, settings.max_shown_lines),
        end="" if args.format == OutputFormat.TEXT else "\n",
    )
    return 0


def _run_tokens(args: argparse.Namespace) -> int:
    """Dump tokens, one per line, with a blank line between source lines."""
    source = _load(args.file)
    if source is None:
        return 1

    for line in source.lines:
        for token in iter_tokens(line):
            print(f"{token.kind.value:<12} {token.text}")
        print()
    return 0


def run() -> None:
    """Console-script wrapper."""
    sys.exit(main())


if __name__ == "__main__":
    run()
