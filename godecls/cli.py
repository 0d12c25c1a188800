"""CLI entrypoint for godecls."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Dict

from .config import ConfigError, DEFAULT_MAX_VALUE_LENGTH, load_config, split_list
from .logging import configure_logging
from .processor import FileProcessor

_EPILOG = """\
Paths can be files, directories (listed without descending) or DIR/... for a
recursive scan (./... scans the current directory).

Errors: every path is attempted. Missing paths, files with an unsupported
extension and files that fail to parse are reported on stderr and the
command exits with status 1 once all other output has been printed.
"""


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="godecls",
        description="Print the top-level declarations of Go source files as one-line signatures.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("paths", nargs="*", metavar="PATH", help="Files or directories to scan.")
    parser.add_argument(
        "--private",
        action="store_true",
        default=None,
        help="Include private (unexported) declarations.",
    )
    parser.add_argument(
        "--no-values",
        action="store_true",
        default=None,
        help="Skip showing right-hand side values.",
    )
    parser.add_argument(
        "--max-length",
        type=int,
        default=None,
        metavar="N",
        help=f"Maximum length of displayed values before truncating (default {DEFAULT_MAX_VALUE_LENGTH}).",
    )
    parser.add_argument(
        "--ext",
        default=None,
        metavar="LIST",
        help="Comma-separated file extensions to process (default .go), e.g. .go,.gno.",
    )
    parser.add_argument(
        "--exclude",
        default=None,
        metavar="LIST",
        help="Comma-separated file suffixes to skip (default _test.go).",
    )
    parser.add_argument(
        "--iota-values",
        action="store_true",
        default=None,
        help="Show the iota offset as the value of constants continuing an iota sequence.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a .godecls.yml file (defaults to ./.godecls.yml when present).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log messages to this file.",
    )
    return parser


def _overrides(args: argparse.Namespace) -> Dict[str, Any]:
    return {
        "include_private": args.private,
        "include_values": False if args.no_values else None,
        "max_value_length": args.max_length,
        "extensions": tuple(split_list(args.ext)) if args.ext is not None else None,
        "exclude_suffixes": tuple(split_list(args.exclude)) if args.exclude is not None else None,
        "iota_values": args.iota_values,
    }


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for godecls."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.paths:
        parser.error("no paths provided")

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    try:
        config = load_config(args.config, _overrides(args))
    except ConfigError as exc:
        parser.exit(1, f"godecls: {exc}\n")

    report = FileProcessor(config).process_paths(args.paths)
    for line in report.lines:
        print(line)

    if report.errors:
        parser.exit(1, f"godecls: {len(report.errors)} path(s) failed\n")


if __name__ == "__main__":
    main(sys.argv[1:])
