"""CLI entrypoint for structscan."""

from __future__ import annotations

import argparse
import sys

from .config import ScanConfig
from .errors import StructScanError
from .logging import configure_logging
from .pipeline import Pipeline
from .reporter import Reporter


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="structscan",
        description=(
            "List Go functions and methods whose results resolve, through any "
            "chain of type aliases, to a struct type."
        ),
    )
    parser.add_argument(
        "directory",
        help="Root of the Go source tree to scan.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Skip directories or files matching this glob (repeatable).",
    )
    parser.add_argument(
        "--no-tests",
        action="store_true",
        help="Ignore _test.go files.",
    )
    parser.add_argument(
        "--max-alias-depth",
        type=int,
        default=None,
        metavar="N",
        help="Give up on alias chains longer than N links.",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write debug logs to this file.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for structscan."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        config = ScanConfig.from_args(args)
    except StructScanError as exc:
        parser.exit(2, f"{parser.prog}: error: {exc}\n")

    configure_logging(verbose=config.verbose, log_file=config.log_file)

    try:
        result = Pipeline(config).run(args.directory)
    except (StructScanError, OSError) as exc:
        parser.exit(1, f"structscan failed: {exc}\nRun with --verbose for more details.\n")

    Reporter(sys.stdout).report(result.findings)


if __name__ == "__main__":
    main(sys.argv[1:])
