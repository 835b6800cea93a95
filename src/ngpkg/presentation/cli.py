"""Command line interface: print the package graph of a project.

Usage:
    ngpkg [PROJECT] [--format console|json] [--verbose]

Exit codes:
    0: Package graph discovered (skipped secondaries included)
    1: Primary entry point could not be resolved
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

from ngpkg import __version__
from ngpkg.application.discovery import DiscoveryOrchestrator
from ngpkg.application.reporters import ConsoleConfig, ConsoleReporter, JSONReporter
from ngpkg.domain.exceptions import NgPkgError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ngpkg.application.reporters import ReporterProtocol


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ngpkg",
        description="Discover primary and secondary entry points of a library package",
    )
    parser.add_argument(
        "project",
        nargs="?",
        default=".",
        help="Project directory or package.json path (default: current directory)",
    )
    parser.add_argument(
        "--format",
        choices=("console", "json"),
        default="console",
        help="Output format",
    )
    parser.add_argument(
        "--absolute-paths",
        action="store_true",
        help="Show absolute paths in console output",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log discovery progress to stderr",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(*, verbose: bool) -> None:
    """Route library logs through rich on stderr.

    Skipped secondaries (WARNING) are always shown; DEBUG with --verbose.
    """
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the `ngpkg` command."""
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)

    reporter: ReporterProtocol
    if args.format == "json":
        reporter = JSONReporter()
    else:
        reporter = ConsoleReporter(ConsoleConfig(relative_paths=not args.absolute_paths))

    try:
        report = asyncio.run(DiscoveryOrchestrator().discover_with_report(args.project))
    except NgPkgError as e:
        print(f"ngpkg: error: {e}", file=sys.stderr)
        return 1

    sys.stdout.write(reporter.report(report))
    if args.format == "json":
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
