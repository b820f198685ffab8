"""CLI entry point for repohunt."""

from __future__ import annotations

import argparse
import sys
from typing import Optional

from rich.console import Console

from repohunt import __version__
from repohunt.errors import StartupError
from repohunt.events import Level
from repohunt.options import DEFAULT_MAX_DEPTH, WalkOptions, resolve_search_root
from repohunt.paths import printable
from repohunt.report import Reporter
from repohunt.scanner import walk
from repohunt.theme import LEVEL_STYLES


def _depth(value: str) -> int:
    """argparse type for --max-depth: a non-negative integer."""
    try:
        depth = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid depth: {value!r}")
    if depth < 0:
        raise argparse.ArgumentTypeError(f"depth must be non-negative, got {depth}")
    return depth


def _strategy(value: str) -> str:
    """argparse type for --symlinks: 'skip' or 'follow', any case."""
    strategy = value.lower()
    if strategy not in ("skip", "follow"):
        raise argparse.ArgumentTypeError(f"unknown symlink strategy: {value!r} (choose skip or follow)")
    return strategy


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="repohunt",
        description="Find git repositories under a directory.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Directory where the search begins (default: current directory)",
    )
    parser.add_argument(
        "-a", "--all",
        action="store_true",
        dest="show_all",
        help="Do not ignore directories starting with '.'",
    )
    symlinks = parser.add_mutually_exclusive_group()
    symlinks.add_argument(
        "-s", "--follow-symlinks",
        action="store_const",
        const="follow",
        dest="symlinks",
        help="Follow symlinks rather than ignoring them",
    )
    symlinks.add_argument(
        "--symlinks",
        type=_strategy,
        metavar="STRATEGY",
        dest="symlinks",
        help="Symlink strategy: skip (default) or follow",
    )
    parser.add_argument(
        "-p", "--paranoid",
        action="store_true",
        help="Confirm each repository by resolving HEAD with git",
    )
    parser.add_argument(
        "--descend-rejected",
        action="store_true",
        help="With --paranoid, keep searching below directories that fail the check",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Output detailed messages to standard error",
    )
    depth = parser.add_mutually_exclusive_group()
    depth.add_argument(
        "-d", "--max-depth",
        type=_depth,
        default=DEFAULT_MAX_DEPTH,
        metavar="N",
        help=f"Maximum depth when scanning subdirectories (default: {DEFAULT_MAX_DEPTH})",
    )
    depth.add_argument(
        "--any-depth",
        action="store_true",
        help="Drop the max-depth limit, allowing unlimited depth",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"repohunt {__version__}",
    )
    return parser


def options_from_args(args: argparse.Namespace) -> WalkOptions:
    """Turn parsed arguments into WalkOptions. Raises StartupError on a bad root."""
    return WalkOptions(
        root=resolve_search_root(args.path),
        follow_symlinks=args.symlinks == "follow",
        show_all=args.show_all,
        paranoid=args.paranoid,
        verbose=args.verbose,
        max_depth=None if args.any_depth else args.max_depth,
        descend_rejected=args.descend_rejected,
    )


def main(argv: Optional[list[str]] = None) -> None:
    """Entry point for the repohunt CLI."""
    args = build_parser().parse_args(argv)
    err = Console(stderr=True, emoji=False)

    try:
        options = options_from_args(args)
    except StartupError as exc:
        err.print(
            printable(str(exc)),
            style=LEVEL_STYLES[Level.ERROR],
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )
        sys.exit(1)

    reporter = Reporter(verbose=options.verbose, err=err)
    try:
        reporter.consume(walk(options))
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
