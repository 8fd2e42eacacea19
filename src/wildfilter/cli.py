"""CLI entry point for wfind — I/O boundary only."""

from __future__ import annotations

import argparse
import logging
import os
import stat
import sys
from pathlib import Path

from wildfilter import WildfilterError
from wildfilter.case import CaseMode
from wildfilter.filter import WildcardFilter
from wildfilter.walker import Entry, Visit, WalkOptions, walk


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser.

    Returns:
        argparse.ArgumentParser: Configured parser for the ``wfind`` command.
    """
    parser = argparse.ArgumentParser(
        prog="wfind",
        description="find entries whose names match shell-style wildcard patterns",
    )
    parser.add_argument(
        "patterns",
        nargs="+",
        metavar="PATTERN",
        help="Wildcard pattern (* and ?); an entry is listed if any pattern matches",
    )
    parser.add_argument(
        "-d",
        "--directory",
        default=".",
        help="Root directory to search (default: current directory)",
    )

    case_group = parser.add_mutually_exclusive_group()
    case_group.add_argument(
        "-i",
        "--ignore-case",
        action="store_const",
        const=CaseMode.INSENSITIVE.value,
        dest="case",
        help="Match case-insensitively (same as --case insensitive)",
    )
    case_group.add_argument(
        "--case",
        choices=[mode.value for mode in CaseMode],
        dest="case",
        help="Case sensitivity: sensitive (default), insensitive, or system",
    )

    parser.add_argument(
        "-L",
        "--level",
        type=int,
        default=None,
        dest="max_depth",
        help="Max search depth below the root directory",
    )
    parser.add_argument(
        "-a",
        "--all",
        action="store_true",
        dest="all_files",
        help="Include hidden entries (starting with .)",
    )
    parser.add_argument(
        "--gitignore",
        action="store_true",
        help="Skip entries ignored by the root directory's .gitignore",
    )

    kind_group = parser.add_mutually_exclusive_group()
    kind_group.add_argument(
        "--dirs-only",
        action="store_true",
        dest="dirs_only",
        help="List matching directories only",
    )
    kind_group.add_argument(
        "-F",
        "--files-only",
        action="store_true",
        dest="files_only",
        help="List matching files only",
    )

    parser.add_argument(
        "--absolute",
        action="store_true",
        help="Print absolute paths instead of paths relative to the root",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=None,
        dest="output_file",
        help="Write output to a file instead of stdout",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug information to stderr",
    )
    return parser


def run_wfind(argv: list[str] | None = None) -> str:
    """Run wfind with provided CLI args and return formatted output.

    This function is side-effect free and is the primary test target for
    CLI behavior.

    Args:
        argv: Command-line argument list without program name. If ``None``,
            uses process arguments via ``argparse`` defaults.

    Returns:
        str: Matching paths, one per line.

    Raises:
        WildfilterError: On any user-facing validation error.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    return _run_with_args(args)


def _resolve_root(directory: str) -> Path:
    """Resolve directory and validate it is a directory.

    Raises:
        WildfilterError: If directory does not exist or is not a directory.
    """
    root = Path(directory).resolve()
    if not root.is_dir():
        raise WildfilterError(f"'{directory}' is not a directory")
    return root


def _translate_level_to_walk_depth(level_arg: int | None) -> int | None:
    """Translate ``-L`` level semantics to walker depth.

    Level 1 lists only the root's direct children, which is walker depth 0.

    Raises:
        WildfilterError: If level is less than 1.
    """
    if level_arg is None:
        return None
    if level_arg < 1:
        raise WildfilterError("Invalid level, must be greater than 0.")
    return level_arg - 1


class _KindFilter:
    """Restrict a wildcard filter's selection to files or directories.

    Rejected kinds are still descended into, so ``--files-only`` finds
    files inside matching and non-matching directories alike.
    """

    def __init__(self, inner: WildcardFilter, *, dirs_only: bool, files_only: bool) -> None:
        self._inner = inner
        self._dirs_only = dirs_only
        self._files_only = files_only

    def visit(self, path: Path, attributes: os.stat_result | None) -> Visit:
        decision = self._inner.visit(path, attributes)
        if decision is not Visit.ACCEPT:
            return decision
        if attributes is not None:
            is_dir = stat.S_ISDIR(attributes.st_mode)
        else:
            is_dir = path.is_dir()
        if (self._dirs_only and not is_dir) or (self._files_only and is_dir):
            return Visit.REJECT
        return decision


def _format_entries(entries: list[Entry], root: Path, absolute: bool) -> str:
    """Render walker entries as one path per line."""
    if absolute:
        return "\n".join(str(entry.path) for entry in entries)
    return "\n".join(entry.path.relative_to(root).as_posix() for entry in entries)


def _run_with_args(args: argparse.Namespace) -> str:
    """Run the walk/format pipeline for parsed arguments.

    Raises:
        WildfilterError: On any user-facing validation error.
    """
    root = _resolve_root(args.directory)
    walk_max_depth = _translate_level_to_walk_depth(args.max_depth)
    case_mode = CaseMode(args.case) if args.case else None

    wildcard_filter = WildcardFilter(args.patterns, case_mode=case_mode)
    entry_filter = (
        _KindFilter(wildcard_filter, dirs_only=args.dirs_only, files_only=args.files_only)
        if args.dirs_only or args.files_only
        else wildcard_filter
    )

    walk_opts = WalkOptions(
        max_depth=walk_max_depth,
        all_files=args.all_files,
        gitignore=args.gitignore,
    )
    entries = walk(root, walk_opts, entry_filter)
    return _format_entries(entries, root, args.absolute)


def main() -> None:
    """Run the CLI entry point with process arguments.

    Parses args exactly once and writes output to stdout or ``-o`` file.
    Exits with code 1 on user-facing errors.
    """
    parser = build_parser()
    args = parser.parse_args()  # single parse

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        output = _run_with_args(args)
    except WildfilterError as exc:
        sys.stderr.write(f"wfind: {exc}\n")
        sys.exit(1)

    text = output + "\n" if output else ""
    if args.output_file:
        try:
            Path(args.output_file).write_text(text, encoding="utf-8", newline="")
        except OSError as exc:
            sys.stderr.write(f"wfind: cannot write to '{args.output_file}': {exc}\n")
            sys.exit(1)
    else:
        sys.stdout.write(text)
