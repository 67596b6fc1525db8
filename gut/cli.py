"""Command-line front door for gut.

Parses CLI options, resolves the target directory, and runs the listing
pipeline: list, sort, optionally filter, render, write to stdout.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .config import load_no_color, load_show_header, load_theme_name
from .entry_model import (
    DirectoryEntry,
    compile_pattern,
    filter_entries,
    list_directory,
    resolve_listing_path,
    sort_entries,
)
from .errors import GutError
from .identity import IdentityResolver
from .render import render_header, render_listing
from .ui_theme import available_theme_names, resolve_theme

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s gut[%(process)d]: %(levelname)s: %(message)s"
_LOG_HANDLER_NAME = "gut-cli"


def parse_log_level(log_level: str) -> int:
    """Map a level name to a ``logging`` constant."""
    try:
        return {
            "error": logging.ERROR,
            "warning": logging.WARNING,
            "info": logging.INFO,
            "debug": logging.DEBUG,
        }[log_level.lower()]
    except KeyError:
        raise ValueError(f"invalid log level specifier: {log_level!r}") from None


def _log_level(value: str) -> int:
    """argparse type for ``--log-level``."""
    try:
        return parse_log_level(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def configure_logging(level: int) -> None:
    """Install a single stderr handler on the root logger."""
    root = logging.getLogger("")
    for handler in list(root.handlers):
        if handler.get_name() == _LOG_HANDLER_NAME:
            root.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_LOG_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)


def _color_enabled(no_color: bool) -> bool:
    if no_color or load_no_color():
        return False
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gut",
        description="List a directory with permissions, sizes, owners, and dates.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to list. Defaults to current directory.")
    parser.add_argument(
        "-x",
        "--regexp",
        default="",
        help="Regular expression string to search for files and directories.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"Color theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--header", action="store_true", help="Print a column header row before the listing.")
    parser.add_argument(
        "--log-level",
        type=_log_level,
        default=logging.WARNING,
        help="Diagnostic log level: error, warning, info, debug (default: warning).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run_listing(path: Path, pattern: str) -> list[DirectoryEntry]:
    """Return the sorted, filtered entries of ``path``.

    The pattern is compiled before the directory is read so a bad pattern
    fails without touching the filesystem.
    """
    compiled = compile_pattern(pattern) if pattern else None
    entries = sort_entries(list_directory(path))
    if compiled is not None:
        entries = filter_entries(entries, compiled)
    return entries


def main(default_path: Path | None = None, argv: list[str] | None = None) -> None:
    """Parse CLI arguments and print the listing for one directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used. Path and pattern errors exit with status 1.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    raw_path = args.path if args.path is not None else default_path
    path = resolve_listing_path(raw_path)
    logger.debug("listing %s", path)

    try:
        entries = run_listing(path, args.regexp)
    except GutError as exc:
        logger.debug("listing failed", exc_info=True)
        raise SystemExit(f"gut: {exc}") from exc

    color = _color_enabled(args.no_color)
    theme = resolve_theme(args.theme or load_theme_name(), no_color=not color)
    lines = render_listing(entries, path, theme, IdentityResolver())
    if args.header or load_show_header():
        lines.insert(0, render_header(theme))
    sys.stdout.write("".join(f"{line}\n" for line in lines))


if __name__ == "__main__":
    main()
