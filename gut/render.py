"""Render listing rows as fixed-column, optionally colored text.

Each row is: type+permissions, size, owner/group, modified date, name, with a
two-space separator after every column but the last. Column padding is applied
to the plain text before styling so alignment does not depend on color.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from .entry_model.types import DirectoryEntry, EntryKind
from .errors import SymlinkResolutionError
from .formatting import (
    format_date_column,
    format_size_column,
    permission_tokens,
    type_character,
)
from .identity import IdentityResolver
from .ui_theme import DEFAULT_THEME, ListingTheme

logger = logging.getLogger(__name__)

SPACER = "  "
SYMLINK_ARROW = " → "
UNKNOWN_TARGET = "[unknown]"
HEADER_LABELS = ("Permissions", "Size", "User", "Group", "Date Modified", "Name")


def resolve_symlink_target(directory: Path, name: str) -> Path:
    """Return the absolute final target of link ``name`` inside ``directory``."""
    link_path = directory / name
    try:
        return link_path.resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        raise SymlinkResolutionError(f"cannot resolve {link_path}: {exc}") from exc


def _type_style(kind: EntryKind, theme: ListingTheme) -> str:
    if kind is EntryKind.DIRECTORY:
        return theme.perm_dir
    if kind is EntryKind.REGULAR:
        return theme.perm_none
    return theme.perm_other


def render_permissions(entry: DirectoryEntry, theme: ListingTheme) -> str:
    parts = [theme.paint(_type_style(entry.kind, theme), type_character(entry.kind))]
    for char, role in permission_tokens(entry.mode):
        parts.append(theme.paint(theme.style(role), char))
    return "".join(parts)


def render_size(entry: DirectoryEntry, theme: ListingTheme) -> str:
    text = format_size_column(entry.size, entry.is_dir)
    style = theme.perm_none if entry.is_dir else theme.size
    return theme.paint(style, text)


def render_name(entry: DirectoryEntry, directory: Path, theme: ListingTheme) -> str:
    """Render the name column, following symlinks relative to ``directory``."""
    if entry.is_dir:
        return theme.paint(theme.dir_name, entry.name)
    if not entry.is_symlink:
        return entry.name
    try:
        target = resolve_symlink_target(directory, entry.name)
    except SymlinkResolutionError as exc:
        logger.debug("%s", exc)
        return f"{entry.name}{SYMLINK_ARROW}{UNKNOWN_TARGET}"
    return (
        theme.paint(theme.symlink_name, entry.name)
        + SYMLINK_ARROW
        + theme.paint(theme.symlink_target, str(target))
    )


def render_entry(
    entry: DirectoryEntry,
    directory: Path,
    theme: ListingTheme | None = None,
    identity: IdentityResolver | None = None,
) -> str:
    """Render one listing row without a trailing newline."""
    active_theme = theme or DEFAULT_THEME
    resolver = identity or IdentityResolver()
    columns = (
        render_permissions(entry, active_theme),
        render_size(entry, active_theme),
        active_theme.paint(active_theme.owner, resolver.owner_label(entry.uid, entry.gid)),
        active_theme.paint(active_theme.mod_time, format_date_column(entry.mtime)),
    )
    return SPACER.join(columns) + SPACER + render_name(entry, directory, active_theme)


def render_listing(
    entries: Iterable[DirectoryEntry],
    directory: Path,
    theme: ListingTheme | None = None,
    identity: IdentityResolver | None = None,
) -> list[str]:
    """Render every entry in order, one row each."""
    resolver = identity or IdentityResolver()
    return [render_entry(entry, directory, theme, resolver) for entry in entries]


def render_header(theme: ListingTheme | None = None) -> str:
    active_theme = theme or DEFAULT_THEME
    return SPACER.join(active_theme.paint(active_theme.header, label) for label in HEADER_LABELS)


__all__ = [
    "SPACER",
    "UNKNOWN_TARGET",
    "resolve_symlink_target",
    "render_permissions",
    "render_size",
    "render_name",
    "render_entry",
    "render_listing",
    "render_header",
]
