"""Column text helpers for sizes, dates, and permission bits.

These return plain strings (or role-tagged characters for permissions) and
know nothing about color; the renderer layers styling on top.
"""

from __future__ import annotations

import time

from .entry_model.types import EntryKind

KIB = 1024
MIB = KIB * KIB
GIB = MIB * KIB

SIZE_WIDTH = 5
DATE_WIDTH = 12
DIR_SIZE_PLACEHOLDER = "-"

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# Pipes and sockets share OTHER and render as "?", not "p" or "s".
TYPE_CHARACTERS: dict[EntryKind, str] = {
    EntryKind.DIRECTORY: "d",
    EntryKind.REGULAR: "-",
    EntryKind.SYMLINK: "l",
    EntryKind.DEVICE: "d",
    EntryKind.OTHER: "?",
}

# (bit, letter, role) in owner, group, other order.
PERMISSION_BITS: tuple[tuple[int, str, str], ...] = (
    (0o400, "r", "read"),
    (0o200, "w", "write"),
    (0o100, "x", "execute"),
    (0o040, "r", "read"),
    (0o020, "w", "write"),
    (0o010, "x", "execute"),
    (0o004, "r", "read"),
    (0o002, "w", "write"),
    (0o001, "x", "execute"),
)


def pad_left(text: str, width: int) -> str:
    """Right-align ``text`` in ``width`` columns; longer text is kept whole."""
    return text.rjust(width)


def friendly_size(size: int) -> str:
    """Return ``size`` bytes as an integer with a binary unit suffix."""
    if size < KIB:
        return str(size)
    if size < MIB:
        return f"{size // KIB}Ki"
    if size < GIB:
        return f"{size // MIB}Mi"
    return f"{size // GIB}Gi"


def format_size_column(size: int, is_dir: bool) -> str:
    if is_dir:
        return pad_left(DIR_SIZE_PLACEHOLDER, SIZE_WIDTH)
    return pad_left(friendly_size(size), SIZE_WIDTH)


def format_date(mtime: float) -> str:
    """Return ``D Mon HH:MM`` in local time, e.g. ``3 Jan 13:04``."""
    moment = time.localtime(mtime)
    month = MONTH_ABBREVIATIONS[moment.tm_mon - 1]
    return f"{moment.tm_mday} {month} {moment.tm_hour:02d}:{moment.tm_min:02d}"


def format_date_column(mtime: float) -> str:
    return pad_left(format_date(mtime), DATE_WIDTH)


def type_character(kind: EntryKind) -> str:
    return TYPE_CHARACTERS[kind]


def permission_tokens(mode: int) -> list[tuple[str, str]]:
    """Return nine ``(character, role)`` pairs for the permission bits.

    ``role`` is ``read``/``write``/``execute`` for set bits and ``none`` for
    cleared ones, whose character is ``-``.
    """
    tokens: list[tuple[str, str]] = []
    for bit, letter, role in PERMISSION_BITS:
        if mode & bit:
            tokens.append((letter, role))
        else:
            tokens.append(("-", "none"))
    return tokens


def format_permissions(mode: int) -> str:
    """Return the plain nine-character ``rwxr-xr--`` form of ``mode``."""
    return "".join(char for char, _role in permission_tokens(mode))


__all__ = [
    "KIB",
    "MIB",
    "GIB",
    "SIZE_WIDTH",
    "DATE_WIDTH",
    "TYPE_CHARACTERS",
    "pad_left",
    "friendly_size",
    "format_size_column",
    "format_date",
    "format_date_column",
    "type_character",
    "permission_tokens",
    "format_permissions",
]
