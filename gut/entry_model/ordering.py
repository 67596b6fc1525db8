"""Ordering and pattern filtering of listed entries."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from ..errors import PatternError
from .types import DirectoryEntry

logger = logging.getLogger(__name__)


def sort_entries(entries: Iterable[DirectoryEntry]) -> list[DirectoryEntry]:
    """Return entries with directories first, then by codepoint name order."""
    return sorted(entries, key=lambda entry: (not entry.is_dir, entry.name))


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a filter pattern, raising ``PatternError`` on bad syntax."""
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise PatternError(f"invalid regexp {pattern!r}: {exc}") from exc


def filter_entries(entries: Iterable[DirectoryEntry], pattern: str | re.Pattern[str]) -> list[DirectoryEntry]:
    """Keep entries whose name contains a match for ``pattern``.

    Matching is an unanchored search. An empty pattern keeps everything.
    """
    if isinstance(pattern, str):
        if not pattern:
            return list(entries)
        pattern = compile_pattern(pattern)
    matched = [entry for entry in entries if pattern.search(entry.name)]
    logger.debug("pattern %r kept %d entries", pattern.pattern, len(matched))
    return matched


__all__ = [
    "sort_entries",
    "compile_pattern",
    "filter_entries",
]
