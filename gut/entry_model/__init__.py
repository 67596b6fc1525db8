"""Domain model for a single directory listing.

This package contains the non-UI listing stages:
- immutable entry snapshots and the metadata capability they are built from
- directory scanning and listing-path resolution
- sorting and regular-expression filtering
"""

from __future__ import annotations

from .types import DirectoryEntry, EntryKind, EntryMetadata
from .fs import StatMetadata, entry_kind_for_mode, list_directory, resolve_listing_path
from .ordering import compile_pattern, filter_entries, sort_entries

__all__ = [
    "DirectoryEntry",
    "EntryKind",
    "EntryMetadata",
    "StatMetadata",
    "entry_kind_for_mode",
    "list_directory",
    "resolve_listing_path",
    "compile_pattern",
    "filter_entries",
    "sort_entries",
]
