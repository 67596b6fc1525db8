"""Filesystem scanning for a single directory listing."""

from __future__ import annotations

import logging
import os
import stat
from dataclasses import dataclass
from pathlib import Path

from ..errors import PathError
from .types import DirectoryEntry, EntryKind

logger = logging.getLogger(__name__)

PERMISSION_MASK = 0o777


@dataclass(frozen=True)
class StatMetadata:
    """``EntryMetadata`` adapter over an ``os.stat_result``."""

    stat_result: os.stat_result

    def permission_bits(self) -> int:
        return stat.S_IMODE(self.stat_result.st_mode) & PERMISSION_MASK

    def size(self) -> int:
        return int(self.stat_result.st_size)

    def modified_time(self) -> float:
        return float(self.stat_result.st_mtime)

    def owner_id(self) -> int:
        return int(self.stat_result.st_uid)

    def group_id(self) -> int:
        return int(self.stat_result.st_gid)


def entry_kind_for_mode(st_mode: int) -> EntryKind:
    """Classify raw ``st_mode`` type bits into an ``EntryKind``."""
    if stat.S_ISDIR(st_mode):
        return EntryKind.DIRECTORY
    if stat.S_ISLNK(st_mode):
        return EntryKind.SYMLINK
    if stat.S_ISREG(st_mode):
        return EntryKind.REGULAR
    if stat.S_ISCHR(st_mode) or stat.S_ISBLK(st_mode):
        return EntryKind.DEVICE
    return EntryKind.OTHER


def resolve_listing_path(raw_path: str | os.PathLike[str] | None) -> Path:
    """Return an absolute, normalized path for ``raw_path``.

    ``None`` and the empty string mean the current working directory. Symlinks
    in the path are kept as written.
    """
    if raw_path is None or str(raw_path) == "":
        raw_path = os.curdir
    return Path(os.path.abspath(raw_path))


def list_directory(directory: Path) -> list[DirectoryEntry]:
    """Snapshot every immediate child of ``directory`` in scan order.

    Children are ``lstat``ed, so symlinks describe the link itself. Any
    failure to open the directory or stat a child raises ``PathError``.
    """
    entries: list[DirectoryEntry] = []
    try:
        with os.scandir(directory) as children:
            for child in children:
                try:
                    st = child.stat(follow_symlinks=False)
                except OSError as exc:
                    raise PathError(f"{directory / child.name}: {exc.strerror or exc}") from exc
                entries.append(
                    DirectoryEntry.from_metadata(child.name, entry_kind_for_mode(st.st_mode), StatMetadata(st))
                )
    except FileNotFoundError as exc:
        raise PathError(f"{directory}: no such file or directory") from exc
    except NotADirectoryError as exc:
        raise PathError(f"{directory}: not a directory") from exc
    except PermissionError as exc:
        raise PathError(f"{directory}: permission denied") from exc
    except OSError as exc:
        raise PathError(f"{directory}: {exc.strerror or exc}") from exc

    logger.debug("listed %d entries in %s", len(entries), directory)
    return entries


__all__ = [
    "StatMetadata",
    "entry_kind_for_mode",
    "resolve_listing_path",
    "list_directory",
]
