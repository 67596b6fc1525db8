"""Domain datatypes for one directory listing snapshot."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class EntryKind(Enum):
    """Closed set of entry kinds decided once at listing time."""

    DIRECTORY = "directory"
    REGULAR = "regular"
    SYMLINK = "symlink"
    DEVICE = "device"
    OTHER = "other"


class EntryMetadata(Protocol):
    """Read-only metadata capability the lister builds entries from."""

    def permission_bits(self) -> int: ...

    def size(self) -> int: ...

    def modified_time(self) -> float: ...

    def owner_id(self) -> int: ...

    def group_id(self) -> int: ...


@dataclass(frozen=True)
class DirectoryEntry:
    """Immutable snapshot of one child of the listed directory.

    ``mode`` holds only the nine owner/group/other permission bits; the entry
    type lives in ``kind``. ``size`` is meaningful for non-directories only.
    """

    name: str
    kind: EntryKind
    mode: int = 0
    size: int = 0
    mtime: float = 0.0
    uid: int = 0
    gid: int = 0

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def is_symlink(self) -> bool:
        return self.kind is EntryKind.SYMLINK

    @classmethod
    def from_metadata(cls, name: str, kind: EntryKind, metadata: EntryMetadata) -> DirectoryEntry:
        """Snapshot ``metadata`` into a new entry named ``name``."""
        return cls(
            name=name,
            kind=kind,
            mode=metadata.permission_bits(),
            size=max(0, metadata.size()),
            mtime=metadata.modified_time(),
            uid=metadata.owner_id(),
            gid=metadata.group_id(),
        )


__all__ = [
    "EntryKind",
    "EntryMetadata",
    "DirectoryEntry",
]
