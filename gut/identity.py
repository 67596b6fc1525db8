"""Owner and group name lookup for numeric ids.

Lookups go through ``pwd``/``grp`` and are memoized for the life of the
process, since a listing usually repeats the same few ids.
"""

from __future__ import annotations

import grp
import logging
import pwd
from collections.abc import Callable
from dataclasses import dataclass
from functools import lru_cache

from .errors import IdentityResolutionError

logger = logging.getLogger(__name__)


@lru_cache(maxsize=256)
def user_name(uid: int) -> str:
    """Return the login name for ``uid`` or raise ``IdentityResolutionError``."""
    try:
        return pwd.getpwuid(uid).pw_name
    except (KeyError, OverflowError) as exc:
        raise IdentityResolutionError(f"unknown uid {uid}") from exc


@lru_cache(maxsize=256)
def group_name(gid: int) -> str:
    """Return the group name for ``gid`` or raise ``IdentityResolutionError``."""
    try:
        return grp.getgrgid(gid).gr_name
    except (KeyError, OverflowError) as exc:
        raise IdentityResolutionError(f"unknown gid {gid}") from exc


@dataclass(frozen=True)
class IdentityResolver:
    """Maps ids to display names, falling back to the numeric id as text."""

    user_lookup: Callable[[int], str] = user_name
    group_lookup: Callable[[int], str] = group_name

    def _display(self, lookup: Callable[[int], str], value: int) -> str:
        try:
            return lookup(value)
        except IdentityResolutionError as exc:
            logger.debug("%s; showing numeric id", exc)
            return str(value)

    def user(self, uid: int) -> str:
        return self._display(self.user_lookup, uid)

    def group(self, gid: int) -> str:
        return self._display(self.group_lookup, gid)

    def owner_label(self, uid: int, gid: int) -> str:
        """Return ``"<user> <group>"`` for one entry."""
        return f"{self.user(uid)} {self.group(gid)}"


__all__ = [
    "IdentityResolver",
    "user_name",
    "group_name",
]
