"""Error types raised by the listing pipeline.

``PathError`` and ``PatternError`` abort the run. The resolution errors are
recovered per entry by the renderer.
"""

from __future__ import annotations


class GutError(Exception):
    """Base class for all gut errors."""


class PathError(GutError):
    """Listing path is missing, not a directory, or unreadable."""


class PatternError(GutError):
    """Filter pattern failed to compile."""


class SymlinkResolutionError(GutError):
    """Symlink target could not be resolved."""


class IdentityResolutionError(GutError):
    """Numeric uid/gid has no matching user or group name."""


__all__ = [
    "GutError",
    "PathError",
    "PatternError",
    "SymlinkResolutionError",
    "IdentityResolutionError",
]
