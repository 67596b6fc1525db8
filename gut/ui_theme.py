"""Listing style tables and selection helpers.

A theme maps each logical render role to an ANSI sequence. The renderer takes
a theme as an argument; there is no process-wide styling state.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ListingTheme:
    """Semantic ANSI palette used by the listing renderer."""

    name: str
    reset: str
    perm_dir: str
    perm_other: str
    perm_read: str
    perm_write: str
    perm_execute: str
    perm_none: str
    size: str
    owner: str
    mod_time: str
    dir_name: str
    symlink_name: str
    symlink_target: str
    header: str

    def style(self, role: str) -> str:
        """Return the sequence for a permission ``role`` (read/write/execute/none)."""
        return getattr(self, f"perm_{role}")

    def paint(self, style: str, text: str) -> str:
        """Wrap ``text`` in ``style`` and a reset; unstyled text passes through."""
        if not style:
            return text
        return f"{style}{text}{self.reset}"


DEFAULT_THEME = ListingTheme(
    name="default",
    reset="\033[0m",
    perm_dir="\033[1;34m",
    perm_other="\033[36m",
    perm_read="\033[33m",
    perm_write="\033[31m",
    perm_execute="\033[32m",
    perm_none="\033[90m",
    size="\033[1;32m",
    owner="\033[1;33m",
    mod_time="\033[34m",
    dir_name="\033[1;34m",
    symlink_name="\033[36m",
    symlink_target="\033[1;35m",
    header="\033[4;37m",
)

OCEAN_THEME = ListingTheme(
    name="ocean",
    reset="\033[0m",
    perm_dir="\033[1;38;5;45m",
    perm_other="\033[38;5;117m",
    perm_read="\033[38;5;153m",
    perm_write="\033[38;5;215m",
    perm_execute="\033[38;5;84m",
    perm_none="\033[2;38;5;110m",
    size="\033[38;5;73m",
    owner="\033[38;5;117m",
    mod_time="\033[38;5;39m",
    dir_name="\033[1;38;5;45m",
    symlink_name="\033[38;5;81m",
    symlink_target="\033[1;38;5;153m",
    header="\033[4;38;5;250m",
)

PLAIN_THEME = ListingTheme(
    name="plain",
    reset="",
    perm_dir="",
    perm_other="",
    perm_read="",
    perm_write="",
    perm_execute="",
    perm_none="",
    size="",
    owner="",
    mod_time="",
    dir_name="",
    symlink_name="",
    symlink_target="",
    header="",
)

_THEMES: dict[str, ListingTheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> ListingTheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "ListingTheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
