"""UI theme definitions and selection helpers.

Themes bundle the ANSI palette and the glyphs used by the checkbox prompt and
the git status labels. Glyphs live next to colors so the plain theme can keep
the four item states distinguishable without any escape sequences.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette and glyph set used by renderers."""

    name: str
    reset: str
    bold: str
    prefix: str
    done_prefix: str
    pointer: str
    checked_glyph: str
    unchecked_glyph: str
    active: str
    checked: str
    unchecked: str
    disabled: str
    help_key: str
    help_dim: str
    error: str
    answer: str
    git_staged: str
    git_modified: str
    git_moved: str
    git_added_deleted: str
    git_untracked: str
    git_ignored: str
    git_conflict: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    bold="\033[1m",
    prefix="\033[32m?\033[0m",
    done_prefix="\033[32m✔\033[0m",
    pointer="❯",
    checked_glyph="◉",
    unchecked_glyph="◯",
    active="\033[36m",
    checked="\033[32m",
    unchecked="\033[90m",
    disabled="\033[2m",
    help_key="\033[1;36m",
    help_dim="\033[90m",
    error="\033[31m",
    answer="\033[36m",
    git_staged="\033[32m",
    git_modified="\033[34m",
    git_moved="\033[34m",
    git_added_deleted="\033[31m",
    git_untracked="\033[31m",
    git_ignored="\033[35m",
    git_conflict="\033[33m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    bold="\033[1m",
    prefix="\033[38;5;45m?\033[0m",
    done_prefix="\033[38;5;84m✔\033[0m",
    pointer="❯",
    checked_glyph="◉",
    unchecked_glyph="◯",
    active="\033[38;5;45m",
    checked="\033[38;5;84m",
    unchecked="\033[38;5;110m",
    disabled="\033[2;38;5;110m",
    help_key="\033[1;38;5;153m",
    help_dim="\033[2;38;5;110m",
    error="\033[38;5;203m",
    answer="\033[38;5;117m",
    git_staged="\033[38;5;84m",
    git_modified="\033[38;5;117m",
    git_moved="\033[38;5;75m",
    git_added_deleted="\033[38;5;203m",
    git_untracked="\033[38;5;215m",
    git_ignored="\033[38;5;176m",
    git_conflict="\033[38;5;221m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    bold="",
    prefix="?",
    done_prefix="v",
    pointer=">",
    checked_glyph="[x]",
    unchecked_glyph="[ ]",
    active="",
    checked="",
    unchecked="",
    disabled="",
    help_key="",
    help_dim="",
    error="",
    answer="",
    git_staged="",
    git_modified="",
    git_moved="",
    git_added_deleted="",
    git_untracked="",
    git_ignored="",
    git_conflict="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def paint(color: str, text: str, theme: UITheme) -> str:
    """Wrap ``text`` in ``color`` and the theme reset, or return it bare."""
    if not color:
        return text
    return f"{color}{text}{theme.reset}"


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


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "paint",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
