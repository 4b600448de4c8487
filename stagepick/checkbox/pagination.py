"""Pagination window and text rendering for the checkbox prompt.

Everything here is a deterministic projection of a ``PromptState``; nothing
reads the terminal or mutates state. The runtime stores the window start in
the snapshot so the window slides minimally between frames.
"""

from __future__ import annotations

from ..ui_theme import UITheme, paint
from .items import Item, Items, disabled_reason, selected
from .state import CheckboxConfig, PromptState

MORE_CHOICES_HINT = "(Use arrow keys to reveal more choices)"
HELP_KEYS: tuple[tuple[str, str], ...] = (
    ("<space>", "to select"),
    ("<a>", "to toggle all"),
    ("<i>", "to invert selection"),
    ("<enter>", "to proceed"),
)


def window_start(count: int, active: int, page_size: int, loop: bool, previous_start: int = 0) -> int:
    """Return the first row of a ``page_size`` window that contains ``active``.

    The window keeps ``previous_start`` while ``active`` is still visible and
    otherwise slides just far enough to reveal it. Lists that fit in one page
    always start at 0. Without ``loop`` the start is clamped to the list; with
    ``loop`` rows wrap modulo ``count`` and the window slides in whichever
    direction is shorter.
    """
    if count <= page_size:
        return 0
    if not loop:
        start = max(0, min(previous_start, count - page_size))
        if active < start:
            start = active
        elif active >= start + page_size:
            start = active - page_size + 1
        return max(0, min(start, count - page_size))

    start = previous_start % count
    offset = (active - start) % count
    if offset < page_size:
        return start
    forward = offset - page_size + 1
    backward = count - offset
    if forward <= backward:
        return (active - page_size + 1) % count
    return active


def visible_indices(count: int, start: int, page_size: int) -> list[int]:
    """List the item indices shown in a window, wrapping past the end when needed."""
    if count <= page_size:
        return list(range(count))
    return [(start + row) % count for row in range(page_size)]


def render_item(item: Item, is_active: bool, theme: UITheme) -> str:
    """Render one row; checked/unchecked, active and disabled each look distinct."""
    if item.disabled:
        reason = disabled_reason(item)
        text = f"- {item.label} {reason}" if reason else f"- {item.label}"
        return paint(theme.disabled, text, theme)

    if item.checked:
        checkbox = paint(theme.checked, theme.checked_glyph, theme)
    else:
        checkbox = paint(theme.unchecked, theme.unchecked_glyph, theme)
    if is_active:
        return f"{paint(theme.active, theme.pointer, theme)} {checkbox} {paint(theme.active, item.label, theme)}"
    return f"{' ' * len(theme.pointer)} {checkbox} {item.label}"


def render_page(
    items: Items,
    active: int,
    start: int,
    page_size: int,
    theme: UITheme,
) -> list[str]:
    lines = [
        render_item(items[index], index == active, theme)
        for index in visible_indices(len(items), start, page_size)
    ]
    if len(items) > page_size:
        lines.append(paint(theme.help_dim, MORE_CHOICES_HINT, theme))
    return lines


def help_line(instructions: str | bool | None, theme: UITheme) -> str:
    """Return the header suffix for ``instructions``.

    ``None``/``True`` produce the built-in legend, a non-empty string is used
    verbatim and ``False`` or ``""`` suppress the line.
    """
    if isinstance(instructions, str):
        return instructions
    if instructions is False:
        return ""
    keys = [f"{paint(theme.help_key, key, theme)} {action}" for key, action in HELP_KEYS]
    keys[-1] = f"and {keys[-1]}"
    return f" (Press {', '.join(keys)})"


def render_prompt(state: PromptState, config: CheckboxConfig) -> str:
    """Render the whole prompt block for ``state`` as newline-joined lines."""
    theme = config.theme
    message = paint(theme.bold, str(config.message), theme)

    if state.is_done:
        labels = ", ".join(item.label for item in selected(state.items))
        return f"{theme.done_prefix} {message} {paint(theme.answer, labels, theme)}"

    header = f"{theme.prefix} {message}"
    if state.show_help:
        header += help_line(config.instructions, theme)

    lines = [header]
    lines.extend(render_page(state.items, state.active, state.window_start, config.page_size, theme))
    if state.error:
        lines.append(paint(theme.error, f"> {state.error}", theme))
    return "\n".join(lines)
