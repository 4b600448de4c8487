"""Tests for the pagination window and prompt rendering.

Window math is checked for clamped and wrapping lists; rendering is checked
with the plain theme so assertions can compare literal text.
"""

from __future__ import annotations

import unittest

from stagepick.checkbox.items import Item
from stagepick.checkbox.pagination import (
    MORE_CHOICES_HINT,
    help_line,
    render_item,
    render_page,
    render_prompt,
    visible_indices,
    window_start,
)
from stagepick.checkbox.state import CheckboxConfig, PromptState
from stagepick.ui_theme import DEFAULT_THEME, PLAIN_THEME


class WindowStartTests(unittest.TestCase):
    def test_short_list_always_starts_at_zero(self) -> None:
        self.assertEqual(window_start(3, 2, 7, loop=True, previous_start=2), 0)
        self.assertEqual(window_start(7, 6, 7, loop=False, previous_start=4), 0)

    def test_window_keeps_position_while_active_is_visible(self) -> None:
        self.assertEqual(window_start(10, 4, 3, loop=False, previous_start=3), 3)
        self.assertEqual(window_start(10, 5, 3, loop=True, previous_start=3), 3)

    def test_clamped_window_slides_minimally(self) -> None:
        self.assertEqual(window_start(10, 3, 3, loop=False, previous_start=0), 1)
        self.assertEqual(window_start(10, 0, 3, loop=False, previous_start=5), 0)
        self.assertEqual(window_start(10, 9, 3, loop=False, previous_start=0), 7)

    def test_clamped_window_never_runs_past_the_end(self) -> None:
        self.assertEqual(window_start(10, 9, 3, loop=False, previous_start=9), 7)

    def test_looping_window_wraps_backwards_past_start(self) -> None:
        start = window_start(10, 9, 3, loop=True, previous_start=0)

        self.assertEqual(start, 9)
        self.assertEqual(visible_indices(10, start, 3), [9, 0, 1])

    def test_looping_window_wraps_forward_past_end(self) -> None:
        start = window_start(10, 0, 3, loop=True, previous_start=7)

        self.assertEqual(start, 8)
        self.assertEqual(visible_indices(10, start, 3), [8, 9, 0])

    def test_active_row_is_always_visible(self) -> None:
        for loop in (False, True):
            start = 0
            for active in [1, 2, 3, 4, 5, 6, 7, 8, 9, 0, 9, 8, 2]:
                start = window_start(10, active, 4, loop, start)
                self.assertIn(active, visible_indices(10, start, 4))


class RenderItemTests(unittest.TestCase):
    def test_four_states_render_distinctly(self) -> None:
        unchecked = render_item(Item(value="a", label="a"), False, PLAIN_THEME)
        checked = render_item(Item(value="a", label="a", checked=True), False, PLAIN_THEME)
        active = render_item(Item(value="a", label="a"), True, PLAIN_THEME)
        disabled = render_item(Item(value="a", label="a", disabled=True), False, PLAIN_THEME)

        self.assertEqual(unchecked, "  [ ] a")
        self.assertEqual(checked, "  [x] a")
        self.assertEqual(active, "> [ ] a")
        self.assertEqual(disabled, "- a (disabled)")

    def test_disabled_reason_string_and_empty_reason(self) -> None:
        self.assertEqual(render_item(Item(value="a", label="a", disabled="busy"), False, PLAIN_THEME), "- a busy")

    def test_colored_active_row_uses_pointer_and_highlight(self) -> None:
        line = render_item(Item(value="a", label="alpha", checked=True), True, DEFAULT_THEME)

        self.assertIn(DEFAULT_THEME.pointer, line)
        self.assertIn(f"{DEFAULT_THEME.active}alpha", line)
        self.assertIn(f"{DEFAULT_THEME.checked}{DEFAULT_THEME.checked_glyph}", line)

    def test_page_adds_hint_only_when_list_is_longer_than_page(self) -> None:
        items = tuple(Item(value=i, label=str(i)) for i in range(5))

        short = render_page(items, 0, 0, 5, PLAIN_THEME)
        long = render_page(items, 0, 0, 3, PLAIN_THEME)

        self.assertNotIn(MORE_CHOICES_HINT, short)
        self.assertEqual(long[-1], MORE_CHOICES_HINT)
        self.assertEqual(len(long), 4)


class RenderPromptTests(unittest.TestCase):
    def _config(self, **kwargs) -> CheckboxConfig:
        return CheckboxConfig(message="Pick", choices=["a", "b"], theme=PLAIN_THEME, **kwargs)

    def test_default_legend_follows_message(self) -> None:
        config = self._config()
        text = render_prompt(PromptState.initial(config.choices), config)
        header = text.split("\n")[0]

        self.assertTrue(header.startswith("? Pick (Press <space> to select"))
        self.assertIn("and <enter> to proceed)", header)

    def test_instructions_override_and_suppress(self) -> None:
        self.assertEqual(help_line("custom", PLAIN_THEME), "custom")
        self.assertEqual(help_line(False, PLAIN_THEME), "")
        self.assertEqual(help_line("", PLAIN_THEME), "")
        self.assertEqual(help_line(True, PLAIN_THEME), help_line(None, PLAIN_THEME))

    def test_dismissed_help_is_not_rendered(self) -> None:
        config = self._config()
        state = PromptState.initial(config.choices)
        text = render_prompt(PromptState(items=state.items, active=0, bounds=state.bounds, show_help=False), config)

        self.assertEqual(text.split("\n")[0], "? Pick")

    def test_error_footer(self) -> None:
        config = self._config()
        state = PromptState.initial(config.choices)
        text = render_prompt(PromptState(items=state.items, active=0, bounds=state.bounds, error="nope"), config)

        self.assertEqual(text.split("\n")[-1], "> nope")

    def test_done_renders_summary_line(self) -> None:
        config = self._config()
        state = PromptState.initial([{"value": "a", "checked": True}, "b", {"value": "c", "checked": True}])
        done = PromptState(items=state.items, active=0, bounds=state.bounds, status="done")

        self.assertEqual(render_prompt(done, config), "v Pick a, c")


if __name__ == "__main__":
    unittest.main()
