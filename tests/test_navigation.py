"""Tests for selectable bounds and cursor movement.

Checks disabled-run skipping plus clamped vs. looping behavior at the ends.
"""

from __future__ import annotations

import unittest

from stagepick.checkbox.errors import NoSelectableChoicesError
from stagepick.checkbox.items import Item
from stagepick.checkbox.navigation import Bounds, compute_bounds, move_active


def _items(*disabled: bool) -> tuple[Item, ...]:
    return tuple(Item(value=i, label=str(i), disabled=flag) for i, flag in enumerate(disabled))


class BoundsTests(unittest.TestCase):
    def test_bounds_skip_disabled_edges(self) -> None:
        items = _items(True, False, True, False, True)
        self.assertEqual(compute_bounds(items), Bounds(first=1, last=3))

    def test_no_selectable_items_is_fatal(self) -> None:
        with self.assertRaises(NoSelectableChoicesError):
            compute_bounds(_items(True, True))
        with self.assertRaises(NoSelectableChoicesError):
            compute_bounds(())


class MoveActiveTests(unittest.TestCase):
    def test_down_skips_run_of_disabled_items(self) -> None:
        items = _items(False, True, True, False)
        bounds = compute_bounds(items)

        self.assertEqual(move_active(items, 0, bounds, "down", loop=False), 3)
        self.assertEqual(move_active(items, 3, bounds, "up", loop=False), 0)

    def test_without_loop_cursor_stops_at_bounds(self) -> None:
        items = _items(True, False, False, True)
        bounds = compute_bounds(items)

        self.assertEqual(move_active(items, bounds.first, bounds, "up", loop=False), bounds.first)
        self.assertEqual(move_active(items, bounds.last, bounds, "down", loop=False), bounds.last)

    def test_with_loop_cursor_wraps_around(self) -> None:
        items = _items(True, False, False, True)
        bounds = compute_bounds(items)

        self.assertEqual(move_active(items, bounds.first, bounds, "up", loop=True), bounds.last)
        self.assertEqual(move_active(items, bounds.last, bounds, "down", loop=True), bounds.first)

    def test_single_selectable_item_stays_put_when_looping(self) -> None:
        items = _items(True, False, True)
        bounds = compute_bounds(items)

        self.assertEqual(move_active(items, 1, bounds, "down", loop=True), 1)
        self.assertEqual(move_active(items, 1, bounds, "up", loop=True), 1)


if __name__ == "__main__":
    unittest.main()
