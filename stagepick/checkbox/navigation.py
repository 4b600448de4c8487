"""Cursor bounds and movement over selectable items."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .errors import NoSelectableChoicesError
from .items import Items, is_selectable

Direction = Literal["up", "down"]

_OFFSETS: dict[str, int] = {"up": -1, "down": 1}


@dataclass(frozen=True)
class Bounds:
    """Indices of the first and last selectable items."""

    first: int
    last: int


def compute_bounds(items: Items) -> Bounds:
    """Locate the first and last selectable items.

    Raises ``NoSelectableChoicesError`` when nothing is selectable; callers
    rely on this to reject a prompt before it draws anything.
    """
    selectable = [index for index, item in enumerate(items) if is_selectable(item)]
    if not selectable:
        raise NoSelectableChoicesError()
    return Bounds(first=selectable[0], last=selectable[-1])


def move_active(
    items: Items,
    active: int,
    bounds: Bounds,
    direction: Direction,
    loop: bool,
) -> int:
    """Return the active index after one up/down step.

    Runs of disabled items are skipped. Without ``loop`` the cursor stays put
    at ``bounds.first`` (moving up) and ``bounds.last`` (moving down); with
    ``loop`` the scan wraps around the ends of the list.
    """
    offset = _OFFSETS[direction]
    if not loop:
        if direction == "up" and active == bounds.first:
            return active
        if direction == "down" and active == bounds.last:
            return active

    count = len(items)
    nxt = active
    for _ in range(count):
        nxt = (nxt + offset) % count
        if is_selectable(items[nxt]):
            return nxt
    return active
