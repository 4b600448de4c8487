"""Item model and pure transitions for the checkbox prompt.

Every transition takes a tuple of frozen ``Item`` records and returns a new
tuple; callers never observe in-place mutation. Disabled items are never
touched by any transition, so they can never become checked.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from typing import Any

DEFAULT_DISABLED_REASON = "(disabled)"


@dataclass(frozen=True)
class Choice:
    """Caller-facing description of one entry; copied into an ``Item``."""

    value: Any
    label: str | None = None
    disabled: bool | str = False
    checked: bool = False


@dataclass(frozen=True)
class Item:
    """One prompt row: identifier, display label, disabled marker, checked flag."""

    value: Any
    label: str
    disabled: bool | str = False
    checked: bool = False


Items = tuple[Item, ...]


def _choice_fields(choice: object) -> tuple[Any, str | None, bool | str, bool]:
    if isinstance(choice, (Choice, Item)):
        return choice.value, choice.label, choice.disabled, choice.checked
    if isinstance(choice, Mapping):
        if "value" not in choice:
            raise ValueError(f"choice mapping is missing 'value': {choice!r}")
        label = choice.get("label", choice.get("name"))
        return choice["value"], label, choice.get("disabled", False), bool(choice.get("checked", False))
    return choice, None, False, False


def make_item(choice: object) -> Item:
    """Copy one choice into a fresh ``Item``.

    ``choice`` may be a ``Choice``/``Item``, a mapping with ``value`` and
    optional ``label`` (or ``name``), ``disabled`` and ``checked`` keys, or a
    bare value. Disabled choices are always built unchecked.
    """
    value, label, disabled, checked = _choice_fields(choice)
    if disabled is None:
        disabled = False
    if not isinstance(disabled, (bool, str)):
        disabled = bool(disabled)
    return Item(
        value=value,
        label=label if label else str(value),
        disabled=disabled,
        checked=bool(checked) and not disabled,
    )


def build_items(choices: Iterable[object]) -> Items:
    return tuple(make_item(choice) for choice in choices)


def is_selectable(item: Item) -> bool:
    return not item.disabled


def is_checked(item: Item) -> bool:
    return is_selectable(item) and item.checked


def disabled_reason(item: Item) -> str:
    """Return the text shown after a disabled item's label."""
    if isinstance(item.disabled, str):
        return item.disabled
    return DEFAULT_DISABLED_REASON if item.disabled else ""


def selected(items: Items) -> Items:
    """Return checked items in list order."""
    return tuple(item for item in items if is_checked(item))


def _toggled(item: Item) -> Item:
    return replace(item, checked=not item.checked) if is_selectable(item) else item


def toggle(items: Items, index: int) -> Items:
    """Flip ``checked`` on the item at ``index`` when it is selectable."""
    if not 0 <= index < len(items):
        return items
    return tuple(_toggled(item) if i == index else item for i, item in enumerate(items))


def set_checked(items: Items, value: bool) -> Items:
    """Set ``checked`` to ``value`` on every selectable item."""
    return tuple(replace(item, checked=value) if is_selectable(item) else item for item in items)


def invert(items: Items) -> Items:
    """Flip ``checked`` on every selectable item."""
    return tuple(_toggled(item) for item in items)


def select_all_toggle(items: Items) -> Items:
    """Check everything if anything selectable is unchecked, else uncheck everything.

    The direction is derived from the list passed in on every call, so two
    calls in a row check all and then uncheck all.
    """
    any_unchecked = any(is_selectable(item) and not item.checked for item in items)
    return set_checked(items, any_unchecked)


def jump_target(items: Items, position: int) -> int | None:
    """Return ``position`` when it names a selectable item, else ``None``."""
    if 0 <= position < len(items) and is_selectable(items[position]):
        return position
    return None


def jump_and_toggle(items: Items, active: int, position: int) -> tuple[Items, int]:
    """Move the cursor to ``position`` and toggle that item.

    Returns ``(items, active)`` unchanged when ``position`` is out of range or
    names a disabled item.
    """
    target = jump_target(items, position)
    if target is None:
        return items, active
    return toggle(items, target), target
