"""Prompt configuration and the immutable per-step prompt snapshot."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, Literal, Union

from ..ui_theme import DEFAULT_THEME, UITheme
from .items import Item, Items, build_items
from .navigation import Bounds, compute_bounds

DEFAULT_PAGE_SIZE = 7

Status = Literal["pending", "done"]
ValidationResult = Union[bool, str]
Validator = Callable[[Items], Union[ValidationResult, Awaitable[ValidationResult]]]
ToggleHook = Callable[[Items], Sequence[Item]]


def accept_all(_selection: Items) -> bool:
    return True


@dataclass(frozen=True)
class CheckboxConfig:
    """Options recognized by the checkbox prompt.

    ``instructions`` replaces the built-in key legend when it is a string and
    suppresses it when ``False``. ``on_toggle`` runs after every space-key
    toggle and may only change labels and checked flags.
    """

    message: str
    choices: Sequence[Any]
    page_size: int = DEFAULT_PAGE_SIZE
    loop: bool = True
    required: bool = False
    validate: Validator = accept_all
    instructions: str | bool | None = None
    on_toggle: ToggleHook | None = None
    theme: UITheme = field(default=DEFAULT_THEME, repr=False)

    def __post_init__(self) -> None:
        if self.page_size <= 0:
            raise ValueError(f"page_size must be >= 1, got {self.page_size}")


@dataclass(frozen=True)
class PromptState:
    """One snapshot of the prompt; transitions return a new instance."""

    items: Items
    active: int
    bounds: Bounds
    status: Status = "pending"
    error: str | None = None
    show_help: bool = True
    window_start: int = 0

    @classmethod
    def initial(cls, choices: Sequence[Any]) -> PromptState:
        """Copy ``choices`` into items and place the cursor on the first selectable one.

        Raises ``NoSelectableChoicesError`` when every choice is disabled.
        """
        items = build_items(choices)
        bounds = compute_bounds(items)
        return cls(items=items, active=bounds.first, bounds=bounds)

    @property
    def is_done(self) -> bool:
        return self.status == "done"
