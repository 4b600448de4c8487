"""Key dispatch for the checkbox prompt.

Maps key tokens from ``stagepick.input.read_key`` to transitions over an
immutable ``PromptState``. Every transition except submit is synchronous;
submit awaits the validator before deciding whether the prompt is done.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import replace

from ..key_registry import KeyComboBinding, KeyComboRegistry
from .errors import ToggleHookError
from .items import (
    Item,
    Items,
    invert,
    jump_and_toggle,
    select_all_toggle,
    selected,
    toggle,
)
from .navigation import move_active
from .pagination import window_start
from .state import CheckboxConfig, PromptState

logger = logging.getLogger(__name__)

SUBMIT_KEYS = frozenset({"ENTER_CR", "ENTER_LF"})
UP_KEYS = ("UP", "k", "CTRL_P")
DOWN_KEYS = ("DOWN", "j", "CTRL_N")
TOGGLE_KEYS = (" ",)
SELECT_ALL_KEYS = ("a",)
INVERT_KEYS = ("i",)
DIGIT_KEYS = frozenset("0123456789")

REQUIRED_MESSAGE = "At least one choice must be selected"
INVALID_MESSAGE = "You must select a valid value"


def apply_toggle_hook(config: CheckboxConfig, items: Items) -> Items:
    """Run ``config.on_toggle`` over ``items`` and check what it may change.

    The hook may relabel items and change checked flags. A result that adds,
    removes or reorders items, or changes which items are disabled, raises
    ``ToggleHookError``. Disabled items the hook checks are reset to unchecked.
    """
    if config.on_toggle is None:
        return items
    result = tuple(config.on_toggle(items))
    if len(result) != len(items):
        raise ToggleHookError(f"toggle hook returned {len(result)} items, expected {len(items)}")
    adopted: list[Item] = []
    for index, (before, after) in enumerate(zip(items, result)):
        if not isinstance(after, Item):
            raise ToggleHookError(f"toggle hook returned {type(after).__name__} at index {index}")
        if after.value is not before.value and after.value != before.value:
            raise ToggleHookError(f"toggle hook changed the value at index {index}")
        if bool(after.disabled) != bool(before.disabled):
            raise ToggleHookError(f"toggle hook changed the disabled marker at index {index}")
        if after.disabled and after.checked:
            after = replace(after, checked=False)
        adopted.append(after)
    return tuple(adopted)


class CheckboxDispatcher:
    """State machine driving one checkbox prompt.

    Transitions only apply while the state is ``pending``; once ``done`` every
    key is ignored.
    """

    def __init__(self, config: CheckboxConfig) -> None:
        self.config = config
        self._registry: KeyComboRegistry[PromptState] = KeyComboRegistry().register_bindings(
            KeyComboBinding(UP_KEYS, lambda state: self._move(state, "up")),
            KeyComboBinding(DOWN_KEYS, lambda state: self._move(state, "down")),
            KeyComboBinding(TOGGLE_KEYS, self._toggle_active),
            KeyComboBinding(SELECT_ALL_KEYS, self._select_all),
            KeyComboBinding(INVERT_KEYS, self._invert),
        )

    def reveal(self, state: PromptState, **changes) -> PromptState:
        """Return ``state`` with ``changes`` applied and the window following the cursor."""
        nxt = replace(state, **changes)
        start = window_start(
            len(nxt.items),
            nxt.active,
            self.config.page_size,
            self.config.loop,
            nxt.window_start,
        )
        if start == nxt.window_start:
            return nxt
        return replace(nxt, window_start=start)

    def _move(self, state: PromptState, direction: str) -> PromptState:
        active = move_active(state.items, state.active, state.bounds, direction, self.config.loop)
        if active == state.active:
            return state
        return self.reveal(state, active=active)

    def _toggle_active(self, state: PromptState) -> PromptState:
        items = toggle(state.items, state.active)
        items = apply_toggle_hook(self.config, items)
        return replace(state, items=items, error=None, show_help=False)

    def _select_all(self, state: PromptState) -> PromptState:
        return replace(state, items=select_all_toggle(state.items), error=None)

    def _invert(self, state: PromptState) -> PromptState:
        return replace(state, items=invert(state.items), error=None)

    def _jump(self, state: PromptState, key: str) -> PromptState:
        position = int(key) - 1
        items, active = jump_and_toggle(state.items, state.active, position)
        if items is state.items:
            return state
        return self.reveal(state, items=items, active=active, error=None)

    def handle_key(self, state: PromptState, key: str) -> PromptState:
        """Apply a non-submit key. Unknown keys return ``state`` unchanged."""
        if state.is_done:
            return state
        nxt = self._registry.dispatch(key, state)
        if nxt is not None:
            return nxt
        if key in DIGIT_KEYS:
            return self._jump(state, key)
        return state

    async def submit(self, state: PromptState) -> PromptState:
        """Validate the current selection and finish the prompt when it is accepted.

        Exceptions raised by the validator propagate unchanged.
        """
        if state.is_done:
            return state
        selection = selected(state.items)
        if self.config.required and not selection:
            logger.debug("submit rejected: selection required")
            return replace(state, error=REQUIRED_MESSAGE)

        verdict = self.config.validate(selection)
        if inspect.isawaitable(verdict):
            verdict = await verdict
        if verdict is True:
            logger.debug("submit accepted with %d selected", len(selection))
            return replace(state, status="done", error=None)

        message = verdict if isinstance(verdict, str) and verdict else INVALID_MESSAGE
        logger.debug("submit rejected by validator: %s", message)
        return replace(state, error=message)

    async def dispatch(self, state: PromptState, key: str) -> PromptState:
        if key in SUBMIT_KEYS:
            return await self.submit(state)
        return self.handle_key(state, key)


def selected_values(state: PromptState) -> list:
    """Return values of checked items in original order."""
    return [item.value for item in selected(state.items)]
