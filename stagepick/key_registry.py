"""Reusable key-combo registry primitives."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

S = TypeVar("S")


@dataclass(frozen=True)
class KeyComboBinding(Generic[S]):
    """Mapping from one or more key tokens to a single state transition."""

    combos: tuple[str, ...]
    handler: Callable[[S], S]


class KeyComboRegistry(Generic[S]):
    """Exact-match key-dispatch table."""

    def __init__(self) -> None:
        self._handlers: dict[str, Callable[[S], S]] = {}

    def register_binding(self, binding: KeyComboBinding[S]) -> KeyComboRegistry[S]:
        """Register one binding, overwriting existing handlers for same combos."""
        for combo in binding.combos:
            self._handlers[combo] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyComboBinding[S]) -> KeyComboRegistry[S]:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def dispatch(self, key: str, state: S) -> S | None:
        """Apply the transition bound to ``key``; ``None`` when nothing is bound."""
        handler = self._handlers.get(key)
        if handler is None:
            return None
        return handler(state)
