"""Exceptions raised by the checkbox prompt."""

from __future__ import annotations


class CheckboxError(Exception):
    """Base class for checkbox prompt errors."""


class NoSelectableChoicesError(CheckboxError, ValueError):
    """Raised at construction when every choice is disabled (or there are none)."""

    def __init__(self) -> None:
        super().__init__("[checkbox prompt] No selectable choices. All choices are disabled.")


class ToggleHookError(CheckboxError, ValueError):
    """Raised when a post-toggle hook reorders, adds, removes or re-disables items."""


class NotATerminalError(CheckboxError, OSError):
    """Raised when the prompt is run without an interactive terminal on stdin."""
