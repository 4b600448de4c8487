"""Interactive multi-select checkbox prompt.

Pure item transitions, navigation and rendering live in submodules; the
``CheckboxPrompt`` runtime wires them to the terminal.
"""

from .errors import CheckboxError, NoSelectableChoicesError, NotATerminalError, ToggleHookError
from .items import Choice, Item
from .navigation import Bounds
from .prompt import CheckboxPrompt, checkbox, checkbox_async
from .state import CheckboxConfig, PromptState

__all__ = [
    "Bounds",
    "CheckboxConfig",
    "CheckboxError",
    "CheckboxPrompt",
    "Choice",
    "Item",
    "NoSelectableChoicesError",
    "NotATerminalError",
    "PromptState",
    "ToggleHookError",
    "checkbox",
    "checkbox_async",
]
