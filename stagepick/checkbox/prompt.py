"""Prompt runtime: owns the current snapshot and drives the terminal.

The runtime reads one key at a time, hands it to the dispatcher, and redraws
the prompt from the resulting snapshot. Key reads happen in a worker thread
via ``asyncio.to_thread`` so an asynchronous validator can run on the event
loop; no key is read while a submit is being validated, so keys typed in the
meantime stay queued in the terminal and are applied afterwards to the
post-validation snapshot.
"""

from __future__ import annotations

import asyncio
import logging
import os
import sys

from ..input import read_key
from ..screen import InlineScreen
from ..terminal import TerminalController
from .dispatch import CheckboxDispatcher, selected_values
from .errors import NotATerminalError
from .pagination import render_prompt
from .state import CheckboxConfig, PromptState

logger = logging.getLogger(__name__)

INTERRUPT_KEYS = frozenset({"CTRL_C"})


class CheckboxPrompt:
    """Interactive multi-select list.

    Construction copies the choices and raises ``NoSelectableChoicesError``
    when none is selectable, before anything is drawn.
    """

    def __init__(self, config: CheckboxConfig) -> None:
        self.config = config
        self.dispatcher = CheckboxDispatcher(config)
        self.state: PromptState = self.dispatcher.reveal(PromptState.initial(config.choices))
        self._skip_next_lf = False

    @property
    def result(self) -> list | None:
        """Selected values once the prompt is done, else ``None``."""
        if not self.state.is_done:
            return None
        return selected_values(self.state)

    def render(self) -> str:
        return render_prompt(self.state, self.config)

    async def feed(self, key: str) -> bool:
        """Apply one key token and return whether the prompt is done.

        ``CTRL_C`` raises ``KeyboardInterrupt``. A line feed directly after a
        carriage return is dropped so CRLF input submits only once.
        """
        if key in INTERRUPT_KEYS:
            raise KeyboardInterrupt
        if self._skip_next_lf and key == "ENTER_LF":
            self._skip_next_lf = False
            return self.state.is_done
        self._skip_next_lf = key == "ENTER_CR"
        self.state = await self.dispatcher.dispatch(self.state, key)
        return self.state.is_done

    async def run_async(self, stdin_fd: int | None = None, stdout_fd: int | None = None) -> list:
        """Run the prompt on the controlling terminal and return the selected values."""
        if stdin_fd is None:
            stdin_fd = sys.stdin.fileno()
        if stdout_fd is None:
            stdout_fd = sys.stdout.fileno()
        if not os.isatty(stdin_fd):
            raise NotATerminalError("checkbox prompt needs an interactive terminal on stdin")

        terminal = TerminalController(stdin_fd, stdout_fd)
        screen = InlineScreen(stdout_fd)
        with terminal.raw_mode():
            try:
                screen.draw(self.render())
                while True:
                    key = await asyncio.to_thread(read_key, stdin_fd)
                    if not key:
                        raise EOFError("terminal input closed")
                    if await self.feed(key):
                        break
                    screen.draw(self.render())
            except BaseException:
                os.write(stdout_fd, b"\r\n")
                raise
            screen.finish(self.render())
        logger.debug("checkbox resolved with %d values", len(self.result or ()))
        return selected_values(self.state)


async def checkbox_async(config: CheckboxConfig) -> list:
    return await CheckboxPrompt(config).run_async()


def checkbox(config: CheckboxConfig) -> list:
    """Show a checkbox prompt and block until the user submits a valid selection."""
    return asyncio.run(checkbox_async(config))
