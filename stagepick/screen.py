"""Inline redraw of a multi-line prompt block.

The prompt occupies a block of rows below the current cursor position. Each
frame moves back to the first row of the previous block, clears to the end of
the screen and writes the new block, so the block is replaced in place.
"""

from __future__ import annotations

import os
import shutil

from .ansi import clip_ansi_line

CURSOR_UP = "\x1b[{}A"
CLEAR_TO_END = "\x1b[J"
RESET = "\x1b[0m"


def _terminal_columns() -> int:
    return max(1, shutil.get_terminal_size((80, 24)).columns)


class InlineScreen:
    """Track the rows written by the last frame and repaint over them."""

    def __init__(self, stdout_fd: int, columns: int | None = None) -> None:
        self.stdout_fd = stdout_fd
        self._columns = columns
        self._rows = 0

    @property
    def columns(self) -> int:
        return self._columns if self._columns is not None else _terminal_columns()

    def frame_bytes(self, content: str) -> bytes:
        """Build the byte payload that replaces the previous frame with ``content``.

        Lines are clipped to the terminal width minus one column so the
        terminal never auto-wraps; this keeps ``self._rows`` equal to the
        number of physical rows used. Raw mode disables output translation,
        so rows are joined with an explicit ``\\r\\n``.
        """
        width = max(1, self.columns - 1)
        lines = [clip_ansi_line(line, width) + RESET for line in content.split("\n")]
        parts = ["\r"]
        if self._rows > 1:
            parts.append(CURSOR_UP.format(self._rows - 1))
        parts.append(CLEAR_TO_END)
        parts.append("\r\n".join(lines))
        self._rows = len(lines)
        return "".join(parts).encode("utf-8")

    def draw(self, content: str) -> None:
        os.write(self.stdout_fd, self.frame_bytes(content))

    def finish(self, content: str) -> None:
        """Draw the final frame and leave the cursor on a fresh line below it."""
        payload = self.frame_bytes(content) + b"\r\n"
        os.write(self.stdout_fd, payload)
        self._rows = 0
