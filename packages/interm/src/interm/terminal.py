"""
Terminal abstraction.

Provides:
- Terminal: abstract base class (interface) used by Block
- ProcessTerminal: real terminal writing raw control sequences to stdout
"""
from __future__ import annotations

import logging
import sys
from abc import ABC, abstractmethod
from typing import TextIO

from .config import get_write_log_path
from .errors import CursorError

logger = logging.getLogger(__name__)

# ─────────────────────────────────────────────────────────────────────────────
# Control sequences (CSI = ESC '[')
# ─────────────────────────────────────────────────────────────────────────────

CSI = "\x1b["
CLEAR_LINE = f"{CSI}2K"
HIDE_CURSOR = f"{CSI}?25l"
SHOW_CURSOR = f"{CSI}?25h"


def cursor_up(n: int) -> str:
    """Move up n rows to column 1 (CPL)."""
    return f"{CSI}{n}F"


def cursor_down(n: int) -> str:
    """Move down n rows to column 1 (CNL)."""
    return f"{CSI}{n}E"


# ─────────────────────────────────────────────────────────────────────────────
# Terminal ABC
# ─────────────────────────────────────────────────────────────────────────────

class Terminal(ABC):
    """
    Minimal output-side terminal interface.

    Implementations raise CursorError when the underlying stream rejects a
    write; they never track cursor position themselves.
    """

    @abstractmethod
    def write(self, data: str) -> None:
        """Write output to the terminal."""

    def move_by(self, lines: int) -> None:
        """Move cursor up (negative) or down (positive) by N lines."""
        if lines > 0:
            self.write(cursor_down(lines))
        elif lines < 0:
            self.write(cursor_up(-lines))

    def clear_line(self) -> None:
        """Clear the current line and return to column 0."""
        self.write(f"{CLEAR_LINE}\r")

    def hide_cursor(self) -> None:
        self.write(HIDE_CURSOR)

    def show_cursor(self) -> None:
        self.write(SHOW_CURSOR)


# ─────────────────────────────────────────────────────────────────────────────
# ProcessTerminal
# ─────────────────────────────────────────────────────────────────────────────

class ProcessTerminal(Terminal):
    """
    Real terminal on sys.stdout (or any text stream).

    Every write is flushed immediately so the cursor on screen never lags
    behind the Block's view of it. When a write log path is configured
    (INTERM_WRITE_LOG), everything written is appended to that file too.
    """

    def __init__(self, stream: TextIO | None = None, write_log_path: str | None = None) -> None:
        self._stream = stream
        self._write_log_path = write_log_path if write_log_path is not None else get_write_log_path()

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so pytest's capsys and redirect_stdout are honoured.
        return self._stream if self._stream is not None else sys.stdout

    def write(self, data: str) -> None:
        try:
            self.stream.write(data)
            self.stream.flush()
        except (OSError, ValueError) as exc:
            raise CursorError(f"failed to write to terminal: {exc}") from exc
        if self._write_log_path:
            try:
                with open(self._write_log_path, "a", encoding="utf-8") as f:
                    f.write(data)
            except OSError:
                logger.warning("Could not append to write log %s", self._write_log_path, exc_info=True)
                self._write_log_path = None

    def is_tty(self) -> bool:
        isatty = getattr(self.stream, "isatty", None)
        try:
            return bool(isatty and isatty())
        except ValueError:
            return False
