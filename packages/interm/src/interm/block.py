"""
Block: an ordered set of interactive lines and the terminal cursor they share.

Provides:
- Block: prints its lines once, then rewrites any one of them in place

All cursor movement is relative. The Block keeps ``cursor_row`` as the
authoritative shadow of where the terminal cursor is, counted in rows from
the first printed line. Anything written to the same stream outside the
Block's API invalidates that shadow; this cannot be detected, so callers
must route every write through the Block while it is active.

A Block is not thread-safe. Concurrent producers should hand their updates
to a single consumer, see ``interm.updater.BlockUpdater``.
"""
from __future__ import annotations

import logging
from typing import Iterable

from .errors import EmptyBlockError, LineIndexError, LineInUseError
from .line import Line
from .terminal import ProcessTerminal, Terminal

logger = logging.getLogger(__name__)


class Block:
    """
    A block of interactive lines in the terminal.

    Example::

        lines = [Line(f"Download {i}") for i in range(10)]
        with Block(lines) as block:
            block.update_element(lines[3], "Download 3: 40%")
    """

    def __init__(self, lines: Iterable[Line], terminal: Terminal | None = None) -> None:
        lines = list(lines)
        if not lines:
            raise EmptyBlockError()

        seen: set[int] = set()
        for position, line in enumerate(lines):
            # An index is assigned once; a shared Line would map to two rows.
            if line.index is not None or id(line) in seen:
                raise LineInUseError(line, position)
            seen.add(id(line))

        for idx, line in enumerate(lines):
            line.index = idx

        self.lines: list[Line] = lines
        self.terminal: Terminal = terminal if terminal is not None else ProcessTerminal()
        self._cursor_row = 0

        self._write_inline("".join(f"{line.content}\n" for line in lines))
        self._cursor_row = len(lines)
        logger.debug("Block created with %d lines", len(lines))

    # ─── State ───────────────────────────────────────────────────────────────

    @property
    def cursor_row(self) -> int:
        """Row the cursor is on, relative to the first line. len(self) is the resting row."""
        return self._cursor_row

    @property
    def resting_row(self) -> int:
        return len(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def __enter__(self) -> "Block":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ─── Updates ─────────────────────────────────────────────────────────────

    def update_element(
        self,
        line: Line,
        content: str,
        move_cursor_back: bool = True,
        clear: bool = True,
    ) -> None:
        """
        Rewrite the row of ``line`` with ``content``.

        The row is cleared first (unless ``clear`` is False) so shorter
        content leaves no trailing characters behind. With
        ``move_cursor_back`` the cursor returns to the row it was on before
        the call; otherwise it stays on the updated row.

        Raises LineIndexError when ``line`` has no index inside this block,
        and CursorError when the terminal write fails.
        """
        idx = self._check_index(line.index)
        previous_row = self._cursor_row

        self._move_to(idx)
        if clear:
            self.terminal.clear_line()
        self._write_inline(content)

        target = self.lines[idx]
        target.update_content(content)
        if line is not target:
            line.update_content(content)
        logger.debug("Updated line %d", idx)

        if move_cursor_back:
            self._move_to(previous_row)

    def update_line(
        self,
        idx: int,
        content: str,
        move_cursor_back: bool = True,
        clear: bool = True,
    ) -> None:
        """Same as update_element, addressing the line by index."""
        self._check_index(idx)
        self.update_element(self.lines[idx], content, move_cursor_back, clear)

    # ─── Cursor movement ─────────────────────────────────────────────────────

    def goto_idx(self, idx: int) -> None:
        """
        Move the cursor to the row of line ``idx`` without changing content.

        The index is relative to the block, not the terminal: with 10 lines
        valid indices are 0 to 9. On LineIndexError nothing is written and
        the cursor stays where it was.
        """
        self._move_to(self._check_index(idx))

    def goto_element(self, line: Line) -> None:
        self.goto_idx(self._check_index(line.index))

    def goto_end(self) -> None:
        """Move the cursor to the resting row below the last line."""
        self._move_to(self.resting_row)

    # ─── Clearing ────────────────────────────────────────────────────────────

    def clear_line(self) -> None:
        """Clear the row the cursor is on. The cursor does not move."""
        self.terminal.clear_line()
        if self._cursor_row < len(self.lines):
            self.lines[self._cursor_row].update_content("")

    def clear_lines(self) -> None:
        """
        Clear every line top to bottom, then return to the resting row.

        Not atomic: if a write fails part way, the rows above the failure
        are already cleared and cursor_row points at the last row reached.
        """
        for idx in range(len(self.lines)):
            self._move_to(idx)
            self.clear_line()
        self._move_to(self.resting_row)

    # ─── Cursor visibility ───────────────────────────────────────────────────

    def hide_cursor(self) -> None:
        self.terminal.hide_cursor()

    def show_cursor(self) -> None:
        self.terminal.show_cursor()

    def close(self) -> None:
        """Make the cursor visible again. Called on context manager exit."""
        self.show_cursor()

    # ─── Internals ───────────────────────────────────────────────────────────

    def _check_index(self, idx: int | None) -> int:
        if idx is None or not 0 <= idx < len(self.lines):
            raise LineIndexError(idx, len(self.lines))
        return idx

    def _move_to(self, row: int) -> None:
        delta = row - self._cursor_row
        if delta:
            self.terminal.move_by(delta)
            logger.debug("Cursor moved %+d rows to row %d", delta, row)
        # Only committed once the move has been written.
        self._cursor_row = row

    def _write_inline(self, text: str) -> None:
        self.terminal.write(f"\r{text}\r")
