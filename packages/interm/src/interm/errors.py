"""
Error types raised by interm.

Every error derives from InTermError and also from the builtin exception it
specialises, so callers can catch either.
"""
from __future__ import annotations


class InTermError(Exception):
    """Base class for all interm errors."""


class EmptyBlockError(InTermError, ValueError):
    """A Block was constructed without any lines."""

    def __init__(self) -> None:
        super().__init__("a block needs at least one line")


class LineIndexError(InTermError, IndexError):
    """A row index does not address a line of the block."""

    def __init__(self, index: int | None, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f"index {index} not found (block has {length} lines)")


class CursorError(InTermError, OSError):
    """Writing a control sequence or text to the output stream failed."""


class LineInUseError(InTermError, ValueError):
    """A Line was passed twice, or already belongs to another Block."""

    def __init__(self, line: object, position: int) -> None:
        self.line = line
        self.position = position
        super().__init__(f"line at position {position} is repeated or already belongs to a block")
