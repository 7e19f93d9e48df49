"""
interm: independently updatable lines in the terminal.

Print a block of lines once, then rewrite any of them in place, e.g. one
progress line per parallel download.
"""
from .block import Block
from .config import VERSION as __version__
from .errors import CursorError, EmptyBlockError, InTermError, LineIndexError, LineInUseError
from .line import Line
from .terminal import ProcessTerminal, Terminal
from .updater import BlockUpdater, LineUpdate

__all__ = [
    "Block",
    "BlockUpdater",
    "CursorError",
    "EmptyBlockError",
    "InTermError",
    "Line",
    "LineIndexError",
    "LineInUseError",
    "LineUpdate",
    "ProcessTerminal",
    "Terminal",
    "__version__",
]
