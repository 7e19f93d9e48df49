"""Interactive line: one independently rewritable terminal row."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class Line:
    """
    A line that can be updated in place once it belongs to a Block.

    ``index`` is the row offset inside the owning Block. It stays None until
    the Block assigns it at construction; the Block is the only writer.
    Lines compare by identity, so two lines with the same text stay distinct.
    """

    content: str = ""
    index: int | None = None

    def update_content(self, content: str) -> None:
        """Replace the content. Writes nothing to the terminal."""
        self.content = content
