"""Read-only buffer snapshot used by every selector."""

from __future__ import annotations

from bisect import bisect_right
from typing import Optional

from .document import BufferDocument
from .state import BufferCoord
from .validation import ensure_coord

# Character read at the one-past-the-end position.
END_SENTINEL = "\n"


class Buffer:
    """Flattened view over a :class:`BufferDocument`.

    Selectors scan the buffer through integer *positions*: offsets into
    :attr:`text`, one per codepoint. ``begin`` is ``0`` and ``end`` is
    ``len(text)``; reading at ``end`` yields :data:`END_SENTINEL` so edge
    scans never need a bounds check before dereferencing.
    """

    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[BufferDocument] = None,
    ) -> None:
        self.name = name
        self.document = document or BufferDocument()
        lines = self.document.snapshot()
        self.text = "".join(lines)
        starts = []
        running = 0
        for line in lines:
            starts.append(running)
            running += len(line)
        self._line_starts = tuple(starts)

    @classmethod
    def from_text(cls, text: str, *, name: str = "default") -> "Buffer":
        return cls(name=name, document=BufferDocument.from_text(text))

    @property
    def version(self) -> int:
        return self.document.version

    @property
    def line_count(self) -> int:
        return self.document.line_count

    def __getitem__(self, line: int) -> str:
        return self.document.get_line(line)

    @property
    def begin(self) -> int:
        return 0

    @property
    def end(self) -> int:
        return len(self.text)

    def char_at(self, position: int) -> str:
        if position == len(self.text):
            return END_SENTINEL
        return self.text[position]

    def byte_at(self, coord: BufferCoord) -> str:
        return self.char_at(self.position(coord))

    def position(self, coord: tuple[int, int]) -> int:
        """Return the position of ``coord`` (the buffer's iterator_at)."""

        line, column = ensure_coord(self.document, BufferCoord(*coord))
        if line == self.line_count:
            return len(self.text)
        return self._line_starts[line] + column

    def coord(self, position: int) -> BufferCoord:
        if position >= len(self.text):
            return self.end_coord()
        line = bisect_right(self._line_starts, position) - 1
        return BufferCoord(line, position - self._line_starts[line])

    def line_start(self, line: int) -> int:
        if line >= self.line_count:
            return len(self.text)
        return self._line_starts[line]

    def back_coord(self) -> BufferCoord:
        """Coordinate of the last character (always the final newline)."""

        return self.coord(len(self.text) - 1)

    def end_coord(self) -> BufferCoord:
        return BufferCoord(self.line_count, 0)

    def is_end(self, coord: BufferCoord) -> bool:
        return coord >= self.end_coord()

    def string(self, begin: BufferCoord, end: BufferCoord) -> str:
        """Return the text in ``[begin, end)``."""

        return self.text[self.position(begin) : self.position(end)]

    def is_bol(self, coord: BufferCoord) -> bool:
        return coord.column == 0

    def is_eol(self, coord: BufferCoord) -> bool:
        return self.is_end(coord) or len(self[coord.line]) == coord.column + 1


__all__ = ["Buffer", "END_SENTINEL"]
