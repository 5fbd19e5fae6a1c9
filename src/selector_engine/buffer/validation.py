"""Validation helpers shared across buffer services."""

from __future__ import annotations

from .document import BufferDocument
from .state import BufferCoord


class BufferValidationError(RuntimeError):
    """Raised when a coordinate does not address the buffer snapshot."""

    def __init__(self, message: str, *, coord: BufferCoord | None = None) -> None:
        super().__init__(message)
        self.coord = coord


def ensure_coord(document: BufferDocument, coord: BufferCoord) -> BufferCoord:
    """Return ``coord`` if it names a character or the end of ``document``."""

    line, column = coord
    if line == document.line_count and column == 0:
        return coord
    if line < 0 or line >= document.line_count:
        raise BufferValidationError("Line out of range", coord=coord)
    if column < 0 or column >= len(document.get_line(line)):
        raise BufferValidationError("Column out of range", coord=coord)
    return coord
