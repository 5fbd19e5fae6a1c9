"""Buffer snapshots, coordinates, and selection values."""

from .buffer import END_SENTINEL, Buffer
from .document import BufferDocument
from .state import (
    TARGET_EOL,
    BufferCoord,
    Selection,
    SelectionList,
    keep_direction,
    target_eol,
)
from .validation import BufferValidationError, ensure_coord

__all__ = [
    "Buffer",
    "BufferCoord",
    "BufferDocument",
    "BufferValidationError",
    "END_SENTINEL",
    "Selection",
    "SelectionList",
    "TARGET_EOL",
    "ensure_coord",
    "keep_direction",
    "target_eol",
]
