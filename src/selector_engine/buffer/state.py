"""Coordinates, selections, and selection lists over buffer snapshots."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator, NamedTuple, Optional, Sequence

from selector_engine.errors import EmptyResultError

if TYPE_CHECKING:
    from .buffer import Buffer

# Column target meaning "stick to the end of the line".
TARGET_EOL = sys.maxsize


class BufferCoord(NamedTuple):
    """``(line, column)`` pair; columns count codepoints within the line."""

    line: int
    column: int


@dataclass(frozen=True, slots=True)
class Selection:
    """Directed span from ``anchor`` to ``cursor``, both ends inclusive."""

    anchor: BufferCoord
    cursor: BufferCoord
    captures: tuple[str, ...] = ()
    target: Optional[int] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "anchor", BufferCoord(*self.anchor))
        object.__setattr__(self, "cursor", BufferCoord(*self.cursor))
        object.__setattr__(self, "captures", tuple(self.captures))

    @classmethod
    def point(cls, coord: tuple[int, int]) -> "Selection":
        return cls(anchor=BufferCoord(*coord), cursor=BufferCoord(*coord))

    def min(self) -> BufferCoord:
        return min(self.anchor, self.cursor)

    def max(self) -> BufferCoord:
        return max(self.anchor, self.cursor)

    @property
    def is_backward(self) -> bool:
        return self.cursor < self.anchor

    def flipped(self) -> "Selection":
        return Selection(self.cursor, self.anchor, self.captures, self.target)

    def merge_with(self, other: "Selection") -> "Selection":
        """Return a selection covering both, keeping this one's direction."""

        cursor = other.cursor
        anchor = self.anchor
        if anchor < cursor:
            anchor = min(anchor, other.anchor)
        elif anchor > cursor:
            anchor = max(anchor, other.anchor)
        return Selection(anchor, cursor, self.captures, self.target)


def keep_direction(selection: Selection, reference: Selection) -> Selection:
    """Swap ``selection``'s ends so it points the same way as ``reference``."""

    if selection.is_backward != reference.is_backward:
        return selection.flipped()
    return selection


def target_eol(selection: Selection) -> Selection:
    return Selection(
        selection.anchor, selection.cursor, selection.captures, TARGET_EOL
    )


class SelectionList(Sequence[Selection]):
    """Non-empty selections of one buffer, ordered by ascending position."""

    def __init__(
        self,
        buffer: "Buffer",
        selections: Iterable[Selection],
        *,
        main: int | None = None,
    ) -> None:
        items = tuple(selections)
        if not items:
            raise EmptyResultError()
        main_index = len(items) - 1 if main is None else main
        if not 0 <= main_index < len(items):
            raise IndexError(f"main selection {main_index} out of range")
        self.buffer = buffer
        self._selections = items
        self.main_index = main_index

    @classmethod
    def from_unsorted(
        cls,
        buffer: "Buffer",
        selections: Iterable[Selection],
        *,
        main: int | None = None,
    ) -> "SelectionList":
        """Sort ``selections`` and merge the ones that overlap."""

        items = list(selections)
        if not items:
            raise EmptyResultError()
        main_index = len(items) - 1 if main is None else main
        order = sorted(range(len(items)), key=lambda index: items[index].min())

        merged: list[Selection] = []
        merged_main = 0
        for index in order:
            selection = items[index]
            if merged and merged[-1].max() >= selection.min():
                merged[-1] = merged[-1].merge_with(selection)
            else:
                merged.append(selection)
            if index == main_index:
                merged_main = len(merged) - 1
        return cls(buffer, merged, main=merged_main)

    @property
    def main(self) -> Selection:
        return self._selections[self.main_index]

    def __getitem__(self, index):  # type: ignore[override]
        return self._selections[index]

    def __len__(self) -> int:
        return len(self._selections)

    def __iter__(self) -> Iterator[Selection]:
        return iter(self._selections)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SelectionList):
            return (
                self.buffer is other.buffer
                and self._selections == other._selections
                and self.main_index == other.main_index
            )
        if isinstance(other, Sequence):
            return list(self._selections) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"SelectionList({list(self._selections)!r}, main={self.main_index})"


__all__ = [
    "TARGET_EOL",
    "BufferCoord",
    "Selection",
    "SelectionList",
    "keep_direction",
    "target_eol",
]
