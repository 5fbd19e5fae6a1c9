"""Bounded skip-while scans over any indexable character sequence."""

from __future__ import annotations

from typing import Callable, Sequence

Predicate = Callable[[str], bool]


def skip_while(
    seq: Sequence[str], pos: int, end: int, predicate: Predicate
) -> tuple[int, bool]:
    """Advance from ``pos`` toward ``end`` while ``predicate`` holds.

    Returns the stop position and whether the scan stopped on a
    non-matching element (``False`` means it ran into ``end``).
    """

    while pos < end and predicate(seq[pos]):
        pos += 1
    return pos, pos < end


def skip_while_reverse(
    seq: Sequence[str], pos: int, begin: int, predicate: Predicate
) -> tuple[int, bool]:
    """Move from ``pos`` back toward ``begin`` while ``predicate`` holds.

    ``begin`` itself is inspected. The flag is ``True`` when the scan
    stopped on a non-matching element and ``False`` when it stopped at
    ``begin`` with the predicate still holding.
    """

    while pos > begin and predicate(seq[pos]):
        pos -= 1
    return pos, not predicate(seq[pos])


__all__ = ["Predicate", "skip_while", "skip_while_reverse"]
