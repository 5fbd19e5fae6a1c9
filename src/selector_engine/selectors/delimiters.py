"""Balanced delimiter scanning: bracket matching and surrounding objects."""

from __future__ import annotations

from typing import Optional

from selector_engine.buffer import Selection

from .context import SelectorContext
from .flags import WHOLE_OBJECT, ObjectFlags
from .unicode import is_eol

MATCHING_PAIRS = "(){}[]<>"


def find_closing(
    container: str,
    pos: int,
    end: int,
    opening: str,
    closing: str,
    init_level: int,
    nestable: bool,
) -> Optional[int]:
    """Find the ``closing`` sequence balancing the one opened at ``pos``.

    An ``opening`` sitting at ``pos`` is stepped over first. When
    ``nestable``, every ``opening`` met on the way raises the nesting level
    and the matching ``closing`` is the one bringing it back to zero.
    Returns the index of the last character of that ``closing``.
    """

    level = init_level if nestable else 0

    if end - pos >= len(opening) and container.startswith(opening, pos):
        pos += len(opening)

    while pos < end:
        close = container.find(closing, pos, end)
        if close == -1:
            return None

        if nestable:
            open_ = pos
            while open_ < close:
                open_ = container.find(opening, open_, close)
                if open_ == -1:
                    break
                level += 1
                open_ += len(opening)

        pos = close + len(closing)
        if level == 0:
            return pos - 1
        level -= 1
    return None


def find_surrounding(
    container: str,
    pos: int,
    opening: str,
    closing: str,
    flags: ObjectFlags,
    init_level: int = 0,
) -> Optional[tuple[int, int]]:
    """Locate the ``opening``/``closing`` pair enclosing ``pos``.

    The result is ``(first, last)`` when growing toward the end, and
    ``(last, first)`` otherwise, so the caller can rebuild a selection
    pointing the way it was grown.
    """

    to_begin = bool(flags & ObjectFlags.TO_BEGIN)
    to_end = bool(flags & ObjectFlags.TO_END)
    nestable = opening != closing

    first = pos
    if to_begin and opening != container[pos]:
        # Scan backward by running the forward scan over the reversed prefix
        # with the delimiters swapped and reversed.
        reversed_prefix = container[pos::-1]
        res = find_closing(
            reversed_prefix,
            0,
            len(reversed_prefix),
            closing[::-1],
            opening[::-1],
            init_level,
            nestable,
        )
        if res is None:
            return None
        first = pos - res

    last = pos
    if to_end:
        res = find_closing(
            container, pos, len(container), opening, closing, init_level, nestable
        )
        if res is None:
            return None
        last = res

    if flags & ObjectFlags.INNER:
        if to_begin and first != last:
            first += len(opening)
        if to_end and first != last:
            last -= len(closing)

    return (first, last) if to_end else (last, first)


def select_matching(context: SelectorContext, selection: Selection) -> Optional[Selection]:
    """Select from the next bracket on the cursor line to its partner."""

    buffer = context.buffer
    text = buffer.text
    it = buffer.position(selection.cursor)
    index = -1
    while not is_eol(buffer.char_at(it)):
        index = MATCHING_PAIRS.find(text[it])
        if index != -1:
            break
        it += 1
    if index == -1:
        return None

    begin = it
    level = 0
    if index % 2 == 0:
        opening, closing = MATCHING_PAIRS[index], MATCHING_PAIRS[index + 1]
        while it != buffer.end:
            char = text[it]
            if char == opening:
                level += 1
            elif char == closing:
                level -= 1
                if level == 0:
                    return context.range(begin, it)
            it += 1
    else:
        opening, closing = MATCHING_PAIRS[index - 1], MATCHING_PAIRS[index]
        while True:
            char = text[it]
            if char == closing:
                level += 1
            elif char == opening:
                level -= 1
                if level == 0:
                    return context.range(begin, it)
            if it == buffer.begin:
                break
            it -= 1
    return None


def select_surrounding(
    context: SelectorContext,
    selection: Selection,
    opening: str,
    closing: str,
    level: int = 0,
    flags: ObjectFlags = WHOLE_OBJECT,
) -> Optional[Selection]:
    """Select the delimited object around the cursor.

    Selecting a whole asymmetric pair that is already exactly selected grows
    to the enclosing pair.
    """

    buffer = context.buffer
    text = buffer.text
    nestable = opening != closing
    pos = buffer.position(selection.cursor)
    if not nestable or flags & ObjectFlags.INNER:
        res = find_surrounding(text, pos, opening, closing, flags, level)
        return context.range(*res) if res else None

    char = text[pos]
    if (flags == ObjectFlags.TO_BEGIN and char == opening) or (
        flags == ObjectFlags.TO_END and char == closing
    ):
        level += 1

    res = find_surrounding(text, pos, opening, closing, flags, level)
    if res is None:
        return None

    found = context.range(*res)
    if (
        flags != WHOLE_OBJECT
        or found.min() != selection.min()
        or found.max() != selection.max()
    ):
        return found

    parent = find_surrounding(text, pos, opening, closing, flags, level + 1)
    return context.range(*parent) if parent else None


__all__ = [
    "MATCHING_PAIRS",
    "find_closing",
    "find_surrounding",
    "select_matching",
    "select_surrounding",
]
