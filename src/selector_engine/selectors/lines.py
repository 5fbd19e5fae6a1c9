"""Line-wise selections and line motions."""

from __future__ import annotations

from typing import Optional

from selector_engine.buffer import BufferCoord, Selection, SelectionList, target_eol

from .context import SelectorContext
from .scan import skip_while
from .unicode import is_horizontal_blank


def select_line(context: SelectorContext, selection: Selection) -> Optional[Selection]:
    """Select the whole line holding the cursor, newline included.

    A cursor sitting on a newline selects the following line instead, so
    repeating the selector walks down the buffer.
    """

    buffer = context.buffer
    text, end = buffer.text, buffer.end
    first = buffer.position(selection.cursor)
    if text[first] == "\n" and first + 1 != end:
        first += 1

    while first != buffer.begin and text[first - 1] != "\n":
        first -= 1

    last = first
    while last + 1 != end and text[last] != "\n":
        last += 1
    return target_eol(context.range(first, last))


def _line_end_column(context: SelectorContext, line: int) -> int:
    # Last character before the newline, or column 0 on an empty line.
    return max(len(context.buffer[line]) - 2, 0)


def select_to_line_end(
    context: SelectorContext, selection: Selection, *, only_move: bool = False
) -> Optional[Selection]:
    begin = selection.cursor
    end = BufferCoord(begin.line, _line_end_column(context, begin.line))
    if end < begin:
        end = begin
    return target_eol(Selection(end if only_move else begin, end))


def select_to_line_begin(
    context: SelectorContext, selection: Selection, *, only_move: bool = False
) -> Optional[Selection]:
    del context
    begin = selection.cursor
    end = BufferCoord(begin.line, 0)
    return Selection(end if only_move else begin, end)


def select_to_first_non_blank(
    context: SelectorContext, selection: Selection
) -> Optional[Selection]:
    buffer = context.buffer
    line = selection.cursor.line
    position, _ = skip_while(
        buffer.text,
        buffer.line_start(line),
        buffer.line_start(line + 1),
        is_horizontal_blank,
    )
    return Selection.point(buffer.coord(position))


def select_lines(context: SelectorContext, selection: Selection) -> Optional[Selection]:
    """Extend both ends of ``selection`` to full lines, keeping its direction."""

    first, last = selection.min(), selection.max()
    first = BufferCoord(first.line, 0)
    last = BufferCoord(last.line, len(context.buffer[last.line]) - 1)
    if selection.is_backward:
        return target_eol(Selection(last, first))
    return target_eol(Selection(first, last))


def trim_partial_lines(
    context: SelectorContext, selection: Selection
) -> Optional[Selection]:
    """Shrink ``selection`` to the complete lines it covers."""

    buffer = context.buffer
    first, last = selection.min(), selection.max()
    if first.column != 0:
        first = BufferCoord(first.line + 1, 0)
    if last.column != len(buffer[last.line]) - 1:
        if last.line == 0:
            return None
        previous = last.line - 1
        last = BufferCoord(previous, len(buffer[previous]) - 1)

    if first > last:
        return None
    if selection.is_backward:
        return target_eol(Selection(last, first))
    return target_eol(Selection(first, last))


def select_buffer(context: SelectorContext) -> SelectionList:
    buffer = context.buffer
    whole = Selection(BufferCoord(0, 0), buffer.back_coord())
    return SelectionList(buffer, [target_eol(whole)])


__all__ = [
    "select_buffer",
    "select_line",
    "select_lines",
    "select_to_first_non_blank",
    "select_to_line_begin",
    "select_to_line_end",
    "trim_partial_lines",
]
