"""Semantic text objects built on the scan primitives.

Every selector takes ``(context, selection, count, flags)`` and returns a
new :class:`Selection`, or ``None`` when the object is not defined at the
cursor. ``TO_BEGIN`` and ``TO_END`` choose the sides grown from the cursor;
the returned selection points toward the end when ``TO_END`` is set and
toward the beginning otherwise.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from selector_engine.buffer import BufferCoord, Selection

from .context import SelectorContext
from .flags import WHOLE_OBJECT, ObjectFlags
from .scan import skip_while, skip_while_reverse
from .unicode import is_blank, is_eol, is_horizontal_blank

SENTENCE_TERMINATORS = ".;!?"


def _oriented(
    context: SelectorContext, first: int, last: int, flags: ObjectFlags
) -> Selection:
    if flags & ObjectFlags.TO_END:
        return context.range(first, last)
    return context.range(last, first)


def select_number(
    context: SelectorContext,
    selection: Selection,
    count: int = 1,
    flags: ObjectFlags = WHOLE_OBJECT,
) -> Optional[Selection]:
    del count
    inner = bool(flags & ObjectFlags.INNER)

    def is_number(char: str) -> bool:
        return char in "0123456789" or (not inner and char == ".")

    buffer = context.buffer
    text, end = buffer.text, buffer.end
    first = buffer.position(selection.cursor)
    last = first

    if not is_number(text[first]) and text[first] != "-":
        return None

    if flags & ObjectFlags.TO_BEGIN:
        first, _ = skip_while_reverse(text, first, buffer.begin, is_number)
        if not is_number(text[first]) and text[first] != "-" and first + 1 != end:
            first += 1

    if flags & ObjectFlags.TO_END:
        if text[last] == "-":
            last += 1
        last, _ = skip_while(text, last, end, is_number)
        if last != buffer.begin:
            last -= 1

    return _oriented(context, first, last, flags)


def select_sentence(
    context: SelectorContext,
    selection: Selection,
    count: int = 1,
    flags: ObjectFlags = WHOLE_OBJECT,
) -> Optional[Selection]:
    """Select the sentence around the cursor.

    Sentences end at ``.``, ``;``, ``!`` or ``?``, or at a paragraph break.
    """

    del count
    buffer = context.buffer
    text, end = buffer.text, buffer.end
    first = buffer.position(selection.cursor)

    if not flags & ObjectFlags.TO_END and first != buffer.begin:
        prev_non_blank, _ = skip_while_reverse(text, first - 1, buffer.begin, is_blank)
        if text[prev_non_blank] in SENTENCE_TERMINATORS:
            first = prev_non_blank

    last = first

    if flags & ObjectFlags.TO_BEGIN:
        saw_non_blank = False
        while first != buffer.begin:
            cur = text[first]
            prev = text[first - 1]
            if not is_horizontal_blank(cur):
                saw_non_blank = True
            if is_eol(prev) and is_eol(cur):
                first += 1
                break
            if prev in SENTENCE_TERMINATORS:
                if saw_non_blank:
                    break
                if flags & ObjectFlags.TO_END:
                    last = first - 1
            first -= 1
        first, _ = skip_while(text, first, end, is_horizontal_blank)

    if flags & ObjectFlags.TO_END:
        while last != end:
            cur = text[last]
            if cur in SENTENCE_TERMINATORS or (
                is_eol(cur) and is_eol(buffer.char_at(last + 1))
            ):
                break
            last += 1
        if not flags & ObjectFlags.INNER and last != end:
            last, _ = skip_while(text, last + 1, end, is_horizontal_blank)
            last -= 1

    return _oriented(context, first, last, flags)


def select_paragraph(
    context: SelectorContext,
    selection: Selection,
    count: int = 1,
    flags: ObjectFlags = WHOLE_OBJECT,
) -> Optional[Selection]:
    """Select the run of lines around the cursor bounded by blank lines."""

    del count
    buffer = context.buffer
    text, end = buffer.text, buffer.end
    first = buffer.position(selection.cursor)

    if (
        not flags & ObjectFlags.TO_END
        and first >= 2
        and text[first - 1] == "\n"
        and text[first - 2] == "\n"
    ):
        first -= 1
    elif (
        flags & ObjectFlags.TO_END
        and first != buffer.begin
        and first + 1 != end
        and text[first - 1] == "\n"
        and text[first] == "\n"
    ):
        first += 1

    last = first

    if flags & ObjectFlags.TO_BEGIN and first != buffer.begin:
        first, _ = skip_while_reverse(text, first, buffer.begin, is_eol)
        if flags & ObjectFlags.TO_END:
            last = first
        while first != buffer.begin:
            if is_eol(text[first - 1]) and is_eol(text[first]):
                first += 1
                break
            first -= 1

    if flags & ObjectFlags.TO_END:
        if last != end and is_eol(text[last]):
            last += 1
        while last != end:
            if last != buffer.begin and is_eol(text[last]) and is_eol(text[last - 1]):
                if not flags & ObjectFlags.INNER:
                    last, _ = skip_while(text, last, end, is_eol)
                break
            last += 1
        last -= 1

    return _oriented(context, first, last, flags)


def select_whitespaces(
    context: SelectorContext,
    selection: Selection,
    count: int = 1,
    flags: ObjectFlags = WHOLE_OBJECT,
) -> Optional[Selection]:
    """Select the blank run under the cursor; newlines count unless inner."""

    del count
    inner = bool(flags & ObjectFlags.INNER)

    def is_whitespace(char: str) -> bool:
        return char in " \t" or (not inner and char == "\n")

    buffer = context.buffer
    text, end = buffer.text, buffer.end
    first = buffer.position(selection.cursor)
    last = first

    if not is_whitespace(text[first]):
        return None

    if flags & ObjectFlags.TO_BEGIN:
        first, _ = skip_while_reverse(text, first, buffer.begin, is_whitespace)
        if not is_whitespace(text[first]):
            first += 1
    if flags & ObjectFlags.TO_END:
        last, _ = skip_while(text, last, end, is_whitespace)
        last -= 1

    return _oriented(context, first, last, flags)


def indent_width(line: str, tabstop: int) -> int:
    """Display width of ``line``'s leading blanks, tabs snapping to stops."""

    indent = 0
    for char in line:
        if char == " ":
            indent += 1
        elif char == "\t":
            indent = (indent // tabstop + 1) * tabstop
        else:
            break
    return indent


def _is_only_whitespaces(line: str) -> bool:
    return all(char in " \t\n" for char in line)


def select_indent(
    context: SelectorContext,
    selection: Selection,
    count: int = 1,
    flags: ObjectFlags = WHOLE_OBJECT,
) -> Optional[Selection]:
    """Select the lines indented at least as deep as the cursor line.

    Empty lines never break the block. In inner mode, blank-only lines at
    either end of the block are left out.
    """

    del count
    to_begin = bool(flags & ObjectFlags.TO_BEGIN)
    to_end = bool(flags & ObjectFlags.TO_END)

    buffer = context.buffer
    tabstop = context.options.tabstop
    pos = selection.cursor
    line = pos.line
    indent = indent_width(buffer[line], tabstop)

    def in_block(index: int) -> bool:
        text = buffer[index]
        return text == "\n" or indent_width(text, tabstop) >= indent

    begin_line = line - 1
    if to_begin:
        while begin_line >= 0 and in_block(begin_line):
            begin_line -= 1
    begin_line += 1

    end_line = line + 1
    if to_end:
        while end_line < buffer.line_count and in_block(end_line):
            end_line += 1
    end_line -= 1

    if flags & ObjectFlags.INNER:
        while begin_line < end_line and _is_only_whitespaces(buffer[begin_line]):
            begin_line += 1
        while begin_line < end_line and _is_only_whitespaces(buffer[end_line]):
            end_line -= 1

    first = BufferCoord(begin_line, 0) if to_begin else pos
    last = BufferCoord(end_line, len(buffer[end_line]) - 1) if to_end else pos
    return Selection(first, last) if to_end else Selection(last, first)


class _ArgClass(Enum):
    NONE = 0
    OPENING = 1
    CLOSING = 2
    DELIMITER = 3


def _classify_argument_char(char: str) -> _ArgClass:
    if char in "([{":
        return _ArgClass.OPENING
    if char in ")]}":
        return _ArgClass.CLOSING
    if char in ",;":
        return _ArgClass.DELIMITER
    return _ArgClass.NONE


def select_argument(
    context: SelectorContext,
    selection: Selection,
    level: int = 0,
    flags: ObjectFlags = WHOLE_OBJECT,
) -> Optional[Selection]:
    """Select the function argument around the cursor.

    ``level`` is the nesting depth to start from; ``0`` selects the argument
    of the innermost bracket. The outer object of a first argument takes the
    blanks after its delimiter, the outer object of a last argument takes
    the delimiter before it.
    """

    buffer = context.buffer
    text, end = buffer.text, buffer.end
    pos = buffer.position(selection.cursor)
    if _classify_argument_char(text[pos]) in (_ArgClass.OPENING, _ArgClass.DELIMITER):
        if pos != buffer.begin:
            pos -= 1

    first_arg = False
    begin = pos
    depth = level
    while begin != buffer.begin:
        kind = _classify_argument_char(text[begin])
        if kind is _ArgClass.CLOSING:
            depth += 1
        elif kind is _ArgClass.OPENING:
            depth -= 1
            if depth < 0:
                first_arg = True
                begin += 1
                break
        elif kind is _ArgClass.DELIMITER and depth == 0:
            begin += 1
            break
        begin -= 1

    last_arg = False
    last = pos
    depth = level
    while last != end:
        kind = _classify_argument_char(text[last])
        if kind is _ArgClass.OPENING:
            depth += 1
        elif last != pos and kind is _ArgClass.CLOSING:
            depth -= 1
            if depth < 0:
                last_arg = True
                last -= 1
                break
        elif kind is _ArgClass.DELIMITER and depth == 0:
            if first_arg and not flags & ObjectFlags.INNER:
                while last + 1 != end and is_blank(text[last + 1]):
                    last += 1
            break
        last += 1

    if flags & ObjectFlags.INNER:
        if not last_arg:
            last -= 1
        begin, _ = skip_while(text, begin, last, is_blank)
        last, _ = skip_while_reverse(text, last, begin, is_blank)
    elif not first_arg and last_arg:
        begin -= 1

    if last == end:
        last -= 1

    if flags & ObjectFlags.TO_BEGIN and not flags & ObjectFlags.TO_END:
        return context.range(pos, begin)
    return context.range(begin if flags & ObjectFlags.TO_BEGIN else pos, last)


__all__ = [
    "SENTENCE_TERMINATORS",
    "indent_width",
    "select_argument",
    "select_indent",
    "select_number",
    "select_paragraph",
    "select_sentence",
    "select_whitespaces",
]
