"""Word motions and the word text object."""

from __future__ import annotations

from typing import Optional

from selector_engine.buffer import Selection

from .context import SelectorContext
from .flags import ObjectFlags
from .scan import skip_while, skip_while_reverse
from .unicode import (
    WordType,
    categorize,
    is_eol,
    is_horizontal_blank,
    is_punctuation,
    word_predicate,
)


def select_to_next_word(
    context: SelectorContext,
    selection: Selection,
    word_type: WordType = WordType.WORD,
) -> Optional[Selection]:
    """Select from the cursor to the start of the next word (``w``)."""

    buffer = context.buffer
    text, end = buffer.text, buffer.end
    extra = context.extra_word_chars
    begin = buffer.position(selection.cursor)
    if begin + 1 == end:
        return None
    if categorize(text[begin], word_type, extra) != categorize(
        text[begin + 1], word_type, extra
    ):
        begin += 1

    begin, found = skip_while(text, begin, end, is_eol)
    if not found:
        return None
    last = begin + 1

    is_word = word_predicate(word_type, extra)
    if is_word(text[begin]):
        last, _ = skip_while(text, last, end, is_word)
    elif is_punctuation(text[begin], extra):
        last, _ = skip_while(text, last, end, lambda c: is_punctuation(c, extra))

    last, _ = skip_while(text, last, end, is_horizontal_blank)
    return context.range(begin, last - 1)


def select_to_next_word_end(
    context: SelectorContext,
    selection: Selection,
    word_type: WordType = WordType.WORD,
) -> Optional[Selection]:
    """Select from the cursor to the end of the current or next word (``e``)."""

    buffer = context.buffer
    text, end = buffer.text, buffer.end
    extra = context.extra_word_chars
    begin = buffer.position(selection.cursor)
    if begin + 1 == end:
        return None
    if categorize(text[begin], word_type, extra) != categorize(
        text[begin + 1], word_type, extra
    ):
        begin += 1

    begin, found = skip_while(text, begin, end, is_eol)
    if not found:
        return None
    last, _ = skip_while(text, begin, end, is_horizontal_blank)

    is_word = word_predicate(word_type, extra)
    if is_word(buffer.char_at(last)):
        last, _ = skip_while(text, last, end, is_word)
    elif is_punctuation(buffer.char_at(last), extra):
        last, _ = skip_while(text, last, end, lambda c: is_punctuation(c, extra))

    return context.range(begin, last - 1)


def select_to_previous_word(
    context: SelectorContext,
    selection: Selection,
    word_type: WordType = WordType.WORD,
) -> Optional[Selection]:
    """Select from the cursor back to the start of the previous word (``b``)."""

    buffer = context.buffer
    text = buffer.text
    extra = context.extra_word_chars
    begin = buffer.position(selection.cursor)
    if begin == buffer.begin:
        return None
    if categorize(text[begin], word_type, extra) != categorize(
        text[begin - 1], word_type, extra
    ):
        begin -= 1

    begin, _ = skip_while_reverse(text, begin, buffer.begin, is_eol)
    last = begin

    is_word = word_predicate(word_type, extra)
    last, found = skip_while_reverse(text, last, buffer.begin, is_horizontal_blank)
    if is_word(text[last]):
        last, found = skip_while_reverse(text, last, buffer.begin, is_word)
    elif is_punctuation(text[last], extra):
        last, found = skip_while_reverse(
            text, last, buffer.begin, lambda c: is_punctuation(c, extra)
        )

    # An exhausted scan keeps the buffer start; otherwise step off the
    # character that stopped it.
    return context.range(begin, last + 1 if found else last)


def select_word(
    context: SelectorContext,
    selection: Selection,
    count: int = 1,
    flags: ObjectFlags = ObjectFlags.TO_BEGIN | ObjectFlags.TO_END,
    word_type: WordType = WordType.WORD,
) -> Optional[Selection]:
    """Select the word under the cursor; ``None`` if it is not on one."""

    del count
    buffer = context.buffer
    text, end = buffer.text, buffer.end
    is_word = word_predicate(word_type, context.extra_word_chars)

    first = buffer.position(selection.cursor)
    if not is_word(text[first]):
        return None

    last = first
    if flags & ObjectFlags.TO_BEGIN:
        first, _ = skip_while_reverse(text, first, buffer.begin, is_word)
        if not is_word(text[first]):
            first += 1
    if flags & ObjectFlags.TO_END:
        last, _ = skip_while(text, last, end, is_word)
        if not flags & ObjectFlags.INNER:
            last, _ = skip_while(text, last, end, is_horizontal_blank)
        last -= 1

    if flags & ObjectFlags.TO_END:
        return context.range(first, last)
    return context.range(last, first)


__all__ = [
    "select_to_next_word",
    "select_to_next_word_end",
    "select_to_previous_word",
    "select_word",
]
