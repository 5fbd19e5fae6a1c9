"""Character-find motions (``f``/``t`` and their reverse forms)."""

from __future__ import annotations

from typing import Optional

from selector_engine.buffer import Selection

from .context import SelectorContext
from .scan import skip_while, skip_while_reverse


def select_to(
    context: SelectorContext,
    selection: Selection,
    char: str,
    count: int = 1,
    inclusive: bool = True,
) -> Optional[Selection]:
    """Select up to the ``count``-th next ``char`` after the cursor."""

    buffer = context.buffer
    text, end = buffer.text, buffer.end
    begin = buffer.position(selection.cursor)
    last = begin
    while True:
        last, found = skip_while(text, last + 1, end, lambda c: c != char)
        if not found:
            return None
        count -= 1
        if count <= 0:
            break

    return context.range(begin, last if inclusive else last - 1)


def select_to_reverse(
    context: SelectorContext,
    selection: Selection,
    char: str,
    count: int = 1,
    inclusive: bool = True,
) -> Optional[Selection]:
    """Select back to the ``count``-th previous ``char`` before the cursor."""

    buffer = context.buffer
    text = buffer.text
    begin = buffer.position(selection.cursor)
    last = begin
    while True:
        if last == buffer.begin:
            return None
        last, found = skip_while_reverse(
            text, last - 1, buffer.begin, lambda c: c != char
        )
        if not found:
            return None
        count -= 1
        if count <= 0:
            break

    return context.range(begin, last if inclusive else last + 1)


__all__ = ["select_to", "select_to_reverse"]
