from __future__ import annotations

from selector_engine.buffer import Selection
from selector_engine.selectors import SelectorContext, select_to, select_to_reverse

TEXT = "a,b,c,d\n"


def make_context() -> SelectorContext:
    return SelectorContext.from_text(TEXT)


def test_select_to_next_char() -> None:
    context = make_context()
    start = Selection.point((0, 0))

    assert select_to(context, start, ",") == Selection((0, 0), (0, 1))
    assert select_to(context, start, ",", count=2) == Selection((0, 0), (0, 3))
    assert select_to(context, start, ",", count=2, inclusive=False) == Selection(
        (0, 0), (0, 2)
    )


def test_select_to_missing_char() -> None:
    context = make_context()
    start = Selection.point((0, 0))

    assert select_to(context, start, "z") is None
    assert select_to(context, start, ",", count=4) is None


def test_select_to_reverse() -> None:
    context = make_context()
    start = Selection.point((0, 6))

    assert select_to_reverse(context, start, ",") == Selection((0, 6), (0, 5))
    assert select_to_reverse(context, start, ",", inclusive=False) == start
    assert select_to_reverse(context, start, ",", count=3) == Selection((0, 6), (0, 1))
    assert select_to_reverse(context, start, ",", count=4) is None
