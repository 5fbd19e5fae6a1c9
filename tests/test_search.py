from __future__ import annotations

import pytest

from selector_engine.buffer import Buffer, Selection, SelectionList
from selector_engine.errors import (
    EmptyResultError,
    ErrorKind,
    InvalidCaptureError,
    NoMatchError,
    PatternError,
)
from selector_engine.selectors import (
    MatchDirection,
    Regex,
    SelectorContext,
    find_next_match,
    select_all_matches,
    split_selections,
)
from selector_engine.selectors.patterns import match_flags


def make_selections(text: str, *selections: Selection) -> SelectionList:
    return SelectionList(Buffer.from_text(text), selections)


def spans(selections: SelectionList) -> list[tuple[tuple[int, int], tuple[int, int]]]:
    return [(tuple(sel.anchor), tuple(sel.cursor)) for sel in selections]


def test_regex_counts_groups_and_rejects_bad_patterns() -> None:
    assert Regex("(a)|(b)").mark_count == 2
    assert Regex("abc").mark_count == 0

    with pytest.raises(PatternError) as excinfo:
        Regex("(")
    assert excinfo.value.kind is ErrorKind.INVALID_ARGUMENT


def test_find_next_match_forward() -> None:
    context = SelectorContext.from_text("abXcdXef\n")

    outcome = find_next_match(context, Selection.point((0, 0)), Regex("X"))

    assert outcome.selection == Selection((0, 2), (0, 2), ("X",))
    assert outcome.wrapped is False


def test_find_next_match_wraps_around() -> None:
    context = SelectorContext.from_text("abXcdXef\n")

    outcome = find_next_match(context, Selection.point((0, 5)), Regex("X"))

    assert outcome.selection.cursor == (0, 2)
    assert outcome.wrapped is True


def test_find_next_match_backward() -> None:
    context = SelectorContext.from_text("abXcdXef\n")
    regex = Regex("X")

    before = find_next_match(
        context, Selection.point((0, 5)), regex, MatchDirection.BACKWARD
    )
    wrapped = find_next_match(
        context, Selection.point((0, 2)), regex, MatchDirection.BACKWARD
    )

    assert before.selection.cursor == (0, 2)
    assert before.wrapped is False
    assert wrapped.selection.cursor == (0, 5)
    assert wrapped.wrapped is True


def test_find_next_match_direction_of_result() -> None:
    context = SelectorContext.from_text("abXcdXef\n")
    regex = Regex("cd")

    forward = find_next_match(context, Selection.point((0, 0)), regex)
    backward = find_next_match(
        context, Selection.point((0, 7)), regex, MatchDirection.BACKWARD
    )

    assert (forward.selection.anchor, forward.selection.cursor) == ((0, 3), (0, 4))
    assert (backward.selection.anchor, backward.selection.cursor) == ((0, 4), (0, 3))


def test_find_next_match_reports_missing_pattern() -> None:
    context = SelectorContext.from_text("abXcdXef\n")

    with pytest.raises(NoMatchError) as excinfo:
        find_next_match(context, Selection.point((0, 0)), Regex("zz"))
    assert str(excinfo.value) == "'zz': no matches found"


def test_select_all_matches() -> None:
    selections = make_selections("foo bar foo\n", Selection((0, 0), (0, 10)))

    result = select_all_matches(selections, Regex("foo"))

    assert spans(result) == [((0, 0), (0, 2)), ((0, 8), (0, 10))]
    assert result[0].captures == ("foo",)


def test_select_all_matches_capture_group() -> None:
    selections = make_selections("foo bar foo\n", Selection((0, 0), (0, 10)))

    result = select_all_matches(selections, Regex("(f)(o+)"), capture=2)

    assert spans(result) == [((0, 1), (0, 2)), ((0, 9), (0, 10))]
    assert result[0].captures == ("foo", "f", "oo")


def test_select_all_matches_keeps_direction() -> None:
    selections = make_selections("foo bar foo\n", Selection((0, 10), (0, 0)))

    result = select_all_matches(selections, Regex("foo"))

    assert spans(result) == [((0, 2), (0, 0)), ((0, 10), (0, 8))]


def test_select_all_matches_errors() -> None:
    selections = make_selections("foo bar foo\n", Selection((0, 0), (0, 10)))

    with pytest.raises(InvalidCaptureError):
        select_all_matches(selections, Regex("(f)"), capture=2)
    with pytest.raises(NoMatchError):
        select_all_matches(selections, Regex("zz"))
    with pytest.raises(EmptyResultError):
        select_all_matches(selections, Regex("(x)?foo"), capture=1)


def test_split_selections() -> None:
    selections = make_selections("a, b,c\n", Selection((0, 0), (0, 5)))

    result = split_selections(selections, Regex(", *"))

    assert spans(result) == [((0, 0), (0, 0)), ((0, 3), (0, 3)), ((0, 5), (0, 5))]


def test_split_selections_errors() -> None:
    selections = make_selections("a, b,c\n", Selection((0, 0), (0, 5)))

    with pytest.raises(InvalidCaptureError):
        split_selections(selections, Regex(","), capture=1)
    with pytest.raises(NoMatchError):
        split_selections(selections, Regex(";"))


def test_split_and_select_all_partition_the_selection() -> None:
    selections = make_selections("a, b,c\n", Selection((0, 0), (0, 5)))
    regex = Regex(", *")

    columns: list[int] = []
    for selection in [
        *select_all_matches(selections, regex),
        *split_selections(selections, regex),
    ]:
        columns.extend(range(selection.min().column, selection.max().column + 1))

    assert sorted(columns) == list(range(6))


def test_end_anchors_see_the_text_after_the_window() -> None:
    buffer = Buffer.from_text("abc\n")
    inside = match_flags(buffer, 2)

    assert not inside.at_line_end and not inside.at_word_end
    assert list(Regex("b$").finditer(buffer.text, 0, 2, inside)) == []
    assert list(Regex(r"b\b").finditer(buffer.text, 0, 2, inside)) == []
    assert list(Regex("c$").finditer(buffer.text, 0, 3, match_flags(buffer, 3))) == [
        ((2, 3),)
    ]


def test_window_end_still_bounds_plain_matches() -> None:
    buffer = Buffer.from_text("abbb\n")

    assert list(Regex("ab+").finditer(buffer.text, 0, 2, match_flags(buffer, 2))) == [
        ((0, 2),)
    ]


def test_select_all_matches_anchors_follow_buffer_text() -> None:
    selections = make_selections("abc\n", Selection((0, 0), (0, 1)))

    with pytest.raises(NoMatchError):
        select_all_matches(selections, Regex("b$"))
    with pytest.raises(NoMatchError):
        select_all_matches(selections, Regex(r"b\b"))

    whole = make_selections("abc\n", Selection((0, 0), (0, 2)))
    assert spans(select_all_matches(whole, Regex("c$"))) == [((0, 2), (0, 2))]


def test_select_all_matches_line_start_inside_a_line() -> None:
    selections = make_selections("abc\n", Selection((0, 1), (0, 2)))

    with pytest.raises(NoMatchError):
        select_all_matches(selections, Regex("^b"))


def test_split_selections_anchors_follow_buffer_text() -> None:
    selections = make_selections("abc\n", Selection((0, 0), (0, 1)))

    with pytest.raises(NoMatchError):
        split_selections(selections, Regex(r"b\b"))


def test_find_next_match_backward_word_end_inside_word() -> None:
    context = SelectorContext.from_text("abc abc\n")

    with pytest.raises(NoMatchError):
        find_next_match(
            context, Selection.point((0, 6)), Regex(r"ab\b"), MatchDirection.BACKWARD
        )


def test_split_selections_keeps_direction() -> None:
    selections = make_selections("ab, cd,ef\n", Selection((0, 8), (0, 0)))

    result = split_selections(selections, Regex(", *"))

    assert spans(result) == [((0, 1), (0, 0)), ((0, 5), (0, 4)), ((0, 8), (0, 7))]
    assert all(sel.anchor >= sel.cursor for sel in result)


def test_split_selections_result_is_sorted() -> None:
    selections = make_selections("a,,b\n", Selection((0, 0), (0, 3)))

    result = split_selections(selections, Regex(","))

    assert spans(result) == [((0, 0), (0, 0)), ((0, 2), (0, 2)), ((0, 3), (0, 3))]
    assert [sel.min() for sel in result] == sorted(sel.min() for sel in result)


def test_regex_operations_accept_a_context() -> None:
    selections = make_selections("foo_bar foo\n", Selection((0, 0), (0, 10)))
    context = SelectorContext.from_text("foo_bar foo\n", extra_word_chars="")

    result = select_all_matches(selections, Regex("foo"), context=context)
    pieces = split_selections(selections, Regex(" "), context=context)

    assert spans(result) == [((0, 0), (0, 2)), ((0, 8), (0, 10))]
    assert spans(pieces) == [((0, 0), (0, 6)), ((0, 8), (0, 10))]
