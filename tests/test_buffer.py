from __future__ import annotations

import pytest

from selector_engine.buffer import (
    TARGET_EOL,
    Buffer,
    BufferCoord,
    BufferDocument,
    BufferValidationError,
    Selection,
    SelectionList,
    keep_direction,
    target_eol,
)
from selector_engine.errors import EmptyResultError


def make_buffer(text: str = "hello\nworld\n") -> Buffer:
    return Buffer.from_text(text)


def test_document_terminates_every_line() -> None:
    document = BufferDocument.from_text("abc\ndef")

    assert list(document.snapshot()) == ["abc\n", "def\n"]
    assert BufferDocument.from_text("").snapshot() == ("\n",)


def test_buffer_positions_and_coords() -> None:
    buffer = make_buffer()

    assert buffer.text == "hello\nworld\n"
    assert buffer.line_count == 2
    assert buffer.end == 12
    assert buffer.position((1, 2)) == 8
    assert buffer.coord(8) == BufferCoord(1, 2)
    assert buffer.coord(buffer.end) == buffer.end_coord() == BufferCoord(2, 0)
    assert buffer.position(buffer.end_coord()) == buffer.end
    assert buffer.back_coord() == BufferCoord(1, 5)


def test_buffer_reads_newline_past_the_end() -> None:
    buffer = make_buffer()

    assert buffer.char_at(buffer.end) == "\n"
    assert buffer.byte_at(BufferCoord(0, 1)) == "e"


def test_buffer_rejects_coords_outside_the_snapshot() -> None:
    buffer = make_buffer()

    with pytest.raises(BufferValidationError):
        buffer.position((0, 6))
    with pytest.raises(BufferValidationError):
        buffer.position((3, 0))


def test_buffer_string_and_line_predicates() -> None:
    buffer = make_buffer()

    assert buffer.string(BufferCoord(0, 1), BufferCoord(1, 0)) == "ello\n"
    assert buffer.is_bol(BufferCoord(1, 0))
    assert buffer.is_eol(BufferCoord(0, 5))
    assert not buffer.is_eol(BufferCoord(0, 4))
    assert buffer.is_end(BufferCoord(2, 0))


def test_selection_direction_helpers() -> None:
    forward = Selection((0, 1), (0, 4))
    backward = forward.flipped()

    assert forward.anchor == BufferCoord(0, 1)
    assert backward.is_backward
    assert backward.min() == BufferCoord(0, 1)
    assert backward.max() == BufferCoord(0, 4)
    assert keep_direction(Selection((0, 6), (0, 8)), backward) == Selection(
        (0, 8), (0, 6)
    )
    assert target_eol(forward).target == TARGET_EOL


def test_selection_list_defaults_main_to_last() -> None:
    buffer = make_buffer()
    selections = SelectionList(
        buffer, [Selection.point((0, 0)), Selection.point((1, 0))]
    )

    assert selections.main == Selection.point((1, 0))
    assert len(selections) == 2


def test_selection_list_rejects_empty_input() -> None:
    with pytest.raises(EmptyResultError):
        SelectionList(make_buffer(), [])


def test_selection_list_sorts_and_merges_overlaps() -> None:
    buffer = make_buffer("hello world\n")
    first = Selection((0, 6), (0, 8))
    second = Selection((0, 0), (0, 1))
    third = Selection((0, 7), (0, 10))

    selections = SelectionList.from_unsorted(buffer, [first, second, third], main=0)

    assert selections == [second, Selection((0, 6), (0, 10))]
    assert selections.main_index == 1
