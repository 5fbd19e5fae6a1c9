"""Regex-driven selection: next/previous match, select all, split."""

from __future__ import annotations

from typing import NamedTuple, Optional

from selector_engine.buffer import Buffer, Selection, SelectionList, keep_direction
from selector_engine.errors import EmptyResultError, InvalidCaptureError, NoMatchError
from selector_engine.runtime import telemetry

from .context import SelectorContext
from .flags import MatchDirection
from .patterns import MatchResults, Regex, match_flags

LOGGER_NAME = "selector_engine.search"


class MatchOutcome(NamedTuple):
    selection: Selection
    wrapped: bool


def _captures(text: str, groups: MatchResults) -> tuple[str, ...]:
    return tuple(text[span[0] : span[1]] if span else "" for span in groups)


def _match_selection(
    buffer: Buffer, first: int, end: int, captures: tuple[str, ...] = ()
) -> Selection:
    # Selections are inclusive: stop on the last matched codepoint.
    last = end if first == end else end - 1
    return Selection(buffer.coord(first), buffer.coord(last), captures)


def _check_capture(regex: Regex, capture: int) -> None:
    if capture < 0 or capture > regex.mark_count:
        raise InvalidCaptureError(capture, regex.mark_count)


def _extra_word_chars(
    selections: SelectionList, context: Optional[SelectorContext]
) -> tuple[str, ...]:
    return (context or SelectorContext(selections.buffer)).extra_word_chars


def find_next_match(
    context: SelectorContext,
    selection: Selection,
    regex: Regex,
    direction: MatchDirection = MatchDirection.FORWARD,
) -> MatchOutcome:
    """Find the next match after (or previous match before) ``selection``.

    The first pass searches from the selection to the buffer edge; when it
    fails the whole buffer is searched again and the outcome is flagged as
    wrapped. Backward results have their cursor on the match start.
    """

    buffer = context.buffer
    text, end = buffer.text, buffer.end
    extra = context.extra_word_chars
    backward = direction is MatchDirection.BACKWARD
    wrapped = False
    found: Optional[MatchResults] = None

    if not backward:
        pos = min(buffer.position(selection.max()) + 1, end)
        if pos != end:
            found = regex.search(text, pos, end, match_flags(buffer, end, extra))
        if found is None:
            wrapped = True
            found = regex.search(text, 0, end, match_flags(buffer, end, extra))
    else:
        pos = buffer.position(selection.min())
        if pos != buffer.begin:
            flags = match_flags(buffer, pos, extra, not_initial_null=True)
            found = regex.search(text, 0, pos, flags, direction)
        if found is None:
            wrapped = True
            flags = match_flags(buffer, end, extra, not_initial_null=True)
            found = regex.search(text, 0, end, flags, direction)

    whole = found[0] if found is not None else None
    if whole is None or whole[0] == end:
        telemetry.record_event(
            "search.no_match",
            level="debug",
            data={"pattern": regex.str, "direction": direction.value},
            logger_name=LOGGER_NAME,
        )
        raise NoMatchError(regex.str)

    if wrapped:
        telemetry.record_event(
            "search.wrapped",
            level="debug",
            data={"pattern": regex.str, "direction": direction.value},
            logger_name=LOGGER_NAME,
        )

    first, last = whole
    result = _match_selection(buffer, first, last, _captures(text, found or ()))
    if backward:
        result = result.flipped()
    return MatchOutcome(result, wrapped)


def select_all_matches(
    selections: SelectionList,
    regex: Regex,
    capture: int = 0,
    *,
    context: Optional[SelectorContext] = None,
) -> SelectionList:
    """Replace every selection with the matches of ``regex`` inside it.

    Each new selection covers capture group ``capture`` of one match, keeps
    the direction of the selection it came from, and carries the text of
    every group as its captures. ``context`` supplies the word characters
    used for boundary checks; it defaults to the options of a fresh context.
    """

    _check_capture(regex, capture)
    buffer = selections.buffer
    text, end = buffer.text, buffer.end
    extra = _extra_word_chars(selections, context)

    with telemetry.span(
        "search::select_all_matches",
        logger_name=LOGGER_NAME,
        component="search",
        metadata={"pattern": regex.str, "capture": capture},
    ) as handle:
        result: list[Selection] = []
        matched = False
        for selection in selections:
            sel_begin = buffer.position(selection.min())
            sel_end = min(buffer.position(selection.max()) + 1, end)
            flags = match_flags(buffer, sel_end, extra)
            for groups in regex.finditer(text, sel_begin, sel_end, flags):
                matched = True
                group = groups[capture]
                if group is None or group[0] == sel_end:
                    continue
                match = _match_selection(buffer, *group, _captures(text, groups))
                result.append(keep_direction(match, selection))

        handle.add_metadata("produced", len(result))
        if not matched:
            raise NoMatchError(regex.str)
        if not result:
            raise EmptyResultError()
        return SelectionList(buffer, result)


def split_selections(
    selections: SelectionList,
    regex: Regex,
    capture: int = 0,
    *,
    context: Optional[SelectorContext] = None,
) -> SelectionList:
    """Cut every selection at the matches of ``regex``.

    The span of capture group ``capture`` in each match ends one fragment
    and starts the next; fragments keep the direction of their selection.
    """

    _check_capture(regex, capture)
    buffer = selections.buffer
    text, end = buffer.text, buffer.end
    extra = _extra_word_chars(selections, context)

    with telemetry.span(
        "search::split_selections",
        logger_name=LOGGER_NAME,
        component="search",
        metadata={"pattern": regex.str, "capture": capture},
    ) as handle:
        result: list[Selection] = []
        matched = False
        for selection in selections:
            window_begin = buffer.position(selection.min())
            sel_end = min(buffer.position(selection.max()) + 1, end)
            flags = match_flags(buffer, sel_end, extra)
            begin = window_begin
            for groups in regex.finditer(text, window_begin, sel_end, flags):
                matched = True
                group = groups[capture]
                if group is None or group[0] == end:
                    continue
                if group[0] != buffer.begin:
                    fragment = _match_selection(buffer, begin, group[0])
                    result.append(keep_direction(fragment, selection))
                begin = group[1]

            if buffer.coord(begin) <= selection.max():
                tail = Selection(buffer.coord(begin), selection.max())
                result.append(keep_direction(tail, selection))

        handle.add_metadata("produced", len(result))
        if not matched:
            raise NoMatchError(regex.str)
        if not result:
            raise EmptyResultError()
        return SelectionList.from_unsorted(buffer, result)


__all__ = [
    "MatchOutcome",
    "find_next_match",
    "select_all_matches",
    "split_selections",
]
