"""Regular-expression adapter over the ``regex`` package.

Patterns compile in multi-line, dot-all mode: ``^``/``$`` anchor at line
boundaries and ``.`` also matches newlines. A backward twin is compiled with
``regex.REVERSE`` so backward searches scan from the end of their window.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Collection, Iterator, Optional

import regex

from selector_engine.buffer import Buffer, BufferCoord
from selector_engine.errors import PatternError

from .flags import MatchDirection
from .unicode import is_word

_COMPILE_FLAGS = regex.MULTILINE | regex.DOTALL | regex.VERSION0

Span = tuple[int, int]
# One entry per group, group 0 first; ``None`` for groups that did not take
# part in the match.
MatchResults = tuple[Optional[Span], ...]


@dataclass(frozen=True, slots=True)
class MatchFlags:
    """Whether the end of a search window is a real text boundary.

    The window start needs no flags: searches see the text before it.
    """

    at_line_end: bool = True
    at_word_end: bool = True
    not_initial_null: bool = False


def is_bow(
    buffer: Buffer, coord: BufferCoord, extra: Collection[str] = ("_",)
) -> bool:
    position = buffer.position(coord)
    if position == buffer.begin:
        return is_word(buffer.char_at(position), extra_word_chars=extra)
    return not is_word(
        buffer.char_at(position - 1), extra_word_chars=extra
    ) and is_word(buffer.char_at(position), extra_word_chars=extra)


def is_eow(
    buffer: Buffer, coord: BufferCoord, extra: Collection[str] = ("_",)
) -> bool:
    position = buffer.position(coord)
    if buffer.is_end(coord) or position == buffer.begin:
        return True
    return is_word(
        buffer.char_at(position - 1), extra_word_chars=extra
    ) and not is_word(buffer.char_at(position), extra_word_chars=extra)


def match_flags(
    buffer: Buffer,
    end: int,
    extra: Collection[str] = ("_",),
    *,
    not_initial_null: bool = False,
) -> MatchFlags:
    """Describe the search window ending at position ``end`` of ``buffer``."""

    last = buffer.coord(end)
    return MatchFlags(
        at_line_end=buffer.is_eol(last),
        at_word_end=is_eow(buffer, last, extra),
        not_initial_null=not_initial_null,
    )


def _results(match: "regex.Match[str]", groups: int) -> MatchResults:
    return tuple(
        match.span(group) if match.start(group) != -1 else None
        for group in range(groups + 1)
    )


class Regex:
    """Compiled pattern plus the search primitives the selectors need.

    Searches run over the whole buffer text with ``pos``/``endpos`` bounds,
    so anchors at the window start see the real preceding text. At the
    window end the engine sees the end of the string; a match ending there
    is kept only if it still matches with the real following text in view,
    unless the window end is already a line and word boundary. A zero-width
    match sitting at the window end is dropped unless the end is a real line
    end.
    """

    def __init__(self, pattern: str) -> None:
        self.str = pattern
        try:
            self._forward = regex.compile(pattern, _COMPILE_FLAGS)
            self._backward = regex.compile(pattern, _COMPILE_FLAGS | regex.REVERSE)
        except regex.error as exc:
            raise PatternError(pattern, str(exc)) from exc

    def __repr__(self) -> str:
        return f"Regex({self.str!r})"

    @property
    def mark_count(self) -> int:
        """Number of capture groups, not counting the whole match."""

        return self._forward.groups

    def _matches_through(self, text: str, start: int, stop: int) -> bool:
        # Same pattern pinned to end at ``stop`` with the rest of the text
        # visible, so ``$``, ``\b`` and lookaheads read the real characters.
        tail = len(text) - stop
        pinned = regex.compile(
            f"(?:{self.str})(?=(?s:.){{{tail}}}\\Z)", _COMPILE_FLAGS
        )
        return pinned.match(text, start) is not None

    def _keep(
        self, text: str, match: "regex.Match[str]", end: int, flags: MatchFlags
    ) -> bool:
        if match.end() != end:
            return True
        if match.start() == match.end():
            return flags.at_line_end and not flags.not_initial_null
        if end == len(text) or (flags.at_line_end and flags.at_word_end):
            return True
        return self._matches_through(text, match.start(), end)

    def finditer(
        self, text: str, begin: int, end: int, flags: MatchFlags = MatchFlags()
    ) -> Iterator[MatchResults]:
        """Yield successive non-overlapping matches inside ``[begin, end)``."""

        for match in self._forward.finditer(text, begin, end):
            if self._keep(text, match, end, flags):
                yield _results(match, self.mark_count)

    def search(
        self,
        text: str,
        begin: int,
        end: int,
        flags: MatchFlags = MatchFlags(),
        direction: MatchDirection = MatchDirection.FORWARD,
    ) -> Optional[MatchResults]:
        """Return the first match in ``direction`` inside ``[begin, end)``."""

        if direction is MatchDirection.FORWARD:
            return next(self.finditer(text, begin, end, flags), None)
        for match in self._backward.finditer(text, begin, end):
            if self._keep(text, match, end, flags):
                return _results(match, self.mark_count)
        return None


__all__ = [
    "MatchFlags",
    "MatchResults",
    "Regex",
    "is_bow",
    "is_eow",
    "match_flags",
]
