"""Line storage backing buffer snapshots."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence


@dataclass(frozen=True, slots=True)
class BufferDocument:
    """Immutable list of lines, every one terminated by ``"\\n"``.

    Keeping the newline on each line means the last real character of the
    buffer is always a newline, which the selectors rely on as an edge
    sentinel.
    """

    _lines: tuple[str, ...] = field(default_factory=lambda: ("\n",))
    version: int = 0

    @classmethod
    def from_text(cls, text: str, *, version: int = 0) -> "BufferDocument":
        parts = text.split("\n")
        if parts and parts[-1] == "":
            parts.pop()
        return cls.from_lines(parts, version=version)

    @classmethod
    def from_lines(
        cls, lines: Iterable[str], *, version: int = 0
    ) -> "BufferDocument":
        normalized = tuple(
            line if line.endswith("\n") else line + "\n" for line in lines
        )
        return cls(_lines=normalized or ("\n",), version=version)

    def snapshot(self) -> Sequence[str]:
        """Return the lines without exposing internal mutability."""

        return self._lines

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> str:
        return self._lines[index]
