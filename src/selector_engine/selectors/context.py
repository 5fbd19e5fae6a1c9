"""Per-call inputs shared by every selector."""

from __future__ import annotations

from dataclasses import dataclass, field

from selector_engine.buffer import Buffer, Selection
from selector_engine.runtime.options import OptionStore


@dataclass(frozen=True, slots=True)
class SelectorContext:
    """Buffer snapshot plus the options the selectors read."""

    buffer: Buffer
    options: OptionStore = field(default_factory=OptionStore)

    @classmethod
    def from_text(cls, text: str, **options: object) -> "SelectorContext":
        return cls(buffer=Buffer.from_text(text), options=OptionStore(options))

    @property
    def extra_word_chars(self) -> tuple[str, ...]:
        return self.options.extra_word_chars

    def range(self, first: int, last: int) -> Selection:
        """Selection from position ``first`` (anchor) to ``last`` (cursor)."""

        return Selection(self.buffer.coord(first), self.buffer.coord(last))

    def cursor_position(self, selection: Selection) -> int:
        return self.buffer.position(selection.cursor)


__all__ = ["SelectorContext"]
