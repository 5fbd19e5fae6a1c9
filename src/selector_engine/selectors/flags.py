"""Flags and directions shared by selectors."""

from __future__ import annotations

from enum import Enum, Flag, auto


class ObjectFlags(Flag):
    """Which side(s) of a text object to grow, and whether to skip delimiters."""

    NONE = 0
    TO_BEGIN = auto()
    TO_END = auto()
    INNER = auto()


WHOLE_OBJECT = ObjectFlags.TO_BEGIN | ObjectFlags.TO_END


class MatchDirection(str, Enum):
    FORWARD = "forward"
    BACKWARD = "backward"


__all__ = ["MatchDirection", "ObjectFlags", "WHOLE_OBJECT"]
