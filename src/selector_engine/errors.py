"""Error taxonomy for selection operations.

Single-selection selectors signal "not applicable" by returning ``None``;
the exceptions below are reserved for failures that must abort a whole
multi-selection operation.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Classifies why a selection operation failed."""

    NOT_APPLICABLE = "not_applicable"
    INVALID_ARGUMENT = "invalid_argument"
    NO_MATCH = "no_match"
    EMPTY_RESULT = "empty_result"


class SelectorError(RuntimeError):
    """Base class for failures surfaced to the caller."""

    kind: ErrorKind = ErrorKind.NOT_APPLICABLE


class InvalidCaptureError(SelectorError):
    """Raised when a capture index is outside ``[0, mark_count]``."""

    kind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, capture: int, mark_count: int) -> None:
        super().__init__("invalid capture number")
        self.capture = capture
        self.mark_count = mark_count


class NoMatchError(SelectorError):
    """Raised when a regex found no match anywhere it was allowed to look."""

    kind = ErrorKind.NO_MATCH

    def __init__(self, pattern: str) -> None:
        super().__init__(f"'{pattern}': no matches found")
        self.pattern = pattern


class PatternError(SelectorError):
    """Raised when a regular expression does not compile."""

    kind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"'{pattern}': {reason}")
        self.pattern = pattern


class EmptyResultError(SelectorError):
    """Raised instead of producing an empty selection list."""

    kind = ErrorKind.EMPTY_RESULT

    def __init__(self, message: str = "nothing selected") -> None:
        super().__init__(message)


__all__ = [
    "ErrorKind",
    "SelectorError",
    "InvalidCaptureError",
    "NoMatchError",
    "PatternError",
    "EmptyResultError",
]
