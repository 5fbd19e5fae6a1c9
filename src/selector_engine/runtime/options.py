"""Read-only option store consulted by the selectors."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional

from . import telemetry

DEFAULT_OPTIONS: Mapping[str, Any] = MappingProxyType(
    {
        "extra_word_chars": ("_",),
        "tabstop": 8,
    }
)


class OptionError(ValueError):
    """Raised when an option value cannot be used."""

    def __init__(self, name: str, message: str) -> None:
        super().__init__(f"option '{name}': {message}")
        self.name = name


def _coerce_word_chars(value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        chars = tuple(value)
    else:
        chars = tuple(str(item) for item in value)
    for char in chars:
        if len(char) != 1:
            raise OptionError("extra_word_chars", f"'{char}' is not a single codepoint")
        if char.isspace():
            raise OptionError("extra_word_chars", "blanks cannot be word characters")
    return tuple(dict.fromkeys(chars))


def _coerce_tabstop(value: Any) -> int:
    try:
        tabstop = int(value)
    except (TypeError, ValueError) as exc:
        raise OptionError("tabstop", f"'{value}' is not an integer") from exc
    if tabstop <= 0:
        raise OptionError("tabstop", "must be positive")
    return tabstop


_COERCERS = {
    "extra_word_chars": _coerce_word_chars,
    "tabstop": _coerce_tabstop,
}


class OptionStore(Mapping[str, Any]):
    """Named option values with validated defaults."""

    def __init__(self, values: Optional[Mapping[str, Any]] = None) -> None:
        merged = dict(DEFAULT_OPTIONS)
        for name, value in (values or {}).items():
            coerce = _COERCERS.get(name)
            if coerce is None:
                raise OptionError(name, "unknown option")
            merged[name] = coerce(value)
        self._values = MappingProxyType(merged)

    @classmethod
    def from_env(cls) -> "OptionStore":
        """Build a store from ``SELECTOR_ENGINE_TABSTOP`` and friends."""

        values: dict[str, Any] = {}
        tabstop = telemetry.env("TABSTOP")
        if tabstop:
            values["tabstop"] = tabstop
        word_chars = telemetry.env("EXTRA_WORD_CHARS")
        if word_chars is not None:
            values["extra_word_chars"] = word_chars
        store = cls(values)
        telemetry.record_event(
            "options.loaded",
            level="debug",
            data={"source": "env", "overrides": sorted(values)},
        )
        return store

    def __getitem__(self, name: str) -> Any:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    @property
    def extra_word_chars(self) -> tuple[str, ...]:
        return self._values["extra_word_chars"]

    @property
    def tabstop(self) -> int:
        return self._values["tabstop"]


__all__ = ["DEFAULT_OPTIONS", "OptionError", "OptionStore"]
