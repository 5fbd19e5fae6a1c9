from __future__ import annotations

import pytest

from selector_engine.buffer import Selection
from selector_engine.runtime import DEFAULT_OPTIONS, OptionError, OptionStore
from selector_engine.runtime import telemetry
from selector_engine.selectors import SelectorContext, select_word


def test_option_store_defaults() -> None:
    store = OptionStore()

    assert store.tabstop == 8
    assert store.extra_word_chars == ("_",)
    assert dict(store) == dict(DEFAULT_OPTIONS)


def test_option_store_coerces_values() -> None:
    store = OptionStore({"extra_word_chars": "-_-", "tabstop": "4"})

    assert store.extra_word_chars == ("-", "_")
    assert store.tabstop == 4


@pytest.mark.parametrize(
    "values",
    [
        {"shiftwidth": 2},
        {"tabstop": 0},
        {"tabstop": "wide"},
        {"extra_word_chars": [" "]},
        {"extra_word_chars": ["ab"]},
    ],
)
def test_option_store_rejects_bad_values(values: dict) -> None:
    with pytest.raises(OptionError):
        OptionStore(values)


def test_option_store_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SELECTOR_ENGINE_TABSTOP", "4")
    monkeypatch.setenv("SELECTOR_ENGINE_EXTRA_WORD_CHARS", "-")

    store = OptionStore.from_env()

    assert store.tabstop == 4
    assert store.extra_word_chars == ("-",)


def test_env_flag_parsing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SELECTOR_ENGINE_LOG_JSON", "yes")
    monkeypatch.delenv("SELECTOR_ENGINE_NO_COLOR", raising=False)

    assert telemetry.env_flag("LOG_JSON") is True
    assert telemetry.env_flag("NO_COLOR") is False
    assert telemetry.env_flag("NO_COLOR", default=True) is True


def test_configure_rejects_config_and_preset_together() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="quiet")


def test_extra_word_chars_change_word_boundaries() -> None:
    text = "foo-bar baz\n"
    cursor = Selection.point((0, 0))

    default = select_word(SelectorContext.from_text(text), cursor)
    dashed = select_word(SelectorContext.from_text(text, extra_word_chars="-"), cursor)

    assert default == Selection((0, 0), (0, 2))
    assert dashed == Selection((0, 0), (0, 7))
