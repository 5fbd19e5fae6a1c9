from __future__ import annotations

from contextlib import contextmanager, nullcontext
from typing import Any, Iterator

import pytest

from selector_engine.runtime import telemetry


class RecordingLogger:
    def __init__(self, *, broken_profiler: bool = False) -> None:
        self.broken_profiler = broken_profiler
        self.context: dict[str, str] = {}
        self.warnings: list[tuple[str, list[tuple[str, str]]]] = []

    def add_context(self, key: str, value: str) -> None:
        self.context[key] = value

    def remove_context(self, key: str) -> None:
        del self.context[key]

    def track_component(self, name: str) -> Any:
        return nullcontext()

    @contextmanager
    def profile(self, name: str) -> Iterator[None]:
        if self.broken_profiler:
            raise RuntimeError("profiler unavailable")
        yield

    def warning_with(self, message: str, pairs: list[tuple[str, str]]) -> None:
        self.warnings.append((message, pairs))


def make_logger(monkeypatch: pytest.MonkeyPatch, **kwargs: bool) -> RecordingLogger:
    logger = RecordingLogger(**kwargs)
    monkeypatch.setattr(telemetry, "get_logger", lambda name=None: logger)
    return logger


def test_span_pushes_metadata_for_the_block(monkeypatch: pytest.MonkeyPatch) -> None:
    logger = make_logger(monkeypatch)

    with telemetry.span("search::test", metadata={"pattern": "x"}) as handle:
        assert logger.context == {"pattern": "x"}
        handle.add_metadata("produced", 2)

    assert logger.context == {}
    assert handle.metadata == {"pattern": "x", "produced": "2"}


def test_span_clears_context_when_profiler_fails(monkeypatch: pytest.MonkeyPatch) -> None:
    logger = make_logger(monkeypatch, broken_profiler=True)

    with pytest.raises(RuntimeError):
        with telemetry.span("search::test", component=True, metadata={"pattern": "x"}):
            pass

    assert logger.context == {}


def test_span_reports_failures(monkeypatch: pytest.MonkeyPatch) -> None:
    logger = make_logger(monkeypatch)

    with pytest.raises(ValueError):
        with telemetry.span("search::test", metadata={"pattern": "x"}):
            raise ValueError("boom")

    assert logger.context == {}
    assert [message for message, _ in logger.warnings] == ["span::fail"]
    assert ("reason", "boom") in logger.warnings[0][1]
