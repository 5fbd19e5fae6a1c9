"""Run single-selection selectors across a whole selection list."""

from __future__ import annotations

from typing import Callable, Optional

from selector_engine.buffer import Selection, SelectionList
from selector_engine.errors import EmptyResultError
from selector_engine.runtime import telemetry

from .context import SelectorContext

Selector = Callable[[SelectorContext, Selection], Optional[Selection]]


def apply_selector(
    context: SelectorContext,
    selections: SelectionList,
    selector: Selector,
    *,
    drop_missing: bool = False,
) -> SelectionList:
    """Apply ``selector`` to every selection of ``selections``.

    Selections the selector does not apply to are kept unchanged, or
    dropped when ``drop_missing`` is set. Overlapping results are merged.
    Bind extra selector arguments with :func:`functools.partial`.
    """

    name = getattr(selector, "__name__", None) or getattr(
        getattr(selector, "func", None), "__name__", "selector"
    )
    with telemetry.span(
        f"driver::{name}",
        logger_name="selector_engine.driver",
        metadata={"selections": len(selections), "drop_missing": drop_missing},
    ) as handle:
        results: list[Selection] = []
        main = 0
        missing = 0
        for index, selection in enumerate(selections):
            new = selector(context, selection)
            if new is None:
                missing += 1
                if drop_missing:
                    continue
                new = selection
            if index == selections.main_index:
                main = len(results)
            results.append(new)
        handle.add_metadata("missing", missing)

        if not results:
            raise EmptyResultError()
        main = min(main, len(results) - 1)
        return SelectionList.from_unsorted(context.buffer, results, main=main)


__all__ = ["Selector", "apply_selector"]
