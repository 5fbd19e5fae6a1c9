"""Selection objects and pattern-driven selection for text buffers."""

__all__ = [
    "buffer",
    "runtime",
    "selectors",
]

__version__ = "0.1.0"
