"""Runtime services: telemetry and options."""

from .options import DEFAULT_OPTIONS, OptionError, OptionStore

__all__ = ["DEFAULT_OPTIONS", "OptionError", "OptionStore"]
