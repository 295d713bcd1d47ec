"""Exceptions raised while constructing a collator."""
from __future__ import annotations

from typing import Any, Optional


class DateCollatorError(Exception):
    """Base class for every error raised by this package."""


class ConstructionModeError(DateCollatorError, TypeError):
    """A collator was initialised outside of normal object construction."""


class ConfigTypeError(DateCollatorError, TypeError):
    """An option value has the wrong type."""


class ConfigRangeError(DateCollatorError, ValueError):
    """An option value is not one of the recognised tags."""

    def __init__(self, option: str, value: Any, message: Optional[str] = None) -> None:
        self.option = option
        self.value = value
        if message is None:
            message = f"Value {value!r} out of range for DateCollator option '{option}'."
        super().__init__(message)


__all__ = [
    "ConfigRangeError",
    "ConfigTypeError",
    "ConstructionModeError",
    "DateCollatorError",
]
