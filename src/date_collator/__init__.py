"""Order dates by a configurable selection of calendar and time parts."""
from __future__ import annotations

from importlib import import_module
from typing import Any

from . import utils
from .config import DEFAULT_DATE_SENSITIVITY, DEFAULT_DATE_USAGE, CollatorOptions
from .core.models import ABSENT, INVALID_DATE, DatePart, DateUsage, InvalidDate
from .errors import ConfigRangeError, ConfigTypeError, ConstructionModeError, DateCollatorError

__all__ = [
    "ABSENT",
    "CollatorOptions",
    "ConfigRangeError",
    "ConfigTypeError",
    "ConstructionModeError",
    "DEFAULT_DATE_SENSITIVITY",
    "DEFAULT_DATE_USAGE",
    "DateCollator",
    "DateCollatorError",
    "DatePart",
    "DateUsage",
    "INVALID_DATE",
    "InvalidDate",
    "utils",
]


def __getattr__(name: str) -> Any:  # pragma: no cover - import side effect
    if name == "DateCollator":
        module = import_module(".core.collator", __name__)
        return module.DateCollator
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
