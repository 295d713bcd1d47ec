"""Collator and the value types it operates on."""
from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "ABSENT",
    "DateCollator",
    "DatePart",
    "DateUsage",
    "INVALID_DATE",
    "InvalidDate",
]


def __getattr__(name: str) -> Any:  # pragma: no cover - import side effects
    if name == "DateCollator":
        module = import_module(".collator", __name__)
        return module.DateCollator
    if name in {"ABSENT", "DatePart", "DateUsage", "INVALID_DATE", "InvalidDate"}:
        module = import_module(".models", __name__)
        return getattr(module, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
