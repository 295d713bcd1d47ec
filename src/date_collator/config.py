"""Configuration dataclasses for the date collator."""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Optional

from .core.models import DatePart, DateUsage
from .errors import ConfigRangeError, ConfigTypeError

DEFAULT_DATE_SENSITIVITY: tuple[DatePart, ...] = (
    DatePart.YEAR,
    DatePart.MONTH,
    DatePart.DAY,
    DatePart.HOUR,
    DatePart.MINUTE,
    DatePart.SECOND,
    DatePart.FRACTIONAL_SECOND,
)
DEFAULT_DATE_USAGE = DateUsage.LOCAL

# Option names as they appear in collator-style option bags, with the
# snake_case spellings accepted alongside.
_SENSITIVITY_KEYS = ("date_sensitivity", "dateSensitivity")
_USAGE_KEYS = ("date_usage", "dateUsage")


@dataclass(frozen=True, slots=True)
class CollatorOptions:
    date_sensitivity: Sequence[DatePart | str] = DEFAULT_DATE_SENSITIVITY
    date_usage: DateUsage | str = DEFAULT_DATE_USAGE

    def __post_init__(self) -> None:
        object.__setattr__(self, "date_sensitivity", _coerce_sensitivity(self.date_sensitivity))
        object.__setattr__(self, "date_usage", _coerce_usage(self.date_usage))

    @classmethod
    def from_mapping(cls, options: Optional[Mapping[str, Any] | CollatorOptions]) -> CollatorOptions:
        """Build options from ``None``, an existing instance, or an option bag.

        Keys holding ``None`` fall back to their defaults and unknown keys are
        ignored.
        """
        if options is None:
            return cls()
        if isinstance(options, CollatorOptions):
            return options
        if not isinstance(options, Mapping):
            raise ConfigTypeError(
                f"DateCollator options must be a mapping, not {type(options).__name__}."
            )
        sensitivity = _first_present(options, _SENSITIVITY_KEYS)
        usage = _first_present(options, _USAGE_KEYS)
        return cls(
            date_sensitivity=DEFAULT_DATE_SENSITIVITY if sensitivity is None else sensitivity,
            date_usage=DEFAULT_DATE_USAGE if usage is None else usage,
        )

    def as_dict(self) -> dict[str, Any]:
        return {
            "dateSensitivity": [part.value for part in self.date_sensitivity],
            "dateUsage": self.date_usage.value,
        }


def _first_present(options: Mapping[str, Any], keys: Sequence[str]) -> Any:
    for key in keys:
        value = options.get(key)
        if value is not None:
            return value
    return None


def _coerce_sensitivity(value: Any) -> tuple[DatePart, ...]:
    if isinstance(value, (str, bytes, bytearray)) or not isinstance(value, Sequence):
        raise ConfigTypeError("DateCollator option 'dateSensitivity' must be a sequence of date parts.")
    parts: list[DatePart] = []
    for item in value:
        try:
            parts.append(DatePart(item))
        except (TypeError, ValueError):
            raise ConfigRangeError("dateSensitivity", item) from None
    return tuple(parts)


def _coerce_usage(value: Any) -> DateUsage:
    try:
        return DateUsage(value)
    except (TypeError, ValueError):
        raise ConfigRangeError("dateUsage", value) from None


__all__ = [
    "CollatorOptions",
    "DEFAULT_DATE_SENSITIVITY",
    "DEFAULT_DATE_USAGE",
]
