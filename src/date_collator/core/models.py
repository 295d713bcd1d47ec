"""Core value types shared by the collator and its helpers."""
from __future__ import annotations

from enum import Enum
from typing import Final


class DatePart(str, Enum):
    """Addressable component of a date/time value."""

    ERA = "era"
    YEAR = "year"
    MONTH = "month"
    WEEKDAY = "weekday"
    DAY = "day"
    DAY_PERIOD = "dayPeriod"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    FRACTIONAL_SECOND = "fractionalSecond"

    def __str__(self) -> str:
        return self.value


class DateUsage(str, Enum):
    """Which view of a date the parts are read from."""

    LOCAL = "local"
    UTC = "utc"

    def __str__(self) -> str:
        return self.value


class InvalidDate:
    """A date value that does not resolve to a real instant.

    There is a single instance, :data:`INVALID_DATE`.
    """

    __slots__ = ()
    _instance: InvalidDate | None = None

    def __new__(cls) -> InvalidDate:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "INVALID_DATE"

    def __str__(self) -> str:
        return "Invalid Date"

    def __reduce__(self) -> str:
        return "INVALID_DATE"


class _Absent:
    __slots__ = ()
    _instance: _Absent | None = None

    def __new__(cls) -> _Absent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __str__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "ABSENT"


INVALID_DATE: Final[InvalidDate] = InvalidDate()
# Placeholder for an omitted comparison operand.
ABSENT: Final[_Absent] = _Absent()


__all__ = ["ABSENT", "DatePart", "DateUsage", "INVALID_DATE", "InvalidDate"]
