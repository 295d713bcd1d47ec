"""Utility helpers for reading and ordering date values."""
from __future__ import annotations

import logging
from datetime import date, datetime, time, timezone
from typing import Any, Optional

from .core.models import ABSENT, DatePart, DateUsage, InvalidDate

logger = logging.getLogger(__name__)

ABSENT_TEXT = "undefined"
NULL_TEXT = "null"
INVALID_DATE_TEXT = "Invalid Date"
# Fixed prefix keeps every valid date between "Invalid Date" and "null",
# whatever the class of the value.
VALID_DATE_PREFIX = "datetime."


def sign(value: float) -> int:
    """Clamp a difference to -1, 0 or +1."""
    if value < 0:
        return -1
    if value > 0:
        return 1
    return 0


def date_view(value: Any, usage: DateUsage) -> Optional[datetime]:
    """Return ``value`` as wall-clock time in the requested view.

    Naive datetimes are local wall-clock time. Plain dates are promoted to
    local midnight. Returns ``None`` for anything that is not a date or
    cannot be represented in the view.
    """
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, date):
        moment = datetime.combine(value, time())
    else:
        return None
    try:
        if usage is DateUsage.UTC:
            return moment.astimezone(timezone.utc)
        if moment.tzinfo is None:
            return moment
        return moment.astimezone()
    except (OverflowError, ValueError, OSError):
        return None


def is_valid_date(value: Any, usage: DateUsage = DateUsage.LOCAL) -> bool:
    return date_view(value, usage) is not None


def extract_part(moment: datetime, part: DatePart) -> float:
    """Read one numeric date part from an already converted datetime."""
    if part is DatePart.YEAR:
        return moment.year
    if part is DatePart.MONTH:
        return moment.month - 1
    if part is DatePart.DAY:
        return moment.day
    if part is DatePart.WEEKDAY:
        # 0 is Sunday.
        return moment.isoweekday() % 7
    if part is DatePart.HOUR:
        return moment.hour
    if part is DatePart.MINUTE:
        return moment.minute
    if part is DatePart.SECOND:
        return moment.second
    if part is DatePart.FRACTIONAL_SECOND:
        return moment.microsecond / 1000
    if part is DatePart.DAY_PERIOD:
        return 0 if moment.hour < 12 else 1
    if part is DatePart.ERA:
        return sign(moment.year)
    raise ValueError(f"Unhandled date part {part!r}")


def canonical_text(value: Any, usage: DateUsage = DateUsage.LOCAL) -> str:
    """Textual form used to order values that are not both valid dates.

    The forms sort as ``Invalid Date`` < valid dates < ``null`` < ``undefined``.
    """
    if value is ABSENT:
        return ABSENT_TEXT
    if value is None:
        return NULL_TEXT
    if isinstance(value, InvalidDate):
        return INVALID_DATE_TEXT
    if isinstance(value, date):
        if date_view(value, usage) is None:
            return INVALID_DATE_TEXT
        return VALID_DATE_PREFIX + _base_isoformat(value)
    try:
        return str(value)
    except Exception:
        logger.debug("str() failed for %s; using default repr", type(value).__name__, exc_info=True)
        return object.__repr__(value)


def compare_text(left: str, right: str) -> int:
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


def _base_isoformat(value: date) -> str:
    # Subclasses may override isoformat(); read the stdlib rendering.
    if isinstance(value, datetime):
        return datetime.isoformat(value)
    return date.isoformat(value)
