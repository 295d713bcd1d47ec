"""Granular ordering of dates by a configurable list of date parts."""
from __future__ import annotations

import functools
import logging
from collections.abc import Iterable, Mapping
from typing import Any, Callable, Optional

from ..config import CollatorOptions
from ..errors import ConstructionModeError
from ..utils import canonical_text, compare_text, date_view, extract_part, sign
from .models import ABSENT, DatePart, DateUsage

logger = logging.getLogger(__name__)


class DateCollator:
    """Orders dates by selected parts, similar to a locale collator for text.

    ``dateSensitivity`` picks the parts compared and their precedence, and
    ``dateUsage`` picks whether parts are read from local or UTC time::

        by_day = DateCollator(None, {"dateSensitivity": ["year", "month", "day"]})
        by_day.compare(datetime(2020, 3, 23, 9), datetime(2020, 3, 23, 17))  # 0

    Values that are not valid dates are still ordered, by their canonical
    text, so mixed inputs sort deterministically.
    """

    __slots__ = ("_options",)

    DateSensitivity = DatePart
    DateUsage = DateUsage

    def __init__(
        self,
        locales: Optional[str | Iterable[str]] = None,
        options: Optional[Mapping[str, Any] | CollatorOptions] = None,
    ) -> None:
        # locales is accepted for parity with text collators and not used.
        try:
            object.__getattribute__(self, "_options")
        except AttributeError:
            pass
        else:
            raise ConstructionModeError(
                "DateCollator is already constructed; create a new instance instead of re-initialising."
            )
        resolved = CollatorOptions.from_mapping(options)
        object.__setattr__(self, "_options", resolved)
        logger.debug(
            "DateCollator configured (sensitivity=%s, usage=%s)",
            ",".join(part.value for part in resolved.date_sensitivity),
            resolved.date_usage.value,
        )

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (None, self._options))

    def __copy__(self) -> DateCollator:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> DateCollator:
        return self

    def __repr__(self) -> str:
        options = self._options
        return (
            f"{type(self).__name__}(dateSensitivity={[p.value for p in options.date_sensitivity]!r}, "
            f"dateUsage={options.date_usage.value!r})"
        )

    @property
    def options(self) -> CollatorOptions:
        return self._options

    def resolved_options(self) -> dict[str, Any]:
        return self._options.as_dict()

    def compare(self, left: Any = ABSENT, right: Any = ABSENT) -> int:
        """Return -1, 0 or +1 as ``left`` sorts before, with, or after ``right``.

        When both values are valid dates the configured parts are compared
        in order and the first differing part decides. Otherwise both values
        are ordered by their canonical text. Never raises.
        """
        usage = self._options.date_usage
        left_view = date_view(left, usage)
        right_view = date_view(right, usage)
        if left_view is not None and right_view is not None:
            for part in self._options.date_sensitivity:
                difference = extract_part(left_view, part) - extract_part(right_view, part)
                if difference:
                    return sign(difference)
            return 0
        return compare_text(canonical_text(left, usage), canonical_text(right, usage))

    __call__ = compare

    @property
    def sort_key(self) -> Callable[[Any], Any]:
        """Key function for :func:`sorted` and ``list.sort``."""
        return functools.cmp_to_key(self.compare)

    def sorted(self, values: Iterable[Any], *, reverse: bool = False) -> list[Any]:
        return sorted(values, key=self.sort_key, reverse=reverse)


__all__ = ["DateCollator"]
