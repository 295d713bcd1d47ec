from types import MappingProxyType

import pytest

from date_collator.config import DEFAULT_DATE_SENSITIVITY, CollatorOptions
from date_collator.core.models import DatePart, DateUsage
from date_collator.errors import ConfigRangeError, ConfigTypeError


def test_defaults():
    options = CollatorOptions()
    assert options.date_sensitivity == DEFAULT_DATE_SENSITIVITY
    assert options.date_usage is DateUsage.LOCAL


def test_from_mapping_accepts_both_spellings():
    camel = CollatorOptions.from_mapping({"dateSensitivity": ["day"], "dateUsage": "utc"})
    snake = CollatorOptions.from_mapping({"date_sensitivity": ["day"], "date_usage": "utc"})
    assert camel == snake
    assert camel.date_sensitivity == (DatePart.DAY,)
    assert camel.date_usage is DateUsage.UTC


def test_none_values_take_defaults():
    options = CollatorOptions.from_mapping({"dateSensitivity": None, "dateUsage": None, "other": 1})
    assert options == CollatorOptions()


def test_from_mapping_passes_through_instances():
    options = CollatorOptions(date_usage="utc")
    assert CollatorOptions.from_mapping(options) is options
    assert CollatorOptions.from_mapping(MappingProxyType({"dateUsage": "utc"})) == options


def test_from_mapping_rejects_non_mapping():
    with pytest.raises(ConfigTypeError):
        CollatorOptions.from_mapping(["year"])  # type: ignore[arg-type]


def test_sensitivity_is_normalised_to_tuple():
    options = CollatorOptions(date_sensitivity=["year", DatePart.DAY_PERIOD, "fractionalSecond"])
    assert options.date_sensitivity == (DatePart.YEAR, DatePart.DAY_PERIOD, DatePart.FRACTIONAL_SECOND)


@pytest.mark.parametrize("value", ["year", b"year", 3, {"year"}, DatePart.YEAR])
def test_sensitivity_rejects_non_sequences(value):
    with pytest.raises(ConfigTypeError):
        CollatorOptions(date_sensitivity=value)


@pytest.mark.parametrize("bad", ["millisecond", "Year", "day_period", None, 1, ["year"]])
def test_sensitivity_rejects_unknown_parts(bad):
    with pytest.raises(ConfigRangeError) as excinfo:
        CollatorOptions(date_sensitivity=("year", bad))
    assert excinfo.value.value == bad


@pytest.mark.parametrize("bad", ["gmt", "UTC", "", 0])
def test_usage_rejects_unknown_tags(bad):
    with pytest.raises(ConfigRangeError):
        CollatorOptions(date_usage=bad)


def test_options_are_frozen():
    options = CollatorOptions()
    with pytest.raises(AttributeError):
        options.date_usage = DateUsage.UTC  # type: ignore[misc]


def test_as_dict():
    options = CollatorOptions(date_sensitivity=("hour", "dayPeriod"), date_usage="utc")
    assert options.as_dict() == {"dateSensitivity": ["hour", "dayPeriod"], "dateUsage": "utc"}
