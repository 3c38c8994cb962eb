from __future__ import annotations

import weakref
from datetime import date

import pytest

from calendars.dates import LocalizedDate, day_month, day_month_year, locale_of, parse_date


def test_formats_day_and_month() -> None:
    assert day_month(date(2024, 7, 4)) == "04/07"
    assert day_month_year(date(2024, 7, 4)) == "04/07/2024"


def test_localized_date_carries_locale_and_is_weakrefable() -> None:
    value = LocalizedDate(2024, 12, 25, locale="fr_FR")

    assert value == date(2024, 12, 25)
    assert locale_of(value) == "fr_FR"
    assert weakref.ref(value)() is value
    assert LocalizedDate.from_date(date(2024, 1, 1), "de").locale == "de"


def test_locale_of_plain_date_is_none() -> None:
    assert locale_of(date(2024, 1, 1)) is None
    assert locale_of(LocalizedDate(2024, 1, 1, locale="")) is None


def test_parse_date() -> None:
    assert parse_date(" 2024-02-29 ") == date(2024, 2, 29)
    with pytest.raises(ValueError):
        parse_date("2023-02-29")
