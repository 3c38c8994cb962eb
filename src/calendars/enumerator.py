"""Year crawlers producing (holiday id, occurrence) pairs for a region."""

from __future__ import annotations

import re
import unicodedata
from datetime import date
from typing import Callable, Iterable, Iterator, Mapping, Tuple

import holidays

from .dates import day_month_year

HolidayOccurrence = Tuple[str, str]
YearEnumerator = Callable[[int], Iterable[HolidayOccurrence]]

ID_LANGUAGE = "en_US"

_SLUG_PATTERN = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    """Turn a holiday display name into a stable identifier."""

    ascii_name = unicodedata.normalize("NFKD", name).encode("ascii", "ignore").decode("ascii")
    slug = _SLUG_PATTERN.sub("-", ascii_name.lower()).strip("-")
    return slug or name.strip().lower()


def is_one_off(occurrence: str) -> bool:
    return len(occurrence) > 5


class StaticYearEnumerator:
    """Enumerates a fixed table of ``id -> "dd/mm"`` or ``id -> "dd/mm/yyyy"``."""

    def __init__(self, table: Mapping[str, str]) -> None:
        self._table = dict(table)

    def __call__(self, year: int) -> Iterator[HolidayOccurrence]:
        suffix = f"/{year}"
        for holiday_id, occurrence in self._table.items():
            if is_one_off(occurrence) and not occurrence.endswith(suffix):
                continue
            yield holiday_id, occurrence


def supported_language(calendar: holidays.HolidayBase, language: str) -> str | None:
    supported = tuple(getattr(calendar, "supported_languages", ()) or ())
    if language in supported:
        return language
    return None


def build_region_calendar(
    region: str,
    *,
    subdiv: str | None = None,
    years: Iterable[int] | int | None = None,
    language: str | None = None,
) -> holidays.HolidayBase:
    """Instantiate the ``holidays`` calendar for a region and year span."""

    return holidays.country_holidays(region, subdiv=subdiv, years=years, language=language)


class RegionYearEnumerator:
    """Lazily walks the ``holidays`` calendar of a region, one year at a time.

    Occurrences are computed by rule for the requested year, so each is
    emitted year-qualified (``dd/mm/yyyy``).
    """

    def __init__(self, region: str, subdiv: str | None = None) -> None:
        self.region = region.upper()
        self.subdiv = subdiv
        sample = build_region_calendar(self.region, subdiv=subdiv)
        self._language = supported_language(sample, ID_LANGUAGE)

    def occurrences(self, year: int) -> Iterator[Tuple[str, date]]:
        calendar = build_region_calendar(
            self.region, subdiv=self.subdiv, years=year, language=self._language
        )
        for day in sorted(calendar.keys()):
            if day.year != year:
                continue
            for name in calendar.get_list(day):
                yield slugify(name), day

    def __call__(self, year: int) -> Iterator[HolidayOccurrence]:
        for holiday_id, day in self.occurrences(year):
            yield holiday_id, day_month_year(day)


__all__ = [
    "HolidayOccurrence",
    "ID_LANGUAGE",
    "RegionYearEnumerator",
    "StaticYearEnumerator",
    "YearEnumerator",
    "build_region_calendar",
    "is_one_off",
    "slugify",
    "supported_language",
]
