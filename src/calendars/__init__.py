"""Calendar collaborators: date formatting and per-year holiday crawlers."""

from .dates import LocalizedDate, day_month, day_month_year, locale_of, parse_date
from .enumerator import RegionYearEnumerator, StaticYearEnumerator, YearEnumerator

__all__ = [
    "LocalizedDate",
    "RegionYearEnumerator",
    "StaticYearEnumerator",
    "YearEnumerator",
    "day_month",
    "day_month_year",
    "locale_of",
    "parse_date",
]
