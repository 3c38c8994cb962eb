"""Date formatting helpers consumed by the holiday engine."""

from __future__ import annotations

from datetime import date, datetime
from typing import Protocol


class DateLike(Protocol):
    """Minimal capability the engine needs from a calendar day."""

    @property
    def year(self) -> int:  # pragma: no cover - protocol signature only
        ...

    def strftime(self, fmt: str) -> str:  # pragma: no cover - protocol signature only
        ...


class LocalizedDate(date):
    """A ``date`` that carries its own display locale.

    Instances are weak-referenceable, so they can own a custom resolver.
    """

    locale: str | None

    def __new__(cls, year: int, month: int, day: int, locale: str | None = None) -> "LocalizedDate":
        instance = super().__new__(cls, year, month, day)
        instance.locale = locale
        return instance

    @classmethod
    def from_date(cls, value: date, locale: str | None = None) -> "LocalizedDate":
        return cls(value.year, value.month, value.day, locale=locale)

    def __repr__(self) -> str:
        return f"LocalizedDate({self.isoformat()!r}, locale={self.locale!r})"


def day_month(value: DateLike) -> str:
    return value.strftime("%d/%m")


def day_month_year(value: DateLike) -> str:
    return f"{day_month(value)}/{value.year}"


def locale_of(value: object) -> str | None:
    """Return the locale configured on the date value, if any."""

    locale = getattr(value, "locale", None)
    if isinstance(locale, str) and locale:
        return locale
    return None


def parse_date(value: str) -> date:
    """Parse an ISO ``YYYY-MM-DD`` string (a time component is ignored)."""

    return datetime.fromisoformat(value.strip()).date()


__all__ = [
    "DateLike",
    "LocalizedDate",
    "day_month",
    "day_month_year",
    "locale_of",
    "parse_date",
]
