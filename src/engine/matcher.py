"""Default holiday resolution: scan the year's occurrences for the date."""

from __future__ import annotations

from typing import Literal

from calendars.dates import DateLike, day_month
from calendars.enumerator import YearEnumerator, is_one_off

from .registry import HolidayResult

NOT_A_HOLIDAY: Literal[False] = False


class FallbackMatcher:
    """Returns the first holiday whose occurrence matches the target date.

    Recurring occurrences (``dd/mm``) match on day and month; one-off
    occurrences (``dd/mm/yyyy``) also require the year. Enumeration order
    decides ties.
    """

    def resolve(self, value: DateLike, enumerator: YearEnumerator) -> HolidayResult:
        target = day_month(value)
        year = value.year
        dated_target = f"{target}/{year}"
        for holiday_id, occurrence in enumerator(year):
            if not occurrence:
                continue
            expected = dated_target if is_one_off(occurrence) else target
            if expected == occurrence:
                return holiday_id
        return NOT_A_HOLIDAY


__all__ = ["FallbackMatcher", "NOT_A_HOLIDAY"]
