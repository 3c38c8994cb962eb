from __future__ import annotations

from datetime import date

from calendars.enumerator import RegionYearEnumerator, StaticYearEnumerator, slugify
from engine.matcher import FallbackMatcher


def test_slugify_names() -> None:
    assert slugify("Christmas Day") == "christmas-day"
    assert slugify("New Year's Day") == "new-year-s-day"
    assert slugify("Fête nationale") == "fete-nationale"


def test_static_enumerator_skips_other_years_one_offs() -> None:
    enumerator = StaticYearEnumerator(
        {"newyear": "01/01", "jubilee": "03/06/2030", "xmas": "25/12"}
    )

    assert list(enumerator(2024)) == [("newyear", "01/01"), ("xmas", "25/12")]
    assert list(enumerator(2030)) == [
        ("newyear", "01/01"),
        ("jubilee", "03/06/2030"),
        ("xmas", "25/12"),
    ]


def test_region_enumerator_yields_dated_occurrences_in_order() -> None:
    pairs = list(RegionYearEnumerator("us")(2024))

    assert ("christmas-day", "25/12/2024") in pairs
    assert ("independence-day", "04/07/2024") in pairs
    assert all(occurrence.endswith("/2024") for _, occurrence in pairs)
    ordered = [date(int(o[6:]), int(o[3:5]), int(o[:2])) for _, o in pairs]
    assert ordered == sorted(ordered)


def test_region_enumerator_drives_matcher() -> None:
    enumerator = RegionYearEnumerator("US")
    matcher = FallbackMatcher()

    assert matcher.resolve(date(2024, 12, 25), enumerator) == "christmas-day"
    assert matcher.resolve(date(2024, 3, 13), enumerator) is False
