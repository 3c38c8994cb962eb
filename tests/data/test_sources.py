from __future__ import annotations

import json

import pytest

from data.sources import JsonNameSource, NameSourceError, RegionNameSource


def test_json_source_loads_locale_file(tmp_path) -> None:
    (tmp_path / "en.json").write_text(json.dumps({"xmas": "Christmas"}), encoding="utf-8")
    source = JsonNameSource(tmp_path)

    assert source.load("en") == {"xmas": "Christmas"}
    assert source.load("fr") is None
    assert source.load("../en") is None


def test_json_source_rejects_corrupt_tables(tmp_path) -> None:
    (tmp_path / "de.json").write_text("{not json", encoding="utf-8")
    (tmp_path / "it.json").write_text(json.dumps(["Natale"]), encoding="utf-8")
    source = JsonNameSource(tmp_path)

    with pytest.raises(NameSourceError):
        source.load("de")
    with pytest.raises(NameSourceError):
        source.load("it")


def test_region_source_localizes_names() -> None:
    source = RegionNameSource("FR", years=[2024])

    english = source.load("en")
    french = source.load("fr")

    assert english is not None and french is not None
    assert english["christmas-day"] == "Christmas Day"
    assert french["christmas-day"] == "Noël"
    assert set(french) == set(english)


def test_region_source_unsupported_locale_is_missing() -> None:
    source = RegionNameSource("FR", years=[2024])

    assert source.language_for("xx") is None
    assert source.load("xx") is None
