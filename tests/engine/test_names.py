from __future__ import annotations

import pytest
from prometheus_client import REGISTRY

from engine.names import NameDictionaryCache, normalize_locale


class DictNameSource:
    def __init__(self, tables):
        self.tables = tables
        self.calls: list[str] = []

    def load(self, locale):
        self.calls.append(locale)
        return self.tables.get(locale)


class Owner:
    pass


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("en_US", "en"), ("pt-BR", "pt"), ("fr", "fr"), ("zh_Hant_TW", "zh"), ("", None), (None, None)],
)
def test_normalize_locale(raw, expected) -> None:
    assert normalize_locale(raw) == expected


def test_loads_each_locale_once_per_owner() -> None:
    source = DictNameSource({"en": {"xmas": "Christmas"}})
    cache = NameDictionaryCache(source)
    owner = Owner()

    assert cache.get_names(owner, "en") == {"xmas": "Christmas"}
    assert cache.get_names(owner, "en_GB") == {"xmas": "Christmas"}
    assert source.calls == ["en"]

    cache.get_names(Owner(), "en")
    assert source.calls == ["en", "en"]


def test_missing_locale_is_memoized_and_falls_back() -> None:
    source = DictNameSource({"en": {"xmas": "Christmas"}})
    cache = NameDictionaryCache(source)
    owner = Owner()

    assert cache.get_names(owner, "fr") == {"xmas": "Christmas"}
    assert cache.get_names(owner, "fr-CA") == {"xmas": "Christmas"}
    assert source.calls == ["fr", "en"]
    assert cache.cached_locales(owner) == {"fr": False, "en": True}


def test_missing_locale_reuses_cached_default() -> None:
    source = DictNameSource({"en": {"xmas": "Christmas"}})
    cache = NameDictionaryCache(source)
    owner = Owner()

    cache.get_names(owner, "en")
    assert cache.get_names(owner, "de") == {"xmas": "Christmas"}
    assert source.calls == ["en", "de"]


def test_missing_default_yields_empty_mapping() -> None:
    source = DictNameSource({})
    cache = NameDictionaryCache(source, default_locale="en")
    owner = Owner()

    assert cache.get_names(owner, "fr") == {}
    assert cache.get_names(owner, "fr") == {}
    assert cache.get_names(owner, "en") == {}
    assert source.calls == ["fr", "en"]


def test_custom_default_locale_is_normalized() -> None:
    source = DictNameSource({"de": {"xmas": "Weihnachten"}})
    cache = NameDictionaryCache(source, default_locale="de_DE")

    assert cache.default_locale == "de"
    assert cache.get_names(Owner(), "it") == {"xmas": "Weihnachten"}


def test_load_outcomes_are_counted() -> None:
    labels_hit = {"locale": "qa", "outcome": "hit"}
    labels_miss = {"locale": "qb", "outcome": "miss"}
    before_hit = REGISTRY.get_sample_value("holiday_name_dictionary_loads_total", labels_hit) or 0.0
    before_miss = (
        REGISTRY.get_sample_value("holiday_name_dictionary_loads_total", labels_miss) or 0.0
    )
    cache = NameDictionaryCache(DictNameSource({"qa": {"x": "X"}}), default_locale="qa")
    owner = Owner()

    cache.get_names(owner, "qb")
    cache.get_names(owner, "qb")

    assert REGISTRY.get_sample_value("holiday_name_dictionary_loads_total", labels_hit) == before_hit + 1
    assert (
        REGISTRY.get_sample_value("holiday_name_dictionary_loads_total", labels_miss)
        == before_miss + 1
    )


def test_empty_table_answers_from_default_consistently() -> None:
    source = DictNameSource({"en": {"xmas": "Christmas"}, "fr": {}})
    cache = NameDictionaryCache(source)
    owner = Owner()

    first = cache.get_names(owner, "fr")
    second = cache.get_names(owner, "fr")

    assert first == second == {"xmas": "Christmas"}
    assert source.calls == ["fr", "en"]
    assert cache.cached_locales(owner) == {"fr": False, "en": True}
