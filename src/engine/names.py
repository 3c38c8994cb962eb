"""Per-owner cache of locale -> holiday name dictionaries."""

from __future__ import annotations

import logging
import re
import threading
from typing import Dict, Literal, Mapping, Protocol

from infra.metrics import record_dictionary_load

from .registry import IdentityWeakMap

DEFAULT_HOLIDAY_LOCALE = "en"

_REGION_SUFFIX = re.compile(r"^([^_-]+)[_-].*$")

logger = logging.getLogger("holidayengine.names")

CachedNames = Mapping[str, str] | Literal[False]


class NameDataSource(Protocol):
    """Loads the ``holiday id -> name`` table of a locale, ``None`` if absent."""

    def load(self, locale: str) -> Mapping[str, str] | None:  # pragma: no cover - interface only
        ...


def normalize_locale(locale: str | None) -> str | None:
    """Strip any regional suffix: ``en_US`` and ``en-US`` both become ``en``."""

    if not locale:
        return None
    return _REGION_SUFFIX.sub(r"\1", locale.strip())


class NameDictionaryCache:
    """Loads name dictionaries lazily and memoizes misses.

    A locale without data, or with an empty table, is stored as ``False`` so
    it is never loaded twice; lookups for it are answered from the default
    locale instead. Entries are never invalidated.
    """

    def __init__(
        self,
        source: NameDataSource,
        *,
        default_locale: str = DEFAULT_HOLIDAY_LOCALE,
    ) -> None:
        self._source = source
        self.default_locale = normalize_locale(default_locale) or DEFAULT_HOLIDAY_LOCALE
        self._caches: IdentityWeakMap[Dict[str, CachedNames]] = IdentityWeakMap()
        self._lock = threading.RLock()

    def get_names(self, owner: object, locale: str | None) -> Mapping[str, str]:
        locale = normalize_locale(locale) or self.default_locale
        with self._lock:
            entries = self._caches.setdefault(owner, dict)
            if locale in entries:
                return entries[locale] or self._default_names(entries)

            names = self._load(locale)
            if not names and locale != self.default_locale:
                entries[locale] = False
                logger.info(
                    "no holiday names for locale %s, falling back to %s",
                    locale,
                    self.default_locale,
                )
                return self._default_names(entries)
            if names is None:
                logger.warning("default holiday locale %s has no names", locale)

            entries[locale] = names or {}
            return entries[locale]

    def cached_locales(self, owner: object) -> Dict[str, bool]:
        """Expose which locales are memoized for an owner and whether they hold data."""

        with self._lock:
            entries = self._caches.get(owner) or {}
            return {locale: bool(names) for locale, names in entries.items()}

    def _default_names(self, entries: Dict[str, CachedNames]) -> Mapping[str, str]:
        default = self.default_locale
        if default not in entries:
            names = self._load(default)
            if names is None:
                logger.warning("default holiday locale %s has no names", default)
            entries[default] = names or {}
        return entries[default] or {}

    def _load(self, locale: str) -> Mapping[str, str] | None:
        names = self._source.load(locale)
        record_dictionary_load(locale, found=names is not None)
        logger.debug(
            "loaded holiday names for %s (%s entries)",
            locale,
            "missing" if names is None else len(names),
        )
        return dict(names) if names is not None else None


__all__ = [
    "DEFAULT_HOLIDAY_LOCALE",
    "NameDataSource",
    "NameDictionaryCache",
    "normalize_locale",
]
