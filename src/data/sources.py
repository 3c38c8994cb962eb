"""Holiday name data sources, one ``id -> name`` table per locale."""

from __future__ import annotations

import json
import logging
import re
from datetime import date
from pathlib import Path
from typing import Dict, Iterable, Mapping

from calendars.enumerator import (
    ID_LANGUAGE,
    build_region_calendar,
    slugify,
    supported_language,
)
from engine.names import normalize_locale

_LOCALE_PATTERN = re.compile(r"^[A-Za-z0-9]+$")

logger = logging.getLogger("holidayengine.data")


class NameSourceError(Exception):
    """Raised when a name table exists but cannot be read."""


class JsonNameSource:
    """Reads ``<directory>/<locale>.json`` files holding ``{"id": "name"}`` objects."""

    def __init__(self, directory: Path | str) -> None:
        self.directory = Path(directory)

    def path_for(self, locale: str) -> Path | None:
        if not _LOCALE_PATTERN.match(locale):
            return None
        return self.directory / f"{locale}.json"

    def load(self, locale: str) -> Mapping[str, str] | None:
        path = self.path_for(locale)
        if path is None or not path.is_file():
            return None
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise NameSourceError(f"cannot read holiday names from {path}") from exc
        if not isinstance(payload, dict) or not all(
            isinstance(key, str) and isinstance(value, str) for key, value in payload.items()
        ):
            raise NameSourceError(f"{path} must contain an object of string names")
        return payload


def _default_years() -> range:
    current = date.today().year
    return range(current - 5, current + 6)


class RegionNameSource:
    """Builds localized name tables from the ``holidays`` calendar of a region.

    Identifiers come from the calendar's US English names (see
    ``RegionYearEnumerator``); the localized calendar is walked alongside it and
    paired day by day.
    """

    def __init__(
        self,
        region: str,
        subdiv: str | None = None,
        *,
        years: Iterable[int] | None = None,
    ) -> None:
        self.region = region.upper()
        self.subdiv = subdiv
        self.years = list(years) if years is not None else list(_default_years())
        sample = build_region_calendar(self.region, subdiv=subdiv)
        self._supported = tuple(getattr(sample, "supported_languages", ()) or ())
        self._native = normalize_locale(getattr(sample, "default_language", None))
        self._id_language = supported_language(sample, ID_LANGUAGE)

    def language_for(self, locale: str) -> str | None:
        """Pick the calendar language serving a normalized locale, if any."""

        candidates = sorted(lang for lang in self._supported if normalize_locale(lang) == locale)
        for preferred in (f"{locale}_{self.region}", locale, ID_LANGUAGE):
            if preferred in candidates:
                return preferred
        return candidates[0] if candidates else None

    def load(self, locale: str) -> Mapping[str, str] | None:
        if self._supported:
            language = self.language_for(locale)
            if language is None:
                return None
        elif locale != (self._native or "en"):
            return None
        else:
            language = None

        id_calendar = build_region_calendar(
            self.region, subdiv=self.subdiv, years=self.years, language=self._id_language
        )
        localized = build_region_calendar(
            self.region, subdiv=self.subdiv, years=self.years, language=language
        )
        names: Dict[str, str] = {}
        for day in sorted(id_calendar.keys()):
            labels = localized.get_list(day)
            for index, name in enumerate(id_calendar.get_list(day)):
                if index < len(labels):
                    names.setdefault(slugify(name), labels[index])
        logger.debug("built %s holiday names for %s/%s", len(names), self.region, locale)
        return names


__all__ = ["JsonNameSource", "NameSourceError", "RegionNameSource"]
