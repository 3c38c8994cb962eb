"""Public holiday queries composing the registry, matcher and name cache."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Callable, Literal, Mapping, MutableMapping

from calendars.dates import DateLike, locale_of
from calendars.enumerator import YearEnumerator
from infra.metrics import record_query

from .context import QueryContext
from .matcher import NOT_A_HOLIDAY, FallbackMatcher
from .names import DEFAULT_HOLIDAY_LOCALE, NameDataSource, NameDictionaryCache, normalize_locale
from .registry import HolidayResult, Resolver, StrategyRegistry

UNKNOWN_HOLIDAY_NAME = "Unknown"

logger = logging.getLogger("holidayengine.engine")


class HolidayEngine:
    """Answers holiday questions for one region.

    The engine is the default owner: a resolver registered without an explicit
    owner applies to every query that has no more specific registration.
    """

    def __init__(
        self,
        region: str,
        enumerator: YearEnumerator,
        names_source: NameDataSource,
        *,
        registry: StrategyRegistry | None = None,
        names: NameDictionaryCache | None = None,
        matcher: FallbackMatcher | None = None,
        default_locale: str = DEFAULT_HOLIDAY_LOCALE,
        process_locale: str | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.region = region
        self.enumerator = enumerator
        self.registry = registry or StrategyRegistry()
        self.names = names or NameDictionaryCache(names_source, default_locale=default_locale)
        self.matcher = matcher or FallbackMatcher()
        self.process_locale = process_locale
        self._today = today

    def set_resolver(self, resolver: Resolver | None, owner: object | None = None) -> object:
        """Register (or clear with ``None``) a custom resolver for ``owner``.

        Owners are held weakly, so only weak-referenceable objects qualify: a
        ``LocalizedDate`` can own a resolver, a plain ``datetime.date`` cannot
        and raises ``TypeError``. Without an owner the engine itself is used.
        """

        target = self if owner is None else owner
        self.registry.set_resolver(target, resolver)
        logger.debug(
            "resolver %s for %s",
            "cleared" if resolver is None else "registered",
            type(target).__name__,
        )
        return target

    def get_resolver(self, owner: object | None = None) -> Resolver | None:
        return self.registry.lookup(self if owner is None else owner, self)

    def get_holiday_id(
        self, value: DateLike | None = None, *, context: QueryContext | None = None
    ) -> HolidayResult:
        """Identifier of the holiday on the date, ``False`` if it is not a holiday."""

        holiday_id = self._resolve(value, context)
        record_query("get_holiday_id", holiday=holiday_id is not NOT_A_HOLIDAY)
        return holiday_id

    def is_holiday(
        self, value: DateLike | None = None, *, context: QueryContext | None = None
    ) -> bool:
        result = self._resolve(value, context) is not NOT_A_HOLIDAY
        record_query("is_holiday", holiday=result)
        return result

    def get_holiday_name(
        self,
        locale: str | DateLike | None = None,
        value: DateLike | None = None,
        *,
        context: QueryContext | None = None,
    ) -> str | Literal[False]:
        """Display name of the holiday on the date, ``False`` if it is not a holiday.

        The locale defaults to the date's own locale, then the context's, then
        the process locale, then ``en``. A date passed as the first argument is
        accepted in place of the locale.
        """

        if locale is not None and not isinstance(locale, str):
            locale, value = value if isinstance(value, str) else None, locale
        day = self._effective_date(value, context)
        holiday_id = self._resolve(day, context)
        record_query("get_holiday_name", holiday=holiday_id is not NOT_A_HOLIDAY)
        if holiday_id is NOT_A_HOLIDAY:
            return NOT_A_HOLIDAY

        effective_locale = (
            locale
            or locale_of(day)
            or (context.locale if context else None)
            or self.process_locale
            or DEFAULT_HOLIDAY_LOCALE
        )
        names = self.get_holiday_names_dictionary(effective_locale)
        return names.get(holiday_id, UNKNOWN_HOLIDAY_NAME)

    def get_holiday_names_dictionary(self, locale: str | None) -> Mapping[str, str]:
        return self.names.get_names(self, normalize_locale(locale))

    def as_dict(self) -> MutableMapping[str, Any]:
        return {
            "region": self.region,
            "default_locale": self.names.default_locale,
            "process_locale": self.process_locale,
            "resolvers": len(self.registry),
            "has_default_resolver": self.registry.get_resolver(self) is not None,
            "cached_locales": self.names.cached_locales(self),
        }

    def _effective_date(self, value: DateLike | None, context: QueryContext | None) -> DateLike:
        if value is not None:
            return value
        if context is not None and context.date is not None:
            return context.date
        return self._today()

    def _resolve(self, value: DateLike | None, context: QueryContext | None) -> HolidayResult:
        day = self._effective_date(value, context)
        owner = context.owner if context is not None and context.owner is not None else day

        def fallback() -> HolidayResult:
            return self.matcher.resolve(day, self.enumerator)

        resolver = self.registry.lookup(owner, self)
        if resolver is None:
            return fallback()
        return resolver(self.region, day, fallback)


__all__ = ["HolidayEngine", "UNKNOWN_HOLIDAY_NAME"]
