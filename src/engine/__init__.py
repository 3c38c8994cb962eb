"""Holiday resolution engine."""

from .context import QueryContext
from .facade import UNKNOWN_HOLIDAY_NAME, HolidayEngine
from .matcher import NOT_A_HOLIDAY, FallbackMatcher
from .names import DEFAULT_HOLIDAY_LOCALE, NameDictionaryCache, normalize_locale
from .registry import StrategyRegistry

__all__ = [
    "DEFAULT_HOLIDAY_LOCALE",
    "FallbackMatcher",
    "HolidayEngine",
    "NOT_A_HOLIDAY",
    "NameDictionaryCache",
    "QueryContext",
    "StrategyRegistry",
    "UNKNOWN_HOLIDAY_NAME",
    "normalize_locale",
]
