"""Prometheus metric sink helpers."""

from __future__ import annotations

from prometheus_client import Counter, start_http_server

DICTIONARY_LOADS = Counter(
    "holiday_name_dictionary_loads_total",
    "Holiday name dictionary load attempts",
    ["locale", "outcome"],
)
HOLIDAY_QUERIES = Counter(
    "holiday_queries_total",
    "Holiday resolution queries",
    ["operation", "result"],
)
_SERVER_STARTED = False


def record_dictionary_load(locale: str, *, found: bool) -> None:
    DICTIONARY_LOADS.labels(locale=locale, outcome="hit" if found else "miss").inc()


def record_query(operation: str, *, holiday: bool) -> None:
    HOLIDAY_QUERIES.labels(operation=operation, result="holiday" if holiday else "workday").inc()


def ensure_metrics_server(port: int = 9464) -> None:
    """Start the Prometheus scrape endpoint if it is not already running."""

    global _SERVER_STARTED
    if _SERVER_STARTED:
        return
    start_http_server(port)
    _SERVER_STARTED = True


__all__ = [
    "DICTIONARY_LOADS",
    "HOLIDAY_QUERIES",
    "ensure_metrics_server",
    "record_dictionary_load",
    "record_query",
]
