"""Explicit query context for holiday lookups."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class QueryContext:
    """Carries the implicit "current" date, resolver owner and locale of a caller.

    Any field left as ``None`` falls through to the engine defaults.
    """

    date: date | None = None
    owner: object | None = None
    locale: str | None = None


__all__ = ["QueryContext"]
