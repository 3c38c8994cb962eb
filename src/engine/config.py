"""Holiday engine configuration surface."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, MutableMapping

from .names import DEFAULT_HOLIDAY_LOCALE, normalize_locale


class EngineConfigError(ValueError):
    """Raised when required configuration is missing or invalid."""


def _get_str(env: Mapping[str, str], key: str) -> str | None:
    raw = env.get(key)
    if raw is None:
        return None
    stripped = raw.strip()
    return stripped or None


def _get_dir(env: Mapping[str, str], key: str) -> Path | None:
    raw = _get_str(env, key)
    if raw is None:
        return None
    path = Path(raw).expanduser()
    if not path.is_dir():
        raise EngineConfigError(f"{key} must point to an existing directory, got {raw!r}")
    return path


@dataclass(frozen=True)
class HolidayEngineConfig:
    """Region, locale and name-data settings for a holiday engine."""

    region: str = "US"
    subdiv: str | None = None
    default_locale: str = DEFAULT_HOLIDAY_LOCALE
    locale: str | None = None
    names_dir: Path | None = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "HolidayEngineConfig":
        source = os.environ if env is None else env
        raw_region = source.get("HOLIDAY_REGION")
        if raw_region is not None and not raw_region.strip():
            raise EngineConfigError("HOLIDAY_REGION must not be empty")
        region = (raw_region or "US").strip().upper()
        return cls(
            region=region,
            subdiv=_get_str(source, "HOLIDAY_SUBDIV"),
            default_locale=normalize_locale(_get_str(source, "HOLIDAY_DEFAULT_LOCALE"))
            or DEFAULT_HOLIDAY_LOCALE,
            locale=_get_str(source, "HOLIDAY_LOCALE"),
            names_dir=_get_dir(source, "HOLIDAY_NAMES_DIR"),
            log_level=(source.get("LOG_LEVEL") or "INFO").upper(),
        )

    def as_dict(self) -> MutableMapping[str, str | None]:
        """Expose configuration for debugging/log serialization."""

        return {
            "region": self.region,
            "subdiv": self.subdiv,
            "default_locale": self.default_locale,
            "locale": self.locale,
            "names_dir": str(self.names_dir) if self.names_dir else None,
            "log_level": self.log_level,
        }


__all__ = ["EngineConfigError", "HolidayEngineConfig"]
