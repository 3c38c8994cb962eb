"""Factory helpers for constructing HolidayEngine instances."""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

from calendars.enumerator import RegionYearEnumerator
from data.sources import JsonNameSource, RegionNameSource
from infra.metrics import ensure_metrics_server

from .config import EngineConfigError, HolidayEngineConfig
from .facade import HolidayEngine
from .names import NameDataSource

logger = logging.getLogger("holidayengine.engine")


def build_names_source(config: HolidayEngineConfig) -> NameDataSource:
    if config.names_dir is not None:
        return JsonNameSource(config.names_dir)
    return RegionNameSource(config.region, config.subdiv)


def build_engine(config: HolidayEngineConfig) -> HolidayEngine:
    """Wire a region calendar, its name source and the engine together."""

    try:
        enumerator = RegionYearEnumerator(config.region, config.subdiv)
        names_source = build_names_source(config)
    except NotImplementedError as exc:
        raise EngineConfigError(
            f"unsupported holiday region {config.region!r} (subdiv={config.subdiv!r}): {exc}"
        ) from exc

    engine = HolidayEngine(
        region=config.region,
        enumerator=enumerator,
        names_source=names_source,
        default_locale=config.default_locale,
        process_locale=config.locale,
    )
    logger.info("holiday engine ready", extra={"config": config.as_dict()})
    return engine


def build_engine_from_env(*, load_env: bool = True) -> HolidayEngine:
    if load_env:
        load_dotenv()
    config = HolidayEngineConfig.from_env()
    metrics_port = os.environ.get("PROMETHEUS_METRICS_PORT")
    if metrics_port:
        ensure_metrics_server(int(metrics_port))
    return build_engine(config)


__all__ = ["build_engine", "build_engine_from_env", "build_names_source"]
