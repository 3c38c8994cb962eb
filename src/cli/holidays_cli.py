"""CLI for querying holidays of the configured region."""

from __future__ import annotations

import json
import os
from datetime import date, datetime, timezone
from typing import Optional

import typer
from dotenv import load_dotenv

from calendars.dates import parse_date
from engine.builder import build_engine_from_env
from engine.config import EngineConfigError, HolidayEngineConfig
from engine.facade import HolidayEngine
from infra.logging import configure_logging

app = typer.Typer(help="Holiday lookups for the configured region")


def _configure_environment() -> None:
    load_dotenv()
    run_id = os.environ.get("RUN_ID")
    if not run_id:
        run_id = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
        os.environ["RUN_ID"] = run_id
    config = _load_config()
    configure_logging(run_id=run_id, region=config.region, level=config.log_level)


def _load_config() -> HolidayEngineConfig:
    try:
        return HolidayEngineConfig.from_env()
    except EngineConfigError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _build_engine() -> HolidayEngine:
    try:
        return build_engine_from_env(load_env=False)
    except EngineConfigError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _parse_date(value: str) -> date:
    try:
        return parse_date(value)
    except ValueError as exc:
        raise typer.BadParameter(f"Invalid date: {value}") from exc


@app.command()
def check(day: str = typer.Argument(..., help="Date to check (YYYY-MM-DD)")) -> None:
    """Print the holiday identifier for a date."""

    _configure_environment()
    target = _parse_date(day)
    engine = _build_engine()
    holiday_id = engine.get_holiday_id(target)
    if holiday_id is False:
        typer.echo(f"{target.isoformat()}: not a holiday")
        return
    typer.echo(f"{target.isoformat()}: {holiday_id}")


@app.command()
def name(
    day: str = typer.Argument(..., help="Date to check (YYYY-MM-DD)"),
    locale: Optional[str] = typer.Option(None, "--locale", "-l", help="Locale for the name"),
) -> None:
    """Print the localized holiday name for a date."""

    _configure_environment()
    target = _parse_date(day)
    engine = _build_engine()
    holiday_name = engine.get_holiday_name(locale, target)
    if holiday_name is False:
        typer.echo(f"{target.isoformat()}: not a holiday")
        return
    typer.echo(f"{target.isoformat()}: {holiday_name}")


@app.command("list")
def list_holidays(
    year: int = typer.Argument(..., help="Year to enumerate"),
    as_json: bool = typer.Option(False, "--json", help="Emit a JSON array"),
) -> None:
    """List the (identifier, occurrence) pairs the region yields for a year."""

    _configure_environment()
    if year < 1:
        raise typer.BadParameter("year must be positive")
    engine = _build_engine()
    pairs = list(engine.enumerator(year))
    if as_json:
        typer.echo(json.dumps([{"id": holiday_id, "occurrence": when} for holiday_id, when in pairs]))
        return
    for holiday_id, when in pairs:
        typer.echo(f"{holiday_id}\t{when}")


if __name__ == "__main__":
    app()
