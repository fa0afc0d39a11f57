"""
EcoTuned — CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Validate inputs (preferences, day).
  4. Fetch upstream data (postcode → forecast → grid) and run the engine.
  5. Report result to stdout.

Install and run::

    pip install -e .
    ecotuned --help
    ecotuned recommend --postcode "SW1A 2AA" --day tomorrow
    ecotuned recommend --prefs prefs.json --day today --json
    ecotuned drying-windows --postcode SW1A2AA
    ecotuned validate-config
    ecotuned check-heating gas combi
"""

from __future__ import annotations

import json
from datetime import timedelta
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="ecotuned",
    help="EcoTuned — weather- and grid-aware energy-saving tips for UK homes.",
    add_completion=False,
)

_DAYS = ("today", "tomorrow")


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from ecotuned.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except Exception as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from ecotuned.utils.logging import configure_logging
    configure_logging(config.logging)


def _validate_day_or_exit(day: str) -> str:
    day = day.lower()
    if day not in _DAYS:
        typer.echo(f"[ERROR] --day must be one of {list(_DAYS)}, got '{day}'.", err=True)
        raise typer.Exit(code=1)
    return day


def _load_preferences_or_exit(prefs_path: Optional[str], postcode: Optional[str]):
    """Build ``UserPreferences`` from a JSON file and/or ``--postcode``.

    ``--postcode`` overrides the file's postcode. One of the two is required.
    """
    from pydantic import ValidationError

    from ecotuned.models.preferences import UserPreferences, load_preferences

    raw: dict = {}
    try:
        if prefs_path:
            raw = load_preferences(prefs_path).model_dump()
        if postcode:
            raw["postcode"] = postcode
        if "postcode" not in raw:
            typer.echo("[ERROR] Provide --postcode or a --prefs file with a postcode.", err=True)
            raise typer.Exit(code=1)
        return UserPreferences.model_validate(raw)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] Preferences file not found: {exc.filename}", err=True)
        raise typer.Exit(code=1)
    except json.JSONDecodeError as exc:
        typer.echo(f"[ERROR] Preferences file is not valid JSON: {exc}", err=True)
        raise typer.Exit(code=1)
    except ValidationError as exc:
        typer.echo(f"[ERROR] Invalid preferences: {exc}", err=True)
        raise typer.Exit(code=1)


def _fetch_weather_or_exit(config, postcode: str, day: str, clock):
    """Resolve ``postcode`` and build the ``WeatherSnapshot`` for ``day``."""
    from ecotuned.features.snapshot import extract_weather_snapshot
    from ecotuned.ingestion.errors import UpstreamAPIError
    from ecotuned.ingestion.open_meteo_client import (
        OpenMeteoClient,
        parse_daily_aggregates,
        parse_hourly_samples,
    )
    from ecotuned.ingestion.postcodes_client import PostcodesClient

    today = clock.now().date()
    target = today if day == "today" else today + timedelta(days=1)
    date_str = target.isoformat()

    try:
        with PostcodesClient(
            config.api.postcodes_url, timeout=config.api.timeout_seconds
        ) as postcodes:
            location = postcodes.lookup(postcode)

        with OpenMeteoClient(
            config.api.open_meteo_url, timeout=config.api.timeout_seconds
        ) as meteo:
            payload = meteo.fetch_forecast(
                location.latitude, location.longitude, config.api.forecast_days
            )

        samples = parse_hourly_samples(payload)
        daily = parse_daily_aggregates(payload, date_str)
        return extract_weather_snapshot(
            samples,
            daily,
            date_str,
            is_today=(day == "today"),
            clock=clock,
            drying_threshold=config.engine.drying_threshold,
        )
    except UpstreamAPIError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except ValueError as exc:
        typer.echo(f"[ERROR] Forecast unusable: {exc}", err=True)
        raise typer.Exit(code=1)


def _fetch_grid(config):
    """Fetch the live grid mix; ``None`` (with a warning) if unavailable."""
    from ecotuned.ingestion.carbon_intensity_client import CarbonIntensityClient
    from ecotuned.ingestion.errors import UpstreamAPIError

    try:
        with CarbonIntensityClient(
            config.api.carbon_intensity_url, timeout=config.api.timeout_seconds
        ) as client:
            return client.fetch_grid_snapshot()
    except UpstreamAPIError as exc:
        typer.echo(f"[WARN] Grid data unavailable, skipping grid tips: {exc}", err=True)
        return None


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("recommend")
def recommend(
    postcode: Optional[str] = typer.Option(
        None,
        "--postcode",
        help="UK postcode (overrides the postcode in --prefs).",
    ),
    prefs_path: Optional[str] = typer.Option(
        None,
        "--prefs",
        help="Path to a JSON preferences file.",
    ),
    day: str = typer.Option(
        "tomorrow",
        "--day",
        help="Day to plan for: today | tomorrow.",
    ),
    no_grid: bool = typer.Option(
        False,
        "--no-grid",
        help="Skip the live grid mix (grid tips only apply to today).",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print recommendations as JSON instead of text.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Fetch the forecast for a postcode and print energy-saving tips."""
    from ecotuned.recommendations.engine import generate_recommendations
    from ecotuned.recommendations.time_status import passed_last
    from ecotuned.reporting.formatters import format_recommendations
    from ecotuned.utils.time_utils import SystemClock

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    day = _validate_day_or_exit(day)
    prefs = _load_preferences_or_exit(prefs_path, postcode)
    clock = SystemClock(config.engine.timezone)

    weather = _fetch_weather_or_exit(config, prefs.postcode, day, clock)
    grid = None
    if day == "today" and not no_grid:
        grid = _fetch_grid(config)

    recs = generate_recommendations(
        weather,
        prefs,
        is_today=(day == "today"),
        day=day,
        grid=grid,
        clock=clock,
        settings=config.engine,
    )

    if as_json:
        typer.echo(json.dumps(
            {
                "date": weather.date,
                "day": day,
                "postcode": prefs.postcode,
                "weather": weather.model_dump(),
                "grid": grid.model_dump() if grid is not None else None,
                "recommendations": [r.model_dump() for r in passed_last(recs)],
            },
            indent=2,
            ensure_ascii=False,
        ))
        return

    typer.echo(format_recommendations(recs, weather, day, grid))


@app.command("drying-windows")
def drying_windows(
    postcode: str = typer.Option(
        ...,
        "--postcode",
        help="UK postcode.",
    ),
    day: str = typer.Option(
        "tomorrow",
        "--day",
        help="Day to inspect: today | tomorrow.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Print drying statistics and continuous drying windows for a postcode."""
    from ecotuned.reporting.formatters import format_drying_windows
    from ecotuned.utils.time_utils import SystemClock

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    day = _validate_day_or_exit(day)
    prefs = _load_preferences_or_exit(None, postcode)
    clock = SystemClock(config.engine.timezone)

    weather = _fetch_weather_or_exit(config, prefs.postcode, day, clock)
    typer.echo(format_drying_windows(weather, day))


@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Max recommendations: {config.engine.max_recommendations}")
    typer.echo(f"  Category cap:        {config.engine.category_cap}")
    typer.echo(f"  Drying threshold:    {config.engine.drying_threshold}")
    typer.echo(f"  Timezone:            {config.engine.timezone}")
    typer.echo(f"  API timeout:         {config.api.timeout_seconds}s")
    typer.echo(f"  Log level:           {config.logging.level}")
    typer.echo(f"  Debug mode:          {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


@app.command("check-heating")
def check_heating(
    heating_type: str = typer.Argument(
        ...,
        help="Heating type: gas | electric | heat-pump | oil | other.",
    ),
    hot_water: Optional[str] = typer.Argument(
        None,
        help="Hot water system to check: combi | tank | electric | other.",
    ),
) -> None:
    """List hot-water systems compatible with a heating type.

    With HOT_WATER given, exits with code 1 if the pair is incompatible.
    """
    from ecotuned.taxonomy.heating_systems import (
        HEATING_TYPES,
        get_valid_hot_water_options,
        is_valid_heating_combination,
    )

    if heating_type not in HEATING_TYPES:
        typer.echo(
            f"  Note: '{heating_type}' is not a known heating type; "
            "treating it as 'other'."
        )

    options = get_valid_hot_water_options(heating_type)
    typer.echo(f"Valid hot water systems for '{heating_type}': {', '.join(options)}")

    if hot_water is None:
        return

    if is_valid_heating_combination(heating_type, hot_water):
        typer.echo(f"[OK] '{hot_water}' is compatible with '{heating_type}'.")
    else:
        typer.echo(
            f"[ERROR] '{hot_water}' is not compatible with '{heating_type}'.", err=True
        )
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
