"""
ASCII terminal formatters for CLI commands.

All formatters accept models and return plain multi-line strings suitable
for ``typer.echo()``.

Recommendation blocks look like::

  === Recommendations for tomorrow (2025-01-09) ===
    Weather: 4-9°C, Rain (Partly Cloudy / Rain), rain 85%, wind 12mph

    1. [HIGH] Use hot water during off-peak hours            heating / high
       Cold forecast tomorrow (4-9°C). Schedule showers, ...
       Why: Off-peak electricity is 50-70% cheaper, ...
       Save £0.30-£0.60 per day

Items whose action window has already passed are tagged ``(passed)`` and
listed after the actionable ones.
"""

from __future__ import annotations

import textwrap

from ecotuned.models.grid import GridSnapshot
from ecotuned.models.recommendation import Recommendation
from ecotuned.models.weather import WeatherSnapshot
from ecotuned.recommendations.calculations import format_number
from ecotuned.recommendations.time_status import passed_last
from ecotuned.utils.time_utils import format_hour_12h

_WRAP_WIDTH = 76
_INDENT = "       "


def format_weather_line(weather: WeatherSnapshot) -> str:
    """One-line weather summary."""
    conditions = weather.conditions
    if weather.conditions_range:
        conditions += f" ({weather.conditions_range})"
    parts = [
        f"{format_number(weather.temp_low)}-{format_number(weather.temp_high)}°C",
        conditions,
        f"rain {format_number(weather.rain_probability)}%",
        f"wind {format_number(weather.wind_speed_mph)}mph",
    ]
    if weather.temp_now is not None:
        parts.insert(0, f"now {format_number(weather.temp_now)}°C")
    return "  Weather: " + ", ".join(parts)


def format_grid_line(grid: GridSnapshot) -> str:
    intensity = (
        f"{format_number(grid.carbon_intensity)} g/kWh" if grid.carbon_intensity > 0 else "n/a"
    )
    return (
        f"  Grid:    {format_number(grid.renewable_percent)}% renewable, "
        f"{format_number(grid.fossil_percent)}% fossil, intensity {intensity} "
        f"({grid.carbon_index})"
    )


def format_recommendations(
    recs: list[Recommendation],
    weather: WeatherSnapshot,
    day: str,
    grid: GridSnapshot | None = None,
) -> str:
    """Format the final recommendation list for one day.

    Args:
        recs:    Engine output, already ranked. Passed items are moved last.
        weather: Snapshot the recommendations were made for.
        day:     ``"today"`` or ``"tomorrow"``.
        grid:    Optional grid snapshot to summarise in the header.

    Returns:
        Multi-line string.
    """
    lines: list[str] = [
        "",
        f"=== Recommendations for {day} ({weather.date}) ===",
        format_weather_line(weather),
    ]
    if grid is not None:
        lines.append(format_grid_line(grid))

    if not recs:
        lines.append("")
        lines.append("  (no recommendations for this day)")
        return "\n".join(lines)

    for rank, rec in enumerate(passed_last(recs), start=1):
        passed = " (passed)" if rec.time_status == "passed" else ""
        headline = f"  {rank}. [{rec.priority.upper()}] {rec.title}{passed}"
        tag = f"{rec.category} / {rec.effective_impact}"
        lines.append("")
        lines.append(f"{headline:<60} {tag}")
        lines.extend(_wrap(rec.description))
        lines.extend(_wrap(f"Why: {rec.reasoning}"))
        if rec.savings_estimate:
            lines.append(f"{_INDENT}{rec.savings_estimate}")
    return "\n".join(lines)


def format_drying_windows(weather: WeatherSnapshot, day: str) -> str:
    """Format drying statistics and the continuous drying periods.

    Example::

        === Drying windows for tomorrow (2025-06-14) ===
          Drying hours: 6   Sunny hours: 8   Avg humidity: 55%   Wind: 9mph

          Start   End    Hours  Score  Temp  Humidity
          ---------------------------------------------
          10am    4pm        6   0.71   19°C      52%
    """
    lines: list[str] = [
        "",
        f"=== Drying windows for {day} ({weather.date}) ===",
        (
            f"  Drying hours: {weather.drying_hours}   "
            f"Sunny hours: {weather.sunny_hours}   "
            f"Avg humidity: {format_number(weather.avg_humidity)}%   "
            f"Wind: {format_number(weather.wind_speed_mph)}mph"
        ),
    ]

    if not weather.continuous_drying_periods:
        lines.append("")
        lines.append("  (no good drying windows)")
        return "\n".join(lines)

    lines.append("")
    header = (
        f"  {'Start':<6}  {'End':<5}  {'Hours':>5}  {'Score':>5}  "
        f"{'Temp':>5}  {'Humidity':>8}"
    )
    lines.append(header)
    lines.append("  " + "-" * (len(header) - 2))
    for p in weather.continuous_drying_periods:
        lines.append(
            f"  {format_hour_12h(p.start_hour):<6}  {format_hour_12h(p.end_hour + 1):<5}  "
            f"{p.duration_hours:>5}  {p.avg_score:>5.2f}  "
            f"{format_number(p.avg_temp) + '°C':>5}  {format_number(p.avg_humidity) + '%':>8}"
        )
    return "\n".join(lines)


def _wrap(text: str) -> list[str]:
    return textwrap.wrap(
        text, width=_WRAP_WIDTH, initial_indent=_INDENT, subsequent_indent=_INDENT
    )
