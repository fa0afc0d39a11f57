"""
WMO weather interpretation codes → condition labels and severity ranks.

Open-Meteo reports one WMO code per hour (https://open-meteo.com/en/docs).
Codes are grouped into condition labels, and each label carries a severity
rank used to summarise a day by its worst weather:

    rank  label            codes
    0     Clear            0
    1     Partly Cloudy    1–3
    2     Foggy            4–48
    3     Drizzle          49–59
    4     Showers          80–84
    5     Rain             60–69
    6     Snow             70–79
    7     Thunderstorm     85–99

Codes outside 0–99 map to ``Unknown`` and are ignored when ranking.

This module has NO imports from any other ``ecotuned`` package.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Optional


class WeatherCondition(StrEnum):
    """Human-readable condition label."""

    CLEAR = "Clear"
    PARTLY_CLOUDY = "Partly Cloudy"
    FOGGY = "Foggy"
    DRIZZLE = "Drizzle"
    SHOWERS = "Showers"
    RAIN = "Rain"
    SNOW = "Snow"
    THUNDERSTORM = "Thunderstorm"
    UNKNOWN = "Unknown"


CONDITION_SEVERITY: dict[WeatherCondition, int] = {
    WeatherCondition.CLEAR:         0,
    WeatherCondition.PARTLY_CLOUDY: 1,
    WeatherCondition.FOGGY:         2,
    WeatherCondition.DRIZZLE:       3,
    WeatherCondition.SHOWERS:       4,
    WeatherCondition.RAIN:          5,
    WeatherCondition.SNOW:          6,
    WeatherCondition.THUNDERSTORM:  7,
}


def condition_from_code(code: Optional[int]) -> WeatherCondition:
    """Map a WMO weather code to its condition label."""
    if code is None or code < 0:
        return WeatherCondition.UNKNOWN
    if code == 0:
        return WeatherCondition.CLEAR
    if code <= 3:
        return WeatherCondition.PARTLY_CLOUDY
    if code <= 48:
        return WeatherCondition.FOGGY
    if code <= 59:
        return WeatherCondition.DRIZZLE
    if code <= 69:
        return WeatherCondition.RAIN
    if code <= 79:
        return WeatherCondition.SNOW
    if code <= 84:
        return WeatherCondition.SHOWERS
    if code <= 99:
        return WeatherCondition.THUNDERSTORM
    return WeatherCondition.UNKNOWN


def severity_of(code: Optional[int]) -> Optional[int]:
    """Return the severity rank of a WMO code, or ``None`` for unknown codes."""
    return CONDITION_SEVERITY.get(condition_from_code(code))
