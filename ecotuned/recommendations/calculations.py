"""
Numeric helpers for recommendation text.

Every number a rule suggests to the user (a thermostat setting, a solar
charging window) is computed here, separately from the prose that carries it.
All functions are pure.

Thermostat suggestions are clamped to the 15–25 °C comfort range accepted by
``UserPreferences`` and rounded to the nearest 0.5 °C.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ecotuned.models.weather import SunnyPeriod
from ecotuned.utils.rounding import round_half_up, round_to_half
from ecotuned.utils.time_utils import format_hour_12h

MIN_THERMOSTAT_C = 15.0
MAX_THERMOSTAT_C = 25.0

GAS_MILD_REDUCTION_C = 1.5
OIL_MILD_REDUCTION_C = 2.0
OIL_ZONE_REDUCTION_C = 4
PREHEAT_OFFSET_C = 1.0

SOLAR_MIDDAY_START_HOUR = 11
SOLAR_MIDDAY_END_HOUR = 15
SOLAR_WINDOW_HOURS = 3


@dataclass(frozen=True)
class PreheatSchedule:
    """Evening pre-heat target and the overnight setback."""

    preheat_temp: float
    night_temp: float


@dataclass(frozen=True)
class SolarWindow:
    """A fixed-length window starting at the strongest sunny hour.

    ``end_hour`` is on the 24-hour clock and may exceed 23 for a late start.
    """

    start_hour: int
    end_hour: int
    temp: int

    @property
    def start_label(self) -> str:
        return format_hour_12h(self.start_hour)

    @property
    def end_label(self) -> str:
        return format_hour_12h(self.end_hour)


def reduced_thermostat(preferred: float, reduction: float) -> float:
    """Suggested thermostat after a mild-weather setback, never below 15 °C."""
    return max(MIN_THERMOSTAT_C, round_to_half(preferred - reduction))


def preheat_schedule(preferred: float) -> PreheatSchedule:
    """Pre-heat one degree above ``preferred``, set back one degree overnight."""
    return PreheatSchedule(
        preheat_temp=min(MAX_THERMOSTAT_C, preferred + PREHEAT_OFFSET_C),
        night_temp=max(MIN_THERMOSTAT_C, preferred - PREHEAT_OFFSET_C),
    )


def batch_heating_temperature(preferred: float) -> float:
    return min(MAX_THERMOSTAT_C, preferred + PREHEAT_OFFSET_C)


def best_solar_window(sunny_periods: Sequence[SunnyPeriod]) -> SolarWindow | None:
    """Pick the strongest sunny hour, preferring the 11am–3pm band.

    Among sunny periods whose hour is within [11, 15] the one with the
    highest solar radiation wins; the first one wins a tie. If no period
    falls in that band the global maximum is used instead.

    Returns:
        A 3-hour ``SolarWindow``, or ``None`` when there are no sunny periods.
    """
    if not sunny_periods:
        return None

    midday = [
        p for p in sunny_periods
        if SOLAR_MIDDAY_START_HOUR <= p.hour <= SOLAR_MIDDAY_END_HOUR
    ]
    candidates = midday or list(sunny_periods)

    best = candidates[0]
    for period in candidates[1:]:
        if period.solar_radiation > best.solar_radiation:
            best = period

    return SolarWindow(
        start_hour=best.hour,
        end_hour=best.hour + SOLAR_WINDOW_HOURS,
        temp=round_half_up(best.temp),
    )


def format_number(value: float) -> str:
    """Render a number without a trailing ``.0`` (18.0 → ``"18"``, 17.5 → ``"17.5"``)."""
    return f"{value:g}"
