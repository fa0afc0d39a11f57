"""
Line-drying quality: per-hour drying score and continuous drying windows.

Drying score (range 0–1)
------------------------
    if rain_probability > 40:  score = 0          # hard cutoff

    score = humidity      (max 0.40)
          + solar         (max 0.30)
          + wind          (max 0.15)
          + temperature   (max 0.10)
          + time_of_day   (max 0.05)

    if 20 < rain_probability <= 40:  score *= 0.7
    score = min(score, 1.0)

Component explanations
----------------------
humidity (% RH):
    < 50 → 0.40;  50–70 → 0.40 tapering to 0.20;  70–85 → 0.20 tapering to 0;
    ≥ 85 → 0.  Humidity is the dominant factor for evaporation.

solar (W/m²):
    > 400 → 0.30;  200–400 → 0 rising to 0.30;  100–200 → 0 rising to 0.15;
    < 100 → 0.

wind (mph):
    8–12 → 0.15 (ideal breeze);  5–20 otherwise → 0.10;  20–25 → 0.05
    (clothes need pegging);  calmer or stronger → 0.

temperature (°C):
    ≥ 21 → 0.10;  15–21 → 0 rising to 0.10;  5–15 → 0 rising to 0.05;  < 5 → 0.

time of day (hour):
    12–17 → up to 0.05, peaking at 15:00 and falling linearly with distance;
    10–11 → 0.03;  18–19 → 0.02;  otherwise 0.

Continuous drying periods
-------------------------
Hours are scanned in chronological order; consecutive hours with
score >= threshold (default 0.4) form one period. For "today", hours before
the current hour are removed from each period before it is finalised, and
periods left empty are dropped.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ecotuned.models.weather import DryingPeriod
from ecotuned.utils.rounding import round_half_up

DRYING_THRESHOLD = 0.4

RAIN_CUTOFF_PCT = 40.0
RAIN_PENALTY_FROM_PCT = 20.0
RAIN_PENALTY_FACTOR = 0.7

PEAK_DRYING_HOUR = 15


@dataclass(frozen=True)
class ScoredHour:
    """One hour of the day with its drying score and the inputs reported per period."""

    hour: int
    score: float
    temp: float
    humidity: float


def drying_score(
    humidity_pct: float,
    solar_radiation_wm2: float,
    wind_speed_mph: float,
    temperature_c: float,
    hour: int,
    rain_probability_pct: float,
) -> float:
    """Compute the line-drying score for one hour.

    Args:
        humidity_pct:         Relative humidity, 0–100.
        solar_radiation_wm2:  Shortwave radiation, W/m².
        wind_speed_mph:       Wind speed in mph.
        temperature_c:        Air temperature, °C.
        hour:                 Local hour of day, 0–23.
        rain_probability_pct: Precipitation probability, 0–100.

    Returns:
        Score in [0.0, 1.0].
    """
    if rain_probability_pct > RAIN_CUTOFF_PCT:
        return 0.0

    score = (
        _humidity_component(humidity_pct)
        + _solar_component(solar_radiation_wm2)
        + _wind_component(wind_speed_mph)
        + _temperature_component(temperature_c)
        + _time_of_day_component(hour)
    )

    if rain_probability_pct > RAIN_PENALTY_FROM_PCT:
        score *= RAIN_PENALTY_FACTOR

    return min(score, 1.0)


def find_continuous_drying_periods(
    scored_hours: list[ScoredHour],
    threshold: float = DRYING_THRESHOLD,
    current_hour: Optional[int] = None,
) -> list[DryingPeriod]:
    """Merge qualifying hours into continuous drying periods.

    Args:
        scored_hours: Hours of one day in chronological order.
        threshold:    Minimum score for an hour to count as good drying.
        current_hour: For today only; hours strictly before it are trimmed.

    Returns:
        Periods in chronological order. Several disjoint periods are possible.
    """
    runs: list[list[ScoredHour]] = []
    current: list[ScoredHour] = []

    for sh in scored_hours:
        if sh.score >= threshold:
            current.append(sh)
        elif current:
            runs.append(current)
            current = []
    if current:
        runs.append(current)

    periods: list[DryingPeriod] = []
    for run in runs:
        if current_hour is not None:
            run = [sh for sh in run if sh.hour >= current_hour]
        if run:
            periods.append(_finalize_period(run))
    return periods


def _finalize_period(run: list[ScoredHour]) -> DryingPeriod:
    n = len(run)
    return DryingPeriod(
        start_hour=run[0].hour,
        end_hour=run[-1].hour,
        duration_hours=n,
        avg_score=round(sum(sh.score for sh in run) / n, 2),
        avg_temp=round_half_up(sum(sh.temp for sh in run) / n),
        avg_humidity=round_half_up(sum(sh.humidity for sh in run) / n),
    )


# ── Components ────────────────────────────────────────────────────────────────

def _humidity_component(humidity: float) -> float:
    if humidity < 50:
        return 0.4
    if humidity < 70:
        return 0.4 - (humidity - 50) / 20 * 0.2
    if humidity < 85:
        return 0.2 - (humidity - 70) / 15 * 0.2
    return 0.0


def _solar_component(solar: float) -> float:
    if solar > 400:
        return 0.3
    if solar >= 200:
        return (solar - 200) / 200 * 0.3
    if solar >= 100:
        return (solar - 100) / 100 * 0.15
    return 0.0


def _wind_component(wind_mph: float) -> float:
    if 8 <= wind_mph <= 12:
        return 0.15
    if 5 <= wind_mph <= 20:
        return 0.10
    if 20 < wind_mph <= 25:
        return 0.05
    return 0.0


def _temperature_component(temp: float) -> float:
    if temp >= 21:
        return 0.1
    if temp >= 15:
        return (temp - 15) / 6 * 0.1
    if temp >= 5:
        return (temp - 5) / 10 * 0.05
    return 0.0


def _time_of_day_component(hour: int) -> float:
    if 12 <= hour <= 17:
        return 0.05 * max(0.0, 1 - abs(hour - PEAK_DRYING_HOUR) / 5)
    if 10 <= hour < 12:
        return 0.03
    if 17 < hour <= 19:
        return 0.02
    return 0.0
