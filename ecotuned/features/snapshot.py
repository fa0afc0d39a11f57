"""
Build a ``WeatherSnapshot`` for one calendar day from raw hourly samples.

Pipeline:
  1. Keep the samples whose timestamp starts with ``date_str``.
  2. Fill missing or out-of-range fields with safe defaults (see
     ``_clean_sample``) and convert wind km/h → mph.
  3. Score every hour with ``drying_score`` and merge qualifying hours into
     continuous drying periods (trimmed to the current hour for today).
  4. Aggregate day statistics and summarise the weather codes.

Rounding of reported statistics is half-up, so a mean humidity of 62.5
reports as 63.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

from ecotuned.features.conditions import summarize_conditions
from ecotuned.features.drying import (
    DRYING_THRESHOLD,
    ScoredHour,
    drying_score,
    find_continuous_drying_periods,
)
from ecotuned.models.weather import (
    DailyAggregates,
    HourlySample,
    SunnyPeriod,
    WeatherSnapshot,
)
from ecotuned.utils.rounding import round_half_up
from ecotuned.utils.time_utils import Clock, SystemClock, hour_of

logger = logging.getLogger(__name__)

KMH_TO_MPH = 0.621371
SUNNY_SOLAR_THRESHOLD_WM2 = 200.0

DEFAULT_HUMIDITY_PCT = 50.0


@dataclass(frozen=True)
class _CleanHour:
    hour: int
    temp: float
    cloud: float
    rain: float
    wind_mph: float
    solar: float
    humidity: float
    weather_code: Optional[int]


def extract_weather_snapshot(
    samples: Sequence[HourlySample],
    daily: DailyAggregates,
    date_str: str,
    is_today: bool,
    clock: Optional[Clock] = None,
    drying_threshold: float = DRYING_THRESHOLD,
) -> WeatherSnapshot:
    """Derive the day's weather features.

    Args:
        samples:          Hourly forecast samples, possibly spanning several days.
        daily:            Daily high/low and sun times for ``date_str``.
        date_str:         ISO date to extract (``YYYY-MM-DD``).
        is_today:         When ``True``, drying periods are trimmed to hours not
                          yet elapsed and ``temp_now`` is populated.
        clock:            Source of the current UK hour; defaults to the system clock.
        drying_threshold: Minimum drying score for an hour to count.

    Returns:
        A validated ``WeatherSnapshot``.

    Raises:
        ValueError: If no sample falls on ``date_str``.
    """
    day_samples = [s for s in samples if s.time.startswith(date_str)]
    if not day_samples:
        raise ValueError(f"No hourly forecast data available for {date_str}.")

    temp_high = round_half_up(daily.temp_high_c)
    temp_low = round_half_up(daily.temp_low_c)
    fallback_temp = (daily.temp_high_c + daily.temp_low_c) / 2

    substituted = 0
    hours: list[_CleanHour] = []
    for sample in day_samples:
        clean, n_defaults = _clean_sample(sample, fallback_temp)
        hours.append(clean)
        substituted += n_defaults
    if substituted:
        logger.debug(
            "%s: substituted defaults for %d missing or out-of-range hourly values",
            date_str, substituted,
        )

    scored = [
        ScoredHour(
            hour=h.hour,
            score=drying_score(
                humidity_pct=h.humidity,
                solar_radiation_wm2=h.solar,
                wind_speed_mph=h.wind_mph,
                temperature_c=h.temp,
                hour=h.hour,
                rain_probability_pct=h.rain,
            ),
            temp=h.temp,
            humidity=h.humidity,
        )
        for h in hours
    ]

    current_hour: Optional[int] = None
    temp_now: Optional[float] = None
    if is_today:
        current_hour = (clock or SystemClock()).current_hour()
        now_hour = next((h for h in hours if h.hour == current_hour), None)
        if now_hour is not None:
            temp_now = round_half_up(now_hour.temp)

    drying_periods = find_continuous_drying_periods(
        scored, threshold=drying_threshold, current_hour=current_hour
    )

    sunny_periods = [
        SunnyPeriod(
            hour=h.hour,
            temp=round_half_up(h.temp),
            cloud_coverage=h.cloud,
            solar_radiation=round_half_up(h.solar),
        )
        for h in hours
        if h.solar > SUNNY_SOLAR_THRESHOLD_WM2
    ]

    conditions, conditions_range = summarize_conditions(h.weather_code for h in hours)
    n = len(hours)

    snapshot = WeatherSnapshot(
        date=date_str,
        temp_high=temp_high,
        temp_low=temp_low,
        avg_temp=round_half_up((temp_high + temp_low) / 2),
        temp_now=temp_now,
        conditions=conditions,
        conditions_range=conditions_range,
        cloud_coverage_pct=round_half_up(sum(h.cloud for h in hours) / n),
        wind_speed_mph=round_half_up(sum(h.wind_mph for h in hours) / n),
        max_wind_speed_mph=round_half_up(max(h.wind_mph for h in hours)),
        rain_probability=round_half_up(max(h.rain for h in hours)),
        avg_humidity=round_half_up(sum(h.humidity for h in hours) / n),
        sunrise=daily.sunrise,
        sunset=daily.sunset,
        sunny_hours=len(sunny_periods),
        drying_hours=sum(p.duration_hours for p in drying_periods),
        sunny_periods=sunny_periods,
        continuous_drying_periods=drying_periods,
    )
    logger.debug(
        "%s: %d drying hours in %d periods, %d sunny hours, conditions=%s",
        date_str, snapshot.drying_hours, len(drying_periods),
        snapshot.sunny_hours, snapshot.conditions,
    )
    return snapshot


def _clean_sample(sample: HourlySample, fallback_temp: float) -> tuple[_CleanHour, int]:
    """Apply default substitution to one sample; return it with the substitution count."""
    substituted = 0

    temp = sample.temperature_c
    if temp is None:
        temp = fallback_temp
        substituted += 1

    cloud = sample.cloud_cover_pct
    if cloud is None:
        cloud = 0.0
        substituted += 1

    rain = sample.rain_probability_pct
    if rain is None:
        rain = 0.0
        substituted += 1
    rain = min(max(rain, 0.0), 100.0)

    wind_kmh = sample.wind_speed_kmh
    if wind_kmh is None or wind_kmh < 0:
        wind_kmh = 0.0
        substituted += 1

    solar = sample.solar_radiation_wm2
    if solar is None or solar < 0:
        solar = 0.0
        substituted += 1

    humidity = sample.humidity_pct
    if humidity is None or not 0 <= humidity <= 100:
        humidity = DEFAULT_HUMIDITY_PCT
        substituted += 1

    clean = _CleanHour(
        hour=hour_of(sample.time),
        temp=temp,
        cloud=cloud,
        rain=rain,
        wind_mph=wind_kmh * KMH_TO_MPH,
        solar=solar,
        humidity=humidity,
        weather_code=sample.weather_code,
    )
    return clean, substituted
