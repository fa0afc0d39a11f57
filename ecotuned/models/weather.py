"""
Weather models — raw hourly input and the per-day snapshot the rules consume.

Two-stage design:
  1. ``HourlySample`` / ``DailyAggregates`` — data as received from the
     forecast provider. Every hourly field except ``time`` may be missing;
     defaults are substituted during extraction, not here.
  2. ``WeatherSnapshot`` — one calendar day of derived features (drying
     windows, sunny hours, condition summary). This is the only weather type
     the recommendation rules see.

All models are frozen.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

HOURS_PER_DAY = 24


class HourlySample(BaseModel):
    """One forecast hour as delivered by the weather provider.

    Attributes:
        time: ISO local timestamp (Europe/London), e.g. ``"2025-01-08T13:00"``.
        temperature_c: Air temperature at 2 m.
        cloud_cover_pct: Total cloud cover, 0–100.
        rain_probability_pct: Precipitation probability, 0–100.
        wind_speed_kmh: Wind speed at 10 m in km/h.
        weather_code: WMO weather interpretation code.
        solar_radiation_wm2: Shortwave radiation in W/m².
        humidity_pct: Relative humidity at 2 m, 0–100.
    """

    model_config = ConfigDict(frozen=True)

    time: str
    temperature_c: Optional[float] = None
    cloud_cover_pct: Optional[float] = None
    rain_probability_pct: Optional[float] = None
    wind_speed_kmh: Optional[float] = None
    weather_code: Optional[int] = None
    solar_radiation_wm2: Optional[float] = None
    humidity_pct: Optional[float] = None


class DailyAggregates(BaseModel):
    """Provider-computed daily values for the same calendar day."""

    model_config = ConfigDict(frozen=True)

    temp_high_c: float
    temp_low_c: float
    sunrise: str
    sunset: str

    @model_validator(mode="after")
    def validate_range(self) -> "DailyAggregates":
        if self.temp_low_c > self.temp_high_c:
            raise ValueError(
                f"temp_low_c ({self.temp_low_c}) must be <= temp_high_c ({self.temp_high_c})."
            )
        return self


class SunnyPeriod(BaseModel):
    """An hour with strong solar radiation (> 200 W/m²), regardless of rain."""

    model_config = ConfigDict(frozen=True)

    hour: int = Field(ge=0, le=23)
    temp: float
    cloud_coverage: float
    solar_radiation: float


class DryingPeriod(BaseModel):
    """A maximal run of consecutive hours with a qualifying drying score.

    ``end_hour`` is inclusive: a period covering 13:00–15:59 has
    ``start_hour=13``, ``end_hour=15``, ``duration_hours=3``.
    """

    model_config = ConfigDict(frozen=True)

    start_hour: int = Field(ge=0, le=23)
    end_hour: int = Field(ge=0, le=23)
    duration_hours: int = Field(ge=1)
    avg_score: float = Field(ge=0.0, le=1.0)
    avg_temp: float
    avg_humidity: float

    @model_validator(mode="after")
    def validate_span(self) -> "DryingPeriod":
        if self.end_hour < self.start_hour:
            raise ValueError(
                f"end_hour ({self.end_hour}) must be >= start_hour ({self.start_hour})."
            )
        return self


class WeatherSnapshot(BaseModel):
    """Derived weather features for a single calendar day.

    Attributes:
        date: ISO date, ``YYYY-MM-DD``.
        temp_high: Daily maximum (°C).
        temp_low: Daily minimum (°C).
        avg_temp: Midpoint of high and low (°C).
        temp_now: Temperature at the current hour; only set for today.
        conditions: Label of the most severe weather code of the day.
        conditions_range: ``"Least / Most"`` when the day's conditions vary
            by two or more severity ranks, else ``None``.
        cloud_coverage_pct: Mean cloud cover.
        wind_speed_mph: Mean wind speed.
        max_wind_speed_mph: Strongest hourly wind speed.
        rain_probability: Highest hourly precipitation probability.
        avg_humidity: Mean relative humidity.
        sunrise / sunset: ISO local timestamps.
        sunny_hours: Number of sunny periods.
        drying_hours: Total hours inside continuous drying periods.
        sunny_periods: Hours with solar radiation > 200 W/m².
        continuous_drying_periods: Runs of good drying hours.
    """

    model_config = ConfigDict(frozen=True)

    date: str
    temp_high: float
    temp_low: float
    avg_temp: float
    temp_now: Optional[float] = None
    conditions: str = "Unknown"
    conditions_range: Optional[str] = None
    cloud_coverage_pct: float = 0.0
    wind_speed_mph: float = 0.0
    max_wind_speed_mph: float = 0.0
    rain_probability: float = 0.0
    avg_humidity: float = 50.0
    sunrise: str
    sunset: str
    sunny_hours: int = 0
    drying_hours: int = 0
    sunny_periods: list[SunnyPeriod] = Field(default_factory=list)
    continuous_drying_periods: list[DryingPeriod] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_hour_counts(self) -> "WeatherSnapshot":
        if not 0 <= self.sunny_hours <= HOURS_PER_DAY:
            raise ValueError(f"sunny_hours must be in [0, 24], got {self.sunny_hours}.")
        if self.continuous_drying_periods:
            total = sum(p.duration_hours for p in self.continuous_drying_periods)
            if total != self.drying_hours:
                raise ValueError(
                    f"drying_hours ({self.drying_hours}) must equal the summed "
                    f"duration of continuous_drying_periods ({total})."
                )
        return self
