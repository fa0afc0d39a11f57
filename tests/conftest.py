"""
Shared pytest fixtures for the EcoTuned test suite.

Provides:
  - Sample domain objects (weather snapshot, preferences, grid snapshot)
    with neutral defaults: a mild, cloudy midweek January day on which only
    the flat-rate hot-water tip fires for a default gas household.
  - ``fixed_clock``: a ``FixedClock`` at noon UK time.

Test modules keep their own ``_weather(**overrides)``-style helpers for
scenario-specific variations.
"""

from __future__ import annotations

from datetime import datetime

import pytest

from ecotuned.models.grid import FuelShare, GridSnapshot
from ecotuned.models.preferences import UserPreferences
from ecotuned.models.weather import WeatherSnapshot
from ecotuned.utils.time_utils import FixedClock


# ── Sample domain object factories ────────────────────────────────────────────

@pytest.fixture
def sample_weather() -> WeatherSnapshot:
    """A mild, cloudy Wednesday with no drying or sunny hours."""
    return WeatherSnapshot(
        date="2025-01-08",
        temp_high=14,
        temp_low=8,
        avg_temp=11,
        conditions="Partly Cloudy",
        cloud_coverage_pct=70,
        wind_speed_mph=8,
        max_wind_speed_mph=14,
        rain_probability=20,
        avg_humidity=65,
        sunrise="2025-01-08T08:05",
        sunset="2025-01-08T16:15",
    )


@pytest.fixture
def sample_preferences() -> UserPreferences:
    """A default gas/combi household with no optional equipment."""
    return UserPreferences(postcode="SW1A 2AA")


@pytest.fixture
def sample_grid() -> GridSnapshot:
    """A windy grid: 65% renewable, 95 g/kWh."""
    return GridSnapshot(
        carbon_intensity=95,
        carbon_index="low",
        renewable_percent=65.0,
        fossil_percent=20.0,
        nuclear_percent=10.0,
        other_percent=5.0,
        fuel_breakdown=[
            FuelShare(fuel="wind", percent=52.4, category="renewable"),
            FuelShare(fuel="solar", percent=10.6, category="renewable"),
            FuelShare(fuel="hydro", percent=2.0, category="renewable"),
            FuelShare(fuel="gas", percent=20.0, category="fossil"),
            FuelShare(fuel="nuclear", percent=10.0, category="nuclear"),
            FuelShare(fuel="imports", percent=5.0, category="other"),
        ],
        timestamp="2025-01-08T11:30Z",
    )


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Noon, UK local time, on the sample weather date."""
    return FixedClock(datetime(2025, 1, 8, 12, 0))
