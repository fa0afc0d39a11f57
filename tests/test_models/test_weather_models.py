"""
Tests for ecotuned/models/weather.py, grid.py and recommendation.py validators.

What we test
------------
  - DailyAggregates: low must not exceed high.
  - DryingPeriod: hour bounds, end >= start, score in [0, 1].
  - WeatherSnapshot: sunny_hours in [0, 24]; drying_hours must equal the
    summed period durations when periods are present.
  - GridSnapshot: non-negative intensity, fuel_percent lookup.
  - Recommendation: empty text rejected; missing impact counts as medium.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from ecotuned.models.grid import FuelShare, GridSnapshot
from ecotuned.models.recommendation import Recommendation
from ecotuned.models.weather import DailyAggregates, DryingPeriod, WeatherSnapshot


def _period(start: int = 10, end: int = 12, **overrides) -> DryingPeriod:
    fields = dict(
        start_hour=start,
        end_hour=end,
        duration_hours=end - start + 1,
        avg_score=0.6,
        avg_temp=15,
        avg_humidity=55,
    )
    fields.update(overrides)
    return DryingPeriod(**fields)


def _snapshot(**overrides) -> WeatherSnapshot:
    fields = dict(
        date="2025-06-14",
        temp_high=20,
        temp_low=10,
        avg_temp=15,
        sunrise="2025-06-14T04:43",
        sunset="2025-06-14T21:20",
    )
    fields.update(overrides)
    return WeatherSnapshot(**fields)


class TestDailyAggregates:
    def test_low_above_high_rejected(self):
        with pytest.raises(ValidationError, match="temp_low_c"):
            DailyAggregates(temp_high_c=5, temp_low_c=6, sunrise="a", sunset="b")

    def test_equal_allowed(self):
        assert DailyAggregates(temp_high_c=5, temp_low_c=5, sunrise="a", sunset="b").temp_low_c == 5


class TestDryingPeriod:
    def test_end_before_start(self):
        with pytest.raises(ValidationError, match="end_hour"):
            _period(start=12, end=10, duration_hours=1)

    def test_hour_bounds(self):
        with pytest.raises(ValidationError):
            _period(start=22, end=24)

    def test_score_bounds(self):
        with pytest.raises(ValidationError):
            _period(avg_score=1.2)


class TestWeatherSnapshot:
    def test_drying_hours_must_match_periods(self):
        with pytest.raises(ValidationError, match="drying_hours"):
            _snapshot(drying_hours=2, continuous_drying_periods=[_period(10, 12)])

    def test_matching_drying_hours(self):
        snap = _snapshot(drying_hours=4, continuous_drying_periods=[_period(10, 12), _period(15, 15)])
        assert snap.drying_hours == 4

    def test_drying_hours_without_periods_allowed(self):
        assert _snapshot(drying_hours=5).drying_hours == 5

    def test_sunny_hours_bounds(self):
        with pytest.raises(ValidationError, match="sunny_hours"):
            _snapshot(sunny_hours=25)

    def test_defaults(self):
        snap = _snapshot()
        assert snap.conditions == "Unknown"
        assert snap.temp_now is None
        assert snap.sunny_periods == []


class TestGridSnapshot:
    def test_negative_intensity_rejected(self):
        with pytest.raises(ValidationError):
            GridSnapshot(carbon_intensity=-1)

    def test_unknown_index_rejected(self):
        with pytest.raises(ValidationError):
            GridSnapshot(carbon_index="extreme")

    def test_fuel_percent(self):
        grid = GridSnapshot(fuel_breakdown=[FuelShare(fuel="wind", percent=40.5, category="renewable")])
        assert grid.fuel_percent("wind") == 40.5
        assert grid.fuel_percent("solar") == 0.0


class TestRecommendation:
    def _rec(self, **overrides) -> Recommendation:
        fields = dict(
            id="line-dry", title="Title", description="Body", reasoning="Why",
            priority="high", category="laundry",
        )
        fields.update(overrides)
        return Recommendation(**fields)

    def test_blank_text_rejected(self):
        with pytest.raises(ValidationError):
            self._rec(title="   ")

    def test_unknown_category_rejected(self):
        with pytest.raises(ValidationError):
            self._rec(category="gardening")

    def test_effective_impact(self):
        assert self._rec().effective_impact == "medium"
        assert self._rec(impact="low").effective_impact == "low"

    def test_time_status_via_copy(self):
        rec = self._rec()
        updated = rec.model_copy(update={"time_status": "passed"})
        assert rec.time_status is None
        assert updated.time_status == "passed"
