"""
Tests for ecotuned/features/conditions.py and ecotuned/taxonomy/weather_codes.py.

What we test
------------
condition_from_code():
  - WMO code ranges map to the expected labels.
  - None, negative and > 99 codes map to Unknown.

summarize_conditions():
  - Primary label is the most severe condition, not the most frequent.
  - A range string appears only when severities differ by >= 2.
  - Unknown codes are ignored; all-unknown → ("Unknown", None).
  - Ranking uses severity_of(), so Showers sits between Drizzle and Rain.
"""

from __future__ import annotations

import pytest

from ecotuned.features.conditions import summarize_conditions
from ecotuned.taxonomy.weather_codes import (
    WeatherCondition,
    condition_from_code,
    severity_of,
)


class TestConditionFromCode:
    @pytest.mark.parametrize(
        "code, expected",
        [
            (0, WeatherCondition.CLEAR),
            (2, WeatherCondition.PARTLY_CLOUDY),
            (45, WeatherCondition.FOGGY),
            (53, WeatherCondition.DRIZZLE),
            (63, WeatherCondition.RAIN),
            (73, WeatherCondition.SNOW),
            (81, WeatherCondition.SHOWERS),
            (95, WeatherCondition.THUNDERSTORM),
        ],
    )
    def test_known_codes(self, code, expected):
        assert condition_from_code(code) is expected

    @pytest.mark.parametrize("code", [None, -1, 100, 150])
    def test_unknown_codes(self, code):
        assert condition_from_code(code) is WeatherCondition.UNKNOWN
        assert severity_of(code) is None

    def test_showers_rank_below_rain(self):
        assert severity_of(81) < severity_of(63)


class TestSummarizeConditions:
    def test_most_severe_wins_over_most_frequent(self):
        codes = [1] * 20 + [95]
        conditions, _ = summarize_conditions(codes)
        assert conditions == "Thunderstorm"

    def test_range_when_spread_at_least_two(self):
        conditions, conditions_range = summarize_conditions([1, 1, 61, 2])
        assert conditions == "Rain"
        assert conditions_range == "Partly Cloudy / Rain"

    def test_no_range_for_adjacent_severities(self):
        # Clear (0) and Partly Cloudy (1)
        conditions, conditions_range = summarize_conditions([0, 0, 3])
        assert conditions == "Partly Cloudy"
        assert conditions_range is None

    def test_single_condition_has_no_range(self):
        assert summarize_conditions([61, 63, 65]) == ("Rain", None)

    def test_unknown_codes_ignored(self):
        assert summarize_conditions([None, 0, 200]) == ("Clear", None)

    def test_all_unknown(self):
        assert summarize_conditions([None, None]) == ("Unknown", None)

    def test_empty(self):
        assert summarize_conditions([]) == ("Unknown", None)

    def test_ranks_follow_severity_table(self):
        # Showers (4) sit between Drizzle (3) and Rain (5).
        assert summarize_conditions([81, 63]) == ("Rain", None)
        assert summarize_conditions([0, 81]) == ("Showers", "Clear / Showers")
