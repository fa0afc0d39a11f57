"""
Tests for ecotuned/reporting/formatters.py.

What we test
------------
  - Weather line: range, conditions (with range string), current temperature.
  - Grid line: renewable/fossil share and intensity, "n/a" when unknown.
  - Recommendation list: numbering, priority tag, passed marker, savings,
    empty-list message.
  - Passed items are numbered after every active item.
  - Drying window table and the no-window message.
"""

from __future__ import annotations

from ecotuned.models.grid import GridSnapshot
from ecotuned.models.recommendation import Recommendation
from ecotuned.models.weather import DryingPeriod
from ecotuned.reporting.formatters import (
    format_drying_windows,
    format_grid_line,
    format_recommendations,
    format_weather_line,
)


def _rec(rec_id: str, **overrides) -> Recommendation:
    fields = dict(
        id=rec_id,
        title=f"Tip {rec_id}",
        description="Do the thing.",
        reasoning="Because it saves energy.",
        priority="high",
        category="laundry",
        impact="high",
        time_status="active",
    )
    fields.update(overrides)
    return Recommendation(**fields)


class TestWeatherLine:
    def test_basic(self, sample_weather):
        line = format_weather_line(sample_weather)
        assert line == "  Weather: 8-14°C, Partly Cloudy, rain 20%, wind 8mph"

    def test_range_and_now(self, sample_weather):
        weather = sample_weather.model_copy(
            update={"conditions": "Rain", "conditions_range": "Clear / Rain", "temp_now": 12}
        )
        line = format_weather_line(weather)
        assert line.startswith("  Weather: now 12°C, 8-14°C, Rain (Clear / Rain)")


class TestGridLine:
    def test_known_intensity(self, sample_grid):
        line = format_grid_line(sample_grid)
        assert "65% renewable" in line
        assert "intensity 95 g/kWh (low)" in line

    def test_unknown_intensity(self):
        assert "intensity n/a (moderate)" in format_grid_line(GridSnapshot())


class TestFormatRecommendations:
    def test_numbered_list(self, sample_weather):
        recs = [
            _rec("a", savings_estimate="Save £1 per load"),
            _rec("b", priority="medium", time_status="passed", category="heating", impact=None),
        ]
        text = format_recommendations(recs, sample_weather, "tomorrow")
        assert "=== Recommendations for tomorrow (2025-01-08) ===" in text
        assert "1. [HIGH] Tip a" in text
        assert "2. [MEDIUM] Tip b (passed)" in text
        assert "heating / medium" in text
        assert "Save £1 per load" in text
        assert "Why: Because it saves energy." in text

    def test_passed_items_listed_last(self, sample_weather):
        recs = [
            _rec("line-dry", time_status="passed"),
            _rec("other"),
            _rec("third", priority="medium"),
        ]
        text = format_recommendations(recs, sample_weather, "today")
        assert text.index("Tip other") < text.index("Tip third") < text.index("Tip line-dry")
        assert "1. [HIGH] Tip other" in text
        assert "3. [HIGH] Tip line-dry (passed)" in text

    def test_grid_header(self, sample_weather, sample_grid):
        text = format_recommendations([_rec("a")], sample_weather, "today", sample_grid)
        assert "  Grid:" in text

    def test_empty(self, sample_weather):
        text = format_recommendations([], sample_weather, "tomorrow")
        assert "(no recommendations for this day)" in text


class TestFormatDryingWindows:
    def test_table(self, sample_weather):
        period = DryingPeriod(
            start_hour=11, end_hour=14, duration_hours=4,
            avg_score=0.65, avg_temp=16, avg_humidity=58,
        )
        weather = sample_weather.model_copy(
            update={"drying_hours": 4, "continuous_drying_periods": [period]}
        )
        text = format_drying_windows(weather, "tomorrow")
        assert "Drying hours: 4" in text
        row = text.splitlines()[-1]
        assert row.split() == ["11am", "3pm", "4", "0.65", "16°C", "58%"]

    def test_no_windows(self, sample_weather):
        text = format_drying_windows(sample_weather, "today")
        assert "=== Drying windows for today (2025-01-08) ===" in text
        assert "(no good drying windows)" in text
