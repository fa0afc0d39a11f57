"""
Tests for ecotuned/recommendations/time_status.py.

What we test
------------
  - line-dry passes two hours before sunset (today only).
  - ev-solar-charging passes at the end of its solar window.
  - Every other tip, and every tip for tomorrow, stays active.
  - Order is preserved and inputs are not modified.
  - passed_last() moves passed tips after active ones, keeping relative order.
"""

from __future__ import annotations

from datetime import datetime

from ecotuned.models.recommendation import Recommendation
from ecotuned.models.weather import SunnyPeriod, WeatherSnapshot
from ecotuned.recommendations.time_status import apply_time_status, passed_last
from ecotuned.utils.time_utils import FixedClock

DATE = "2025-06-14"


# ── Helpers ───────────────────────────────────────────────────────────────────

def _weather(sunny_hours: list[int] | None = None) -> WeatherSnapshot:
    periods = [
        SunnyPeriod(hour=h, temp=20, cloud_coverage=10, solar_radiation=600)
        for h in (sunny_hours or [])
    ]
    return WeatherSnapshot(
        date=DATE,
        temp_high=22,
        temp_low=12,
        avg_temp=17,
        sunrise=f"{DATE}T04:43",
        sunset=f"{DATE}T21:20",
        sunny_hours=len(periods),
        sunny_periods=periods,
    )


def _rec(rec_id: str) -> Recommendation:
    return Recommendation(
        id=rec_id,
        title="t",
        description="d",
        reasoning="r",
        priority="high",
        category="laundry",
    )


def _at(hour: int) -> FixedClock:
    return FixedClock(datetime(2025, 6, 14, hour, 0))


def _status(rec_id: str, hour: int, weather=None, is_today: bool = True) -> str:
    (rec,) = apply_time_status([_rec(rec_id)], weather or _weather(), is_today, _at(hour))
    return rec.time_status


# ── Tests ─────────────────────────────────────────────────────────────────────

class TestLineDry:
    def test_active_before_cutoff(self):
        assert _status("line-dry", 18) == "active"

    def test_passed_two_hours_before_sunset(self):
        assert _status("line-dry", 19) == "passed"
        assert _status("line-dry", 23) == "passed"


class TestEvSolarCharging:
    def test_active_inside_window(self):
        assert _status("ev-solar-charging", 14, _weather([12])) == "active"

    def test_passed_at_window_end(self):
        assert _status("ev-solar-charging", 15, _weather([12])) == "passed"

    def test_active_without_sunny_periods(self):
        assert _status("ev-solar-charging", 22, _weather()) == "active"


class TestOtherTips:
    def test_always_active(self):
        assert _status("grid-clean-now", 23) == "active"

    def test_tomorrow_always_active(self):
        assert _status("line-dry", 23, is_today=False) == "active"
        assert _status("ev-solar-charging", 23, _weather([12]), is_today=False) == "active"

    def test_order_preserved_and_inputs_untouched(self):
        recs = [_rec("a"), _rec("line-dry"), _rec("b")]
        annotated = apply_time_status(recs, _weather(), True, _at(20))
        assert [r.id for r in annotated] == ["a", "line-dry", "b"]
        assert [r.time_status for r in annotated] == ["active", "passed", "active"]
        assert all(r.time_status is None for r in recs)


class TestPassedLast:
    def test_passed_items_sink_in_order(self):
        recs = apply_time_status(
            [_rec("line-dry"), _rec("a"), _rec("ev-solar-charging"), _rec("b")],
            _weather([12]),
            True,
            _at(20),
        )
        assert [r.id for r in passed_last(recs)] == ["a", "b", "line-dry", "ev-solar-charging"]

    def test_all_active_unchanged(self):
        recs = apply_time_status([_rec("a"), _rec("b")], _weather(), False)
        assert [r.id for r in passed_last(recs)] == ["a", "b"]
