"""
Time-status annotation for today's recommendations.

Some tips stop being actionable later in the day. For today:

  line-dry            passed once the hour >= sunset hour - 2
  ev-solar-charging   passed once the hour >= end of its best solar window

Everything else, and everything for tomorrow, is ``active``. Items are never
reordered by ``apply_time_status``; display code calls ``passed_last`` to sink
passed tips below the actionable ones.
"""

from __future__ import annotations

from typing import Optional

from ecotuned.models.recommendation import Recommendation
from ecotuned.models.weather import WeatherSnapshot
from ecotuned.recommendations.calculations import best_solar_window
from ecotuned.utils.time_utils import UK_TIMEZONE_NAME, Clock, SystemClock, hour_of

LINE_DRY_CUTOFF_BEFORE_SUNSET_HOURS = 2


def apply_time_status(
    recs: list[Recommendation],
    weather: WeatherSnapshot,
    is_today: bool,
    clock: Optional[Clock] = None,
    tz_name: str = UK_TIMEZONE_NAME,
) -> list[Recommendation]:
    """Return copies of ``recs`` with ``time_status`` set."""
    if not is_today:
        return [r.model_copy(update={"time_status": "active"}) for r in recs]

    current_hour = (clock or SystemClock(tz_name)).current_hour(tz_name)
    return [
        r.model_copy(update={"time_status": _status_for(r.id, weather, current_hour)})
        for r in recs
    ]


def _status_for(rec_id: str, weather: WeatherSnapshot, current_hour: int) -> str:
    if rec_id == "line-dry":
        cutoff = hour_of(weather.sunset) - LINE_DRY_CUTOFF_BEFORE_SUNSET_HOURS
        return "passed" if current_hour >= cutoff else "active"

    if rec_id == "ev-solar-charging":
        window = best_solar_window(weather.sunny_periods)
        if window is not None and current_hour >= window.end_hour:
            return "passed"

    return "active"


def passed_last(recs: list[Recommendation]) -> list[Recommendation]:
    """Stable-sort ``recs`` so ``passed`` items follow every active one."""
    return sorted(recs, key=lambda r: r.time_status == "passed")
