"""
Recommendation engine entry point.

    weather + preferences (+ grid) ─► evaluate_rules ─► select_recommendations
                                                     ─► apply_time_status

The engine does no I/O. Given the same inputs and a fixed ``Clock`` it always
returns the same list.
"""

from __future__ import annotations

import logging
from typing import Optional

from ecotuned.config import EngineConfig
from ecotuned.models.grid import GridSnapshot
from ecotuned.models.preferences import UserPreferences
from ecotuned.models.recommendation import Recommendation
from ecotuned.models.weather import WeatherSnapshot
from ecotuned.recommendations.ranker import select_recommendations
from ecotuned.recommendations.rules import RuleContext, evaluate_rules
from ecotuned.recommendations.rules.base import DayLabel
from ecotuned.recommendations.time_status import apply_time_status
from ecotuned.utils.time_utils import Clock, SystemClock

logger = logging.getLogger(__name__)


def generate_recommendations(
    weather: WeatherSnapshot,
    preferences: UserPreferences,
    is_today: bool = False,
    day: DayLabel = "tomorrow",
    grid: Optional[GridSnapshot] = None,
    *,
    clock: Optional[Clock] = None,
    settings: Optional[EngineConfig] = None,
) -> list[Recommendation]:
    """Produce the final, ranked recommendations for one day.

    Args:
        weather:     Derived weather features for the day.
        preferences: Validated household profile.
        is_today:    Enables time-status annotation against the clock.
        day:         ``"today"`` or ``"tomorrow"``; used in text and by the
                     grid and pre-heat rules.
        grid:        Live GB generation mix. Ignored unless ``is_today`` and
                     ``day == "today"``.
        clock:       Source of "now"; defaults to the system clock.
        settings:    Selection limits and timezone; defaults to ``EngineConfig()``.

    Returns:
        At most ``settings.max_recommendations`` recommendations, each with
        ``time_status`` set.
    """
    settings = settings or EngineConfig()
    clock = clock or SystemClock(settings.timezone)

    ctx = RuleContext.build(
        weather=weather,
        preferences=preferences,
        is_today=is_today,
        day=day,
        grid=grid,
    )
    fired = evaluate_rules(ctx)
    logger.debug("%s (%s): %d rules fired: %s", weather.date, day, len(fired), [r.id for r in fired])

    selected = select_recommendations(
        fired,
        limit=settings.max_recommendations,
        category_cap=settings.category_cap,
    )
    result = apply_time_status(selected, weather, is_today, clock, settings.timezone)

    logger.info(
        "%s (%s): selected %d of %d recommendations: %s",
        weather.date, day, len(result), len(fired), [r.id for r in result],
    )
    return result
