"""
Laundry rules: line-drying outdoors, or drying indoors on low-humidity days.
"""

from __future__ import annotations

from ecotuned.models.weather import DryingPeriod
from ecotuned.recommendations.calculations import format_number
from ecotuned.recommendations.rules.base import Rule, RuleContext, RuleDraft
from ecotuned.utils.time_utils import format_hour_12h

MIN_LINE_DRY_HOURS = 3
MAX_LINE_DRY_WIND_MPH = 25
EXCEPTIONAL_DRYING_HOURS = 5
EXCEPTIONAL_MAX_RAIN_PCT = 10

INDOOR_DRY_MAX_HUMIDITY = 50

GOOD_PERIOD_MIN_SCORE = 0.5
MAX_LISTED_WINDOWS = 3

TUMBLE_DRYER_SAVINGS = "Save £0.60-£1.50 per load vs tumble dryer"


def _can_line_dry(ctx: RuleContext) -> bool:
    w = ctx.weather
    return (
        ctx.preferences.has_garden
        and w.drying_hours >= MIN_LINE_DRY_HOURS
        and w.wind_speed_mph < MAX_LINE_DRY_WIND_MPH
    )


def drying_windows_text(periods: list[DryingPeriod]) -> str:
    """Describe the best drying periods, e.g. ``" Best drying window: 11am-3pm."``.

    Only periods with an average score of at least 0.5 are listed, best
    first, at most three. Returns an empty string when none qualify.
    """
    best = sorted(
        (p for p in periods if p.avg_score >= GOOD_PERIOD_MIN_SCORE),
        key=lambda p: p.avg_score,
        reverse=True,
    )[:MAX_LISTED_WINDOWS]
    if not best:
        return ""

    windows = [
        f"{format_hour_12h(p.start_hour)}-{format_hour_12h(p.end_hour + 1)}"
        for p in best
    ]
    if len(windows) == 1:
        return f" Best drying window: {windows[0]}."
    return f" Good drying windows: {', '.join(windows)}."


def _line_dry(ctx: RuleContext) -> RuleDraft:
    w = ctx.weather

    if w.drying_hours >= EXCEPTIONAL_DRYING_HOURS and w.rain_probability < EXCEPTIONAL_MAX_RAIN_PCT:
        title = "Exceptional day for line-drying"
        quality = "Outstanding drying conditions with plenty of dry, sunny hours"
        priority = "high"
    elif w.drying_hours < EXCEPTIONAL_DRYING_HOURS:
        title = "Decent day for line-drying"
        quality = "Good drying conditions though hours are limited"
        priority = "medium"
    else:
        title = "Good day for line-drying"
        quality = "Suitable drying conditions"
        priority = "high"

    if w.avg_humidity < 60:
        humidity_note = " Low humidity will help clothes dry faster."
    elif w.avg_humidity > 75:
        humidity_note = " Higher humidity may slow drying slightly."
    else:
        humidity_note = ""

    wind_note = ""
    if 10 <= w.wind_speed_mph <= 18:
        wind_note = " Breezy conditions will help speed up drying - peg items securely."

    description = (
        f"{ctx.day_title} will have {w.drying_hours} hours of good drying conditions "
        f"with {format_number(w.wind_speed_mph)}mph wind and "
        f"{format_number(w.avg_humidity)}% humidity."
        f"{drying_windows_text(w.continuous_drying_periods)}{humidity_note}{wind_note}"
    )
    return RuleDraft(
        title=title,
        description=description,
        reasoning=f"{quality} with low rain risk during sunny periods.",
        priority=priority,
        impact="high",
        savings_estimate=TUMBLE_DRYER_SAVINGS,
    )


def _indoor_dry(ctx: RuleContext) -> RuleDraft:
    return RuleDraft(
        title="Good conditions for indoor drying",
        description=(
            f"Low humidity {ctx.day} ({format_number(ctx.weather.avg_humidity)}%) means "
            "clothes will dry quickly indoors without additional heating. "
            "Use a clothes airer near natural ventilation."
        ),
        reasoning="Low humidity allows effective indoor drying, avoiding tumble dryer costs.",
        priority="medium",
        impact="high",
        savings_estimate=TUMBLE_DRYER_SAVINGS,
    )


LINE_DRY = Rule(
    rule_id="line-dry",
    category="laundry",
    personalised=True,
    applies=_can_line_dry,
    build=_line_dry,
)

INDOOR_DRY = Rule(
    rule_id="indoor-dry",
    category="laundry",
    personalised=True,
    applies=lambda ctx: (
        not _can_line_dry(ctx)
        and ctx.weather.avg_humidity < INDOOR_DRY_MAX_HUMIDITY
        and ctx.weather.drying_hours < MIN_LINE_DRY_HOURS
    ),
    build=_indoor_dry,
)
