"""
Cooking rules. None of these depend on the household setup.
"""

from __future__ import annotations

from ecotuned.recommendations.calculations import format_number
from ecotuned.recommendations.rules.base import Rule, RuleContext, RuleDraft

WARM_AVG_C = 22
HOT_AVG_C = 26

RAINY_MIN_RAIN_PCT = 70
RAINY_MAX_AVG_C = 15

FAN_SAVINGS = "Save £0.05-£0.15 on fans"


def _weather_phrase(ctx: RuleContext) -> str:
    return "weather today" if ctx.day == "today" else "day ahead"


def _avoid_heat_generating(ctx: RuleContext) -> RuleDraft:
    return RuleDraft(
        title="Minimise heat-generating activities",
        description=(
            f"Warm {_weather_phrase(ctx)} ({format_number(ctx.weather.temp_high)}°C). "
            "Use microwave instead of oven, or cook outdoors."
        ),
        reasoning="An hour of oven use adds 2-3kWh of heat to your home.",
        priority="low",
        impact="low",
        savings_estimate=FAN_SAVINGS,
    )


def _hot_day_cooking(ctx: RuleContext) -> RuleDraft:
    return RuleDraft(
        title="Avoid oven use today",
        description=(
            f"Very warm {_weather_phrase(ctx)} ({format_number(ctx.weather.temp_high)}°C). "
            "Consider salads, sandwiches, microwave meals, or BBQ."
        ),
        reasoning="Oven heat significantly increases indoor temperature and fan usage.",
        priority="low",
        impact="low",
        savings_estimate=FAN_SAVINGS,
    )


def _rainy_day_cooking(ctx: RuleContext) -> RuleDraft:
    return RuleDraft(
        title="Good day for batch cooking",
        description=(
            f"Cold and wet {ctx.day} - ideal for batch cooking. Prep multiple meals at "
            "once while the oven heat helps warm your home."
        ),
        reasoning=(
            "Oven heat reduces heating costs on cold days, and batch cooking 4+ meals "
            "saves ~3 hours of oven time over the week."
        ),
        priority="medium",
        impact="medium",
        savings_estimate="Save £0.50-£0.70 per batch session",
    )


AVOID_HEAT_GENERATING = Rule(
    rule_id="avoid-heat-generating",
    category="cooking",
    personalised=False,
    applies=lambda ctx: WARM_AVG_C <= ctx.weather.avg_temp < HOT_AVG_C,
    build=_avoid_heat_generating,
)

HOT_DAY_COOKING = Rule(
    rule_id="hot-day-cooking",
    category="cooking",
    personalised=False,
    applies=lambda ctx: ctx.weather.avg_temp >= HOT_AVG_C,
    build=_hot_day_cooking,
)

# Batch cooking needs time at home, so weekends only.
RAINY_DAY_COOKING = Rule(
    rule_id="rainy-day-cooking",
    category="cooking",
    personalised=False,
    applies=lambda ctx: (
        ctx.is_weekend
        and ctx.weather.rain_probability > RAINY_MIN_RAIN_PCT
        and ctx.weather.avg_temp < RAINY_MAX_AVG_C
    ),
    build=_rainy_day_cooking,
)
