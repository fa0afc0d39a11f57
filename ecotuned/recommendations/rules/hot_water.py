"""
Hot-water rules.

Cold days (average below 12 °C) get one hot-water tip: shift usage to
off-peak hours on a time-of-use tariff, otherwise keep usage short and
batched. Households with a hot-water tank on a time-of-use tariff also get
a tank-heating schedule based on the overnight low.
"""

from __future__ import annotations

from ecotuned.recommendations.calculations import format_number
from ecotuned.recommendations.rules.base import Rule, RuleContext, RuleDraft

COLD_DAY_AVG_C = 12
VERY_COLD_AVG_C = 5

MILD_NIGHT_LOW_C = 10
COLD_NIGHT_LOW_C = 5


def _cold_forecast(ctx: RuleContext) -> str:
    w = ctx.weather
    label = "Very cold" if w.avg_temp < VERY_COLD_AVG_C else "Cold"
    return (
        f"{label} forecast {ctx.day} "
        f"({format_number(w.temp_low)}-{format_number(w.temp_high)}°C)."
    )


def _batch_hot_water(ctx: RuleContext) -> RuleDraft:
    return RuleDraft(
        title="Use hot water during off-peak hours",
        description=(
            f"{_cold_forecast(ctx)} Schedule showers, dishwashing, and laundry for "
            "off-peak hours (11pm-7am) to benefit from cheaper rates."
        ),
        reasoning=(
            "Off-peak electricity is 50-70% cheaper, and hot water waste heat helps "
            "warm your home."
        ),
        priority="high",
        impact="high",
        savings_estimate="Save £0.30-£0.60 per day",
    )


def _efficient_hot_water(ctx: RuleContext) -> RuleDraft:
    return RuleDraft(
        title="Optimise hot water usage",
        description=(
            f"{_cold_forecast(ctx)} Keep showers short and batch hot water tasks "
            "together to maximise efficiency."
        ),
        reasoning="Waste heat from hot water helps warm your home when it is needed most.",
        priority="medium",
        impact="medium",
        savings_estimate="Save £0.20-£0.40 per day",
    )


def _tank_mild_night(ctx: RuleContext) -> RuleDraft:
    return RuleDraft(
        title="Heat hot water tank during off-peak",
        description=(
            f"Mild night ahead ({format_number(ctx.weather.temp_low)}°C low) means less "
            "heat loss from your tank. Heat during off-peak hours (11pm-7am) for "
            "maximum savings."
        ),
        reasoning="Warmer nights reduce tank heat loss, making off-peak heating more efficient.",
        priority="medium",
        impact="medium",
        savings_estimate="Save £0.20-£0.35 per day",
    )


def _tank_cold_night(ctx: RuleContext) -> RuleDraft:
    return RuleDraft(
        title="Heat hot water tank before peak cold",
        description=(
            f"Cold night forecast ({format_number(ctx.weather.temp_low)}°C). Heat your "
            "tank during afternoon/evening to reduce overnight heat loss."
        ),
        reasoning=(
            "Very cold nights increase tank heat loss. Pre-heating when warmer is "
            "more efficient."
        ),
        priority="medium",
        impact="medium",
        savings_estimate="Save £0.15-£0.25 vs overnight heating",
    )


def _tank_on_tou(ctx: RuleContext) -> bool:
    p = ctx.preferences
    return p.hot_water_system == "tank" and p.has_time_of_use_tariff


BATCH_HOT_WATER = Rule(
    rule_id="batch-hot-water",
    category="heating",
    personalised=True,
    applies=lambda ctx: (
        ctx.weather.avg_temp < COLD_DAY_AVG_C and ctx.preferences.has_time_of_use_tariff
    ),
    build=_batch_hot_water,
)

EFFICIENT_HOT_WATER = Rule(
    rule_id="efficient-hot-water",
    category="heating",
    personalised=True,
    applies=lambda ctx: (
        ctx.weather.avg_temp < COLD_DAY_AVG_C and not ctx.preferences.has_time_of_use_tariff
    ),
    build=_efficient_hot_water,
)

TANK_MILD_NIGHT = Rule(
    rule_id="tank-mild-night",
    category="heating",
    personalised=True,
    applies=lambda ctx: _tank_on_tou(ctx) and ctx.weather.temp_low > MILD_NIGHT_LOW_C,
    build=_tank_mild_night,
)

TANK_COLD_NIGHT = Rule(
    rule_id="tank-cold-night",
    category="heating",
    personalised=True,
    applies=lambda ctx: _tank_on_tou(ctx) and ctx.weather.temp_low < COLD_NIGHT_LOW_C,
    build=_tank_cold_night,
)
