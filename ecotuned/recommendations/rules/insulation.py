"""
Curtain and blind rules: keep heat in on cold nights, keep sun out on hot days.
"""

from __future__ import annotations

from ecotuned.recommendations.calculations import format_number
from ecotuned.recommendations.rules.base import Rule, RuleContext, RuleDraft

VERY_HOT_HIGH_C = 26


def _curtains_cold(ctx: RuleContext) -> RuleDraft:
    return RuleDraft(
        title="Close curtains at dusk to retain heat",
        description=(
            f"Cold night ahead (dropping to {format_number(ctx.weather.temp_low)}°C). "
            "Close curtains and blinds at dusk to prevent heat loss."
        ),
        reasoning="Curtains reduce heating needs by up to 15% with modern double-glazing.",
        priority="medium",
        impact="medium",
        savings_estimate="Save £0.10-£0.20 per day on heating",
    )


def _curtains_hot(ctx: RuleContext) -> RuleDraft:
    high = ctx.weather.temp_high
    very_hot = high >= VERY_HOT_HIGH_C
    return RuleDraft(
        title="Keep sun-facing blinds closed" if very_hot else "Close blinds during hot afternoon",
        description=(
            f"{'Hot' if very_hot else 'Warm'} day ahead ({format_number(high)}°C). "
            "Close curtains or blinds on sun-facing windows during peak afternoon heat."
        ),
        reasoning="Blocking direct sunlight can reduce indoor temperatures by 7-10°C.",
        priority="low",
        impact="low",
        savings_estimate="Save £0.05-£0.10 on fans" if very_hot else None,
    )


CURTAINS_COLD = Rule(
    rule_id="curtains-cold",
    category="insulation",
    personalised=True,
    applies=lambda ctx: ctx.weather.avg_temp < 10 and ctx.weather.temp_low < 5,
    build=_curtains_cold,
)

CURTAINS_HOT = Rule(
    rule_id="curtains-hot",
    category="insulation",
    personalised=True,
    applies=lambda ctx: ctx.weather.avg_temp >= 22 and ctx.weather.sunny_hours >= 4,
    build=_curtains_hot,
)
