"""
EV charging rules: charge from rooftop solar, or overnight on an off-peak tariff.
"""

from __future__ import annotations

from ecotuned.recommendations.calculations import best_solar_window
from ecotuned.recommendations.rules.base import Rule, RuleContext, RuleDraft

OFF_PEAK_REASONING = "Off-peak electricity is typically 50-70% cheaper than peak rates."


def _ev_solar_charging(ctx: RuleContext) -> RuleDraft:
    window = best_solar_window(ctx.weather.sunny_periods)
    if window is None:
        raise ValueError("ev-solar-charging needs at least one sunny period.")
    return RuleDraft(
        title="Charge your EV during peak solar hours",
        description=(
            f"Best charging window: {window.start_label}-{window.end_label} "
            "when your solar panels will generate maximum power."
        ),
        reasoning=(
            "Clear skies during midday hours with temperatures around "
            f"{window.temp}°C mean strong solar generation."
        ),
        priority="high",
        impact="high",
        savings_estimate="Save £2-£4 per charge",
    )


def _ev_offpeak_charging(ctx: RuleContext) -> RuleDraft:
    return RuleDraft(
        title="Charge your EV during off-peak hours",
        description="Charge overnight (11pm-7am) to take advantage of cheaper electricity rates.",
        reasoning=OFF_PEAK_REASONING,
        priority="high",
        impact="high",
        savings_estimate="Save £1.50-£3.00 per charge",
    )


EV_SOLAR_CHARGING = Rule(
    rule_id="ev-solar-charging",
    category="mobility",
    personalised=True,
    applies=lambda ctx: (
        ctx.preferences.has_ev
        and ctx.preferences.has_solar
        and len(ctx.weather.sunny_periods) > 0
    ),
    build=_ev_solar_charging,
)

EV_OFFPEAK_CHARGING = Rule(
    rule_id="ev-offpeak-charging",
    category="mobility",
    personalised=True,
    applies=lambda ctx: (
        ctx.preferences.has_ev
        and not ctx.preferences.has_solar
        and ctx.preferences.has_time_of_use_tariff
    ),
    build=_ev_offpeak_charging,
)
