"""
Appliance scheduling rules.

``off-peak-appliances`` applies to every time-of-use household. The grid rules
use the live GB generation mix, so they only fire for today with a grid
snapshot present:

  grid-clean-now    renewables >= 50% (high priority from 60%)
  grid-low-carbon   0 < intensity < 150 g/kWh while renewables are below 50%
"""

from __future__ import annotations

from ecotuned.recommendations.calculations import format_number
from ecotuned.recommendations.rules.base import Rule, RuleContext, RuleDraft
from ecotuned.utils.rounding import round_half_up

CLEAN_GRID_RENEWABLE_PCT = 50
VERY_CLEAN_GRID_RENEWABLE_PCT = 60
LOW_CARBON_MAX_INTENSITY = 150
UK_AVERAGE_INTENSITY = "~200 g/kWh"


def _off_peak_appliances(ctx: RuleContext) -> RuleDraft:
    night = "tonight" if ctx.day == "today" else "tomorrow night"
    return RuleDraft(
        title="Run dishwasher and washing machine overnight",
        description=(
            "Set your dishwasher and washing machine to run during off-peak hours "
            f"{night} (11pm-7am)."
        ),
        reasoning="Off-peak electricity is typically 50-70% cheaper than peak rates.",
        priority="medium",
        impact="medium",
        savings_estimate="Save £0.15-£0.30 per cycle",
    )


def _grid_clean_now(ctx: RuleContext) -> RuleDraft:
    grid = ctx.grid
    renewable = grid.renewable_percent
    if grid.carbon_intensity > 0:
        current = f"{format_number(grid.carbon_intensity)} g/kWh"
    else:
        current = grid.carbon_index
    return RuleDraft(
        title="Great time to run appliances",
        description=(
            f"The GB grid is currently powered by {round_half_up(renewable)}% renewable "
            f"energy ({round_half_up(grid.fuel_percent('wind'))}% wind, "
            f"{round_half_up(grid.fuel_percent('solar'))}% solar). This is a "
            "cleaner-than-average time to use electricity. Consider running your "
            "dishwasher, washing machine, or other high-energy appliances now."
        ),
        reasoning=(
            "High renewable generation means lower carbon emissions per kWh. Current "
            f"carbon intensity is {current}, compared to UK average of "
            f"{UK_AVERAGE_INTENSITY}."
        ),
        priority="high" if renewable >= VERY_CLEAN_GRID_RENEWABLE_PCT else "medium",
        impact="high",
    )


def _grid_low_carbon(ctx: RuleContext) -> RuleDraft:
    grid = ctx.grid
    intensity = format_number(grid.carbon_intensity)
    return RuleDraft(
        title="Low carbon intensity right now",
        description=(
            f"The grid's carbon intensity is currently {intensity} g/kWh "
            f"({grid.carbon_index}), which is lower than the UK average of "
            f"{UK_AVERAGE_INTENSITY}. A good time to use electricity-intensive "
            "appliances like ovens, washing machines, or electric heating."
        ),
        reasoning=(
            "Taking advantage of lower carbon intensity reduces environmental impact. "
            f"Current: {intensity} g/kWh vs UK average: {UK_AVERAGE_INTENSITY}."
        ),
        priority="medium",
        impact="medium",
    )


OFF_PEAK_APPLIANCES = Rule(
    rule_id="off-peak-appliances",
    category="appliances",
    personalised=True,
    applies=lambda ctx: ctx.preferences.has_time_of_use_tariff,
    build=_off_peak_appliances,
)

GRID_CLEAN_NOW = Rule(
    rule_id="grid-clean-now",
    category="appliances",
    personalised=False,
    applies=lambda ctx: (
        ctx.has_live_grid and ctx.grid.renewable_percent >= CLEAN_GRID_RENEWABLE_PCT
    ),
    build=_grid_clean_now,
)

GRID_LOW_CARBON = Rule(
    rule_id="grid-low-carbon",
    category="appliances",
    personalised=False,
    applies=lambda ctx: (
        ctx.has_live_grid
        and 0 < ctx.grid.carbon_intensity < LOW_CARBON_MAX_INTENSITY
        and ctx.grid.renewable_percent < CLEAN_GRID_RENEWABLE_PCT
    ),
    build=_grid_low_carbon,
)
