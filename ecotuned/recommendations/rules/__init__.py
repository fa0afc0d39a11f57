"""
Recommendation rule catalog.

``RULE_CATALOG`` is the fixed, ordered list of every rule. Order matters only
as the tie-break of the stable priority/impact sort in the ranker.

Modules
-------
base        : RuleContext, RuleDraft, Rule.
laundry     : line-dry, indoor-dry.
mobility    : ev-solar-charging, ev-offpeak-charging.
insulation  : curtains-cold, curtains-hot.
hot_water   : batch-hot-water, efficient-hot-water, tank-mild-night, tank-cold-night.
heating     : natural-ventilation, heat-pump-*, gas-*, oil-*, electric-heating-solar.
cooking     : avoid-heat-generating, hot-day-cooking, rainy-day-cooking.
appliances  : off-peak-appliances, grid-clean-now, grid-low-carbon.
"""

from __future__ import annotations

from ecotuned.models.recommendation import Recommendation
from ecotuned.recommendations.rules.appliances import (
    GRID_CLEAN_NOW,
    GRID_LOW_CARBON,
    OFF_PEAK_APPLIANCES,
)
from ecotuned.recommendations.rules.base import Rule, RuleContext, RuleDraft
from ecotuned.recommendations.rules.cooking import (
    AVOID_HEAT_GENERATING,
    HOT_DAY_COOKING,
    RAINY_DAY_COOKING,
)
from ecotuned.recommendations.rules.heating import (
    ELECTRIC_HEATING_SOLAR,
    GAS_COLD_PREHEAT,
    GAS_MILD_WEATHER,
    GAS_SOLAR_ELECTRIC,
    HEAT_PUMP_COLD_WEATHER,
    HEAT_PUMP_OPTIMAL,
    NATURAL_VENTILATION,
    OIL_BATCH_HEATING,
    OIL_COLD_WEATHER,
    OIL_MILD_WEATHER,
)
from ecotuned.recommendations.rules.hot_water import (
    BATCH_HOT_WATER,
    EFFICIENT_HOT_WATER,
    TANK_COLD_NIGHT,
    TANK_MILD_NIGHT,
)
from ecotuned.recommendations.rules.insulation import CURTAINS_COLD, CURTAINS_HOT
from ecotuned.recommendations.rules.laundry import INDOOR_DRY, LINE_DRY
from ecotuned.recommendations.rules.mobility import EV_OFFPEAK_CHARGING, EV_SOLAR_CHARGING

RULE_CATALOG: tuple[Rule, ...] = (
    LINE_DRY,
    INDOOR_DRY,
    EV_SOLAR_CHARGING,
    EV_OFFPEAK_CHARGING,
    CURTAINS_COLD,
    CURTAINS_HOT,
    BATCH_HOT_WATER,
    EFFICIENT_HOT_WATER,
    NATURAL_VENTILATION,
    AVOID_HEAT_GENERATING,
    HOT_DAY_COOKING,
    RAINY_DAY_COOKING,
    HEAT_PUMP_OPTIMAL,
    HEAT_PUMP_COLD_WEATHER,
    GAS_MILD_WEATHER,
    GAS_COLD_PREHEAT,
    GAS_SOLAR_ELECTRIC,
    OIL_MILD_WEATHER,
    OIL_COLD_WEATHER,
    OIL_BATCH_HEATING,
    TANK_MILD_NIGHT,
    TANK_COLD_NIGHT,
    ELECTRIC_HEATING_SOLAR,
    OFF_PEAK_APPLIANCES,
    GRID_CLEAN_NOW,
    GRID_LOW_CARBON,
)


def evaluate_rules(ctx: RuleContext, catalog: tuple[Rule, ...] = RULE_CATALOG) -> list[Recommendation]:
    """Evaluate every rule against ``ctx``; return the firings in catalog order."""
    fired: list[Recommendation] = []
    for rule in catalog:
        rec = rule.evaluate(ctx)
        if rec is not None:
            fired.append(rec)
    return fired


__all__ = [
    "RULE_CATALOG",
    "Rule",
    "RuleContext",
    "RuleDraft",
    "evaluate_rules",
]
