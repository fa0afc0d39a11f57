"""
Heating and hot-water system taxonomy.

UK compatibility between the space-heating type and the hot-water system:

    gas        → combi, tank, other
    electric   → tank, electric, other    (combi boilers are gas appliances)
    heat-pump  → tank, other
    oil        → tank, other
    other      → all four

Unknown heating types fall back to the permissive "other" rule.

This module has NO imports from any other ``ecotuned`` package.
"""

from __future__ import annotations

from typing import Literal

HeatingType = Literal["gas", "electric", "heat-pump", "oil", "other"]
HotWaterSystem = Literal["combi", "tank", "electric", "other"]

HEATING_TYPES: tuple[str, ...] = ("gas", "electric", "heat-pump", "oil", "other")
HOT_WATER_SYSTEMS: tuple[str, ...] = ("combi", "tank", "electric", "other")

_VALID_HOT_WATER: dict[str, tuple[str, ...]] = {
    "gas":       ("combi", "tank", "other"),
    "electric":  ("tank", "electric", "other"),
    "heat-pump": ("tank", "other"),
    "oil":       ("tank", "other"),
    "other":     HOT_WATER_SYSTEMS,
}


def get_valid_hot_water_options(heating_type: str) -> list[str]:
    """Return the hot-water systems compatible with ``heating_type``, in display order."""
    return list(_VALID_HOT_WATER.get(heating_type, HOT_WATER_SYSTEMS))


def is_valid_heating_combination(heating_type: str, hot_water_system: str) -> bool:
    """Return ``True`` if ``hot_water_system`` can be paired with ``heating_type``."""
    return hot_water_system in get_valid_hot_water_options(heating_type)
