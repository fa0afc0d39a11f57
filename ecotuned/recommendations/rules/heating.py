"""
Space-heating rules, grouped by heating system.

  natural-ventilation     any system; mild day reaching the preferred temperature
  heat-pump-*             efficiency band 5–15 °C, or sub-zero nights
  gas-*                   mild-weather setback, pre-heat before a cold night,
                          swap gas cooking for solar-powered electric appliances
  oil-*                   larger mild-weather setback, zone heating, batch heating
  electric-heating-solar  run electric heaters from rooftop solar

Suggested thermostat values come from ``recommendations.calculations``.
"""

from __future__ import annotations

from ecotuned.recommendations.calculations import (
    GAS_MILD_REDUCTION_C,
    OIL_MILD_REDUCTION_C,
    OIL_ZONE_REDUCTION_C,
    batch_heating_temperature,
    best_solar_window,
    format_number,
    preheat_schedule,
    reduced_thermostat,
)
from ecotuned.recommendations.rules.base import Rule, RuleContext, RuleDraft

MILD_MIN_AVG_C = 12
MILD_MAX_AVG_C = 18
VENTILATION_MAX_AVG_C = 21
VENTILATION_LOW_MARGIN_C = 3

HEAT_PUMP_MIN_AVG_C = 5
HEAT_PUMP_MAX_AVG_C = 15

COLD_NIGHT_LOW_C = 5
MIN_SOLAR_SUNNY_HOURS = 3

OIL_STABLE_MIN_AVG_C = 10
OIL_STABLE_MAX_AVG_C = 16
OIL_STABLE_MAX_SWING_C = 8


def _heating_is(ctx: RuleContext, heating_type: str) -> bool:
    return ctx.preferences.heating_type == heating_type


def _is_mild(ctx: RuleContext) -> bool:
    return MILD_MIN_AVG_C <= ctx.weather.avg_temp <= MILD_MAX_AVG_C


def _heat_pump_in_band(ctx: RuleContext) -> bool:
    return HEAT_PUMP_MIN_AVG_C <= ctx.weather.avg_temp <= HEAT_PUMP_MAX_AVG_C


def _strong_solar(ctx: RuleContext) -> bool:
    return ctx.preferences.has_solar and ctx.weather.sunny_hours > MIN_SOLAR_SUNNY_HOURS


# ── Any system ────────────────────────────────────────────────────────────────

def _natural_ventilation_applies(ctx: RuleContext) -> bool:
    w, preferred = ctx.weather, ctx.preferences.preferred_temperature
    return (
        w.avg_temp >= MILD_MIN_AVG_C
        and w.temp_high >= preferred
        and w.avg_temp < VENTILATION_MAX_AVG_C
        and w.temp_low > preferred - VENTILATION_LOW_MARGIN_C
    )


def _natural_ventilation(ctx: RuleContext) -> RuleDraft:
    return RuleDraft(
        title="Consider turning off heating",
        description=(
            f"Mild temperatures {ctx.day} ({format_number(ctx.weather.temp_high)}°C) will "
            "reach your preferred temperature of "
            f"{format_number(ctx.preferences.preferred_temperature)}°C - ideal conditions "
            "for natural ventilation."
        ),
        reasoning=(
            "Outdoor temperatures will match your comfort level, making heating unnecessary."
        ),
        priority="high",
        impact="high",
        savings_estimate="Save £0.50-£1.50 on heating",
    )


# ── Heat pump ─────────────────────────────────────────────────────────────────

def _heat_pump_optimal(ctx: RuleContext) -> RuleDraft:
    return RuleDraft(
        title="Optimal conditions for your heat pump",
        description=(
            f"Temperatures {ctx.day} ({format_number(ctx.weather.avg_temp)}°C) are ideal "
            "for heat pump efficiency. Your system will use 30-40% less energy than in "
            "very cold weather."
        ),
        reasoning=(
            "Heat pumps are most efficient between 5-15°C. Take advantage by maintaining "
            "comfortable temperatures without worry."
        ),
        priority="medium",
        impact="high",
        savings_estimate="Save £0.40-£0.80 per day vs colder weather",
    )


def _heat_pump_cold_weather(ctx: RuleContext) -> RuleDraft:
    return RuleDraft(
        title="Prepare for reduced heat pump efficiency",
        description=(
            f"Very cold forecast {ctx.day} (low of {format_number(ctx.weather.temp_low)}°C). "
            "Your heat pump will work harder. Pre-warm your home during milder "
            "afternoon hours."
        ),
        reasoning=(
            "Heat pumps lose efficiency below 0°C. Pre-warming reduces strain during "
            "coldest periods."
        ),
        priority="medium",
        impact="medium",
        savings_estimate="Save £0.30-£0.50 by pre-warming",
    )


# ── Gas ───────────────────────────────────────────────────────────────────────

def _gas_mild_weather(ctx: RuleContext) -> RuleDraft:
    preferred = ctx.preferences.preferred_temperature
    suggested = reduced_thermostat(preferred, GAS_MILD_REDUCTION_C)
    return RuleDraft(
        title="Reduce gas heating in mild weather",
        description=(
            f"Mild temperatures {ctx.day} ({format_number(ctx.weather.avg_temp)}°C) mean "
            f"you can reduce your thermostat to {format_number(suggested)}°C "
            f"(from {format_number(preferred)}°C) without discomfort. Layer up with a "
            "jumper for extra warmth."
        ),
        reasoning=(
            "Each 1°C reduction saves 10-13% on gas heating costs. Mild weather is ideal "
            "for comfort at lower settings."
        ),
        priority="medium",
        impact="medium",
        savings_estimate="Save £0.10-£0.25 per day",
    )


def _gas_cold_preheat(ctx: RuleContext) -> RuleDraft:
    schedule = preheat_schedule(ctx.preferences.preferred_temperature)
    return RuleDraft(
        title="Pre-heat before cold snap",
        description=(
            f"Very cold night ahead ({format_number(ctx.weather.temp_low)}°C). Pre-heat "
            f"your home to {format_number(schedule.preheat_temp)}°C in the evening "
            f"(6-8pm), then reduce to {format_number(schedule.night_temp)}°C overnight. "
            "This reduces strain on your boiler during the coldest hours."
        ),
        reasoning=(
            "Gas boilers are less efficient in very cold weather. Pre-heating while "
            "temperatures are milder saves energy."
        ),
        priority="medium",
        impact="medium",
        savings_estimate="Save £0.25-£0.50 per day",
    )


def _gas_solar_electric(ctx: RuleContext) -> RuleDraft:
    return RuleDraft(
        title="Use electric appliances during solar hours",
        description=(
            f"Strong solar generation {ctx.day} ({ctx.weather.sunny_hours} sunny hours). "
            "Use electric kettle, microwave, and washing machine during peak sun hours "
            "instead of gas stove/oven. Your solar panels will power these for free."
        ),
        reasoning=(
            "Solar electricity is free once panels are installed. Using electric "
            "appliances instead of gas during solar hours maximises savings."
        ),
        priority="medium",
        impact="medium",
        savings_estimate="Save £0.15-£0.40 per day",
    )


# ── Oil ───────────────────────────────────────────────────────────────────────

def _oil_mild_weather(ctx: RuleContext) -> RuleDraft:
    preferred = ctx.preferences.preferred_temperature
    suggested = reduced_thermostat(preferred, OIL_MILD_REDUCTION_C)
    return RuleDraft(
        title="Reduce oil heating in mild weather",
        description=(
            f"Mild temperatures {ctx.day} ({format_number(ctx.weather.avg_temp)}°C) mean "
            f"you can reduce your thermostat to {format_number(suggested)}°C "
            f"(from {format_number(preferred)}°C). Layer up with a jumper or blanket to "
            "stay comfortable. Make sure you still feel warm enough."
        ),
        reasoning=(
            "Each 1°C reduction saves 10-13% on heating costs. Oil heating costs "
            "9-11p/kWh vs 6.29p/kWh for gas. We don't suggest going below 15°C."
        ),
        priority="medium",
        impact="medium",
        savings_estimate="Save £0.20-£0.35 per day",
    )


def _oil_cold_weather(ctx: RuleContext) -> RuleDraft:
    return RuleDraft(
        title="Use zone heating to save on oil",
        description=(
            f"Very cold {ctx.day} ({format_number(ctx.weather.temp_low)}°C). Close doors "
            f"and reduce heating in unused rooms by {OIL_ZONE_REDUCTION_C}°C. Focus your "
            "heating budget on the rooms you actually use with zone heating, keeping "
            "them comfortable whilst reducing costs."
        ),
        reasoning=(
            "Oil boilers are less efficient in very cold weather. Zone heating reduces "
            "the volume of space being heated, significantly cutting costs. Keep "
            "occupied rooms at a comfortable temperature."
        ),
        priority="high",
        impact="high",
        savings_estimate="Save £1.00-£1.50 per day",
    )


def _oil_stable_mild(ctx: RuleContext) -> bool:
    w = ctx.weather
    return (
        OIL_STABLE_MIN_AVG_C <= w.avg_temp <= OIL_STABLE_MAX_AVG_C
        and abs(w.temp_high - w.temp_low) < OIL_STABLE_MAX_SWING_C
    )


def _oil_batch_heating(ctx: RuleContext) -> RuleDraft:
    w = ctx.weather
    batch_temp = batch_heating_temperature(ctx.preferences.preferred_temperature)
    return RuleDraft(
        title="Consider batch heating if well-insulated",
        description=(
            f"Stable mild weather {ctx.day} "
            f"({format_number(w.temp_low)}-{format_number(w.temp_high)}°C). You could heat "
            f"to {format_number(batch_temp)}°C twice daily (morning and evening) instead "
            "of constant low heat - but only if your home is well-insulated enough to "
            "retain heat between cycles. Make sure you can stay comfortable as "
            "temperatures drop between heating periods."
        ),
        reasoning=(
            "Oil boilers are more efficient at higher output for shorter periods. This "
            "approach suits well-insulated homes where temperature drops slowly between "
            "heating cycles."
        ),
        priority="low",
        impact="medium",
        savings_estimate="Save £0.30-£0.50 per day",
    )


# ── Electric ──────────────────────────────────────────────────────────────────

def _electric_heating_solar(ctx: RuleContext) -> RuleDraft:
    window = best_solar_window(ctx.weather.sunny_periods)
    if window is None:
        raise ValueError("electric-heating-solar needs at least one sunny period.")
    return RuleDraft(
        title="Use electric heating during peak solar generation",
        description=(
            f"Strong solar generation {ctx.day} - run electric heating "
            f"{window.start_label}-{window.end_label} to use your own electricity."
        ),
        reasoning=(
            "Electric heating powered by your solar panels is essentially free and "
            "zero-carbon."
        ),
        priority="high",
        impact="high",
        savings_estimate="Save £1-£2 per day",
    )


NATURAL_VENTILATION = Rule(
    rule_id="natural-ventilation",
    category="heating",
    personalised=True,
    applies=_natural_ventilation_applies,
    build=_natural_ventilation,
)

HEAT_PUMP_OPTIMAL = Rule(
    rule_id="heat-pump-optimal",
    category="heating",
    personalised=True,
    applies=lambda ctx: _heating_is(ctx, "heat-pump") and _heat_pump_in_band(ctx),
    build=_heat_pump_optimal,
)

HEAT_PUMP_COLD_WEATHER = Rule(
    rule_id="heat-pump-cold-weather",
    category="heating",
    personalised=True,
    # Exclusive with HEAT_PUMP_OPTIMAL: a day in the efficiency band gets only
    # the optimal tip, even with a sub-zero low.
    applies=lambda ctx: (
        _heating_is(ctx, "heat-pump")
        and ctx.weather.temp_low < 0
        and not _heat_pump_in_band(ctx)
    ),
    build=_heat_pump_cold_weather,
)

GAS_MILD_WEATHER = Rule(
    rule_id="gas-mild-weather",
    category="heating",
    personalised=True,
    applies=lambda ctx: _heating_is(ctx, "gas") and _is_mild(ctx),
    build=_gas_mild_weather,
)

GAS_COLD_PREHEAT = Rule(
    rule_id="gas-cold-preheat",
    category="heating",
    personalised=True,
    applies=lambda ctx: (
        _heating_is(ctx, "gas")
        and ctx.weather.temp_low < COLD_NIGHT_LOW_C
        and ctx.day == "tomorrow"
    ),
    build=_gas_cold_preheat,
)

GAS_SOLAR_ELECTRIC = Rule(
    rule_id="gas-solar-electric",
    category="appliances",
    personalised=True,
    applies=lambda ctx: _heating_is(ctx, "gas") and _strong_solar(ctx),
    build=_gas_solar_electric,
)

OIL_MILD_WEATHER = Rule(
    rule_id="oil-mild-weather",
    category="heating",
    personalised=True,
    applies=lambda ctx: _heating_is(ctx, "oil") and _is_mild(ctx),
    build=_oil_mild_weather,
)

OIL_COLD_WEATHER = Rule(
    rule_id="oil-cold-weather",
    category="heating",
    personalised=True,
    applies=lambda ctx: _heating_is(ctx, "oil") and ctx.weather.temp_low < COLD_NIGHT_LOW_C,
    build=_oil_cold_weather,
)

OIL_BATCH_HEATING = Rule(
    rule_id="oil-batch-heating",
    category="heating",
    personalised=True,
    applies=lambda ctx: _heating_is(ctx, "oil") and _oil_stable_mild(ctx),
    build=_oil_batch_heating,
)

ELECTRIC_HEATING_SOLAR = Rule(
    rule_id="electric-heating-solar",
    category="heating",
    personalised=True,
    applies=lambda ctx: (
        _heating_is(ctx, "electric")
        and _strong_solar(ctx)
        and len(ctx.weather.sunny_periods) > 0
    ),
    build=_electric_heating_solar,
)
