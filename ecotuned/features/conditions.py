"""
Severity-based summary of a day's hourly weather codes.

The primary label is the most severe condition seen during the day, so a
morning thunderstorm is not hidden by an otherwise clear afternoon. When the
day spans two or more severity ranks, a ``"Least / Most"`` range string is
also produced (``"Partly Cloudy / Rain"``).
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from ecotuned.taxonomy.weather_codes import (
    WeatherCondition,
    condition_from_code,
    severity_of,
)

RANGE_MIN_SEVERITY_SPREAD = 2


def summarize_conditions(codes: Iterable[Optional[int]]) -> tuple[str, Optional[str]]:
    """Summarise hourly WMO codes as ``(conditions, conditions_range)``.

    Args:
        codes: Hourly weather codes; ``None`` and unknown codes are ignored.

    Returns:
        ``("Unknown", None)`` when no code is recognised. Otherwise the most
        severe label, plus ``"Least / Most"`` if the severity spread is >= 2.
    """
    ranked: list[tuple[int, WeatherCondition]] = []
    for code in codes:
        severity = severity_of(code)
        if severity is not None:
            ranked.append((severity, condition_from_code(code)))
    if not ranked:
        return WeatherCondition.UNKNOWN.value, None

    least_rank, least = min(ranked)
    most_rank, most = max(ranked)

    spread = most_rank - least_rank
    conditions_range = f"{least} / {most}" if spread >= RANGE_MIN_SEVERITY_SPREAD else None
    return most.value, conditions_range
