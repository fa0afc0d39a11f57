"""
GB Carbon Intensity API client — live generation mix and carbon intensity.

API:   https://api.carbonintensity.org.uk
Docs:  https://carbon-intensity.github.io/api-definitions/   (free, no API key)

Endpoints:
  GET /generation   (required)
    {"data": {"from": "...", "to": "...",
              "generationmix": [{"fuel": "wind", "perc": 41.2}, ...]}}
  GET /intensity    (optional — failure tolerated)
    {"data": [{"from": "...", "to": "...",
               "intensity": {"forecast": 120, "actual": 118, "index": "low"}}]}

Fuel categories:
  wind, solar, hydro          → renewable
  gas, coal                   → fossil
  nuclear                     → nuclear
  biomass, imports, other, *  → other
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Optional

from ecotuned.ingestion.base import JsonApiClient
from ecotuned.ingestion.errors import UpstreamAPIError
from ecotuned.models.grid import FuelShare, GridSnapshot
from ecotuned.utils.rounding import round_half_up

logger = logging.getLogger(__name__)

FUEL_CATEGORIES: dict[str, str] = {
    "wind":    "renewable",
    "solar":   "renewable",
    "hydro":   "renewable",
    "gas":     "fossil",
    "coal":    "fossil",
    "nuclear": "nuclear",
    "biomass": "other",
    "imports": "other",
    "other":   "other",
}

VALID_CARBON_INDEXES = frozenset({"very low", "low", "moderate", "high", "very high"})


def build_grid_snapshot(
    generation_payload: dict[str, Any],
    intensity_payload: Optional[dict[str, Any]] = None,
) -> GridSnapshot:
    """Combine ``/generation`` and (optionally) ``/intensity`` payloads.

    Category totals are rounded to one decimal place. Without a usable
    intensity payload the intensity is 0 and the index ``"moderate"``.

    Raises:
        UpstreamAPIError: If the generation payload has no ``generationmix``.
    """
    data = generation_payload.get("data")
    if isinstance(data, list):
        data = data[0] if data else None
    if not data or "generationmix" not in data:
        raise UpstreamAPIError(
            CarbonIntensityClient.SERVICE_NAME, "Generation payload has no generationmix."
        )

    totals = {"renewable": 0.0, "fossil": 0.0, "nuclear": 0.0, "other": 0.0}
    breakdown: list[FuelShare] = []
    for entry in data["generationmix"]:
        fuel = str(entry.get("fuel", "other"))
        perc = float(entry.get("perc") or 0.0)
        category = FUEL_CATEGORIES.get(fuel, "other")
        totals[category] += perc
        breakdown.append(FuelShare(fuel=fuel, percent=perc, category=category))

    carbon_intensity = 0.0
    carbon_index = "moderate"
    intensity = _first_intensity(intensity_payload)
    if intensity:
        carbon_intensity = float(intensity.get("forecast") or 0)
        index = intensity.get("index")
        if index in VALID_CARBON_INDEXES:
            carbon_index = index

    return GridSnapshot(
        carbon_intensity=carbon_intensity,
        carbon_index=carbon_index,
        renewable_percent=_one_decimal(totals["renewable"]),
        fossil_percent=_one_decimal(totals["fossil"]),
        nuclear_percent=_one_decimal(totals["nuclear"]),
        other_percent=_one_decimal(totals["other"]),
        fuel_breakdown=breakdown,
        timestamp=data.get("from"),
    )


def _one_decimal(value: float) -> float:
    return round_half_up(value * 10) / 10


def _first_intensity(payload: Optional[dict[str, Any]]) -> Optional[dict[str, Any]]:
    if not payload:
        return None
    rows = payload.get("data") or []
    if not rows:
        return None
    return rows[0].get("intensity")


class CarbonIntensityClient(JsonApiClient):
    """Fetch the current GB grid snapshot."""

    SERVICE_NAME: ClassVar[str] = "carbon-intensity"
    BASE_URL: ClassVar[str] = "https://api.carbonintensity.org.uk"

    def __init__(self, base_url: str = BASE_URL, **kwargs: Any) -> None:
        super().__init__(base_url, **kwargs)

    def fetch_grid_snapshot(self) -> GridSnapshot:
        """Fetch generation mix (required) and carbon intensity (best effort).

        Raises:
            UpstreamAPIError: If the generation mix cannot be fetched.
        """
        generation = self._get_json("generation")

        intensity: Optional[dict[str, Any]] = None
        try:
            intensity = self._get_json("intensity")
        except UpstreamAPIError as exc:
            logger.warning("Carbon intensity unavailable, continuing without it: %s", exc)

        snapshot = build_grid_snapshot(generation, intensity)
        logger.info(
            "Grid mix: %.1f%% renewable, %.0f g/kWh (%s)",
            snapshot.renewable_percent, snapshot.carbon_intensity, snapshot.carbon_index,
        )
        return snapshot
