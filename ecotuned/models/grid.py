"""
Grid generation-mix models.

``GridSnapshot`` is only meaningful for "today": it describes the GB grid's
live fuel mix and carbon intensity at fetch time.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

FuelCategory = Literal["renewable", "fossil", "nuclear", "other"]
CarbonIndex = Literal["very low", "low", "moderate", "high", "very high"]


class FuelShare(BaseModel):
    """One fuel's share of current generation."""

    model_config = ConfigDict(frozen=True)

    fuel: str
    percent: float
    category: FuelCategory = "other"


class GridSnapshot(BaseModel):
    """Live generation mix and carbon intensity.

    Attributes:
        carbon_intensity: Forecast intensity in gCO2/kWh, ``0`` if unknown.
        carbon_index: Qualitative band published alongside the intensity.
        renewable_percent / fossil_percent / nuclear_percent / other_percent:
            Category totals, rounded to 0.1, summing to roughly 100.
        fuel_breakdown: Per-fuel shares.
        timestamp: Start of the settlement period the mix describes.
    """

    model_config = ConfigDict(frozen=True)

    carbon_intensity: float = 0.0
    carbon_index: CarbonIndex = "moderate"
    renewable_percent: float = 0.0
    fossil_percent: float = 0.0
    nuclear_percent: float = 0.0
    other_percent: float = 0.0
    fuel_breakdown: list[FuelShare] = Field(default_factory=list)
    timestamp: Optional[str] = None

    @field_validator("carbon_intensity")
    @classmethod
    def validate_intensity(cls, v: float) -> float:
        if v < 0:
            raise ValueError("carbon_intensity must be non-negative.")
        return v

    def fuel_percent(self, fuel: str) -> float:
        """Return the share of ``fuel`` (e.g. ``"wind"``), or 0 if absent."""
        for share in self.fuel_breakdown:
            if share.fuel == fuel:
                return share.percent
        return 0.0
