"""
User preference model — the validated household profile.

Validation happens here, at the boundary. The recommendation rules assume a
``UserPreferences`` instance is already consistent:

  - ``postcode`` matches the UK format and is normalised to uppercase with
    no spaces (``"sw1a 2aa"`` → ``"SW1A2AA"``).
  - ``preferred_temperature`` is within 15–25 °C.
  - ``hot_water_system`` is compatible with ``heating_type``.
"""

from __future__ import annotations

import json
import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from ecotuned.taxonomy.heating_systems import (
    HeatingType,
    HotWaterSystem,
    get_valid_hot_water_options,
    is_valid_heating_combination,
)

_POSTCODE_RE = re.compile(r"^[A-Z]{1,2}\d{1,2}[A-Z]?\s?\d[A-Z]{2}$", re.IGNORECASE)

MIN_PREFERRED_TEMPERATURE = 15.0
MAX_PREFERRED_TEMPERATURE = 25.0


def normalize_postcode(postcode: str) -> str:
    """Uppercase a postcode and strip all whitespace."""
    return re.sub(r"\s", "", postcode).upper()


class UserPreferences(BaseModel):
    """Household setup used to personalise recommendations.

    Attributes:
        postcode: Normalised UK postcode.
        has_garden: Outdoor space for line-drying.
        has_ev: Owns an electric vehicle charged at home.
        has_solar: Has rooftop solar PV.
        has_time_of_use_tariff: On an off-peak tariff such as Economy 7.
        preferred_temperature: Comfortable indoor temperature, °C.
        heating_type: Primary space-heating system.
        hot_water_system: How hot water is produced.
    """

    model_config = ConfigDict(frozen=True)

    postcode: str
    has_garden: bool = False
    has_ev: bool = False
    has_solar: bool = False
    has_time_of_use_tariff: bool = False
    preferred_temperature: float = 19.0
    heating_type: HeatingType = "gas"
    hot_water_system: HotWaterSystem = "combi"

    @field_validator("postcode")
    @classmethod
    def validate_postcode(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Postcode is required.")
        if not _POSTCODE_RE.match(v):
            raise ValueError(f"Invalid UK postcode format: '{v}'.")
        return normalize_postcode(v)

    @field_validator("preferred_temperature")
    @classmethod
    def validate_preferred_temperature(cls, v: float) -> float:
        if not MIN_PREFERRED_TEMPERATURE <= v <= MAX_PREFERRED_TEMPERATURE:
            raise ValueError(
                f"preferred_temperature must be in [15, 25] °C, got {v}."
            )
        return v

    @model_validator(mode="after")
    def validate_heating_combination(self) -> "UserPreferences":
        if not is_valid_heating_combination(self.heating_type, self.hot_water_system):
            raise ValueError(
                f"Hot water system '{self.hot_water_system}' is not compatible with "
                f"heating type '{self.heating_type}'. Valid options: "
                f"{get_valid_hot_water_options(self.heating_type)}."
            )
        return self


def load_preferences(path: str | Path) -> UserPreferences:
    """Read a JSON preferences file and validate it.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
        pydantic.ValidationError: If the values fail validation.
    """
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)
    return UserPreferences.model_validate(raw)
