"""
Open-Meteo forecast client.

API:   https://api.open-meteo.com/v1/forecast
Docs:  https://open-meteo.com/en/docs   (free, no API key)

Hourly and daily variables are returned as parallel arrays keyed by
variable name::

    {
      "hourly": {
        "time": ["2025-01-08T00:00", ...],
        "temperature_2m": [4.1, ...],
        ...
      },
      "daily": {
        "time": ["2025-01-08", "2025-01-09"],
        "temperature_2m_max": [9.3, 11.0],
        ...
      }
    }

Values may be ``null`` (or arrays shorter than ``time``); those come through
as ``None`` and are defaulted later by feature extraction.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Optional

from ecotuned.ingestion.base import JsonApiClient
from ecotuned.ingestion.errors import UpstreamAPIError
from ecotuned.models.weather import DailyAggregates, HourlySample
from ecotuned.utils.time_utils import UK_TIMEZONE_NAME

logger = logging.getLogger(__name__)

# Open-Meteo variable → HourlySample field
HOURLY_VARIABLES: dict[str, str] = {
    "temperature_2m":            "temperature_c",
    "precipitation_probability": "rain_probability_pct",
    "cloud_cover":               "cloud_cover_pct",
    "wind_speed_10m":            "wind_speed_kmh",
    "weather_code":              "weather_code",
    "shortwave_radiation":       "solar_radiation_wm2",
    "relative_humidity_2m":      "humidity_pct",
}
DAILY_VARIABLES: tuple[str, ...] = (
    "temperature_2m_max",
    "temperature_2m_min",
    "sunrise",
    "sunset",
)


def _at(values: Optional[list[Any]], index: int) -> Any:
    if not values or index >= len(values):
        return None
    return values[index]


def parse_hourly_samples(payload: dict[str, Any]) -> list[HourlySample]:
    """Turn the ``hourly`` block into one ``HourlySample`` per timestamp.

    Raises:
        UpstreamAPIError: If the payload has no ``hourly.time`` array.
    """
    hourly = payload.get("hourly") or {}
    times = hourly.get("time")
    if not times:
        raise UpstreamAPIError(OpenMeteoClient.SERVICE_NAME, "Forecast has no hourly data.")

    samples: list[HourlySample] = []
    for i, ts in enumerate(times):
        fields = {
            field_name: _at(hourly.get(variable), i)
            for variable, field_name in HOURLY_VARIABLES.items()
        }
        samples.append(HourlySample(time=ts, **fields))
    return samples


def parse_daily_aggregates(payload: dict[str, Any], date_str: str) -> DailyAggregates:
    """Pick the daily aggregates for ``date_str``.

    Raises:
        ValueError: If ``date_str`` is not in ``daily.time`` or a value is missing.
    """
    daily = payload.get("daily") or {}
    dates = daily.get("time") or []
    if date_str not in dates:
        raise ValueError(f"No forecast data available for {date_str}.")
    idx = dates.index(date_str)

    values = {name: _at(daily.get(name), idx) for name in DAILY_VARIABLES}
    missing = [name for name, val in values.items() if val is None]
    if missing:
        raise ValueError(f"Daily forecast for {date_str} is missing {missing}.")

    return DailyAggregates(
        temp_high_c=values["temperature_2m_max"],
        temp_low_c=values["temperature_2m_min"],
        sunrise=values["sunrise"],
        sunset=values["sunset"],
    )


class OpenMeteoClient(JsonApiClient):
    """Fetch hourly + daily forecasts for a location in UK local time."""

    SERVICE_NAME: ClassVar[str] = "open-meteo"
    BASE_URL: ClassVar[str] = "https://api.open-meteo.com/v1"

    def __init__(self, base_url: str = BASE_URL, **kwargs: Any) -> None:
        super().__init__(base_url, **kwargs)

    def fetch_forecast(
        self,
        latitude: float,
        longitude: float,
        forecast_days: int = 2,
    ) -> dict[str, Any]:
        """Fetch the raw forecast payload.

        Pass the result to ``parse_hourly_samples`` / ``parse_daily_aggregates``.

        Raises:
            UpstreamAPIError: On transport failure or non-2xx response.
        """
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "hourly": ",".join(HOURLY_VARIABLES),
            "daily": ",".join(DAILY_VARIABLES),
            "timezone": UK_TIMEZONE_NAME,
            "forecast_days": forecast_days,
        }
        payload = self._get_json("forecast", params)
        logger.info(
            "Fetched %d-day forecast for (%.4f, %.4f): %d hourly samples",
            forecast_days, latitude, longitude,
            len((payload.get("hourly") or {}).get("time") or []),
        )
        return payload
