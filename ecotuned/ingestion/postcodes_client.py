"""
postcodes.io client — UK postcode → latitude/longitude.

API:   https://api.postcodes.io/postcodes/{postcode}
Docs:  https://postcodes.io/docs   (free, no API key)

Response shape (abridged)::

    {
      "status": 200,
      "result": {
        "postcode": "SW1A 2AA",
        "latitude": 51.50354,
        "longitude": -0.127695,
        "region": "London",
        ...
      }
    }
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ConfigDict

from ecotuned.ingestion.base import JsonApiClient
from ecotuned.ingestion.errors import PostcodeNotFoundError, UpstreamAPIError
from ecotuned.models.preferences import normalize_postcode

logger = logging.getLogger(__name__)


class PostcodeLocation(BaseModel):
    """Coordinates of a postcode as reported by postcodes.io."""

    model_config = ConfigDict(frozen=True)

    postcode: str
    latitude: float
    longitude: float
    region: Optional[str] = None


def parse_postcode_response(payload: dict[str, Any]) -> PostcodeLocation:
    """Extract a ``PostcodeLocation`` from a postcodes.io lookup payload.

    Raises:
        UpstreamAPIError: If ``result`` is missing or has no coordinates.
    """
    result = payload.get("result")
    if not result:
        raise UpstreamAPIError(PostcodesClient.SERVICE_NAME, "Invalid postcode data received.")
    if result.get("latitude") is None or result.get("longitude") is None:
        raise UpstreamAPIError(
            PostcodesClient.SERVICE_NAME,
            f"No coordinates for postcode '{result.get('postcode')}'.",
        )
    return PostcodeLocation(
        postcode=result.get("postcode", ""),
        latitude=float(result["latitude"]),
        longitude=float(result["longitude"]),
        region=result.get("region"),
    )


class PostcodesClient(JsonApiClient):
    """Look up UK postcodes.

    Usage::

        with PostcodesClient() as client:
            location = client.lookup("sw1a 2aa")
    """

    SERVICE_NAME: ClassVar[str] = "postcodes.io"
    BASE_URL: ClassVar[str] = "https://api.postcodes.io"

    def __init__(self, base_url: str = BASE_URL, **kwargs: Any) -> None:
        super().__init__(base_url, **kwargs)

    def lookup(self, postcode: str) -> PostcodeLocation:
        """Resolve a postcode to coordinates.

        Args:
            postcode: Any-case UK postcode; whitespace is stripped.

        Raises:
            PostcodeNotFoundError: postcodes.io returned 404.
            UpstreamAPIError:      Any other failure.
        """
        clean = normalize_postcode(postcode)
        resp = self._get(f"postcodes/{clean}")
        if resp.status_code == 404:
            raise PostcodeNotFoundError(clean)
        location = parse_postcode_response(self._json(resp))
        logger.info(
            "Resolved %s -> (%.4f, %.4f) %s",
            clean, location.latitude, location.longitude, location.region or "",
        )
        return location
