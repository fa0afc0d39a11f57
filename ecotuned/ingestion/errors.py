"""
Ingestion error types.

Every failure talking to an upstream service surfaces as ``UpstreamAPIError``
(transport errors, non-2xx responses, malformed JSON). Callers that only care
whether the data arrived catch that one type.
"""

from __future__ import annotations

from typing import Optional


class UpstreamAPIError(RuntimeError):
    """An upstream API call failed or returned unusable data.

    Attributes:
        service:     Short service name, e.g. ``"postcodes.io"``.
        status_code: HTTP status, or ``None`` for transport/parse failures.
    """

    def __init__(self, service: str, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(f"{service}: {message}")
        self.service = service
        self.status_code = status_code


class PostcodeNotFoundError(UpstreamAPIError):
    """postcodes.io has no record of the requested postcode (HTTP 404)."""

    def __init__(self, postcode: str) -> None:
        super().__init__("postcodes.io", f"Postcode '{postcode}' not found.", status_code=404)
        self.postcode = postcode
