"""
Tests for ecotuned/ingestion/postcodes_client.py and ingestion/base.py.

All HTTP is served by ``httpx.MockTransport``; nothing touches the network.

What we test
------------
PostcodesClient.lookup():
  - Normalises the postcode into the request path.
  - Parses coordinates and region.
  - 404 → PostcodeNotFoundError; other non-2xx → UpstreamAPIError with status.
  - Transport errors and invalid JSON → UpstreamAPIError.
parse_postcode_response():
  - Missing result or coordinates → UpstreamAPIError.
"""

from __future__ import annotations

import httpx
import pytest

from ecotuned.ingestion.errors import PostcodeNotFoundError, UpstreamAPIError
from ecotuned.ingestion.postcodes_client import PostcodesClient, parse_postcode_response

_OK_PAYLOAD = {
    "status": 200,
    "result": {
        "postcode": "SW1A 2AA",
        "latitude": 51.50354,
        "longitude": -0.127695,
        "region": "London",
    },
}


# ── Helpers ───────────────────────────────────────────────────────────────────

def _client(handler) -> PostcodesClient:
    return PostcodesClient(
        "https://postcodes.test",
        client=httpx.Client(transport=httpx.MockTransport(handler)),
    )


# ── Tests ─────────────────────────────────────────────────────────────────────

class TestLookup:
    def test_success(self):
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url.path)
            return httpx.Response(200, json=_OK_PAYLOAD)

        with _client(handler) as client:
            location = client.lookup("sw1a 2aa")

        assert seen == ["/postcodes/SW1A2AA"]
        assert location.postcode == "SW1A 2AA"
        assert location.latitude == pytest.approx(51.50354)
        assert location.longitude == pytest.approx(-0.127695)
        assert location.region == "London"

    def test_not_found(self):
        def handler(request):
            return httpx.Response(404, json={"status": 404, "error": "Postcode not found"})

        with pytest.raises(PostcodeNotFoundError) as exc_info:
            _client(handler).lookup("ZZ99 9ZZ")
        assert exc_info.value.status_code == 404
        assert exc_info.value.postcode == "ZZ999ZZ"

    def test_server_error(self):
        def handler(request):
            return httpx.Response(500, text="boom")

        with pytest.raises(UpstreamAPIError) as exc_info:
            _client(handler).lookup("SW1A 2AA")
        assert exc_info.value.status_code == 500
        assert exc_info.value.service == "postcodes.io"

    def test_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("unreachable", request=request)

        with pytest.raises(UpstreamAPIError, match="request failed") as exc_info:
            _client(handler).lookup("SW1A 2AA")
        assert exc_info.value.status_code is None

    def test_invalid_json(self):
        def handler(request):
            return httpx.Response(200, text="<html>")

        with pytest.raises(UpstreamAPIError, match="not valid JSON"):
            _client(handler).lookup("SW1A 2AA")


class TestParsePostcodeResponse:
    def test_missing_result(self):
        with pytest.raises(UpstreamAPIError, match="Invalid postcode data"):
            parse_postcode_response({"status": 200, "result": None})

    def test_missing_coordinates(self):
        payload = {"result": {"postcode": "JE2 3AB", "latitude": None, "longitude": None}}
        with pytest.raises(UpstreamAPIError, match="No coordinates"):
            parse_postcode_response(payload)
