"""
Tests for ecotuned/ingestion/carbon_intensity_client.py.

What we test
------------
build_grid_snapshot():
  - Fuels grouped into renewable / fossil / nuclear / other totals (0.1 dp).
  - Unknown fuels count as other.
  - Intensity forecast and index taken from the /intensity payload; without
    one the snapshot reports 0 g/kWh, "moderate".
  - ``data`` may be an object or a one-element list.
  - Missing generationmix → UpstreamAPIError.
CarbonIntensityClient.fetch_grid_snapshot():
  - Combines both endpoints.
  - An /intensity failure is tolerated; a /generation failure is not.
"""

from __future__ import annotations

import httpx
import pytest

from ecotuned.ingestion.carbon_intensity_client import (
    CarbonIntensityClient,
    build_grid_snapshot,
)
from ecotuned.ingestion.errors import UpstreamAPIError

_GENERATION = {
    "data": {
        "from": "2025-01-08T11:30Z",
        "to": "2025-01-08T12:00Z",
        "generationmix": [
            {"fuel": "biomass", "perc": 4.1},
            {"fuel": "coal", "perc": 0.0},
            {"fuel": "imports", "perc": 9.6},
            {"fuel": "gas", "perc": 18.4},
            {"fuel": "nuclear", "perc": 12.2},
            {"fuel": "other", "perc": 0.2},
            {"fuel": "hydro", "perc": 1.4},
            {"fuel": "solar", "perc": 3.1},
            {"fuel": "wind", "perc": 50.8},
        ],
    }
}
_INTENSITY = {
    "data": [
        {
            "from": "2025-01-08T11:30Z",
            "to": "2025-01-08T12:00Z",
            "intensity": {"forecast": 98, "actual": 101, "index": "low"},
        }
    ]
}


# ── Helpers ───────────────────────────────────────────────────────────────────

def _client(routes: dict[str, httpx.Response]) -> CarbonIntensityClient:
    def handler(request: httpx.Request) -> httpx.Response:
        return routes[request.url.path]

    return CarbonIntensityClient(
        "https://carbon.test",
        client=httpx.Client(transport=httpx.MockTransport(handler)),
    )


# ── build_grid_snapshot ───────────────────────────────────────────────────────

class TestBuildGridSnapshot:
    def test_category_totals(self):
        grid = build_grid_snapshot(_GENERATION, _INTENSITY)
        assert grid.renewable_percent == pytest.approx(55.3)
        assert grid.fossil_percent == pytest.approx(18.4)
        assert grid.nuclear_percent == pytest.approx(12.2)
        assert grid.other_percent == pytest.approx(13.9)
        assert grid.fuel_percent("wind") == pytest.approx(50.8)
        assert grid.timestamp == "2025-01-08T11:30Z"

    def test_intensity(self):
        grid = build_grid_snapshot(_GENERATION, _INTENSITY)
        assert grid.carbon_intensity == 98
        assert grid.carbon_index == "low"

    def test_without_intensity(self):
        grid = build_grid_snapshot(_GENERATION)
        assert grid.carbon_intensity == 0
        assert grid.carbon_index == "moderate"

    def test_unrecognised_index_ignored(self):
        intensity = {"data": [{"intensity": {"forecast": 180, "index": "unknown"}}]}
        grid = build_grid_snapshot(_GENERATION, intensity)
        assert grid.carbon_intensity == 180
        assert grid.carbon_index == "moderate"

    def test_unknown_fuel_is_other(self):
        payload = {"data": {"generationmix": [{"fuel": "tidal", "perc": 2.0}]}}
        grid = build_grid_snapshot(payload)
        assert grid.other_percent == 2.0
        assert grid.fuel_breakdown[0].category == "other"

    def test_list_shaped_data(self):
        payload = {"data": [_GENERATION["data"]]}
        assert build_grid_snapshot(payload).renewable_percent == pytest.approx(55.3)

    def test_missing_generation_mix(self):
        with pytest.raises(UpstreamAPIError, match="generationmix"):
            build_grid_snapshot({"data": {}})


# ── CarbonIntensityClient ─────────────────────────────────────────────────────

class TestFetchGridSnapshot:
    def test_both_endpoints(self):
        client = _client({
            "/generation": httpx.Response(200, json=_GENERATION),
            "/intensity": httpx.Response(200, json=_INTENSITY),
        })
        grid = client.fetch_grid_snapshot()
        assert grid.carbon_intensity == 98
        assert grid.renewable_percent == pytest.approx(55.3)

    def test_intensity_failure_tolerated(self, caplog):
        client = _client({
            "/generation": httpx.Response(200, json=_GENERATION),
            "/intensity": httpx.Response(503),
        })
        grid = client.fetch_grid_snapshot()
        assert grid.carbon_intensity == 0
        assert grid.renewable_percent == pytest.approx(55.3)
        assert "Carbon intensity unavailable" in caplog.text

    def test_generation_failure_raises(self):
        client = _client({
            "/generation": httpx.Response(500),
            "/intensity": httpx.Response(200, json=_INTENSITY),
        })
        with pytest.raises(UpstreamAPIError) as exc_info:
            client.fetch_grid_snapshot()
        assert exc_info.value.service == "carbon-intensity"
