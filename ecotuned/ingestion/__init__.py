"""
Ingestion layer — typed clients for the three public upstream APIs.

Submodules:
  postcodes_client         — postcodes.io: postcode → coordinates
  open_meteo_client        — Open-Meteo: hourly + daily forecast
  carbon_intensity_client  — GB Carbon Intensity: generation mix + intensity
  base                     — shared httpx plumbing
  errors                   — UpstreamAPIError, PostcodeNotFoundError

Each client pairs a network method with a pure payload parser, so parsing is
testable without the network. None of the services needs an API key.
"""
