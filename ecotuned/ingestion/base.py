"""
Shared httpx plumbing for the upstream API clients.

Each client owns an ``httpx.Client`` (or borrows one passed in, which is how
tests inject ``httpx.MockTransport``) and fetches JSON through
``_get_json``, which maps every failure onto ``UpstreamAPIError``.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Optional

import httpx

from ecotuned.ingestion.errors import UpstreamAPIError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


class JsonApiClient:
    """Base class: base URL, timeout, and a JSON GET helper."""

    SERVICE_NAME: ClassVar[str] = "upstream"

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client or httpx.Client(timeout=timeout)
        self._owns_client = client is None

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _get(self, path: str, params: Optional[dict[str, Any]] = None) -> httpx.Response:
        url = f"{self.base_url}/{path.lstrip('/')}"
        try:
            resp = self._client.get(url, params=params, timeout=self.timeout)
        except httpx.HTTPError as exc:
            raise UpstreamAPIError(self.SERVICE_NAME, f"request failed: {exc}") from exc
        logger.debug("%s GET %s -> %d", self.SERVICE_NAME, url, resp.status_code)
        return resp

    def _json(self, resp: httpx.Response) -> Any:
        if not resp.is_success:
            raise UpstreamAPIError(
                self.SERVICE_NAME,
                f"HTTP {resp.status_code} from {resp.request.url}",
                status_code=resp.status_code,
            )
        try:
            return resp.json()
        except ValueError as exc:
            raise UpstreamAPIError(self.SERVICE_NAME, "response was not valid JSON") from exc

    def _get_json(self, path: str, params: Optional[dict[str, Any]] = None) -> Any:
        return self._json(self._get(path, params))
