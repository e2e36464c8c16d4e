"""HTTP transport adapter."""

import logging
from dataclasses import dataclass
from typing import Protocol

import httpx

from openfoodfacts_client.config import ClientConfig
from openfoodfacts_client.domain.types import Params

_logger = logging.getLogger(__name__)


class HttpClient(Protocol):
    """Interface for issuing GET requests."""

    def get(self, url: httpx.URL, params: Params | None = None) -> httpx.Response:
        """Send a GET request and return the response as received."""

    def close(self) -> None:
        """Release pooled connections."""


@dataclass
class HttpxClient(HttpClient):
    """HTTPX-backed transport sharing one connection pool."""

    http_client: httpx.Client

    @classmethod
    def create(
        cls, config: ClientConfig, transport: httpx.BaseTransport | None = None
    ) -> "HttpxClient":
        """Create a transport with the configured headers, auth and timeout."""
        return cls(
            http_client=httpx.Client(
                headers={"User-Agent": config.user_agent},
                auth=config.auth,
                timeout=config.timeout,
                transport=transport,
            )
        )

    def get(self, url: httpx.URL, params: Params | None = None) -> httpx.Response:
        """Send a GET request. Error statuses are returned, not raised."""
        _logger.debug("GET %s params=%s", url, params)
        try:
            response = self.http_client.get(url, params=params)
        except httpx.TransportError as exc:
            _logger.warning("GET %s failed: %s", url, exc)
            raise
        _logger.debug("GET %s -> %s", response.url, response.status_code)
        return response

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.http_client.close()
