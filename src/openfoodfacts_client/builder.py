"""Client builders.

Example::

    from openfoodfacts_client.builder import v2
    from openfoodfacts_client.domain.locale import Locale

    client = v2().locale(Locale("fr")).build()
    response = client.product("3017620422003")
"""

import logging
from dataclasses import dataclass, field
from typing import Generic, TypeVar

import httpx
from pydantic import ValidationError

from openfoodfacts_client.adapters.http_client import HttpxClient
from openfoodfacts_client.client import OffClient, OffClientV0, OffClientV2
from openfoodfacts_client.config import ClientConfig
from openfoodfacts_client.domain.locale import Locale
from openfoodfacts_client.errors import ConfigurationError

ClientT = TypeVar("ClientT", bound=OffClient)

_logger = logging.getLogger(__name__)


@dataclass
class OffBuilder(Generic[ClientT]):
    """Collects client options; ``build()`` creates the client.

    Setters return the builder so calls can be chained. A builder can only
    be built once.
    """

    client_class: type[ClientT]
    options: dict[str, object] = field(default_factory=dict)
    built: bool = False

    def locale(self, value: Locale | str) -> "OffBuilder[ClientT]":
        """Set the default locale."""
        if isinstance(value, str):
            value = Locale.parse(value)
        return self._set(locale=value)

    def auth(self, username: str, password: str) -> "OffBuilder[ClientT]":
        """Set basic-auth credentials sent with every request."""
        return self._set(username=username, password=password)

    def user_agent(self, value: str) -> "OffBuilder[ClientT]":
        return self._set(user_agent=value)

    def api_domain(self, value: str) -> "OffBuilder[ClientT]":
        return self._set(api_domain=value)

    def timeout(self, seconds: float) -> "OffBuilder[ClientT]":
        return self._set(timeout=seconds)

    def config(self) -> ClientConfig:
        """Validate the collected options."""
        try:
            return ClientConfig(**self.options)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid client options: {exc}") from exc

    def build(self, transport: httpx.BaseTransport | None = None) -> ClientT:
        """Create the client and its HTTP session.

        ``transport`` replaces the network transport, e.g. with an
        ``httpx.MockTransport``.
        """
        self._check_usable()
        config = self.config()
        try:
            http_client = HttpxClient.create(config, transport=transport)
        except (httpx.HTTPError, ValueError, TypeError) as exc:
            raise ConfigurationError(f"Could not create the HTTP client: {exc}") from exc
        self.built = True
        _logger.debug(
            "Built %s client: locale=%s domain=%s",
            self.client_class.version,
            config.locale,
            config.api_domain,
        )
        return self.client_class(
            locale=config.locale,
            http_client=http_client,
            api_domain=config.api_domain,
        )

    def _set(self, **values: object) -> "OffBuilder[ClientT]":
        self._check_usable()
        self.options.update(values)
        return self

    def _check_usable(self) -> None:
        if self.built:
            raise RuntimeError("Builder was already used to build a client")


def v0() -> OffBuilder[OffClientV0]:
    """Return a builder for an API v0 client."""
    return OffBuilder(OffClientV0)


def v2() -> OffBuilder[OffClientV2]:
    """Return a builder for an API v2 client."""
    return OffBuilder(OffClientV2)
