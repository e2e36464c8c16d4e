"""Client configuration."""

import platform
import re

import httpx
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
    model_validator,
)

from openfoodfacts_client.domain.locale import Locale

VERSION = "0.1.0"
DEFAULT_API_DOMAIN = "openfoodfacts.org"
DEFAULT_USER_AGENT = f"OffPythonClient - {platform.system()} - Version {VERSION}"
DEFAULT_TIMEOUT_SECONDS = 15.0
DEFAULT_LOCALE_HOST = "world"

_LABEL = r"[a-z0-9](?:[a-z0-9-]*[a-z0-9])?"
_HOST_NAME = re.compile(rf"{_LABEL}(?:\.{_LABEL})*")


class ClientConfig(BaseModel):
    """Options captured once when a client is built.

    Nothing is read from the environment.
    """

    model_config = ConfigDict(frozen=True)

    locale: Locale = Field(default_factory=Locale)
    username: str | None = None
    password: str | None = None
    user_agent: str = DEFAULT_USER_AGENT
    api_domain: str = DEFAULT_API_DOMAIN
    timeout: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)

    @field_validator("username", "password", "user_agent")
    @classmethod
    def _header_safe(cls, value: str | None, info: ValidationInfo) -> str | None:
        if value is None:
            return value
        if info.field_name == "user_agent" and not value.strip():
            raise ValueError("must not be empty")
        if not value.isascii() or not value.isprintable():
            raise ValueError("must contain printable ASCII characters only")
        return value

    @field_validator("api_domain")
    @classmethod
    def _bare_host_name(cls, value: str) -> str:
        value = value.strip().strip(".").lower()
        if not _HOST_NAME.fullmatch(value):
            raise ValueError(f"must be a bare host name: {value!r}")
        expected = f"{DEFAULT_LOCALE_HOST}.{value}"
        try:
            url = httpx.URL(f"https://{expected}/")
        except httpx.InvalidURL as exc:
            raise ValueError(f"must be a bare host name: {value!r}") from exc
        if (
            url.host != expected
            or url.userinfo
            or url.port is not None
            or url.path != "/"
            or url.query
            or url.fragment
        ):
            raise ValueError(f"must be a bare host name: {value!r}")
        return value

    @model_validator(mode="after")
    def _auth_complete(self) -> "ClientConfig":
        if (self.username is None) != (self.password is None):
            raise ValueError("username and password must be given together")
        return self

    @property
    def auth(self) -> tuple[str, str] | None:
        """Basic-auth credentials, if configured."""
        if self.username is None or self.password is None:
            return None
        return (self.username, self.password)
