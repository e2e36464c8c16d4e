"""Client exceptions.

Transport failures are not wrapped: ``httpx`` exceptions reach the caller
unchanged. HTTP error statuses are never raised.
"""


class OffClientError(Exception):
    """Base class for errors raised by this library."""


class ConfigurationError(OffClientError):
    """The client could not be built from the given options."""


class UrlParseError(OffClientError, ValueError):
    """A request URL could not be assembled."""
