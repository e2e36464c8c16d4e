"""Shared API types."""

from enum import Enum

Params = list[tuple[str, str]]
"""Ordered query parameters as (name, value) string pairs."""


class ApiVersion(Enum):
    """Supported API versions."""

    V0 = "v0"
    V2 = "v2"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "ApiVersion":
        """Return the version for a "v{number}" token."""
        for version in cls:
            if version.value == text:
                return version
        raise ValueError(f"Unsupported API version: {text!r}")


class SortBy(Enum):
    """Sort orders accepted by the search endpoints."""

    POPULARITY = "unique_scans_n"
    PRODUCT_NAME = "product_name"
    CREATED = "created_t"
    LAST_MODIFIED = "last_modified_t"
    ECOSCORE = "ecoscore_score"
