"""Output options shared by the read endpoints."""

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field, field_validator

from openfoodfacts_client.domain.locale import Locale
from openfoodfacts_client.domain.types import Params

_QUERY_FIELDS = ("page", "page_size", "fields", "nocache")


class Output(BaseModel):
    """General output options. Not all endpoints support all options.

    Unset options are left out of the query string entirely.
    """

    model_config = ConfigDict(frozen=True)

    locale: Locale | None = None
    page: int | None = Field(default=None, ge=0)
    page_size: int | None = Field(default=None, ge=1)
    fields: str | None = None
    nocache: bool | None = None

    @field_validator("locale", mode="before")
    @classmethod
    def _parse_locale(cls, value: object) -> object:
        if isinstance(value, str):
            return Locale.parse(value)
        return value

    @field_validator("fields", mode="before")
    @classmethod
    def _empty_fields_to_none(cls, value: object) -> object:
        if value == "":
            return None
        return value

    def with_locale(self, value: Locale | str | None) -> "Output":
        return self._replace(locale=value)

    def with_page(self, value: int | None) -> "Output":
        return self._replace(page=value)

    def with_page_size(self, value: int | None) -> "Output":
        return self._replace(page_size=value)

    def with_fields(self, value: str | None) -> "Output":
        """Set a comma-separated list of field names. Empty means unset."""
        return self._replace(fields=value)

    def with_nocache(self, value: bool | None) -> "Output":
        return self._replace(nocache=value)

    def params(self, names: Iterable[str]) -> Params:
        """Project the populated options named in ``names`` to query pairs.

        Pairs follow the first occurrence of each name. Unknown names and
        unset options are skipped.
        """
        params: Params = []
        seen: set[str] = set()
        for name in names:
            if name in seen or name not in _QUERY_FIELDS:
                continue
            seen.add(name)
            value = getattr(self, name)
            if value is None:
                continue
            params.append((name, _format_value(value)))
        return params

    def _replace(self, **changes: object) -> "Output":
        return type(self).model_validate({**dict(self), **changes})


def _format_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
