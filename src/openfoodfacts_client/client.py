"""Open Food Facts API client.

The country and language are always selected through the subdomain; the
``cc`` and ``lc`` query parameters are never sent. Response bodies are
returned untouched for the caller to decode.
"""

import logging
from dataclasses import dataclass
from typing import ClassVar

import httpx

from openfoodfacts_client.adapters.http_client import HttpClient
from openfoodfacts_client.config import DEFAULT_API_DOMAIN
from openfoodfacts_client.domain.locale import Locale
from openfoodfacts_client.domain.output import Output
from openfoodfacts_client.domain.search import (
    SearchBuilderV0,
    SearchBuilderV2,
    SearchParams,
)
from openfoodfacts_client.domain.types import ApiVersion, Params
from openfoodfacts_client.errors import UrlParseError

_FACET_PARAMS = ("page", "page_size", "fields", "nocache")
_LISTING_PARAMS = ("page", "page_size", "fields")
_PRODUCT_PARAMS = ("fields",)
_SEARCH_PARAMS = ("page", "page_size", "fields")

_logger = logging.getLogger(__name__)


def _join(base: httpx.URL, path: str) -> httpx.URL:
    try:
        return base.join(path)
    except httpx.InvalidURL as exc:
        raise UrlParseError(f"Invalid URL path {path!r}: {exc}") from exc


def _locale_of(output: Output | None) -> Locale | None:
    return output.locale if output is not None else None


def _output_params(output: Output | None, names: tuple[str, ...]) -> Params:
    if output is None:
        return []
    return output.params(names)


@dataclass
class OffClient:
    """Endpoints shared by every API version.

    One client should be used per application; it owns a pooled HTTP
    session. Every method performs one blocking GET and returns the
    ``httpx.Response`` as received, including 4xx and 5xx statuses.
    """

    locale: Locale
    http_client: HttpClient
    api_domain: str = DEFAULT_API_DOMAIN

    version: ClassVar[ApiVersion] = ApiVersion.V0

    def __enter__(self) -> "OffClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.http_client.close()

    # Metadata

    def taxonomy(self, taxonomy: str) -> httpx.Response:
        """Get a taxonomy file, e.g. "additives" or "nova_groups".

        ``GET https://world.{domain}/data/taxonomies/{taxonomy}.json``.
        Taxonomies only exist for the "world" locale.
        """
        url = _join(self._world_url(), f"data/taxonomies/{taxonomy}.json")
        return self._get(url)

    def facet(self, facet: str, output: Output | None = None) -> httpx.Response:
        """Get a facet listing, e.g. "brands" or "additifs" (localized).

        ``GET https://{locale}.{domain}/{facet}.json``. Supports the locale,
        pagination, fields and nocache options.
        """
        url = _join(self._base_url(_locale_of(output)), f"{facet}.json")
        return self._get(url, _output_params(output, _FACET_PARAMS))

    def categories(self, output: Output | None = None) -> httpx.Response:
        """Get all the categories.

        ``GET https://world.{domain}/categories.json``. The listing is only
        served for the "world" locale, so the output locale is ignored.
        """
        url = _join(self._world_url(), "categories.json")
        return self._get(url)

    def nutrients(self, output: Output | None = None) -> httpx.Response:
        """Get the nutrients by country.

        ``GET https://{locale}.{domain}/cgi/nutrients.pl``. Supports only the
        locale option.
        """
        url = _join(self._cgi_url(_locale_of(output)), "nutrients.pl")
        return self._get(url)

    def products_by(
        self, what: str, value_id: str, output: Output | None = None
    ) -> httpx.Response:
        """Get the products of a facet value or category.

        ``what`` is the singular facet name or "category", in English or
        localized (e.g. "additive"/"additif"). ``value_id`` is an id returned
        by ``facet()`` or ``categories()``.

        ``GET https://{locale}.{domain}/{what}/{value_id}.json``.
        """
        url = _join(self._base_url(_locale_of(output)), f"{what}/{value_id}.json")
        return self._get(url, _output_params(output, _LISTING_PARAMS))

    # Read

    def product(self, barcode: str, output: Output | None = None) -> httpx.Response:
        """Get a product by barcode.

        ``GET https://{locale}.{domain}/api/{version}/product/{barcode}``.
        Supports the locale and fields options.
        """
        url = _join(self._api_url(_locale_of(output)), f"product/{barcode}")
        return self._get(url, _output_params(output, _PRODUCT_PARAMS))

    def _run_search(
        self, url: httpx.URL, search: SearchParams, output: Output | None
    ) -> httpx.Response:
        params = search.params()
        params.extend(_output_params(output, _SEARCH_PARAMS))
        return self._get(url, params)

    # URLs

    def _base_url(self, locale: Locale | None = None) -> httpx.URL:
        """Return the base URL for ``locale``, or the client's default."""
        resolved = locale if locale is not None else self.locale
        try:
            return httpx.URL(f"https://{resolved}.{self.api_domain}/")
        except httpx.InvalidURL as exc:
            raise UrlParseError(f"Invalid locale {resolved!s}: {exc}") from exc

    def _world_url(self) -> httpx.URL:
        return self._base_url(Locale())

    def _cgi_url(self, locale: Locale | None = None) -> httpx.URL:
        return _join(self._base_url(locale), "cgi/")

    def _api_url(self, locale: Locale | None = None) -> httpx.URL:
        return _join(self._base_url(locale), f"api/{self.version}/")

    def _get(self, url: httpx.URL, params: Params | None = None) -> httpx.Response:
        response = self.http_client.get(url, params or None)
        if response.is_error:
            _logger.info("GET %s returned %s", url, response.status_code)
        return response


@dataclass
class OffClientV0(OffClient):
    """Client for API v0 with the legacy ``cgi/search.pl`` search."""

    version: ClassVar[ApiVersion] = ApiVersion.V0

    def search_builder(self) -> SearchBuilderV0:
        return SearchBuilderV0()

    def search(
        self, search: SearchBuilderV0, output: Output | None = None
    ) -> httpx.Response:
        """Search products.

        ``GET https://{locale}.{domain}/cgi/search.pl``. Supports the locale,
        pagination and fields options.
        """
        return self._run_search(self._search_url(_locale_of(output)), search, output)

    def _search_url(self, locale: Locale | None) -> httpx.URL:
        return _join(self._cgi_url(locale), "search.pl")


@dataclass
class OffClientV2(OffClient):
    """Client for API v2 with the REST ``api/v2/search`` search."""

    version: ClassVar[ApiVersion] = ApiVersion.V2

    def search_builder(self) -> SearchBuilderV2:
        return SearchBuilderV2()

    def search(
        self, search: SearchBuilderV2, output: Output | None = None
    ) -> httpx.Response:
        """Search products.

        ``GET https://{locale}.{domain}/api/v2/search``. Supports the locale,
        pagination and fields options.
        """
        return self._run_search(self._search_url(_locale_of(output)), search, output)

    def search_by_barcode(
        self, barcodes: str, output: Output | None = None
    ) -> httpx.Response:
        """Search products by comma-separated barcodes.

        ``GET https://{locale}.{domain}/api/v2/search?code={barcodes}``.
        Supports the locale and fields options.
        """
        url = self._search_url(_locale_of(output))
        params: Params = [("code", barcodes)]
        params.extend(_output_params(output, _PRODUCT_PARAMS))
        return self._get(url, params)

    def _search_url(self, locale: Locale | None) -> httpx.URL:
        return _join(self._api_url(locale), "search")
