"""Search parameters and their query-string serializers.

Two API generations expose incompatible search endpoints:

* ``cgi/search.pl`` (v0) takes indexed triplets such as ``tagtype_1``,
  ``tag_contains_1`` and ``tag_1``, followed by ``action=process&json=true``.
* ``api/v2/search`` (v2) takes suffix-tagged names such as
  ``categories_tags_en`` and folds nutrient comparisons into the key.

Each generation has its own builder. They only share the ``SearchParams``
contract: produce an ordered list of (name, value) pairs.
"""

from dataclasses import dataclass, field
from typing import Protocol

from openfoodfacts_client.domain.types import Params, SortBy

ADDITIVES = "additives"
EQUAL = "="


class SearchParams(Protocol):
    """Anything that serializes to search query parameters."""

    def params(self) -> Params:
        """Return the ordered query pairs for this search."""


@dataclass(frozen=True)
class CriteriaParam:
    """Tag filter for the v0 search.

    ``op`` is one of "contains" or "does_not_contain".
    """

    name: str
    op: str
    value: str


@dataclass(frozen=True)
class IngredientParam:
    """Ingredient filter for the v0 search.

    ``value`` is one of "with", "without" or "indifferent".
    """

    name: str
    value: str


@dataclass(frozen=True)
class NutrientParam:
    """Nutrient comparison for the v0 search.

    ``op`` is one of "lt", "lte", "gt", "gte" or "eq".
    """

    name: str
    op: str
    value: int


@dataclass(frozen=True)
class ProductNameParam:
    """Free-text product name for the v0 search."""

    value: str


V0Param = CriteriaParam | IngredientParam | NutrientParam | ProductNameParam


@dataclass(frozen=True)
class CriteriaTagParam:
    """Tag filter for the v2 search, optionally restricted to a language."""

    name: str
    value: str
    lc: str | None = None


@dataclass(frozen=True)
class NutrientConditionParam:
    """Nutrient condition for the v2 search.

    ``unit`` is "100g" or "serving"; ``op`` is one of "<", ">", "<=", ">="
    or "=".
    """

    name: str
    unit: str
    op: str
    value: int


V2Param = CriteriaTagParam | NutrientConditionParam


def _quantity(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"Nutrient value must be a non-negative integer: {value!r}")
    return value


@dataclass
class SearchBuilderV0:
    """Builds the query string of the legacy ``cgi/search.pl`` endpoint.

    Example::

        search = (
            SearchBuilderV0()
            .criteria("categories", "contains", "cereals")
            .ingredient("additives", "without")
            .nutrient("energy", "lt", 500)
        )
    """

    items: list[V0Param] = field(default_factory=list)
    sort: SortBy | None = None

    def criteria(self, name: str, op: str, value: str) -> "SearchBuilderV0":
        self.items.append(CriteriaParam(name=name, op=op, value=value))
        return self

    def ingredient(self, name: str, value: str) -> "SearchBuilderV0":
        """Add an ingredient filter.

        For "additives" the value is rewritten to "{value}_additives", which
        is the form the endpoint expects.
        """
        if name == ADDITIVES:
            value = f"{value}_{ADDITIVES}"
        self.items.append(IngredientParam(name=name, value=value))
        return self

    def nutrient(self, name: str, op: str, value: int) -> "SearchBuilderV0":
        self.items.append(NutrientParam(name=name, op=op, value=_quantity(value)))
        return self

    def product_name(self, value: str | None) -> "SearchBuilderV0":
        if value:
            self.items.append(ProductNameParam(value=value))
        return self

    def sort_by(self, value: SortBy | None) -> "SearchBuilderV0":
        self.sort = value
        return self

    def params(self) -> Params:
        params: Params = []
        criteria_index = 0
        nutrient_index = 0
        for item in self.items:
            if isinstance(item, CriteriaParam):
                criteria_index += 1
                params.extend(
                    [
                        (f"tagtype_{criteria_index}", item.name),
                        (f"tag_contains_{criteria_index}", item.op),
                        (f"tag_{criteria_index}", item.value),
                    ]
                )
            elif isinstance(item, NutrientParam):
                nutrient_index += 1
                params.extend(
                    [
                        (f"nutriment_{nutrient_index}", item.name),
                        (f"nutriment_compare_{nutrient_index}", item.op),
                        (f"nutriment_value_{nutrient_index}", str(item.value)),
                    ]
                )
            elif isinstance(item, IngredientParam):
                params.append((item.name, item.value))
            else:
                params.append(("product_name", item.value))
        if self.sort is not None:
            params.append(("sort_by", self.sort.value))
        params.extend([("action", "process"), ("json", "true")])
        return params


@dataclass
class SearchBuilderV2:
    """Builds the query string of the ``api/v2/search`` endpoint."""

    items: list[V2Param] = field(default_factory=list)
    sort: SortBy | None = None

    def criteria(self, name: str, value: str, lc: str | None = None) -> "SearchBuilderV2":
        """Add a tag filter, e.g. ``criteria("categories", "cereals", "en")``."""
        self.items.append(CriteriaTagParam(name=name, value=value, lc=lc or None))
        return self

    def nutrient(self, name: str, unit: str, op: str, value: int) -> "SearchBuilderV2":
        """Add a nutrient condition, e.g. ``nutrient("salt", "100g", "<", 2)``."""
        self.items.append(
            NutrientConditionParam(name=name, unit=unit, op=op, value=_quantity(value))
        )
        return self

    def sort_by(self, value: SortBy | None) -> "SearchBuilderV2":
        self.sort = value
        return self

    def params(self) -> Params:
        params: Params = []
        for item in self.items:
            if isinstance(item, CriteriaTagParam):
                key = f"{item.name}_tags"
                if item.lc:
                    key = f"{key}_{item.lc}"
                params.append((key, item.value))
            elif item.op == EQUAL:
                params.append((f"{item.name}_{item.unit}", str(item.value)))
            else:
                # Comparisons live in the key: salt_100g<2=
                params.append((f"{item.name}_{item.unit}{item.op}{item.value}", ""))
        if self.sort is not None:
            params.append(("sort_by", self.sort.value))
        return params
