"""Tests for search parameter serialization."""

import re

import pytest

from openfoodfacts_client.domain.search import SearchBuilderV0, SearchBuilderV2
from openfoodfacts_client.domain.types import SortBy


def test_v0_full_search() -> None:
    search = (
        SearchBuilderV0()
        .criteria("brands", "contains", "Nestlé")
        .criteria("categories", "does_not_contain", "cheese")
        .ingredient("additives", "without")
        .ingredient("ingredients_that_may_be_from_palm_oil", "indifferent")
        .nutrient("fiber", "lt", 500)
        .nutrient("salt", "gt", 100)
    )

    assert search.params() == [
        ("tagtype_1", "brands"),
        ("tag_contains_1", "contains"),
        ("tag_1", "Nestlé"),
        ("tagtype_2", "categories"),
        ("tag_contains_2", "does_not_contain"),
        ("tag_2", "cheese"),
        ("additives", "without_additives"),
        ("ingredients_that_may_be_from_palm_oil", "indifferent"),
        ("nutriment_1", "fiber"),
        ("nutriment_compare_1", "lt"),
        ("nutriment_value_1", "500"),
        ("nutriment_2", "salt"),
        ("nutriment_compare_2", "gt"),
        ("nutriment_value_2", "100"),
        ("action", "process"),
        ("json", "true"),
    ]


def test_v0_counters_are_independent_and_contiguous() -> None:
    search = (
        SearchBuilderV0()
        .nutrient("energy", "lte", 200)
        .criteria("labels", "contains", "organic")
        .nutrient("sugars", "lt", 5)
        .criteria("countries", "contains", "france")
        .criteria("brands", "contains", "bonne-maman")
    )

    keys = [key for key, _ in search.params()]
    indexed = [key for key in keys if re.search(r"_\d+$", key)]

    assert len(indexed) == 3 * 5
    assert keys[-2:] == ["action", "json"]
    assert len(keys) == len(indexed) + 2
    for index in (1, 2, 3):
        assert {f"tagtype_{index}", f"tag_contains_{index}", f"tag_{index}"} <= set(keys)
    for index in (1, 2):
        assert {
            f"nutriment_{index}",
            f"nutriment_compare_{index}",
            f"nutriment_value_{index}",
        } <= set(keys)
    assert "tag_4" not in keys
    assert "nutriment_3" not in keys


def test_v0_product_name_sort_and_trailer() -> None:
    search = (
        SearchBuilderV0()
        .product_name("nutella")
        .product_name("")
        .sort_by(SortBy.POPULARITY)
    )

    assert search.params() == [
        ("product_name", "nutella"),
        ("sort_by", "unique_scans_n"),
        ("action", "process"),
        ("json", "true"),
    ]


def test_v0_empty_search_only_has_trailer() -> None:
    assert SearchBuilderV0().params() == [("action", "process"), ("json", "true")]


@pytest.mark.parametrize("value", [-1, 1.5, True])
def test_nutrient_value_must_be_unsigned_integer(value: object) -> None:
    with pytest.raises(ValueError):
        SearchBuilderV0().nutrient("fiber", "lt", value)  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        SearchBuilderV2().nutrient("fiber", "100g", "<", value)  # type: ignore[arg-type]


def test_v2_criteria_with_and_without_language() -> None:
    search = (
        SearchBuilderV2()
        .criteria("categories", "cereals")
        .criteria("labels", "bio", "fr")
    )

    assert search.params() == [
        ("categories_tags", "cereals"),
        ("labels_tags_fr", "bio"),
    ]


def test_v2_nutrient_comparison_folds_into_key() -> None:
    search = (
        SearchBuilderV2()
        .nutrient("salt", "100g", "<", 2)
        .nutrient("energy-kcal", "serving", ">=", 150)
        .nutrient("sugars", "100g", "=", 0)
    )

    assert search.params() == [
        ("salt_100g<2", ""),
        ("energy-kcal_serving>=150", ""),
        ("sugars_100g", "0"),
    ]


def test_v2_sort_without_trailer() -> None:
    search = SearchBuilderV2().criteria("brands", "ferrero").sort_by(SortBy.ECOSCORE)

    assert search.params() == [
        ("brands_tags", "ferrero"),
        ("sort_by", "ecoscore_score"),
    ]
