"""Tests for the exhaustive solver."""
import pytest

from maxweight.business_objects.errors import SearchSpaceError
from maxweight.business_objects.items import FoodItem
from maxweight.planning.solution import sum_food_vector
from maxweight.planning.solvers.exhaustive import (
    EXHAUSTIVE_ITEM_LIMIT,
    exhaustive_max_weight,
)


def test_picnic_scenario(picnic):
    result = exhaustive_max_weight(picnic, 250.0)
    assert [f.name for f in result] == ["bread", "wine"]
    assert sum_food_vector(result) == (250.0, 9.0)


def test_picnic_below_pair_budget(picnic):
    # bread + wine no longer fits; wine + cheese (210 cal, 8 oz) wins.
    result = exhaustive_max_weight(picnic, 249.0)
    assert [f.name for f in result] == ["wine", "cheese"]


def test_empty_catalog():
    assert exhaustive_max_weight([], 100.0) == []


def test_zero_budget(picnic):
    assert exhaustive_max_weight(picnic, 0.0) == []


def test_single_item_over_budget(foods_from):
    assert exhaustive_max_weight(foods_from([("roast", 450, 12.0)]), 449.99) == []


def test_uses_real_valued_calories(foods_from):
    # The DP solver would round 99.6 up to 100; exhaustive compares exactly.
    foods = foods_from([("bread", 99.7, 4.0)])
    assert exhaustive_max_weight(foods, 99.6) == []
    assert exhaustive_max_weight(foods, 99.7) == foods


def test_ties_keep_lowest_bit_pattern(foods_from):
    # {a} is mask 0b01, {b} is 0b10: a is enumerated first.
    foods = foods_from([("a", 10, 3.0), ("b", 10, 3.0)])
    assert [f.name for f in exhaustive_max_weight(foods, 10.0)] == ["a"]


def test_tie_between_pair_and_single(foods_from):
    # {a, b} = mask 0b011 (3) and {c} = mask 0b100 (4) both weigh 6.
    foods = foods_from([("a", 5, 3.0), ("b", 5, 3.0), ("c", 10, 6.0)])
    assert [f.name for f in exhaustive_max_weight(foods, 10.0)] == ["a", "b"]


def test_result_in_catalog_order(pantry):
    result = exhaustive_max_weight(pantry, 450.0)
    assert [f.name for f in result] == ["rice", "beans", "nuts", "melon"]


def test_negative_weights_never_chosen(foods_from):
    foods = foods_from([("ghost", 1, -3.0)])
    assert exhaustive_max_weight(foods, 100.0) == []


def test_idempotent(pantry):
    assert exhaustive_max_weight(pantry, 500.0) == exhaustive_max_weight(pantry, 500.0)


def test_rejects_oversized_catalog():
    foods = [FoodItem(name=f"f{i}", calories=1.0, weight=1.0) for i in range(EXHAUSTIVE_ITEM_LIMIT)]
    with pytest.raises(SearchSpaceError):
        exhaustive_max_weight(foods, 10.0)


def test_custom_item_limit(pantry):
    with pytest.raises(SearchSpaceError, match="fewer than 7"):
        exhaustive_max_weight(pantry, 10.0, max_items=7)
    assert exhaustive_max_weight(pantry[:6], 40.0, max_items=7) == [pantry[5]]
