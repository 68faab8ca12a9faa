# -*- coding: utf-8 -*-
"""
Exhaustive max-weight solver.

Enumerates all 2**n subsets of the catalog: bit j of the counter means food j
is included. Calories are compared as real numbers against the unrounded
budget, so this is the exact reference for the DP solver.

Cost is exponential in the catalog size; callers are expected to shrink the
catalog with `filter_food_vector` first.
"""

from __future__ import annotations
import logging
from typing import List, Sequence

from maxweight.business_objects.errors import SearchSpaceError
from maxweight.business_objects.items import FoodItem

logger = logging.getLogger(__name__)

# Catalogs must be strictly smaller than this.
EXHAUSTIVE_ITEM_LIMIT: int = 64


def exhaustive_max_weight(
    foods: Sequence[FoodItem],
    total_calorie: float,
    *,
    max_items: int = EXHAUSTIVE_ITEM_LIMIT,
) -> List[FoodItem]:
    """
    Return the subset of `foods` with the greatest total weight whose total
    calories do not exceed `total_calorie`.

    Ties keep the earliest-enumerated subset (lowest bit pattern). The result
    lists foods in catalog order.

    Raises
    ------
    SearchSpaceError
        If `len(foods) >= max_items`.
    """
    n = len(foods)
    if n >= max_items:
        raise SearchSpaceError(
            f"Exhaustive search supports fewer than {max_items} foods, got {n}; "
            "filter the catalog first."
        )

    best_subset: List[FoodItem] = []
    best_weight = 0.0

    subset_count = 1 << n
    for mask in range(subset_count):
        current_subset: List[FoodItem] = []
        current_weight = 0.0
        current_calories = 0.0
        for j in range(n):
            if mask & (1 << j):
                food = foods[j]
                current_subset.append(food)
                current_weight += food.weight
                current_calories += food.calories

        if current_calories <= total_calorie and current_weight > best_weight:
            best_weight = current_weight
            best_subset = current_subset

    logger.debug(
        "Enumerated %d subsets of %d foods, best weight %.4f",
        subset_count, n, best_weight,
    )
    return best_subset
