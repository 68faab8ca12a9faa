# -*- coding: utf-8 -*-
"""
Dynamic-programming max-weight solver (0/1 knapsack).

Capacity dimension = calories, value being maximized = weight.

Numeric treatment:
  - the calorie budget is rounded half-up to a whole number of calories
  - a food fits at level w only if its real calories are <= w; it then uses
    up ceil(calories) whole calories of the table
  so results may differ from the exhaustive solver when calories are fractional,
  but real calories of a result never exceed the rounded budget.

Table layout (allocated per call, discarded on return):
  best[i][w]   : best weight using the first i foods within w calories
  chosen[i][w] : catalog index of the food that improved cell (i, w), else None
"""

from __future__ import annotations
import logging
import math
from typing import List, Optional, Sequence

from maxweight.business_objects.items import FoodItem

logger = logging.getLogger(__name__)


def round_budget(total_calories: float) -> int:
    """Round a real calorie budget half-up to whole calories."""
    return int(math.floor(total_calories + 0.5))


def table_cost(food: FoodItem) -> int:
    """Whole calories a food occupies in the DP table."""
    return math.ceil(food.calories)


def _capacity(foods: Sequence[FoodItem], total_calories: float) -> int:
    # Levels above the cost of the whole catalog add nothing; clamping also
    # keeps an infinite budget usable as a table dimension.
    ceiling = sum(table_cost(food) for food in foods)
    if total_calories >= ceiling:
        return ceiling
    return round_budget(total_calories)


def _fill_table(
    foods: Sequence[FoodItem],
    capacity: int,
) -> List[List[Optional[int]]]:
    n = len(foods)
    best: List[List[float]] = [[0.0] * (capacity + 1) for _ in range(n + 1)]
    chosen: List[List[Optional[int]]] = [[None] * (capacity + 1) for _ in range(n + 1)]

    for i in range(1, n + 1):
        food = foods[i - 1]
        cost = table_cost(food)
        prev_row = best[i - 1]
        row = best[i]
        for w in range(capacity, -1, -1):
            if food.calories > w:
                row[w] = prev_row[w]
                continue
            weight_if_taken = prev_row[w - cost] + food.weight
            # Strict: on ties the earlier foods keep the cell.
            if weight_if_taken > prev_row[w]:
                row[w] = weight_if_taken
                chosen[i][w] = i - 1
            else:
                row[w] = prev_row[w]

    logger.debug(
        "DP table filled: %d foods x %d calorie levels, best weight %.4f",
        n, capacity + 1, best[n][capacity],
    )
    return chosen


def _reconstruct(
    foods: Sequence[FoodItem],
    chosen: List[List[Optional[int]]],
    capacity: int,
) -> List[FoodItem]:
    picked: List[int] = []
    level = capacity
    for i in range(len(foods), 0, -1):
        idx = chosen[i][level]
        if idx is None:
            continue
        picked.append(idx)
        level -= table_cost(foods[idx])

    # The backward walk finds later foods first; restore catalog order.
    picked.reverse()
    return [foods[idx] for idx in picked]


def dynamic_max_weight(
    foods: Sequence[FoodItem],
    total_calories: float,
) -> List[FoodItem]:
    """
    Choose the foods maximizing total weight within `total_calories`.

    Parameters
    ----------
    foods : Sequence[FoodItem]
        Catalog; its order decides ties (earlier foods win).
    total_calories : float
        Calorie budget; rounded half-up before use. May be `math.inf`.

    Returns
    -------
    list[FoodItem]
        A fresh list, in catalog order, whose real calories do not exceed the
        rounded budget. Empty when nothing fits, when the catalog is empty,
        or when the budget is negative or NaN.
    """
    if not foods or math.isnan(total_calories):
        return []
    capacity = _capacity(foods, total_calories)
    if capacity < 0:
        return []

    chosen = _fill_table(foods, capacity)
    return _reconstruct(foods, chosen, capacity)
