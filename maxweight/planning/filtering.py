# -*- coding: utf-8 -*-
"""
Catalog filter.

Builds a bounded sub-catalog matching a weight range. Mainly used to keep the
exhaustive solver's input small, and to drop foods with zero or negative
weight that cannot help the optimization.
"""

from __future__ import annotations
from typing import List, Sequence

from maxweight.business_objects.items import FoodItem


def filter_food_vector(
    source: Sequence[FoodItem],
    min_weight: float,
    max_weight: float,
    total_size: int,
) -> List[FoodItem]:
    """
    Return the first `total_size` foods of `source` whose weight lies in
    [min_weight, max_weight] (inclusive), in their original order.

    The returned list is new; the items themselves are shared.
    """
    result: List[FoodItem] = []
    if total_size <= 0:
        return result

    for item in source:
        if min_weight <= item.weight <= max_weight:
            result.append(item)
            if len(result) == total_size:
                break
    return result
