# -*- coding: utf-8 -*-
"""
Result models for max-weight searches.

Solvers return plain lists of FoodItem; `Selection` wraps one with its totals
for the orchestrator and reporting layers.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence, Tuple

from maxweight.business_objects.items import FoodItem


def sum_food_vector(foods: Sequence[FoodItem]) -> Tuple[float, float]:
    """Return (total_calories, total_weight) of the given foods."""
    total_calories = 0.0
    total_weight = 0.0
    for food in foods:
        total_calories += food.calories
        total_weight += food.weight
    return total_calories, total_weight


@dataclass(frozen=True)
class Selection:
    """
    Foods chosen by a solver, plus aggregates.

    Attributes
    ----------
    items : tuple[FoodItem, ...]
        Chosen foods in catalog order.
    total_calories : float
        Sum of calories over `items`.
    total_weight : float
        Sum of weights over `items`.
    method : str
        Solver that produced the selection ("dynamic" | "exhaustive").
    calorie_budget : float
        Budget the solver was given.
    """
    items: Tuple[FoodItem, ...]
    total_calories: float
    total_weight: float
    method: str
    calorie_budget: float

    @classmethod
    def from_items(
        cls,
        items: Sequence[FoodItem],
        *,
        method: str,
        calorie_budget: float,
    ) -> "Selection":
        total_calories, total_weight = sum_food_vector(items)
        return cls(
            items=tuple(items),
            total_calories=total_calories,
            total_weight=total_weight,
            method=method,
            calorie_budget=calorie_budget,
        )

    def names(self) -> Tuple[str, ...]:
        return tuple(it.name for it in self.items)
