# -*- coding: utf-8 -*-
"""
reporting/summary.py

Human-readable rendering of a food list (a catalog, a filtered sub-catalog or
a solver result).

Public API:
  - format_food_vector(foods) -> str
  - print_food_vector(foods) -> None
"""

from __future__ import annotations
from typing import List, Sequence

from maxweight.business_objects.items import FoodItem
from maxweight.planning.solution import sum_food_vector

HEADER = "*** food Vector ***"
EMPTY = "[empty food list]"


def _fmt_number(x: float) -> str:
    # 150.0 -> "150", 2.5 -> "2.5"
    return f"{x:g}"


def format_food_vector(foods: Sequence[FoodItem]) -> str:
    """
    One line per food followed by the grand totals, e.g.

        *** food Vector ***
        Ye olde bread ==> calories = 100; weight of 4 ounces
        > Grand total calories: 100
        > Grand total weight: 4 ounces
    """
    lines: List[str] = [HEADER]
    if not foods:
        lines.append(EMPTY)
        return "\n".join(lines)

    for food in foods:
        lines.append(
            f"Ye olde {food.name} ==> "
            f"calories = {_fmt_number(food.calories)}; "
            f"weight of {_fmt_number(food.weight)} ounces"
        )

    total_calories, total_weight = sum_food_vector(foods)
    lines.append(f"> Grand total calories: {_fmt_number(total_calories)}")
    lines.append(f"> Grand total weight: {_fmt_number(total_weight)} ounces")
    return "\n".join(lines)


def print_food_vector(foods: Sequence[FoodItem]) -> None:
    print(format_food_vector(foods))
