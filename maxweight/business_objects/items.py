# -*- coding: utf-8 -*-
"""
Food item model.
"""

from __future__ import annotations
from dataclasses import dataclass
from .errors import StateValidationError


@dataclass(frozen=True)
class FoodItem:
    """
    One food available for purchase.

    Items are shared by reference between a catalog, its filtered
    sub-catalogs and every solver result; they are never copied.

    Attributes
    ----------
    name : str
        Human-readable description, e.g. "spicy chicken breast". Non-empty.
    calories : float
        Calorie cost; strictly positive.
    weight : float
        Food weight in ounces. Expected nonnegative but not enforced.
    """
    name: str
    calories: float
    weight: float

    def __post_init__(self) -> None:  # type: ignore[override]
        if not self.name:
            raise StateValidationError("FoodItem.name must be non-empty.")
        if not self.calories > 0:
            raise StateValidationError(f"FoodItem[{self.name}] calories must be > 0.")
