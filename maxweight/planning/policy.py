# -*- coding: utf-8 -*-
"""
Policy (configuration knobs) for a max-weight search run.

Solver choice:
  - method: "dynamic" | "exhaustive"
      * "dynamic"    pseudo-polynomial DP; the budget is rounded to whole calories
      * "exhaustive" enumerates every subset; exact on real-valued calories

Catalog filter (applied before the solver):
  - min_weight / max_weight: inclusive weight range
  - max_count: keep only the first N matching items (None = no cap)

Exhaustive guard:
  - exhaustive_limit: catalogs with this many items or more are rejected
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Optional

from maxweight.business_objects.errors import StateValidationError

METHODS = ("dynamic", "exhaustive")


@dataclass(frozen=True)
class Policy:
    """
    Search knobs (pure data holder).

    Attributes
    ----------
    calorie_budget : float
        Maximum total calories of the selected foods.
    method : str
        Solver to run: "dynamic" | "exhaustive".
    min_weight : float
        Lower inclusive bound on item weight for the pre-filter.
    max_weight : float
        Upper inclusive bound on item weight for the pre-filter.
    max_count : int | None
        Cap on the number of items passed to the solver.
    exhaustive_limit : int
        Exclusive upper bound on catalog size for the exhaustive solver.
    """
    calorie_budget: float = 2000.0
    method: str = "dynamic"

    # Pre-filter
    min_weight: float = 0.0
    max_weight: float = math.inf
    max_count: Optional[int] = None

    # Exhaustive guard
    exhaustive_limit: int = 64

    def __post_init__(self) -> None:  # type: ignore[override]
        if self.method not in METHODS:
            raise StateValidationError(
                f"Policy.method must be one of {METHODS}, got {self.method!r}."
            )
        if not self.calorie_budget >= 0:
            raise StateValidationError("Policy.calorie_budget must be >= 0.")
        if self.min_weight > self.max_weight:
            raise StateValidationError("Policy.min_weight must be <= max_weight.")
        if self.max_count is not None and self.max_count < 0:
            raise StateValidationError("Policy.max_count must be >= 0.")
        if self.exhaustive_limit < 1:
            raise StateValidationError("Policy.exhaustive_limit must be >= 1.")
