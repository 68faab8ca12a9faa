# -*- coding: utf-8 -*-
"""
Search Orchestrator: Filter -> Solve

Thin wrapper that connects Policy -> filter -> solver and wraps the chosen
foods into a Selection.

- Narrows the catalog with filter_food_vector (Policy.min_weight/max_weight/max_count)
- Dispatches to the DP or exhaustive solver according to Policy.method
- Returns a Selection with totals; no I/O
"""

from __future__ import annotations
import logging
from typing import Callable, Dict, List, Sequence

from maxweight.business_objects.items import FoodItem
from maxweight.planning.filtering import filter_food_vector
from maxweight.planning.policy import Policy
from maxweight.planning.solution import Selection
from maxweight.planning.solvers.dynamic import dynamic_max_weight
from maxweight.planning.solvers.exhaustive import exhaustive_max_weight

logger = logging.getLogger(__name__)

SolverFn = Callable[[Sequence[FoodItem], Policy], List[FoodItem]]


def _solve_dynamic(foods: Sequence[FoodItem], policy: Policy) -> List[FoodItem]:
    return dynamic_max_weight(foods, policy.calorie_budget)


def _solve_exhaustive(foods: Sequence[FoodItem], policy: Policy) -> List[FoodItem]:
    return exhaustive_max_weight(
        foods,
        policy.calorie_budget,
        max_items=policy.exhaustive_limit,
    )


_SOLVERS: Dict[str, SolverFn] = {
    "dynamic": _solve_dynamic,
    "exhaustive": _solve_exhaustive,
}


def run_search(foods: Sequence[FoodItem], policy: Policy) -> Selection:
    """
    Filter the catalog and run the configured solver.

    Parameters
    ----------
    foods : Sequence[FoodItem]
        Full catalog, in load order.
    policy : Policy
        Budget, solver method and pre-filter knobs.

    Returns
    -------
    Selection
        Chosen foods (catalog order) with calorie/weight totals.

    Raises
    ------
    SearchSpaceError
        If the exhaustive solver receives a sub-catalog at or above
        policy.exhaustive_limit.
    """
    total_size = len(foods) if policy.max_count is None else policy.max_count
    candidates = filter_food_vector(
        foods,
        min_weight=policy.min_weight,
        max_weight=policy.max_weight,
        total_size=total_size,
    )
    logger.debug("Filter kept %d of %d foods", len(candidates), len(foods))

    chosen = _SOLVERS[policy.method](candidates, policy)
    selection = Selection.from_items(
        chosen,
        method=policy.method,
        calorie_budget=policy.calorie_budget,
    )
    logger.info(
        "%s search picked %d foods: %.2f calories, %.2f ounces (budget %.2f)",
        policy.method,
        len(selection.items),
        selection.total_calories,
        selection.total_weight,
        policy.calorie_budget,
    )
    return selection
