#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Load a food database, pick the foods with the greatest total weight within a
calorie budget, and print the result.

This version does NOT use argparse.
Just set the variables at the top of the file and run:

    python scripts/run_max_weight.py
"""

from __future__ import annotations
import logging
import math
from typing import List

# ====== CONFIGURATION ======
FOODS_PATH = "data/food.csv"

# Calorie budget for the whole selection
CALORIE_BUDGET = 2000.0

# Solver: "dynamic" (fast, whole calories) or "exhaustive" (exact, < 64 foods)
METHOD = "dynamic"

# Pre-filter: keep the first MAX_COUNT foods with MIN_WEIGHT <= weight <= MAX_WEIGHT
MIN_WEIGHT = 0.0
MAX_WEIGHT = math.inf
MAX_COUNT = None     # e.g. 20 when METHOD = "exhaustive"

LOG_LEVEL = logging.INFO
# ===========================

# Project imports
from maxweight.business_objects.items import FoodItem
from maxweight.planning import Policy, Selection
from maxweight.planning.search_orchestrator import run_search
from maxweight.reporting.summary import print_food_vector
from maxweight.utils.read_foods import load_food_database


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    # Load catalog
    foods: List[FoodItem] = load_food_database(FOODS_PATH)

    # Policy (budget + solver + pre-filter)
    policy = Policy(
        calorie_budget=CALORIE_BUDGET,
        method=METHOD,
        min_weight=MIN_WEIGHT,
        max_weight=MAX_WEIGHT,
        max_count=MAX_COUNT,
    )

    selection: Selection = run_search(foods, policy)

    print(f"\n=== Max-weight selection ({selection.method}, budget {CALORIE_BUDGET:g}) ===")
    print_food_vector(selection.items)


if __name__ == "__main__":
    main()
