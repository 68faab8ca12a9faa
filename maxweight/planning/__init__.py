# -*- coding: utf-8 -*-
"""
Planning layer public API for the max-weight search.

This module exposes the core planning-time data contracts:
  - Policy configuration
  - Selection result model and the sum_food_vector helper

Solvers, the filter and the orchestrator are intentionally not exported here
to avoid cluttering the namespace. They should be imported explicitly when
needed.
"""

from .policy import Policy
from .solution import Selection, sum_food_vector

__all__ = [
    "Policy",
    "Selection",
    "sum_food_vector",
]
