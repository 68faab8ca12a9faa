# -*- coding: utf-8 -*-
"""
maxweight: choose the foods with the greatest total weight within a calorie
budget, by dynamic programming or exhaustive search.
"""

__version__ = "0.1.0"
