"""Maximize protein within a calorie budget, greedily or by exhaustive search."""

__version__ = "0.1.0"
