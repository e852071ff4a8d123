"""Protein maximization within a calorie budget."""

from maxprotein.optimizer.exhaustive import MAX_EXHAUSTIVE_SIZE, exhaustive_max_protein
from maxprotein.optimizer.filter import filter_food_vector
from maxprotein.optimizer.greedy import greedy_max_protein
from maxprotein.optimizer.models import (
    CandidateLimitError,
    ComparisonResult,
    Food,
    FoodVector,
    SelectionAlgorithm,
    SelectionResult,
    sum_food_vector,
)
from maxprotein.optimizer.runner import benchmark, compare_algorithms, run_selection

__all__ = [
    "Food",
    "FoodVector",
    "SelectionAlgorithm",
    "SelectionResult",
    "ComparisonResult",
    "CandidateLimitError",
    "MAX_EXHAUSTIVE_SIZE",
    "sum_food_vector",
    "filter_food_vector",
    "greedy_max_protein",
    "exhaustive_max_protein",
    "run_selection",
    "compare_algorithms",
    "benchmark",
]
