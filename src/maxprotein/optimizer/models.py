"""Data models for food records and selection results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class Food:
    """One food item in the USDA database.

    Values are per sample of 100 g. Instances are shared by reference between
    the loaded dataset, filtered candidate sets and selection results.
    """

    description: str  # e.g. "all-purpose wheat flour"
    amount: str  # common serving, e.g. "1 cup"
    amount_g: int  # grams in one common serving
    kcal: int
    protein_g: int

    def __post_init__(self) -> None:
        if not self.description:
            raise InvalidFoodError("description must be non-empty")
        if not self.amount:
            raise InvalidFoodError("amount must be non-empty")
        for name in ("amount_g", "kcal", "protein_g"):
            if getattr(self, name) < 0:
                raise InvalidFoodError(
                    f"{name} must be non-negative, got {getattr(self, name)}"
                )


# Ordered sequence of shared Food references.
FoodVector = list[Food]


def sum_food_vector(foods: FoodVector) -> tuple[int, int]:
    """Return (total_kcal, total_protein_g) for a sequence of foods."""
    total_kcal = 0
    total_protein_g = 0
    for food in foods:
        total_kcal += food.kcal
        total_protein_g += food.protein_g
    return total_kcal, total_protein_g


class SelectionAlgorithm(Enum):
    """Available selection strategies."""

    GREEDY = "greedy"
    EXHAUSTIVE = "exhaustive"


@dataclass
class SelectionResult:
    """Output of a single timed selection run."""

    algorithm: SelectionAlgorithm
    candidate_count: int
    total_kcal_budget: int
    foods: FoodVector = field(default_factory=list)
    total_kcal: int = 0
    total_protein_g: int = 0
    elapsed_seconds: float = 0.0

    @property
    def kcal_remaining(self) -> int:
        return self.total_kcal_budget - self.total_kcal


@dataclass
class ComparisonResult:
    """Greedy and exhaustive runs over the same candidates."""

    greedy: SelectionResult
    exhaustive: SelectionResult

    @property
    def protein_gap(self) -> int:
        """Protein the greedy heuristic left on the table (never negative)."""
        return self.exhaustive.total_protein_g - self.greedy.total_protein_g

    @property
    def speedup(self) -> Optional[float]:
        if self.greedy.elapsed_seconds <= 0:
            return None
        return self.exhaustive.elapsed_seconds / self.greedy.elapsed_seconds


# Custom exceptions


class MaxProteinError(Exception):
    """Base exception for maxprotein errors."""

    pass


class InvalidFoodError(MaxProteinError, ValueError):
    """Raised when a food record violates its invariants."""

    pass


class CandidateLimitError(MaxProteinError):
    """Raised when exhaustive search is given too many candidates."""

    def __init__(self, size: int, limit: int):
        super().__init__(
            f"Exhaustive search needs fewer than {limit} candidates, got {size}. "
            f"Reduce the candidate count before searching."
        )
        self.size = size
        self.limit = limit


class DatasetError(MaxProteinError):
    """Base exception for dataset loading failures."""

    pass


class DatasetNotFoundError(DatasetError):
    """Raised when the dataset file cannot be opened."""

    pass


class MalformedDatasetError(DatasetError):
    """Raised when a dataset line has the wrong structure."""

    def __init__(self, message: str, line_number: int, field_count: int):
        super().__init__(message)
        self.line_number = line_number
        self.field_count = field_count
