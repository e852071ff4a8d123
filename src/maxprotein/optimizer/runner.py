"""Timed selection runs, comparisons and benchmarks."""

from __future__ import annotations

import logging
import time
from typing import Callable, Iterable, Optional

from maxprotein.optimizer.exhaustive import exhaustive_max_protein
from maxprotein.optimizer.filter import filter_food_vector
from maxprotein.optimizer.greedy import greedy_max_protein
from maxprotein.optimizer.models import (
    ComparisonResult,
    FoodVector,
    SelectionAlgorithm,
    SelectionResult,
    sum_food_vector,
)

logger = logging.getLogger(__name__)

SELECTORS: dict[SelectionAlgorithm, Callable[[FoodVector, int], FoodVector]] = {
    SelectionAlgorithm.GREEDY: greedy_max_protein,
    SelectionAlgorithm.EXHAUSTIVE: exhaustive_max_protein,
}


def run_selection(
    foods: FoodVector,
    algorithm: SelectionAlgorithm,
    total_kcal: int,
) -> SelectionResult:
    """Run one selector over the candidates and time it.

    Args:
        foods: Candidate foods (already filtered)
        algorithm: Which selector to run
        total_kcal: Calorie budget

    Returns:
        SelectionResult with the chosen foods and their totals.
    """
    selector = SELECTORS[algorithm]

    start_time = time.time()
    selected = selector(foods, total_kcal)
    elapsed = time.time() - start_time

    kcal, protein_g = sum_food_vector(selected)
    logger.info(
        "%s: n=%d selected=%d kcal=%d protein=%d g in %.4fs",
        algorithm.value,
        len(foods),
        len(selected),
        kcal,
        protein_g,
        elapsed,
    )

    return SelectionResult(
        algorithm=algorithm,
        candidate_count=len(foods),
        total_kcal_budget=total_kcal,
        foods=selected,
        total_kcal=kcal,
        total_protein_g=protein_g,
        elapsed_seconds=elapsed,
    )


def compare_algorithms(foods: FoodVector, total_kcal: int) -> ComparisonResult:
    """Run greedy and exhaustive selection over the same candidates."""
    return ComparisonResult(
        greedy=run_selection(foods, SelectionAlgorithm.GREEDY, total_kcal),
        exhaustive=run_selection(foods, SelectionAlgorithm.EXHAUSTIVE, total_kcal),
    )


def benchmark(
    source: FoodVector,
    sizes: Iterable[int],
    algorithm: SelectionAlgorithm,
    min_kcal: int,
    max_kcal: int,
    total_kcal: int,
    progress_callback: Optional[Callable[[SelectionResult], None]] = None,
) -> list[SelectionResult]:
    """Time one algorithm over growing candidate sets.

    For each size n the source is filtered down to at most n foods, then the
    selector is run on that candidate set.

    Args:
        source: Full dataset
        sizes: Candidate counts to try, in order
        algorithm: Which selector to time
        min_kcal: Minimum kilocalories per food
        max_kcal: Maximum kilocalories per food
        total_kcal: Calorie budget
        progress_callback: Called with each result as it completes

    Returns:
        One SelectionResult per size.
    """
    results = []
    for n in sizes:
        foods = filter_food_vector(source, min_kcal, max_kcal, n)
        result = run_selection(foods, algorithm, total_kcal)
        results.append(result)
        if progress_callback:
            progress_callback(result)
    return results
