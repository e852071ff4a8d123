"""Exhaustive protein maximization by subset enumeration."""

from __future__ import annotations

import logging

from maxprotein.optimizer.models import CandidateLimitError, FoodVector

logger = logging.getLogger(__name__)

# Subsets are encoded as 64-bit masks
MAX_EXHAUSTIVE_SIZE = 64


def subset_for_mask(foods: FoodVector, bits: int) -> FoodVector:
    """Return the foods whose index bit is set in bits, in candidate order."""
    return [food for j, food in enumerate(foods) if (bits >> j) & 1]


def exhaustive_max_protein(foods: FoodVector, total_kcal: int) -> FoodVector:
    """Find the subset of foods with the most protein within a calorie budget.

    Every subset is enumerated as a bitmask from 0 to 2**n - 1, where bit j
    selects foods[j]. Runtime is O(2**n * n), so callers must bound the input
    (see filter_food_vector).

    A subset replaces the current best when it fits the budget and either the
    best protein so far is zero or its protein is strictly greater. Among
    zero-protein subsets this means the last one enumerated wins.

    Args:
        foods: Candidate foods; fewer than MAX_EXHAUSTIVE_SIZE
        total_kcal: Calorie budget

    Returns:
        The best subset, in candidate order. The empty subset always fits,
        so the result is empty when nothing else does.

    Raises:
        CandidateLimitError: If there are MAX_EXHAUSTIVE_SIZE or more foods.
    """
    n = len(foods)
    if n >= MAX_EXHAUSTIVE_SIZE:
        raise CandidateLimitError(n, MAX_EXHAUSTIVE_SIZE)

    logger.debug("Enumerating %d subsets of %d foods", 1 << n, n)

    best: FoodVector = []
    best_protein_g = 0

    for bits in range(1 << n):
        subset_kcal = 0
        subset_protein_g = 0
        for j in range(n):
            if (bits >> j) & 1:
                subset_kcal += foods[j].kcal
                subset_protein_g += foods[j].protein_g

        if subset_kcal <= total_kcal:
            if best_protein_g == 0 or subset_protein_g > best_protein_g:
                best = subset_for_mask(foods, bits)
                best_protein_g = subset_protein_g

    return best
