"""Greedy protein maximization."""

from __future__ import annotations

from maxprotein.optimizer.models import FoodVector


def greedy_max_protein(foods: FoodVector, total_kcal: int) -> FoodVector:
    """Choose foods with the greedy heuristic.

    Repeatedly take the remaining food with the most protein and keep it if it
    still fits in the calorie budget. A food that does not fit is discarded
    and never reconsidered, so the loop runs exactly len(foods) times. The
    result is not guaranteed to be optimal.

    Args:
        foods: Candidate foods, in tie-breaking order
        total_kcal: Calorie budget

    Returns:
        Selected foods in the order they were chosen.
    """
    todo = list(foods)
    result: FoodVector = []
    consumed_kcal = 0

    while todo:
        # First occurrence wins on ties
        best_index = 0
        for i in range(1, len(todo)):
            if todo[i].protein_g > todo[best_index].protein_g:
                best_index = i

        best = todo.pop(best_index)
        if consumed_kcal + best.kcal <= total_kcal:
            result.append(best)
            consumed_kcal += best.kcal

    return result
