"""Candidate filtering ahead of optimization."""

from __future__ import annotations

from maxprotein.optimizer.models import FoodVector


def filter_food_vector(
    source: FoodVector,
    min_kcal: int,
    max_kcal: int,
    total_size: int,
) -> FoodVector:
    """Select the foods eligible for optimization.

    Foods with zero calories are always dropped. Every other food must have
    between min_kcal and max_kcal kilocalories, inclusive. Only the first
    total_size matches are returned, in source order, which bounds the input
    to exhaustive_max_protein.

    Args:
        source: Foods to filter (not modified)
        min_kcal: Minimum kilocalories per food
        max_kcal: Maximum kilocalories per food
        total_size: Maximum number of foods to return

    Returns:
        New list referencing the matching foods.
    """
    filtered: FoodVector = []
    for food in source:
        if len(filtered) >= total_size:
            break
        if food.kcal != 0 and min_kcal <= food.kcal <= max_kcal:
            filtered.append(food)
    return filtered
