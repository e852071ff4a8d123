"""Tests for greedy and exhaustive selection."""

from __future__ import annotations

import itertools
import random

import pytest

from maxprotein.optimizer.exhaustive import (
    MAX_EXHAUSTIVE_SIZE,
    exhaustive_max_protein,
    subset_for_mask,
)
from maxprotein.optimizer.greedy import greedy_max_protein
from maxprotein.optimizer.models import CandidateLimitError, Food, sum_food_vector


def _random_foods(rng: random.Random, n: int) -> list[Food]:
    return [
        Food(f"Food {i}", "100 g", 100, rng.randint(1, 400), rng.randint(0, 40))
        for i in range(n)
    ]


def _best_protein(foods, budget):
    """Best protein over all subsets, computed with itertools."""
    best = 0
    for size in range(len(foods) + 1):
        for combo in itertools.combinations(foods, size):
            kcal, protein = sum_food_vector(list(combo))
            if kcal <= budget:
                best = max(best, protein)
    return best


class TestGreedyMaxProtein:
    """Tests for greedy_max_protein."""

    def test_scenario(self, scenario_foods):
        """Takes B, rejects C (350 > 300), then takes A."""
        a, b, c = scenario_foods
        result = greedy_max_protein(scenario_foods, 300)
        assert result == [b, a]
        assert sum_food_vector(result) == (300, 25)

    def test_empty_input(self):
        assert greedy_max_protein([], 1000) == []

    def test_nothing_fits(self, scenario_foods):
        assert greedy_max_protein(scenario_foods, 50) == []

    def test_zero_budget(self, scenario_foods):
        assert greedy_max_protein(scenario_foods, 0) == []

    def test_first_occurrence_wins_ties(self):
        first = Food("First", "1 cup", 100, 50, 10)
        second = Food("Second", "1 cup", 100, 60, 10)
        assert greedy_max_protein([first, second], 50) == [first]

    def test_zero_protein_foods_still_considered(self):
        a = Food("A", "1 cup", 100, 10, 0)
        b = Food("B", "1 cup", 100, 20, 0)
        assert greedy_max_protein([a, b], 100) == [a, b]

    def test_rejected_food_is_not_retried(self, greedy_trap_foods):
        steak, tuna, cottage = greedy_trap_foods
        assert greedy_max_protein(greedy_trap_foods, 300) == [steak]

    def test_input_not_mutated(self, scenario_foods):
        snapshot = list(scenario_foods)
        greedy_max_protein(scenario_foods, 300)
        assert scenario_foods == snapshot

    def test_idempotent(self, scenario_foods):
        first = greedy_max_protein(scenario_foods, 300)
        second = greedy_max_protein(scenario_foods, 300)
        assert first == second
        assert all(x is y for x, y in zip(first, second))

    def test_never_exceeds_budget(self):
        rng = random.Random(7)
        for _ in range(50):
            foods = _random_foods(rng, rng.randint(0, 15))
            budget = rng.randint(0, 1500)
            kcal, _ = sum_food_vector(greedy_max_protein(foods, budget))
            assert kcal <= budget


class TestExhaustiveMaxProtein:
    """Tests for exhaustive_max_protein."""

    def test_scenario(self, scenario_foods):
        a, b, c = scenario_foods
        result = exhaustive_max_protein(scenario_foods, 300)
        assert result == [a, b]
        assert sum_food_vector(result) == (300, 25)

    def test_beats_greedy_on_trap(self, greedy_trap_foods):
        steak, tuna, cottage = greedy_trap_foods
        greedy = greedy_max_protein(greedy_trap_foods, 300)
        exhaustive = exhaustive_max_protein(greedy_trap_foods, 300)
        assert exhaustive == [tuna, cottage]
        assert sum_food_vector(exhaustive)[1] > sum_food_vector(greedy)[1]

    def test_empty_input(self):
        assert exhaustive_max_protein([], 1000) == []

    def test_nothing_fits(self, scenario_foods):
        assert exhaustive_max_protein(scenario_foods, 50) == []

    def test_tie_keeps_first_enumerated(self):
        first = Food("First", "1 cup", 100, 100, 10)
        second = Food("Second", "1 cup", 100, 100, 10)
        assert exhaustive_max_protein([first, second], 100) == [first]

    def test_zero_protein_subsets_overwrite(self):
        """With zero protein everywhere the last subset that fits wins."""
        a = Food("A", "1 cup", 100, 10, 0)
        b = Food("B", "1 cup", 100, 20, 0)
        c = Food("C", "1 cup", 100, 500, 0)
        assert exhaustive_max_protein([a, b, c], 100) == [a, b]

    def test_result_keeps_candidate_order(self):
        foods = [
            Food("Low", "1 cup", 100, 50, 1),
            Food("High", "1 cup", 100, 50, 30),
            Food("Mid", "1 cup", 100, 50, 10),
        ]
        assert exhaustive_max_protein(foods, 150) == foods

    def test_candidate_limit(self):
        foods = [Food(f"Food {i}", "1 cup", 100, 10, 1) for i in range(MAX_EXHAUSTIVE_SIZE)]
        with pytest.raises(CandidateLimitError) as exc_info:
            exhaustive_max_protein(foods, 100)
        assert exc_info.value.size == MAX_EXHAUSTIVE_SIZE

    def test_idempotent(self, greedy_trap_foods):
        assert exhaustive_max_protein(greedy_trap_foods, 300) == exhaustive_max_protein(
            greedy_trap_foods, 300
        )

    def test_globally_optimal(self):
        """Matches an independent search and never loses to greedy."""
        rng = random.Random(42)
        for _ in range(30):
            foods = _random_foods(rng, rng.randint(0, 9))
            budget = rng.randint(0, 1200)
            result = exhaustive_max_protein(foods, budget)
            kcal, protein = sum_food_vector(result)
            assert kcal <= budget
            assert protein == _best_protein(foods, budget)
            assert protein >= sum_food_vector(greedy_max_protein(foods, budget))[1]


class TestSubsetForMask:
    """Tests for bitmask decoding."""

    def test_bits_select_indices(self, scenario_foods):
        a, b, c = scenario_foods
        assert subset_for_mask(scenario_foods, 0) == []
        assert subset_for_mask(scenario_foods, 0b101) == [a, c]
        assert subset_for_mask(scenario_foods, 0b111) == [a, b, c]
