"""Nutrition domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NutritionTotals:
    """Computed nutrition for a single drink."""

    calories: int
    caffeine: int
    sugar: int
    protein: float
