"""Nutrition engine for customized drinks."""

import math
from dataclasses import dataclass, field

from coffee_tracker.domain.catalog import (
    CALORIES_PER_SUGAR_GRAM,
    DEFAULT_CATALOG,
    SUGAR_GRAMS_PER_SWEETNESS,
    Catalog,
)
from coffee_tracker.domain.nutrition import NutritionTotals


@dataclass
class NutritionService:
    """Computes nutrition totals from catalog choices.

    Unknown coffee or milk ids resolve to the first catalog entry and unknown
    topping ids are skipped, so ``compute`` never fails.
    """

    catalog: Catalog = field(default_factory=lambda: DEFAULT_CATALOG)

    def compute(
        self,
        coffee_type_id: str,
        milk_type_id: str,
        sweetness_level: int,
        topping_ids: list[str],
    ) -> NutritionTotals:
        """Return calories, caffeine, sugar and protein for a drink."""
        coffee = (
            self.catalog.find_coffee(coffee_type_id) or self.catalog.coffee_types[0]
        )
        milk = self.catalog.find_milk(milk_type_id) or self.catalog.milk_types[0]

        caffeine: float = coffee.base_caffeine_mg
        protein: float = milk.protein_g
        sugar: float = sweetness_level * SUGAR_GRAMS_PER_SWEETNESS
        calories: float = (
            coffee.base_calories
            + milk.calories_per_serving
            + sugar * CALORIES_PER_SUGAR_GRAM
        )

        for topping_id in topping_ids:
            topping = self.catalog.find_topping(topping_id)
            if topping is None:
                continue
            calories += topping.calories
            caffeine += topping.caffeine_mg
            sugar += self.catalog.topping_sugar_g.get(topping.id, 0)

        return NutritionTotals(
            calories=round_half_up(calories),
            caffeine=round_half_up(caffeine),
            sugar=round_half_up(sugar),
            protein=round_half_up(protein * 10) / 10,
        )


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up."""
    return math.floor(value + 0.5)
