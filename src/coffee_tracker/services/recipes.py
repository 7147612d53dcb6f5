"""Services for saved coffee recipes."""

import logging
from dataclasses import asdict, dataclass
from typing import Protocol

from coffee_tracker.domain.nutrition import NutritionTotals
from coffee_tracker.domain.recipes import CoffeeRecipe, RecipeDraft
from coffee_tracker.services.nutrition import NutritionService

_INPUT_FIELDS = frozenset({"coffee_type", "milk_type", "sweetness_level", "toppings"})
_EDITABLE_FIELDS = _INPUT_FIELDS | {"name", "is_favorite"}

_logger = logging.getLogger(__name__)


class RecipeRepository(Protocol):
    """Persistence interface for recipes."""

    def create_recipe(
        self, user_id: int, draft: RecipeDraft, totals: NutritionTotals
    ) -> CoffeeRecipe:
        """Create a recipe and return it."""

    def get_recipe(self, recipe_id: int) -> CoffeeRecipe | None:
        """Return a recipe by id, if present."""

    def list_recipes(self, user_id: int) -> list[CoffeeRecipe]:
        """Return all recipes owned by a user."""

    def update_recipe(
        self, recipe_id: int, changes: dict[str, object]
    ) -> CoffeeRecipe | None:
        """Apply a partial update; return None when the recipe is missing."""

    def delete_recipe(self, recipe_id: int) -> bool:
        """Delete a recipe; return False when it did not exist."""


@dataclass
class RecipeService:
    """Application service that keeps recipe totals in sync with inputs."""

    repository: RecipeRepository
    nutrition_service: NutritionService

    def create_recipe(self, user_id: int, draft: RecipeDraft) -> CoffeeRecipe:
        """Compute totals for the draft and persist it."""
        totals = self.nutrition_service.compute(
            draft.coffee_type, draft.milk_type, draft.sweetness_level, draft.toppings
        )
        recipe = self.repository.create_recipe(user_id, draft, totals)
        _logger.info("Saved recipe %s for user %s", recipe.id, user_id)
        return recipe

    def get_recipe(self, user_id: int, recipe_id: int) -> CoffeeRecipe | None:
        """Return a recipe when it exists and belongs to the user."""
        recipe = self.repository.get_recipe(recipe_id)
        if recipe is None or recipe.user_id != user_id:
            return None
        return recipe

    def list_recipes(self, user_id: int) -> list[CoffeeRecipe]:
        """Return the user's recipes."""
        return self.repository.list_recipes(user_id)

    def update_recipe(
        self, user_id: int, recipe_id: int, changes: dict[str, object]
    ) -> CoffeeRecipe | None:
        """Apply a partial update, recomputing totals when inputs change."""
        current = self.get_recipe(user_id, recipe_id)
        if current is None:
            return None
        updates = {
            key: value for key, value in changes.items() if key in _EDITABLE_FIELDS
        }
        if _INPUT_FIELDS & updates.keys():
            merged = {**asdict(current), **updates}
            totals = self.nutrition_service.compute(
                str(merged["coffee_type"]),
                str(merged["milk_type"]),
                int(merged["sweetness_level"]),
                list(merged["toppings"]),
            )
            updates.update(asdict(totals))
        if not updates:
            return current
        return self.repository.update_recipe(recipe_id, updates)

    def set_favorite(
        self, user_id: int, recipe_id: int, is_favorite: bool
    ) -> CoffeeRecipe | None:
        """Mark or unmark a recipe as favorite."""
        return self.update_recipe(user_id, recipe_id, {"is_favorite": is_favorite})

    def delete_recipe(self, user_id: int, recipe_id: int) -> bool:
        """Delete a recipe owned by the user.

        Log entries that reference the recipe are left untouched.
        """
        if self.get_recipe(user_id, recipe_id) is None:
            return False
        return self.repository.delete_recipe(recipe_id)
