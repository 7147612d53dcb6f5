"""Supabase repository for saved recipes."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from coffee_tracker.domain.nutrition import NutritionTotals
from coffee_tracker.domain.recipes import CoffeeRecipe, RecipeDraft
from coffee_tracker.services.recipes import RecipeRepository

_RECIPE_COLUMNS = (
    "id, user_id, name, coffee_type, milk_type, sweetness_level, toppings, "
    "calories, caffeine, sugar, protein, is_favorite, created_at"
)


@dataclass
class SupabaseRecipeRepository(RecipeRepository):
    """Supabase implementation for recipes."""

    client: Client

    def create_recipe(
        self, user_id: int, draft: RecipeDraft, totals: NutritionTotals
    ) -> CoffeeRecipe:
        """Create a recipe row and return it."""
        response = (
            self.client.table("coffee_recipes")
            .insert(
                {
                    "user_id": user_id,
                    "name": draft.name,
                    "coffee_type": draft.coffee_type,
                    "milk_type": draft.milk_type,
                    "sweetness_level": draft.sweetness_level,
                    "toppings": list(draft.toppings),
                    "calories": totals.calories,
                    "caffeine": totals.caffeine,
                    "sugar": totals.sugar,
                    "protein": totals.protein,
                    "is_favorite": draft.is_favorite,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create recipe")
        return _parse_row(response.data[0])

    def get_recipe(self, recipe_id: int) -> CoffeeRecipe | None:
        """Return a recipe row by id."""
        response = (
            self.client.table("coffee_recipes")
            .select(_RECIPE_COLUMNS)
            .eq("id", recipe_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def list_recipes(self, user_id: int) -> list[CoffeeRecipe]:
        """Return recipes owned by a user, oldest first."""
        response = (
            self.client.table("coffee_recipes")
            .select(_RECIPE_COLUMNS)
            .eq("user_id", user_id)
            .order("id", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def update_recipe(
        self, recipe_id: int, changes: dict[str, object]
    ) -> CoffeeRecipe | None:
        """Update a recipe row and return the new state."""
        response = (
            self.client.table("coffee_recipes")
            .update(changes)
            .eq("id", recipe_id)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def delete_recipe(self, recipe_id: int) -> bool:
        """Delete a recipe row."""
        response = (
            self.client.table("coffee_recipes").delete().eq("id", recipe_id).execute()
        )
        return bool(response.data)


def _parse_row(row: dict[str, object]) -> CoffeeRecipe:
    created_raw = row.get("created_at")
    created_at = (
        datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else datetime.now(tz=UTC)
    )
    return CoffeeRecipe(
        id=int(row["id"]),
        user_id=int(row["user_id"]),
        name=str(row.get("name", "")),
        coffee_type=str(row.get("coffee_type", "")),
        milk_type=str(row.get("milk_type", "")),
        sweetness_level=int(row.get("sweetness_level", 0)),
        toppings=[str(item) for item in row.get("toppings") or []],
        calories=int(row.get("calories") or 0),
        caffeine=int(row.get("caffeine") or 0),
        sugar=int(row.get("sugar") or 0),
        protein=float(row.get("protein") or 0.0),
        is_favorite=bool(row.get("is_favorite", False)),
        created_at=created_at,
    )
