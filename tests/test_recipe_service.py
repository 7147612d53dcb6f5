"""Tests for the recipe service."""

from dataclasses import asdict

from coffee_tracker.adapters.memory_repositories import (
    InMemoryCoffeeLogRepository,
    InMemoryRecipeRepository,
)
from coffee_tracker.domain.recipes import RecipeDraft
from coffee_tracker.services.coffee_log import CoffeeLogService
from coffee_tracker.services.nutrition import NutritionService
from tests.conftest import build_recipe_service


def _draft(**overrides: object) -> RecipeDraft:
    values: dict[str, object] = {
        "name": "Morning mocha",
        "coffee_type": "mocha",
        "milk_type": "oat",
        "sweetness_level": 1,
        "toppings": ["whipped-cream", "caramel-syrup"],
    }
    values.update(overrides)
    return RecipeDraft(**values)


def test_create_recipe_stores_computed_totals() -> None:
    service = build_recipe_service()

    recipe = service.create_recipe(user_id=1, draft=_draft())

    expected = NutritionService().compute(
        "mocha", "oat", 1, ["whipped-cream", "caramel-syrup"]
    )
    assert recipe.id == 1
    assert recipe.user_id == 1
    assert (recipe.calories, recipe.caffeine, recipe.sugar, recipe.protein) == (
        expected.calories,
        expected.caffeine,
        expected.sugar,
        expected.protein,
    )
    assert recipe.is_favorite is False


def test_create_keeps_duplicate_toppings_in_order() -> None:
    service = build_recipe_service()

    recipe = service.create_recipe(
        1, _draft(toppings=["cinnamon", "nutmeg", "cinnamon"])
    )

    assert recipe.toppings == ["cinnamon", "nutmeg", "cinnamon"]


def test_update_name_keeps_totals() -> None:
    service = build_recipe_service()
    recipe = service.create_recipe(1, _draft())

    updated = service.update_recipe(1, recipe.id, {"name": "Afternoon mocha"})

    assert updated is not None
    assert updated.name == "Afternoon mocha"
    assert updated.calories == recipe.calories


def test_update_inputs_recomputes_totals() -> None:
    service = build_recipe_service()
    recipe = service.create_recipe(1, _draft())

    updated = service.update_recipe(1, recipe.id, {"sweetness_level": 3})

    assert updated is not None
    assert updated.sugar == recipe.sugar + 8
    assert updated.calories == recipe.calories + 32
    recomputed = NutritionService().compute(
        updated.coffee_type,
        updated.milk_type,
        updated.sweetness_level,
        updated.toppings,
    )
    assert asdict(recomputed) == {
        "calories": updated.calories,
        "caffeine": updated.caffeine,
        "sugar": updated.sugar,
        "protein": updated.protein,
    }


def test_update_ignores_total_overrides() -> None:
    service = build_recipe_service()
    recipe = service.create_recipe(1, _draft())

    updated = service.update_recipe(1, recipe.id, {"calories": 1})

    assert updated is not None
    assert updated.calories == recipe.calories


def test_update_missing_or_foreign_recipe_returns_none() -> None:
    service = build_recipe_service()
    recipe = service.create_recipe(1, _draft())

    assert service.update_recipe(1, 999, {"name": "x"}) is None
    assert service.update_recipe(2, recipe.id, {"name": "x"}) is None


def test_set_favorite() -> None:
    service = build_recipe_service()
    recipe = service.create_recipe(1, _draft())

    updated = service.set_favorite(1, recipe.id, True)

    assert updated is not None
    assert updated.is_favorite is True


def test_list_recipes_only_returns_owned() -> None:
    service = build_recipe_service()
    service.create_recipe(1, _draft(name="mine"))
    service.create_recipe(2, _draft(name="theirs"))

    assert [recipe.name for recipe in service.list_recipes(1)] == ["mine"]


def test_delete_recipe() -> None:
    service = build_recipe_service()
    recipe = service.create_recipe(1, _draft())

    assert service.delete_recipe(2, recipe.id) is False
    assert service.delete_recipe(1, recipe.id) is True
    assert service.delete_recipe(1, recipe.id) is False
    assert service.get_recipe(1, recipe.id) is None


def test_delete_recipe_keeps_log_entries() -> None:
    recipes = InMemoryRecipeRepository()
    recipe_service = build_recipe_service(recipes)
    log_service = CoffeeLogService(
        repository=InMemoryCoffeeLogRepository(), recipe_service=recipe_service
    )
    recipe = recipe_service.create_recipe(1, _draft())
    entry = log_service.log_recipe(1, recipe.id)
    assert entry is not None

    recipe_service.delete_recipe(1, recipe.id)

    remaining = log_service.list_entries(1)
    assert remaining == [entry]
    assert remaining[0].recipe_id == recipe.id
