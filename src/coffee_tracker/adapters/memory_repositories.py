"""Process-local repositories backed by dictionaries."""

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from itertools import count

from coffee_tracker.domain.brewing import BrewingMethod
from coffee_tracker.domain.coffee_log import CoffeeLogEntry
from coffee_tracker.domain.models import UserRecord
from coffee_tracker.domain.nutrition import NutritionTotals
from coffee_tracker.domain.recipes import CoffeeRecipe, RecipeDraft
from coffee_tracker.services.brewing import BrewingMethodRepository
from coffee_tracker.services.coffee_log import CoffeeLogRepository
from coffee_tracker.services.recipes import RecipeRepository
from coffee_tracker.services.users import UserRepository


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user storage."""

    users: dict[int, UserRecord] = field(default_factory=dict)
    _ids: count = field(default_factory=lambda: count(1), repr=False)

    def get_user(self, user_id: int) -> UserRecord | None:
        return self.users.get(user_id)

    def get_by_username(self, username: str) -> UserRecord | None:
        return next(
            (user for user in self.users.values() if user.username == username), None
        )

    def create_user(
        self, username: str, password_hash: str, daily_caffeine_goal: int
    ) -> UserRecord:
        user = UserRecord(
            id=next(self._ids),
            username=username,
            password_hash=password_hash,
            daily_caffeine_goal=daily_caffeine_goal,
            created_at=datetime.now(tz=UTC),
        )
        self.users[user.id] = user
        return user

    def update_caffeine_goal(self, user_id: int, goal: int) -> UserRecord | None:
        current = self.users.get(user_id)
        if current is None:
            return None
        updated = replace(current, daily_caffeine_goal=goal)
        self.users[user_id] = updated
        return updated


@dataclass
class InMemoryRecipeRepository(RecipeRepository):
    """In-memory recipe storage."""

    recipes: dict[int, CoffeeRecipe] = field(default_factory=dict)
    _ids: count = field(default_factory=lambda: count(1), repr=False)

    def create_recipe(
        self, user_id: int, draft: RecipeDraft, totals: NutritionTotals
    ) -> CoffeeRecipe:
        recipe = CoffeeRecipe(
            id=next(self._ids),
            user_id=user_id,
            name=draft.name,
            coffee_type=draft.coffee_type,
            milk_type=draft.milk_type,
            sweetness_level=draft.sweetness_level,
            toppings=list(draft.toppings),
            calories=totals.calories,
            caffeine=totals.caffeine,
            sugar=totals.sugar,
            protein=totals.protein,
            is_favorite=draft.is_favorite,
            created_at=datetime.now(tz=UTC),
        )
        self.recipes[recipe.id] = recipe
        return recipe

    def get_recipe(self, recipe_id: int) -> CoffeeRecipe | None:
        return self.recipes.get(recipe_id)

    def list_recipes(self, user_id: int) -> list[CoffeeRecipe]:
        return [recipe for recipe in self.recipes.values() if recipe.user_id == user_id]

    def update_recipe(
        self, recipe_id: int, changes: dict[str, object]
    ) -> CoffeeRecipe | None:
        current = self.recipes.get(recipe_id)
        if current is None:
            return None
        if "toppings" in changes:
            changes = {**changes, "toppings": list(changes["toppings"])}
        updated = replace(current, **changes)
        self.recipes[recipe_id] = updated
        return updated

    def delete_recipe(self, recipe_id: int) -> bool:
        return self.recipes.pop(recipe_id, None) is not None


@dataclass
class InMemoryCoffeeLogRepository(CoffeeLogRepository):
    """In-memory append-only coffee log."""

    entries: dict[int, CoffeeLogEntry] = field(default_factory=dict)
    _ids: count = field(default_factory=lambda: count(1), repr=False)

    def create_entry(  # noqa: PLR0913
        self,
        user_id: int,
        recipe_id: int | None,
        caffeine_amount: int,
        calories: int,
        consumed_at: datetime,
    ) -> CoffeeLogEntry:
        entry = CoffeeLogEntry(
            id=next(self._ids),
            user_id=user_id,
            recipe_id=recipe_id,
            caffeine_amount=caffeine_amount,
            calories=calories,
            consumed_at=consumed_at,
        )
        self.entries[entry.id] = entry
        return entry

    def list_entries(
        self,
        user_id: int,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[CoffeeLogEntry]:
        selected = [
            entry
            for entry in self.entries.values()
            if entry.user_id == user_id
            and (start is None or entry.consumed_at >= start)
            and (end is None or entry.consumed_at < end)
        ]
        return sorted(selected, key=lambda entry: entry.consumed_at)


@dataclass
class InMemoryBrewingMethodRepository(BrewingMethodRepository):
    """In-memory brewing guide storage."""

    methods: dict[int, BrewingMethod] = field(default_factory=dict)
    _ids: count = field(default_factory=lambda: count(1), repr=False)

    def list_methods(self) -> list[BrewingMethod]:
        return list(self.methods.values())

    def get_method(self, method_id: int) -> BrewingMethod | None:
        return self.methods.get(method_id)

    def create_method(self, payload: dict[str, object]) -> BrewingMethod:
        method = BrewingMethod(
            id=next(self._ids),
            name=str(payload["name"]),
            description=payload.get("description"),
            steps=list(payload.get("steps", [])),
            equipment_needed=list(payload.get("equipment_needed", [])),
            brew_time=payload.get("brew_time"),
            difficulty=payload.get("difficulty"),
        )
        self.methods[method.id] = method
        return method
