"""Request and response models for the HTTP API."""

from dataclasses import asdict
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from coffee_tracker.domain.brewing import BrewingMethod
from coffee_tracker.domain.catalog import MAX_SWEETNESS_LEVEL, Catalog
from coffee_tracker.domain.coffee_log import CoffeeLogEntry
from coffee_tracker.domain.models import DEFAULT_DAILY_CAFFEINE_GOAL, UserRecord
from coffee_tracker.domain.recipes import CoffeeRecipe
from coffee_tracker.services.auth import MAX_PASSWORD_BYTES
from coffee_tracker.services.users import MAX_CAFFEINE_GOAL, MIN_CAFFEINE_GOAL


class ApiModel(BaseModel):
    """Base model that speaks camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SignupRequest(ApiModel):
    """New account payload."""

    username: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=1)
    daily_caffeine_goal: int = Field(
        default=DEFAULT_DAILY_CAFFEINE_GOAL,
        ge=MIN_CAFFEINE_GOAL,
        le=MAX_CAFFEINE_GOAL,
    )

    @field_validator("password")
    @classmethod
    def password_fits_hash(cls, value: str) -> str:
        if len(value.encode()) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class LoginRequest(ApiModel):
    """Credentials payload."""

    username: str
    password: str


class UserResponse(ApiModel):
    """Public view of a user; never carries the password hash."""

    id: int
    username: str
    daily_caffeine_goal: int
    created_at: datetime

    @classmethod
    def from_record(cls, user: UserRecord) -> "UserResponse":
        return cls(
            id=user.id,
            username=user.username,
            daily_caffeine_goal=user.daily_caffeine_goal,
            created_at=user.created_at,
        )


class AuthResponse(ApiModel):
    """Logged-in user with the issued session token."""

    user: UserResponse
    token: str


class RecipeCreateRequest(ApiModel):
    """Recipe choices; any submitted totals are recomputed server-side."""

    name: str = Field(min_length=1)
    coffee_type: str
    milk_type: str
    sweetness_level: int = Field(ge=0, le=MAX_SWEETNESS_LEVEL)
    toppings: list[str] = Field(default_factory=list)
    is_favorite: bool = False


class RecipeUpdateRequest(ApiModel):
    """Partial recipe update."""

    name: str | None = Field(default=None, min_length=1)
    coffee_type: str | None = None
    milk_type: str | None = None
    sweetness_level: int | None = Field(default=None, ge=0, le=MAX_SWEETNESS_LEVEL)
    toppings: list[str] | None = None
    is_favorite: bool | None = None


class RecipeResponse(ApiModel):
    """Saved recipe with its nutrition snapshot."""

    id: int
    user_id: int
    name: str
    coffee_type: str
    milk_type: str
    sweetness_level: int
    toppings: list[str]
    calories: int
    caffeine: int
    sugar: int
    protein: float
    is_favorite: bool
    created_at: datetime

    @classmethod
    def from_recipe(cls, recipe: CoffeeRecipe) -> "RecipeResponse":
        return cls(**asdict(recipe))


class CoffeeLogRequest(ApiModel):
    """A drink to log."""

    recipe_id: int | None = None
    caffeine_amount: int = Field(ge=0)
    calories: int = Field(ge=0)


class CoffeeLogResponse(ApiModel):
    """A logged drink."""

    id: int
    user_id: int
    recipe_id: int | None
    caffeine_amount: int
    calories: int
    consumed_at: datetime

    @classmethod
    def from_entry(cls, entry: CoffeeLogEntry) -> "CoffeeLogResponse":
        return cls(**asdict(entry))


class HealthStatsResponse(ApiModel):
    """Today's intake and the rolling weekly summary."""

    todays_caffeine: int
    daily_goal: int
    avg_caffeine: int
    total_cups: int
    goal_adherence: int


class CaffeineGoalRequest(ApiModel):
    """New daily caffeine goal in milligrams."""

    goal: int = Field(ge=MIN_CAFFEINE_GOAL, le=MAX_CAFFEINE_GOAL)


class CaffeineGoalResponse(ApiModel):
    """Updated daily caffeine goal."""

    daily_caffeine_goal: int


class BrewingMethodResponse(ApiModel):
    """Brewing guide."""

    id: int
    name: str
    description: str | None
    steps: list[str]
    equipment_needed: list[str]
    brew_time: str | None
    difficulty: str | None

    @classmethod
    def from_method(cls, method: BrewingMethod) -> "BrewingMethodResponse":
        return cls(**asdict(method))


class NutritionRequest(ApiModel):
    """Drink choices to preview."""

    coffee_type: str
    milk_type: str
    sweetness_level: int = Field(ge=0, le=MAX_SWEETNESS_LEVEL)
    toppings: list[str] = Field(default_factory=list)


class NutritionResponse(ApiModel):
    """Computed nutrition totals."""

    calories: int
    caffeine: int
    sugar: int
    protein: float


class CoffeeTypeResponse(ApiModel):
    id: str
    name: str
    description: str
    base_caffeine_mg: int
    base_calories: int


class MilkTypeResponse(ApiModel):
    id: str
    name: str
    calories_per_serving: int
    protein_g: float


class ToppingResponse(ApiModel):
    id: str
    name: str
    caffeine_mg: int
    calories: int
    sugar_g: int


class CatalogResponse(ApiModel):
    """Every choice available to the drink builder."""

    coffee_types: list[CoffeeTypeResponse]
    milk_types: list[MilkTypeResponse]
    toppings: list[ToppingResponse]

    @classmethod
    def from_catalog(cls, catalog: Catalog) -> "CatalogResponse":
        return cls(
            coffee_types=[
                CoffeeTypeResponse(**asdict(coffee)) for coffee in catalog.coffee_types
            ],
            milk_types=[
                MilkTypeResponse(**asdict(milk)) for milk in catalog.milk_types
            ],
            toppings=[
                ToppingResponse(
                    **asdict(topping),
                    sugar_g=catalog.topping_sugar_g.get(topping.id, 0),
                )
                for topping in catalog.toppings
            ],
        )
