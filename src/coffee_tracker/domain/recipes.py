"""Domain models for saved coffee recipes."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class RecipeDraft:
    """User-supplied recipe choices before totals are computed."""

    name: str
    coffee_type: str
    milk_type: str
    sweetness_level: int
    toppings: list[str] = field(default_factory=list)
    is_favorite: bool = False


@dataclass(frozen=True)
class CoffeeRecipe:
    """A saved recipe with its nutrition snapshot."""

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
