"""Domain models for the consumption log."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class CoffeeLogEntry:
    """One logged drink.

    ``recipe_id`` is a plain lookup key. Deleting the recipe leaves the entry
    in place with a dangling id.
    """

    id: int
    user_id: int
    recipe_id: int | None
    caffeine_amount: int
    calories: int
    consumed_at: datetime
