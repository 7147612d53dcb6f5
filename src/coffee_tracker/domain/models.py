"""Domain models for the coffee tracker."""

from dataclasses import dataclass
from datetime import datetime

DEFAULT_DAILY_CAFFEINE_GOAL = 400


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: int
    username: str
    password_hash: str
    daily_caffeine_goal: int
    created_at: datetime
