"""User-related business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol

from coffee_tracker.domain.models import UserRecord

MIN_CAFFEINE_GOAL = 0
MAX_CAFFEINE_GOAL = 1000

_logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_user(self, user_id: int) -> UserRecord | None:
        """Return the user for an id, if present."""

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user for a username, if present."""

    def create_user(
        self, username: str, password_hash: str, daily_caffeine_goal: int
    ) -> UserRecord:
        """Create and return a new user record."""

    def update_caffeine_goal(self, user_id: int, goal: int) -> UserRecord | None:
        """Update the daily goal; return None when the user is missing."""


@dataclass
class UserService:
    """Application service for user profile actions."""

    repository: UserRepository

    def get_user(self, user_id: int) -> UserRecord | None:
        """Return a user by id."""
        return self.repository.get_user(user_id)

    def set_caffeine_goal(self, user_id: int, goal: int) -> UserRecord | None:
        """Persist a new daily caffeine goal in milligrams."""
        if not MIN_CAFFEINE_GOAL <= goal <= MAX_CAFFEINE_GOAL:
            raise ValueError(
                f"Caffeine goal must be between {MIN_CAFFEINE_GOAL} "
                f"and {MAX_CAFFEINE_GOAL} mg"
            )
        updated = self.repository.update_caffeine_goal(user_id, goal)
        if updated is None:
            _logger.info("Caffeine goal update for unknown user %s", user_id)
        return updated
