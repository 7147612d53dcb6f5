"""Coffee consumption logging service."""

import logging
from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta, tzinfo
from typing import Protocol
from zoneinfo import ZoneInfo

from coffee_tracker.domain.coffee_log import CoffeeLogEntry
from coffee_tracker.services.recipes import RecipeService

_logger = logging.getLogger(__name__)


class CoffeeLogRepository(Protocol):
    """Persistence interface for the append-only coffee log."""

    def create_entry(  # noqa: PLR0913
        self,
        user_id: int,
        recipe_id: int | None,
        caffeine_amount: int,
        calories: int,
        consumed_at: datetime,
    ) -> CoffeeLogEntry:
        """Append an entry and return it."""

    def list_entries(
        self,
        user_id: int,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[CoffeeLogEntry]:
        """Return a user's entries with ``start <= consumed_at < end``."""


@dataclass
class CoffeeLogService:
    """Records drinks and reads them back by calendar day."""

    repository: CoffeeLogRepository
    recipe_service: RecipeService
    timezone_name: str = "UTC"

    def log_coffee(
        self,
        user_id: int,
        caffeine_amount: int,
        calories: int,
        recipe_id: int | None = None,
    ) -> CoffeeLogEntry:
        """Log a drink stamped with the current server time."""
        entry = self.repository.create_entry(
            user_id=user_id,
            recipe_id=recipe_id,
            caffeine_amount=caffeine_amount,
            calories=calories,
            consumed_at=datetime.now(tz=UTC),
        )
        _logger.info(
            "Logged %s mg caffeine for user %s", entry.caffeine_amount, user_id
        )
        return entry

    def log_recipe(self, user_id: int, recipe_id: int) -> CoffeeLogEntry | None:
        """Log a saved recipe using its stored totals."""
        recipe = self.recipe_service.get_recipe(user_id, recipe_id)
        if recipe is None:
            return None
        return self.log_coffee(
            user_id,
            caffeine_amount=recipe.caffeine,
            calories=recipe.calories,
            recipe_id=recipe.id,
        )

    def list_entries(
        self, user_id: int, day: date | None = None
    ) -> list[CoffeeLogEntry]:
        """Return all entries, or only those on ``day`` in the service timezone."""
        if day is None:
            return self.repository.list_entries(user_id)
        start, end = day_bounds(day, ZoneInfo(self.timezone_name))
        return self.repository.list_entries(user_id, start, end)


def day_bounds(day: date, tz: tzinfo) -> tuple[datetime, datetime]:
    """Return the UTC start and end of a calendar day in ``tz``."""
    start = datetime.combine(day, time.min, tzinfo=tz)
    end = datetime.combine(day + timedelta(days=1), time.min, tzinfo=tz)
    return start.astimezone(UTC), end.astimezone(UTC)
