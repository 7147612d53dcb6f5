"""Supabase repository for the coffee log."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from coffee_tracker.domain.coffee_log import CoffeeLogEntry
from coffee_tracker.services.coffee_log import CoffeeLogRepository

_LOG_COLUMNS = "id, user_id, recipe_id, caffeine_amount, calories, consumed_at"


@dataclass
class SupabaseCoffeeLogRepository(CoffeeLogRepository):
    """Supabase implementation for coffee log entries."""

    client: Client

    def create_entry(  # noqa: PLR0913
        self,
        user_id: int,
        recipe_id: int | None,
        caffeine_amount: int,
        calories: int,
        consumed_at: datetime,
    ) -> CoffeeLogEntry:
        """Insert a log row and return it."""
        response = (
            self.client.table("coffee_log")
            .insert(
                {
                    "user_id": user_id,
                    "recipe_id": recipe_id,
                    "caffeine_amount": caffeine_amount,
                    "calories": calories,
                    "consumed_at": consumed_at.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create coffee log entry")
        return _parse_row(response.data[0])

    def list_entries(
        self,
        user_id: int,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[CoffeeLogEntry]:
        """Return log rows for a user within an optional time range."""
        query = (
            self.client.table("coffee_log")
            .select(_LOG_COLUMNS)
            .eq("user_id", user_id)
        )
        if start is not None:
            query = query.gte("consumed_at", start.isoformat())
        if end is not None:
            query = query.lt("consumed_at", end.isoformat())
        response = query.order("consumed_at", desc=False).execute()
        return [_parse_row(row) for row in response.data or []]


def _parse_row(row: dict[str, object]) -> CoffeeLogEntry:
    recipe_id = row.get("recipe_id")
    return CoffeeLogEntry(
        id=int(row["id"]),
        user_id=int(row["user_id"]),
        recipe_id=int(recipe_id) if recipe_id is not None else None,
        caffeine_amount=int(row.get("caffeine_amount", 0)),
        calories=int(row.get("calories", 0)),
        consumed_at=datetime.fromisoformat(str(row["consumed_at"])),
    )
