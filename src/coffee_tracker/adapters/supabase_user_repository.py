"""Supabase-backed user repository."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from coffee_tracker.domain.models import DEFAULT_DAILY_CAFFEINE_GOAL, UserRecord
from coffee_tracker.services.users import UserRepository

_USER_COLUMNS = "id, username, password_hash, daily_caffeine_goal, created_at"


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_user(self, user_id: int) -> UserRecord | None:
        """Return the user for an id, if present."""
        response = (
            self.client.table("users")
            .select(_USER_COLUMNS)
            .eq("id", user_id)
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_row(response.data[0])
        return None

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user for a username, if present."""
        response = (
            self.client.table("users")
            .select(_USER_COLUMNS)
            .eq("username", username)
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_row(response.data[0])
        return None

    def create_user(
        self, username: str, password_hash: str, daily_caffeine_goal: int
    ) -> UserRecord:
        """Create a new user row and return it."""
        response = (
            self.client.table("users")
            .insert(
                {
                    "username": username,
                    "password_hash": password_hash,
                    "daily_caffeine_goal": daily_caffeine_goal,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")
        return _parse_row(response.data[0])

    def update_caffeine_goal(self, user_id: int, goal: int) -> UserRecord | None:
        """Update the daily caffeine goal for a user."""
        response = (
            self.client.table("users")
            .update({"daily_caffeine_goal": goal})
            .eq("id", user_id)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])


def _parse_row(row: dict[str, object]) -> UserRecord:
    created_raw = row.get("created_at")
    created_at = (
        datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else datetime.now(tz=UTC)
    )
    goal = row.get("daily_caffeine_goal")
    if goal is None:
        goal = DEFAULT_DAILY_CAFFEINE_GOAL
    return UserRecord(
        id=int(row["id"]),
        username=str(row["username"]),
        password_hash=str(row.get("password_hash", "")),
        daily_caffeine_goal=int(goal),
        created_at=created_at,
    )
