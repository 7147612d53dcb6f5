"""Supabase repository for brewing guides."""

from dataclasses import dataclass

from supabase import Client

from coffee_tracker.domain.brewing import BrewingMethod
from coffee_tracker.services.brewing import BrewingMethodRepository

_METHOD_COLUMNS = (
    "id, name, description, steps, equipment_needed, brew_time, difficulty"
)


@dataclass
class SupabaseBrewingMethodRepository(BrewingMethodRepository):
    """Supabase implementation for brewing methods."""

    client: Client

    def list_methods(self) -> list[BrewingMethod]:
        """Return all brewing methods."""
        response = (
            self.client.table("brewing_methods")
            .select(_METHOD_COLUMNS)
            .order("id", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def get_method(self, method_id: int) -> BrewingMethod | None:
        """Return a brewing method by id."""
        response = (
            self.client.table("brewing_methods")
            .select(_METHOD_COLUMNS)
            .eq("id", method_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def create_method(self, payload: dict[str, object]) -> BrewingMethod:
        """Insert a brewing method row."""
        response = self.client.table("brewing_methods").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create brewing method")
        return _parse_row(response.data[0])


def _parse_row(row: dict[str, object]) -> BrewingMethod:
    return BrewingMethod(
        id=int(row["id"]),
        name=str(row.get("name", "")),
        description=row.get("description"),
        steps=list(row.get("steps") or []),
        equipment_needed=list(row.get("equipment_needed") or []),
        brew_time=row.get("brew_time"),
        difficulty=row.get("difficulty"),
    )
