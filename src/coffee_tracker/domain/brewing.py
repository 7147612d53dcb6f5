"""Domain models for brewing guides."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BrewingMethod:
    """Step-by-step guide for a brewing method."""

    id: int
    name: str
    description: str | None
    steps: list[str]
    equipment_needed: list[str]
    brew_time: str | None
    difficulty: str | None
