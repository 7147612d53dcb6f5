"""Brewing guide library."""

import logging
from dataclasses import dataclass
from typing import Protocol

from coffee_tracker.domain.brewing import BrewingMethod

_logger = logging.getLogger(__name__)

DEFAULT_BREWING_METHODS: tuple[dict[str, object], ...] = (
    {
        "name": "Espresso",
        "description": "Rich & bold concentrated coffee",
        "steps": [
            "Grind 18-20g coffee beans to fine consistency",
            "Tamp grounds with 30lbs pressure",
            "Extract for 25-30 seconds",
            "Aim for 30-40ml output",
        ],
        "equipment_needed": ["Espresso machine", "Coffee grinder", "Tamper"],
        "brew_time": "25-30 seconds",
        "difficulty": "Intermediate",
    },
    {
        "name": "Pour Over",
        "description": "Clean and bright manual brewing method",
        "steps": [
            "Heat water to 200°F (93°C)",
            "Wet filter and add 22g medium-fine grounds",
            "Pour in circular motion, 4-minute total brew",
            "Start with 50g water for bloom, wait 30 seconds",
        ],
        "equipment_needed": [
            "V60 dripper",
            "Paper filter",
            "Gooseneck kettle",
            "Scale",
        ],
        "brew_time": "4 minutes",
        "difficulty": "Beginner",
    },
    {
        "name": "French Press",
        "description": "Full-bodied immersion brewing",
        "steps": [
            "Add 30g coarse grounds to press",
            "Pour hot water (200°F), stir once",
            "Steep 4 minutes, press slowly",
            "Serve immediately",
        ],
        "equipment_needed": ["French press", "Coffee grinder"],
        "brew_time": "4 minutes",
        "difficulty": "Beginner",
    },
)


class BrewingMethodRepository(Protocol):
    """Persistence interface for brewing guides."""

    def list_methods(self) -> list[BrewingMethod]:
        """Return every brewing method."""

    def get_method(self, method_id: int) -> BrewingMethod | None:
        """Return a brewing method by id, if present."""

    def create_method(self, payload: dict[str, object]) -> BrewingMethod:
        """Create a brewing method and return it."""


@dataclass
class BrewingService:
    """Read-mostly access to brewing guides."""

    repository: BrewingMethodRepository

    def list_methods(self) -> list[BrewingMethod]:
        """Return the full guide library."""
        return self.repository.list_methods()

    def get_method(self, method_id: int) -> BrewingMethod | None:
        """Return one guide."""
        return self.repository.get_method(method_id)

    def create_method(self, payload: dict[str, object]) -> BrewingMethod:
        """Add a guide to the library."""
        return self.repository.create_method(payload)

    def seed_defaults(self) -> int:
        """Load the built-in guides into an empty library."""
        if self.repository.list_methods():
            return 0
        for payload in DEFAULT_BREWING_METHODS:
            self.repository.create_method(dict(payload))
        _logger.info("Seeded %s brewing methods", len(DEFAULT_BREWING_METHODS))
        return len(DEFAULT_BREWING_METHODS)
