"""Tests for brewing guides."""

from coffee_tracker.adapters.memory_repositories import (
    InMemoryBrewingMethodRepository,
)
from coffee_tracker.services.brewing import BrewingService


def test_seed_defaults_only_fills_empty_library() -> None:
    service = BrewingService(InMemoryBrewingMethodRepository())

    assert service.seed_defaults() == 3
    assert service.seed_defaults() == 0

    names = [method.name for method in service.list_methods()]
    assert names == ["Espresso", "Pour Over", "French Press"]


def test_create_and_get_method() -> None:
    service = BrewingService(InMemoryBrewingMethodRepository())

    created = service.create_method(
        {
            "name": "Moka Pot",
            "steps": ["Fill base", "Heat", "Pour"],
            "equipment_needed": ["Moka pot"],
            "difficulty": "Beginner",
        }
    )

    fetched = service.get_method(created.id)
    assert fetched == created
    assert fetched.description is None
    assert service.get_method(999) is None
