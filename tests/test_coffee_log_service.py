"""Tests for the coffee log service."""

from datetime import UTC, date, datetime

from coffee_tracker.adapters.memory_repositories import InMemoryCoffeeLogRepository
from coffee_tracker.domain.recipes import RecipeDraft
from coffee_tracker.services.coffee_log import CoffeeLogService, day_bounds
from tests.conftest import build_recipe_service


def test_log_coffee_uses_server_time() -> None:
    service = CoffeeLogService(
        repository=InMemoryCoffeeLogRepository(),
        recipe_service=build_recipe_service(),
    )
    before = datetime.now(tz=UTC)

    entry = service.log_coffee(1, caffeine_amount=95, calories=5)

    assert before <= entry.consumed_at <= datetime.now(tz=UTC)
    assert entry.recipe_id is None
    assert entry.caffeine_amount == 95


def test_log_recipe_copies_totals() -> None:
    recipe_service = build_recipe_service()
    service = CoffeeLogService(
        repository=InMemoryCoffeeLogRepository(), recipe_service=recipe_service
    )
    recipe = recipe_service.create_recipe(
        1,
        RecipeDraft(
            name="Flat", coffee_type="espresso", milk_type="whole", sweetness_level=2
        ),
    )

    entry = service.log_recipe(1, recipe.id)

    assert entry is not None
    assert (entry.caffeine_amount, entry.calories, entry.recipe_id) == (
        150,
        97,
        recipe.id,
    )
    assert service.log_recipe(2, recipe.id) is None
    assert service.log_recipe(1, 404) is None


def test_list_entries_filters_by_calendar_day() -> None:
    repository = InMemoryCoffeeLogRepository()
    service = CoffeeLogService(
        repository=repository, recipe_service=build_recipe_service()
    )
    for hour, day in ((8, 9), (23, 9), (0, 10)):
        repository.create_entry(
            user_id=1,
            recipe_id=None,
            caffeine_amount=hour,
            calories=0,
            consumed_at=datetime(2024, 5, day, hour, 0, tzinfo=UTC),
        )

    entries = service.list_entries(1, date(2024, 5, 9))

    assert [entry.caffeine_amount for entry in entries] == [8, 23]
    assert len(service.list_entries(1)) == 3


def test_day_bounds_in_utc() -> None:
    start, end = day_bounds(date(2024, 1, 2), UTC)

    assert start == datetime(2024, 1, 2, tzinfo=UTC)
    assert end == datetime(2024, 1, 3, tzinfo=UTC)
