"""Shared test fixtures."""

from dataclasses import dataclass

import pytest
from fastapi.testclient import TestClient

from coffee_tracker.adapters.memory_repositories import (
    InMemoryBrewingMethodRepository,
    InMemoryCoffeeLogRepository,
    InMemoryRecipeRepository,
    InMemoryUserRepository,
)
from coffee_tracker.api.app import create_app
from coffee_tracker.config import Settings
from coffee_tracker.containers import AppContainer
from coffee_tracker.domain.models import UserRecord
from coffee_tracker.services.auth import AuthService, PasswordHasher
from coffee_tracker.services.brewing import BrewingService
from coffee_tracker.services.cache import InMemoryCache
from coffee_tracker.services.coffee_log import CoffeeLogService
from coffee_tracker.services.nutrition import NutritionService
from coffee_tracker.services.recipes import RecipeService
from coffee_tracker.services.stats import HealthStatsService
from coffee_tracker.services.users import UserService


@dataclass
class FakePasswordHasher(PasswordHasher):
    """Cheap reversible hasher for tests."""

    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, password_hash: str) -> bool:
        return password_hash == f"hashed:{password}"


def build_recipe_service(
    repository: InMemoryRecipeRepository | None = None,
) -> RecipeService:
    return RecipeService(
        repository=repository or InMemoryRecipeRepository(),
        nutrition_service=NutritionService(),
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        storage_backend="memory",
        seed_demo_user=False,
        bcrypt_rounds=4,
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def coffee_log_repository() -> InMemoryCoffeeLogRepository:
    return InMemoryCoffeeLogRepository()


@pytest.fixture
def container(
    settings: Settings,
    user_repository: InMemoryUserRepository,
    coffee_log_repository: InMemoryCoffeeLogRepository,
) -> AppContainer:
    nutrition_service = NutritionService()
    recipe_service = RecipeService(
        repository=InMemoryRecipeRepository(),
        nutrition_service=nutrition_service,
    )
    brewing_service = BrewingService(InMemoryBrewingMethodRepository())
    brewing_service.seed_defaults()
    sessions = InMemoryCache()

    async def close_resources() -> None:
        sessions.clear()

    return AppContainer(
        settings=settings,
        nutrition_service=nutrition_service,
        user_service=UserService(user_repository),
        auth_service=AuthService(
            repository=user_repository,
            hasher=FakePasswordHasher(),
            sessions=sessions,
        ),
        recipe_service=recipe_service,
        coffee_log_service=CoffeeLogService(
            repository=coffee_log_repository,
            recipe_service=recipe_service,
        ),
        health_stats_service=HealthStatsService(coffee_log_repository),
        brewing_service=brewing_service,
        close_resources=close_resources,
    )


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))


@pytest.fixture
def user(container: AppContainer) -> UserRecord:
    created = container.auth_service.sign_up("alice", "secret")
    assert created is not None
    return created


@pytest.fixture
def auth_headers(container: AppContainer, user: UserRecord) -> dict[str, str]:
    result = container.auth_service.login(user.username, "secret")
    assert result is not None
    _, token = result
    return {"Authorization": f"Bearer {token}"}
