"""Dependency container wiring for the application."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from coffee_tracker.adapters.memory_repositories import (
    InMemoryBrewingMethodRepository,
    InMemoryCoffeeLogRepository,
    InMemoryRecipeRepository,
    InMemoryUserRepository,
)
from coffee_tracker.adapters.supabase_brewing_repository import (
    SupabaseBrewingMethodRepository,
)
from coffee_tracker.adapters.supabase_coffee_log_repository import (
    SupabaseCoffeeLogRepository,
)
from coffee_tracker.adapters.supabase_recipe_repository import (
    SupabaseRecipeRepository,
)
from coffee_tracker.adapters.supabase_user_repository import SupabaseUserRepository
from coffee_tracker.config import Settings, parse_storage_backend
from coffee_tracker.services.auth import AuthService, BcryptPasswordHasher
from coffee_tracker.services.brewing import BrewingMethodRepository, BrewingService
from coffee_tracker.services.cache import InMemoryCache
from coffee_tracker.services.coffee_log import CoffeeLogRepository, CoffeeLogService
from coffee_tracker.services.nutrition import NutritionService
from coffee_tracker.services.recipes import RecipeRepository, RecipeService
from coffee_tracker.services.stats import HealthStatsService
from coffee_tracker.services.users import UserRepository, UserService

_DEMO_USERNAME = "demo"
_DEMO_PASSWORD = "demo"

_logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    nutrition_service: NutritionService
    user_service: UserService
    auth_service: AuthService
    recipe_service: RecipeService
    coffee_log_service: CoffeeLogService
    health_stats_service: HealthStatsService
    brewing_service: BrewingService
    close_resources: Callable[[], Awaitable[None]]


@dataclass
class _Repositories:
    users: UserRepository
    recipes: RecipeRepository
    coffee_log: CoffeeLogRepository
    brewing: BrewingMethodRepository


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    repositories = _build_repositories(resolved_settings)

    nutrition_service = NutritionService()
    user_service = UserService(repositories.users)
    sessions = InMemoryCache()
    auth_service = AuthService(
        repository=repositories.users,
        hasher=BcryptPasswordHasher(rounds=resolved_settings.bcrypt_rounds),
        sessions=sessions,
        session_ttl_seconds=resolved_settings.session_ttl_seconds,
    )
    recipe_service = RecipeService(
        repository=repositories.recipes,
        nutrition_service=nutrition_service,
    )
    coffee_log_service = CoffeeLogService(
        repository=repositories.coffee_log,
        recipe_service=recipe_service,
        timezone_name=resolved_settings.timezone,
    )
    health_stats_service = HealthStatsService(
        repository=repositories.coffee_log,
        timezone_name=resolved_settings.timezone,
    )
    brewing_service = BrewingService(repositories.brewing)

    brewing_service.seed_defaults()
    if resolved_settings.seed_demo_user:
        auth_service.sign_up(_DEMO_USERNAME, _DEMO_PASSWORD)

    async def close_resources() -> None:
        dropped = sessions.clear()
        _logger.info("Dropped %s sessions on shutdown", dropped)

    return AppContainer(
        settings=resolved_settings,
        nutrition_service=nutrition_service,
        user_service=user_service,
        auth_service=auth_service,
        recipe_service=recipe_service,
        coffee_log_service=coffee_log_service,
        health_stats_service=health_stats_service,
        brewing_service=brewing_service,
        close_resources=close_resources,
    )


def _build_repositories(settings: Settings) -> _Repositories:
    backend = parse_storage_backend(settings.storage_backend)
    _logger.info("Using %s storage backend", backend)
    if backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError(
                "SUPABASE_URL and SUPABASE_SERVICE_KEY are required for Supabase"
            )
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return _Repositories(
            users=SupabaseUserRepository(client),
            recipes=SupabaseRecipeRepository(client),
            coffee_log=SupabaseCoffeeLogRepository(client),
            brewing=SupabaseBrewingMethodRepository(client),
        )
    return _Repositories(
        users=InMemoryUserRepository(),
        recipes=InMemoryRecipeRepository(),
        coffee_log=InMemoryCoffeeLogRepository(),
        brewing=InMemoryBrewingMethodRepository(),
    )
