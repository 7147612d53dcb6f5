"""Tests for container wiring."""

import asyncio

import pytest
from fastapi.testclient import TestClient

from coffee_tracker.api.app import create_app
from coffee_tracker.config import Settings
from coffee_tracker.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.recipe_service is not None
    assert len(container.brewing_service.list_methods()) == 3
    assert container.user_service.repository.get_by_username("demo") is None
    asyncio.run(container.close_resources())


def test_build_container_seeds_demo_user() -> None:
    settings = Settings(storage_backend="memory", seed_demo_user=True, bcrypt_rounds=4)

    container = build_container(settings)

    result = container.auth_service.login("demo", "demo")
    assert result is not None
    user, _ = result
    assert user.daily_caffeine_goal == 400


def test_supabase_backend_requires_credentials() -> None:
    settings = Settings(
        storage_backend="supabase",
        supabase_url=None,
        supabase_service_key=None,
        seed_demo_user=False,
    )

    with pytest.raises(ValueError, match="SUPABASE_URL"):
        build_container(settings)


def test_close_resources_drops_sessions(settings) -> None:
    container = build_container(settings)
    container.auth_service.sign_up("alice", "secret")
    result = container.auth_service.login("alice", "secret")
    assert result is not None
    _, token = result

    asyncio.run(container.close_resources())

    assert container.auth_service.resolve_session(token) is None


def test_app_shutdown_closes_resources(settings) -> None:
    container = build_container(settings)
    container.auth_service.sign_up("alice", "secret")
    result = container.auth_service.login("alice", "secret")
    assert result is not None
    _, token = result

    with TestClient(create_app(container)) as client:
        headers = {"Authorization": f"Bearer {token}"}
        assert client.get("/api/auth/me", headers=headers).status_code == 200

    assert container.auth_service.resolve_session(token) is None
