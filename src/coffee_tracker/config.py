"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

STORAGE_BACKENDS = {"memory", "supabase"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    storage_backend: str = "memory"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    timezone: str = "UTC"
    session_ttl_seconds: int = 7 * 24 * 3600
    cookie_secure: bool = False
    bcrypt_rounds: int = 12
    seed_demo_user: bool = True
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_storage_backend(raw: str | None) -> str:
    """Normalize the configured storage backend name."""
    if raw is None:
        return "memory"
    cleaned = raw.strip().lower()
    if not cleaned:
        return "memory"
    if cleaned not in STORAGE_BACKENDS:
        raise ValueError(f"Unknown storage backend: {raw}")
    return cleaned
