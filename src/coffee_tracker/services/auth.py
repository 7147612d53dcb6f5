"""Credential verification and session tokens."""

import logging
import secrets
from dataclasses import dataclass
from typing import Protocol

import bcrypt

from coffee_tracker.domain.models import DEFAULT_DAILY_CAFFEINE_GOAL, UserRecord
from coffee_tracker.services.cache import Cache
from coffee_tracker.services.users import UserRepository

_SESSION_PREFIX = "session:"
# bcrypt only accepts this many input bytes.
MAX_PASSWORD_BYTES = 72

_logger = logging.getLogger(__name__)


class PasswordHasher(Protocol):
    """Hashes and verifies passwords."""

    def hash(self, password: str) -> str:
        """Return a storable hash for ``password``."""

    def verify(self, password: str, password_hash: str) -> bool:
        """Return True when ``password`` matches ``password_hash``."""


@dataclass
class BcryptPasswordHasher(PasswordHasher):
    """bcrypt-backed password hasher."""

    rounds: int = 12

    def hash(self, password: str) -> str:
        """Hash a password with a fresh salt."""
        encoded = password.encode()
        if len(encoded) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password exceeds {MAX_PASSWORD_BYTES} bytes")
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(encoded, salt).decode()

    def verify(self, password: str, password_hash: str) -> bool:
        """Check a password against a stored bcrypt hash."""
        try:
            return bcrypt.checkpw(password.encode(), password_hash.encode())
        except ValueError:
            return False


@dataclass
class AuthService:
    """Signs users up, logs them in and resolves session tokens."""

    repository: UserRepository
    hasher: PasswordHasher
    sessions: Cache
    session_ttl_seconds: int = 7 * 24 * 3600

    def sign_up(
        self,
        username: str,
        password: str,
        daily_caffeine_goal: int = DEFAULT_DAILY_CAFFEINE_GOAL,
    ) -> UserRecord | None:
        """Create an account; return None when the username is taken."""
        if self.repository.get_by_username(username) is not None:
            return None
        user = self.repository.create_user(
            username=username,
            password_hash=self.hasher.hash(password),
            daily_caffeine_goal=daily_caffeine_goal,
        )
        _logger.info("Created user %s", user.id)
        return user

    def login(self, username: str, password: str) -> tuple[UserRecord, str] | None:
        """Verify credentials and issue a session token."""
        user = self.repository.get_by_username(username)
        if user is None or not self.hasher.verify(password, user.password_hash):
            return None
        token = secrets.token_urlsafe(32)
        self.sessions.set(
            _SESSION_PREFIX + token, user.id, ttl_seconds=self.session_ttl_seconds
        )
        return user, token

    def resolve_session(self, token: str) -> UserRecord | None:
        """Return the user a session token belongs to, if still valid."""
        user_id = self.sessions.get(_SESSION_PREFIX + token)
        if not isinstance(user_id, int):
            return None
        return self.repository.get_user(user_id)

    def logout(self, token: str) -> None:
        """Invalidate a session token."""
        self.sessions.delete(_SESSION_PREFIX + token)
