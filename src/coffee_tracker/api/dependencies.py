"""Shared FastAPI dependencies."""

from fastapi import Depends, HTTPException, Request, status

from coffee_tracker.containers import AppContainer
from coffee_tracker.domain.models import UserRecord

SESSION_COOKIE_NAME = "coffee_session"


def get_container(request: Request) -> AppContainer:
    """Return the container attached to the running app."""
    return request.app.state.container


def get_session_token(request: Request) -> str | None:
    """Read a session token from the Authorization header or the cookie."""
    auth = request.headers.get("authorization") or ""
    if auth.lower().startswith("bearer "):
        token = auth.split(" ", 1)[1].strip()
        return token or None
    return request.cookies.get(SESSION_COOKIE_NAME) or None


async def require_user(
    token: str | None = Depends(get_session_token),
    container: AppContainer = Depends(get_container),
) -> UserRecord:
    """Resolve the logged-in user or reject the request."""
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated"
        )
    user = container.auth_service.resolve_session(token)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Session expired"
        )
    return user
