"""Account endpoints with cookie sessions."""

from fastapi import APIRouter, Depends, HTTPException, Response, status

from coffee_tracker.api.dependencies import (
    SESSION_COOKIE_NAME,
    get_container,
    get_session_token,
    require_user,
)
from coffee_tracker.api.models import (
    AuthResponse,
    LoginRequest,
    SignupRequest,
    UserResponse,
)
from coffee_tracker.containers import AppContainer
from coffee_tracker.domain.models import UserRecord

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/signup")
async def signup(
    payload: SignupRequest, container: AppContainer = Depends(get_container)
) -> UserResponse:
    """Create an account."""
    user = container.auth_service.sign_up(
        payload.username, payload.password, payload.daily_caffeine_goal
    )
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail="Username already taken"
        )
    return UserResponse.from_record(user)


@router.post("/login")
async def login(
    payload: LoginRequest,
    response: Response,
    container: AppContainer = Depends(get_container),
) -> AuthResponse:
    """Verify credentials and set the session cookie."""
    result = container.auth_service.login(payload.username, payload.password)
    if result is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
        )
    user, token = result
    response.set_cookie(
        SESSION_COOKIE_NAME,
        token,
        httponly=True,
        secure=container.settings.cookie_secure,
        samesite="lax",
        max_age=container.settings.session_ttl_seconds,
        path="/",
    )
    return AuthResponse(user=UserResponse.from_record(user), token=token)


@router.post("/logout")
async def logout(
    response: Response,
    token: str | None = Depends(get_session_token),
    container: AppContainer = Depends(get_container),
) -> dict[str, str]:
    """Drop the session and clear the cookie."""
    if token:
        container.auth_service.logout(token)
    response.delete_cookie(SESSION_COOKIE_NAME, path="/")
    return {"status": "ok"}


@router.get("/me")
async def me(user: UserRecord = Depends(require_user)) -> UserResponse:
    """Return the logged-in user."""
    return UserResponse.from_record(user)
