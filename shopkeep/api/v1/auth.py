"""Register, login, profile, refresh, logout, and the auth dependencies (get_current_user)."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from shopkeep.api.v1.common import commit_unique, ensure_unique
from shopkeep.core.database import get_db
from shopkeep.core.security import hash_password
from shopkeep.models import User
from shopkeep.schemas.auth import (
    CurrentUser,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    TokenResponse,
    UserRead,
)
from shopkeep.services import auth as auth_service
from shopkeep.services.auth import AuthError

logger = logging.getLogger(__name__)
router = APIRouter()
security = HTTPBearer(auto_error=False)


def _unauthenticated(e: AuthError) -> HTTPException:
    """Generic 401; the specific reason stays in the server log."""
    logger.info("Request not authenticated", extra={"reason": e.reason.value})
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthenticated.",
        headers={"WWW-Authenticate": "Bearer"},
    )


def _bearer_token(credentials: HTTPAuthorizationCredentials | None) -> str | None:
    return credentials.credentials if credentials is not None else None


def get_authenticated(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> tuple[User, dict[str, Any]]:
    """Dependency: validate the Bearer JWT and return (user, claims). Raises 401 on any failure."""
    try:
        return auth_service.authenticate(db, _bearer_token(credentials))
    except AuthError as e:
        raise _unauthenticated(e) from e


def get_current_user(
    authenticated: Annotated[tuple[User, dict[str, Any]], Depends(get_authenticated)],
) -> CurrentUser:
    """Dependency: require a valid Bearer JWT and return the current user."""
    user, _claims = authenticated
    return CurrentUser.model_validate(user)


def get_token_claims(
    authenticated: Annotated[tuple[User, dict[str, Any]], Depends(get_authenticated)],
) -> dict[str, Any]:
    """Dependency: claims of the validated token (used by logout to revoke it)."""
    _user, claims = authenticated
    return claims


@router.post("/register", response_model=UserRead, status_code=201)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
) -> User:
    """Create an account. Duplicate e-mail is a 422 on `email`."""
    ensure_unique(db, User.email, body.email, "email")
    user = User(
        name=body.name,
        email=body.email,
        password_hash=hash_password(body.password),
    )
    db.add(user)
    commit_unique(db, "email")
    db.refresh(user)
    logger.info("User registered", extra={"auth_event": "register", "user_id": user.id})
    return user


@router.post("/login", response_model=TokenResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> TokenResponse:
    """
    Authenticate with email and password; returns a JWT access token.
    Include the token in the Authorization header as: Bearer <access_token>
    """
    try:
        user = auth_service.login(db, body.email, body.password)
    except AuthError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password.",
        ) from e
    return auth_service.issue_token(user)


@router.api_route("/profile", methods=["GET", "POST"], response_model=UserRead)
def profile(
    authenticated: Annotated[tuple[User, dict[str, Any]], Depends(get_authenticated)],
) -> User:
    """Return the authenticated user."""
    user, _claims = authenticated
    return user


@router.post("/refresh", response_model=TokenResponse)
def refresh(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> TokenResponse:
    """
    Exchange the Bearer token for a new one. An expired token is accepted while
    its refresh window is open; the old token is invalidated.
    """
    try:
        return auth_service.refresh(db, _bearer_token(credentials))
    except AuthError as e:
        raise _unauthenticated(e) from e


@router.post("/logout", response_model=MessageResponse)
def logout(
    claims: Annotated[dict[str, Any], Depends(get_token_claims)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Invalidate the presented token."""
    auth_service.logout(db, claims)
    return MessageResponse(message="Successfully logged out")
