"""Registration, login, logout and current-identity endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from fastapi.security import HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from jobboard.api.deps import CurrentUser, check_role, resolve_user, security
from jobboard.core.config import Settings, get_settings
from jobboard.core.database import get_db
from jobboard.core.errors import ValidationError, store_errors
from jobboard.core.security import TokenCodec, get_token_codec
from jobboard.models import Role
from jobboard.schemas.auth import (
    AuthResponse,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    UserSummary,
)
from jobboard.services.accounts import authenticate, create_user, parse_role

logger = logging.getLogger(__name__)
router = APIRouter()


def _set_auth_cookie(response: Response, token: str, settings: Settings, codec: TokenCodec) -> None:
    response.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value=token,
        max_age=int(codec.lifetime.total_seconds()),
        httponly=True,
        secure=settings.AUTH_COOKIE_SECURE,
        samesite=settings.AUTH_COOKIE_SAMESITE,
    )


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    response: Response,
    db: Annotated[Session, Depends(get_db)],
    codec: Annotated[TokenCodec, Depends(get_token_codec)],
    settings: Annotated[Settings, Depends(get_settings)],
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> AuthResponse:
    """
    Create an account and return a bearer token (also set as the `token` cookie).

    Role defaults to MEMBER. Requesting ADMIN needs the Bearer token of an existing
    administrator unless ALLOW_ADMIN_SELF_REGISTRATION is enabled.
    """
    email = (body.email or "").strip()
    name = (body.name or "").strip()
    if not email or not body.password or not name:
        raise ValidationError("Email, password, and name are required")

    role = parse_role(body.role)
    if role is Role.ADMIN and not settings.ALLOW_ADMIN_SELF_REGISTRATION:
        actor = resolve_user(credentials.credentials if credentials else None, db, codec)
        check_role(actor, Role.ADMIN)

    with store_errors("Failed to register user", db):
        user = create_user(db, email, body.password, name, role)

    token = codec.issue(user.id)
    _set_auth_cookie(response, token, settings, codec)
    return AuthResponse(
        message="User registered successfully",
        token=token,
        user=UserSummary.model_validate(user),
    )


@router.post("/login", response_model=AuthResponse)
def login(
    body: LoginRequest,
    response: Response,
    db: Annotated[Session, Depends(get_db)],
    codec: Annotated[TokenCodec, Depends(get_token_codec)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AuthResponse:
    """
    Authenticate with email and password; returns a bearer token.
    Include the token in the Authorization header as: Bearer <token>
    """
    with store_errors("Failed to log in", db):
        user = authenticate(db, body.email, body.password)
    token = codec.issue(user.id)
    _set_auth_cookie(response, token, settings, codec)
    return AuthResponse(
        message="Login successful",
        token=token,
        user=UserSummary.model_validate(user),
    )


@router.post("/logout", response_model=MessageResponse)
def logout(
    response: Response,
    settings: Annotated[Settings, Depends(get_settings)],
) -> MessageResponse:
    """Clear the session cookie. Issued tokens stay valid until they expire."""
    response.delete_cookie(settings.AUTH_COOKIE_NAME)
    return MessageResponse(message="Logged out successfully")


@router.get("/me", response_model=UserSummary)
def me(current_user: CurrentUser) -> UserSummary:
    """Return the identity behind the presented Bearer token."""
    return UserSummary.model_validate(current_user)
