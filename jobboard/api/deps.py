"""Auth dependencies: bearer session resolution and role guards for routes."""

import logging
from collections.abc import Callable
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from jobboard.core.database import get_db
from jobboard.core.errors import AuthenticationError, AuthorizationError
from jobboard.core.security import TokenCodec, TokenError, TokenExpiredError, get_token_codec
from jobboard.models import Role, User

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)

MISSING_TOKEN_MESSAGE = "Access token required"
EXPIRED_TOKEN_MESSAGE = "Token expired"
INVALID_TOKEN_MESSAGE = "Invalid token"

_ROLE_REQUIRED_MESSAGES = {
    Role.ADMIN: "Admin access required",
    Role.MEMBER: "Member access required",
}


def resolve_user(token: str | None, db: Session, codec: TokenCodec) -> User:
    """
    Turn a bearer token into the current user record, re-read from the store.

    Raises AuthenticationError: missing token, expired token, or invalid token. A token
    for a user that no longer exists is reported exactly like a forged one.
    """
    if not token:
        raise AuthenticationError(MISSING_TOKEN_MESSAGE)
    try:
        user_id = codec.verify(token)
    except TokenExpiredError as e:
        logger.info("Token rejected", extra={"reason": e.reason})
        raise AuthenticationError(EXPIRED_TOKEN_MESSAGE) from e
    except TokenError as e:
        logger.info("Token rejected", extra={"reason": e.reason})
        raise AuthenticationError(INVALID_TOKEN_MESSAGE) from e

    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        logger.info("Token rejected", extra={"reason": "unknown_user"})
        raise AuthenticationError(INVALID_TOKEN_MESSAGE)
    return user


def get_current_user(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
    codec: Annotated[TokenCodec, Depends(get_token_codec)],
) -> User:
    """Dependency: require a valid Bearer token; attach the user to request.state.user."""
    token = credentials.credentials if credentials is not None else None
    user = resolve_user(token, db, codec)
    request.state.user = user
    return user


def check_role(user: User | None, required: Role) -> User:
    """Authorization only: pass when user has the required role, else AuthorizationError (also for no user)."""
    if user is None or user.role != required.value:
        logger.info(
            "Role check failed",
            extra={"required_role": required.value, "user_id": getattr(user, "id", None)},
        )
        raise AuthorizationError(_ROLE_REQUIRED_MESSAGES[required])
    return user


def require_role(role: Role) -> Callable[..., User]:
    """Build a dependency that runs after get_current_user and checks the attached identity's role."""

    def _guard(
        request: Request,
        _authenticated: Annotated[User, Depends(get_current_user)],
    ) -> User:
        return check_role(getattr(request.state, "user", None), role)

    _guard.__name__ = f"require_{role.value.lower()}"
    return _guard


require_admin = require_role(Role.ADMIN)
require_member = require_role(Role.MEMBER)

CurrentUser = Annotated[User, Depends(get_current_user)]
AdminUser = Annotated[User, Depends(require_admin)]
MemberUser = Annotated[User, Depends(require_member)]
