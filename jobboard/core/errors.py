"""Error taxonomy shared by services and routes; rendered as {"error": message} by the app."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base for errors that map to an HTTP status and a user-facing message."""

    status_code: int = 500

    def __init__(self, message: str, details: str | None = None) -> None:
        self.message = message
        self.details = details
        super().__init__(message)


class ValidationError(AppError):
    """Missing or malformed input."""

    status_code = 400


class AuthenticationError(AppError):
    """Missing, invalid or expired credentials."""

    status_code = 401


class AuthorizationError(AppError):
    """Authenticated, but the role does not allow the operation."""

    status_code = 403


class NotFoundError(AppError):
    """Resource absent, or not owned by the caller."""

    status_code = 404


class ConflictError(AppError):
    """Uniqueness violation (duplicate email, duplicate application)."""

    status_code = 400


class InternalError(AppError):
    """Unexpected store failure; details carry the driver message for diagnosis."""

    status_code = 500


def _first_line(exc: Exception) -> str:
    text = str(getattr(exc, "orig", None) or exc).strip()
    return text.splitlines()[0] if text else type(exc).__name__


@contextmanager
def store_errors(message: str, db: Session | None = None) -> Iterator[None]:
    """
    Convert SQLAlchemy failures raised inside the block into InternalError(message).

    Rolls back the session when one is given. AppError subclasses pass through untouched.
    """
    try:
        yield
    except SQLAlchemyError as e:
        if db is not None:
            db.rollback()
        logger.exception("Store failure: %s", message)
        raise InternalError(message, details=_first_line(e)) from e
