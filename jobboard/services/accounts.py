"""Account creation and credential checks shared by registration, login and admin user management."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobboard.core.errors import AuthenticationError, ConflictError, ValidationError
from jobboard.core.security import (
    EMAIL_MAX_LEN,
    NAME_MAX_LEN,
    PASSWORD_MAX_LEN,
    hash_password,
    verify_password,
)
from jobboard.models import Role, User

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL_MESSAGE = "User with this email already exists"
INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"
INVALID_ROLE_MESSAGE = "Role must be ADMIN or MEMBER"

# Spends the same bcrypt work on unknown emails as on wrong passwords.
_DUMMY_HASH = hash_password("jobboard-timing-equalizer")


def parse_role(value: str | None, default: Role | None = Role.MEMBER) -> Role:
    """
    Map a free-form role string to Role.

    None/blank gives default; with default=None a blank role is invalid too (400).
    """
    if (value is None or not str(value).strip()) and default is not None:
        return default
    try:
        return Role.parse(value)
    except ValueError as e:
        raise ValidationError(INVALID_ROLE_MESSAGE) from e


def check_lengths(
    email: str | None = None, password: str | None = None, name: str | None = None
) -> None:
    """Reject values longer than the stored columns allow; None skips a field."""
    if email is not None and len(email) > EMAIL_MAX_LEN:
        raise ValidationError(f"Email must be at most {EMAIL_MAX_LEN} characters")
    if name is not None and len(name) > NAME_MAX_LEN:
        raise ValidationError(f"Name must be at most {NAME_MAX_LEN} characters")
    if password is not None and len(password) > PASSWORD_MAX_LEN:
        raise ValidationError(f"Password must be at most {PASSWORD_MAX_LEN} characters")


def find_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email).first()


def create_user(db: Session, email: str, password: str, name: str, role: Role) -> User:
    """
    Persist a new user with a hashed password.

    The email lookup is a fast path; the unique index decides when two requests race,
    and its IntegrityError is reported as the same duplicate-email error.
    """
    check_lengths(email, password, name)
    if find_by_email(db, email) is not None:
        raise ConflictError(DUPLICATE_EMAIL_MESSAGE)

    user = User(
        email=email,
        password_hash=hash_password(password),
        name=name,
        role=role.value,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError(DUPLICATE_EMAIL_MESSAGE) from e
    db.refresh(user)
    logger.info("User created", extra={"user_id": user.id, "role": user.role})
    return user


def authenticate(db: Session, email: str | None, password: str | None) -> User:
    """
    Return the user for valid credentials.

    Unknown email and wrong password raise the same AuthenticationError so callers
    cannot tell which one failed.
    """
    if not email or not password:
        raise ValidationError("Email and password are required")

    user = find_by_email(db, email)
    if user is None:
        verify_password(password, _DUMMY_HASH)
        logger.warning("Login failed", extra={"reason": "unknown_email"})
        raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)
    if not verify_password(password, user.password_hash):
        logger.warning("Login failed", extra={"reason": "bad_password", "user_id": user.id})
        raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)
    return user
