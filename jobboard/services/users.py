"""Admin user management: listing, updates and deletes with self-action prevention."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobboard.core.errors import ConflictError, NotFoundError, ValidationError
from jobboard.core.security import hash_password
from jobboard.models import Role, User
from jobboard.schemas.pagination import ListParams
from jobboard.schemas.users import UserUpdateRequest
from jobboard.services.accounts import (
    DUPLICATE_EMAIL_MESSAGE,
    check_lengths,
    find_by_email,
    parse_role,
)

logger = logging.getLogger(__name__)

USER_NOT_FOUND_MESSAGE = "User not found"
OWN_ROLE_MESSAGE = "Cannot change your own role"
OWN_ACCOUNT_DELETE_MESSAGE = "Cannot delete your own account"


def list_users(db: Session, params: ListParams, role: Role | None = None) -> tuple[list[User], int]:
    """Return one page of users (newest first) and the total matching the role filter."""
    query = db.query(User)
    if role is not None:
        query = query.filter(User.role == role.value)
    total = query.count()
    users = (
        query.order_by(User.created_at.desc(), User.id.desc())
        .offset(params.offset)
        .limit(params.limit)
        .all()
    )
    return users, total


def get_user(db: Session, user_id: int) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        raise NotFoundError(USER_NOT_FOUND_MESSAGE)
    return user


def update_user(db: Session, acting_user: User, user_id: int, body: UserUpdateRequest) -> User:
    """
    Apply a partial update to a user.

    An administrator may not send a role for their own account, whatever the value.
    """
    user = get_user(db, user_id)

    if body.role is not None and user.id == acting_user.id:
        logger.warning("Self role change denied", extra={"user_id": acting_user.id})
        raise ValidationError(OWN_ROLE_MESSAGE)

    # Validate everything before touching the record.
    email = body.email.strip() if body.email is not None else None
    name = body.name.strip() if body.name is not None else None
    if email is not None and not email:
        raise ValidationError("Email must not be empty")
    if name is not None and not name:
        raise ValidationError("Name must not be empty")
    check_lengths(email=email, password=body.password, name=name)
    role = parse_role(body.role, default=None) if body.role is not None else None
    if email is not None and email != user.email and find_by_email(db, email) is not None:
        raise ConflictError(DUPLICATE_EMAIL_MESSAGE)

    if email is not None:
        user.email = email
    if name is not None:
        user.name = name
    if body.password:
        user.password_hash = hash_password(body.password)
    if role is not None:
        user.role = role.value

    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError(DUPLICATE_EMAIL_MESSAGE) from e
    db.refresh(user)
    return user


def delete_user(db: Session, acting_user: User, user_id: int) -> None:
    """Delete a user with their applications and vacancies; an administrator may not delete themselves."""
    user = get_user(db, user_id)
    if user.id == acting_user.id:
        logger.warning("Self delete denied", extra={"user_id": acting_user.id})
        raise ValidationError(OWN_ACCOUNT_DELETE_MESSAGE)
    db.delete(user)
    db.commit()
    logger.info("User deleted", extra={"user_id": user_id, "deleted_by": acting_user.id})
