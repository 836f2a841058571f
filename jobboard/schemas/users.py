"""Schemas for admin user management."""

from datetime import datetime

from pydantic import BaseModel, Field

from jobboard.schemas.pagination import Pagination


class UserContact(BaseModel):
    """Public contact block for applicants and vacancy creators."""

    model_config = {"from_attributes": True}

    id: int
    name: str
    email: str


class UserOut(BaseModel):
    """User entry for admin endpoints (no password)."""

    model_config = {"from_attributes": True}

    id: int
    email: str
    name: str
    role: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class UserCreateRequest(BaseModel):
    model_config = {"extra": "ignore"}

    name: str | None = None
    email: str | None = None
    password: str | None = None
    role: str | None = Field(default=None, description="ADMIN or MEMBER; defaults to MEMBER")


class UserUpdateRequest(BaseModel):
    """Partial update; omitted fields are left unchanged."""

    model_config = {"extra": "ignore"}

    name: str | None = None
    email: str | None = None
    password: str | None = None
    role: str | None = None


class UsersListResponse(BaseModel):
    users: list[UserOut]
    pagination: Pagination


class UserMutationResponse(BaseModel):
    message: str
    user: UserOut
