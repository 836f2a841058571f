"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    """Self-registration payload. Presence of fields is checked by the handler (400, not 422)."""

    model_config = {"extra": "ignore"}

    email: str | None = Field(default=None, description="Unique email (case-sensitive)")
    password: str | None = Field(default=None, description="Plain password; stored hashed")
    name: str | None = Field(default=None, description="Display name")
    role: str | None = Field(
        default=None,
        description="Optional role, ADMIN or MEMBER (case-insensitive). ADMIN requires an admin token.",
    )


class LoginRequest(BaseModel):
    """Credentials for login."""

    model_config = {"extra": "ignore"}

    email: str | None = Field(default=None, description="Email")
    password: str | None = Field(default=None, description="Password")


class UserSummary(BaseModel):
    """Identity summary returned by auth endpoints (never the password hash)."""

    model_config = {"from_attributes": True}

    id: int
    email: str
    name: str
    role: str


class AuthResponse(BaseModel):
    """Token plus identity summary after registration or login."""

    message: str
    token: str = Field(..., description="Bearer token; send as Authorization: Bearer <token>")
    user: UserSummary


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str
