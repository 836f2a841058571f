"""Pydantic request/response schemas."""

from jobboard.schemas.applications import (
    AdminApplicationItem,
    ApplicationOut,
    MemberApplicationDetail,
    MemberApplicationItem,
)
from jobboard.schemas.auth import AuthResponse, LoginRequest, RegisterRequest, UserSummary
from jobboard.schemas.health import HealthResponse
from jobboard.schemas.pagination import ListParams, Pagination
from jobboard.schemas.users import UserContact, UserOut
from jobboard.schemas.vacancies import VacancyDetail, VacancyOut

__all__ = [
    "AdminApplicationItem",
    "ApplicationOut",
    "AuthResponse",
    "HealthResponse",
    "ListParams",
    "LoginRequest",
    "MemberApplicationDetail",
    "MemberApplicationItem",
    "Pagination",
    "RegisterRequest",
    "UserContact",
    "UserOut",
    "UserSummary",
    "VacancyDetail",
    "VacancyOut",
]
