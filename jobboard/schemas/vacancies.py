"""Schemas for job vacancies: public listing/details and admin management."""

from datetime import datetime

from pydantic import BaseModel, Field

from jobboard.schemas.pagination import Pagination
from jobboard.schemas.users import UserContact


class VacancyOut(BaseModel):
    """Job vacancy as stored."""

    model_config = {"from_attributes": True}

    id: int
    title: str
    company: str
    location: str
    description: str
    requirements: str
    salary: str | None = None
    status: str
    created_by: int
    created_at: datetime | None = None
    updated_at: datetime | None = None


class VacancyDetail(VacancyOut):
    """Public details: vacancy plus its creator."""

    creator: UserContact


class VacancyListItem(VacancyOut):
    """Admin listing entry with the number of applications received."""

    application_count: int = 0


class VacancyApplicant(BaseModel):
    """Application as seen from the vacancy it targets."""

    model_config = {"from_attributes": True}

    id: int
    user_id: int
    cover_letter: str | None = None
    status: str
    created_at: datetime | None = None
    user: UserContact


class VacancyAdminDetail(VacancyDetail):
    applications: list[VacancyApplicant]


class VacancyCreateRequest(BaseModel):
    """Fields are optional here so the handler can answer 400 with a single message."""

    model_config = {"extra": "ignore"}

    title: str | None = None
    company: str | None = None
    location: str | None = None
    description: str | None = None
    requirements: str | None = None
    salary: str | None = None
    status: str | None = Field(default=None, description="ACTIVE or CLOSED; defaults to ACTIVE")


class VacancyUpdateRequest(BaseModel):
    """Partial update; omitted fields are left unchanged."""

    model_config = {"extra": "ignore"}

    title: str | None = None
    company: str | None = None
    location: str | None = None
    description: str | None = None
    requirements: str | None = None
    salary: str | None = None
    status: str | None = None


class PublicVacanciesResponse(BaseModel):
    vacancies: list[VacancyOut]
    pagination: Pagination


class AdminVacanciesResponse(BaseModel):
    vacancies: list[VacancyListItem]
    pagination: Pagination


class VacancyMutationResponse(BaseModel):
    message: str
    vacancy: VacancyOut
