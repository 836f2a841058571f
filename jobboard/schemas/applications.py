"""Schemas for applications: submission, member views and admin review."""

from datetime import datetime

from pydantic import BaseModel, Field

from jobboard.schemas.pagination import Pagination
from jobboard.schemas.users import UserContact
from jobboard.schemas.vacancies import VacancyOut


class VacancySummary(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    title: str
    company: str
    location: str


class ApplicationOut(BaseModel):
    """Application as stored."""

    model_config = {"from_attributes": True}

    id: int
    user_id: int
    job_vacancy_id: int
    cover_letter: str | None = None
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class MemberApplicationItem(ApplicationOut):
    job_vacancy: VacancySummary


class MemberApplicationDetail(ApplicationOut):
    job_vacancy: VacancyOut


class AdminApplicationItem(ApplicationOut):
    user: UserContact
    job_vacancy: VacancySummary


class ApplyRequest(BaseModel):
    model_config = {"extra": "ignore"}

    cover_letter: str | None = Field(default=None, description="Optional cover letter")


class ApplicationStatusUpdate(BaseModel):
    model_config = {"extra": "ignore"}

    status: str | None = Field(
        default=None,
        description="PENDING, REVIEWED, ACCEPTED or REJECTED (case-insensitive)",
    )


class MemberApplicationsResponse(BaseModel):
    applications: list[MemberApplicationItem]


class AdminApplicationsResponse(BaseModel):
    applications: list[AdminApplicationItem]
    pagination: Pagination


class ApplicationMutationResponse(BaseModel):
    message: str
    application: ApplicationOut
