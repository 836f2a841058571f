"""Public vacancy listing/details and member applications to a vacancy."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from jobboard.api.deps import MemberUser
from jobboard.core.database import get_db
from jobboard.core.errors import store_errors
from jobboard.models import VacancyStatus
from jobboard.schemas.applications import ApplicationMutationResponse, ApplicationOut, ApplyRequest
from jobboard.schemas.pagination import ListParams, Pagination, list_params, parse_filter
from jobboard.schemas.vacancies import PublicVacanciesResponse, VacancyDetail, VacancyOut
from jobboard.services.vacancies import apply_to_vacancy, get_vacancy, list_vacancies

router = APIRouter()


@router.get("", response_model=PublicVacanciesResponse)
def get_public_listings(
    db: Annotated[Session, Depends(get_db)],
    params: Annotated[ListParams, Depends(list_params)],
    status_filter: Annotated[str | None, Query(alias="status")] = None,
) -> PublicVacanciesResponse:
    """List vacancies, newest first. Optional `status` filter (ACTIVE or CLOSED, any case)."""
    vacancy_status = parse_filter(VacancyStatus, status_filter, "status")
    with store_errors("Failed to fetch vacancies", db):
        vacancies, total = list_vacancies(db, params, vacancy_status)
        return PublicVacanciesResponse(
            vacancies=[VacancyOut.model_validate(v) for v in vacancies],
            pagination=Pagination.build(total, params),
        )


@router.get("/{vacancy_id}", response_model=VacancyDetail)
def get_details(
    vacancy_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> VacancyDetail:
    """Vacancy details with the creating administrator's contact."""
    with store_errors("Failed to fetch vacancy", db):
        vacancy = get_vacancy(db, vacancy_id)
        return VacancyDetail.model_validate(vacancy)


@router.post(
    "/{vacancy_id}/apply",
    response_model=ApplicationMutationResponse,
    status_code=status.HTTP_201_CREATED,
)
def apply(
    vacancy_id: int,
    member: MemberUser,
    db: Annotated[Session, Depends(get_db)],
    body: ApplyRequest | None = None,
) -> ApplicationMutationResponse:
    """Apply to an ACTIVE vacancy (members only, once per vacancy). Body and cover letter are optional."""
    cover_letter = body.cover_letter if body is not None else None
    with store_errors("Failed to submit application", db):
        application = apply_to_vacancy(db, member, vacancy_id, cover_letter)
        return ApplicationMutationResponse(
            message="Application submitted successfully",
            application=ApplicationOut.model_validate(application),
        )
