"""Job vacancy queries and mutations, and applying to a vacancy."""

import logging

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload, selectinload

from jobboard.core.errors import ConflictError, NotFoundError, ValidationError
from jobboard.models import Application, ApplicationStatus, JobVacancy, User, VacancyStatus
from jobboard.schemas.pagination import ListParams
from jobboard.schemas.vacancies import VacancyCreateRequest, VacancyUpdateRequest

logger = logging.getLogger(__name__)

VACANCY_NOT_FOUND_MESSAGE = "Job vacancy not found"
NOT_ACCEPTING_MESSAGE = "This job vacancy is not accepting applications"
ALREADY_APPLIED_MESSAGE = "You have already applied to this job"
REQUIRED_FIELDS_MESSAGE = (
    "Title, company, location, description, and requirements are required"
)

_REQUIRED_FIELDS = ("title", "company", "location", "description", "requirements")
# Columns stored as String(255); description and requirements are Text.
VACANCY_FIELD_MAX_LEN = 255
_BOUNDED_FIELDS = ("title", "company", "location", "salary")


def _check_lengths(values: dict[str, str | None]) -> None:
    for name in _BOUNDED_FIELDS:
        value = values.get(name)
        if value is not None and len(value) > VACANCY_FIELD_MAX_LEN:
            raise ValidationError(
                f"{name.capitalize()} must be at most {VACANCY_FIELD_MAX_LEN} characters"
            )


def _parse_status(value: str | None, default: VacancyStatus | None = None) -> VacancyStatus | None:
    if value is None:
        return default
    try:
        return VacancyStatus.parse(value)
    except ValueError as e:
        raise ValidationError("Status must be ACTIVE or CLOSED") from e


def list_vacancies(
    db: Session, params: ListParams, status: VacancyStatus | None = None
) -> tuple[list[JobVacancy], int]:
    """Return one page of vacancies (newest first) and the total matching the status filter."""
    query = db.query(JobVacancy)
    if status is not None:
        query = query.filter(JobVacancy.status == status.value)
    total = query.count()
    vacancies = (
        query.order_by(JobVacancy.created_at.desc(), JobVacancy.id.desc())
        .offset(params.offset)
        .limit(params.limit)
        .all()
    )
    return vacancies, total


def count_applications(db: Session, vacancy_ids: list[int]) -> dict[int, int]:
    """Map vacancy id to number of applications, for the ids given."""
    if not vacancy_ids:
        return {}
    rows = (
        db.query(Application.job_vacancy_id, func.count(Application.id))
        .filter(Application.job_vacancy_id.in_(vacancy_ids))
        .group_by(Application.job_vacancy_id)
        .all()
    )
    return {vacancy_id: count for vacancy_id, count in rows}


def get_vacancy(db: Session, vacancy_id: int, with_applications: bool = False) -> JobVacancy:
    query = db.query(JobVacancy).options(joinedload(JobVacancy.creator))
    if with_applications:
        query = query.options(
            selectinload(JobVacancy.applications).joinedload(Application.user)
        )
    vacancy = query.filter(JobVacancy.id == vacancy_id).first()
    if vacancy is None:
        raise NotFoundError(VACANCY_NOT_FOUND_MESSAGE)
    return vacancy


def create_vacancy(db: Session, creator: User, body: VacancyCreateRequest) -> JobVacancy:
    """Create a vacancy owned by the calling administrator."""
    values = {name: (getattr(body, name) or "").strip() for name in _REQUIRED_FIELDS}
    if not all(values.values()):
        raise ValidationError(REQUIRED_FIELDS_MESSAGE)
    _check_lengths({**values, "salary": body.salary})

    vacancy = JobVacancy(
        **values,
        salary=body.salary,
        status=_parse_status(body.status, VacancyStatus.ACTIVE).value,
        created_by=creator.id,
    )
    db.add(vacancy)
    db.commit()
    db.refresh(vacancy)
    logger.info("Vacancy created", extra={"vacancy_id": vacancy.id, "created_by": creator.id})
    return vacancy


def update_vacancy(db: Session, vacancy_id: int, body: VacancyUpdateRequest) -> JobVacancy:
    """Apply a partial update; required text fields may not be blanked."""
    vacancy = get_vacancy(db, vacancy_id)
    updates: dict[str, str] = {}
    for name in _REQUIRED_FIELDS:
        value = getattr(body, name)
        if value is None:
            continue
        if not value.strip():
            raise ValidationError(f"{name.capitalize()} must not be empty")
        updates[name] = value.strip()
    if body.salary is not None:
        updates["salary"] = body.salary
    _check_lengths(updates)
    if body.status is not None:
        updates["status"] = _parse_status(body.status).value

    for name, value in updates.items():
        setattr(vacancy, name, value)
    db.commit()
    db.refresh(vacancy)
    return vacancy


def delete_vacancy(db: Session, vacancy_id: int) -> None:
    """Delete a vacancy together with its applications."""
    vacancy = get_vacancy(db, vacancy_id)
    db.delete(vacancy)
    db.commit()
    logger.info("Vacancy deleted", extra={"vacancy_id": vacancy_id})


def apply_to_vacancy(
    db: Session, applicant: User, vacancy_id: int, cover_letter: str | None
) -> Application:
    """
    Submit an application for the caller.

    Rejects vacancies that are not ACTIVE and repeat applications. The lookup is a
    fast path; the (user, vacancy) unique constraint settles concurrent submissions.
    """
    vacancy = db.query(JobVacancy).filter(JobVacancy.id == vacancy_id).first()
    if vacancy is None:
        raise NotFoundError(VACANCY_NOT_FOUND_MESSAGE)
    if vacancy.status != VacancyStatus.ACTIVE.value:
        raise ValidationError(NOT_ACCEPTING_MESSAGE)

    existing = (
        db.query(Application)
        .filter(Application.user_id == applicant.id, Application.job_vacancy_id == vacancy_id)
        .first()
    )
    if existing is not None:
        raise ConflictError(ALREADY_APPLIED_MESSAGE)

    application = Application(
        user_id=applicant.id,
        job_vacancy_id=vacancy_id,
        cover_letter=cover_letter or None,
        status=ApplicationStatus.PENDING.value,
    )
    db.add(application)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError(ALREADY_APPLIED_MESSAGE) from e
    db.refresh(application)
    logger.info(
        "Application submitted",
        extra={"application_id": application.id, "vacancy_id": vacancy_id, "user_id": applicant.id},
    )
    return application
