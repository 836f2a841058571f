"""Application queries: owner-filtered member views and admin review."""

import logging

from sqlalchemy.orm import Session, joinedload

from jobboard.core.errors import NotFoundError, ValidationError
from jobboard.models import Application, ApplicationStatus
from jobboard.schemas.pagination import ListParams

logger = logging.getLogger(__name__)

APPLICATION_NOT_FOUND_MESSAGE = "Application not found"
INVALID_STATUS_MESSAGE = "Valid status is required"


def list_member_applications(db: Session, user_id: int) -> list[Application]:
    """All applications owned by user_id, newest first, with their vacancy loaded."""
    return (
        db.query(Application)
        .options(joinedload(Application.job_vacancy))
        .filter(Application.user_id == user_id)
        .order_by(Application.created_at.desc(), Application.id.desc())
        .all()
    )


def get_member_application(db: Session, user_id: int, application_id: int) -> Application:
    """
    Fetch one application by id AND owner in a single query.

    Someone else's application is indistinguishable from a missing one (404).
    """
    application = (
        db.query(Application)
        .options(joinedload(Application.job_vacancy))
        .filter(Application.id == application_id, Application.user_id == user_id)
        .first()
    )
    if application is None:
        raise NotFoundError(APPLICATION_NOT_FOUND_MESSAGE)
    return application


def list_applications(
    db: Session,
    params: ListParams,
    status: ApplicationStatus | None = None,
    vacancy_id: int | None = None,
) -> tuple[list[Application], int]:
    """Admin view: one page of all applications with applicant and vacancy loaded."""
    query = db.query(Application)
    if status is not None:
        query = query.filter(Application.status == status.value)
    if vacancy_id is not None:
        query = query.filter(Application.job_vacancy_id == vacancy_id)
    total = query.count()
    applications = (
        query.options(joinedload(Application.user), joinedload(Application.job_vacancy))
        .order_by(Application.created_at.desc(), Application.id.desc())
        .offset(params.offset)
        .limit(params.limit)
        .all()
    )
    return applications, total


def get_application(db: Session, application_id: int) -> Application:
    application = (
        db.query(Application)
        .options(joinedload(Application.user), joinedload(Application.job_vacancy))
        .filter(Application.id == application_id)
        .first()
    )
    if application is None:
        raise NotFoundError(APPLICATION_NOT_FOUND_MESSAGE)
    return application


def update_application_status(db: Session, application_id: int, status: str | None) -> Application:
    """Set the review status of an application; unknown statuses are a 400."""
    application = get_application(db, application_id)
    try:
        new_status = ApplicationStatus.parse(status)
    except ValueError as e:
        raise ValidationError(INVALID_STATUS_MESSAGE) from e
    application.status = new_status.value
    db.commit()
    db.refresh(application)
    logger.info(
        "Application status updated",
        extra={"application_id": application_id, "status": new_status.value},
    )
    return application
