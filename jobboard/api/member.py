"""Member endpoints: the caller's own applications only."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jobboard.api.deps import MemberUser
from jobboard.core.database import get_db
from jobboard.core.errors import store_errors
from jobboard.schemas.applications import (
    MemberApplicationDetail,
    MemberApplicationItem,
    MemberApplicationsResponse,
)
from jobboard.services.applications import get_member_application, list_member_applications

router = APIRouter()


@router.get("/applications", response_model=MemberApplicationsResponse)
def get_applications(
    member: MemberUser,
    db: Annotated[Session, Depends(get_db)],
) -> MemberApplicationsResponse:
    """Applications submitted by the caller, newest first, with a vacancy summary."""
    with store_errors("Failed to fetch applications", db):
        applications = list_member_applications(db, member.id)
        return MemberApplicationsResponse(
            applications=[MemberApplicationItem.model_validate(a) for a in applications]
        )


@router.get("/applications/{application_id}", response_model=MemberApplicationDetail)
def get_application_by_id(
    application_id: int,
    member: MemberUser,
    db: Annotated[Session, Depends(get_db)],
) -> MemberApplicationDetail:
    """One of the caller's applications with full vacancy details; 404 for anyone else's."""
    with store_errors("Failed to fetch application", db):
        application = get_member_application(db, member.id, application_id)
        return MemberApplicationDetail.model_validate(application)
