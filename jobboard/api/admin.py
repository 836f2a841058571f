"""Admin endpoints: user, vacancy and application management (ADMIN role only)."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from jobboard.api.deps import AdminUser
from jobboard.core.database import get_db
from jobboard.core.errors import ValidationError, store_errors
from jobboard.models import ApplicationStatus, Role, VacancyStatus
from jobboard.schemas.applications import (
    AdminApplicationItem,
    AdminApplicationsResponse,
    ApplicationMutationResponse,
    ApplicationOut,
    ApplicationStatusUpdate,
)
from jobboard.schemas.auth import MessageResponse
from jobboard.schemas.pagination import ListParams, Pagination, list_params, parse_filter
from jobboard.schemas.users import (
    UserCreateRequest,
    UserMutationResponse,
    UserOut,
    UserUpdateRequest,
    UsersListResponse,
)
from jobboard.schemas.vacancies import (
    AdminVacanciesResponse,
    VacancyAdminDetail,
    VacancyCreateRequest,
    VacancyListItem,
    VacancyMutationResponse,
    VacancyOut,
    VacancyUpdateRequest,
)
from jobboard.services import applications as application_service
from jobboard.services import users as user_service
from jobboard.services import vacancies as vacancy_service
from jobboard.services.accounts import create_user, parse_role

router = APIRouter()


# ---- Users ----


@router.get("/users", response_model=UsersListResponse)
def get_users(
    _admin: AdminUser,
    db: Annotated[Session, Depends(get_db)],
    params: Annotated[ListParams, Depends(list_params)],
    role: Annotated[str | None, Query()] = None,
) -> UsersListResponse:
    """List users with pagination; optional `role` filter (ADMIN or MEMBER, any case)."""
    role_filter = parse_filter(Role, role, "role")
    with store_errors("Failed to fetch users", db):
        users, total = user_service.list_users(db, params, role_filter)
        return UsersListResponse(
            users=[UserOut.model_validate(u) for u in users],
            pagination=Pagination.build(total, params),
        )


@router.get("/users/{user_id}", response_model=UserOut)
def get_user_by_id(
    user_id: int,
    _admin: AdminUser,
    db: Annotated[Session, Depends(get_db)],
) -> UserOut:
    with store_errors("Failed to fetch user", db):
        return UserOut.model_validate(user_service.get_user(db, user_id))


@router.post("/users", response_model=UserMutationResponse, status_code=status.HTTP_201_CREATED)
def create_user_account(
    body: UserCreateRequest,
    _admin: AdminUser,
    db: Annotated[Session, Depends(get_db)],
) -> UserMutationResponse:
    """Create a user with any role."""
    name = (body.name or "").strip()
    email = (body.email or "").strip()
    if not name or not email or not body.password:
        raise ValidationError("Name, email, and password are required")
    role = parse_role(body.role)
    with store_errors("Failed to create user", db):
        user = create_user(db, email, body.password, name, role)
        return UserMutationResponse(
            message="User created successfully",
            user=UserOut.model_validate(user),
        )


@router.put("/users/{user_id}", response_model=UserMutationResponse)
def update_user_account(
    user_id: int,
    body: UserUpdateRequest,
    admin: AdminUser,
    db: Annotated[Session, Depends(get_db)],
) -> UserMutationResponse:
    """Update name, email, password or role. Administrators cannot change their own role."""
    with store_errors("Failed to update user", db):
        user = user_service.update_user(db, admin, user_id, body)
        return UserMutationResponse(
            message="User updated successfully",
            user=UserOut.model_validate(user),
        )


@router.delete("/users/{user_id}", response_model=MessageResponse)
def delete_user_account(
    user_id: int,
    admin: AdminUser,
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Delete a user and everything they own. Administrators cannot delete themselves."""
    with store_errors("Failed to delete user", db):
        user_service.delete_user(db, admin, user_id)
    return MessageResponse(message="User deleted successfully")


# ---- Vacancies ----


@router.get("/vacancies", response_model=AdminVacanciesResponse)
def get_vacancies(
    _admin: AdminUser,
    db: Annotated[Session, Depends(get_db)],
    params: Annotated[ListParams, Depends(list_params)],
    status_filter: Annotated[str | None, Query(alias="status")] = None,
) -> AdminVacanciesResponse:
    """List all vacancies with application counts; optional `status` filter."""
    vacancy_status = parse_filter(VacancyStatus, status_filter, "status")
    with store_errors("Failed to fetch vacancies", db):
        vacancies, total = vacancy_service.list_vacancies(db, params, vacancy_status)
        counts = vacancy_service.count_applications(db, [v.id for v in vacancies])
        items = [
            VacancyListItem.model_validate(v).model_copy(
                update={"application_count": counts.get(v.id, 0)}
            )
            for v in vacancies
        ]
        return AdminVacanciesResponse(vacancies=items, pagination=Pagination.build(total, params))


@router.get("/vacancies/{vacancy_id}", response_model=VacancyAdminDetail)
def get_vacancy_by_id(
    vacancy_id: int,
    _admin: AdminUser,
    db: Annotated[Session, Depends(get_db)],
) -> VacancyAdminDetail:
    """Vacancy with its creator and every application received."""
    with store_errors("Failed to fetch vacancy", db):
        vacancy = vacancy_service.get_vacancy(db, vacancy_id, with_applications=True)
        return VacancyAdminDetail.model_validate(vacancy)


@router.post(
    "/vacancies",
    response_model=VacancyMutationResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_vacancy(
    body: VacancyCreateRequest,
    admin: AdminUser,
    db: Annotated[Session, Depends(get_db)],
) -> VacancyMutationResponse:
    """Create a vacancy owned by the calling administrator."""
    with store_errors("Failed to create vacancy", db):
        vacancy = vacancy_service.create_vacancy(db, admin, body)
        return VacancyMutationResponse(
            message="Job vacancy created successfully",
            vacancy=VacancyOut.model_validate(vacancy),
        )


@router.put("/vacancies/{vacancy_id}", response_model=VacancyMutationResponse)
def update_vacancy(
    vacancy_id: int,
    body: VacancyUpdateRequest,
    _admin: AdminUser,
    db: Annotated[Session, Depends(get_db)],
) -> VacancyMutationResponse:
    with store_errors("Failed to update vacancy", db):
        vacancy = vacancy_service.update_vacancy(db, vacancy_id, body)
        return VacancyMutationResponse(
            message="Job vacancy updated successfully",
            vacancy=VacancyOut.model_validate(vacancy),
        )


@router.delete("/vacancies/{vacancy_id}", response_model=MessageResponse)
def delete_vacancy(
    vacancy_id: int,
    _admin: AdminUser,
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    with store_errors("Failed to delete vacancy", db):
        vacancy_service.delete_vacancy(db, vacancy_id)
    return MessageResponse(message="Job vacancy deleted successfully")


# ---- Applications ----


@router.get("/applications", response_model=AdminApplicationsResponse)
def get_applications(
    _admin: AdminUser,
    db: Annotated[Session, Depends(get_db)],
    params: Annotated[ListParams, Depends(list_params)],
    status_filter: Annotated[str | None, Query(alias="status")] = None,
    vacancy_id: Annotated[int | None, Query(ge=1)] = None,
) -> AdminApplicationsResponse:
    """List applications with applicant and vacancy; optional `status` and `vacancy_id` filters."""
    application_status = parse_filter(ApplicationStatus, status_filter, "status")
    with store_errors("Failed to fetch applications", db):
        applications, total = application_service.list_applications(
            db, params, application_status, vacancy_id
        )
        return AdminApplicationsResponse(
            applications=[AdminApplicationItem.model_validate(a) for a in applications],
            pagination=Pagination.build(total, params),
        )


@router.get("/applications/{application_id}", response_model=AdminApplicationItem)
def get_application_by_id(
    application_id: int,
    _admin: AdminUser,
    db: Annotated[Session, Depends(get_db)],
) -> AdminApplicationItem:
    with store_errors("Failed to fetch application", db):
        application = application_service.get_application(db, application_id)
        return AdminApplicationItem.model_validate(application)


@router.put("/applications/{application_id}", response_model=ApplicationMutationResponse)
def update_application(
    application_id: int,
    body: ApplicationStatusUpdate,
    _admin: AdminUser,
    db: Annotated[Session, Depends(get_db)],
) -> ApplicationMutationResponse:
    """Set the review status (PENDING, REVIEWED, ACCEPTED, REJECTED)."""
    with store_errors("Failed to update application", db):
        application = application_service.update_application_status(
            db, application_id, body.status
        )
        return ApplicationMutationResponse(
            message="Application status updated successfully",
            application=ApplicationOut.model_validate(application),
        )
