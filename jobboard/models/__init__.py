"""SQLAlchemy ORM models."""

from jobboard.models.application import Application
from jobboard.models.base import Base
from jobboard.models.enums import ApplicationStatus, Role, VacancyStatus
from jobboard.models.user import User
from jobboard.models.vacancy import JobVacancy

__all__ = [
    "Application",
    "ApplicationStatus",
    "Base",
    "JobVacancy",
    "Role",
    "User",
    "VacancyStatus",
]
