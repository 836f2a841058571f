"""ORM model for accounts (auth and RBAC)."""

from sqlalchemy import Column, DateTime, Integer, String, func
from sqlalchemy.orm import relationship

from jobboard.models.base import Base
from jobboard.models.enums import Role


class User(Base):
    """
    Account for token authentication and role-based access control.

    role: 'ADMIN' or 'MEMBER' (canonical uppercase; see Role.parse)
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False)
    role = Column(String(16), nullable=False, default=Role.MEMBER.value)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    applications = relationship(
        "Application",
        back_populates="user",
        cascade="all, delete-orphan",
    )
    vacancies = relationship(
        "JobVacancy",
        back_populates="creator",
        cascade="all, delete-orphan",
    )
