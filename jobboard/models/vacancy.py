"""ORM model for job vacancies published by administrators."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import relationship

from jobboard.models.base import Base
from jobboard.models.enums import VacancyStatus


class JobVacancy(Base):
    """Job posting owned by the administrator who created it. status: 'ACTIVE' or 'CLOSED'."""

    __tablename__ = "job_vacancies"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    company = Column(String(255), nullable=False)
    location = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    requirements = Column(Text, nullable=False)
    salary = Column(String(255), nullable=True)
    status = Column(String(16), nullable=False, default=VacancyStatus.ACTIVE.value, index=True)
    created_by = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    creator = relationship("User", back_populates="vacancies")
    applications = relationship(
        "Application",
        back_populates="job_vacancy",
        cascade="all, delete-orphan",
    )
