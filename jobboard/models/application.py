"""ORM model for a member's application to a job vacancy."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint, func
from sqlalchemy.orm import relationship

from jobboard.models.base import Base
from jobboard.models.enums import ApplicationStatus


class Application(Base):
    """
    Submission owned by exactly one user (its creator).

    One application per (user, vacancy); the unique constraint backs the
    handler's duplicate check when two requests race.
    """

    __tablename__ = "applications"
    __table_args__ = (
        UniqueConstraint("user_id", "job_vacancy_id", name="uq_applications_user_vacancy"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    job_vacancy_id = Column(
        Integer,
        ForeignKey("job_vacancies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    cover_letter = Column(Text, nullable=True)
    status = Column(String(16), nullable=False, default=ApplicationStatus.PENDING.value, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    user = relationship("User", back_populates="applications")
    job_vacancy = relationship("JobVacancy", back_populates="applications")
