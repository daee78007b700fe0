"""
Application model.

One row per submission event. The same (job, candidate) pair may appear
more than once unless DUPLICATE_APPLICATION_POLICY is set to "reject".
"""

import uuid
from datetime import datetime
from enum import Enum as PyEnum
from typing import TYPE_CHECKING

from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import (
    ForeignKey,
    DateTime,
    Text,
    Uuid,
    func,
    Enum as SQLEnum,
    Index,
)

from database.engine import Base, enum_values

if TYPE_CHECKING:
    from database.models.candidates import Candidate
    from database.models.jobs import Job


class ApplicationStage(str, PyEnum):
    """Pipeline stage of an application."""

    APPLIED = "applied"
    SCREENING = "screening"
    SUBMITTED = "submitted"
    INTERVIEWING = "interviewing"
    OFFERED = "offered"
    HIRED = "hired"
    REJECTED = "rejected"


class Application(Base):
    """Candidate applying to a job; owned by the job's recruiter."""

    __tablename__ = "applications"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    job_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True
    )
    candidate_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("candidates.id", ondelete="CASCADE"), nullable=False, index=True
    )
    recruiter_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("recruiters.id", ondelete="CASCADE"), nullable=False, index=True
    )
    stage: Mapped[ApplicationStage] = mapped_column(
        SQLEnum(ApplicationStage, native_enum=False, length=50, values_callable=enum_values),
        nullable=False,
        default=ApplicationStage.APPLIED,
    )
    notes: Mapped[str | None] = mapped_column(Text)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    job: Mapped["Job"] = relationship("Job", back_populates="applications")
    candidate: Mapped["Candidate"] = relationship("Candidate", back_populates="applications")

    __table_args__ = (
        Index("idx_application_job_candidate", "job_id", "candidate_id"),
    )
