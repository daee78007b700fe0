"""
Candidate Models

A candidate is scoped to the recruiter who captured them: the same person
applying through two different recruiters produces two candidate rows, but a
recruiter can hold at most one row per email address.
"""

import uuid
from datetime import datetime
from enum import Enum as PyEnum
from typing import TYPE_CHECKING

from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import (
    String,
    ForeignKey,
    Integer,
    DateTime,
    Text,
    Uuid,
    func,
    Enum as SQLEnum,
    Index,
    UniqueConstraint,
)

from database.engine import Base, enum_values

if TYPE_CHECKING:
    from database.models.applications import Application
    from database.models.files import CandidateFile


CANDIDATE_EMAIL_RECRUITER_CONSTRAINT = "uq_candidates_email_recruiter"


# ==================== Candidate Enums ===================== #
class CandidateStatus(str, PyEnum):
    """Status of a candidate in a recruiter's book."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    PLACED = "placed"
    DO_NOT_CONTACT = "do_not_contact"


# ==================== Candidate Model ===================== #
class Candidate(Base):
    """
    Candidate captured by a recruiter.

    exclusive_until is set once, when the candidate is first created, and
    marks the end of the window in which the candidate is reserved to that
    recruiter. Reapplications never move it.
    """

    __tablename__ = "candidates"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    recruiter_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("recruiters.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # Identity
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(30))
    linkedin_url: Mapped[str | None] = mapped_column(String(500))

    # Professional info
    current_title: Mapped[str | None] = mapped_column(String(255))
    current_company: Mapped[str | None] = mapped_column(String(255))
    years_experience: Mapped[int | None] = mapped_column(Integer)
    notes: Mapped[str | None] = mapped_column(Text)

    source: Mapped[str] = mapped_column(String(100), nullable=False)
    status: Mapped[CandidateStatus] = mapped_column(
        SQLEnum(CandidateStatus, native_enum=False, length=50, values_callable=enum_values),
        nullable=False,
        default=CandidateStatus.ACTIVE,
        index=True,
    )
    exclusive_until: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    # Relationships
    applications: Mapped[list["Application"]] = relationship(
        "Application", back_populates="candidate", cascade="all, delete-orphan"
    )
    files: Mapped[list["CandidateFile"]] = relationship(
        "CandidateFile", back_populates="candidate", cascade="all, delete-orphan"
    )

    __table_args__ = (
        UniqueConstraint("email", "recruiter_id", name=CANDIDATE_EMAIL_RECRUITER_CONSTRAINT),
        Index("idx_candidate_recruiter_status", "recruiter_id", "status"),
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
