"""
Jobs Module

Job postings published on the board. The intake workflow only ever reads
these rows.
"""

import uuid
from datetime import datetime
from enum import Enum as PyEnum
from typing import TYPE_CHECKING

from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import (
    String,
    Boolean,
    ForeignKey,
    BigInteger,
    DateTime,
    Text,
    Uuid,
    func,
    Enum as SQLEnum,
    Index,
)

from database.engine import Base, enum_values

if TYPE_CHECKING:
    from database.models.recruiters import Recruiter, Client
    from database.models.applications import Application


# ==================== Job Enums ===================== #
class JobStatus(str, PyEnum):
    """Job posting status."""

    DRAFT = "draft"
    OPEN = "open"
    PAUSED = "paused"
    CLOSED = "closed"
    FILLED = "filled"


class LocationType(str, PyEnum):
    """Where the work happens."""

    REMOTE = "remote"
    HYBRID = "hybrid"
    ONSITE = "onsite"


class EmploymentType(str, PyEnum):
    """Engagement type offered to the candidate."""

    PERMANENT = "permanent"
    CONTRACT = "contract"
    CONTRACT_TO_HIRE = "contract_to_hire"


# ==================== Job Model ===================== #
class Job(Base):
    """Job posting owned by a recruiter on behalf of a client."""

    __tablename__ = "jobs"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    recruiter_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("recruiters.id", ondelete="CASCADE"), nullable=False, index=True
    )
    client_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("clients.id", ondelete="SET NULL"), index=True
    )

    # Basic info
    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text)
    requirements: Mapped[str | None] = mapped_column(Text)

    # Location
    city: Mapped[str | None] = mapped_column(String(100))
    state: Mapped[str | None] = mapped_column(String(100))
    country: Mapped[str | None] = mapped_column(String(100))
    location_type: Mapped[LocationType] = mapped_column(
        SQLEnum(LocationType, native_enum=False, length=50, values_callable=enum_values),
        nullable=False,
        default=LocationType.ONSITE,
    )
    employment_type: Mapped[EmploymentType] = mapped_column(
        SQLEnum(EmploymentType, native_enum=False, length=50, values_callable=enum_values),
        nullable=False,
        default=EmploymentType.PERMANENT,
    )

    # Compensation (whole currency units per year)
    salary_min: Mapped[int | None] = mapped_column(BigInteger)
    salary_max: Mapped[int | None] = mapped_column(BigInteger)
    salary_currency: Mapped[str] = mapped_column(String(10), default="USD", nullable=False)

    # Publishing
    is_published: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    status: Mapped[JobStatus] = mapped_column(
        SQLEnum(JobStatus, native_enum=False, length=50, values_callable=enum_values),
        nullable=False,
        default=JobStatus.DRAFT,
        index=True,
    )

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
    recruiter: Mapped["Recruiter"] = relationship("Recruiter", back_populates="jobs")
    client: Mapped["Client | None"] = relationship("Client", back_populates="jobs")
    applications: Mapped[list["Application"]] = relationship(
        "Application", back_populates="job", cascade="all, delete-orphan"
    )

    __table_args__ = (
        Index("idx_job_board_listing", "is_published", "status", "created_at"),
        Index("idx_job_recruiter_listing", "recruiter_id", "is_published", "status"),
    )

    @property
    def is_accepting_applications(self) -> bool:
        return bool(self.is_published) and self.status == JobStatus.OPEN
