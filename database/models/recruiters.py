"""
Recruiter and client models.

Recruiters own jobs and candidates; clients are the hiring companies a
recruiter places candidates with.
"""

import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import String, Text, DateTime, ForeignKey, Uuid, func

from database.engine import Base

if TYPE_CHECKING:
    from database.models.jobs import Job


class Recruiter(Base):
    """Recruiter with a public profile page at /r/{slug}."""

    __tablename__ = "recruiters"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    slug: Mapped[str] = mapped_column(String(150), unique=True, nullable=False, index=True)
    full_name: Mapped[str | None] = mapped_column(String(200))
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(30))
    bio: Mapped[str | None] = mapped_column(Text)
    linkedin_url: Mapped[str | None] = mapped_column(String(500))
    photo_url: Mapped[str | None] = mapped_column(String(1000))
    company_name: Mapped[str | None] = mapped_column(String(255))
    company_logo_url: Mapped[str | None] = mapped_column(String(1000))

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    jobs: Mapped[list["Job"]] = relationship("Job", back_populates="recruiter")
    clients: Mapped[list["Client"]] = relationship("Client", back_populates="recruiter")


class Client(Base):
    """Hiring company a recruiter works for."""

    __tablename__ = "clients"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    recruiter_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("recruiters.id", ondelete="CASCADE"), nullable=False, index=True
    )
    company_name: Mapped[str] = mapped_column(String(255), nullable=False)
    industry: Mapped[str | None] = mapped_column(String(150))
    website: Mapped[str | None] = mapped_column(String(500))

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    recruiter: Mapped["Recruiter"] = relationship("Recruiter", back_populates="clients")
    jobs: Mapped[list["Job"]] = relationship("Job", back_populates="client")
