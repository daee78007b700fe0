import uuid
from datetime import datetime
from enum import Enum as PyEnum
from typing import TYPE_CHECKING

from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import (
    String,
    ForeignKey,
    BigInteger,
    DateTime,
    Uuid,
    func,
    Enum as SQLEnum,
)

from database.engine import Base, enum_values

if TYPE_CHECKING:
    from database.models.candidates import Candidate


# ================== File Enums ====================
class FileType(str, PyEnum):
    """Types of files stored against a candidate."""

    RESUME = "resume"
    COVER_LETTER = "cover_letter"
    OTHER = "other"


# ================== File Model ====================
class CandidateFile(Base):
    """
    Metadata for a file kept in the candidate-files bucket.
    file_path is the object key inside the bucket.
    """

    __tablename__ = "candidate_files"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    candidate_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("candidates.id", ondelete="CASCADE"), nullable=False, index=True
    )
    recruiter_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("recruiters.id", ondelete="CASCADE"), nullable=False, index=True
    )

    file_name: Mapped[str] = mapped_column(String(255), nullable=False)
    file_type: Mapped[FileType] = mapped_column(
        SQLEnum(FileType, native_enum=False, length=50, values_callable=enum_values),
        nullable=False,
        default=FileType.RESUME,
    )
    file_path: Mapped[str] = mapped_column(String(1000), nullable=False, unique=True)
    file_size: Mapped[int] = mapped_column(BigInteger, nullable=False)
    mime_type: Mapped[str] = mapped_column(String(100), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    candidate: Mapped["Candidate"] = relationship("Candidate", back_populates="files")
