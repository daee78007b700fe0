"""Resume archiving: render a PDF resume to a Word document and file it on the candidate."""

import logging
import uuid
from dataclasses import dataclass
from typing import Optional

from fastapi import UploadFile

from agents.resume.agent import WORD_MIME_TYPE, ResumeFormattingAgent
from core.config import settings
from core.exceptions import (
    ResumeMetadataFailed,
    ResumeTooLarge,
    ResumeUploadFailed,
    StoreFailure,
)
from core.protocols import BlobStorage, CandidateStore
from core.utils.datetime import Clock, now, to_unix_millis
from core.utils.validators import file_base_name
from database.models import CandidateFile, FileType

logger = logging.getLogger(__name__)


@dataclass
class SavedResume:
    file_id: uuid.UUID
    file_path: str
    file_name: str
    file_size: int


async def read_upload(upload: UploadFile, max_bytes: Optional[int] = None) -> bytes:
    """Read an uploaded file, refusing anything over MAX_RESUME_SIZE_BYTES."""
    limit = max_bytes or settings.max_resume_size_bytes
    data = await upload.read(limit + 1)
    if len(data) > limit:
        raise ResumeTooLarge()
    return data


def build_resume_key(candidate_id: uuid.UUID, base_name: str, timestamp_ms: int) -> str:
    """Storage key: {candidateId}/{unixMillis}_{baseName}.doc"""
    return f"{candidate_id}/{timestamp_ms}_{base_name}.doc"


class ResumeArchiver:
    """Renders resumes, uploads them to blob storage and records a CandidateFile row."""

    def __init__(
        self,
        formatter: ResumeFormattingAgent,
        storage: BlobStorage,
        store: CandidateStore,
        clock: Clock = now,
    ):
        self.formatter = formatter
        self.storage = storage
        self.store = store
        self.clock = clock

    async def save_resume(
        self,
        candidate_id: uuid.UUID,
        recruiter_id: uuid.UUID,
        data: bytes,
        filename: Optional[str],
        content_type: Optional[str],
    ) -> SavedResume:
        """
        Render a resume and attach it to a candidate.

        Args:
            candidate_id: Candidate the file belongs to
            recruiter_id: Recruiter owning the candidate
            data: Uploaded PDF bytes
            filename: Original upload name, used for the stored file name
            content_type: Upload MIME type

        Returns:
            SavedResume describing the stored file

        Raises:
            UnsupportedFormat: If the upload is not a PDF
            RenderingServiceFailure: If the formatting model call fails
            ResumeUploadFailed: If blob storage rejects the document
            ResumeMetadataFailed: If the CandidateFile row cannot be written
        """
        document = await self.formatter.render_resume_document(data, content_type)

        base_name = file_base_name(filename)
        key = build_resume_key(candidate_id, base_name, to_unix_millis(self.clock()))

        try:
            await self.storage.upload(document, key, content_type=WORD_MIME_TYPE)
        except Exception as e:
            logger.error(f"Resume upload failed for {key}: {type(e).__name__}: {e}")
            raise ResumeUploadFailed() from e

        record = CandidateFile(
            id=uuid.uuid4(),
            candidate_id=candidate_id,
            recruiter_id=recruiter_id,
            file_name=f"{base_name}.doc",
            file_type=FileType.RESUME,
            file_path=key,
            file_size=len(document),
            mime_type=WORD_MIME_TYPE,
        )
        try:
            record = await self.store.insert_candidate_file(record)
        except StoreFailure as e:
            logger.error(f"Resume record insert failed for {key}")
            raise ResumeMetadataFailed() from e

        logger.info(f"Saved resume {key} ({len(document)} bytes)")
        return SavedResume(
            file_id=record.id,
            file_path=key,
            file_name=record.file_name,
            file_size=record.file_size,
        )
