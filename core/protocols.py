"""
Capability interfaces for the external collaborators of the job board.

The intake workflow and the adapters depend on these narrow protocols rather
than on concrete clients, so production wiring (PostgreSQL, S3, Gemini,
Resend) and the in-memory fakes used by the test suite are interchangeable.
"""

import uuid
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from database.models import Application, Candidate, CandidateFile


@runtime_checkable
class CandidateStore(Protocol):
    """Relational persistence for candidates, applications and file records."""

    async def insert_candidate(self, candidate: Candidate) -> Candidate:
        """Insert a candidate; raise CandidateConflict on (email, recruiter_id) clash."""
        ...

    async def find_candidate(self, email: str, recruiter_id: uuid.UUID) -> Candidate | None:
        ...

    async def insert_application(self, application: Application) -> Application:
        ...

    async def application_exists(self, job_id: uuid.UUID, candidate_id: uuid.UUID) -> bool:
        ...

    async def delete_candidate(self, candidate_id: uuid.UUID) -> None:
        ...

    async def insert_candidate_file(self, candidate_file: CandidateFile) -> CandidateFile:
        ...


@runtime_checkable
class BlobStorage(Protocol):
    """Object storage for generated documents."""

    async def upload(self, file_data: bytes, key: str, content_type: str | None = None) -> str:
        ...


@runtime_checkable
class DocumentModel(Protocol):
    """LLM that reads a document and answers an instruction about it."""

    async def generate(
        self,
        document: bytes,
        mime_type: str,
        instruction: str,
        max_output_tokens: int,
    ) -> str:
        ...


@dataclass
class EmailMessage:
    """Outbound transactional email."""

    to: list[str]
    subject: str
    html: str
    reply_to: str | None = None
    from_email: str | None = None
    tags: dict[str, str] = field(default_factory=dict)


@runtime_checkable
class EmailSender(Protocol):
    """Transactional email provider; returns the provider message id."""

    async def send(self, message: EmailMessage) -> str:
        ...
