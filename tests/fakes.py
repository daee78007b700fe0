"""
In-memory stand-ins for the job board's external collaborators.

InMemoryCandidateStore models the database uniqueness constraint on
(email, recruiter_id): the check and the insert run without yielding to the
event loop, so concurrent submissions race the same way they do against
PostgreSQL.
"""

import asyncio
import copy
import uuid
from datetime import datetime, timezone
from typing import Optional

from core.exceptions import CandidateConflict, ExtractionServiceFailure, StoreFailure
from core.protocols import EmailMessage
from database.models import Application, Candidate, CandidateFile

SUBMITTED_AT = datetime(2025, 3, 4, 15, 0, tzinfo=timezone.utc)


class FixedClock:
    """Clock that always answers the same instant."""

    def __init__(self, instant: datetime):
        self.instant = instant

    def __call__(self) -> datetime:
        return self.instant


class InMemoryCandidateStore:
    def __init__(self):
        self.candidates: dict[uuid.UUID, Candidate] = {}
        self.applications: dict[uuid.UUID, Application] = {}
        self.files: dict[uuid.UUID, CandidateFile] = {}
        self.deleted: list[uuid.UUID] = []

        # Failure injection
        self.fail_insert_candidate = False
        self.fail_insert_application = False
        self.fail_delete_candidate = False
        self.fail_insert_file = False
        self.hide_conflicting_rows = False

    # ==================== Candidates ==================== #
    async def insert_candidate(self, candidate: Candidate) -> Candidate:
        # Let concurrent submissions interleave before the constrained insert
        await asyncio.sleep(0)
        if self.fail_insert_candidate:
            raise StoreFailure()
        for existing in self.candidates.values():
            if (
                existing.email == candidate.email
                and existing.recruiter_id == candidate.recruiter_id
            ):
                raise CandidateConflict(candidate.email, candidate.recruiter_id)
        self.candidates[candidate.id] = candidate
        return candidate

    async def find_candidate(self, email: str, recruiter_id: uuid.UUID) -> Optional[Candidate]:
        await asyncio.sleep(0)
        if self.hide_conflicting_rows:
            return None
        for candidate in self.candidates.values():
            if candidate.email == email and candidate.recruiter_id == recruiter_id:
                return candidate
        return None

    async def delete_candidate(self, candidate_id: uuid.UUID) -> None:
        if self.fail_delete_candidate:
            raise StoreFailure()
        self.deleted.append(candidate_id)
        self.candidates.pop(candidate_id, None)

    # ==================== Applications ==================== #
    async def insert_application(self, application: Application) -> Application:
        await asyncio.sleep(0)
        if self.fail_insert_application:
            raise StoreFailure()
        self.applications[application.id] = application
        return application

    async def application_exists(self, job_id: uuid.UUID, candidate_id: uuid.UUID) -> bool:
        return any(
            app.job_id == job_id and app.candidate_id == candidate_id
            for app in self.applications.values()
        )

    def applications_for(self, candidate_id: uuid.UUID) -> list[Application]:
        return [a for a in self.applications.values() if a.candidate_id == candidate_id]

    # ==================== Files ==================== #
    async def insert_candidate_file(self, candidate_file: CandidateFile) -> CandidateFile:
        if self.fail_insert_file:
            raise StoreFailure()
        self.files[candidate_file.id] = candidate_file
        return candidate_file


class FakeBlobStorage:
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.objects: dict[str, dict] = {}

    async def upload(
        self,
        file_data: bytes,
        key: str,
        content_type: Optional[str] = None,
        metadata: Optional[dict] = None,
    ) -> str:
        if self.fail:
            raise RuntimeError("bucket unavailable")
        self.objects[key] = {"data": file_data, "content_type": content_type}
        return key


class FakeDocumentModel:
    """Document model that replays canned responses and records each call."""

    def __init__(self, responses: Optional[list[str]] = None, fail: bool = False):
        self.responses = list(responses or [])
        self.fail = fail
        self.calls: list[dict] = []

    async def generate(
        self,
        document: bytes,
        mime_type: str,
        instruction: str,
        max_output_tokens: int,
    ) -> str:
        self.calls.append(
            {
                "document": document,
                "mime_type": mime_type,
                "instruction": instruction,
                "max_output_tokens": max_output_tokens,
            }
        )
        if self.fail:
            raise ExtractionServiceFailure()
        if not self.responses:
            return "{}"
        return self.responses.pop(0)


class FakeEmailSender:
    def __init__(self, fail_with: Optional[Exception] = None):
        self.fail_with = fail_with
        self.sent: list[EmailMessage] = []

    async def send(self, message: EmailMessage) -> str:
        if self.fail_with is not None:
            raise self.fail_with
        self.sent.append(copy.deepcopy(message))
        return f"email_{len(self.sent)}"
