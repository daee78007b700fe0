"""
Application intake workflow.

Turns an applicant submission for a job into Candidate and Application rows.
A recruiter holds at most one candidate per email address; the first
submission creates it and starts the exclusivity window, later submissions
attach a new application to the existing candidate and leave the window as
it was.
"""

import logging
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from fastapi import BackgroundTasks

from api.services.resumes import ResumeArchiver
from core.config import settings
from core.exceptions import (
    CandidateConflict,
    DuplicateApplication,
    IntakeValidationFailed,
    JobNotEligible,
    StoreFailure,
)
from core.protocols import CandidateStore
from core.utils.datetime import Clock, add_minutes, now
from core.utils.validators import normalize_email, validate_email
from database.models import (
    Application,
    ApplicationStage,
    Candidate,
    CandidateStatus,
    Job,
)

logger = logging.getLogger(__name__)

# Column sizes of the candidates table
FIELD_MAX_LENGTHS = {
    "first_name": 100,
    "last_name": 100,
    "email": 255,
    "phone": 30,
    "linkedin_url": 500,
    "current_title": 255,
    "current_company": 255,
}
MAX_YEARS_EXPERIENCE = 80


class IntakeStatus(str, Enum):
    """Which branch the submission took."""

    CREATED = "created"
    ATTACHED = "attached"


@dataclass
class ApplicantData:
    """Applicant-supplied fields from the application form."""

    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    linkedin_url: Optional[str] = None
    current_title: Optional[str] = None
    current_company: Optional[str] = None
    years_experience: Optional[int] = None
    message: Optional[str] = None


@dataclass
class ResumeUpload:
    """Resume file sent with an application."""

    data: bytes
    filename: str
    content_type: Optional[str] = None


@dataclass
class IntakeResult:
    status: IntakeStatus
    application_id: uuid.UUID
    candidate_id: uuid.UUID
    # Set only when resume persistence was scheduled or run
    resume_scheduled: bool = field(default=False)


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class IntakeWorkflow:
    """Creates or attaches candidates and records their applications."""

    def __init__(
        self,
        store: CandidateStore,
        resume_archiver: Optional[ResumeArchiver] = None,
        clock: Clock = now,
        exclusivity_window_minutes: Optional[int] = None,
        duplicate_policy: Optional[str] = None,
        compensate: Optional[bool] = None,
    ):
        """
        Initialize the workflow.

        Args:
            store: Candidate store
            resume_archiver: Persists resumes on the created branch (None disables it)
            clock: Source of the current UTC time
            exclusivity_window_minutes: Defaults to EXCLUSIVITY_WINDOW_MINUTES
            duplicate_policy: "allow" or "reject"; defaults to DUPLICATE_APPLICATION_POLICY
            compensate: Delete a just-created candidate when its application
                insert fails; defaults to COMPENSATE_FAILED_INTAKE
        """
        self.store = store
        self.resume_archiver = resume_archiver
        self.clock = clock
        self.exclusivity_window_minutes = (
            exclusivity_window_minutes
            if exclusivity_window_minutes is not None
            else settings.exclusivity_window_minutes
        )
        self.duplicate_policy = duplicate_policy or settings.duplicate_application_policy
        self.compensate = (
            compensate if compensate is not None else settings.compensate_failed_intake
        )

    # ==================== Validation ===================== #
    def _validate_applicant(self, applicant: ApplicantData) -> ApplicantData:
        missing = [
            name
            for name in ("first_name", "last_name", "email")
            if not (getattr(applicant, name) or "").strip()
        ]
        if missing:
            raise IntakeValidationFailed(f"Missing required fields: {', '.join(missing)}")

        too_long = [
            name
            for name, limit in FIELD_MAX_LENGTHS.items()
            if len((getattr(applicant, name) or "").strip()) > limit
        ]
        if too_long:
            raise IntakeValidationFailed(f"Fields too long: {', '.join(too_long)}")

        years = applicant.years_experience
        if years is not None and not 0 <= years <= MAX_YEARS_EXPERIENCE:
            raise IntakeValidationFailed(
                f"years_experience must be between 0 and {MAX_YEARS_EXPERIENCE}"
            )

        applicant.first_name = applicant.first_name.strip()
        applicant.last_name = applicant.last_name.strip()
        applicant.email = normalize_email(applicant.email)
        is_valid, _ = validate_email(applicant.email)
        if not is_valid:
            raise IntakeValidationFailed("Invalid email address")
        return applicant

    @staticmethod
    def _check_eligibility(job: Job) -> None:
        if not job.is_accepting_applications:
            raise JobNotEligible()

    # ==================== Submission ===================== #
    async def submit_application(
        self,
        job: Job,
        applicant: ApplicantData,
        resume: Optional[ResumeUpload] = None,
        background: Optional[BackgroundTasks] = None,
    ) -> IntakeResult:
        """
        Submit an application for a job.

        Args:
            job: Job snapshot read by the caller
            applicant: Applicant form data
            resume: Optional resume upload
            background: When given, resume persistence runs after the response is sent

        Returns:
            IntakeResult with the branch taken and the new application id

        Raises:
            IntakeValidationFailed: Missing first name, last name or email
            JobNotEligible: Job is not published and open
            DuplicateApplication: Reapplying to the same job under the reject policy
            StoreFailure: Any persistence failure other than the email conflict
        """
        applicant = self._validate_applicant(applicant)
        self._check_eligibility(job)

        exclusive_until = add_minutes(self.clock(), self.exclusivity_window_minutes)
        candidate = Candidate(
            id=uuid.uuid4(),
            recruiter_id=job.recruiter_id,
            first_name=applicant.first_name,
            last_name=applicant.last_name,
            email=applicant.email,
            phone=_blank_to_none(applicant.phone),
            linkedin_url=_blank_to_none(applicant.linkedin_url),
            current_title=_blank_to_none(applicant.current_title),
            current_company=_blank_to_none(applicant.current_company),
            years_experience=applicant.years_experience,
            notes=_blank_to_none(applicant.message),
            source=settings.candidate_source,
            status=CandidateStatus.ACTIVE,
            exclusive_until=exclusive_until,
        )

        try:
            candidate = await self.store.insert_candidate(candidate)
        except CandidateConflict:
            logger.info(
                "Candidate already exists for recruiter, attaching application",
                extra={"job_id": str(job.id), "recruiter_id": str(job.recruiter_id)},
            )
            return await self._attach_to_existing(job, applicant)

        application = await self._record_application(job, candidate, applicant, created=True)

        resume_scheduled = False
        if resume is not None and self.resume_archiver is not None:
            resume_scheduled = True
            if background is not None:
                background.add_task(
                    self.persist_resume_safely, candidate.id, job.recruiter_id, resume
                )
            else:
                await self.persist_resume_safely(candidate.id, job.recruiter_id, resume)

        logger.info(
            "Created candidate and application",
            extra={"job_id": str(job.id), "application_id": str(application.id)},
        )
        return IntakeResult(
            status=IntakeStatus.CREATED,
            application_id=application.id,
            candidate_id=candidate.id,
            resume_scheduled=resume_scheduled,
        )

    async def _attach_to_existing(self, job: Job, applicant: ApplicantData) -> IntakeResult:
        existing = await self.store.find_candidate(applicant.email, job.recruiter_id)
        if existing is None:
            # Conflict reported but the row is gone (deleted in between)
            logger.error(
                "Candidate conflict reported but no existing candidate found",
                extra={"recruiter_id": str(job.recruiter_id)},
            )
            raise StoreFailure()

        if self.duplicate_policy == "reject" and await self.store.application_exists(
            job.id, existing.id
        ):
            raise DuplicateApplication()

        # exclusive_until is deliberately left as set on first contact
        application = await self._record_application(job, existing, applicant, created=False)
        return IntakeResult(
            status=IntakeStatus.ATTACHED,
            application_id=application.id,
            candidate_id=existing.id,
        )

    async def _record_application(
        self,
        job: Job,
        candidate: Candidate,
        applicant: ApplicantData,
        created: bool,
    ) -> Application:
        application = Application(
            id=uuid.uuid4(),
            job_id=job.id,
            candidate_id=candidate.id,
            recruiter_id=job.recruiter_id,
            stage=ApplicationStage.APPLIED,
            notes=_blank_to_none(applicant.message),
        )
        try:
            return await self.store.insert_application(application)
        except StoreFailure:
            if created and self.compensate:
                await self._compensate(candidate.id)
            raise

    async def _compensate(self, candidate_id: uuid.UUID) -> None:
        try:
            await self.store.delete_candidate(candidate_id)
            logger.warning(f"Removed candidate {candidate_id} after failed application insert")
        except StoreFailure:
            logger.error(
                f"Compensation failed, candidate {candidate_id} left without application",
                exc_info=True,
            )

    # ==================== Resume ===================== #
    async def persist_resume_safely(
        self,
        candidate_id: uuid.UUID,
        recruiter_id: uuid.UUID,
        resume: ResumeUpload,
    ) -> bool:
        """
        Render and store a resume; never raises.

        Returns:
            True when the file and its record were both saved
        """
        if self.resume_archiver is None:
            return False
        try:
            await self.resume_archiver.save_resume(
                candidate_id=candidate_id,
                recruiter_id=recruiter_id,
                data=resume.data,
                filename=resume.filename,
                content_type=resume.content_type,
            )
            return True
        except Exception:
            logger.error(
                f"Resume persistence failed for candidate {candidate_id}",
                exc_info=True,
            )
            return False
