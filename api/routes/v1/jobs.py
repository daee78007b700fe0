"""Job board endpoints: listings, job detail and applications."""

import logging
import uuid
from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Depends, File, Form, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_intake_workflow
from api.schemas.applications import ApplicationResponse
from api.schemas.common import PaginatedResponse, PaginationParams
from api.schemas.jobs import JobDetail, JobSummary
from api.services import jobs as job_service
from api.services.intake import ApplicantData, IntakeWorkflow, ResumeUpload
from api.services.resumes import read_upload
from core.exceptions import IntakeValidationFailed, JobNotEligible, ResumeTooLarge
from database.engine import get_db
from database.models import EmploymentType

logger = logging.getLogger(__name__)

router = APIRouter()


def _parse_years(value: Optional[str]) -> Optional[int]:
    """Form inputs arrive as text; blank means unknown."""
    if value is None or not value.strip():
        return None
    try:
        years = int(value.strip())
    except ValueError:
        raise IntakeValidationFailed("years_experience must be a whole number")
    if years < 0:
        raise IntakeValidationFailed("years_experience cannot be negative")
    return years


@router.get(
    "",
    response_model=PaginatedResponse[JobSummary],
    summary="List open jobs",
)
async def list_jobs(
    q: Optional[str] = None,
    location: Optional[str] = None,
    employment_type: Optional[EmploymentType] = None,
    pagination: PaginationParams = Depends(),
    db: AsyncSession = Depends(get_db),
) -> PaginatedResponse[JobSummary]:
    """
    List published open jobs, newest first.

    - **q**: Matches title, company or description
    - **location**: remote / hybrid / onsite, or part of a city or state
    - **employment_type**: permanent, contract or contract_to_hire
    """
    result = await job_service.list_published_jobs(
        db,
        job_service.JobFilters(q=q, location=location, employment_type=employment_type),
        limit=pagination.page_size,
        offset=pagination.offset,
    )
    items = [JobSummary.model_validate(job) for job in result["jobs"]]
    return PaginatedResponse.create(items, result["total"], pagination)


@router.get(
    "/{job_id}",
    response_model=JobDetail,
    summary="Get job",
)
async def get_job(
    job_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
) -> JobDetail:
    job = await job_service.get_published_job(db, job_id)
    if job is None:
        raise JobNotEligible("Job not found")
    return JobDetail.model_validate(job_service.serialize_job_detail(job))


@router.post(
    "/{job_id}/applications",
    response_model=ApplicationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Apply to a job",
)
async def apply_to_job(
    job_id: uuid.UUID,
    background_tasks: BackgroundTasks,
    first_name: Optional[str] = Form(None),
    last_name: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    phone: Optional[str] = Form(None),
    linkedin_url: Optional[str] = Form(None),
    current_title: Optional[str] = Form(None),
    current_company: Optional[str] = Form(None),
    years_experience: Optional[str] = Form(None),
    message: Optional[str] = Form(None),
    resume: Optional[UploadFile] = File(None),
    db: AsyncSession = Depends(get_db),
    workflow: IntakeWorkflow = Depends(get_intake_workflow),
) -> ApplicationResponse:
    """
    Submit an application.

    First application from an email to this job's recruiter creates the
    candidate; later ones are attached to it. The optional PDF resume is
    converted and filed after the response is sent.
    """
    job = await job_service.get_job(db, job_id)
    if job is None:
        raise JobNotEligible("Job not found")

    applicant = ApplicantData(
        first_name=first_name or "",
        last_name=last_name or "",
        email=email or "",
        phone=phone,
        linkedin_url=linkedin_url,
        current_title=current_title,
        current_company=current_company,
        years_experience=_parse_years(years_experience),
        message=message,
    )

    upload = None
    if resume is not None and resume.filename:
        try:
            upload = ResumeUpload(
                data=await read_upload(resume),
                filename=resume.filename,
                content_type=resume.content_type,
            )
        except ResumeTooLarge:
            # The resume is best-effort; the application is still recorded
            logger.warning(f"Dropping oversized resume for job {job_id}")

    result = await workflow.submit_application(
        job, applicant, resume=upload, background=background_tasks
    )
    return ApplicationResponse(
        success=True,
        status=result.status.value,
        application_id=result.application_id,
    )
