"""Resume endpoints used by the application form."""

import logging
import uuid
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from agents.resume.agent import ResumeExtractionAgent
from agents.resume.schemas import CandidateProfile
from api.dependencies import get_extraction_agent, get_resume_archiver
from api.schemas.common import SuccessResponse
from api.services.resumes import ResumeArchiver, read_upload
from core.exceptions import MissingResumeFields, MissingResumeFile

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Resumes"])


def _parse_uuid(value: Optional[str]) -> uuid.UUID:
    try:
        return uuid.UUID((value or "").strip())
    except ValueError:
        raise MissingResumeFields()


@router.post(
    "/parse-resume",
    response_model=CandidateProfile,
    summary="Extract applicant details from a PDF resume",
)
async def parse_resume(
    file: Optional[UploadFile] = File(None),
    agent: ResumeExtractionAgent = Depends(get_extraction_agent),
) -> CandidateProfile:
    """Read a PDF resume and return the fields used to pre-fill the application form."""
    if file is None or not file.filename:
        raise MissingResumeFile()

    data = await read_upload(file)
    return await agent.extract_profile(data, file.content_type)


@router.post(
    "/save-resume",
    response_model=SuccessResponse,
    summary="Convert a PDF resume and attach it to a candidate",
)
async def save_resume(
    file: Optional[UploadFile] = File(None),
    candidate_id: Optional[str] = Form(None, alias="candidateId"),
    recruiter_id: Optional[str] = Form(None, alias="recruiterId"),
    archiver: ResumeArchiver = Depends(get_resume_archiver),
) -> SuccessResponse:
    if file is None or not file.filename or not candidate_id or not recruiter_id:
        raise MissingResumeFields()

    data = await read_upload(file)
    await archiver.save_resume(
        candidate_id=_parse_uuid(candidate_id),
        recruiter_id=_parse_uuid(recruiter_id),
        data=data,
        filename=file.filename,
        content_type=file.content_type,
    )
    return SuccessResponse()
