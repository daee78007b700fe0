"""ORM models; importing this package registers every table on Base.metadata."""

from database.models.recruiters import Recruiter, Client
from database.models.jobs import Job, JobStatus, LocationType, EmploymentType
from database.models.candidates import (
    Candidate,
    CandidateStatus,
    CANDIDATE_EMAIL_RECRUITER_CONSTRAINT,
)
from database.models.applications import Application, ApplicationStage
from database.models.files import CandidateFile, FileType

__all__ = [
    "Recruiter",
    "Client",
    "Job",
    "JobStatus",
    "LocationType",
    "EmploymentType",
    "Candidate",
    "CandidateStatus",
    "CANDIDATE_EMAIL_RECRUITER_CONSTRAINT",
    "Application",
    "ApplicationStage",
    "CandidateFile",
    "FileType",
]
