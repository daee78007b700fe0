"""
API Services Layer.

Database queries and workflows behind the API endpoints, separate from the
LLM agents.
"""

from api.services.jobs import (
    JobFilters,
    get_job,
    get_published_job,
    list_published_jobs,
    list_recruiter_jobs,
)

from api.services.recruiters import (
    get_recruiter_by_slug,
    get_recruiter_profile,
)

from api.services.intake import (
    ApplicantData,
    IntakeResult,
    IntakeStatus,
    IntakeWorkflow,
    ResumeUpload,
)

from api.services.resumes import ResumeArchiver

from api.services.contact import LeadForm, notify_recruiter

__all__ = [
    # Jobs
    "JobFilters",
    "get_job",
    "get_published_job",
    "list_published_jobs",
    "list_recruiter_jobs",
    # Recruiters
    "get_recruiter_by_slug",
    "get_recruiter_profile",
    # Intake
    "ApplicantData",
    "IntakeResult",
    "IntakeStatus",
    "IntakeWorkflow",
    "ResumeUpload",
    # Resumes
    "ResumeArchiver",
    # Contact
    "LeadForm",
    "notify_recruiter",
]
