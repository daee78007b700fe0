"""Job board listing schemas."""

import uuid
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from database.models import EmploymentType, LocationType


class JobSummary(BaseModel):
    """One card in a job listing."""

    id: uuid.UUID
    title: str
    company_name: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    location_type: LocationType
    employment_type: EmploymentType
    salary_min: Optional[int] = None
    salary_max: Optional[int] = None
    salary_currency: str = "USD"
    created_at: datetime
    location_display: str = Field(description='e.g. "Austin, TX (Hybrid)" or "Remote"')
    employment_type_display: str
    salary_display: Optional[str] = Field(None, description='e.g. "$120k - $150k USD"')
    posted_display: str = Field(description='e.g. "3 days ago"')


class ClientInfo(BaseModel):
    company_name: str
    industry: Optional[str] = None
    website: Optional[str] = None


class RecruiterContact(BaseModel):
    full_name: Optional[str] = None
    email: str


class JobDetail(JobSummary):
    """Full job posting shown on the job page and above the application form."""

    description: Optional[str] = None
    requirements: Optional[str] = None
    country: Optional[str] = None
    recruiter_id: uuid.UUID
    client: Optional[ClientInfo] = None
    recruiter: Optional[RecruiterContact] = None


class RecruiterProfile(BaseModel):
    """Recruiter public page."""

    id: uuid.UUID
    slug: str
    full_name: Optional[str] = None
    email: str
    phone: Optional[str] = None
    bio: Optional[str] = None
    linkedin_url: Optional[str] = None
    photo_url: Optional[str] = None
    company_name: Optional[str] = None
    company_logo_url: Optional[str] = None
    jobs: list[JobSummary] = Field(default_factory=list)
