"""Job service functions."""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional
import logging
import uuid

from sqlalchemy import Select, select, func, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from core.utils.formatting import (
    format_employment_type,
    format_location,
    format_posted,
    format_posted_date,
    format_salary,
)
from database.models import Client, EmploymentType, Job, JobStatus, LocationType

logger = logging.getLogger(__name__)


@dataclass
class JobFilters:
    """Listing filters from the job board search bar."""

    q: Optional[str] = None
    location: Optional[str] = None
    employment_type: Optional[EmploymentType] = None


def published_jobs_query() -> Select:
    """Jobs visible on the board: published and open, newest first."""
    return (
        select(Job)
        .where(Job.is_published.is_(True), Job.status == JobStatus.OPEN)
        .order_by(Job.created_at.desc())
    )


def apply_job_filters(query: Select, filters: JobFilters) -> Select:
    """
    Narrow a job query.

    ``q`` matches title, client company or description; ``location`` matches a
    location type exactly or a city/state substring. Both are case-insensitive.
    """
    if filters.q:
        term = filters.q.strip()
        query = query.outerjoin(Client, Job.client_id == Client.id).where(
            or_(
                Job.title.icontains(term, autoescape=True),
                Client.company_name.icontains(term, autoescape=True),
                Job.description.icontains(term, autoescape=True),
            )
        )

    if filters.location:
        location = filters.location.strip()
        conditions = [
            Job.city.icontains(location, autoescape=True),
            Job.state.icontains(location, autoescape=True),
        ]
        try:
            conditions.append(Job.location_type == LocationType(location.lower()))
        except ValueError:
            pass
        query = query.where(or_(*conditions))

    if filters.employment_type:
        query = query.where(Job.employment_type == filters.employment_type)

    return query


def serialize_job_summary(job: Job) -> Dict[str, Any]:
    """Listing card fields plus display strings."""
    return {
        "id": job.id,
        "title": job.title,
        "company_name": job.client.company_name if job.client else None,
        "city": job.city,
        "state": job.state,
        "location_type": job.location_type.value,
        "employment_type": job.employment_type.value,
        "salary_min": job.salary_min,
        "salary_max": job.salary_max,
        "salary_currency": job.salary_currency,
        "created_at": job.created_at,
        "location_display": format_location(job.city, job.state, job.location_type.value),
        "employment_type_display": format_employment_type(job.employment_type.value),
        "salary_display": format_salary(
            job.salary_min, job.salary_max, job.salary_currency, compact=True
        ),
        "posted_display": format_posted(job.created_at),
    }


def serialize_job_detail(job: Job) -> Dict[str, Any]:
    """Job detail page fields, with client and recruiter contact."""
    return {
        **serialize_job_summary(job),
        "description": job.description,
        "requirements": job.requirements,
        "country": job.country,
        "recruiter_id": job.recruiter_id,
        "location_display": format_location(
            job.city, job.state, job.location_type.value, job.country
        ),
        "salary_display": format_salary(
            job.salary_min, job.salary_max, job.salary_currency, compact=False
        ),
        "posted_display": format_posted_date(job.created_at),
        "client": (
            {
                "company_name": job.client.company_name,
                "industry": job.client.industry,
                "website": job.client.website,
            }
            if job.client
            else None
        ),
        "recruiter": (
            {"full_name": job.recruiter.full_name, "email": job.recruiter.email}
            if job.recruiter
            else None
        ),
    }


async def list_published_jobs(
    session: AsyncSession,
    filters: JobFilters,
    limit: int = 20,
    offset: int = 0,
) -> Dict[str, Any]:
    """List open published jobs with their client company."""
    query = apply_job_filters(published_jobs_query(), filters)

    count_query = select(func.count()).select_from(query.order_by(None).subquery())
    total = (await session.execute(count_query)).scalar() or 0

    result = await session.execute(
        query.options(selectinload(Job.client)).limit(limit).offset(offset)
    )
    jobs = result.scalars().unique().all()

    return {
        "jobs": [serialize_job_summary(job) for job in jobs],
        "total": total,
    }


async def get_published_job(session: AsyncSession, job_id: uuid.UUID) -> Optional[Job]:
    """Load a published job with client and recruiter, or None."""
    result = await session.execute(
        select(Job)
        .options(selectinload(Job.client), selectinload(Job.recruiter))
        .where(Job.id == job_id, Job.is_published.is_(True))
    )
    return result.scalar_one_or_none()


async def get_job(session: AsyncSession, job_id: uuid.UUID) -> Optional[Job]:
    """Load a job regardless of publish state (eligibility is checked by intake)."""
    result = await session.execute(select(Job).where(Job.id == job_id))
    return result.scalar_one_or_none()


async def list_recruiter_jobs(
    session: AsyncSession,
    recruiter_id: uuid.UUID,
    q: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """Open published jobs of one recruiter, optionally filtered by ``q``."""
    query = apply_job_filters(
        published_jobs_query().where(Job.recruiter_id == recruiter_id),
        JobFilters(q=q),
    )
    result = await session.execute(query.options(selectinload(Job.client)))
    return [serialize_job_summary(job) for job in result.scalars().unique().all()]
