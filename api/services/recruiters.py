"""Recruiter public profile service functions."""

from typing import Any, Dict, Optional
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from api.services.jobs import list_recruiter_jobs
from database.models import Recruiter

logger = logging.getLogger(__name__)


async def get_recruiter_by_slug(session: AsyncSession, slug: str) -> Optional[Recruiter]:
    result = await session.execute(select(Recruiter).where(Recruiter.slug == slug.lower()))
    return result.scalar_one_or_none()


async def get_recruiter_profile(
    session: AsyncSession,
    slug: str,
    q: Optional[str] = None,
) -> Optional[Dict[str, Any]]:
    """Public profile of a recruiter plus their open jobs, or None for an unknown slug."""
    recruiter = await get_recruiter_by_slug(session, slug)
    if recruiter is None:
        return None

    jobs = await list_recruiter_jobs(session, recruiter.id, q=q)
    return {
        "id": recruiter.id,
        "slug": recruiter.slug,
        "full_name": recruiter.full_name,
        "email": recruiter.email,
        "phone": recruiter.phone,
        "bio": recruiter.bio,
        "linkedin_url": recruiter.linkedin_url,
        "photo_url": recruiter.photo_url,
        "company_name": recruiter.company_name,
        "company_logo_url": recruiter.company_logo_url,
        "jobs": jobs,
    }
