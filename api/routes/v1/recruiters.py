"""Recruiter public page endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.schemas.jobs import RecruiterProfile
from api.services.recruiters import get_recruiter_profile
from database.engine import get_db

router = APIRouter()


@router.get(
    "/{slug}",
    response_model=RecruiterProfile,
    summary="Get recruiter profile",
)
async def get_recruiter(
    slug: str,
    q: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
) -> RecruiterProfile:
    """Recruiter profile with their open jobs; **q** filters the jobs."""
    profile = await get_recruiter_profile(db, slug, q=q)
    if profile is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Recruiter not found",
        )
    return RecruiterProfile.model_validate(profile)
