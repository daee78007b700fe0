"""Structured output of the resume extraction agent."""

import math
from typing import Any, Optional
from pydantic import BaseModel, Field, field_validator


class CandidateProfile(BaseModel):
    """Candidate details read from a resume, used to pre-fill the application form."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    linkedin_url: str = ""
    current_title: str = ""
    current_company: str = ""
    years_experience: Optional[int] = None
    skills: list[str] = Field(default_factory=list)
    summary: str = ""

    @field_validator(
        "first_name",
        "last_name",
        "email",
        "phone",
        "linkedin_url",
        "current_title",
        "current_company",
        "summary",
        mode="before",
    )
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        """Models answer null for unknown text fields; the form wants empty strings."""
        if v is None:
            return ""
        return str(v).strip()

    @field_validator("years_experience", mode="before")
    @classmethod
    def coerce_years(cls, v: Any) -> Optional[int]:
        """Accept whole numbers or digit strings; anything else becomes null."""
        if v is None or isinstance(v, bool):
            return None
        if isinstance(v, int):
            return v
        if isinstance(v, float):
            if math.isfinite(v) and v.is_integer():
                return int(v)
            return None
        if isinstance(v, str) and v.strip().isdigit():
            return int(v.strip())
        return None

    @field_validator("skills", mode="before")
    @classmethod
    def coerce_skills(cls, v: Any) -> list[str]:
        if v is None:
            return []
        if isinstance(v, str):
            return [s.strip() for s in v.split(",") if s.strip()]
        return [str(s).strip() for s in v if s is not None and str(s).strip()]
