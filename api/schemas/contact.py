"""Contact recruiter schemas."""

from typing import Optional
from pydantic import BaseModel, Field, field_validator


class ContactRecruiterRequest(BaseModel):
    """
    Lead form from a recruiter's public page.

    Required fields are checked by the notification service so that a missing
    one yields the same 400 "Missing required fields" whatever the client sent.
    """

    recruiter_email: Optional[str] = Field(None, max_length=255)
    recruiter_name: Optional[str] = Field(None, max_length=200)
    company_name: Optional[str] = Field(None, max_length=255)
    name: Optional[str] = Field(None, max_length=200)
    email: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=30)
    preferred_contact: Optional[str] = Field(None, max_length=20, description="email or phone")
    notes: Optional[str] = Field(None, max_length=5000)

    @field_validator("*", mode="before")
    @classmethod
    def strip_whitespace(cls, v):
        """Strip whitespace from text fields."""
        if isinstance(v, str):
            return v.strip()
        return v
