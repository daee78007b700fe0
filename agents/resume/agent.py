"""
Resume agents.

ResumeExtractionAgent reads a PDF resume into a CandidateProfile used to
pre-fill the application form. ResumeFormattingAgent re-typesets a PDF resume
as an HTML-based Word document for the recruiter's candidate file.
"""

import logging
from typing import Optional

from pydantic import ValidationError

from agents.common.utils import parse_json_response, strip_code_fences
from agents.resume.prompts import (
    FORMATTING_MAX_OUTPUT_TOKENS,
    PROFILE_EXTRACTION_PROMPT,
    PROFILE_MAX_OUTPUT_TOKENS,
    RESUME_FORMATTING_PROMPT,
)
from agents.resume.schemas import CandidateProfile
from core.exceptions import (
    ExtractionServiceFailure,
    MalformedResponse,
    RenderingServiceFailure,
    UnsupportedFormat,
)
from core.protocols import DocumentModel
from core.utils.templates import render_template

logger = logging.getLogger(__name__)

PDF_MIME_TYPE = "application/pdf"
WORD_MIME_TYPE = "application/msword"


def is_pdf(content_type: Optional[str]) -> bool:
    """True for application/pdf, ignoring case and parameters such as charset."""
    if not content_type:
        return False
    return content_type.split(";", 1)[0].strip().lower() == PDF_MIME_TYPE


class ResumeExtractionAgent:
    """Extracts a structured candidate profile from a PDF resume."""

    def __init__(self, model: DocumentModel):
        self.model = model

    async def extract_profile(self, data: bytes, content_type: Optional[str]) -> CandidateProfile:
        """
        Extract a candidate profile from a resume.

        Args:
            data: Raw resume bytes
            content_type: MIME type reported by the upload

        Returns:
            CandidateProfile with unknown fields left empty

        Raises:
            UnsupportedFormat: If the upload is not a PDF (no model call is made)
            MalformedResponse: If the model answer is not a JSON object
            ExtractionServiceFailure: If the model call fails
        """
        if not is_pdf(content_type):
            raise UnsupportedFormat()

        response = await self.model.generate(
            document=data,
            mime_type=PDF_MIME_TYPE,
            instruction=PROFILE_EXTRACTION_PROMPT,
            max_output_tokens=PROFILE_MAX_OUTPUT_TOKENS,
        )

        try:
            payload = parse_json_response(response)
            profile = CandidateProfile.model_validate(payload)
        except (ValueError, ValidationError) as e:
            logger.warning(f"Resume extraction returned unusable output: {e}")
            raise MalformedResponse() from e

        logger.info(
            "Extracted resume profile",
            extra={"skills": len(profile.skills), "has_email": bool(profile.email)},
        )
        return profile


class ResumeFormattingAgent:
    """Renders a PDF resume into a Word-compatible HTML document."""

    def __init__(self, model: DocumentModel):
        self.model = model

    async def render_resume_markup(self, data: bytes) -> str:
        try:
            response = await self.model.generate(
                document=data,
                mime_type=PDF_MIME_TYPE,
                instruction=RESUME_FORMATTING_PROMPT,
                max_output_tokens=FORMATTING_MAX_OUTPUT_TOKENS,
            )
        except ExtractionServiceFailure as e:
            raise RenderingServiceFailure() from e
        return strip_code_fences(response)

    async def render_resume_document(self, data: bytes, content_type: Optional[str]) -> bytes:
        """
        Produce the document bytes stored as ``application/msword``.

        Raises:
            UnsupportedFormat: If the upload is not a PDF
            RenderingServiceFailure: If the model call fails
        """
        if not is_pdf(content_type):
            raise UnsupportedFormat()

        markup = await self.render_resume_markup(data)
        # Markup comes from the model, not the applicant, and is embedded as-is
        document = render_template("resume_document.html", content=markup)
        return document.encode("utf-8")
