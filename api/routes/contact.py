"""Contact recruiter endpoint."""

from fastapi import APIRouter, Depends

from api.dependencies import get_email_sender
from api.schemas.common import SuccessResponse
from api.schemas.contact import ContactRecruiterRequest
from api.services.contact import LeadForm, notify_recruiter
from core.protocols import EmailSender

router = APIRouter(prefix="/api", tags=["Contact"])


@router.post(
    "/contact-recruiter",
    response_model=SuccessResponse,
    summary="Send a talent request to a recruiter",
)
async def contact_recruiter(
    request: ContactRecruiterRequest,
    sender: EmailSender = Depends(get_email_sender),
) -> SuccessResponse:
    """
    Email the recruiter with the visitor's request.

    Requires **recruiter_email**, **company_name**, **name**, **email** and
    **notes**; the visitor's email is used as reply-to.
    """
    await notify_recruiter(LeadForm(**request.model_dump()), sender)
    return SuccessResponse()
