"""Recruiter contact requests: validate the lead form and email the recruiter."""

import logging
from dataclasses import dataclass
from typing import Optional

from core.exceptions import MissingLeadFields
from core.protocols import EmailMessage, EmailSender
from core.utils.templates import render_template

logger = logging.getLogger(__name__)

REQUIRED_LEAD_FIELDS = ("recruiter_email", "company_name", "name", "email", "notes")


@dataclass
class LeadForm:
    """A "contact recruiter" submission from a recruiter's public page."""

    recruiter_email: Optional[str] = None
    recruiter_name: Optional[str] = None
    company_name: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    preferred_contact: Optional[str] = None
    notes: Optional[str] = None


def build_lead_email(lead: LeadForm) -> EmailMessage:
    """Render the notification email; every lead value is HTML-escaped."""
    html = render_template(
        "contact_recruiter.html",
        recruiter_name=lead.recruiter_name,
        company_name=lead.company_name,
        name=lead.name,
        email=lead.email,
        phone=lead.phone,
        preferred_contact=lead.preferred_contact,
        notes=lead.notes,
    )
    return EmailMessage(
        to=[lead.recruiter_email],
        subject=f"New Talent Request from {lead.name} at {lead.company_name}",
        html=html,
        reply_to=lead.email,
        tags={"category": "talent_request"},
    )


async def notify_recruiter(lead: LeadForm, sender: EmailSender) -> str:
    """
    Email a recruiter about a new lead.

    Args:
        lead: Submitted contact form
        sender: Transactional email provider

    Returns:
        Provider message ID

    Raises:
        MissingLeadFields: If a required field is empty (nothing is sent)
        DeliveryFailed: If the provider rejects the message
    """
    missing = [f for f in REQUIRED_LEAD_FIELDS if not (getattr(lead, f) or "").strip()]
    if missing:
        logger.info(f"Contact request rejected, missing: {', '.join(missing)}")
        raise MissingLeadFields()

    message = build_lead_email(lead)
    message_id = await sender.send(message)
    logger.info(f"Talent request forwarded to recruiter: {message_id}")
    return message_id
