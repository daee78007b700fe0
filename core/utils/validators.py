"""Validation utilities for common data types."""

import re
from typing import Optional
from email_validator import validate_email as _validate_email, EmailNotValidError


def validate_email(email: str) -> tuple[bool, Optional[str]]:
    """
    Validate email address format.

    Args:
        email: Email address to validate

    Returns:
        Tuple of (is_valid, normalized_email or error_message)
    """
    try:
        validation = _validate_email(email, check_deliverability=False)
        return True, validation.normalized
    except EmailNotValidError as e:
        return False, str(e)


def normalize_email(email: str) -> str:
    """Canonical form used as the candidate natural key: trimmed and lower-cased."""
    return email.strip().lower()


def sanitize_filename(filename: str) -> str:
    """
    Sanitize filename by removing dangerous characters.

    Args:
        filename: Original filename

    Returns:
        Sanitized filename
    """
    # Remove path separators and other dangerous chars
    sanitized = re.sub(r'[<>:"/\\|?*\x00-\x1f]', '', filename)

    # Replace spaces with underscores
    sanitized = sanitized.replace(' ', '_')

    # Limit length
    if len(sanitized) > 255:
        name, ext = sanitized.rsplit('.', 1) if '.' in sanitized else (sanitized, '')
        sanitized = name[:250] + ('.' + ext if ext else '')

    return sanitized


def file_base_name(filename: Optional[str], default: str = "resume") -> str:
    """
    Storage-safe file name without its final extension.

    "Jane Doe CV.pdf" -> "Jane_Doe_CV"; an empty result falls back to default.
    """
    name = re.sub(r'\.[^/.]+$', '', filename or '')
    name = sanitize_filename(name)
    return name or default
