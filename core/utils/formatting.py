"""Formatting utilities for job listing display strings."""

import math
from typing import Optional
from datetime import datetime

from core.utils.datetime import days_between, ensure_utc, now as utc_now


def format_location(
    city: Optional[str],
    state: Optional[str],
    location_type: str,
    country: Optional[str] = None,
) -> str:
    """
    Format a job location for display.

    Remote jobs always read "Remote". Otherwise the known parts are joined,
    with " (Hybrid)" appended for hybrid roles; if no part is known the bare
    location type is returned.

    Args:
        city: City
        state: State or region
        location_type: remote, hybrid or onsite
        country: Country (shown on the job detail page only)

    Returns:
        Display string
    """
    if location_type == "remote":
        return "Remote"
    location = ", ".join(part for part in (city, state, country) if part)
    if not location:
        return location_type
    return f"{location}{' (Hybrid)' if location_type == 'hybrid' else ''}"


def _compact_amount(amount: int) -> str:
    # Thousands, rounded half up
    return f"${math.floor(amount / 1000 + 0.5)}k"


def _full_amount(amount: int) -> str:
    return f"${amount:,}"


def format_salary(
    salary_min: Optional[int],
    salary_max: Optional[int],
    currency: str = "USD",
    compact: bool = True,
) -> Optional[str]:
    """
    Format a salary range for display.

    Args:
        salary_min: Lower bound (0 or None means unknown)
        salary_max: Upper bound (0 or None means unknown)
        currency: Currency code appended to the range
        compact: "$120k" style for listings, "$120,000" style for job detail

    Returns:
        Display string, or None when neither bound is known
    """
    fmt = _compact_amount if compact else _full_amount
    if salary_min and salary_max:
        return f"{fmt(salary_min)} - {fmt(salary_max)} {currency}"
    if salary_min:
        return f"{fmt(salary_min)}+ {currency}"
    if salary_max:
        return f"Up to {fmt(salary_max)} {currency}"
    return None


def format_posted(created_at: datetime, now: Optional[datetime] = None) -> str:
    """Relative posting age: Today, Yesterday, N days ago, N weeks ago, then the date."""
    diff = days_between(created_at, now or utc_now())
    if diff <= 0:
        return "Today"
    if diff == 1:
        return "Yesterday"
    if diff < 7:
        return f"{diff} days ago"
    if diff < 30:
        return f"{diff // 7} weeks ago"
    return ensure_utc(created_at).date().isoformat()


def format_posted_date(created_at: datetime) -> str:
    """Long posting date for the job detail page, e.g. "March 4, 2025"."""
    dt = ensure_utc(created_at)
    return f"{dt.strftime('%B')} {dt.day}, {dt.year}"


def format_employment_type(employment_type: str) -> str:
    """contract_to_hire -> contract to hire"""
    return employment_type.replace("_", " ")
