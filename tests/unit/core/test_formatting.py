"""
Tests for job listing display formatting and date helpers.
"""

from datetime import datetime, timedelta, timezone

import pytest

from core.utils.datetime import add_minutes, days_between, ensure_utc, to_unix_millis
from core.utils.formatting import (
    format_employment_type,
    format_location,
    format_posted,
    format_posted_date,
    format_salary,
)

NOW = datetime(2025, 3, 31, 12, 0, tzinfo=timezone.utc)


# ==================== Location ==================== #
class TestFormatLocation:
    @pytest.mark.parametrize(
        "city, state, location_type, country, expected",
        [
            ("Austin", "TX", "remote", None, "Remote"),
            (None, None, "remote", None, "Remote"),
            ("Austin", "TX", "onsite", None, "Austin, TX"),
            ("Austin", "TX", "hybrid", None, "Austin, TX (Hybrid)"),
            ("Austin", None, "onsite", None, "Austin"),
            (None, "TX", "hybrid", None, "TX (Hybrid)"),
            (None, None, "hybrid", None, "hybrid"),
            (None, None, "onsite", None, "onsite"),
            ("Austin", "TX", "onsite", "USA", "Austin, TX, USA"),
        ],
    )
    def test_format_location(self, city, state, location_type, country, expected):
        assert format_location(city, state, location_type, country) == expected


# ==================== Salary ==================== #
class TestFormatSalary:
    @pytest.mark.parametrize(
        "salary_min, salary_max, expected",
        [
            (120000, 150000, "$120k - $150k USD"),
            (120000, None, "$120k+ USD"),
            (None, 150000, "Up to $150k USD"),
            (None, None, None),
            (0, 0, None),
            (0, 90000, "Up to $90k USD"),
            (125500, 130499, "$126k - $130k USD"),
            (999, None, "$1k+ USD"),
        ],
    )
    def test_compact(self, salary_min, salary_max, expected):
        assert format_salary(salary_min, salary_max) == expected

    def test_full_amounts(self):
        assert format_salary(120000, 150000, "USD", compact=False) == "$120,000 - $150,000 USD"

    def test_currency_suffix(self):
        assert format_salary(80000, None, "EUR") == "$80k+ EUR"


# ==================== Dates ==================== #
class TestFormatPosted:
    @pytest.mark.parametrize(
        "age, expected",
        [
            (timedelta(hours=3), "Today"),
            (timedelta(hours=23, minutes=59), "Today"),
            (timedelta(days=1, hours=2), "Yesterday"),
            (timedelta(days=3), "3 days ago"),
            (timedelta(days=6, hours=23), "6 days ago"),
            (timedelta(days=7), "1 weeks ago"),
            (timedelta(days=29), "4 weeks ago"),
            (timedelta(days=30), "2025-03-01"),
        ],
    )
    def test_relative_age(self, age, expected):
        assert format_posted(NOW - age, now=NOW) == expected

    def test_future_date_is_today(self):
        assert format_posted(NOW + timedelta(hours=2), now=NOW) == "Today"

    def test_naive_created_at_treated_as_utc(self):
        naive = datetime(2025, 3, 30, 12, 0)
        assert format_posted(naive, now=NOW) == "Yesterday"

    def test_posted_date(self):
        assert format_posted_date(datetime(2025, 3, 4, tzinfo=timezone.utc)) == "March 4, 2025"


class TestDatetimeHelpers:
    def test_add_minutes(self):
        assert add_minutes(NOW, 90) == datetime(2025, 3, 31, 13, 30, tzinfo=timezone.utc)

    def test_days_between_floors(self):
        assert days_between(NOW, NOW + timedelta(days=2, hours=23)) == 2

    def test_ensure_utc_converts_offsets(self):
        eastern = timezone(timedelta(hours=-5))
        dt = datetime(2025, 3, 31, 7, 0, tzinfo=eastern)
        assert ensure_utc(dt) == NOW
        assert ensure_utc(dt).tzinfo == timezone.utc

    def test_to_unix_millis(self):
        assert to_unix_millis(datetime(1970, 1, 1, 0, 0, 1, tzinfo=timezone.utc)) == 1000


# ==================== Misc ==================== #
class TestFormatText:
    def test_format_employment_type(self):
        assert format_employment_type("contract_to_hire") == "contract to hire"
