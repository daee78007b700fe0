"""Shared fixtures and utilities for tests."""

import os

# Settings are read at import time, so the environment must be in place
# before anything from the application is imported.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("AWS_REGION", "us-east-1")
os.environ.setdefault("AWS_S3_BUCKET", "test-bucket")
os.environ.setdefault("GOOGLE_API_KEY", "test-google-key")
os.environ.setdefault("RESEND_API_KEY", "re_test_key")
os.environ.setdefault("JSON_LOGS", "false")

import uuid
from datetime import datetime, timezone

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from database.engine import Base
from database.models import (
    Client,
    EmploymentType,
    Job,
    JobStatus,
    LocationType,
    Recruiter,
)
from tests.fakes import (
    SUBMITTED_AT,
    FakeBlobStorage,
    FakeDocumentModel,
    FakeEmailSender,
    FixedClock,
    InMemoryCandidateStore,
)


# ==================== Documents ==================== #
def _create_minimal_pdf(text: str) -> bytes:
    """Create a minimal valid PDF with embedded text."""
    return (
        b"%PDF-1.4\n"
        b"1 0 obj<</Type/Catalog/Pages 2 0 R>>endobj\n"
        b"2 0 obj<</Type/Pages/Kids[3 0 R]/Count 1>>endobj\n"
        b"3 0 obj<</Type/Page/Parent 2 0 R/MediaBox[0 0 612 792]/Contents 4 0 R/Resources<</Font<</F1 5 0 R>>>>>>endobj\n"
        b"4 0 obj<</Length 44>>stream\nBT /F1 12 Tf 100 700 Td ("
        + text.encode()
        + b") Tj ET\nendstream endobj\n"
        b"5 0 obj<</Type/Font/Subtype/Type1/BaseFont/Helvetica>>endobj\n"
        b"trailer<</Size 6/Root 1 0 R>>\n%%EOF"
    )


@pytest.fixture
def minimal_pdf():
    """Fixture providing a minimal valid PDF."""
    return _create_minimal_pdf("Jane Doe - Senior Engineer")


# ==================== Domain objects ==================== #
@pytest.fixture
def recruiter_id():
    return uuid.uuid4()


@pytest.fixture
def open_job(recruiter_id):
    """A published, open job snapshot (not persisted)."""
    return Job(
        id=uuid.uuid4(),
        recruiter_id=recruiter_id,
        title="Senior Backend Engineer",
        location_type=LocationType.REMOTE,
        employment_type=EmploymentType.PERMANENT,
        salary_currency="USD",
        is_published=True,
        status=JobStatus.OPEN,
    )


# ==================== Fakes ==================== #
@pytest.fixture
def clock():
    return FixedClock(SUBMITTED_AT)


@pytest.fixture
def store():
    return InMemoryCandidateStore()


@pytest.fixture
def blob_storage():
    return FakeBlobStorage()


@pytest.fixture
def document_model():
    return FakeDocumentModel()


@pytest.fixture
def email_sender():
    return FakeEmailSender()


# ==================== SQL ==================== #
@pytest_asyncio.fixture
async def session_factory():
    """Session factory bound to a fresh in-memory SQLite schema."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest_asyncio.fixture
async def seeded_board(session_factory):
    """A recruiter with one client and a mix of published, draft and closed jobs."""
    recruiter = Recruiter(
        id=uuid.uuid4(),
        slug="jane-recruits",
        full_name="Jane Recruiter",
        email="jane@searchfirm.com",
        company_name="Search Firm",
    )
    client = Client(
        id=uuid.uuid4(),
        recruiter_id=recruiter.id,
        company_name="Acme Robotics",
        industry="Manufacturing",
        website="https://acme.example.com",
    )
    jobs = {
        "remote": Job(
            id=uuid.uuid4(),
            recruiter_id=recruiter.id,
            client_id=client.id,
            title="Senior Python Engineer",
            description="Build data pipelines",
            location_type=LocationType.REMOTE,
            employment_type=EmploymentType.PERMANENT,
            salary_min=120000,
            salary_max=150000,
            is_published=True,
            status=JobStatus.OPEN,
            created_at=datetime(2025, 3, 1, tzinfo=timezone.utc),
        ),
        "hybrid": Job(
            id=uuid.uuid4(),
            recruiter_id=recruiter.id,
            client_id=client.id,
            title="Controls Technician",
            description="PLC programming",
            city="Austin",
            state="TX",
            location_type=LocationType.HYBRID,
            employment_type=EmploymentType.CONTRACT,
            is_published=True,
            status=JobStatus.OPEN,
            created_at=datetime(2025, 3, 3, tzinfo=timezone.utc),
        ),
        "draft": Job(
            id=uuid.uuid4(),
            recruiter_id=recruiter.id,
            title="Unannounced Role",
            location_type=LocationType.ONSITE,
            employment_type=EmploymentType.PERMANENT,
            is_published=False,
            status=JobStatus.OPEN,
        ),
        "closed": Job(
            id=uuid.uuid4(),
            recruiter_id=recruiter.id,
            title="Filled Python Role",
            location_type=LocationType.REMOTE,
            employment_type=EmploymentType.PERMANENT,
            is_published=True,
            status=JobStatus.CLOSED,
        ),
    }

    async with session_factory() as session:
        session.add_all([recruiter, client, *jobs.values()])
        await session.commit()

    return {"recruiter": recruiter, "client": client, "jobs": jobs}
