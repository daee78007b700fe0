"""
SQLAlchemy implementation of the candidate store.

Each operation opens its own session and commits on its own; nothing here
spans two writes. Uniqueness of (email, recruiter_id) is left entirely to the
database constraint so that concurrent submissions race safely: exactly one
insert wins and the others see CandidateConflict.
"""

import logging
import uuid

from sqlalchemy import select, delete, exists
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.exceptions import CandidateConflict, StoreFailure
from database.engine import AsyncSessionLocal
from database.models import (
    Application,
    Candidate,
    CandidateFile,
    CANDIDATE_EMAIL_RECRUITER_CONSTRAINT,
)

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION_SQLSTATE = "23505"


def is_unique_violation(exc: IntegrityError) -> bool:
    """
    Tell a unique-constraint violation apart from other integrity errors
    (foreign keys, not-null) across asyncpg and sqlite drivers.
    """
    orig = exc.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate == UNIQUE_VIOLATION_SQLSTATE:
        return True

    message = str(orig).lower()
    return (
        CANDIDATE_EMAIL_RECRUITER_CONSTRAINT in message
        or "unique constraint failed" in message
        or "duplicate key value violates unique constraint" in message
    )


class SQLCandidateStore:
    """Candidate store backed by the relational database."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession] | None = None):
        self._session_factory = session_factory or AsyncSessionLocal

    async def insert_candidate(self, candidate: Candidate) -> Candidate:
        async with self._session_factory() as session:
            session.add(candidate)
            try:
                await session.commit()
            except IntegrityError as exc:
                await session.rollback()
                if is_unique_violation(exc):
                    raise CandidateConflict(candidate.email, candidate.recruiter_id) from exc
                logger.error("Candidate insert violated a constraint", exc_info=True)
                raise StoreFailure() from exc
            except SQLAlchemyError as exc:
                await session.rollback()
                logger.error("Candidate insert failed", exc_info=True)
                raise StoreFailure() from exc
            await session.refresh(candidate)
            return candidate

    async def find_candidate(self, email: str, recruiter_id: uuid.UUID) -> Candidate | None:
        async with self._session_factory() as session:
            try:
                result = await session.execute(
                    select(Candidate).where(
                        Candidate.email == email,
                        Candidate.recruiter_id == recruiter_id,
                    )
                )
            except SQLAlchemyError as exc:
                logger.error("Candidate lookup failed", exc_info=True)
                raise StoreFailure() from exc
            return result.scalar_one_or_none()

    async def insert_application(self, application: Application) -> Application:
        async with self._session_factory() as session:
            session.add(application)
            try:
                await session.commit()
            except SQLAlchemyError as exc:
                await session.rollback()
                logger.error("Application insert failed", exc_info=True)
                raise StoreFailure() from exc
            await session.refresh(application)
            return application

    async def application_exists(self, job_id: uuid.UUID, candidate_id: uuid.UUID) -> bool:
        async with self._session_factory() as session:
            try:
                result = await session.execute(
                    select(
                        exists().where(
                            Application.job_id == job_id,
                            Application.candidate_id == candidate_id,
                        )
                    )
                )
            except SQLAlchemyError as exc:
                logger.error("Application lookup failed", exc_info=True)
                raise StoreFailure() from exc
            return bool(result.scalar())

    async def delete_candidate(self, candidate_id: uuid.UUID) -> None:
        async with self._session_factory() as session:
            try:
                await session.execute(delete(Candidate).where(Candidate.id == candidate_id))
                await session.commit()
            except SQLAlchemyError as exc:
                await session.rollback()
                logger.error(f"Failed to delete candidate {candidate_id}", exc_info=True)
                raise StoreFailure() from exc

    async def insert_candidate_file(self, candidate_file: CandidateFile) -> CandidateFile:
        async with self._session_factory() as session:
            session.add(candidate_file)
            try:
                await session.commit()
            except SQLAlchemyError as exc:
                await session.rollback()
                logger.error("Candidate file insert failed", exc_info=True)
                raise StoreFailure() from exc
            await session.refresh(candidate_file)
            return candidate_file
