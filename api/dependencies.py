"""FastAPI dependencies for dependency injection."""

from functools import lru_cache

from fastapi import Depends

from agents.base import GeminiDocumentModel
from agents.resume.agent import ResumeExtractionAgent, ResumeFormattingAgent
from api.services.intake import IntakeWorkflow
from api.services.resumes import ResumeArchiver
from core.integrations.email import ResendEmailService
from core.protocols import BlobStorage, CandidateStore, DocumentModel, EmailSender
from core.storage.s3 import S3Storage
from database.store import SQLCandidateStore


# Process-wide adapters. Tests replace these through app.dependency_overrides.
@lru_cache
def get_candidate_store() -> CandidateStore:
    return SQLCandidateStore()


@lru_cache
def get_document_model() -> DocumentModel:
    return GeminiDocumentModel()


@lru_cache
def get_blob_storage() -> BlobStorage:
    return S3Storage()


@lru_cache
def get_email_sender() -> EmailSender:
    return ResendEmailService()


def get_extraction_agent(
    model: DocumentModel = Depends(get_document_model),
) -> ResumeExtractionAgent:
    return ResumeExtractionAgent(model)


def get_formatting_agent(
    model: DocumentModel = Depends(get_document_model),
) -> ResumeFormattingAgent:
    return ResumeFormattingAgent(model)


def get_resume_archiver(
    formatter: ResumeFormattingAgent = Depends(get_formatting_agent),
    storage: BlobStorage = Depends(get_blob_storage),
    store: CandidateStore = Depends(get_candidate_store),
) -> ResumeArchiver:
    return ResumeArchiver(formatter=formatter, storage=storage, store=store)


def get_intake_workflow(
    store: CandidateStore = Depends(get_candidate_store),
    archiver: ResumeArchiver = Depends(get_resume_archiver),
) -> IntakeWorkflow:
    return IntakeWorkflow(store=store, resume_archiver=archiver)
