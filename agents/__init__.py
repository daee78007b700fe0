"""
Agents package for Gemini-backed document agents.

Each agent follows a consistent structure with agent.py, prompts.py and
schemas.py; the model client they share lives in agents.base.
"""

from agents.base import GeminiDocumentModel
from agents.resume.agent import ResumeExtractionAgent, ResumeFormattingAgent
from agents.resume.schemas import CandidateProfile

__all__ = [
    "GeminiDocumentModel",
    "ResumeExtractionAgent",
    "ResumeFormattingAgent",
    "CandidateProfile",
]
