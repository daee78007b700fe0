"""Gemini-backed document model shared by the resume agents."""

import logging
from typing import Optional

from google.genai import types

from core.exceptions import ExtractionServiceFailure

logger = logging.getLogger(__name__)


class GeminiDocumentModel:
    """Sends a document inline with an instruction to a Gemini model."""

    def __init__(
        self,
        model: Optional[str] = None,
        api_key: Optional[str] = None,
        temperature: float = 0.0,
    ):
        """Initialize the model.

        Args:
            model: Gemini model name (EXTRACTION_MODEL when omitted)
            api_key: API key (GOOGLE_API_KEY when omitted)
            temperature: Sampling temperature
        """
        from core.config import settings

        self.model = model or settings.extraction_model
        self.api_key = api_key or settings.google_api_key
        self.temperature = temperature
        self._client = None

    def _get_client(self):
        """Get or create the google-genai client."""
        if self._client is None:
            from google import genai

            self._client = genai.Client(api_key=self.api_key)
        return self._client

    async def generate(
        self,
        document: bytes,
        mime_type: str,
        instruction: str,
        max_output_tokens: int,
    ) -> str:
        """Ask the model about a document.

        Args:
            document: Raw document bytes
            mime_type: MIME type of the document
            instruction: Prompt sent after the document
            max_output_tokens: Maximum tokens in the response

        Returns:
            Model response text

        Raises:
            ExtractionServiceFailure: If the provider call fails or returns no text
        """
        client = self._get_client()
        try:
            response = await client.aio.models.generate_content(
                model=self.model,
                contents=[
                    types.Part.from_bytes(data=document, mime_type=mime_type),
                    instruction,
                ],
                config=types.GenerateContentConfig(
                    temperature=self.temperature,
                    max_output_tokens=max_output_tokens,
                ),
            )
        except Exception as e:
            logger.error(f"Document model call failed: {type(e).__name__}", exc_info=True)
            raise ExtractionServiceFailure() from e

        text = response.text
        if not text:
            logger.error("Document model returned an empty response")
            raise ExtractionServiceFailure("Document model returned an empty response")
        return text
