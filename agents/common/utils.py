"""Shared utility functions for agents."""

import json
import logging
import re
from typing import Any, Dict

logger = logging.getLogger(__name__)

# Opening fence with an optional language tag, and any bare closing fence
_OPENING_FENCE = re.compile(r"```[a-zA-Z]*\n?")
_CLOSING_FENCE = re.compile(r"```\n?")


def strip_code_fences(response: str) -> str:
    """Remove markdown code fences (```json, ```html, ```) and surrounding whitespace."""
    cleaned = _OPENING_FENCE.sub("", response)
    cleaned = _CLOSING_FENCE.sub("", cleaned)
    return cleaned.strip()


def parse_json_response(response: str) -> Dict[str, Any]:
    """Parse a JSON object from a model response that may be wrapped in fences.

    Args:
        response: Raw model output

    Returns:
        Parsed JSON object

    Raises:
        ValueError: If the cleaned response is not a JSON object
    """
    cleaned = strip_code_fences(response)
    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise ValueError(f"Response is not valid JSON: {e}") from e

    if not isinstance(parsed, dict):
        raise ValueError(f"Expected a JSON object, got {type(parsed).__name__}")
    return parsed
