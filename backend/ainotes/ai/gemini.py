"""
Gemini client for the notes assistant.

Configured from the environment:
  GEMINI_API_KEY=your-key      (required; without it create_llm() returns None)
  GEMINI_MODEL=gemini-2.0-flash
"""
from __future__ import annotations

import logging
import os

from google import genai
from google.genai import types

from ainotes.errors import AIServiceError, MissingApiKeyError

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.0-flash"

TEMPERATURE = 0.7
TOP_P = 0.95
TOP_K = 40
MAX_OUTPUT_TOKENS = 2048


class GeminiClient:
    """Single-shot text generation with fixed sampling parameters."""

    def __init__(self, api_key: str, model: str = DEFAULT_MODEL):
        if not api_key:
            raise MissingApiKeyError()
        self.model = model
        self._client = genai.Client(api_key=api_key)
        self._config = types.GenerateContentConfig(
            temperature=TEMPERATURE,
            top_p=TOP_P,
            top_k=TOP_K,
            max_output_tokens=MAX_OUTPUT_TOKENS,
        )

    def generate(self, prompt: str) -> str:
        """Return the raw model text ("" when the model returned nothing).

        Raises:
            AIServiceError: If the API call fails.
        """
        try:
            response = self._client.models.generate_content(
                model=self.model,
                contents=prompt,
                config=self._config,
            )
        except Exception as e:
            raise AIServiceError(str(e) or "Unknown error") from e
        return response.text or ""


def create_llm() -> GeminiClient | None:
    """Build the client from env; None signals a missing API key."""
    api_key = os.getenv("GEMINI_API_KEY", "")
    if not api_key:
        logger.error("GEMINI_API_KEY is not set in environment variables")
        return None
    return GeminiClient(api_key, model=os.getenv("GEMINI_MODEL", DEFAULT_MODEL))
