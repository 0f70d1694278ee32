"""Google Gemini API wrapper with error handling."""

import json
import logging

from google import genai
from google.genai import errors, types

from config import settings

logger = logging.getLogger(__name__)

_client: genai.Client | None = None


class GeminiError(RuntimeError):
    """The hosted model call failed."""


class GeminiNotConfiguredError(GeminiError):
    """No GEMINI_API_KEY is configured."""


class GeminiRateLimitError(GeminiError):
    """Gemini answered 429."""


class GeminiAuthError(GeminiError):
    """Gemini rejected the API key (403)."""


class GeminiResponseError(GeminiError):
    """Gemini answered, but not with the JSON we asked for."""


def get_client() -> genai.Client | None:
    global _client
    if not settings.gemini_api_key:
        logger.warning("No GEMINI_API_KEY set - Gemini features disabled")
        return None
    if _client is None:
        _client = genai.Client(api_key=settings.gemini_api_key)
    return _client


def _strip_code_fences(text: str) -> str:
    text = text.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else text[3:]
        if text.endswith("```"):
            text = text[:-3]
        text = text.strip()
    return text


async def generate_json(prompt: str) -> dict:
    """Send a prompt to Gemini and parse the JSON response."""
    client = get_client()
    if client is None:
        raise GeminiNotConfiguredError("GEMINI_API_KEY is not configured")

    try:
        response = await client.aio.models.generate_content(
            model=settings.gemini_model,
            contents=prompt,
            config=types.GenerateContentConfig(
                temperature=settings.gemini_temperature,
                top_k=40,
                top_p=0.95,
                max_output_tokens=4096,
            ),
        )
    except errors.APIError as e:
        if e.code == 429:
            raise GeminiRateLimitError("Rate limit exceeded. Please try again later.") from e
        if e.code == 403:
            raise GeminiAuthError("Invalid API key. Please check your Gemini API configuration.") from e
        logger.error("Gemini API error: %s %s", e.code, e)
        raise GeminiError("AI analysis failed") from e

    text = _strip_code_fences(response.text or "")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error("Failed to parse Gemini response as JSON: %s", e)
        raise GeminiResponseError("Invalid AI response format") from e

    if not isinstance(data, dict):
        logger.error("Gemini response is not a JSON object: %s", type(data).__name__)
        raise GeminiResponseError("Invalid AI response format")
    return data
