"""Google Gemini API wrapper with error handling.

Every call returns None instead of raising when the API key is missing
or the request fails, so callers can fall back to local heuristics.
"""

import json
import logging

from google import genai
from google.genai import types

from config import settings

logger = logging.getLogger(__name__)

_client: genai.Client | None = None


def is_configured() -> bool:
    return bool(settings.gemini_api_key) and settings.gemini_api_key != "your_gemini_api_key_here"


def get_client() -> genai.Client | None:
    global _client
    if not is_configured():
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


async def generate_text(prompt: str, temperature: float = 0.7, max_output_tokens: int = 2048) -> str | None:
    """Send a prompt to Gemini and return the plain text response."""
    client = get_client()
    if client is None:
        return None

    try:
        response = await client.aio.models.generate_content(
            model=settings.gemini_model,
            contents=prompt,
            config=types.GenerateContentConfig(
                temperature=temperature,
                max_output_tokens=max_output_tokens,
            ),
        )
    except Exception as e:
        logger.error("Gemini API error: %s", e)
        return None

    text = (response.text or "").strip()
    return text or None


async def generate_json(prompt: str, temperature: float = 0.3) -> dict | None:
    """Send a prompt to Gemini and parse the JSON response."""
    text = await generate_text(prompt, temperature=temperature, max_output_tokens=4096)
    if text is None:
        return None

    try:
        data = json.loads(_strip_code_fences(text))
    except json.JSONDecodeError as e:
        logger.error("Failed to parse Gemini response as JSON: %s", e)
        return None

    if not isinstance(data, dict):
        logger.error("Gemini returned %s instead of a JSON object", type(data).__name__)
        return None
    return data
