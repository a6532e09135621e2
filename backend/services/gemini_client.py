"""Google Gemini API wrapper with error handling."""

import json
import logging

from google import genai
from google.genai import types

from config import settings
from services.errors import CollaboratorError

logger = logging.getLogger(__name__)

_client: genai.Client | None = None


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


async def _generate(prompt: str, model: str, config: types.GenerateContentConfig) -> str:
    client = get_client()
    if client is None:
        raise CollaboratorError("Gemini is not configured")

    try:
        response = await client.aio.models.generate_content(
            model=model,
            contents=prompt,
            config=config,
        )
    except Exception as e:
        logger.error("Gemini API error: %s", e)
        raise CollaboratorError(f"Gemini request failed: {e}") from e

    return (response.text or "").strip()


async def generate_text(prompt: str, model: str | None = None) -> str:
    """Send a prompt to Gemini and return the plain-text reply (may be empty)."""
    config = types.GenerateContentConfig(temperature=settings.gemini_temperature)
    return await _generate(prompt, model or settings.gemini_model, config)


async def generate_json(
    prompt: str,
    response_schema: dict | None = None,
    model: str | None = None,
) -> dict:
    """Send a prompt to Gemini and parse the JSON object it returns.

    Raises CollaboratorError when the call fails or the reply is not a
    JSON object.
    """
    config = types.GenerateContentConfig(
        temperature=settings.gemini_temperature,
        max_output_tokens=4096,
        response_mime_type="application/json",
        response_schema=response_schema,
    )
    text = await _generate(prompt, model or settings.gemini_model, config)
    if not text:
        raise CollaboratorError("Gemini returned an empty response")

    try:
        data = json.loads(_strip_code_fences(text))
    except json.JSONDecodeError as e:
        logger.error("Failed to parse Gemini response as JSON: %s", e)
        raise CollaboratorError("Gemini response was not valid JSON") from e

    if not isinstance(data, dict):
        logger.error("Gemini returned JSON %s, expected an object", type(data).__name__)
        raise CollaboratorError("Gemini response was not a JSON object")
    return data
