"""Google Gemini API wrapper for the external scoring path."""

import json
import logging
import re

from google import genai
from google.genai import types

from config import settings

logger = logging.getLogger(__name__)

_client: genai.Client | None = None

_JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")


class ExternalEvaluationError(Exception):
    """The external model could not produce a usable evaluation."""


def llm_configured() -> bool:
    return bool(settings.gemini_api_key)


def get_client() -> genai.Client | None:
    global _client
    if not settings.gemini_api_key:
        logger.warning("No GEMINI_API_KEY set - external scoring disabled")
        return None
    if _client is None:
        _client = genai.Client(
            api_key=settings.gemini_api_key,
            http_options=types.HttpOptions(timeout=int(settings.llm_timeout_seconds * 1000)),
        )
    return _client


def reset_client() -> None:
    """Drop the cached client so the next call picks up new settings."""
    global _client
    _client = None


def parse_json_response(text: str) -> dict:
    """Pull the JSON object out of a model reply.

    Tolerates markdown code fences and prose around the object.
    """
    text = text.strip()
    # Strip markdown code fences if present
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else text[3:]
        if text.endswith("```"):
            text = text[:-3]
        text = text.strip()

    match = _JSON_OBJECT_RE.search(text)
    if not match:
        raise ExternalEvaluationError("No JSON object found in model response")
    try:
        data = json.loads(match.group())
    except json.JSONDecodeError as e:
        raise ExternalEvaluationError(f"Model response is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ExternalEvaluationError("Model response JSON is not an object")
    return data


async def generate_json(prompt: str) -> dict:
    """Send a prompt to Gemini and parse the JSON response.

    Raises ExternalEvaluationError on any failure; there is no retry.
    """
    client = get_client()
    if client is None:
        raise ExternalEvaluationError("External model is not configured")

    try:
        response = await client.aio.models.generate_content(
            model=settings.llm_model,
            contents=prompt,
            config=types.GenerateContentConfig(
                temperature=settings.llm_temperature,
                max_output_tokens=settings.llm_max_output_tokens,
                response_mime_type="application/json",
            ),
        )
    except Exception as e:
        logger.error("Gemini API error: %s", e)
        raise ExternalEvaluationError("External model request failed") from e

    text = response.text or ""
    if not text.strip():
        raise ExternalEvaluationError("External model returned an empty response")

    try:
        return parse_json_response(text)
    except ExternalEvaluationError as e:
        logger.error("Failed to parse Gemini response as JSON: %s", e)
        raise
