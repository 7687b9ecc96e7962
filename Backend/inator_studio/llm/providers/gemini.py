# inator_studio/llm/providers/gemini.py
"""
Google Gemini provider implementation.
"""
import asyncio
import json
from typing import Optional

import aiohttp

from inator_studio.core.exceptions import GenerationFailed
from inator_studio.core.logging import log


PROVIDER = "gemini"
DEFAULT_MODEL = "gemini-3-flash-preview"
API_URL = "https://generativelanguage.googleapis.com/v1beta/models"


def extract_text(data: dict) -> str:
    """
    Pull the generated text out of a generateContent response body.

    A candidate with no parts (e.g. a safety block) yields "". A body with
    no candidates at all is malformed.
    """
    candidates = data.get("candidates") or []
    if not candidates:
        raise GenerationFailed(PROVIDER, "No candidates in response")

    content = candidates[0].get("content") or {}
    parts = content.get("parts") or []
    return "".join(part.get("text", "") for part in parts if isinstance(part, dict))


async def call(
    prompt: str,
    *,
    api_key: str,
    model: Optional[str] = None,
    api_base: str = API_URL,
    temperature: float = 0.9,
    max_tokens: int = 256,
    timeout: Optional[float] = None,
) -> str:
    """
    Call Google Gemini API.

    Args:
        timeout: total seconds to wait; None waits indefinitely

    Returns:
        The generated text (possibly empty)

    Raises:
        GenerationFailed on transport, status or parse errors
    """
    model = model or DEFAULT_MODEL
    url = f"{api_base}/{model}:generateContent?key={api_key}"

    payload = {
        "contents": [{"role": "user", "parts": [{"text": prompt}]}],
        "generationConfig": {
            "temperature": temperature,
            "maxOutputTokens": max_tokens,
        },
    }

    try:
        async with aiohttp.ClientSession() as session:
            async with session.post(url, json=payload, timeout=aiohttp.ClientTimeout(total=timeout)) as response:
                status = response.status
                text = await response.text()
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        log("GEMINI", f"Transport error: {e!r}")
        raise GenerationFailed(PROVIDER, f"Request failed: {e!r}") from e

    if status == 429:
        log("GEMINI", f"429 Rate limit response: {text[:500]}")
        raise GenerationFailed(PROVIDER, f"Rate limited (429): {text[:200]}", status)

    if status == 403:
        log("GEMINI", f"403 Forbidden response: {text[:500]}")
        raise GenerationFailed(PROVIDER, f"API key invalid or quota exceeded (403): {text[:200]}", status)

    if status == 400:
        log("GEMINI", f"400 Bad request: {text[:500]}")
        raise GenerationFailed(PROVIDER, f"Bad request (400): {text[:200]}", status)

    if status != 200:
        log("GEMINI", f"Error {status}: {text[:500]}")
        raise GenerationFailed(PROVIDER, f"Gemini API error {status}: {text[:200]}", status)

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        log("GEMINI", f"Failed to parse JSON: {text[:500]}")
        raise GenerationFailed(PROVIDER, f"Failed to parse Gemini response: {e}") from e

    if not isinstance(data, dict):
        raise GenerationFailed(PROVIDER, "Unexpected response shape")

    result = extract_text(data)
    log("GEMINI", f"Response received: {'OK' if result.strip() else 'EMPTY'}")
    return result
