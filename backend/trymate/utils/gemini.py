"""Outbound call to Gemini generateContent over plain REST.

The API key travels as the ``key`` query parameter and is never logged.
Uploaded images are always declared as JPEG to Gemini.
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from trymate.config import settings

logger = structlog.get_logger()

INLINE_IMAGE_MIME_TYPE = "image/jpeg"


class MissingCredentialError(RuntimeError):
    """GEMINI_API_KEY is not configured on the server."""


def build_payload(prompt: str, image_base64: str | None = None) -> dict[str, Any]:
    """Build the generateContent request body for one user turn."""
    parts: list[dict[str, Any]] = [{"text": prompt}]
    if image_base64:
        parts.append({"inlineData": {"mimeType": INLINE_IMAGE_MIME_TYPE, "data": image_base64}})
    return {
        "contents": [{"role": "user", "parts": parts}],
        "generationConfig": {
            "temperature": settings.temperature,
            "maxOutputTokens": settings.max_output_tokens,
        },
    }


def generate_content_url(model: str) -> str:
    return f"{settings.gemini_base_url.rstrip('/')}/models/{model}:generateContent"


async def generate_content(
    prompt: str,
    model: str,
    image_base64: str | None = None,
    client: httpx.AsyncClient | None = None,
) -> httpx.Response:
    """POST one generateContent request and return the response as-is.

    Non-2xx responses are returned, not raised, so the caller can forward the
    status and body verbatim. Raises MissingCredentialError when no API key
    is configured and lets httpx transport errors propagate.
    """
    if not settings.gemini_api_key:
        raise MissingCredentialError("Server missing GEMINI_API_KEY")

    url = generate_content_url(model)
    payload = build_payload(prompt, image_base64)

    if client is None:
        async with httpx.AsyncClient() as owned:
            response = await _post(owned, url, payload)
    else:
        response = await _post(client, url, payload)

    log = logger.info if response.is_success else logger.error
    log(
        "gemini_generate_content",
        model=model,
        status_code=response.status_code,
        has_image=bool(image_base64),
    )
    return response


async def _post(client: httpx.AsyncClient, url: str, payload: dict[str, Any]) -> httpx.Response:
    return await client.post(
        url,
        params={"key": settings.gemini_api_key},
        json=payload,
        timeout=settings.request_timeout_seconds,
    )
