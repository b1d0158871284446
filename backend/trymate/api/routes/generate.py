"""Generate proxy: holds the Gemini key server-side and forwards prompts to Gemini.

Browser clients call this endpoint directly, so every response carries
permissive CORS headers. Gemini's non-2xx bodies are forwarded verbatim with
the same status code to keep upstream errors debuggable.
"""

from __future__ import annotations

import json
from typing import Any

import httpx
import structlog
from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse

from trymate.config import settings
from trymate.utils.gemini import MissingCredentialError, generate_content

logger = structlog.get_logger()

router = APIRouter(tags=["generate"])

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def _error(status: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status, content={"error": message}, headers=CORS_HEADERS)


async def _read_body(request: Request) -> dict[str, Any]:
    """Parse the JSON body, treating anything unparsable or non-object as empty."""
    raw = await request.body()
    try:
        body = json.loads(raw or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError):
        return {}
    return body if isinstance(body, dict) else {}


@router.options("/generate")
async def generate_preflight() -> Response:
    return Response(status_code=204, headers=CORS_HEADERS)


@router.api_route(
    "/generate",
    methods=["GET", "HEAD", "PUT", "PATCH", "DELETE", "TRACE", "CONNECT"],
)
async def generate_method_not_allowed() -> JSONResponse:
    return _error(405, "Method not allowed")


@router.post("/generate")
async def generate(request: Request) -> Response:
    """Forward ``{prompt, model, imageBase64}`` to Gemini generateContent."""
    body = await _read_body(request)
    prompt = body.get("prompt")
    if not prompt or not isinstance(prompt, str):
        return _error(400, "Prompt is required")
    model = body.get("model") or settings.default_model
    image_base64 = body.get("imageBase64") or None

    try:
        upstream = await generate_content(prompt, model, image_base64)
    except MissingCredentialError as exc:
        logger.error("gemini_credential_missing")
        return _error(500, str(exc))
    except httpx.HTTPError as exc:
        logger.error("gemini_forward_failed", model=model, error_type=type(exc).__name__)
        return _error(500, str(exc) or "Internal server error")

    if not upstream.is_success:
        return Response(
            content=upstream.content,
            status_code=upstream.status_code,
            media_type=upstream.headers.get("content-type", "text/plain"),
            headers=CORS_HEADERS,
        )

    try:
        return JSONResponse(content=upstream.json(), headers=CORS_HEADERS)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return Response(
            content=upstream.content,
            media_type="text/plain",
            headers=CORS_HEADERS,
        )
