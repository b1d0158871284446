"""Health check endpoint.

Always returns 200 so load balancers keep routing; a missing Gemini key is
reported, not treated as unhealthy, because fallback suggestions still work.
"""

from __future__ import annotations

from fastapi import APIRouter

from trymate.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check() -> dict:
    return {
        "status": "ok",
        "version": "0.1.0",
        "environment": settings.environment,
        "gemini_configured": bool(settings.gemini_api_key),
    }
