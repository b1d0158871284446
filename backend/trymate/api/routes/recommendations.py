"""Recommendation endpoints backed by the pipeline.

Image and category are optional at the HTTP layer so that their absence is
reported by the pipeline as a validation Failure instead of FastAPI's
generic 422.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import JSONResponse

from trymate.config import settings
from trymate.models.contracts import CategoriesResponse, Failure, Success
from trymate.pipeline.orchestrator import RecommendationPipeline
from trymate.pipeline.prompts import CATEGORIES

router = APIRouter(tags=["recommendations"])


def get_pipeline() -> RecommendationPipeline:
    return RecommendationPipeline()


@router.get("/categories", response_model=CategoriesResponse)
async def list_categories() -> CategoriesResponse:
    return CategoriesResponse(categories=list(CATEGORIES), default_model=settings.default_model)


@router.post(
    "/recommendations",
    response_model=Success,
    responses={422: {"model": Failure}},
)
async def create_recommendation(
    image: UploadFile | None = File(None),
    category: str | None = Form(None),
    pipeline: RecommendationPipeline = Depends(get_pipeline),
) -> JSONResponse:
    """Return 1-3 styling suggestions for the uploaded item."""
    outcome = await pipeline.run(image, category)
    status = 200 if isinstance(outcome, Success) else 422
    return JSONResponse(status_code=status, content=outcome.model_dump(mode="json"))
