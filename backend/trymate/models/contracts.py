"""TryMate contract models shared by the pipeline and the HTTP routes."""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

# === Pipeline Types ===


class ErrorKind(StrEnum):
    VALIDATION = "validation_error"
    TRANSPORT = "transport_error"
    REMOTE = "remote_error"
    EXTRACTION = "extraction_error"


class GenerationRequest(BaseModel):
    """Body sent to the generate endpoint.

    Serialized with aliases so the wire shape is
    ``{"model", "prompt", "imageBase64"}``.
    """

    model_config = ConfigDict(populate_by_name=True)

    model: str
    prompt: str = Field(min_length=1)
    image_data: str | None = Field(default=None, alias="imageBase64")


class Success(BaseModel):
    status: Literal["success"] = "success"
    suggestions: list[str] = Field(min_length=1, max_length=3)
    source: Literal["remote", "fallback"]


class Failure(BaseModel):
    status: Literal["failure"] = "failure"
    kind: ErrorKind
    message: str


PipelineOutcome = Annotated[Success | Failure, Field(discriminator="status")]


# === API Request/Response Models ===


class CategoriesResponse(BaseModel):
    categories: list[str]
    default_model: str


class ErrorResponse(BaseModel):
    error: str
    message: str
    retryable: bool
    detail: str | None = None
