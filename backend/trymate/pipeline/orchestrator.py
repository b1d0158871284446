"""Recommendation pipeline: encode → prompt → remote call → normalize → split.

``run`` always returns a PipelineOutcome. Validation problems come back as a
Failure; every other failure is logged with its classification and answered
with the category's fallback suggestions.
"""

from __future__ import annotations

from enum import StrEnum

import structlog

from trymate.config import settings
from trymate.models.contracts import Failure, GenerationRequest, PipelineOutcome, Success
from trymate.pipeline.encoder import ImageUpload, encode_image
from trymate.pipeline.errors import ExtractionError, ValidationError, classify
from trymate.pipeline.fallback import fallback_suggestions
from trymate.pipeline.normalizer import extract_text
from trymate.pipeline.prompts import build_prompt
from trymate.pipeline.remote import RemoteClient
from trymate.pipeline.splitter import split_suggestions

logger = structlog.get_logger()


class PipelineStage(StrEnum):
    VALIDATING = "validating"
    ENCODING = "encoding"
    REQUESTING = "requesting"
    NORMALIZING = "normalizing"


class RecommendationPipeline:
    def __init__(self, remote: RemoteClient | None = None, model: str | None = None) -> None:
        self.remote = remote or RemoteClient()
        self.model = model or settings.default_model

    async def run(self, image: ImageUpload | None, category: str | None) -> PipelineOutcome:
        """Run one request through the pipeline. Never raises."""
        log = logger.bind(category=category)
        stage = PipelineStage.VALIDATING
        log.debug("pipeline_stage", stage=stage)

        if image is None:
            return self._fail(log, ValidationError("Please upload an image first."))
        if not category or not category.strip():
            return self._fail(log, ValidationError("Please choose a category."))

        stage = PipelineStage.ENCODING
        log.debug("pipeline_stage", stage=stage)
        try:
            image_data = await encode_image(image)
        except ValidationError as exc:
            return self._fail(log, exc)
        except Exception as exc:
            return self._fall_back(log, category, stage, exc)

        try:
            stage = PipelineStage.REQUESTING
            log.debug("pipeline_stage", stage=stage)
            request = GenerationRequest(
                model=self.model,
                prompt=build_prompt(category),
                image_data=image_data,
            )
            raw = await self.remote.send(request)

            stage = PipelineStage.NORMALIZING
            log.debug("pipeline_stage", stage=stage)
            text = extract_text(raw)
            if text is None:
                raise ExtractionError("No text found in model response.")
            suggestions = split_suggestions(text)
        except Exception as exc:
            return self._fall_back(log, category, stage, exc)

        log.info("recommendation_ready", source="remote", count=len(suggestions))
        return Success(suggestions=suggestions, source="remote")

    @staticmethod
    def _fail(log: structlog.typing.FilteringBoundLogger, exc: ValidationError) -> Failure:
        classified = classify(exc)
        log.info("recommendation_rejected", error_kind=classified.kind, message=classified.message)
        return Failure(kind=classified.kind, message=classified.message)

    @staticmethod
    def _fall_back(
        log: structlog.typing.FilteringBoundLogger,
        category: str,
        stage: PipelineStage,
        exc: Exception,
    ) -> Success:
        classified = classify(exc)
        log.warning(
            "recommendation_fallback",
            stage=stage,
            error_kind=classified.kind,
            message=classified.message,
            error_type=type(exc).__name__,
        )
        return Success(suggestions=fallback_suggestions(category), source="fallback")
