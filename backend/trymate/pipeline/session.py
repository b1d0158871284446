"""Per-caller result holder that ignores stale pipeline completions.

Each call to ``generate`` is tagged with a fresh token. When two runs
overlap, only the run holding the most recently issued token may commit
its outcome; an older run that finishes later is discarded.

The HTTP routes are stateless and call ``RecommendationPipeline.run``
directly. This class is the public entry point for in-process callers that
keep one visible result per user (a UI or CLI driver that may start a new
run before the previous one returns). Every ``generate`` call still returns
its own outcome; only ``outcome`` is guarded.
"""

from __future__ import annotations

import uuid

import structlog

from trymate.models.contracts import PipelineOutcome
from trymate.pipeline.encoder import ImageUpload
from trymate.pipeline.orchestrator import RecommendationPipeline

logger = structlog.get_logger()


class RecommendationSession:
    def __init__(self, pipeline: RecommendationPipeline) -> None:
        self.pipeline = pipeline
        self.outcome: PipelineOutcome | None = None
        self._latest_token: str | None = None

    def _issue_token(self) -> str:
        token = uuid.uuid4().hex
        self._latest_token = token
        return token

    def is_current(self, token: str) -> bool:
        return token == self._latest_token

    async def generate(self, image: ImageUpload | None, category: str | None) -> PipelineOutcome:
        """Run the pipeline and commit its outcome if no newer run was started meanwhile.

        The outcome is always returned to the caller that asked for it.
        """
        token = self._issue_token()
        outcome = await self.pipeline.run(image, category)
        if self.is_current(token):
            self.outcome = outcome
        else:
            logger.info("recommendation_stale_discarded", token=token)
        return outcome
