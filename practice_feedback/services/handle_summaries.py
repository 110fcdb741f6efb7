"""Summary Handlers: cached read and forced regeneration of practice summaries.

Invariants:
    - Both operations 404 when the practice does not exist
    - get_summary() returns a cached summary untouched; on a miss it generates,
      persists and returns (the read path writes on first access); losing a
      concurrent cache fill returns the summary that won
    - regenerate_summary() always generates from the current responses, then
      updates the cached summary or creates it
    - Generation failures never surface here: the generator returns a degraded
      summary, which is cached like any other
"""

import logging

from practice_feedback.core.domain_types import CallerIdentity
from practice_feedback.core.enforce_input import require_id
from practice_feedback.core.errors import ConflictError, ResourceNotFoundError
from practice_feedback.schemas.entities import PracticeSummary
from practice_feedback.services.club_repository import ClubRepository
from practice_feedback.services.summary_generator import SummaryGenerator

logger = logging.getLogger(__name__)


class SummaryHandlers:
    """Summary cache in front of the summary generator."""

    def __init__(self, repository: ClubRepository, generator: SummaryGenerator):
        self.repository = repository
        self.generator = generator

    async def get_summary(self, practice_id: str) -> PracticeSummary:
        practice_id = await self._require_practice(practice_id)

        cached = await self.repository.get_summary_by_practice(practice_id)
        if cached:
            return cached

        summary = await self._generate(practice_id)
        try:
            created = await self.repository.create_practice_summary(summary)
        except ConflictError:
            # A concurrent first read filled the cache first
            logger.info(
                "Summary already cached by a concurrent read",
                extra={"practice_id": practice_id},
            )
            return await self.repository.get_summary_by_practice(practice_id)
        logger.info("Summary cached", extra={"practice_id": practice_id})
        return created

    async def regenerate_summary(
        self, practice_id: str, caller: CallerIdentity,
    ) -> PracticeSummary:
        practice_id = await self._require_practice(practice_id)
        summary = await self._generate(practice_id)

        existing = await self.repository.get_summary_by_practice(practice_id)
        if existing:
            saved = await self.repository.update_practice_summary(
                practice_id, summary.summary, summary.generated_at,
            )
        else:
            saved = await self.repository.create_practice_summary(summary)
        logger.info(
            "Summary regenerated",
            extra={"practice_id": practice_id, "caller_id": caller.label},
        )
        return saved

    async def _require_practice(self, practice_id: str) -> str:
        practice_id = require_id(practice_id, "Practice")
        if not await self.repository.get_practice_by_id(practice_id):
            raise ResourceNotFoundError("Practice", practice_id)
        return practice_id

    async def _generate(self, practice_id: str) -> PracticeSummary:
        responses = await self.repository.get_responses_by_practice(practice_id)
        return await self.generator.generate(practice_id, responses)
