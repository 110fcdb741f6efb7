"""Summary Generator: turns a practice's feedback into one AI-written summary.

Invariants:
    - Empty responses: fixed placeholder text, no external call
    - Non-empty responses: exactly one external call with a deterministic prompt
    - generate() never raises: any failure becomes a summary stating the error,
      with a fresh timestamp (availability over accuracy)
    - test_connection() never raises either; it reports reachability as bool

Design Decisions:
    - Client injected as TextCompletionClient Protocol: tests pass a fake,
      production passes SummaryTextClient (anthropic SDK)
    - Broad except around the call: SDK, transport and reply-shape failures all
      end in the same degraded summary
"""

import logging
from collections.abc import Sequence

from practice_feedback.core.domain_types import utc_now_iso
from practice_feedback.core.service_protocols import TextCompletionClient
from practice_feedback.core.summary_prompt import (
    CONNECTION_TEST_PROMPT, NO_RESPONSES_SUMMARY,
    build_summary_prompt, format_generation_failure,
)
from practice_feedback.schemas.entities import PracticeResponse, PracticeSummary

logger = logging.getLogger(__name__)

CONNECTION_TEST_MAX_TOKENS = 50
CONNECTION_TEST_TEMPERATURE = 0.1


class SummaryGenerator:
    """Prompt assembly + external completion + fallback policy."""

    def __init__(
        self,
        client: TextCompletionClient,
        *,
        model: str,
        max_tokens: int = 1000,
        temperature: float = 0.3,
        top_p: float | None = None,
    ):
        self.client = client
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.top_p = top_p

    async def generate(
        self, practice_id: str, responses: Sequence[PracticeResponse],
    ) -> PracticeSummary:
        if not responses:
            return _summary(practice_id, NO_RESPONSES_SUMMARY)

        prompt = build_summary_prompt([r.answers for r in responses])
        try:
            text = await self.client.complete(
                prompt,
                model=self.model,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
                top_p=self.top_p,
            )
        except Exception as e:
            logger.error(
                f"Summary generation failed: {e}",
                extra={"practice_id": practice_id},
            )
            return _summary(practice_id, format_generation_failure(e))

        logger.info(
            f"Generated summary from {len(responses)} response(s)",
            extra={"practice_id": practice_id},
        )
        return _summary(practice_id, text.strip())

    async def test_connection(self) -> bool:
        """Tiny round trip to the text service. False on any failure."""
        try:
            text = await self.client.complete(
                CONNECTION_TEST_PROMPT,
                model=self.model,
                max_tokens=CONNECTION_TEST_MAX_TOKENS,
                temperature=CONNECTION_TEST_TEMPERATURE,
            )
        except Exception as e:
            logger.error(f"Summary service connection test failed: {e}")
            return False
        return bool(text)


def _summary(practice_id: str, text: str) -> PracticeSummary:
    return PracticeSummary(
        practice_id=practice_id, summary=text, generated_at=utc_now_iso(),
    )
