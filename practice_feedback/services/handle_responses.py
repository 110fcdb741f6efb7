"""Response Handlers: read and submit post-practice feedback.

Invariants:
    - Check order: input shape -> practice exists -> player exists ->
      same team (403) -> no prior submission (409) -> known question ids (400)
    - Nothing is written unless every check passes
    - At most one response per (playerId, practiceId)
    - Stored items are stripped and keep the submitted order
    - Catalog is checked for membership only; validate_questions() is not consulted

Design Decisions:
    - playerId comes from the body; the caller identity fills in when the body
      omits it (replaces the old hardcoded demo player)
"""

import logging

from practice_feedback.core.domain_types import CallerIdentity, new_record_id, utc_now_iso
from practice_feedback.core.enforce_input import is_blank, require_id, require_text
from practice_feedback.core.errors import (
    ConflictError, ForbiddenError, ResourceNotFoundError, ValidationError,
)
from practice_feedback.schemas.entities import (
    Practice, PracticeResponse, ResponseItem,
)
from practice_feedback.schemas.requests import ResponsesSubmit
from practice_feedback.services.club_repository import ClubRepository
from practice_feedback.services.question_catalog import QuestionCatalog

logger = logging.getLogger(__name__)


class ResponseHandlers:
    """Feedback submission and retrieval."""

    def __init__(self, repository: ClubRepository, catalog: QuestionCatalog):
        self.repository = repository
        self.catalog = catalog

    async def get_practice_responses(
        self, practice_id: str,
    ) -> tuple[Practice, list[PracticeResponse]]:
        practice_id = require_id(practice_id, "Practice")
        practice = await self.repository.get_practice_by_id(practice_id)
        if not practice:
            raise ResourceNotFoundError("Practice", practice_id)
        responses = await self.repository.get_responses_by_practice(practice_id)
        return practice, responses

    async def submit_responses(
        self, practice_id: str, body: ResponsesSubmit, caller: CallerIdentity,
    ) -> PracticeResponse:
        practice_id = require_id(practice_id, "Practice")
        raw_player_id = body.player_id if not is_blank(body.player_id) else caller.player_id
        player_id = require_text(
            raw_player_id,
            "Player ID is required and must be a non-empty string",
            field="playerId",
        )
        items = _clean_items(body)

        practice = await self.repository.get_practice_by_id(practice_id)
        if not practice:
            raise ResourceNotFoundError("Practice", practice_id)

        player = await self.repository.get_player_by_id(player_id)
        if not player:
            raise ResourceNotFoundError("Player", player_id)

        if player.team_id != practice.team_id:
            raise ForbiddenError(
                "Player is not registered for the team associated with this practice",
            )

        existing = await self.repository.get_response_by_player_and_practice(
            player_id, practice_id,
        )
        if existing:
            raise ConflictError(
                "Player has already submitted responses for this practice",
            )

        known_ids = await self.catalog.question_ids()
        for item in items:
            if item.question_id not in known_ids:
                raise ValidationError(
                    f"Invalid question ID: {item.question_id}", field="questionId",
                )

        response = PracticeResponse(
            id=new_record_id(),
            practice_id=practice_id,
            player_id=player_id,
            responses=items,
            submitted_at=utc_now_iso(),
        )
        created = await self.repository.create_practice_response(response)
        logger.info(
            f"Feedback submitted ({len(items)} answers)",
            extra={
                "practice_id": practice_id, "player_id": player_id,
                "caller_id": caller.label,
            },
        )
        return created


def _clean_items(body: ResponsesSubmit) -> list[ResponseItem]:
    """Validate and strip each submitted item, preserving order."""
    if not body.responses:
        raise ValidationError(
            "Responses array is required and must not be empty", field="responses",
        )
    items = []
    for item in body.responses:
        question_id = require_text(
            item.question_id,
            "Each response must have a valid questionId",
            field="questionId",
        )
        answer = require_text(
            item.answer,
            "Each response must have a non-empty answer",
            field="answer",
        )
        items.append(ResponseItem(question_id=question_id, answer=answer))
    return items
