"""Feedback Routes: responses and summaries nested under a practice.

Invariants:
    - GET  /api/practices/{id}/responses -> {practice, responses}
    - POST /api/practices/{id}/responses -> 201 with the stored response
    - GET  /api/practices/{id}/summary   -> cached summary, generated on first read
    - POST /api/practices/{id}/summary   -> always regenerated, 200
"""

import logging

from fastapi import APIRouter, Depends, status

from practice_feedback.api.dependencies import (
    get_caller, get_response_handlers, get_summary_handlers,
)
from practice_feedback.api.envelope import ok
from practice_feedback.core.domain_types import CallerIdentity
from practice_feedback.schemas.requests import ResponsesSubmit
from practice_feedback.services.handle_responses import ResponseHandlers
from practice_feedback.services.handle_summaries import SummaryHandlers

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/practices", tags=["feedback"])


@router.get("/{practice_id}/responses")
async def get_responses(
    practice_id: str,
    handlers: ResponseHandlers = Depends(get_response_handlers),
):
    """All feedback submitted for a practice."""
    practice, responses = await handlers.get_practice_responses(practice_id)
    return ok({
        "practice": practice.to_record(),
        "responses": [r.to_record() for r in responses],
    })


@router.post("/{practice_id}/responses", status_code=status.HTTP_201_CREATED)
async def submit_responses(
    practice_id: str,
    body: ResponsesSubmit,
    handlers: ResponseHandlers = Depends(get_response_handlers),
    caller: CallerIdentity = Depends(get_caller),
):
    """Submit one player's answers for a practice (once per player)."""
    response = await handlers.submit_responses(practice_id, body, caller)
    return ok(response.to_record())


@router.get("/{practice_id}/summary")
async def get_summary(
    practice_id: str,
    handlers: SummaryHandlers = Depends(get_summary_handlers),
):
    """Cached summary; generated and stored on first access."""
    summary = await handlers.get_summary(practice_id)
    return ok(summary.to_record())


@router.post("/{practice_id}/summary")
async def regenerate_summary(
    practice_id: str,
    handlers: SummaryHandlers = Depends(get_summary_handlers),
    caller: CallerIdentity = Depends(get_caller),
):
    """Force regeneration from the current responses."""
    summary = await handlers.regenerate_summary(practice_id, caller)
    return ok(summary.to_record())
