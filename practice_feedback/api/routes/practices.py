"""Practice Routes: GET/POST /api/practices (optional ?teamId=), GET /api/practices/{practice_id}."""

import logging

from fastapi import APIRouter, Depends, Query, status

from practice_feedback.api.dependencies import get_caller, get_practice_handlers
from practice_feedback.api.envelope import ok
from practice_feedback.core.domain_types import CallerIdentity
from practice_feedback.schemas.requests import PracticeCreate
from practice_feedback.services.handle_practices import PracticeHandlers

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/practices", tags=["practices"])


@router.get("")
async def list_practices(
    team_id: str | None = Query(None, alias="teamId"),
    handlers: PracticeHandlers = Depends(get_practice_handlers),
):
    """List practices, optionally filtered by team."""
    practices = await handlers.list_practices(team_id)
    return ok([p.to_record() for p in practices])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_practice(
    body: PracticeCreate,
    handlers: PracticeHandlers = Depends(get_practice_handlers),
    caller: CallerIdentity = Depends(get_caller),
):
    """Schedule a practice for an existing team."""
    practice = await handlers.create_practice(body, caller)
    return ok(practice.to_record())


@router.get("/{practice_id}")
async def get_practice(
    practice_id: str,
    handlers: PracticeHandlers = Depends(get_practice_handlers),
):
    practice = await handlers.get_practice(practice_id)
    return ok(practice.to_record())
