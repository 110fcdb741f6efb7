"""Team Routes: GET/POST /api/teams, GET /api/teams/{team_id}."""

import logging

from fastapi import APIRouter, Depends, status

from practice_feedback.api.dependencies import get_caller, get_team_handlers
from practice_feedback.api.envelope import ok
from practice_feedback.core.domain_types import CallerIdentity
from practice_feedback.schemas.requests import TeamCreate
from practice_feedback.services.handle_teams import TeamHandlers

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/teams", tags=["teams"])


@router.get("")
async def list_teams(handlers: TeamHandlers = Depends(get_team_handlers)):
    """List all teams."""
    teams = await handlers.list_teams()
    return ok([t.to_record() for t in teams])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_team(
    body: TeamCreate,
    handlers: TeamHandlers = Depends(get_team_handlers),
    caller: CallerIdentity = Depends(get_caller),
):
    """Create a team with a generated id and creation timestamp."""
    team = await handlers.create_team(body, caller)
    return ok(team.to_record())


@router.get("/{team_id}")
async def get_team(
    team_id: str, handlers: TeamHandlers = Depends(get_team_handlers),
):
    team = await handlers.get_team(team_id)
    return ok(team.to_record())
