"""Player Routes: GET/POST /api/players (optional ?teamId=), GET /api/players/{player_id}."""

import logging

from fastapi import APIRouter, Depends, Query, status

from practice_feedback.api.dependencies import get_caller, get_player_handlers
from practice_feedback.api.envelope import ok
from practice_feedback.core.domain_types import CallerIdentity
from practice_feedback.schemas.requests import PlayerCreate
from practice_feedback.services.handle_players import PlayerHandlers

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/players", tags=["players"])


@router.get("")
async def list_players(
    team_id: str | None = Query(None, alias="teamId"),
    handlers: PlayerHandlers = Depends(get_player_handlers),
):
    """List players, optionally filtered by team."""
    players = await handlers.list_players(team_id)
    return ok([p.to_record() for p in players])


@router.post("", status_code=status.HTTP_201_CREATED)
async def register_player(
    body: PlayerCreate,
    handlers: PlayerHandlers = Depends(get_player_handlers),
    caller: CallerIdentity = Depends(get_caller),
):
    """Register a player to a team (email unique per team, case-insensitive)."""
    player = await handlers.register_player(body, caller)
    return ok(player.to_record())


@router.get("/{player_id}")
async def get_player(
    player_id: str, handlers: PlayerHandlers = Depends(get_player_handlers),
):
    player = await handlers.get_player(player_id)
    return ok(player.to_record())
