"""Player Handlers: list, get and register players.

Invariants:
    - name, email, teamId required and non-blank; email matches EMAIL_PATTERN
    - The referenced team must exist (404 otherwise)
    - (teamId, lowercased email) is unique: the same address may join several
      teams, but only once per team (409 otherwise)
    - Emails are stored stripped and lowercased
"""

import logging

from practice_feedback.core.domain_types import CallerIdentity, new_record_id, utc_now_iso
from practice_feedback.core.enforce_input import check_email, require_id, require_text
from practice_feedback.core.errors import ConflictError, ResourceNotFoundError
from practice_feedback.schemas.entities import Player
from practice_feedback.schemas.requests import PlayerCreate
from practice_feedback.services.club_repository import ClubRepository

logger = logging.getLogger(__name__)


class PlayerHandlers:
    """Player endpoints' business logic."""

    def __init__(self, repository: ClubRepository):
        self.repository = repository

    async def list_players(self, team_id: str | None = None) -> list[Player]:
        if team_id and team_id.strip():
            return await self.repository.get_players_by_team(team_id.strip())
        return await self.repository.get_players()

    async def get_player(self, player_id: str) -> Player:
        player_id = require_id(player_id, "Player")
        player = await self.repository.get_player_by_id(player_id)
        if not player:
            raise ResourceNotFoundError("Player", player_id)
        return player

    async def register_player(
        self, body: PlayerCreate, caller: CallerIdentity,
    ) -> Player:
        name = require_text(
            body.name,
            "Player name is required and must be a non-empty string",
            field="name",
        )
        email = require_text(
            body.email,
            "Player email is required and must be a non-empty string",
            field="email",
        )
        team_id = require_text(
            body.team_id,
            "Team ID is required and must be a non-empty string",
            field="teamId",
        )
        check_email(email)

        if not await self.repository.get_team_by_id(team_id):
            raise ResourceNotFoundError("Team", team_id)

        email = email.lower()
        teammates = await self.repository.get_players_by_team(team_id)
        if any(p.email.lower() == email for p in teammates):
            raise ConflictError(
                "Player with this email is already registered to this team",
            )

        player = Player(
            id=new_record_id(),
            name=name,
            email=email,
            team_id=team_id,
            registered_at=utc_now_iso(),
        )
        created = await self.repository.create_player(player)
        logger.info(
            "Player registered",
            extra={
                "player_id": created.id, "team_id": team_id,
                "caller_id": caller.label,
            },
        )
        return created
