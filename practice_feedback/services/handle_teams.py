"""Team Handlers: list, get and create teams.

Invariants:
    - Team name is required, non-blank, stored stripped
    - Every created team gets a fresh UUID and a creation timestamp
"""

import logging

from practice_feedback.core.domain_types import CallerIdentity, new_record_id, utc_now_iso
from practice_feedback.core.enforce_input import require_id, require_text
from practice_feedback.core.errors import ResourceNotFoundError
from practice_feedback.schemas.entities import Team
from practice_feedback.schemas.requests import TeamCreate
from practice_feedback.services.club_repository import ClubRepository

logger = logging.getLogger(__name__)


class TeamHandlers:
    """Team endpoints' business logic."""

    def __init__(self, repository: ClubRepository):
        self.repository = repository

    async def list_teams(self) -> list[Team]:
        return await self.repository.get_teams()

    async def get_team(self, team_id: str) -> Team:
        team_id = require_id(team_id, "Team")
        team = await self.repository.get_team_by_id(team_id)
        if not team:
            raise ResourceNotFoundError("Team", team_id)
        return team

    async def create_team(self, body: TeamCreate, caller: CallerIdentity) -> Team:
        name = require_text(
            body.name,
            "Team name is required and must be a non-empty string",
            field="name",
        )
        team = Team(id=new_record_id(), name=name, created_at=utc_now_iso())
        created = await self.repository.create_team(team)
        logger.info(
            f"Team created: {created.name}",
            extra={"team_id": created.id, "caller_id": caller.label},
        )
        return created
