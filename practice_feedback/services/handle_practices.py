"""Practice Handlers: list, get and schedule practices.

Invariants:
    - name, teamId, date, time required and non-blank
    - date is YYYY-MM-DD, time is 24-hour H:MM / HH:MM; past dates allowed
    - The referenced team must exist (404 otherwise)
    - No conflict check: identical practices for one team are permitted
"""

import logging

from practice_feedback.core.domain_types import CallerIdentity, new_record_id, utc_now_iso
from practice_feedback.core.enforce_input import (
    check_date, check_time, require_id, require_text,
)
from practice_feedback.core.errors import ResourceNotFoundError
from practice_feedback.schemas.entities import Practice
from practice_feedback.schemas.requests import PracticeCreate
from practice_feedback.services.club_repository import ClubRepository

logger = logging.getLogger(__name__)


class PracticeHandlers:
    """Practice endpoints' business logic."""

    def __init__(self, repository: ClubRepository):
        self.repository = repository

    async def list_practices(self, team_id: str | None = None) -> list[Practice]:
        if team_id and team_id.strip():
            return await self.repository.get_practices_by_team(team_id.strip())
        return await self.repository.get_practices()

    async def get_practice(self, practice_id: str) -> Practice:
        practice_id = require_id(practice_id, "Practice")
        practice = await self.repository.get_practice_by_id(practice_id)
        if not practice:
            raise ResourceNotFoundError("Practice", practice_id)
        return practice

    async def create_practice(
        self, body: PracticeCreate, caller: CallerIdentity,
    ) -> Practice:
        name = require_text(
            body.name,
            "Practice name is required and must be a non-empty string",
            field="name",
        )
        team_id = require_text(
            body.team_id,
            "Team ID is required and must be a non-empty string",
            field="teamId",
        )
        date = require_text(
            body.date,
            "Practice date is required and must be a non-empty string",
            field="date",
        )
        time = require_text(
            body.time,
            "Practice time is required and must be a non-empty string",
            field="time",
        )
        check_date(date)
        check_time(time)

        if not await self.repository.get_team_by_id(team_id):
            raise ResourceNotFoundError("Team", team_id)

        practice = Practice(
            id=new_record_id(),
            team_id=team_id,
            name=name,
            date=date,
            time=time,
            created_at=utc_now_iso(),
        )
        created = await self.repository.create_practice(practice)
        logger.info(
            f"Practice scheduled for {date} {time}",
            extra={
                "practice_id": created.id, "team_id": team_id,
                "caller_id": caller.label,
            },
        )
        return created
