"""Club Repository: typed accessors binding store operations to fixed collections.

Invariants:
    - Each method touches exactly one collection
    - No business rules here: existence, uniqueness and team checks live in handlers
    - Entities go in and come out as schema models; the store only sees dicts
    - A stored record that does not fit its model raises StorageFormatError,
      never a raw pydantic error
"""

import logging
from typing import TypeVar

from pydantic import BaseModel, ValidationError as ModelValidationError

from practice_feedback.core.domain_types import Collection
from practice_feedback.core.errors import StorageFormatError
from practice_feedback.infrastructure.record_store import JsonRecordStore, Record
from practice_feedback.schemas.entities import (
    Player, Practice, PracticeResponse, PracticeSummary, Question, Team,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ClubRepository:
    """Entity-level façade over a JsonRecordStore."""

    def __init__(self, store: JsonRecordStore):
        self.store = store

    # ─── Teams ──────────────────────────────────────────────────

    async def get_teams(self) -> list[Team]:
        records = await self.store.read_all(Collection.TEAMS)
        return _load_all(Team, records, Collection.TEAMS)

    async def get_team_by_id(self, team_id: str) -> Team | None:
        record = await self.store.find_by_id(Collection.TEAMS, team_id)
        return _load_one(Team, record, Collection.TEAMS)

    async def create_team(self, team: Team) -> Team:
        await self.store.create(Collection.TEAMS, team.to_record())
        return team

    # ─── Players ────────────────────────────────────────────────

    async def get_players(self) -> list[Player]:
        records = await self.store.read_all(Collection.PLAYERS)
        return _load_all(Player, records, Collection.PLAYERS)

    async def get_players_by_team(self, team_id: str) -> list[Player]:
        records = await self.store.find_by(Collection.PLAYERS, "teamId", team_id)
        return _load_all(Player, records, Collection.PLAYERS)

    async def get_player_by_id(self, player_id: str) -> Player | None:
        record = await self.store.find_by_id(Collection.PLAYERS, player_id)
        return _load_one(Player, record, Collection.PLAYERS)

    async def create_player(self, player: Player) -> Player:
        await self.store.create(Collection.PLAYERS, player.to_record())
        return player

    # ─── Practices ──────────────────────────────────────────────

    async def get_practices(self) -> list[Practice]:
        records = await self.store.read_all(Collection.PRACTICES)
        return _load_all(Practice, records, Collection.PRACTICES)

    async def get_practices_by_team(self, team_id: str) -> list[Practice]:
        records = await self.store.find_by(Collection.PRACTICES, "teamId", team_id)
        return _load_all(Practice, records, Collection.PRACTICES)

    async def get_practice_by_id(self, practice_id: str) -> Practice | None:
        record = await self.store.find_by_id(Collection.PRACTICES, practice_id)
        return _load_one(Practice, record, Collection.PRACTICES)

    async def create_practice(self, practice: Practice) -> Practice:
        await self.store.create(Collection.PRACTICES, practice.to_record())
        return practice

    # ─── Questions ──────────────────────────────────────────────

    async def get_practice_questions(self) -> list[Question]:
        """Catalog in file order. Use question_catalog for the sorted view."""
        records = await self.store.read_all(Collection.QUESTIONS)
        return _load_all(Question, records, Collection.QUESTIONS)

    # ─── Responses ──────────────────────────────────────────────

    async def get_responses(self) -> list[PracticeResponse]:
        records = await self.store.read_all(Collection.RESPONSES)
        return _load_all(PracticeResponse, records, Collection.RESPONSES)

    async def get_responses_by_practice(
        self, practice_id: str,
    ) -> list[PracticeResponse]:
        records = await self.store.find_by(
            Collection.RESPONSES, "practiceId", practice_id,
        )
        return _load_all(PracticeResponse, records, Collection.RESPONSES)

    async def get_response_by_player_and_practice(
        self, player_id: str, practice_id: str,
    ) -> PracticeResponse | None:
        for record in await self.store.read_all(Collection.RESPONSES):
            if (record.get("playerId") == player_id
                    and record.get("practiceId") == practice_id):
                return _load_one(PracticeResponse, record, Collection.RESPONSES)
        return None

    async def create_practice_response(
        self, response: PracticeResponse,
    ) -> PracticeResponse:
        await self.store.create(Collection.RESPONSES, response.to_record())
        return response

    # ─── Summaries (keyed by practiceId) ────────────────────────

    async def get_summaries(self) -> list[PracticeSummary]:
        records = await self.store.read_all(Collection.SUMMARIES)
        return _load_all(PracticeSummary, records, Collection.SUMMARIES)

    async def get_summary_by_practice(
        self, practice_id: str,
    ) -> PracticeSummary | None:
        record = await self.store.find_by_id(Collection.SUMMARIES, practice_id)
        return _load_one(PracticeSummary, record, Collection.SUMMARIES)

    async def create_practice_summary(
        self, summary: PracticeSummary,
    ) -> PracticeSummary:
        await self.store.create(Collection.SUMMARIES, summary.to_record())
        return summary

    async def update_practice_summary(
        self, practice_id: str, summary_text: str, generated_at: str,
    ) -> PracticeSummary:
        merged = await self.store.update(
            Collection.SUMMARIES, practice_id,
            {"summary": summary_text, "generatedAt": generated_at},
        )
        return _load_one(PracticeSummary, merged, Collection.SUMMARIES)


def _load_one(
    model: type[ModelT], record: Record | None, collection: Collection,
) -> ModelT | None:
    if record is None:
        return None
    try:
        return model.model_validate(record)
    except ModelValidationError as e:
        logger.error(
            f"Stored record does not match {model.__name__}: {e}",
            extra={"collection": collection.value},
        )
        raise StorageFormatError(
            f"record does not match {model.__name__}", collection.value,
        )


def _load_all(
    model: type[ModelT], records: list[Record], collection: Collection,
) -> list[ModelT]:
    return [_load_one(model, r, collection) for r in records]
