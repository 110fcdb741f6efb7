"""Entity Schemas: persisted record shapes for every collection.

Invariants:
    - Python attributes are snake_case; stored/wire keys are camelCase aliases
    - to_record() is the only serialization path into the store and the API,
      so a created entity and the same entity fetched back are deep-equal
    - Optional fields that are None are omitted from records

Design Decisions:
    - alias_generator=to_camel + populate_by_name: records load from disk
      (camelCase) and build from code (snake_case) through one model
    - extra="ignore": unknown keys in hand-edited files do not break reads
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for models whose external keys are camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore",
    )

    def to_record(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class Team(CamelModel):
    id: str
    name: str
    created_at: str
    coach_id: str | None = None


class Player(CamelModel):
    id: str
    name: str
    email: str
    team_id: str
    registered_at: str


class Practice(CamelModel):
    id: str
    team_id: str
    name: str
    date: str
    time: str
    created_at: str


class Question(CamelModel):
    id: str
    question: str
    order: int


class ResponseItem(CamelModel):
    question_id: str
    answer: str


class PracticeResponse(CamelModel):
    id: str
    practice_id: str
    player_id: str
    responses: list[ResponseItem]
    submitted_at: str

    @property
    def answers(self) -> list[str]:
        return [item.answer for item in self.responses]


class PracticeSummary(CamelModel):
    practice_id: str
    summary: str
    generated_at: str
