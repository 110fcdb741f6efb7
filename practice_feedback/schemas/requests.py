"""Request Schemas: JSON bodies accepted by the create endpoints.

Invariants:
    - Every field is optional at the schema level; handlers report missing or
      blank values with entity-specific messages
    - Wrong JSON types (e.g. a number for name) are rejected by Pydantic and
      surface as 400 through the validation error handler
    - Keys accepted in camelCase (wire format) or snake_case
"""

from practice_feedback.schemas.entities import CamelModel


class TeamCreate(CamelModel):
    name: str | None = None


class PlayerCreate(CamelModel):
    name: str | None = None
    email: str | None = None
    team_id: str | None = None


class PracticeCreate(CamelModel):
    team_id: str | None = None
    name: str | None = None
    date: str | None = None
    time: str | None = None


class ResponseItemIn(CamelModel):
    question_id: str | None = None
    answer: str | None = None


class ResponsesSubmit(CamelModel):
    player_id: str | None = None
    responses: list[ResponseItemIn] | None = None
