"""Domain Types: identity types, collection registry and caller identity.

Invariants:
    - Every collection has exactly one backing file and one key field
    - Summaries are keyed by practiceId; every other collection by id
    - Timestamps are ISO-8601 UTC with millisecond precision and a "Z" suffix
    - Ids are UUID4 text, opaque to everything but equality

Design Decisions:
    - NewType over wrappers: zero runtime cost, full type-checker support
    - str Enum for collections: serializes cleanly into log records
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import NewType
from uuid import uuid4


# ─── Identity Types ──────────────────────────────────────────────

TeamId = NewType("TeamId", str)
PlayerId = NewType("PlayerId", str)
PracticeId = NewType("PracticeId", str)
QuestionId = NewType("QuestionId", str)
ResponseId = NewType("ResponseId", str)


# ─── Collections ─────────────────────────────────────────────────

class Collection(str, Enum):
    """Named record collections, one JSON array file each."""
    TEAMS = "teams"
    PLAYERS = "players"
    PRACTICES = "practices"
    QUESTIONS = "questions"
    RESPONSES = "responses"
    SUMMARIES = "summaries"

    @property
    def filename(self) -> str:
        return _FILENAMES[self]

    @property
    def key_field(self) -> str:
        return "practiceId" if self is Collection.SUMMARIES else "id"


_FILENAMES: dict[Collection, str] = {
    Collection.TEAMS: "teams.json",
    Collection.PLAYERS: "players.json",
    Collection.PRACTICES: "practices.json",
    Collection.QUESTIONS: "practice-questions.json",
    Collection.RESPONSES: "responses.json",
    Collection.SUMMARIES: "summaries.json",
}


# ─── Caller ──────────────────────────────────────────────────────

@dataclass(frozen=True)
class CallerIdentity:
    """Who is making the request. No authentication: the id is self-declared."""
    player_id: str | None = None

    @property
    def label(self) -> str:
        return self.player_id or "anonymous"


# ─── Id / clock helpers ──────────────────────────────────────────

def new_record_id() -> str:
    return str(uuid4())


def utc_now_iso() -> str:
    """Current UTC time as e.g. 2024-05-01T18:30:00.123Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
