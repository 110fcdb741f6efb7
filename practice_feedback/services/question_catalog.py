"""Question Catalog: the fixed, ordered feedback questions shared by every practice.

Invariants:
    - load_questions() returns the catalog sorted ascending by order
    - validate_questions() is advisory: no handler calls it before accepting a
      submission; submissions are checked against the ids present, nothing more
    - validate_questions() never raises: storage failures count as invalid
    - seed_catalog() never overwrites an existing catalog file

Design Decisions:
    - Seed shipped as package data (seed/practice-questions.json) and copied
      into the data directory on startup, so a fresh deployment has questions
"""

import logging
import shutil
from importlib import resources
from pathlib import Path

from practice_feedback.core.catalog_rules import (
    REQUIRED_QUESTION_COUNT, orders_are_complete,
)
from practice_feedback.core.domain_types import Collection
from practice_feedback.core.errors import ClubError
from practice_feedback.schemas.entities import Question
from practice_feedback.services.club_repository import ClubRepository

logger = logging.getLogger(__name__)

SEED_RESOURCE = "practice-questions.json"


class QuestionCatalog:
    """Read-only view of the question collection."""

    def __init__(self, repository: ClubRepository):
        self.repository = repository

    async def load_questions(self) -> list[Question]:
        questions = await self.repository.get_practice_questions()
        return sorted(questions, key=lambda q: q.order)

    async def get_question_by_id(self, question_id: str) -> Question | None:
        for question in await self.load_questions():
            if question.id == question_id:
                return question
        return None

    async def get_default_questions(self) -> list[Question]:
        """Questions asked after every practice (the whole catalog)."""
        return await self.load_questions()

    async def question_ids(self) -> set[str]:
        return {q.id for q in await self.load_questions()}

    async def validate_questions(self) -> bool:
        """True iff exactly four questions with orders 1..4 exist."""
        try:
            questions = await self.load_questions()
        except ClubError as e:
            logger.warning(f"Question catalog unreadable: {e.message}")
            return False
        if len(questions) != REQUIRED_QUESTION_COUNT:
            return False
        return orders_are_complete(q.order for q in questions)


def seed_catalog(data_dir: Path) -> bool:
    """Copy the packaged catalog into data_dir if none exists. True if copied."""
    target = Path(data_dir) / Collection.QUESTIONS.filename
    if target.exists():
        return False
    target.parent.mkdir(parents=True, exist_ok=True)
    source = resources.files("practice_feedback.seed").joinpath(SEED_RESOURCE)
    with resources.as_file(source) as seed_path:
        shutil.copyfile(seed_path, target)
    logger.info(f"Seeded question catalog at {target}")
    return True
