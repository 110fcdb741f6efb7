"""Question Route: GET /api/practice-questions (catalog sorted by order)."""

from fastapi import APIRouter, Depends

from practice_feedback.api.dependencies import get_catalog
from practice_feedback.api.envelope import ok
from practice_feedback.services.question_catalog import QuestionCatalog

router = APIRouter(prefix="/api/practice-questions", tags=["questions"])


@router.get("")
async def list_questions(catalog: QuestionCatalog = Depends(get_catalog)):
    questions = await catalog.load_questions()
    return ok([q.to_record() for q in questions])
