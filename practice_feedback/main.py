"""Practice Feedback API: FastAPI application factory and entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ClubError / validation / anything else to the envelope
    - CORS configured from settings (not hardcoded)
    - Store, repository, catalog and generator built once per app in create_app()
      and shared through app.state: no module-level store singleton
    - Question catalog seeded on startup if the data directory has none

Design Decisions:
    - create_app(settings, text_client=...) factory: tests build isolated apps
      over tmp_path with a fake text client
    - Lifespan over @app.on_event: logging setup, seeding and catalog check
    - Catalog validation at startup only warns: submissions are checked against
      the ids present, never against the four-question rule
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from practice_feedback.api.error_handlers import register_error_handlers
from practice_feedback.api.routes import (
    feedback, health, practice_questions, practices, players, teams,
)
from practice_feedback.config import Settings, get_settings
from practice_feedback.core.service_protocols import TextCompletionClient
from practice_feedback.infrastructure.anthropic_client import build_text_client
from practice_feedback.infrastructure.observability import setup_logging
from practice_feedback.infrastructure.record_store import JsonRecordStore
from practice_feedback.services.club_repository import ClubRepository
from practice_feedback.services.question_catalog import QuestionCatalog, seed_catalog
from practice_feedback.services.summary_generator import SummaryGenerator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    seed_catalog(settings.data_dir)
    if not await app.state.catalog.validate_questions():
        logger.warning(
            "Question catalog does not hold exactly four questions ordered 1-4",
        )
    logger.info(f"Practice Feedback API started (data_dir={settings.data_dir})")
    yield
    logger.info("Practice Feedback API shutting down")


def create_app(
    settings: Settings | None = None,
    *,
    text_client: TextCompletionClient | None = None,
) -> FastAPI:
    """Build the app with its own store and summary generator."""
    settings = settings or get_settings()

    store = JsonRecordStore(settings.data_dir)
    repository = ClubRepository(store)
    generator = SummaryGenerator(
        text_client or build_text_client(settings),
        model=settings.summary_model,
        max_tokens=settings.summary_max_tokens,
        temperature=settings.summary_temperature,
        top_p=settings.summary_top_p,
    )

    app = FastAPI(
        title="Practice Feedback API", version="1.0.0", lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store
    app.state.repository = repository
    app.state.catalog = QuestionCatalog(repository)
    app.state.generator = generator

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes: explicit registration
    app.include_router(health.router)
    app.include_router(teams.router)
    app.include_router(players.router)
    app.include_router(practices.router)
    app.include_router(practice_questions.router)
    app.include_router(feedback.router)

    register_error_handlers(app)
    return app


app = create_app()
