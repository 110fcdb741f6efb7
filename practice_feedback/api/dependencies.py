"""Route Dependencies: hand handlers and caller identity to route functions.

Invariants:
    - Shared objects (store, repository, catalog, generator) live on app.state,
      built once by create_app(); nothing here is a module-level singleton
    - Handlers are cheap per-request wrappers around those shared objects
    - Caller identity comes from the optional X-Player-Id header, blank means anonymous
"""

from fastapi import Depends, Header, Request

from practice_feedback.core.domain_types import CallerIdentity
from practice_feedback.services.club_repository import ClubRepository
from practice_feedback.services.handle_players import PlayerHandlers
from practice_feedback.services.handle_practices import PracticeHandlers
from practice_feedback.services.handle_responses import ResponseHandlers
from practice_feedback.services.handle_summaries import SummaryHandlers
from practice_feedback.services.handle_teams import TeamHandlers
from practice_feedback.services.question_catalog import QuestionCatalog


def get_repository(request: Request) -> ClubRepository:
    return request.app.state.repository


def get_catalog(request: Request) -> QuestionCatalog:
    return request.app.state.catalog


def get_caller(
    x_player_id: str | None = Header(default=None),
) -> CallerIdentity:
    player_id = x_player_id.strip() if x_player_id else None
    return CallerIdentity(player_id=player_id or None)


def get_team_handlers(
    repository: ClubRepository = Depends(get_repository),
) -> TeamHandlers:
    return TeamHandlers(repository)


def get_player_handlers(
    repository: ClubRepository = Depends(get_repository),
) -> PlayerHandlers:
    return PlayerHandlers(repository)


def get_practice_handlers(
    repository: ClubRepository = Depends(get_repository),
) -> PracticeHandlers:
    return PracticeHandlers(repository)


def get_response_handlers(
    repository: ClubRepository = Depends(get_repository),
    catalog: QuestionCatalog = Depends(get_catalog),
) -> ResponseHandlers:
    return ResponseHandlers(repository, catalog)


def get_summary_handlers(
    request: Request,
    repository: ClubRepository = Depends(get_repository),
) -> SummaryHandlers:
    return SummaryHandlers(repository, request.app.state.generator)
