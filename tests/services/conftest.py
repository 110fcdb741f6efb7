"""Service test fixtures: isolated data directory, app instance and HTTP client.

Invariants:
    - Every test gets a fresh data directory under tmp_path with the seed catalog
    - Every test gets its own app from create_app(): no shared store
    - The text client is always FakeTextClient: no network calls

Design Decisions:
    - Lifespan is not run by ASGITransport, so the fixture seeds the catalog itself
    - Entity fixtures go through the HTTP API, exercising the create paths
"""

import pytest
from httpx import ASGITransport, AsyncClient

from practice_feedback.config import Settings
from practice_feedback.infrastructure.record_store import JsonRecordStore
from practice_feedback.main import create_app
from practice_feedback.services.club_repository import ClubRepository
from practice_feedback.services.question_catalog import QuestionCatalog, seed_catalog
from tests.services.fake_text_client import FakeTextClient


@pytest.fixture
def data_dir(tmp_path):
    path = tmp_path / "data"
    seed_catalog(path)
    return path


@pytest.fixture
def store(data_dir):
    return JsonRecordStore(data_dir)


@pytest.fixture
def repository(store):
    return ClubRepository(store)


@pytest.fixture
def catalog(repository):
    return QuestionCatalog(repository)


@pytest.fixture
def text_client():
    return FakeTextClient()


@pytest.fixture
def app(data_dir, text_client):
    settings = Settings(data_dir=data_dir, log_format="text")
    return create_app(settings, text_client=text_client)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def team(client):
    res = await client.post("/api/teams", json={"name": "Spikers"})
    assert res.status_code == 201
    return res.json()["data"]


@pytest.fixture
async def other_team(client):
    res = await client.post("/api/teams", json={"name": "Blockers"})
    assert res.status_code == 201
    return res.json()["data"]


@pytest.fixture
async def player(client, team):
    res = await client.post("/api/players", json={
        "name": "Ana Lima", "email": "ana@example.com", "teamId": team["id"],
    })
    assert res.status_code == 201
    return res.json()["data"]


@pytest.fixture
async def practice(client, team):
    res = await client.post("/api/practices", json={
        "teamId": team["id"], "name": "Serve drills",
        "date": "2024-05-01", "time": "18:30",
    })
    assert res.status_code == 201
    return res.json()["data"]

