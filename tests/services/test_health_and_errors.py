"""Health probes and the global error envelope."""

from httpx import ASGITransport, AsyncClient

from practice_feedback.core.errors import SummaryServiceError


async def test_liveness(client):
    res = await client.get("/api/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"
    assert res.json()["service"] == "practice-feedback-api"


async def test_readiness(client):
    res = await client.get("/api/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["storage"] == "healthy"


async def test_readiness_fails_when_data_dir_unusable(app, client, tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    app.state.store.data_dir = blocker
    res = await client.get("/api/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "data_dir_unavailable"


async def test_summary_service_probe(client, text_client):
    assert (await client.get("/api/health/summary-service")).status_code == 200
    text_client.error = SummaryServiceError("down", "connection_error")
    res = await client.get("/api/health/summary-service")
    assert res.status_code == 503


async def test_unknown_route_uses_envelope(client):
    res = await client.get("/api/nowhere")
    assert res.status_code == 404
    assert res.json() == {"success": False, "error": "Not Found"}


async def test_malformed_json_is_400(client):
    res = await client.post(
        "/api/teams", content="{broken", headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["success"] is False


async def test_unexpected_exception_is_generic_500(app):
    async def explode(*args, **kwargs):
        raise RuntimeError("secret internals")

    app.state.repository.get_teams = explode
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        res = await c.get("/api/teams")
    assert res.status_code == 500
    assert res.json() == {"success": False, "error": "Internal server error"}


async def test_startup_survives_malformed_catalog(app, data_dir, caplog):
    (data_dir / "practice-questions.json").write_text('[{"id": "q1", "question": "?"}]')
    async with app.router.lifespan_context(app):
        pass
    assert "Question catalog does not hold exactly four questions" in caplog.text


async def test_malformed_catalog_record_is_storage_500(client, data_dir):
    (data_dir / "practice-questions.json").write_text('[{"id": "q1", "question": "?"}]')
    res = await client.get("/api/practice-questions")
    assert res.status_code == 500
    assert res.json() == {"success": False, "error": "Failed to access stored data"}
