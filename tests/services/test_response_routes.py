"""Response Routes: submission rules and retrieval.

Invariants tested:
    - Input shape checked before any lookup
    - practice 404 -> player 404 -> team mismatch 403 -> duplicate 409 -> unknown question 400
    - A rejected submission writes nothing
    - Body playerId wins; X-Player-Id fills in when the body omits it
"""

import json

from practice_feedback.core.domain_types import Collection


def _items(*pairs):
    return [{"questionId": q, "answer": a} for q, a in pairs]


FULL_ANSWERS = _items(
    ("q1", "Serve receive"), ("q2", "Passing"),
    ("q3", "Blocking timing"), ("q4", "Jump serves"),
)


async def _submit(client, practice_id, player_id, responses=FULL_ANSWERS, **kwargs):
    return await client.post(
        f"/api/practices/{practice_id}/responses",
        json={"playerId": player_id, "responses": responses},
        **kwargs,
    )


async def test_submit_and_read_back(client, practice, player):
    res = await _submit(client, practice["id"], player["id"], _items(
        ("q1", "  Serve receive  "), ("q3", "Blocking"),
    ))
    assert res.status_code == 201
    stored = res.json()["data"]
    assert stored["practiceId"] == practice["id"]
    assert stored["playerId"] == player["id"]
    assert stored["responses"] == _items(("q1", "Serve receive"), ("q3", "Blocking"))
    assert stored["submittedAt"].endswith("Z")

    listing = await client.get(f"/api/practices/{practice['id']}/responses")
    assert listing.status_code == 200
    assert listing.json()["data"] == {"practice": practice, "responses": [stored]}


async def test_partial_answer_sets_accepted(client, practice, player):
    res = await _submit(client, practice["id"], player["id"], _items(("q2", "ok")))
    assert res.status_code == 201


async def test_duplicate_submission_is_409(client, store, practice, player):
    assert (await _submit(client, practice["id"], player["id"])).status_code == 201
    res = await _submit(client, practice["id"], player["id"])
    assert res.status_code == 409
    assert res.json()["error"] == (
        "Player has already submitted responses for this practice"
    )
    stored = await store.find_by(Collection.RESPONSES, "playerId", player["id"])
    assert len(stored) == 1


async def test_player_from_other_team_is_403(client, practice, other_team):
    outsider = (await client.post("/api/players", json={
        "name": "Bo", "email": "bo@example.com", "teamId": other_team["id"],
    })).json()["data"]
    res = await _submit(client, practice["id"], outsider["id"])
    assert res.status_code == 403
    assert res.json()["error"] == (
        "Player is not registered for the team associated with this practice"
    )


async def test_unknown_question_is_400_and_writes_nothing(client, store, practice, player):
    res = await _submit(client, practice["id"], player["id"], _items(
        ("q1", "fine"), ("q9", "mystery"),
    ))
    assert res.status_code == 400
    assert res.json()["error"] == "Invalid question ID: q9"
    assert await store.read_all(Collection.RESPONSES) == []


async def test_practice_checked_before_player(client):
    res = await _submit(client, "no-practice", "no-player")
    assert res.status_code == 404
    assert res.json()["error"] == "Practice not found"


async def test_unknown_player_is_404(client, practice):
    res = await _submit(client, practice["id"], "no-player")
    assert res.status_code == 404
    assert res.json()["error"] == "Player not found"


async def test_shape_errors(client, practice, player):
    cases = [
        (None, "Responses array is required and must not be empty"),
        ([], "Responses array is required and must not be empty"),
        ([{"answer": "x"}], "Each response must have a valid questionId"),
        ([{"questionId": "q1", "answer": "  "}], "Each response must have a non-empty answer"),
    ]
    for responses, message in cases:
        res = await _submit(client, practice["id"], player["id"], responses)
        assert res.status_code == 400
        assert res.json()["error"] == message


async def test_shape_checked_before_practice_lookup(client):
    res = await _submit(client, "no-practice", "p1", [])
    assert res.status_code == 400


async def test_missing_player_id_is_400(client, practice):
    res = await client.post(
        f"/api/practices/{practice['id']}/responses",
        json={"responses": FULL_ANSWERS},
    )
    assert res.status_code == 400
    assert res.json()["error"] == "Player ID is required and must be a non-empty string"


async def test_caller_header_supplies_player(client, practice, player):
    res = await client.post(
        f"/api/practices/{practice['id']}/responses",
        json={"responses": FULL_ANSWERS},
        headers={"X-Player-Id": player["id"]},
    )
    assert res.status_code == 201
    assert res.json()["data"]["playerId"] == player["id"]


async def test_responses_for_unknown_practice_is_404(client):
    res = await client.get("/api/practices/nope/responses")
    assert res.status_code == 404


async def test_corrupt_responses_file_is_500(client, store, practice, player):
    store.path_for(Collection.RESPONSES).write_text(json.dumps({"not": "a list"}))
    res = await _submit(client, practice["id"], player["id"])
    assert res.status_code == 500
    assert res.json() == {"success": False, "error": "Failed to access stored data"}
