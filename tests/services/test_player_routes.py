"""Player Routes: registration rules and team filtering.

Invariants tested:
    - Field checks in order: name, email, teamId, email format
    - Team must exist (404)
    - Email unique per team, case-insensitive (409), stored lowercased
    - Same email may join a different team
"""


def _player(team_id, email="ana@example.com", name="Ana Lima"):
    return {"name": name, "email": email, "teamId": team_id}


async def test_register_player(client, team):
    res = await client.post("/api/players", json=_player(team["id"], "  Ana@Example.COM "))
    assert res.status_code == 201
    player = res.json()["data"]
    assert player["email"] == "ana@example.com"
    assert player["teamId"] == team["id"]
    assert player["registeredAt"].endswith("Z")

    fetched = await client.get(f"/api/players/{player['id']}")
    assert fetched.json()["data"] == player


async def test_missing_fields_reported_in_order(client, team):
    cases = [
        ({"email": "a@b.co", "teamId": team["id"]},
         "Player name is required and must be a non-empty string"),
        ({"name": "Ana", "teamId": team["id"]},
         "Player email is required and must be a non-empty string"),
        ({"name": "Ana", "email": "a@b.co"},
         "Team ID is required and must be a non-empty string"),
        ({"name": "Ana", "email": "not-an-email", "teamId": team["id"]},
         "Invalid email format"),
    ]
    for payload, message in cases:
        res = await client.post("/api/players", json=payload)
        assert res.status_code == 400
        assert res.json()["error"] == message


async def test_format_checked_before_team_exists(client):
    res = await client.post("/api/players", json=_player("missing-team", "bad"))
    assert res.status_code == 400


async def test_unknown_team_is_404(client):
    res = await client.post("/api/players", json=_player("missing-team"))
    assert res.status_code == 404
    assert res.json()["error"] == "Team not found"


async def test_duplicate_email_in_team_is_409(client, team, player):
    res = await client.post(
        "/api/players", json=_player(team["id"], "ANA@example.com", "Other Ana"),
    )
    assert res.status_code == 409
    assert res.json()["error"] == (
        "Player with this email is already registered to this team"
    )
    players = (await client.get("/api/players")).json()["data"]
    assert [p["id"] for p in players] == [player["id"]]


async def test_same_email_other_team_allowed(client, player, other_team):
    res = await client.post("/api/players", json=_player(other_team["id"]))
    assert res.status_code == 201


async def test_list_filtered_by_team(client, team, other_team, player):
    other = (await client.post(
        "/api/players", json=_player(other_team["id"], "bo@example.com", "Bo"),
    )).json()["data"]

    by_team = (await client.get("/api/players", params={"teamId": team["id"]})).json()
    assert [p["id"] for p in by_team["data"]] == [player["id"]]

    everyone = (await client.get("/api/players")).json()["data"]
    assert {p["id"] for p in everyone} == {player["id"], other["id"]}


async def test_unknown_player_is_404(client):
    res = await client.get("/api/players/nobody")
    assert res.status_code == 404
    assert res.json()["error"] == "Player not found"
