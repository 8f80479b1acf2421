import json

import pytest
from httpx import ASGITransport, AsyncClient

from pitchside.api import create_app
from pitchside.persistence import MemoryStore
from pitchside.settings import Settings


@pytest.fixture
async def client():
    app = create_app(store=MemoryStore(), settings=Settings())
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        async_client.app = app
        yield async_client


async def _create_player(client: AsyncClient, **fields) -> dict:
    payload = {"name": "Player", "preferredPosition": "CM", "number": 8}
    payload.update(fields)
    resp = await client.post("/api/players", json=payload)
    assert resp.status_code == 201, resp.text
    return resp.json()


async def _team(client: AsyncClient) -> dict:
    resp = await client.get("/api/teams")
    resp.raise_for_status()
    return resp.json()[0]


@pytest.mark.anyio
async def test_health(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


@pytest.mark.anyio
async def test_formations_endpoint(client: AsyncClient):
    resp = await client.get("/api/formations")
    assert resp.status_code == 200
    body = resp.json()
    assert [item["key"] for item in body] == ["4-4-2", "4-3-3", "3-5-2", "4-5-1", "5-3-2", "4-2-1-3"]
    assert body[0]["slots"][0] == {"slot": "GK", "abbreviation": "POR"}


@pytest.mark.anyio
async def test_player_crud_round_trip(client: AsyncClient):
    player = await _create_player(client, name="Rossi", preferredPosition="GK", number=1)
    assert player["status"] == "available"
    assert player["entryOrder"] is not None

    resp = await client.get(f"/api/players/{player['id']}")
    assert resp.status_code == 200
    assert resp.json()["name"] == "Rossi"

    resp = await client.put(f"/api/players/{player['id']}", json={"status": "injured", "notes": "hamstring"})
    assert resp.status_code == 200
    assert resp.json()["status"] == "injured"
    assert resp.json()["preferredPosition"] == "GK"

    resp = await client.get("/api/players")
    assert [item["id"] for item in resp.json()] == [player["id"]]

    resp = await client.delete(f"/api/players/{player['id']}")
    assert resp.status_code == 204
    resp = await client.delete(f"/api/players/{player['id']}")
    assert resp.status_code == 404
    resp = await client.get(f"/api/players/{player['id']}")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Player not found"


@pytest.mark.anyio
async def test_player_validation_errors(client: AsyncClient):
    resp = await client.post("/api/players", json={"name": " ", "preferredPosition": "GK"})
    assert resp.status_code == 400
    detail = resp.json()["detail"]
    assert detail["message"] == "Invalid player data"
    assert detail["errors"]

    resp = await client.post("/api/players", json=[{"name": "Rossi", "preferredPosition": "GK"}])
    assert resp.status_code == 400
    assert resp.json()["detail"]["message"] == "Invalid player data"

    resp = await client.put("/api/teams/anything", json="4-3-3")
    assert resp.status_code == 400
    assert resp.json()["detail"]["message"] == "Invalid team data"

    resp = await client.put("/api/players/missing", json={"name": "X"})
    assert resp.status_code == 404

    resp = await client.get("/api/players")
    assert resp.json() == []


@pytest.mark.anyio
async def test_team_and_formation_update(client: AsyncClient):
    team = await _team(client)
    assert team["name"] == "FC Champions"
    assert team["formation"] == "4-4-2"

    resp = await client.put(f"/api/teams/{team['id']}/formation", json={"formation": "4-2-1-3"})
    assert resp.status_code == 200
    assert resp.json()["formation"] == "4-2-1-3"

    resp = await client.put(f"/api/teams/{team['id']}/formation", json={"formation": "6-6-6"})
    assert resp.status_code == 400

    resp = await client.put(f"/api/teams/{team['id']}", json={"formation": "6-6-6"})
    assert resp.status_code == 400

    resp = await client.put("/api/teams/missing/formation", json={"formation": "4-3-3"})
    assert resp.status_code == 404


@pytest.mark.anyio
async def test_lineup_crud_and_team_filter(client: AsyncClient):
    team = await _team(client)
    resp = await client.post(
        "/api/lineups",
        json={"teamId": team["id"], "name": "Derby", "formation": "4-3-3", "positions": {"GK": "p1"}},
    )
    assert resp.status_code == 201
    lineup = resp.json()

    resp = await client.get("/api/lineups", params={"teamId": team["id"]})
    assert [item["id"] for item in resp.json()] == [lineup["id"]]
    resp = await client.get("/api/lineups", params={"teamId": "other"})
    assert resp.json() == []

    resp = await client.put(f"/api/lineups/{lineup['id']}", json={"name": "Final"})
    assert resp.json()["name"] == "Final"
    assert resp.json()["positions"] == {"GK": "p1"}

    resp = await client.post("/api/lineups", json={"teamId": team["id"], "name": "Bad", "formation": "x"})
    assert resp.status_code == 400


@pytest.mark.anyio
async def test_board_and_assign(client: AsyncClient):
    keeper = await _create_player(client, name="Rossi", preferredPosition="GK", number=1)
    back = await _create_player(client, name="Bianchi", preferredPosition="LB", number=3)
    absent = await _create_player(client, name="Verdi", preferredPosition="ST", status="absent")

    resp = await client.post("/api/board/assign", json={"assignment": {}, "slot": "GK", "playerId": keeper["id"]})
    assert resp.status_code == 200
    board = resp.json()
    assert board["formation"] == "4-4-2"
    assert board["assignment"] == {"GK": keeper["id"]}
    assert board["slots"][0]["player"]["name"] == "Rossi"
    assert board["occupiedSlots"] == ["GK"]
    assert [player["id"] for player in board["bench"]] == [back["id"]]
    assert board["candidates"]["GK"] == [keeper["id"], back["id"]]
    assert board["candidates"]["LB"] == [back["id"]]
    assert board["stats"] == {"starters": 1, "bench": 1, "absent": 1}

    resp = await client.post(
        "/api/board/assign",
        json={"assignment": board["assignment"], "slot": "ST", "playerId": absent["id"], "formation": "4-3-3"},
    )
    board = resp.json()
    assert board["formation"] == "4-3-3"
    assert board["stats"] == {"starters": 2, "bench": 0, "absent": 1}

    resp = await client.post("/api/board/assign", json={"assignment": board["assignment"], "slot": "GK", "playerId": "none"})
    assert resp.json()["assignment"] == {"ST": absent["id"]}

    resp = await client.post("/api/board", json={"formation": "9-0-1"})
    assert resp.status_code == 400


@pytest.mark.anyio
async def test_hierarchy_endpoint(client: AsyncClient):
    team = await _team(client)
    keeper = await _create_player(client, name="Rossi", preferredPosition="GK", number=1)
    await _create_player(client, name="Bianchi", preferredPosition="RB", number=2)
    await client.put(f"/api/teams/{team['id']}", json={"captainId": keeper["id"]})

    resp = await client.get("/api/hierarchy", params={"lineup": json.dumps({"GK": keeper["id"]})})
    assert resp.status_code == 200
    body = resp.json()
    assert body["teamId"] == team["id"]
    assert [group["category"] for group in body["groups"]] == ["goalkeepers", "defenders"]
    keeper_entry = body["groups"][0]["center"][0]
    assert keeper_entry["badge"]["kind"] == "captain"
    assert keeper_entry["entryNumber"] == 1
    assert keeper_entry["number"] == "1"
    assert body["groups"][1]["right"][0]["entryNumber"] == 2
    assert body["summary"]["total"] == 2

    resp = await client.get("/api/hierarchy", params={"lineup": "{broken"})
    assert resp.status_code == 400


@pytest.mark.anyio
async def test_share_link_and_view(client: AsyncClient):
    team = await _team(client)
    keeper = await _create_player(client, name="Rossi", preferredPosition="GK", number=1)
    winger = await _create_player(client, name="Neri", preferredPosition="LW", number=11)

    resp = await client.post(
        "/api/share/link",
        json={"formation": "4-4-2", "assignment": {"GK": keeper["id"], "LB": winger["id"]}},
    )
    assert resp.status_code == 200
    link = resp.json()
    assert link["path"].startswith("/share?")

    resp = await client.get(f"/api/share?{link['query']}")
    assert resp.status_code == 200
    view = resp.json()
    assert view["teamId"] == team["id"]
    assert view["teamName"] == "FC Champions"
    assert view["formation"] == "4-4-2"
    assert view["board"]["stats"]["starters"] == 2
    assert [item["player"]["id"] for item in view["groups"]["defenders"]] == [winger["id"]]
    assert view["groups"]["defenders"][0]["label"] == "TS"
    assert view["groups"]["defenders"][0]["number"] == "11"
    assert view["groups"]["attackers"] == []
    assert view["counts"]["assigned"] == 2

    resp = await client.get("/api/share", params={"formation": "1-1-1"})
    assert resp.status_code == 400
    resp = await client.get("/api/share", params={"lineup": "[1]"})
    assert resp.status_code == 400


@pytest.mark.anyio
async def test_share_without_teams_is_not_found():
    app = create_app(store=MemoryStore(Settings(seed_default_team=False)), settings=Settings())
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        resp = await client.get("/api/share")
        assert resp.status_code == 404


@pytest.mark.anyio
async def test_ratings_endpoint(client: AsyncClient):
    a = await _create_player(client, name="A", preferredPosition="GK")
    b = await _create_player(client, name="B", preferredPosition="ST")

    resp = await client.post("/api/ratings", json={"ratings": {a["id"]: 7.5, b["id"]: 6}})
    assert resp.status_code == 200
    body = resp.json()
    assert body["display"] == {a["id"]: "7.5/10", b["id"]: "6.0/10"}

    resp = await client.post("/api/ratings", json={"ratings": {a["id"]: 9, "ghost": 5}})
    assert resp.status_code == 422
    detail = resp.json()["detail"]
    assert list(detail["failures"]) == ["ghost"]
    assert detail["updated"] == [a["id"]]

    resp = await client.get(f"/api/players/{a['id']}")
    assert resp.json()["rating"] == 9


@pytest.mark.anyio
async def test_share_view_lists_wing_back_twice(client: AsyncClient):
    team = await _team(client)
    wing_back = await _create_player(client, name="Gialli", preferredPosition="RWB", number=0)
    query = {"team": team["id"], "formation": "3-5-2", "lineup": json.dumps({"RWB": wing_back["id"]})}

    resp = await client.get("/api/share", params=query)
    assert resp.status_code == 200
    view = resp.json()
    assert [item["player"]["id"] for item in view["groups"]["defenders"]] == [wing_back["id"]]
    assert [item["player"]["id"] for item in view["groups"]["attackers"]] == [wing_back["id"]]
    assert view["groups"]["attackers"][0]["label"] == "AD"
    assert view["groups"]["attackers"][0]["number"] == "?"
    assert view["counts"]["defenders"] == 1
    assert view["counts"]["attackers"] == 1
    assert view["counts"]["assigned"] == 1
