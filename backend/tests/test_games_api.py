"""Tests for the /games REST API (create, fetch, roll, hold, score, end-turn, delete)."""

from __future__ import annotations

import httpx
import pytest

from app.config import Settings
from app.main import create_app
from models import Category
from services.store import GameStore


def _client(store: GameStore, settings: Settings | None = None) -> httpx.AsyncClient:
    transport = httpx.ASGITransport(app=create_app(settings or Settings(), store=store))
    return httpx.AsyncClient(transport=transport, base_url="http://test")


@pytest.fixture
def store(scripted_rng) -> GameStore:
    return GameStore(rng=scripted_rng(2, 2, 3, 3, 3))


@pytest.mark.anyio
async def test_create_game_returns_201_and_initial_snapshot(store: GameStore) -> None:
    async with _client(store) as client:
        response = await client.post("/games")
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "New game created"
    game = body["game"]
    assert game["id"] == "1"
    assert game["dice"] == [1, 2, 3, 4, 5]
    assert game["held"] == [False] * 5
    assert game["rollsLeft"] == 3
    assert game["scores"] == {category.value: None for category in Category}
    assert game["total"] == 0
    assert game["finished"] is False
    assert game["round"] == 1
    assert game["phase"] == "awaiting_first_roll"
    assert "1" in store


@pytest.mark.anyio
async def test_fetch_game(store: GameStore) -> None:
    async with _client(store) as client:
        await client.post("/games")
        response = await client.get("/games/1")
    assert response.status_code == 200
    assert response.json()["game"]["id"] == "1"
    assert "message" not in response.json()


@pytest.mark.anyio
@pytest.mark.parametrize(
    ("method", "path", "json"),
    [
        ("GET", "/games/404", None),
        ("POST", "/games/404/roll", None),
        ("POST", "/games/404/hold", {"index": 0}),
        ("POST", "/games/404/score", {"category": "Chance"}),
        ("POST", "/games/404/end-turn", None),
    ],
)
async def test_unknown_game_returns_404(store: GameStore, method: str, path: str, json) -> None:
    async with _client(store) as client:
        response = await client.request(method, path, json=json)
    assert response.status_code == 404
    assert response.json() == {"error": "Game not found"}


@pytest.mark.anyio
async def test_play_one_turn(store: GameStore) -> None:
    async with _client(store) as client:
        await client.post("/games")

        rolled = await client.post("/games/1/roll")
        assert rolled.status_code == 200
        assert rolled.json()["message"] == "Rolled dice. Rolls left: 2."
        assert rolled.json()["game"]["dice"] == [2, 2, 3, 3, 3]

        held = await client.post("/games/1/hold", json={"index": 0})
        assert held.status_code == 200
        assert held.json()["message"] == "Die 1 held."
        assert held.json()["game"]["held"][0] is True

        scored = await client.post("/games/1/score", json={"category": "Full House"})
    assert scored.status_code == 200
    body = scored.json()
    assert body["message"] == "Scored 25 points in Full House. New turn started."
    game = body["game"]
    assert game["scores"]["Full House"] == 25
    assert game["total"] == 25
    assert game["rollsLeft"] == 3
    assert game["held"] == [False] * 5
    assert game["round"] == 2


@pytest.mark.anyio
async def test_hold_before_roll_is_400(store: GameStore) -> None:
    async with _client(store) as client:
        await client.post("/games")
        response = await client.post("/games/1/hold", json={"index": 1})
    assert response.status_code == 400
    assert response.json() == {"error": "Roll the dice first"}


@pytest.mark.anyio
@pytest.mark.parametrize("body", [{"index": 5}, {"index": -1}, {"index": "2"}, {"index": True}, {"index": 1.5}])
async def test_hold_with_invalid_index_is_400(store: GameStore, body) -> None:
    async with _client(store) as client:
        await client.post("/games")
        await client.post("/games/1/roll")
        response = await client.post("/games/1/hold", json=body)
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid index"}
    assert store.get_game("1").dice.held == [False] * 5


@pytest.mark.anyio
async def test_hold_without_body_is_400(store: GameStore) -> None:
    async with _client(store) as client:
        await client.post("/games")
        response = await client.post("/games/1/hold")
    assert response.status_code == 400
    assert "error" in response.json()


@pytest.mark.anyio
async def test_score_with_invalid_category_is_400(store: GameStore) -> None:
    async with _client(store) as client:
        await client.post("/games")
        await client.post("/games/1/roll")
        response = await client.post("/games/1/score", json={"category": "Bonus"})
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid category"}


@pytest.mark.anyio
async def test_score_twice_is_400_and_state_unchanged(store: GameStore) -> None:
    async with _client(store) as client:
        await client.post("/games")
        await client.post("/games/1/roll")
        await client.post("/games/1/score", json={"category": "Threes"})
        await client.post("/games/1/roll")
        before = (await client.get("/games/1")).json()["game"]
        response = await client.post("/games/1/score", json={"category": "Threes"})
        after = (await client.get("/games/1")).json()["game"]
    assert response.status_code == 400
    assert response.json() == {"error": "Category already scored"}
    assert after == before


@pytest.mark.anyio
async def test_fourth_roll_is_400(store: GameStore) -> None:
    async with _client(store) as client:
        await client.post("/games")
        for _ in range(2):
            await client.post("/games/1/roll")
        last = await client.post("/games/1/roll")
        assert last.json()["message"] == "Rolled dice. No rolls left, please choose a category."
        response = await client.post("/games/1/roll")
    assert response.status_code == 400
    assert response.json() == {"error": "No rolls left this turn"}


@pytest.mark.anyio
async def test_end_turn_then_score(store: GameStore) -> None:
    async with _client(store) as client:
        await client.post("/games")
        early = await client.post("/games/1/end-turn")
        assert early.status_code == 400
        await client.post("/games/1/roll")
        ended = await client.post("/games/1/end-turn")
        assert ended.status_code == 200
        assert ended.json()["game"]["rollsLeft"] == 0
        assert ended.json()["game"]["phase"] == "awaiting_score"
        scored = await client.post("/games/1/score", json={"category": "Chance"})
    assert scored.json()["game"]["scores"]["Chance"] == 13


@pytest.mark.anyio
async def test_full_game_over_http(scripted_rng) -> None:
    store = GameStore(rng=scripted_rng(6))
    async with _client(store) as client:
        await client.post("/games")
        for category in Category:
            await client.post("/games/1/roll")
            response = await client.post("/games/1/score", json={"category": category.value})
            assert response.status_code == 200
        game = response.json()["game"]
        assert response.json()["message"] == f"Game over! Final score: {game['total']}"
        assert game["finished"] is True
        assert game["total"] == sum(game["scores"].values())

        rolled = await client.post("/games/1/roll")
    assert rolled.status_code == 400
    assert rolled.json() == {"error": "Game already finished"}


@pytest.mark.anyio
async def test_delete_game_is_idempotent(store: GameStore) -> None:
    async with _client(store) as client:
        await client.post("/games")
        first = await client.delete("/games/1")
        second = await client.delete("/games/1")
        fetched = await client.get("/games/1")
    assert first.status_code == 200
    assert first.json() == {"message": "Game deleted"}
    assert second.status_code == 200
    assert second.json() == {"message": "Game deleted"}
    assert fetched.status_code == 404
    assert len(store) == 0


@pytest.mark.anyio
async def test_routes_honour_api_prefix(store: GameStore) -> None:
    async with _client(store, Settings(api_prefix="/api")) as client:
        created = await client.post("/api/games")
        health = await client.get("/api/health")
        unprefixed = await client.post("/games")
    assert created.status_code == 201
    assert health.json() == {"status": "ok", "games": 1}
    assert unprefixed.status_code == 404
