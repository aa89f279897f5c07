from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

import bowling_app.main as main
from bowling_app.repository import InMemoryRepository
from bowling_app.service import BowlingService

client = TestClient(main.app)


@pytest.fixture(autouse=True)
def fresh_service(monkeypatch):
    monkeypatch.setattr(main, "service", BowlingService(InMemoryRepository(high_score_limit=5)))


def start_game(name: str = "Alice") -> dict:
    response = client.post("/api/v1/games", json={"name": name})
    assert response.status_code == 201
    return response.json()


def roll(game_id: str, roll1: int, roll2: int | None = None, roll3: int | None = None):
    return client.post(
        f"/api/v1/games/{game_id}/rolls",
        json={"roll1": roll1, "roll2": roll2, "roll3": roll3},
    )


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_root_points_to_docs():
    assert client.get("/").json()["docs"] == "/docs"


def test_start_game():
    body = start_game("Alice")
    assert body["name"] == "Alice"
    assert body["frames"] == []
    assert body["total_score"] == 0
    assert body["current_frame_index"] == 0
    assert body["is_complete"] is False


def test_start_game_rejects_blank_name():
    assert client.post("/api/v1/games", json={"name": "   "}).status_code == 422
    assert client.post("/api/v1/games", json={}).status_code == 422


def test_get_game_round_trip():
    game = start_game()
    response = client.get(f"/api/v1/games/{game['id']}")
    assert response.status_code == 200
    assert response.json()["id"] == game["id"]


def test_get_unknown_game_is_404():
    response = client.get(f"/api/v1/games/{uuid4()}")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "GameNotFound"


def test_strike_then_open_frame():
    game = start_game()
    assert roll(game["id"], 10).status_code == 200
    response = roll(game["id"], 7, 2)
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert [f["score"] for f in body["game"]["frames"]] == [19, 9]
    assert body["game"]["total_score"] == 28


def test_roll_input_with_game_id_in_body():
    game = start_game()
    response = client.post("/api/v1/rolls", json={"game_id": game["id"], "roll1": 7, "roll2": 3})
    assert response.status_code == 200
    assert response.json()["game"]["frames"][0]["score"] is None


def test_invalid_pin_count_is_400():
    game = start_game()
    response = roll(game["id"], 11, 0)
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "InvalidPinCount"


def test_strike_with_second_roll_is_400():
    game = start_game()
    response = roll(game["id"], 10, 5)
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "InvalidRollSequenceForFrame"
    assert client.get(f"/api/v1/games/{game['id']}").json()["frames"] == []


def test_roll_on_unknown_game_is_404():
    response = roll(str(uuid4()), 3, 4)
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "GameNotFound"


def test_perfect_game_then_high_scores():
    game = start_game("Perfect")
    for _ in range(9):
        assert roll(game["id"], 10).status_code == 200
    response = roll(game["id"], 10, 10, 10)
    assert response.status_code == 200
    assert response.json()["game"]["total_score"] == 300
    assert response.json()["game"]["is_complete"] is True

    late = roll(game["id"], 1, 1)
    assert late.status_code == 400
    assert late.json()["error"]["code"] == "GameAlreadyComplete"

    scores = client.get("/api/v1/highscores").json()
    assert scores["limit"] == 5
    assert [(s["name"], s["score"]) for s in scores["high_scores"]] == [("Perfect", 300)]


def test_high_scores_limit_bounds():
    assert client.get("/api/v1/highscores", params={"limit": 0}).status_code == 422
    assert client.get("/api/v1/highscores", params={"limit": 3}).json()["limit"] == 3


def test_start_game_strips_name():
    assert start_game("  Bob ")["name"] == "Bob"
