"""Tests for API endpoints."""
import pytest
from fastapi.testclient import TestClient

from shelfsort.main import app


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def sample_board():
    """Board JSON with one move left before two clears."""
    return {
        "level": 1,
        "shelves": [
            {"items": [
                {"id": "a1", "type": "soda"},
                {"id": "a2", "type": "soda"},
                {"id": "b1", "type": "milk"},
            ]},
            {"items": [
                {"id": "a3", "type": "soda"},
                {"id": "b2", "type": "milk"},
                {"id": "b3", "type": "milk"},
            ]},
            {"items": []},
        ],
    }


class TestRootEndpoint:
    """Tests for root endpoint."""

    def test_root_returns_info(self, client):
        response = client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert "name" in data
        assert "version" in data
        assert "endpoints" in data


class TestHealthEndpoint:
    """Tests for health endpoint."""

    def test_health_check(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestLevelEndpoints:
    """Tests for difficulty, generation and item endpoints."""

    def test_difficulty(self, client):
        response = client.get("/api/difficulty/1")

        assert response.status_code == 200
        data = response.json()
        assert data["tier"] == "tutorial"
        assert data["shelf_count"] == 4
        assert data["total_items"] == 9
        assert data["theme"]["name"] == "Midnight"

    def test_difficulty_rejects_level_zero(self, client):
        response = client.get("/api/difficulty/0")

        assert response.status_code == 422

    def test_generate(self, client):
        response = client.post("/api/levels/generate", json={"level": 4})

        assert response.status_code == 200
        data = response.json()
        assert len(data["board"]["shelves"]) == 5
        assert sum(len(s["items"]) for s in data["board"]["shelves"]) == 12
        assert data["difficulty"]["tier"] == "easy"

    def test_generate_with_seed_is_reproducible(self, client):
        def layout(data):
            return [[i["type"] for i in s["items"]] for s in data["board"]["shelves"]]

        first = client.post("/api/levels/generate", json={"level": 10, "seed": 99}).json()
        second = client.post("/api/levels/generate", json={"level": 10, "seed": 99}).json()

        assert layout(first) == layout(second)

    def test_generate_missing_level(self, client):
        response = client.post("/api/levels/generate", json={})

        assert response.status_code == 422

    def test_items(self, client):
        response = client.get("/api/items")

        assert response.status_code == 200
        data = response.json()
        assert data[0]["type"] == "soda"
        assert all("color" in item and "label" in item for item in data)


class TestPlayEndpoints:
    """Tests for stateless move and match endpoints."""

    def test_move_applied(self, client, sample_board):
        response = client.post(
            "/api/moves",
            json={"board": sample_board, "from_shelf": 0, "item_id": "b1", "to_shelf": 2},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["outcome"] == "applied"
        assert data["applied"]
        assert data["board"]["shelves"][2]["items"][0]["id"] == "b1"

    def test_move_capacity_rejected(self, client, sample_board):
        response = client.post(
            "/api/moves",
            json={"board": sample_board, "from_shelf": 0, "item_id": "a1", "to_shelf": 1},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["outcome"] == "destination_full"
        assert not data["applied"]

    def test_move_unknown_item(self, client, sample_board):
        response = client.post(
            "/api/moves",
            json={"board": sample_board, "from_shelf": 0, "item_id": "zz", "to_shelf": 2},
        )

        assert response.json()["outcome"] == "item_not_found"

    def test_move_invalid_board(self, client, sample_board):
        sample_board["shelves"][2]["items"] = [{"id": "a1", "type": "chips"}]

        response = client.post(
            "/api/moves",
            json={"board": sample_board, "from_shelf": 0, "item_id": "b1", "to_shelf": 2},
        )

        assert response.status_code == 400

    def test_matches(self, client, sample_board):
        sample_board["shelves"][0]["items"][2] = {"id": "a4", "type": "soda"}

        response = client.post("/api/matches", json={"board": sample_board})

        assert response.status_code == 200
        data = response.json()
        assert data["cleared"] == [0]
        assert data["coins"] == 10
        assert not data["won"]
        assert data["board"]["shelves"][0]["items"] == []

    def test_matches_won(self, client):
        board = {"shelves": [{"items": [{"id": f"s{i}", "type": "soda"} for i in range(3)]}, {"items": []}]}

        data = client.post("/api/matches", json={"board": board}).json()

        assert data["won"]

    def test_board_stats(self, client, sample_board):
        response = client.post("/api/boards/stats", json={"board": sample_board})

        assert response.status_code == 200
        data = response.json()
        assert data["total_items"] == 6
        assert data["free_slots"] == 3


class TestSessionEndpoints:
    """Tests for session endpoints."""

    def test_create_and_get(self, client):
        response = client.post("/api/sessions", json={"player_name": "Alex"})

        assert response.status_code == 201
        data = response.json()
        assert data["level"] == 1
        assert data["progress"]["player_name"] == "Alex"

        fetched = client.get(f"/api/sessions/{data['session_id']}")
        assert fetched.status_code == 200
        assert fetched.json()["board"] == data["board"]

    def test_unknown_session(self, client):
        assert client.get("/api/sessions/missing").status_code == 404
        assert client.post("/api/sessions/missing/next-level").status_code == 404

    def test_session_move(self, client):
        data = client.post("/api/sessions", json={}).json()
        shelves = data["board"]["shelves"]
        source = next(i for i, s in enumerate(shelves) if s["items"])
        target = next(i for i, s in enumerate(shelves) if i != source and len(s["items"]) < 3)
        item_id = shelves[source]["items"][0]["id"]

        response = client.post(
            f"/api/sessions/{data['session_id']}/moves",
            json={"from_shelf": source, "item_id": item_id, "to_shelf": target},
        )

        assert response.status_code == 200
        turn = response.json()
        assert turn["outcome"] == "applied"
        assert "progress" in turn

    def test_next_level_before_win(self, client):
        session_id = client.post("/api/sessions", json={}).json()["session_id"]

        response = client.post(f"/api/sessions/{session_id}/next-level")

        assert response.status_code == 409

    def test_shop(self, client):
        session_id = client.post("/api/sessions", json={}).json()["session_id"]

        response = client.get(f"/api/sessions/{session_id}/shop")

        assert response.status_code == 200
        data = response.json()
        assert data["coins"] == 0
        assert any(d["id"] == "default" and d["is_unlocked"] for d in data["decorations"])

    def test_buy_without_coins(self, client):
        session_id = client.post("/api/sessions", json={}).json()["session_id"]

        assert client.post(f"/api/sessions/{session_id}/shop/neon").status_code == 400
        assert client.post(f"/api/sessions/{session_id}/shop/velvet").status_code == 404

    def test_delete_session(self, client):
        session_id = client.post("/api/sessions", json={}).json()["session_id"]

        assert client.delete(f"/api/sessions/{session_id}").status_code == 204
        assert client.get(f"/api/sessions/{session_id}").status_code == 404
