"""
End-to-end tests for the HTTP API.

Runs the full FastAPI application against an in-memory database: sign-up,
login, and the board list/save/data/delete endpoints with their status codes.
"""

import pytest
from fastapi.testclient import TestClient

from kpt_board.api.server import create_app
from kpt_board.c1_database_session.database_manager import DatabaseManager
from kpt_board.core.config import DatabaseConfig, SessionConfig, Settings


@pytest.fixture
def client():
    """Application client with startup (table creation) run."""
    settings = Settings(
        database=DatabaseConfig(database_url="sqlite:///:memory:"),
        session=SessionConfig(ttl_seconds=3600, cookie_name="kpt_session"),
    )
    db_manager = DatabaseManager("sqlite:///:memory:")
    app = create_app(settings=settings, db_manager=db_manager)

    with TestClient(app) as test_client:
        yield test_client

    db_manager.engine.dispose()


def sign_up_and_login(client, display_name, password="pw-123"):
    response = client.post("/accounts/new", json={"display_name": display_name, "password": password})
    assert response.status_code == 201

    response = client.post("/accounts/session", json={"display_name": display_name, "password": password})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def owner_headers(client):
    return sign_up_and_login(client, "owner")


@pytest.fixture
def other_headers(client):
    return sign_up_and_login(client, "visitor")


def save_payload(title, title_id=None, **lists):
    payload = {
        "title": title,
        "projectData": {
            "id": None if title_id is None else str(title_id),
            "lists": [
                {"id": category, "category": category, "tickets": tickets}
                for category, tickets in lists.items()
            ],
        },
    }
    if title_id is not None:
        payload["titleId"] = title_id
    return payload


class TestHealthAndAccounts:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_sign_up(self, client):
        response = client.post("/accounts/new", json={"display_name": "alice", "password": "pw"})

        assert response.status_code == 201
        assert response.json() == {"message": "Account created successfully"}

    def test_duplicate_sign_up(self, client):
        client.post("/accounts/new", json={"display_name": "alice", "password": "pw"})

        response = client.post("/accounts/new", json={"display_name": "alice", "password": "other"})

        assert response.status_code == 409

    def test_sign_up_with_empty_password(self, client):
        response = client.post("/accounts/new", json={"display_name": "alice", "password": ""})

        assert response.status_code == 400

    def test_login_sets_cookie(self, client):
        client.post("/accounts/new", json={"display_name": "alice", "password": "pw"})

        response = client.post("/accounts/session", json={"display_name": "alice", "password": "pw"})

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Login succeeded"
        cookie = response.headers["set-cookie"]
        assert cookie.startswith(f"kpt_session={body['token']};")
        assert "HttpOnly" in cookie
        assert "Max-Age=3600" in cookie

    def test_login_failure(self, client):
        client.post("/accounts/new", json={"display_name": "alice", "password": "pw"})

        response = client.post("/accounts/session", json={"display_name": "alice", "password": "nope"})

        assert response.status_code == 401
        assert response.json() == {"message": "Login failed"}


class TestAuthentication:
    @pytest.mark.parametrize(
        "headers",
        [
            {},
            {"Authorization": "Bearer "},
            {"Authorization": "Basic abc"},
            {"Authorization": "Bearer unknown-token"},
        ],
    )
    def test_board_routes_require_valid_session(self, client, headers):
        assert client.get("/boards/list", headers=headers).status_code == 401
        assert client.post("/boards/save", json=save_payload("x"), headers=headers).status_code == 401
        assert client.get("/boards/data/1", headers=headers).status_code == 401
        assert client.delete("/boards/delete/1", headers=headers).status_code == 401


class TestBoardLifecycle:
    def test_create_read_update_delete(self, client, owner_headers):
        response = client.post(
            "/boards/save",
            json=save_payload(
                "Sprint 1",
                Keep=[{"id": 0, "content": "Pairing"}],
                Problem=[{"id": 0, "content": "Flaky CI"}],
            ),
            headers=owner_headers,
        )
        assert response.status_code == 201
        created = response.json()
        assert created["message"] == "Board and tickets created"
        assert created["title"] == "Sprint 1"
        assert created["failures"] == []
        board_id = int(created["titleId"])

        response = client.get(f"/boards/data/{board_id}", headers=owner_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "Sprint 1"
        lists = data["projectData"]["lists"]
        assert [lst["category"] for lst in lists] == ["Keep", "Problem", "Try"]
        keep_ticket = lists[0]["tickets"][0]
        assert keep_ticket["content"] == "Pairing"

        # Keep "Pairing" (edited), drop "Flaky CI", add a Try
        response = client.post(
            "/boards/save",
            json=save_payload(
                "Sprint 1 (final)",
                title_id=board_id,
                Keep=[{"id": keep_ticket["id"], "content": "Pair daily"}],
                Try=[{"id": 0, "content": "Shorter sprints"}],
            ),
            headers=owner_headers,
        )
        assert response.status_code == 200
        assert response.json()["message"] == "Board and tickets updated"
        assert response.json()["titleId"] == str(board_id)

        data = client.get(f"/boards/data/{board_id}", headers=owner_headers).json()
        assert data["title"] == "Sprint 1 (final)"
        assert [[t["content"] for t in lst["tickets"]] for lst in data["projectData"]["lists"]] == [
            ["Pair daily"],
            [],
            ["Shorter sprints"],
        ]
        assert data["projectData"]["lists"][0]["tickets"][0]["id"] == keep_ticket["id"]

        assert client.get("/boards/list", headers=owner_headers).json() == [
            {"id": board_id, "title": "Sprint 1 (final)"}
        ]

        response = client.delete(f"/boards/delete/{board_id}", headers=owner_headers)
        assert response.status_code == 200
        assert response.json() == {"message": "Board deleted successfully", "failures": []}

        assert client.get("/boards/list", headers=owner_headers).json() == []

    def test_partial_failure_is_reported_with_success_status(self, client, owner_headers):
        board_id = int(client.post("/boards/save", json=save_payload("Retro"), headers=owner_headers).json()["titleId"])

        response = client.post(
            "/boards/save",
            json=save_payload("Retro", title_id=board_id, Keep=[{"id": 999, "content": "ghost"}]),
            headers=owner_headers,
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"].startswith("Board updated but some tickets failed")
        assert [(f["id"], f["operation"]) for f in body["failures"]] == [(999, "update")]


class TestBoardErrors:
    def test_invalid_title_id(self, client, owner_headers):
        response = client.post("/boards/save", json=save_payload("Retro", title_id="abc"), headers=owner_headers)

        assert response.status_code == 400
        assert response.json()["message"] == "titleId is invalid"

    @pytest.mark.parametrize("title_id", ["²", 2 ** 70, str(2 ** 63)])
    def test_title_id_outside_storage_range(self, client, owner_headers, title_id):
        response = client.post("/boards/save", json=save_payload("Retro", title_id=title_id), headers=owner_headers)

        assert response.status_code == 400
        assert response.json()["message"] == "titleId is invalid"

    def test_path_id_outside_storage_range(self, client, owner_headers):
        assert client.get(f"/boards/data/{2 ** 70}", headers=owner_headers).status_code == 400
        assert client.delete(f"/boards/delete/{2 ** 70}", headers=owner_headers).status_code == 400

    def test_save_unknown_board(self, client, owner_headers):
        response = client.post("/boards/save", json=save_payload("Retro", title_id=4242), headers=owner_headers)

        assert response.status_code == 404
        assert response.json()["message"] == "Board not found"

    def test_data_unknown_board(self, client, owner_headers):
        assert client.get("/boards/data/4242", headers=owner_headers).status_code == 404

    def test_other_account_can_read_but_not_modify(self, client, owner_headers, other_headers):
        board_id = int(
            client.post(
                "/boards/save",
                json=save_payload("Shared", Keep=[{"id": 0, "content": "mine"}]),
                headers=owner_headers,
            ).json()["titleId"]
        )

        response = client.get(f"/boards/data/{board_id}", headers=other_headers)
        assert response.status_code == 200

        response = client.post(
            "/boards/save",
            json=save_payload("Hijacked", title_id=board_id),
            headers=other_headers,
        )
        assert response.status_code == 403

        response = client.delete(f"/boards/delete/{board_id}", headers=other_headers)
        assert response.status_code == 403
        assert response.json() == {"detail": "Unauthorized to delete this board"}

        data = client.get(f"/boards/data/{board_id}", headers=owner_headers).json()
        assert data["title"] == "Shared"
        assert data["projectData"]["lists"][0]["tickets"][0]["content"] == "mine"

    def test_deleted_board_is_hidden_from_others(self, client, owner_headers, other_headers):
        board_id = int(client.post("/boards/save", json=save_payload("Gone"), headers=owner_headers).json()["titleId"])
        client.delete(f"/boards/delete/{board_id}", headers=owner_headers)

        assert client.get(f"/boards/data/{board_id}", headers=other_headers).status_code == 404
        assert client.get(f"/boards/data/{board_id}", headers=owner_headers).status_code == 200

    def test_delete_unknown_board(self, client, owner_headers):
        response = client.delete("/boards/delete/4242", headers=owner_headers)

        assert response.status_code == 404
        assert response.json() == {"detail": "Board not found"}
