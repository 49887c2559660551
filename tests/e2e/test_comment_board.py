"""End-to-end tests of the HTTP API over in-memory storage and cache."""

import pytest
from fastapi.testclient import TestClient

from board.adapter.cache import InMemoryCacheBackend
from board.domain.error import CacheFailureError
from board.interface.api.app import create_app
from tests.di import build_test_container
from tests.harness import create_client_fixture

client = create_client_fixture()


def register(client: TestClient, username: str) -> dict[str, str]:
    """Register a user and return bearer headers for them."""
    response = client.post(
        "/register",
        json={
            "username": username,
            "email": f"{username}@example.com",
            "password": f"{username}-password",
        },
    )
    assert response.status_code == 201, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}


class TestVotingLifecycle:
    def test_vote_flip_and_delete(self, client):
        # Arrange
        alice = register(client, "alice")
        bob = register(client, "bob")
        created = client.post("/comments", json={"content": "hello"}, headers=alice)
        assert created.status_code == 201
        comment_id = created.json()["id"]
        assert created.json()["score"] == 0

        # Act / Assert
        up = client.post(f"/comments/{comment_id}/vote", json={"vote": "up"}, headers=bob)
        assert up.status_code == 200
        assert up.json()["score"] == 1

        again = client.post(
            f"/comments/{comment_id}/vote", json={"vote": "up"}, headers=bob
        )
        assert again.status_code == 400
        assert "error" in again.json()

        down = client.post(
            f"/comments/{comment_id}/vote", json={"vote": "down"}, headers=bob
        )
        assert down.status_code == 200
        assert down.json()["score"] == -1

        deleted = client.delete(f"/comments/{comment_id}", headers=alice)
        assert deleted.status_code == 204

        missing = client.get(f"/comments/{comment_id}", headers=alice)
        assert missing.status_code == 404
        assert "error" in missing.json()

    def test_only_author_can_edit(self, client):
        alice = register(client, "alice")
        bob = register(client, "bob")
        comment_id = client.post(
            "/comments", json={"content": "original"}, headers=alice
        ).json()["id"]
        client.post(f"/comments/{comment_id}/vote", json={"vote": "up"}, headers=bob)

        forbidden = client.put(
            f"/comments/{comment_id}", json={"content": "hijack"}, headers=bob
        )
        assert forbidden.status_code == 403

        updated = client.put(
            f"/comments/{comment_id}", json={"content": "edited"}, headers=alice
        )
        assert updated.status_code == 200
        assert updated.json()["content"] == "edited"
        assert updated.json()["score"] == 1

    def test_only_author_can_delete(self, client):
        alice = register(client, "alice")
        bob = register(client, "bob")
        comment_id = client.post(
            "/comments", json={"content": "mine"}, headers=alice
        ).json()["id"]

        response = client.delete(f"/comments/{comment_id}", headers=bob)

        assert response.status_code == 403
        assert client.get(f"/comments/{comment_id}", headers=bob).status_code == 200


class TestThreads:
    def test_listing_nests_replies(self, client):
        alice = register(client, "alice")
        bob = register(client, "bob")
        first = client.post("/comments", json={"content": "first"}, headers=alice).json()
        second = client.post("/comments", json={"content": "second"}, headers=bob).json()
        reply = client.post(
            "/comments",
            json={"content": "reply", "parentId": first["id"], "replyingTo": "alice"},
            headers=bob,
        ).json()

        listing = client.get("/comments", headers=alice)

        assert listing.status_code == 200
        body = listing.json()
        assert [c["id"] for c in body] == [first["id"], second["id"]]
        assert body[0]["replies"][0]["id"] == reply["id"]
        assert body[0]["replies"][0]["replying_to"] == "alice"

    def test_reply_to_reply_rejected(self, client):
        alice = register(client, "alice")
        parent = client.post("/comments", json={"content": "p"}, headers=alice).json()
        reply = client.post(
            "/comments", json={"content": "r", "parent_id": parent["id"]}, headers=alice
        ).json()

        response = client.post(
            "/comments", json={"content": "n", "parent_id": reply["id"]}, headers=alice
        )

        assert response.status_code == 404

    def test_content_is_escaped(self, client):
        alice = register(client, "alice")

        response = client.post(
            "/comments", json={"content": "<script>x</script><b>ok</b>"}, headers=alice
        )

        assert response.json()["content"] == "&lt;script&gt;x&lt;/script&gt;<b>ok</b>"


class TestRequestErrors:
    def test_missing_token(self, client):
        response = client.post("/comments", json={"content": "hi"})

        assert response.status_code == 401
        assert response.json() == {"error": "Authentication required"}

    @pytest.mark.parametrize(
        "method,path,body",
        [
            ("POST", "/comments", {"content": ""}),
            ("POST", "/comments", {}),
            ("PUT", "/comments/1", {"content": "x" * 1001}),
            ("POST", "/comments/1/vote", {"vote": "sideways"}),
        ],
    )
    def test_auth_checked_before_body(self, client, method, path, body):
        response = client.request(method, path, json=body)

        assert response.status_code == 401
        assert response.json() == {"error": "Authentication required"}

    def test_invalid_token(self, client):
        response = client.get(
            "/comments", headers={"Authorization": "Bearer garbage"}
        )

        assert response.status_code == 401

    @pytest.mark.parametrize(
        "body",
        [{}, {"content": ""}, {"content": "x" * 1001}, {"content": "ok", "parent_id": 0}],
    )
    def test_invalid_comment_body(self, client, body):
        alice = register(client, "alice")

        response = client.post("/comments", json=body, headers=alice)

        assert response.status_code == 400
        assert "error" in response.json()

    def test_invalid_vote_direction(self, client):
        alice = register(client, "alice")
        comment_id = client.post(
            "/comments", json={"content": "hi"}, headers=alice
        ).json()["id"]

        response = client.post(
            f"/comments/{comment_id}/vote", json={"vote": "sideways"}, headers=alice
        )

        assert response.status_code == 400

    def test_vote_on_missing_comment(self, client):
        alice = register(client, "alice")

        response = client.post("/comments/999/vote", json={"vote": "up"}, headers=alice)

        assert response.status_code == 404

    def test_unknown_route_uses_error_body(self, client):
        response = client.get("/nowhere")

        assert response.status_code == 404
        assert "error" in response.json()


class TestAuthRoutes:
    def test_duplicate_registration(self, client):
        register(client, "alice")

        response = client.post(
            "/register",
            json={"username": "alice", "email": "x@example.com", "password": "pw"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Username or email already registered"}

    def test_login(self, client):
        register(client, "alice")

        ok = client.post(
            "/login", json={"username": "alice", "password": "alice-password"}
        )
        bad = client.post("/login", json={"username": "alice", "password": "nope"})

        assert ok.status_code == 200
        assert ok.json()["user"]["username"] == "alice"
        assert bad.status_code == 401
        assert bad.json() == {"error": "Invalid credentials"}


class TestCacheOutage:
    def test_board_keeps_working_without_cache(self, client, monkeypatch):
        def unavailable(self):
            raise CacheFailureError("In-memory cache marked unavailable")

        monkeypatch.setattr(InMemoryCacheBackend, "_check", unavailable)
        monkeypatch.setattr(InMemoryCacheBackend, "ping", _ping_down)

        alice = register(client, "alice")
        created = client.post("/comments", json={"content": "hello"}, headers=alice)
        listing = client.get("/comments", headers=alice)
        health = client.get("/health")

        assert created.status_code == 201
        assert [c["content"] for c in listing.json()] == ["hello"]
        assert health.status_code == 200
        assert health.json()["cache_available"] is False


async def _ping_down(self) -> bool:
    return False


class TestRateLimit:
    def test_mutations_over_budget_are_rejected(self, monkeypatch):
        monkeypatch.setenv("RATE_LIMIT__MAX_REQUESTS", "2")
        monkeypatch.setenv("RATE_LIMIT__WINDOW_SECONDS", "120")

        with TestClient(create_app(build_test_container())) as client:
            alice = register(client, "alice")
            for _ in range(2):
                assert client.post(
                    "/comments", json={"content": "hi"}, headers=alice
                ).status_code == 201

            limited = client.post("/comments", json={"content": "hi"}, headers=alice)
            reads = client.get("/comments", headers=alice)

        assert limited.status_code == 429
        assert limited.headers["Retry-After"] == "120"
        assert reads.status_code == 200


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["message"] == "API is running"
        assert response.json()["cache_available"] is True
