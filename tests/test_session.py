"""Tests for web sessions"""
from datetime import datetime, timedelta, timezone

import pytest

from shopcart.auth import SessionStore
from shopcart.errors import ERROR_INVALID_SESSION, ERROR_LOGIN_TO_VIEW, MESSAGE_LOGGED_OUT


class TestSessionStore:
    """Tests for SessionStore."""

    def test_create_and_verify(self):
        store = SessionStore()
        token = store.create_web_session("alice")

        session = store.verify_web_session_token(token)
        assert session["username"] == "alice"
        assert store.is_valid(token)

    @pytest.mark.parametrize("token", [None, "", "unknown"])
    def test_unknown_token(self, token):
        assert SessionStore().verify_web_session_token(token) is None

    def test_tokens_are_unique(self):
        store = SessionStore()
        assert store.create_web_session("alice") != store.create_web_session("alice")

    def test_expired_session_is_dropped(self):
        store = SessionStore()
        token = store.create_web_session("alice")
        store._web_sessions[token]["expires_at"] = (
            datetime.now(timezone.utc) - timedelta(seconds=1)
        ).isoformat()

        assert store.verify_web_session_token(token) is None
        assert token not in store._web_sessions

    def test_ttl_from_constructor(self):
        store = SessionStore(ttl_hours=1)
        token = store.create_web_session("alice")

        expires_at = datetime.fromisoformat(store.verify_web_session_token(token)["expires_at"])
        assert expires_at - datetime.now(timezone.utc) <= timedelta(hours=1)

    def test_purge_expired(self):
        store = SessionStore()
        stale = store.create_web_session("alice")
        fresh = store.create_web_session("bob")
        store._web_sessions[stale]["expires_at"] = (
            datetime.now(timezone.utc) - timedelta(seconds=1)
        ).isoformat()

        assert store.purge_expired() == 1
        assert list(store._web_sessions) == [fresh]

    def test_revoke(self):
        store = SessionStore()
        token = store.create_web_session("alice")

        assert store.revoke_web_session(token) is True
        assert store.revoke_web_session(token) is False
        assert not store.is_valid(token)


class TestSessionEndpoints:
    """POST/DELETE /api/session"""

    def test_login_returns_token_and_cookie(self, client):
        response = client.post("/api/session", json={"username": "alice"})

        assert response.status_code == 200
        body = response.json()
        assert body["username"] == "alice"
        assert body["token"]
        assert response.cookies.get("session") == body["token"]

    def test_cookie_authenticates_cart_requests(self, client):
        client.post("/api/session", json={"username": "alice"})

        response = client.post("/api/cart", json={"productId": 1, "quantity": 1})

        assert response.status_code == 200

    def test_login_requires_username(self, client):
        response = client.post("/api/session", json={"username": ""})

        assert response.status_code == 400

    def test_logout_resets_cart(self, client, sessions, cart_manager):
        token = client.post("/api/session", json={"username": "alice"}).json()["token"]
        headers = {"Authorization": f"Bearer {token}"}
        client.post("/api/cart", json={"productId": 1, "quantity": 1}, headers=headers)

        response = client.delete("/api/session", headers=headers)

        assert response.status_code == 200
        assert response.json() == {"message": MESSAGE_LOGGED_OUT}
        assert not sessions.is_valid(token)
        assert len(cart_manager.storage) == 0

    def test_cart_after_logout(self, client, auth_headers):
        client.delete("/api/session", headers=auth_headers)

        response = client.get("/api/cart", headers=auth_headers)

        assert response.status_code == 401
        assert response.json() == {"message": ERROR_LOGIN_TO_VIEW}

    def test_login_sweeps_expired_carts(self, client, sessions, cart_manager, auth_headers, session_id):
        client.post("/api/cart", json={"productId": 1, "quantity": 1}, headers=auth_headers)
        sessions._web_sessions[session_id]["expires_at"] = (
            datetime.now(timezone.utc) - timedelta(seconds=1)
        ).isoformat()

        token = client.post("/api/session", json={"username": "bob"}).json()["token"]

        assert cart_manager.storage.session_ids() == []
        assert list(sessions._web_sessions) == [token]

    def test_logout_without_session(self, client):
        response = client.delete("/api/session")

        assert response.status_code == 401
        assert response.json() == {"message": ERROR_INVALID_SESSION}
