"""Tests for the session store and route guards."""

import json

import httpx
import pytest

from expense_client.api.auth import AuthAPI
from expense_client.api.client import ApiClient
from expense_client.constants import TOKEN_KEY, USER_KEY
from expense_client.services.routing import RouteState, guard_protected, guard_public
from expense_client.services.session import SessionStore

from fake_backend import SEED_USER


class TestRestore:
    """Test startup restore of the persisted session."""

    def test_loading_until_restored(self, session):
        assert session.loading is True
        session.restore()
        assert session.loading is False

    def test_empty_storage(self, session):
        session.restore()
        assert session.user is None
        assert not session.is_authenticated

    def test_valid_persisted_session(self, session, storage):
        storage.set_many({
            TOKEN_KEY: "tok",
            USER_KEY: json.dumps({"_id": "u9", "username": "bob", "email": "bob@example.com"}),
        })
        session.restore()
        assert session.is_authenticated
        assert session.user.username == "bob"
        assert session.token == "tok"

    def test_malformed_user_cleared(self, session, storage):
        """Unparsable user JSON leaves the user signed out with storage wiped."""
        storage.set_many({TOKEN_KEY: "tok", USER_KEY: "{not json"})
        session.restore()

        assert session.user is None
        assert storage.get(TOKEN_KEY) is None
        assert storage.get(USER_KEY) is None
        assert session.loading is False

    def test_orphan_token_cleared(self, session, storage):
        storage.set(TOKEN_KEY, "tok")
        session.restore()
        assert session.user is None
        assert storage.get(TOKEN_KEY) is None


class TestLogin:
    """Test login and registration."""

    def test_login_success(self, session, storage):
        session.restore()
        result = session.login(SEED_USER["email"], SEED_USER["password"])

        assert result.success is True
        assert session.user.email == SEED_USER["email"]
        assert session.user.profile.phone == "555-0100"
        assert storage.get(TOKEN_KEY)
        assert json.loads(storage.get(USER_KEY))["_id"] == SEED_USER["_id"]

    def test_login_failure_returns_message(self, session, storage):
        session.restore()
        result = session.login(SEED_USER["email"], "wrong")

        assert result.success is False
        assert result.message == "Invalid email or password"
        assert session.user is None
        assert storage.get(TOKEN_KEY) is None

    def test_login_network_failure(self, storage, settings):
        """Transport errors become a failed result, never an exception."""
        def handler(request):
            raise httpx.ConnectError("unreachable", request=request)

        http = httpx.Client(base_url=settings.api_url, transport=httpx.MockTransport(handler))
        session = SessionStore(storage, AuthAPI(ApiClient(storage, settings, http=http)))
        session.restore()

        result = session.login("a@b.com", "pw")
        assert result.success is False
        assert result.message == "unreachable"

    def test_login_malformed_response(self, storage, settings):
        http = httpx.Client(
            base_url=settings.api_url,
            transport=httpx.MockTransport(lambda request: httpx.Response(200, json={"data": {}})),
        )
        session = SessionStore(storage, AuthAPI(ApiClient(storage, settings, http=http)))

        result = session.login("a@b.com", "pw")
        assert result.success is False
        assert result.message == "Login failed. Please check your credentials."
        assert session.user is None

    def test_token_used_for_later_requests(self, logged_in, expense_api, backend_state):
        expense_api.list()
        assert backend_state.requests[-1].authorization == f"Bearer {logged_in.token}"

    def test_register_success(self, session):
        session.restore()
        result = session.register({
            "username": "carol",
            "email": "carol@example.com",
            "password": "hunter22",
        })
        assert result.success is True
        assert session.user.username == "carol"
        assert session.token

    def test_register_validation_failure(self, session):
        result = session.register({"username": "", "email": "", "password": "x"})
        assert result.success is False
        assert result.message == (
            "Validation failed: Username is required, Email is required, "
            "Password must be at least 6 characters"
        )
        assert session.user is None

    def test_register_duplicate_email(self, session):
        result = session.register({
            "username": "alice2",
            "email": SEED_USER["email"],
            "password": "secret123",
        })
        assert result.success is False
        assert result.message == "User already exists with this email"


class TestLogout:
    """Test logout."""

    def test_logout_clears_everything(self, logged_in, storage, backend_state):
        token = logged_in.token
        logged_in.logout()

        assert logged_in.user is None
        assert storage.get(TOKEN_KEY) is None
        assert storage.get(USER_KEY) is None
        assert token not in backend_state.tokens

    def test_logout_clears_on_backend_failure(self, storage, settings, caplog):
        """A failed logout call is logged and local state still cleared."""
        def handler(request):
            raise httpx.ConnectError("down", request=request)

        http = httpx.Client(base_url=settings.api_url, transport=httpx.MockTransport(handler))
        session = SessionStore(storage, AuthAPI(ApiClient(storage, settings, http=http)))
        storage.set_many({TOKEN_KEY: "tok", USER_KEY: json.dumps({"_id": "1", "username": "a", "email": "a@b.co"})})
        session.restore()
        assert session.is_authenticated

        session.logout()

        assert session.user is None
        assert storage.get(TOKEN_KEY) is None
        assert "Logout error" in caplog.text


class TestRouteGuards:
    """Test protected and public page gating."""

    def test_loading_before_restore(self, session):
        assert guard_protected(session).state == RouteState.loading
        assert guard_public(session).state == RouteState.loading

    def test_signed_out(self, session):
        session.restore()
        assert guard_protected(session) == (RouteState.redirect, "/login")
        assert guard_public(session).state == RouteState.allow

    def test_signed_in(self, logged_in):
        assert guard_protected(logged_in).state == RouteState.allow
        assert guard_public(logged_in) == (RouteState.redirect, "/dashboard")
