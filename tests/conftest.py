"""Shared test fixtures."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from expense_client.api.auth import AuthAPI
from expense_client.api.client import ApiClient
from expense_client.api.expenses import ExpenseAPI
from expense_client.api.profile import ProfileAPI
from expense_client.config import Settings
from expense_client.database import init_db
from expense_client.services.session import SessionStore
from expense_client.services.storage import LocalStorage
from expense_client.services.toast_service import ToastQueue

from fake_backend import SEED_USER, create_backend


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


@pytest.fixture(scope="function")
def engine():
    """In-memory SQLite engine shared by every connection of one test."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture(scope="function")
def db_session(engine):
    """Create a fresh database session for each test."""
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def storage(db_session):
    return LocalStorage(db_session)


@pytest.fixture
def settings():
    return Settings(api_url="http://testserver/api", toast_duration_seconds=5.0)


@pytest.fixture
def backend():
    """Fresh fake API with one seeded user."""
    return create_backend()


@pytest.fixture
def backend_state(backend):
    return backend.state.backend


@pytest.fixture
def http(backend):
    """httpx client routed into the fake API."""
    client = TestClient(backend, base_url="http://testserver/api")
    yield client
    client.close()


@pytest.fixture
def api_client(storage, settings, http):
    return ApiClient(storage, settings, http=http)


@pytest.fixture
def auth_api(api_client):
    return AuthAPI(api_client)


@pytest.fixture
def expense_api(api_client):
    return ExpenseAPI(api_client)


@pytest.fixture
def profile_api(api_client):
    return ProfileAPI(api_client)


@pytest.fixture
def session(storage, auth_api):
    return SessionStore(storage, auth_api)


@pytest.fixture
def logged_in(session):
    """Session signed in as the seeded user."""
    session.restore()
    result = session.login(SEED_USER["email"], SEED_USER["password"])
    assert result.success
    return session


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def toasts(clock):
    return ToastQueue(duration=5.0, clock=clock)


@pytest.fixture
def sample_expenses(backend_state):
    """January 2024 expenses plus one in February for the seeded user."""
    user_id = SEED_USER["_id"]
    return [
        backend_state.add_expense(user_id, 100, "food", "2024-01-05", "Groceries"),
        backend_state.add_expense(user_id, 50, "food", "2024-01-10", "Dinner out"),
        backend_state.add_expense(user_id, 25, "travel", "2024-01-01", "Train ticket"),
        backend_state.add_expense(user_id, 80, "utilities", "2024-02-03", "Electricity bill"),
    ]
