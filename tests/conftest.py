"""
Pytest Configuration and Shared Fixtures

Provides common fixtures for testing without external dependencies
(MongoDB, Google sign-in).
"""
import os
from datetime import datetime, timezone

import pytest

# Set test environment variables before importing journal modules
os.environ["MONGO_URI"] = "mongodb://localhost:27017"
os.environ["DB_NAME"] = "journal_test"
os.environ["MONGO_ENSURE_INDEXES"] = "false"
os.environ["TIMEZONE"] = "UTC"
os.environ["GOOGLE_CLIENT_ID"] = "test-client-id.apps.googleusercontent.com"
os.environ["SESSION_SECRET_KEY"] = "test-secret-key-minimum-32-characters-for-testing"
os.environ["SESSION_COOKIE_NAME"] = "journal_session"
os.environ["COOKIE_SECURE"] = "false"
os.environ["CORS_ALLOWED_ORIGINS"] = "http://localhost:3000"
os.environ["LOG_LEVEL"] = "WARNING"

from journal.core.config import reset_settings  # noqa: E402

reset_settings()

from journal.application.services.auth_service import AuthService  # noqa: E402
from journal.application.services.entry_service import EntryService  # noqa: E402
from journal.domain.models.auth import AuthSession, Principal  # noqa: E402
from journal.infrastructure.auth.session_tokens import SessionTokenCodec  # noqa: E402
from journal.infrastructure.db.mongo_entry_repository import MongoEntryRepository  # noqa: E402
from tests.mocks import FakeEntryCollection, FakeIdentityProvider, StepClock  # noqa: E402

TEST_SECRET = os.environ["SESSION_SECRET_KEY"]


# ==================== Principals & Sessions ====================

@pytest.fixture
def alice() -> Principal:
    return Principal(uid="user-abc", email="alice@example.com", display_name="Alice Writer")


@pytest.fixture
def bob() -> Principal:
    return Principal(uid="user-xyz", email="bob@example.com", display_name="Bob")


@pytest.fixture
def alice_session(alice) -> AuthSession:
    return AuthSession.authenticated(alice)


@pytest.fixture
def bob_session(bob) -> AuthSession:
    return AuthSession.authenticated(bob)


# ==================== Store Fixtures ====================

@pytest.fixture
def clock() -> StepClock:
    """Server clock starting 2024-01-14, one minute per write."""
    return StepClock(datetime(2024, 1, 14, 9, 0, tzinfo=timezone.utc))


@pytest.fixture
def collection(clock) -> FakeEntryCollection:
    return FakeEntryCollection(clock=clock)


@pytest.fixture
def repository(collection) -> MongoEntryRepository:
    return MongoEntryRepository(collection=collection)


@pytest.fixture
def entry_service(repository) -> EntryService:
    return EntryService(entry_repository=repository)


# ==================== Auth Fixtures ====================

@pytest.fixture
def token_codec() -> SessionTokenCodec:
    return SessionTokenCodec(secret_key=TEST_SECRET, algorithm="HS256", expire_minutes=30)


@pytest.fixture
def identity_provider(alice, bob) -> FakeIdentityProvider:
    return FakeIdentityProvider({
        "google-token-alice": alice,
        "google-token-bob": bob,
    })


@pytest.fixture
def auth_service(identity_provider, token_codec) -> AuthService:
    return AuthService(identity_provider=identity_provider, token_codec=token_codec)


# ==================== FastAPI Test Client ====================

@pytest.fixture
def test_app(entry_service, auth_service):
    """FastAPI application with the store and identity provider replaced by test doubles"""
    from journal.api.v1.dependencies import get_auth_service, get_entry_service
    from journal.main import create_application

    app = create_application()
    app.dependency_overrides[get_entry_service] = lambda: entry_service
    app.dependency_overrides[get_auth_service] = lambda: auth_service
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(test_app):
    """Provide FastAPI test client (startup handlers are not run)"""
    from fastapi.testclient import TestClient

    return TestClient(test_app)


@pytest.fixture
def alice_headers(token_codec, alice) -> dict:
    return {"Authorization": f"Bearer {token_codec.encode(alice)}"}


@pytest.fixture
def bob_headers(token_codec, bob) -> dict:
    return {"Authorization": f"Bearer {token_codec.encode(bob)}"}
