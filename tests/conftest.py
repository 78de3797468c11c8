# tests/conftest.py

"""
Pytest configuration and shared fixtures for testing.

The remote services are replaced by in-memory doubles: ``FakeGateway`` for
the document/blob store and ``FakeAuthService`` for Supabase Auth. Route
tests wire them in through FastAPI dependency overrides.
"""

import copy
from collections import defaultdict
from types import SimpleNamespace
from typing import Generator
from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from core.errors import GatewayError
from dependencies.auth import get_gateway, get_session_auth_client
from main import create_app
from repositories import Repositories

ROLES = ("admin", "manager", "owner", "tenant", "provider")
PASSWORD = "secret123"


# ============================================================
# Document + blob store double
# ============================================================
class FakeGateway:
    def __init__(self):
        self.collections = defaultdict(dict)
        self.uploads = []
        self.failures = {}
        self.calls = []

    def seed(self, collection, *documents):
        for document in documents:
            self.collections[str(collection)][document["id"]] = copy.deepcopy(document)

    def docs(self, collection):
        return list(self.collections[str(collection)].values())

    def fail(self, operation: str, error: GatewayError):
        self.failures[operation] = error

    def _call(self, operation, collection=None):
        self.calls.append((operation, str(collection) if collection is not None else None))
        error = self.failures.get(operation)
        if error is not None:
            raise error

    def get_all(self, collection):
        self._call("get_all", collection)
        return [copy.deepcopy(d) for d in self.collections[str(collection)].values()]

    def get_one(self, collection, doc_id):
        self._call("get_one", collection)
        document = self.collections[str(collection)].get(doc_id)
        return copy.deepcopy(document) if document is not None else None

    def set_or_merge(self, collection, doc_id, doc, merge=False):
        self._call("set_or_merge", collection)
        store = self.collections[str(collection)]
        if merge:
            if doc_id not in store:
                return None
            store[doc_id].update(copy.deepcopy(doc))
        else:
            store[doc_id] = {**copy.deepcopy(doc), "id": doc_id}
        return copy.deepcopy(store[doc_id])

    def delete_one(self, collection, doc_id):
        self._call("delete_one", collection)
        return self.collections[str(collection)].pop(doc_id, None) is not None

    def upload_blob(self, path, data, content_type=None):
        self._call("upload_blob")
        self.uploads.append((path, data, content_type))
        return f"https://blobs.test/{path}"

    def count(self, operation, collection=None):
        return sum(
            1 for op, coll in self.calls
            if op == operation and (collection is None or coll == str(collection))
        )


# ============================================================
# Supabase Auth double
# ============================================================
class FakeSubscription:
    def __init__(self, auth, callback):
        self._auth = auth
        self.callback = callback

    def unsubscribe(self):
        if self in self._auth.subscribers:
            self._auth.subscribers.remove(self)


class FakeAuth:
    """One client's ``.auth``; shares accounts with the other clients."""

    def __init__(self, service):
        self.service = service
        self.subscribers = []
        self.admin = Mock()

    def on_auth_state_change(self, callback):
        subscription = FakeSubscription(self, callback)
        self.subscribers.append(subscription)
        return subscription

    def _notify(self, event, session):
        for subscription in list(self.subscribers):
            subscription.callback(event, session)

    def sign_in_with_password(self, credentials):
        account = self.service.accounts.get(credentials["email"])
        if account is None or account["password"] != credentials["password"]:
            raise Exception("Invalid login credentials")

        user = account["user"]
        session = SimpleNamespace(access_token=self.service.token_for(user), user=user)
        self._notify("SIGNED_IN", session)
        return SimpleNamespace(user=user, session=session)

    def sign_up(self, credentials):
        if credentials["email"] in self.service.accounts:
            raise Exception("User already registered")
        user = self.service.add_account(f"u-{len(self.service.accounts) + 1}", credentials["email"], credentials["password"])
        return SimpleNamespace(user=user, session=None)

    def sign_out(self):
        self._notify("SIGNED_OUT", None)

    def reset_password_for_email(self, email):
        self.service.reset_emails.append(email)

    def get_user(self, jwt):
        user = self.service.tokens.get(jwt)
        if user is None:
            raise Exception("invalid JWT: unable to parse or verify signature")
        return SimpleNamespace(user=user)


class FakeAuthService:
    def __init__(self):
        self.accounts = {}
        self.tokens = {}
        self.reset_emails = []
        self.clients = []

    def add_account(self, user_id, email, password=PASSWORD):
        user = SimpleNamespace(id=user_id, email=email)
        self.accounts[email] = {"password": password, "user": user}
        self.token_for(user)
        return user

    def token_for(self, user):
        token = f"token-{user.id}"
        self.tokens[token] = user
        return token

    def client(self):
        client = SimpleNamespace(auth=FakeAuth(self))
        self.clients.append(client)
        return client

    def active_subscriptions(self):
        return sum(len(c.auth.subscribers) for c in self.clients)


# ============================================================
# Fixtures
# ============================================================
@pytest.fixture
def gateway():
    gateway = FakeGateway()
    for role in ROLES:
        gateway.seed("users", {
            "id": f"u-{role}",
            "email": f"{role}@example.com",
            "name": role.title(),
            "role": role,
            "linkedProperties": [],
            "favorites": [],
            "language": "en",
        })
    return gateway


@pytest.fixture
def auth_service():
    service = FakeAuthService()
    for role in ROLES:
        service.add_account(f"u-{role}", f"{role}@example.com")
    # Signed-up principal whose profile document was never written.
    service.add_account("u-ghost", "ghost@example.com")
    return service


@pytest.fixture
def repositories(gateway):
    return Repositories(gateway)


@pytest.fixture(scope="function")
def app(gateway, auth_service):
    """Create a test FastAPI application instance."""
    app = create_app()
    app.dependency_overrides[get_gateway] = lambda: gateway
    app.dependency_overrides[get_session_auth_client] = auth_service.client
    return app


@pytest.fixture(scope="function")
def client(app) -> Generator[TestClient, None, None]:
    """Create a test client for the FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers():
    def headers(role: str) -> dict:
        return {"Authorization": f"Bearer token-u-{role}"}
    return headers


@pytest.fixture
def mock_supabase_client():
    """Create a mock Supabase client."""
    mock_client = Mock()
    mock_table = Mock()
    mock_client.table.return_value = mock_table
    return mock_client


@pytest.fixture(autouse=True)
def reset_state():
    """Reset cache and rate limits before each test."""
    from core.cache import cache_clear
    from core.rate_limiter import get_limiter

    cache_clear()
    get_limiter().reset()
    yield
    cache_clear()
    get_limiter().reset()
