# tests/test_session.py

"""
Tests for the session / identity context.
"""

import pytest

from core.errors import AuthFailure, StoreReadError
from core.locale import Language
from core.roles import Role
from core.session import SessionContext


@pytest.fixture
def auth_client(auth_service):
    return auth_service.client()


@pytest.fixture
def session(auth_client, repositories):
    context = SessionContext(auth_client, repositories.users)
    yield context
    context.close()


def test_holds_exactly_one_subscription(auth_client, session):
    assert session.subscribed
    assert len(auth_client.auth.subscribers) == 1


def test_close_releases_subscription_and_is_idempotent(auth_client, session):
    session.close()
    session.close()

    assert not session.subscribed
    assert auth_client.auth.subscribers == []


def test_context_manager_closes(auth_client, repositories):
    with SessionContext(auth_client, repositories.users) as context:
        assert context.subscribed
    assert auth_client.auth.subscribers == []


def test_sign_in_loads_profile_through_state_change(session):
    principal = session.sign_in("manager@example.com", "secret123")

    assert principal.id == "u-manager"
    assert session.access_token == "token-u-manager"
    assert session.profile["role"] == "manager"
    assert session.is_manager()
    assert not session.is_admin()


def test_sign_in_failure_keeps_raw_message(session):
    with pytest.raises(AuthFailure) as exc:
        session.sign_in("manager@example.com", "wrong")

    assert "Invalid login credentials" in str(exc.value)
    assert session.principal is None


def test_predicates_false_before_profile_loads(session):
    assert not session.authenticated
    for check in (session.is_admin, session.is_manager, session.is_owner, session.is_tenant, session.is_provider):
        assert check() is False


def test_principal_without_profile(session):
    session.restore("token-u-ghost")

    assert session.authenticated
    assert session.profile is None
    assert session.role is None
    assert not session.has_role(Role.tenant)


def test_has_role_is_exact_match(session):
    session.restore("token-u-admin")

    assert session.is_admin()
    assert session.has_role("admin")
    assert not session.has_role(Role.manager)


def test_restore_rejects_unknown_token(session):
    with pytest.raises(AuthFailure):
        session.restore("token-nobody")
    assert session.principal is None


def test_profile_fetch_failure_surfaces(session, gateway):
    gateway.fail("get_one", StoreReadError("users table unavailable"))

    with pytest.raises(StoreReadError):
        session.sign_in("tenant@example.com", "secret123")


def test_sign_up_writes_profile_with_defaults(session, gateway, auth_service):
    principal = session.sign_up("new@example.com", "secret123", {"name": "New Tenant", "phone": "555", "role": "tenant"})

    profile = gateway.collections["users"][principal.id]
    assert profile["email"] == "new@example.com"
    assert profile["name"] == "New Tenant"
    assert profile["role"] == "tenant"
    assert profile["linkedProperties"] == []
    assert profile["favorites"] == []
    assert profile["language"] == "en"
    assert "createdAt" in profile
    assert "new@example.com" in auth_service.accounts


def test_sign_up_failure(session, gateway):
    before = len(gateway.docs("users"))

    with pytest.raises(AuthFailure) as exc:
        session.sign_up("tenant@example.com", "secret123", {"name": "Dup"})

    assert "already registered" in str(exc.value)
    assert len(gateway.docs("users")) == before


def test_sign_out_clears_and_revokes(session, auth_client):
    session.sign_in("owner@example.com", "secret123")
    session.sign_out()

    auth_client.auth.admin.sign_out.assert_called_once_with("token-u-owner")
    assert session.principal is None
    assert session.profile is None
    assert not session.is_owner()


def test_reset_password(session, auth_service):
    session.reset_password("tenant@example.com")
    assert auth_service.reset_emails == ["tenant@example.com"]


def test_without_auth_client_operations_fail(repositories):
    session = SessionContext(None, repositories.users)

    assert not session.subscribed
    with pytest.raises(AuthFailure):
        session.sign_in("a@example.com", "secret123")


def test_language_follows_profile_then_toggle(session, gateway):
    gateway.collections["users"]["u-tenant"]["language"] = "ar"
    session.restore("token-u-tenant")

    assert session.language is Language.ar
    assert session.toggle_language() == {"language": "en", "dir": "ltr"}
    assert session.toggle_language() == {"language": "ar", "dir": "rtl"}
