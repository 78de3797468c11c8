from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from core.access import redirect_target
from core.errors import AuthFailure
from core.gateway import RemoteDataGateway
from core.logging_config import logger
from core.roles import Role
from core.session import SessionContext
from core.supabase_client import get_auth_client
from repositories import Repositories


bearer_scheme = HTTPBearer(auto_error=False)


class AccessRedirect(Exception):
    """Raised by the access gate; rendered as a 303 to ``location``."""

    def __init__(self, location: str):
        super().__init__(location)
        self.location = location


# ============================================================
# DATA ACCESS
# ============================================================
_gateway: Optional[RemoteDataGateway] = None


def get_gateway() -> RemoteDataGateway:
    """One gateway per process; its Supabase client is created on first use."""
    global _gateway
    if _gateway is None:
        _gateway = RemoteDataGateway()
    return _gateway


def get_repositories(gateway: RemoteDataGateway = Depends(get_gateway)) -> Repositories:
    return Repositories(gateway)


# ============================================================
# SESSION CONTEXT (one per request)
# ============================================================
def get_session_auth_client():
    """A fresh auth client, so state-change events stay with one session."""
    return get_auth_client()


def get_session(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    repositories: Repositories = Depends(get_repositories),
    auth_client=Depends(get_session_auth_client),
):
    """
    Build the session context for this request and release its auth
    subscription when the request is done.

    A bearer token that no longer resolves leaves the context
    unauthenticated; the access gate then sends the caller to /login.
    """
    session = SessionContext(auth_client, repositories.users)
    try:
        if credentials:
            try:
                session.restore(credentials.credentials)
            except AuthFailure as e:
                logger.warning(f"Bearer token rejected: {e}")
        yield session
    finally:
        session.close()


# ============================================================
# ACCESS GATE
# ============================================================
def require_role(role: Optional[Role] = None):
    """
    Route dependency applying the access gate. ``role=None`` admits any
    authenticated principal; admin is admitted everywhere.
    """

    def gate(session: SessionContext = Depends(get_session)) -> SessionContext:
        target = redirect_target(session.principal, session.profile, role)
        if target:
            who = session.principal.id if session.principal else "anonymous"
            logger.info(f"Access denied to {who} (requires {role or 'login'}); redirecting to {target}")
            raise AccessRedirect(target)
        return session

    return gate


require_authenticated = require_role(None)
require_manager = require_role(Role.manager)
