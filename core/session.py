# core/session.py

"""
Session / identity context.

Holds the current principal (Supabase Auth identity) and its profile
document, and answers role questions about them. The context is built
explicitly and handed to whoever needs it; there is no module-level
"current user".

On construction the context subscribes once to the auth client's
state-change stream. Every change runs through one place: a principal
appearing loads its profile (``users/<principal id>``), signing out clears
both. ``close()`` releases the subscription.

Redirects are not this module's business. Failures are raised to the
caller, never retried.
"""

from typing import Optional

from core.config import settings
from core.errors import AuthFailure, GatewayError, extract_supabase_error
from core.locale import Language, describe, parse_language, toggle
from core.logging_config import get_logger
from core.roles import Role, parse_role
from models.user import Principal
from repositories.users import UserRepository

log = get_logger("session")


class SessionContext:
    def __init__(self, auth_client, users: UserRepository):
        self._client = auth_client
        self._users = users

        self.principal: Optional[Principal] = None
        self.profile: Optional[dict] = None
        self.access_token: Optional[str] = None

        self._language_override: Optional[Language] = None
        self._subscription = None

        if auth_client is not None:
            self._subscription = auth_client.auth.on_auth_state_change(self._on_auth_change)

    # ---------------------------------------------------------
    # Lifecycle
    # ---------------------------------------------------------
    @property
    def subscribed(self) -> bool:
        return self._subscription is not None

    def close(self):
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    @property
    def _auth(self):
        if self._client is None:
            raise AuthFailure("Supabase auth client not configured")
        return self._client.auth

    # ---------------------------------------------------------
    # State changes
    # ---------------------------------------------------------
    def _on_auth_change(self, event, session) -> None:
        log.info(f"Auth state change: {event}")

        user = getattr(session, "user", None) if session is not None else None
        if user is not None:
            self._apply_principal(Principal.from_auth_user(user), session.access_token)
        elif event == "SIGNED_OUT":
            self._clear()

    def _apply_principal(self, principal: Principal, access_token: Optional[str]) -> None:
        self.principal = principal
        self.access_token = access_token
        self.profile = None
        # A missing profile document leaves the profile unset; a failed
        # fetch propagates to whoever triggered the change.
        self.profile = self._users.find(principal.id)

    def _clear(self) -> None:
        self.principal = None
        self.profile = None
        self.access_token = None

    # ---------------------------------------------------------
    # Operations
    # ---------------------------------------------------------
    def sign_in(self, email: str, password: str) -> Principal:
        try:
            response = self._auth.sign_in_with_password({"email": email, "password": password})
        except GatewayError:
            raise
        except Exception as e:
            raise AuthFailure(extract_supabase_error(e), cause=e) from e

        if not response or not response.session or not response.user:
            raise AuthFailure("Invalid login credentials")

        # The SIGNED_IN event normally got here first; make sure of it.
        if self.principal is None or self.principal.id != str(response.user.id):
            self._apply_principal(Principal.from_auth_user(response.user), response.session.access_token)

        return self.principal

    def sign_up(self, email: str, password: str, profile_fields: dict) -> Principal:
        try:
            response = self._auth.sign_up({"email": email, "password": password})
        except GatewayError:
            raise
        except Exception as e:
            raise AuthFailure(extract_supabase_error(e), cause=e) from e

        if not response or not response.user:
            raise AuthFailure("Sign-up did not return a user")

        principal = Principal.from_auth_user(response.user)
        profile = self._users.create_profile(principal.id, email, profile_fields)

        # With email confirmation off the SIGNED_IN event fired before the
        # profile existed.
        if self.principal is not None and self.principal.id == principal.id:
            self.profile = profile

        return principal

    def restore(self, access_token: str) -> Principal:
        """Rebuild the context from a bearer token issued by ``sign_in``."""
        try:
            response = self._auth.get_user(access_token)
        except GatewayError:
            raise
        except Exception as e:
            raise AuthFailure(extract_supabase_error(e), cause=e) from e

        if not response or not response.user:
            raise AuthFailure("Invalid or expired authentication token")

        self._apply_principal(Principal.from_auth_user(response.user), access_token)
        return self.principal

    def sign_out(self) -> None:
        token = self.access_token
        try:
            if token:
                # Revoke server-side; the local client may hold no session.
                self._auth.admin.sign_out(token)
            self._auth.sign_out()
        except Exception as e:
            raise AuthFailure(extract_supabase_error(e), cause=e) from e
        finally:
            self._clear()

    def reset_password(self, email: str) -> None:
        try:
            self._auth.reset_password_for_email(email)
        except Exception as e:
            raise AuthFailure(extract_supabase_error(e), cause=e) from e

    # ---------------------------------------------------------
    # Role predicates (all False until a profile is loaded)
    # ---------------------------------------------------------
    @property
    def authenticated(self) -> bool:
        return self.principal is not None

    @property
    def role(self) -> Optional[Role]:
        if not self.profile:
            return None
        return parse_role(self.profile.get("role"))

    def has_role(self, role) -> bool:
        current = self.role
        return current is not None and current is parse_role(role)

    def is_admin(self) -> bool:
        return self.has_role(Role.admin)

    def is_manager(self) -> bool:
        return self.has_role(Role.manager)

    def is_owner(self) -> bool:
        return self.has_role(Role.owner)

    def is_tenant(self) -> bool:
        return self.has_role(Role.tenant)

    def is_provider(self) -> bool:
        return self.has_role(Role.provider)

    # ---------------------------------------------------------
    # Locale (in-memory only)
    # ---------------------------------------------------------
    @property
    def language(self) -> Language:
        if self._language_override is not None:
            return self._language_override
        default = parse_language(settings.DEFAULT_LANGUAGE)
        if self.profile:
            return parse_language(self.profile.get("language"), default)
        return default

    def set_language(self, language) -> dict:
        self._language_override = parse_language(language, self.language)
        return describe(self._language_override)

    def toggle_language(self) -> dict:
        self._language_override = toggle(self.language)
        return describe(self._language_override)
