# core/access.py

"""
Route-level access gate.

This is the whole authorization model: a principal either reaches a view
or it doesn't, decided by role alone. There are no per-resource ownership
checks and no policy composition.
"""

from typing import Any, Mapping, Optional

from core.roles import Role, parse_role


def _profile_role(profile: Any) -> Optional[Role]:
    if profile is None:
        return None
    if isinstance(profile, Mapping):
        return parse_role(profile.get("role"))
    return parse_role(getattr(profile, "role", None))


def allow(principal: Any, profile: Any, required_role: Optional[Role] = None) -> bool:
    """
    - no principal            → deny
    - no required role        → any authenticated principal
    - otherwise               → profile role equals required role, or is admin
    """
    if principal is None:
        return False

    if required_role is None:
        return True

    role = _profile_role(profile)
    if role is None:
        return False

    return role is Role.admin or role is Role(required_role)


def redirect_target(principal: Any, profile: Any, required_role: Optional[Role] = None) -> Optional[str]:
    """
    Where a denied request goes: unauthenticated → /login,
    role mismatch → /dashboard. None when access is allowed.
    """
    if allow(principal, profile, required_role):
        return None
    if principal is None:
        return "/login"
    return "/dashboard"
