# ============================================
# ROLES + ROLE-DRIVEN NAVIGATION
# ============================================
from typing import Dict, List, Optional

from models.enums import Role


def parse_role(value) -> Optional[Role]:
    """Role from a stored profile value; unknown or missing → None."""
    if isinstance(value, Role):
        return value
    try:
        return Role(value)
    except ValueError:
        return None


# =====================================================
# NAVIGATION: one entry per role, no fallthrough
# =====================================================
PUBLIC_LINKS = [
    {"path": "/", "label": "nav.home"},
]

ROLE_NAVIGATION: Dict[Role, List[dict]] = {
    Role.admin: [
        {"path": "/dashboard", "label": "nav.dashboard"},
        {"path": "/admin", "label": "nav.admin"},
    ],
    Role.manager: [
        {"path": "/dashboard", "label": "nav.dashboard"},
        {"path": "/admin", "label": "nav.admin"},
    ],
    Role.owner: [
        {"path": "/dashboard", "label": "nav.dashboard"},
    ],
    Role.tenant: [
        {"path": "/dashboard", "label": "nav.dashboard"},
    ],
    Role.provider: [
        {"path": "/dashboard", "label": "nav.dashboard"},
    ],
}

_unmapped = set(Role) - set(ROLE_NAVIGATION)
if _unmapped:
    raise RuntimeError(f"Roles without navigation: {sorted(r.value for r in _unmapped)}")


def navigation_links(role: Optional[Role], authenticated: bool = True) -> List[dict]:
    """Links shown in the header for a principal with ``role``."""
    links = list(PUBLIC_LINKS)
    if not authenticated:
        links.append({"path": "/login", "label": "common.login"})
        links.append({"path": "/register", "label": "common.register"})
        return links

    if role is None:
        # Profile not loaded yet: the dashboard is the only safe target.
        links.append({"path": "/dashboard", "label": "nav.dashboard"})
        return links

    links.extend(ROLE_NAVIGATION[role])
    return links
