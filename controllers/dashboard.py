# controllers/dashboard.py

import asyncio

from controllers.base import CancellationToken, log
from core.errors import GatewayError
from core.locale import describe
from core.roles import navigation_links
from core.session import SessionContext
from repositories.units import UnitRepository


class DashboardController:
    """Overview for the signed-in principal, whatever their role."""

    def __init__(self, session: SessionContext, units: UnitRepository):
        self.session = session
        self.units = units
        self.token = CancellationToken()

    def close(self):
        self.token.cancel()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        self.close()

    async def load(self) -> dict:
        session = self.session
        profile = session.profile or {}
        principal_id = session.principal.id if session.principal else None

        self.token.raise_if_cancelled()
        try:
            units = await asyncio.to_thread(self.units.list_all)
        except GatewayError as e:
            log.error(f"Error fetching dashboard units: {e}")
            raise
        self.token.raise_if_cancelled()

        my_units = [
            u for u in units
            if principal_id and principal_id in (u.get("ownerId"), u.get("tenantId"))
        ]

        return {
            "name": profile.get("name"),
            "email": profile.get("email") or (session.principal.email if session.principal else None),
            "role": session.role.value if session.role else None,
            "locale": describe(session.language),
            "navigation": navigation_links(session.role, authenticated=session.authenticated),
            "counts": {
                "properties": len(profile.get("linkedProperties") or []),
                "units": len(my_units),
            },
        }
