# routers/__init__.py

from .public import router as public_router
from .auth import router as auth_router
from .dashboard import router as dashboard_router
from .admin import router as admin_router
from .admin_properties import router as admin_properties_router
from .admin_units import router as admin_units_router
from .admin_tickets import router as admin_tickets_router
from .admin_payments import router as admin_payments_router
from .health import router as health_router


ALL_ROUTERS = [
    public_router,
    auth_router,
    dashboard_router,
    admin_router,
    admin_properties_router,
    admin_units_router,
    admin_tickets_router,
    admin_payments_router,
    health_router,
]

__all__ = ["ALL_ROUTERS"]
