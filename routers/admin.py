# routers/admin.py

from typing import Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query

from controllers.analytics import AnalyticsController
from controllers.users import UsersController
from core.logging_config import logger
from core.roles import Role, parse_role
from core.session import SessionContext
from dependencies.auth import get_repositories, require_manager
from models.system_settings import SystemSettings
from repositories import Repositories

router = APIRouter(
    prefix="/admin",
    tags=["Admin"],
)


# -----------------------------------------------------
# Admin panel tabs (order as shown)
# -----------------------------------------------------
ADMIN_TABS = [
    {"id": "users", "label": "admin.users", "path": "/admin/users"},
    {"id": "properties", "label": "admin.properties", "path": "/admin/properties"},
    {"id": "units", "label": "admin.units", "path": "/admin/units"},
    {"id": "tickets", "label": "admin.tickets", "path": "/admin/tickets"},
    {"id": "payments", "label": "admin.payments", "path": "/admin/payments"},
    {"id": "guests", "label": "admin.guestRequests", "path": "/admin/guest-requests"},
    {"id": "analytics", "label": "admin.analytics", "path": "/admin/analytics"},
    {"id": "settings", "label": "admin.settings", "path": "/admin/settings"},
]


@router.get("", summary="Admin panel")
def admin_panel(session: SessionContext = Depends(require_manager)):
    return {
        "tabs": ADMIN_TABS,
        "user": {
            "id": session.principal.id,
            "name": (session.profile or {}).get("name"),
            "role": session.role.value if session.role else None,
        },
    }


# =====================================================
# USERS (edit + delete; accounts come from /register)
# =====================================================
@router.get("/users", summary="List user profiles")
async def list_users(
    search: Optional[str] = Query(None),
    session: SessionContext = Depends(require_manager),
    repositories: Repositories = Depends(get_repositories),
):
    async with UsersController(repositories.users) as controller:
        await controller.load()
        return controller.set_search(search)


@router.get("/users/{user_id}", summary="Open a user profile for editing")
async def get_user(
    user_id: str,
    session: SessionContext = Depends(require_manager),
    repositories: Repositories = Depends(get_repositories),
):
    async with UsersController(repositories.users) as controller:
        await controller.load()
        return {"item": controller.detail(user_id), "form": controller.open_edit(user_id).values}


@router.patch("/users/{user_id}", summary="Update name, role or phone")
async def update_user(
    user_id: str,
    payload: dict = Body(...),
    session: SessionContext = Depends(require_manager),
    repositories: Repositories = Depends(get_repositories),
):
    async with UsersController(repositories.users) as controller:
        await controller.load()
        draft = controller.open_edit(user_id)
        draft.values.update({k: v for k, v in payload.items() if k in controller.form_fields})

        # Only an admin may grant the admin role or change an admin's role.
        if not session.is_admin() and "role" in draft.changed_fields():
            if Role.admin in (parse_role(draft.original.get("role")), parse_role(draft.values.get("role"))):
                logger.warning(f"User {session.principal.id} tried to change admin role on {user_id}")
                raise HTTPException(status_code=403, detail="Only an admin can grant or revoke the admin role")

        stored = await controller.submit(draft)

        logger.info(f"User {session.principal.id} updated profile {user_id}")
        return {"item": stored, "items": controller.documents}


@router.delete("/users/{user_id}", summary="Delete a user profile")
async def delete_user(
    user_id: str,
    confirm: bool = Query(False, description="Must be true; deletion is irreversible"),
    session: SessionContext = Depends(require_manager),
    repositories: Repositories = Depends(get_repositories),
):
    async with UsersController(repositories.users) as controller:
        await controller.delete(user_id, confirmed=confirm)

        logger.info(f"User {session.principal.id} deleted profile {user_id}")
        return {"success": True, "items": controller.documents}


# =====================================================
# ANALYTICS
# =====================================================
@router.get("/analytics", summary="Totals and revenue")
async def analytics(
    session: SessionContext = Depends(require_manager),
    repositories: Repositories = Depends(get_repositories),
):
    async with AnalyticsController(repositories) as controller:
        return await controller.load()


# =====================================================
# SYSTEM SETTINGS
# =====================================================
@router.get("/settings", summary="System settings")
def get_settings(
    session: SessionContext = Depends(require_manager),
    repositories: Repositories = Depends(get_repositories),
):
    return repositories.system_settings.get()


@router.put("/settings", summary="Save system settings")
def save_settings(
    payload: SystemSettings,
    session: SessionContext = Depends(require_manager),
    repositories: Repositories = Depends(get_repositories),
):
    stored = repositories.system_settings.save(payload)
    logger.info(f"User {session.principal.id} saved system settings")
    return stored
