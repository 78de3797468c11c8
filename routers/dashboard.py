# routers/dashboard.py

from fastapi import APIRouter, Depends

from controllers.dashboard import DashboardController
from core.session import SessionContext
from dependencies.auth import get_repositories, require_authenticated
from repositories import Repositories

router = APIRouter(
    tags=["Dashboard"],
)


# -----------------------------------------------------
# GET /dashboard
# Any signed-in principal, whatever the role
# -----------------------------------------------------
@router.get("/dashboard", summary="Overview for the signed-in user")
async def dashboard(
    session: SessionContext = Depends(require_authenticated),
    repositories: Repositories = Depends(get_repositories),
):
    async with DashboardController(session, repositories.units) as controller:
        return await controller.load()
