# routers/admin_units.py

from typing import Optional

from fastapi import APIRouter, Body, Depends, Query

from controllers.units import UnitsController
from core.logging_config import logger
from core.session import SessionContext
from dependencies.auth import get_repositories, require_manager
from repositories import Repositories

router = APIRouter(
    prefix="/admin/units",
    tags=["Admin - Units"],
)


def units_controller(repositories: Repositories) -> UnitsController:
    return UnitsController(repositories.units, repositories.properties)


@router.get("", summary="List units with their property names")
async def list_units(
    search: Optional[str] = Query(None, description="Matches unit number or type"),
    session: SessionContext = Depends(require_manager),
    repositories: Repositories = Depends(get_repositories),
):
    async with units_controller(repositories) as controller:
        await controller.load()
        return controller.set_search(search)


@router.get("/new", summary="Blank unit form with property choices")
async def new_unit_form(
    session: SessionContext = Depends(require_manager),
    repositories: Repositories = Depends(get_repositories),
):
    async with units_controller(repositories) as controller:
        await controller.load()
        return {"form": controller.open_create().values, "properties": controller.property_options()}


@router.get("/{unit_id}", summary="Open a unit for editing")
async def get_unit(
    unit_id: str,
    session: SessionContext = Depends(require_manager),
    repositories: Repositories = Depends(get_repositories),
):
    async with units_controller(repositories) as controller:
        await controller.load()
        return {
            "item": controller.detail(unit_id),
            "form": controller.open_edit(unit_id).values,
            "properties": controller.property_options(),
        }


@router.post("", status_code=201, summary="Create a unit")
async def create_unit(
    payload: dict = Body(..., description="Form fields; numbers may be sent as text"),
    session: SessionContext = Depends(require_manager),
    repositories: Repositories = Depends(get_repositories),
):
    async with units_controller(repositories) as controller:
        draft = controller.open_create()
        draft.values.update({k: v for k, v in payload.items() if k in controller.form_fields})

        stored = await controller.submit(draft)

        logger.info(f"User {session.principal.id} created unit {stored.get('id')}")
        return {"item": stored, "items": controller.documents}


@router.patch("/{unit_id}", summary="Update a unit")
async def update_unit(
    unit_id: str,
    payload: dict = Body(...),
    session: SessionContext = Depends(require_manager),
    repositories: Repositories = Depends(get_repositories),
):
    async with units_controller(repositories) as controller:
        await controller.load()
        draft = controller.open_edit(unit_id)
        draft.values.update({k: v for k, v in payload.items() if k in controller.form_fields})

        stored = await controller.submit(draft)

        logger.info(f"User {session.principal.id} updated unit {unit_id}")
        return {"item": stored, "items": controller.documents}


@router.delete("/{unit_id}", summary="Delete a unit")
async def delete_unit(
    unit_id: str,
    confirm: bool = Query(False, description="Must be true; deletion is irreversible"),
    session: SessionContext = Depends(require_manager),
    repositories: Repositories = Depends(get_repositories),
):
    async with units_controller(repositories) as controller:
        await controller.delete(unit_id, confirmed=confirm)

        logger.info(f"User {session.principal.id} deleted unit {unit_id}")
        return {"success": True, "items": controller.documents}
