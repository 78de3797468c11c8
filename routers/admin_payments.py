# routers/admin_payments.py

from typing import Optional

from fastapi import APIRouter, Body, Depends, Query

from controllers.payments import PaymentsController
from core.logging_config import logger
from core.session import SessionContext
from dependencies.auth import get_repositories, require_manager
from repositories import Repositories

router = APIRouter(
    prefix="/admin/payments",
    tags=["Admin - Payments"],
)


@router.get("", summary="List payments (read-only ledger)")
async def list_payments(
    search: Optional[str] = Query(None, description="Matches type or method"),
    session: SessionContext = Depends(require_manager),
    repositories: Repositories = Depends(get_repositories),
):
    async with PaymentsController(repositories.payments) as controller:
        await controller.load()
        return controller.set_search(search)


@router.post("", status_code=201, summary="Record a payment")
async def record_payment(
    payload: dict = Body(...),
    session: SessionContext = Depends(require_manager),
    repositories: Repositories = Depends(get_repositories),
):
    async with PaymentsController(repositories.payments) as controller:
        draft = controller.open_create()
        draft.values.update({k: v for k, v in payload.items() if k in controller.form_fields})

        stored = await controller.submit(draft)

        logger.info(f"User {session.principal.id} recorded payment {stored.get('id')}")
        return {"item": stored, "items": controller.documents}


@router.patch("/{payment_id}", summary="Payments cannot be edited")
async def update_payment(
    payment_id: str,
    session: SessionContext = Depends(require_manager),
    repositories: Repositories = Depends(get_repositories),
):
    async with PaymentsController(repositories.payments) as controller:
        controller.open_edit(payment_id)


@router.delete("/{payment_id}", summary="Payments cannot be deleted")
async def delete_payment(
    payment_id: str,
    session: SessionContext = Depends(require_manager),
    repositories: Repositories = Depends(get_repositories),
):
    async with PaymentsController(repositories.payments) as controller:
        await controller.delete(payment_id, confirmed=True)
