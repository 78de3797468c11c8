# routers/admin_tickets.py

from typing import Optional

from fastapi import APIRouter, Depends, Query

from controllers.guest_requests import GuestRequestsController
from controllers.tickets import TicketsController
from core.logging_config import logger
from core.session import SessionContext
from dependencies.auth import get_repositories, require_manager
from models.guest_request import GuestRequestStatusUpdate
from models.ticket import TicketStatusUpdate
from repositories import Repositories

router = APIRouter(
    prefix="/admin",
    tags=["Admin - Requests"],
)


# =====================================================
# MAINTENANCE TICKETS
# =====================================================
@router.get("/tickets", summary="List tickets")
async def list_tickets(
    search: Optional[str] = Query(None, description="Matches category or status"),
    session: SessionContext = Depends(require_manager),
    repositories: Repositories = Depends(get_repositories),
):
    async with TicketsController(repositories.tickets) as controller:
        await controller.load()
        return controller.set_search(search)


@router.get("/tickets/{ticket_id}", summary="Ticket detail")
async def get_ticket(
    ticket_id: str,
    session: SessionContext = Depends(require_manager),
    repositories: Repositories = Depends(get_repositories),
):
    async with TicketsController(repositories.tickets) as controller:
        await controller.load()
        return controller.detail(ticket_id)


@router.patch("/tickets/{ticket_id}/status", summary="Move a ticket through its workflow")
async def update_ticket_status(
    ticket_id: str,
    payload: TicketStatusUpdate,
    session: SessionContext = Depends(require_manager),
    repositories: Repositories = Depends(get_repositories),
):
    async with TicketsController(repositories.tickets) as controller:
        stored = await controller.update_status(ticket_id, payload.status)

        logger.info(f"User {session.principal.id} set ticket {ticket_id} to {payload.status}")
        return {"item": stored, "items": controller.documents}


# =====================================================
# GUEST REQUESTS
# =====================================================
@router.get("/guest-requests", summary="List guest requests")
async def list_guest_requests(
    search: Optional[str] = Query(None, description="Matches email, phone or request type"),
    session: SessionContext = Depends(require_manager),
    repositories: Repositories = Depends(get_repositories),
):
    async with GuestRequestsController(repositories.guest_requests) as controller:
        await controller.load()
        return controller.set_search(search)


@router.get("/guest-requests/{request_id}", summary="Guest request detail")
async def get_guest_request(
    request_id: str,
    session: SessionContext = Depends(require_manager),
    repositories: Repositories = Depends(get_repositories),
):
    async with GuestRequestsController(repositories.guest_requests) as controller:
        await controller.load()
        return controller.detail(request_id)


@router.patch("/guest-requests/{request_id}/status", summary="Mark a guest request contacted/completed")
async def update_guest_request_status(
    request_id: str,
    payload: GuestRequestStatusUpdate,
    session: SessionContext = Depends(require_manager),
    repositories: Repositories = Depends(get_repositories),
):
    async with GuestRequestsController(repositories.guest_requests) as controller:
        stored = await controller.update_status(request_id, payload.status)

        logger.info(f"User {session.principal.id} set guest request {request_id} to {payload.status}")
        return {"item": stored, "items": controller.documents}
