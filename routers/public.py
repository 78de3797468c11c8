# routers/public.py

from typing import Optional

from fastapi import APIRouter, Depends, Query

from controllers.landing import LandingController
from core.locale import describe, parse_language
from core.logging_config import logger
from core.roles import navigation_links
from core.session import SessionContext
from dependencies.auth import get_repositories, get_session
from models.guest_request import GuestRequestCreate
from repositories import Repositories

router = APIRouter(
    tags=["Public"],
)


# ============================================================
# GET / (landing: property browse)
# ============================================================
@router.get("/", summary="Browse properties (public)")
async def landing(
    search: Optional[str] = Query(None, description="Matches property name or city"),
    city: Optional[str] = Query(None, description="Exact city"),
    repositories: Repositories = Depends(get_repositories),
    session: SessionContext = Depends(get_session),
):
    async with LandingController(repositories.properties) as controller:
        await controller.load()
        properties = controller.browse(search, city)

        return {
            "properties": properties,
            "total": len(properties),
            "cities": controller.cities(),
            "navigation": navigation_links(session.role, authenticated=session.authenticated),
            "locale": describe(session.language),
        }


# ============================================================
# POST /guest-requests (anonymous visitors)
# ============================================================
@router.post("/guest-requests", status_code=201, summary="Submit a guest request (public)")
def create_guest_request(
    payload: GuestRequestCreate,
    repositories: Repositories = Depends(get_repositories),
):
    stored = repositories.guest_requests.create(payload)
    logger.info(f"Guest request {stored.get('id')} received ({payload.request_type})")
    return stored


# ============================================================
# LOCALE (held in the session context, never persisted)
# ============================================================
@router.get("/locale", summary="Current language and text direction")
def get_locale(
    lang: Optional[str] = Query(None, description="Client's current language"),
    session: SessionContext = Depends(get_session),
):
    if lang:
        return session.set_language(lang)
    return describe(session.language)


@router.post("/locale/toggle", summary="Switch between English and Arabic")
def toggle_locale(
    lang: Optional[str] = Query(None, description="Client's current language"),
    session: SessionContext = Depends(get_session),
):
    if lang:
        session.set_language(parse_language(lang, session.language))
    return session.toggle_language()
