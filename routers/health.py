# routers/health.py

from fastapi import APIRouter

from core.config import settings
from core.logging_config import logger
from core.supabase_client import ping_supabase

router = APIRouter(
    prefix="/health",
    tags=["Health"],
)


# -----------------------------------------------------
# GET /health/db
# One single-row read per collection
# No auth required
# -----------------------------------------------------
@router.get("/db", summary="Supabase / document store health check")
def health_db():
    """
    Reports per-collection reachability. Safe for external monitors.
    """
    try:
        status = ping_supabase()
    except Exception as e:
        logger.error(f"Health check failed: {e}")
        return {"service": "Supabase", "status": "error", "error": str(e)}

    return {
        "service": "Supabase",
        "status": status.get("status", "unknown"),
        "details": status,
    }


# -----------------------------------------------------
# GET /health/app
# -----------------------------------------------------
@router.get("/app", summary="App health check")
def health_app():
    return {
        "service": settings.PROJECT_NAME,
        "env": settings.ENV,
        "status": "ok",
    }
