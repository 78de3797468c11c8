# core/supabase_client.py

from supabase import create_client, Client, ClientOptions
from core.config import settings
from core.logging_config import logger


# ============================================================
# Supabase Client Factory (service role, document tables)
# ============================================================

def get_supabase_client() -> Client:
    """
    Creates a Supabase client using the SERVICE ROLE KEY.
    Used by the data gateway for full read/write on all collections.
    """
    try:
        supabase_url = settings.SUPABASE_URL
        supabase_key = settings.SUPABASE_SERVICE_ROLE_KEY

        if not supabase_url or not supabase_key:
            logger.error("Missing Supabase credentials")
            logger.error(f"   URL: {supabase_url}")
            logger.error(f"   SERVICE ROLE KEY: {'SET' if supabase_key else 'MISSING'}")
            return None

        return create_client(supabase_url, supabase_key)

    except Exception as e:
        logger.error(f"Supabase Init Error: {e}", exc_info=True)
        return None


# ============================================================
# Auth Client Factory (one per session context)
# ============================================================

def get_auth_client() -> Client:
    """
    Creates a Supabase client for end-user auth flows.

    Each session context owns its own client so that auth state-change
    events from one principal never reach another. Tokens are not
    refreshed in the background and sessions are kept in memory only.
    """
    supabase_url = settings.SUPABASE_URL
    supabase_key = settings.SUPABASE_ANON_KEY or settings.SUPABASE_SERVICE_ROLE_KEY

    if not supabase_url or not supabase_key:
        logger.error("Missing Supabase auth credentials")
        return None

    try:
        return create_client(
            supabase_url,
            supabase_key,
            options=ClientOptions(auto_refresh_token=False, persist_session=False),
        )
    except Exception as e:
        logger.error(f"Supabase Auth Init Error: {e}", exc_info=True)
        return None


# ============================================================
# Ping Supabase for health checks
# ============================================================

def ping_supabase(collections=None) -> dict:
    """
    Simple connectivity check: one single-row read per collection.
    """
    from core.gateway import Collection

    try:
        client = get_supabase_client()
        if client is None:
            return {"service": "Supabase", "status": "not_configured"}

        names = collections or [c.value for c in Collection]
        results = {}

        for name in names:
            try:
                res = client.table(name).select("id").limit(1).execute()
                results[name] = {
                    "status": "ok",
                    "rows_found": len(res.data or []),
                }
            except Exception as err:
                results[name] = {"status": "error", "detail": str(err)}

        overall = "ok" if all(r["status"] == "ok" for r in results.values()) else "degraded"
        return {
            "service": "Supabase",
            "status": overall,
            "collections": results,
        }

    except Exception as e:
        logger.error(f"Supabase Ping Error: {e}", exc_info=True)
        return {"service": "Supabase", "status": "error", "detail": str(e)}
