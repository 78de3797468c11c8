# core/errors.py

from fastapi import HTTPException


# ============================================================
# Failure taxonomy
# ============================================================
# Every remote failure is one of four kinds. They are all handled the
# same way: logged where they are caught, the action is aborted and any
# local state is left as it was before the action. Nothing is retried.

class GatewayError(Exception):
    """Base for failures talking to Supabase or S3."""

    kind = "gateway"

    def __init__(self, message: str, *, cause: Exception = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class AuthFailure(GatewayError):
    kind = "auth"


class StoreReadError(GatewayError):
    kind = "store_read"


class StoreWriteError(GatewayError):
    kind = "store_write"


class UploadError(GatewayError):
    kind = "upload"


# ============================================================
# Application-level errors (never reach the remote services)
# ============================================================

class PayloadError(ValueError):
    """Submitted fields cannot be written (bad number, dangling reference…)."""

    def __init__(self, message: str, field: str = None):
        super().__init__(message)
        self.message = message
        self.field = field


class NotFound(LookupError):
    def __init__(self, collection: str, doc_id: str):
        super().__init__(f"{collection}/{doc_id} not found")
        self.collection = collection
        self.doc_id = doc_id


class ReadOnlyCollection(Exception):
    def __init__(self, collection: str, operation: str):
        super().__init__(f"{collection} is append-only; {operation} is not allowed")
        self.collection = collection
        self.operation = operation


class ConfirmationRequired(Exception):
    def __init__(self, collection: str, doc_id: str):
        super().__init__(f"Deleting {collection}/{doc_id} requires confirmation")
        self.collection = collection
        self.doc_id = doc_id


class FetchCancelled(Exception):
    """A fetch finished after its view was closed; the result was dropped."""


# ============================================================
# Supabase error text
# ============================================================

def extract_supabase_error(error: Exception) -> str:
    """
    Safely extract readable details from Supabase Python client errors.
    Handles:
      • PostgREST errors
      • Supabase Auth errors
      • Generic Python exceptions
    """

    # Case 1: Auth errors and our own GatewayError carry .message
    if hasattr(error, "message"):
        try:
            return str(error.message)
        except Exception:
            pass

    # Case 2: errors with args (common)
    if hasattr(error, "args") and error.args:
        try:
            return str(error.args[0])
        except Exception:
            pass

    # Case 3: Plain string fallback
    try:
        return str(error)
    except Exception:
        return "Unknown Supabase error"


# ============================================================
# HTTP mapping
# ============================================================

GATEWAY_STATUS = {
    "auth": 401,
    "store_read": 502,
    "store_write": 502,
    "upload": 502,
}

GATEWAY_DETAIL = {
    "auth": "Authentication failed",
    "store_read": "Unable to load data",
    "store_write": "Unable to save changes",
    "upload": "File upload failed",
}


def to_http_exception(error: Exception) -> HTTPException:
    """
    Convert a domain error into an HTTPException.
    Gateway failures get a generic detail; the underlying message is only
    logged. Login/register surface the raw message themselves.
    """
    if isinstance(error, GatewayError):
        return HTTPException(
            status_code=GATEWAY_STATUS.get(error.kind, 502),
            detail=GATEWAY_DETAIL.get(error.kind, "Upstream service error"),
        )
    if isinstance(error, PayloadError):
        detail = {"message": error.message}
        if error.field:
            detail["field"] = error.field
        return HTTPException(status_code=422, detail=detail)
    if isinstance(error, NotFound):
        return HTTPException(status_code=404, detail=str(error))
    if isinstance(error, ReadOnlyCollection):
        return HTTPException(status_code=405, detail=str(error))
    if isinstance(error, ConfirmationRequired):
        return HTTPException(status_code=409, detail=str(error))
    return HTTPException(status_code=500, detail="Internal server error")
