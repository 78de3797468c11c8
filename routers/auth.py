from fastapi import APIRouter, Depends, HTTPException, Request

from core.config import settings
from core.errors import GatewayError, to_http_exception
from core.logging_config import logger
from core.rate_limiter import get_rate_limit_identifier, require_rate_limit
from core.session import SessionContext
from dependencies.auth import get_repositories, get_session
from models.auth import LoginRequest, PasswordResetRequest, RegisterRequest, TokenResponse
from repositories import Repositories


router = APIRouter(
    tags=["Auth"],
)


# ============================================================
# LOGIN (SUPABASE AUTH)
# ============================================================
@router.post("/login", response_model=TokenResponse, summary="Authenticate user")
def login(payload: LoginRequest, session: SessionContext = Depends(get_session)):
    email = payload.email.strip().lower()

    try:
        session.sign_in(email, payload.password)
    except GatewayError as e:
        # Shown to the user as-is on the login form.
        logger.warning(f"Login attempt failed for {email}: {e}")
        raise HTTPException(status_code=401, detail=str(e))

    logger.info(f"User {session.principal.id} signed in")
    return TokenResponse(access_token=session.access_token, profile=session.profile)


# ============================================================
# REGISTER
# ============================================================
@router.post("/register", summary="Create an account and its profile")
def register(
    payload: RegisterRequest,
    session: SessionContext = Depends(get_session),
    repositories: Repositories = Depends(get_repositories),
):
    email = payload.email.strip().lower()
    fields = {
        "name": payload.name,
        "phone": payload.phone,
        "role": payload.role,
    }

    try:
        principal = session.sign_up(email, payload.password, fields)
    except GatewayError as e:
        logger.warning(f"Registration failed for {email}: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    logger.info(f"Registered {principal.id} as {payload.role}")
    return {
        "id": principal.id,
        "email": email,
        "profile": session.profile or repositories.users.find(principal.id),
    }


# ============================================================
# LOGOUT
# ============================================================
@router.post("/logout", summary="Sign out and revoke the session")
def logout(session: SessionContext = Depends(get_session)):
    if not session.authenticated:
        return {"success": True}

    principal_id = session.principal.id
    try:
        session.sign_out()
    except GatewayError as e:
        logger.error(f"Sign-out failed for {principal_id}: {e}")
        raise to_http_exception(e)

    logger.info(f"User {principal_id} signed out")
    return {"success": True}


# ============================================================
# PASSWORD RESET EMAIL
# ============================================================
RESET_MESSAGE = "If an account exists with this email, a password reset link has been sent."


@router.post(
    "/reset-password",
    summary="Send password reset email",
    responses={
        200: {"description": "Email sent (or email not found, for security)"},
        429: {"description": "Rate limit exceeded"},
    },
)
def reset_password(
    payload: PasswordResetRequest,
    request: Request,
    session: SessionContext = Depends(get_session),
):
    """
    Always answers the same way whether or not the email is registered.
    Rate limited per email + client address.
    """
    email = payload.email.strip().lower()

    identifier = get_rate_limit_identifier(request, subject=email)
    require_rate_limit(
        request,
        identifier=identifier,
        max_requests=settings.RESET_PASSWORD_MAX_REQUESTS,
        window_seconds=settings.RESET_PASSWORD_WINDOW_SECONDS,
    )

    logger.info(f"Password reset attempt: {identifier}")

    try:
        session.reset_password(email)
        logger.info(f"Password reset email sent: email={email}")
    except GatewayError as e:
        logger.error(f"Failed to send password reset email to {email}: {e}")

    return {"success": True, "message": RESET_MESSAGE}
