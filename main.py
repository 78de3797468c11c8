from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Core
from core.config import settings
from core.config_validator import validate_config_on_startup
from core.errors import (
    ConfirmationRequired,
    FetchCancelled,
    GatewayError,
    NotFound,
    PayloadError,
    ReadOnlyCollection,
    to_http_exception,
)
from core.logging_config import logger
from dependencies.auth import AccessRedirect

# -------------------------------------------------
# Routers
# -------------------------------------------------
from routers import ALL_ROUTERS


# -------------------------------------------------
# Create the Application
# -------------------------------------------------
def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="1.0.0",
        description="SkyProperties API: property, unit and tenant management on Supabase",
    )

    # -------------------------------------------------
    # CORS
    # -------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------
    # Startup logging
    # -------------------------------------------------
    @app.on_event("startup")
    async def on_startup():
        logger.info(f"Starting {settings.PROJECT_NAME} ({settings.ENV})")
        validate_config_on_startup()
        for route in app.routes:
            methods = ",".join(sorted(getattr(route, "methods", None) or []))
            logger.debug(f"Route {methods:10s} {getattr(route, 'path', '')}")

    # -------------------------------------------------
    # Error handling
    # -------------------------------------------------
    @app.exception_handler(AccessRedirect)
    async def handle_redirect(request: Request, exc: AccessRedirect):
        return RedirectResponse(exc.location, status_code=303)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (401, 403, 500):
            logger.warning(f"HTTP {exc.status_code} at {request.url}: {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(GatewayError)
    async def handle_gateway(request: Request, exc: GatewayError):
        logger.error(f"{exc.kind} failure at {request.url}: {exc}")
        http_exc = to_http_exception(exc)
        return JSONResponse(status_code=http_exc.status_code, content={"detail": http_exc.detail})

    async def handle_domain(request: Request, exc: Exception):
        logger.info(f"Rejected {request.method} {request.url.path}: {exc}")
        http_exc = to_http_exception(exc)
        return JSONResponse(status_code=http_exc.status_code, content={"detail": http_exc.detail})

    for error_cls in (PayloadError, NotFound, ReadOnlyCollection, ConfirmationRequired):
        app.add_exception_handler(error_cls, handle_domain)

    @app.exception_handler(FetchCancelled)
    async def handle_cancelled(request: Request, exc: FetchCancelled):
        return JSONResponse(status_code=499, content={"detail": "Request cancelled"})

    @app.exception_handler(Exception)
    async def handle_unhandled(request: Request, exc: Exception):
        logger.error("Unhandled error at %s", request.url, exc_info=exc)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )

    # -------------------------------------------------
    # Register Routers
    # -------------------------------------------------
    for router in ALL_ROUTERS:
        app.include_router(router)

    return app


# Create the global FastAPI instance
app = create_app()
