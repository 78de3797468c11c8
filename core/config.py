from typing import List, Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    # -------------------------------------------------
    # General
    # -------------------------------------------------
    PROJECT_NAME: str = "SkyProperties API"
    ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # -------------------------------------------------
    # Frontend Domains
    # -------------------------------------------------
    FRONTEND_DOMAIN: Optional[str] = None

    FRONTEND_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]

    # -------------------------------------------------
    # CORS (auto-built below)
    # -------------------------------------------------
    BACKEND_CORS_ORIGINS: List[str] = []

    # -------------------------------------------------
    # Supabase (Auth + document tables)
    # -------------------------------------------------
    SUPABASE_URL: Optional[str] = None
    SUPABASE_ANON_KEY: Optional[str] = None
    SUPABASE_SERVICE_ROLE_KEY: Optional[str] = None

    # -------------------------------------------------
    # S3 (property models + thumbnails)
    # -------------------------------------------------
    AWS_ACCESS_KEY_ID: Optional[str] = None
    AWS_SECRET_ACCESS_KEY: Optional[str] = None
    AWS_BUCKET_NAME: Optional[str] = None
    AWS_REGION: str = "us-east-2"

    # Public base for uploaded blobs, e.g. a CDN in front of the bucket.
    # Falls back to the bucket's regional virtual-host URL.
    S3_PUBLIC_BASE_URL: Optional[str] = None

    # -------------------------------------------------
    # Collection snapshots
    # -------------------------------------------------
    LIST_CACHE_TTL_SECONDS: int = Field(
        15,
        description="Lifetime of a cached full-collection listing (invalidated on every write)",
    )

    # -------------------------------------------------
    # Password reset throttling
    # -------------------------------------------------
    RESET_PASSWORD_MAX_REQUESTS: int = 5
    RESET_PASSWORD_WINDOW_SECONDS: int = 900

    # -------------------------------------------------
    # Locale
    # -------------------------------------------------
    DEFAULT_LANGUAGE: str = "en"

    # -------------------------------------------------
    # Model Config
    # -------------------------------------------------
    class Config:
        case_sensitive = True


# Instantiate settings
settings = Settings()

# -------------------------------------------------
# Build CORS list dynamically after loading settings
# -------------------------------------------------
cors_origins = []

if settings.FRONTEND_DOMAIN:
    domain = settings.FRONTEND_DOMAIN
    if not domain.startswith("http"):
        domain = f"https://{domain}"
    cors_origins.append(domain.rstrip("/"))

cors_origins.extend([d.rstrip("/") for d in settings.FRONTEND_ORIGINS])

settings.BACKEND_CORS_ORIGINS = sorted(set(cors_origins))
