# core/config_validator.py

from typing import List

from core.config import settings
from core.logging_config import logger


def validate_required_config() -> List[str]:
    """Settings without which no request can be served."""
    missing = []

    if not settings.SUPABASE_URL:
        missing.append("SUPABASE_URL")
    if not settings.SUPABASE_SERVICE_ROLE_KEY:
        missing.append("SUPABASE_SERVICE_ROLE_KEY")

    return missing


def validate_optional_config() -> List[str]:
    """Settings whose absence disables one feature (warnings only)."""
    warnings = []

    if not settings.SUPABASE_ANON_KEY:
        warnings.append("SUPABASE_ANON_KEY (auth falls back to the service role key)")

    for name in ("AWS_ACCESS_KEY_ID", "AWS_SECRET_ACCESS_KEY", "AWS_BUCKET_NAME"):
        if not getattr(settings, name):
            warnings.append(f"{name} (property model/thumbnail uploads disabled)")

    return warnings


def validate_config_on_startup():
    """
    Missing required settings abort startup in production and are only
    logged elsewhere, so the app can boot for local work and tests.
    """
    missing_required = validate_required_config()
    missing_optional = validate_optional_config()

    if missing_required:
        error_msg = f"Missing required environment variables: {', '.join(missing_required)}"
        logger.error(error_msg)
        if settings.ENV == "production":
            raise RuntimeError(error_msg)

    for warning in missing_optional:
        logger.warning(f"Optional configuration missing: {warning}")

    if not missing_required:
        logger.info("Configuration validation passed")
