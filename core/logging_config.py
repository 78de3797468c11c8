# core/logging_config.py
import logging

from core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOGGER_NAME = "skyproperties"

# The Supabase SDK logs every HTTP round trip at INFO through these.
NOISY_LOGGERS = ("httpx", "httpcore", "hpack")


def setup_logger(level: str = "INFO") -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)

    # Avoid duplicate handlers in dev reload
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(stream_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return logger


def get_logger(component: str) -> logging.Logger:
    """Child logger, e.g. ``skyproperties.gateway``."""
    return logging.getLogger(f"{LOGGER_NAME}.{component}")


logger = setup_logger(settings.LOG_LEVEL)
