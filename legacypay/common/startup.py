"""Startup-time config logging with card-data redaction."""

from pydantic_settings import BaseSettings

from legacypay.common.logging import logger

REDACTED = "<redacted>"
_SENSITIVE_MARKERS = ("cvv", "card", "key", "secret", "password", "token")


def redacted_settings(config: BaseSettings) -> dict[str, object]:
    """Resolved settings as a dict, with card data and secret-like fields masked."""

    values = config.model_dump()
    return {
        name: REDACTED if any(marker in name.lower() for marker in _SENSITIVE_MARKERS) else value
        for name, value in values.items()
    }


def log_startup_config(config: BaseSettings) -> dict[str, object]:
    """Log the effective configuration once at startup and return what was logged."""

    logged = redacted_settings(config)
    logger.info("startup_config=%s", logged)
    return logged
