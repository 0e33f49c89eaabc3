"""Logging setup and Logfire cloud observability."""

import logging
from logging.config import dictConfig

import logfire
from fastapi import FastAPI

from config.settings import Settings

logger = logging.getLogger(__name__)

SERVICE_NAME = "studyhub-api"
SERVICE_VERSION = "0.1.0"


def configure_logging(settings: Settings) -> None:
    """Configure the root logger at settings.log_level."""
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                },
            },
            "root": {
                "level": settings.log_level.upper(),
                "handlers": ["console"],
            },
        }
    )


def initialize_logfire(settings: Settings, app: FastAPI | None = None) -> bool:
    """
    Initialize Logfire and instrument the service.

    Instruments:
    - FastAPI request handling (when an app is given)
    - PyMongo commands issued through Motor/Beanie
    - Python logging (bridges to Logfire)

    Returns True when Logfire was configured. Without a token the service
    runs with local logging only.
    """
    if not settings.logfire_token:
        logfire.configure(send_to_logfire=False, console=False)
        logger.warning("Logfire token not set - observability disabled")
        return False

    try:
        logfire.configure(
            token=settings.logfire_token,
            service_name=SERVICE_NAME,
            service_version=SERVICE_VERSION,
            environment=settings.environment,
        )

        if app is not None:
            logfire.instrument_fastapi(app)

        logfire.instrument_pymongo()

        # Bridge Python logging to Logfire
        logging.getLogger().addHandler(logfire.LogfireLoggingHandler())

        logger.info("Logfire cloud tracking initialized")
        return True

    except Exception as e:
        # Observability is optional; keep serving requests
        logger.warning(f"Failed to initialize Logfire: {e}")
        return False
