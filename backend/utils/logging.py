"""
Logging and Logfire Integration

Functions:
- configure_logging(settings): Configure stdlib logging on stdout
- initialize_logfire(settings, app): Initialize Logfire and instrumentation
"""

import logging
import sys
from typing import Optional

import logfire
from fastapi import FastAPI

from config.settings import Settings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
SERVICE_NAME = "blog-api"


def configure_logging(settings: Settings) -> None:
    """
    Configure root logging for the API process.

    Logs go to stdout with timestamp, logger name and level. Uvicorn's
    access log is raised to WARNING to reduce noise.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def initialize_logfire(
    settings: Settings,
    app: Optional[FastAPI] = None,
    service_version: str = "0.1.0",
) -> bool:
    """
    Initialize Logfire for the API process.

    Logfire is always configured so ``logfire.info`` calls are safe, but data
    is only exported when a token is set. With a token this also:
    - Bridges Python logging to Logfire
    - Instruments FastAPI request handling
    - Instruments PyMongo commands (used underneath Motor)

    Args:
        settings: Application settings containing the Logfire token
        app: FastAPI application to instrument
        service_version: Version reported with every span

    Returns:
        True when export to Logfire is enabled.
    """
    logfire.configure(
        token=settings.logfire_token or None,
        send_to_logfire="if-token-present",
        service_name=SERVICE_NAME,
        service_version=service_version,
        environment=settings.environment,
        console=False,
    )

    if not settings.logfire_token:
        logger.info("Logfire token not set - export disabled")
        return False

    try:
        root_logger = logging.getLogger()
        if not any(isinstance(h, logfire.LogfireLoggingHandler) for h in root_logger.handlers):
            root_logger.addHandler(logfire.LogfireLoggingHandler())

        if app is not None:
            logfire.instrument_fastapi(app)
        logfire.instrument_pymongo()

        logger.info("Logfire tracking initialized")
        return True

    except Exception as e:
        # Export stays off; the API keeps serving
        logger.warning(f"Failed to instrument Logfire: {e}")
        return False
