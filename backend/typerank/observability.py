"""Logfire cloud observability initialization."""

import logging

import logfire

from typerank import __version__
from typerank.config import Settings

logger = logging.getLogger(__name__)


def initialize_logfire(settings: Settings) -> bool:
    """
    Initialize Logfire and bridge Python logging into it.

    Must be called once at startup, before any command runs. Does nothing when
    no token is configured.

    Args:
        settings: Application settings containing the Logfire token

    Returns:
        True if Logfire was configured, False otherwise.
    """
    if not settings.logfire_token:
        logger.debug("Logfire token not set - observability disabled")
        return False

    try:
        logfire.configure(
            token=settings.logfire_token,
            service_name="typerank",
            service_version=__version__,
            environment=settings.environment,
        )

        root_logger = logging.getLogger()
        root_logger.addHandler(logfire.LogfireLoggingHandler())

        logger.info("✓ Logfire cloud tracking initialized")
        return True

    except Exception as e:
        logger.warning(f"Failed to initialize Logfire: {e}")
        return False
