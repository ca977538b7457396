"""
Dependency wiring

Builds the services of an artifact run from settings.
"""

from typing import Optional

from artifact_lifecycle.application.services.artifacts_api import ArtifactsApiService
from artifact_lifecycle.infrastructure.config import Settings, get_settings
from artifact_lifecycle.infrastructure.logging import configure_logging, get_logger


logger = get_logger(__name__)


def create_artifacts_api(settings: Optional[Settings] = None) -> ArtifactsApiService:
    """
    Configure logging and create the artifacts API service.

    Args:
        settings: Settings to use (default: loaded from environment)

    Returns:
        ArtifactsApiService, not yet started
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.log_format)

    logger.info(
        "Creating artifacts API",
        idle_callback_timeout=settings.idle_callback_timeout,
    )
    return ArtifactsApiService(idle_callback_timeout=settings.idle_callback_timeout)
