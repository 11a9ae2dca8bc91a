"""Helper functions for setting up Cameraman in a host program."""

import logging

from rich.logging import RichHandler

from cameraman.conf import settings
from cameraman.driver import Cameraman
from cameraman.host.base import CameraHost

logger = logging.getLogger(__name__)


def setup_logging(log_level: str | None = None) -> None:
    """Configure logging for Cameraman.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to settings.LOG_LEVEL.

    Side effects:
        - Configures the root logger with RichHandler
        - Sets the specified log level
    """
    if log_level is None:
        log_level = settings.LOG_LEVEL

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, markup=False)],
        force=True,
    )


def create_cameraman(host: CameraHost) -> Cameraman:
    """Set up logging and build a driver from settings.

    Args:
        host: Engine interface the camera will drive.

    Returns:
        Configured Cameraman driver (disabled when no profile is set).

    Example:
        >>> # settings.py: CMAN_PROFILE = "intro.cman"
        >>> cameraman = create_cameraman(ArcadeCameraHost(camera, player))
    """
    setup_logging()
    cameraman = Cameraman.from_settings(host)
    if not cameraman.enabled:
        logger.debug("No Cameraman profile configured")
    return cameraman
