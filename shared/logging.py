"""
Logger factory and helpers.

Provides:
- get_logger(): Get a structlog logger bound to a module name
"""

import structlog
from structlog.stdlib import BoundLogger

from shared.logging_config import configure_structlog, setup_logging


def get_logger(name: str) -> BoundLogger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Example:
        >>> log = get_logger(__name__)
        >>> log.info("workflow_delivered", url="...", status_code=200)
    """
    return structlog.get_logger(name)


__all__ = [
    "get_logger",
    "configure_structlog",
    "setup_logging",
]
