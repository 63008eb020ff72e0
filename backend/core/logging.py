"""
Centralized logging configuration.

Call setup_logging() once at application startup, before the catalog loads.
"""

import logging
from typing import Iterable, Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Access log paths that are polled by the client and would flood the log
QUIET_PATHS = ("/health", "/actions/visible")


class SuppressPathLogsFilter(logging.Filter):
    """Drop access log records for the given request paths."""

    def __init__(self, paths: Iterable[str] = QUIET_PATHS):
        super().__init__()
        self.paths = tuple(paths)

    def filter(self, record):
        message = record.getMessage()
        return not any(path in message for path in self.paths)


def setup_logging(debug_mode: bool = False, log_level: Optional[int] = None) -> None:
    """
    Configure application-wide logging.

    Args:
        debug_mode: If True, log at DEBUG (unless log_level is given). The
            filter engine logs every recompute at DEBUG.
        log_level: Explicit log level to use (overrides debug_mode)
    """
    if log_level is None:
        log_level = logging.DEBUG if debug_mode else logging.INFO

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        force=True,  # Override any existing configuration
    )

    access_logger = logging.getLogger("uvicorn.access")
    if not any(isinstance(f, SuppressPathLogsFilter) for f in access_logger.filters):
        access_logger.addFilter(SuppressPathLogsFilter())

    logging.getLogger("Logging").info(f"Logging configured with level: {logging.getLevelName(log_level)}")


def get_logger(name: str) -> logging.Logger:
    """Get a logger by component name (e.g. "CatalogService")."""
    return logging.getLogger(name)
