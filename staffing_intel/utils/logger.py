"""
Logging for the staffing intelligence service.

All module loggers live under the ``staffing_intel`` namespace. Only that
package logger owns a stdout handler; children propagate to it, so the API,
the collectors and the dashboard share one format and one LOG_LEVEL.
"""

import logging
import sys
from typing import Optional

from staffing_intel.config import LOG_LEVEL

PACKAGE_LOGGER = "staffing_intel"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _configure_package_logger() -> logging.Logger:
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        package_logger.addHandler(handler)
        package_logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
    return package_logger


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Get a logger under the staffing_intel namespace (``__main__`` and foreign names are re-rooted)."""
    _configure_package_logger()
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger
