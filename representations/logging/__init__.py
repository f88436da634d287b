"""
Logging Package
Structured logging with security features

Thin layer over the standard logging module that adds structured JSON
output and sensitive data filtering.
"""
from representations.logging.logger_config import (
    LoggerConfig,
    JSONFormatter,
    SensitiveDataFilter
)
import logging
from typing import Optional

__all__ = [
    'LoggerConfig',
    'JSONFormatter',
    'SensitiveDataFilter',
    'getLogger',
    'INFO',
    'DEBUG',
    'WARNING',
    'ERROR',
    'CRITICAL',
]

# Export logging levels for convenience
INFO = logging.INFO
DEBUG = logging.DEBUG
WARNING = logging.WARNING
ERROR = logging.ERROR
CRITICAL = logging.CRITICAL

# Logger names accepted besides module-based (dotted) names
ALLOWED_LOGGER_NAMES = ('application', 'representations')


def getLogger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance (drop-in replacement for logging.getLogger)

    Only allows logger names that are:
    - None (root logger)
    - One of ALLOWED_LOGGER_NAMES (e.g., 'application')
    - Module-based names (containing '.') like 'representations.representation'

    Any other name falls back to the root logger.

    Example:
        from representations.logging import getLogger
        logger = getLogger(__name__)

        logger.debug("Resolved representation")
        logger.error("Representation failed", exc_info=True)
    """
    if name and name.startswith('sanic.'):
        return logging.getLogger(name)

    if name is not None and '.' not in name and name not in ALLOWED_LOGGER_NAMES:
        name = None

    return logging.getLogger(name)
