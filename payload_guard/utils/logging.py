"""
Logging utilities for Payload Guard.

Provides standardized logger configuration.

PRIVACY RULES:
- NEVER log raw request bodies (payloads carry emails, phone numbers, addresses)
- NEVER log field values, only field names and rule names

Acceptable logging:
- Rejection events (e.g., "Rejected payload: unknown field 'extraField'")
- Offending field paths and violated rule names
"""

import logging
from typing import Optional

from payload_guard.config import settings


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a configured logger for the specified module.

    Args:
        name: Module name (typically __name__)
        level: Optional logging level (defaults to LOG_LEVEL from settings)

    Returns:
        Configured logger instance

    Usage:
        >>> from payload_guard.utils.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("High-level event occurred")
    """
    logger = logging.getLogger(name)

    if level is None:
        level = settings.log_level

    logger.setLevel(level)

    # Add handler if not already configured (avoid duplicate handlers)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
