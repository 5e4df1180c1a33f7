"""
Logging Infrastructure - Logging structure avec structlog.

Usage:
------
    from postdesk.infrastructure.logging import get_logger

    logger = get_logger(__name__)
    logger.info("post_saved", post_id=7)
"""

from postdesk.infrastructure.logging.config import (
    RequestLogger,
    configure_logging,
    get_logger,
)

__all__ = ["RequestLogger", "configure_logging", "get_logger"]
