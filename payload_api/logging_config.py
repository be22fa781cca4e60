# =============================================================================
# Payload API - Logging Configuration
# =============================================================================
"""
Structured logging with structlog on top of the standard library.

JSON lines by default (suitable for log aggregation); a human-readable
console renderer when LOG_FORMAT=console.
"""

import logging
import sys

import structlog

from .config import Settings


def configure_logging(settings: Settings) -> None:
    """
    Configure structured logging with structlog.
    
    The stdlib root logger carries the level so that
    ``filter_by_level`` drops events below LOG_LEVEL before rendering.
    
    Args:
        settings: Application settings providing level and format
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=settings.log_level.upper(),
        force=True,
    )
    
    if settings.log_format.lower() == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()
    
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
