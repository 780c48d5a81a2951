"""
Logging configuration for the semantic guard.

structlog is configured once per process; CI runners read the rendered
events from stdout next to the guard's own banners and diagnostics.
"""
import logging
import sys
from typing import Any, List, Optional

import structlog

from ..config.settings import settings

_configured = False


def build_processors(log_format: str) -> List[Any]:
    """
    Processor chain for the given output format.

    Args:
        log_format: "json" for machine-readable CI logs, anything else
            for the coloured console renderer

    Returns:
        structlog processors, renderer last
    """
    renderer = (
        structlog.processors.JSONRenderer()
        if log_format == "json"
        else structlog.dev.ConsoleRenderer()
    )
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
        renderer,
    ]


def configure_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    force: bool = False
) -> None:
    """
    Configure structlog and the stdlib root logger.

    Args:
        log_level: Level name (default from settings)
        log_format: "json" or "console" (default from settings)
        force: Reconfigure even if logging was already set up
    """
    global _configured
    if _configured and not force:
        return

    level = getattr(logging, (log_level or settings.log_level).upper(), logging.INFO)

    structlog.configure(
        processors=build_processors(log_format or settings.log_format),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level, force=force)

    _configured = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a logger bound to the guard component.

    Args:
        name: Logger name (usually __name__)

    Returns:
        structlog logger
    """
    configure_logging()
    return structlog.get_logger(name).bind(component="semantic_guard")


# Global logger instance
logger = get_logger("semantic_guard")
