"""
Structured logging for the practice kernel.

Kernel modules obtain loggers with ``structlog.get_logger(__name__)``;
the embedding simulation calls ``configure_logging`` once at startup.
"""

import logging
import sys
from typing import Optional

import structlog

from practice_kernel.models.config import KernelConfig


def configure_logging(config: Optional[KernelConfig] = None) -> None:
    """Configure structlog and the standard library logger it writes through."""
    config = config or KernelConfig()
    level = getattr(logging, config.log_level.value.upper())

    renderer = (
        structlog.processors.JSONRenderer()
        if config.json_logs
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )
    logging.getLogger().setLevel(level)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger."""
    return structlog.get_logger(name)
