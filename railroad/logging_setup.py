"""Logging configuration for the command line entry point.

Library modules only create loggers with ``logging.getLogger(__name__)``;
handlers and levels are installed here, once, by the application.
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import ObservabilityConfig, get_config

logger = logging.getLogger("railroad")


def configure_logging(
    config: Optional[ObservabilityConfig] = None,
    level: Optional[str] = None,
) -> None:
    """Attach a stream handler to the package logger.

    Args:
        config: Observability settings, defaults to the application config.
        level: Explicit level name overriding the configured one.
    """
    config = config or get_config().observability
    level_name = (level or config.level).upper()

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(config.format))
    logger.addHandler(handler)
    logger.setLevel(level_name)

    logger.debug("Logging configured", extra={"level": level_name})
