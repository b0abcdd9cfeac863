"""Logging setup for the labeled_graph package.

Modules log through ``logging.getLogger(__name__)`` and pass context
via ``extra``. Nothing is emitted until a handler is attached, either by
the host application or by ``configure_logging``.
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import ObservabilityConfig, get_config
from .domain.errors import ConfigurationError

PACKAGE_LOGGER = "labeled_graph"

_HANDLER_NAME = "labeled_graph.stream"


def configure_logging(config: Optional[ObservabilityConfig] = None) -> logging.Logger:
    """Attach a stream handler to the package logger.

    Calling this more than once replaces the previous handler instead of
    stacking a second one. The root logger is left untouched.

    Args:
        config: Logging settings; defaults to ``get_config().observability``.

    Returns:
        The configured package logger.

    Raises:
        ConfigurationError: If the configured level is not a logging level.
    """
    config = config or get_config().observability

    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level: {config.level}",
            setting_name="level",
            expected_type="DEBUG, INFO, WARNING, ERROR or CRITICAL",
        )

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(config.format))
    logger.addHandler(handler)
    logger.setLevel(level)

    logger.debug("Logging configured", extra={"level": config.level.upper()})
    return logger
