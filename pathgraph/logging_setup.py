"""Logging setup driven by ObservabilityConfig."""

from __future__ import annotations

import logging
from typing import Optional

from .config import ObservabilityConfig, get_config
from .domain.errors import ConfigurationError


def configure_logging(config: Optional[ObservabilityConfig] = None) -> int:
    """Configure the root logger from settings.

    Args:
        config: Logging settings; defaults to the application config.

    Returns:
        The numeric level that was applied.

    Raises:
        ConfigurationError: If the configured level is not a logging level.
    """
    config = config or get_config().observability
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level: {config.level}",
            setting_name="PATHGRAPH_LOG_LEVEL",
        )

    logging.basicConfig(level=level, format=config.format, force=True)
    logging.getLogger(__name__).debug("Logging configured", extra={"level": level})
    return level
