"""
Logging Setup

Configures loguru sinks from LoggingSettings.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from .config import Settings, settings as default_settings


def setup_logging(settings: Optional[Settings] = None) -> None:
    """
    Replace loguru's default sink with the configured ones.

    Always logs to stderr; additionally writes a rotating log file when
    LOG_FILE is set.

    Args:
        settings: Settings to read from (defaults to the global settings)
    """
    settings = settings or default_settings
    log_settings = settings.logging

    logger.remove()
    logger.add(
        sys.stderr,
        level=log_settings.level,
        format=log_settings.format,
        backtrace=settings.debug,
        diagnose=settings.debug,
    )

    if log_settings.file:
        Path(log_settings.file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_settings.file,
            level=log_settings.level,
            format=log_settings.format,
            rotation=log_settings.rotation,
            retention=log_settings.retention,
            enqueue=True,
        )

    logger.debug(f"Logging configured (level={log_settings.level}, file={log_settings.file})")
