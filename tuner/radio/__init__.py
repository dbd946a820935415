"""
Radio Module

This module provides the abstraction layer for driving the radio through
its command-line program, plus a simulated backend for development.

Example usage:
    from tuner.radio import ExecutableRadio, sanitize_station

    radio = ExecutableRadio('/usr/local/bin/piradio')

    station = sanitize_station('Radio-4!')   # -> 'adio4'
    if station:
        radio.tune(station)

    for line in radio.status_lines():
        print(line)
"""

from typing import Optional, TYPE_CHECKING

from loguru import logger

# Base classes and types
from .base import (
    RadioController,
    RadioBackend,
    CommandResult,
    RadioError,
    RadioNotFoundError,
    RadioCommandError,
    RadioTimeoutError,
    ConfigurationError,
)

# Station helpers
from .station import (
    sanitize_station,
    clean_status_lines,
    format_status,
    MAX_STATION_LENGTH,
)

# Implementations
from .executable import ExecutableRadio
from .mock import MockRadio, MockStation

if TYPE_CHECKING:
    from ..core.config import RadioSettings

__all__ = [
    # Base
    'RadioController',
    'RadioBackend',
    'CommandResult',
    'RadioError',
    'RadioNotFoundError',
    'RadioCommandError',
    'RadioTimeoutError',
    'ConfigurationError',

    # Station
    'sanitize_station',
    'clean_status_lines',
    'format_status',
    'MAX_STATION_LENGTH',

    # Implementations
    'ExecutableRadio',
    'MockRadio',
    'MockStation',

    # Factory
    'get_radio',
]


def get_radio(radio_settings: Optional["RadioSettings"] = None) -> RadioController:
    """
    Factory function to create a radio controller from settings.

    Args:
        radio_settings: Radio settings (defaults to the global settings)

    Returns:
        Radio controller instance

    Raises:
        ConfigurationError: If the configured backend is unknown
    """
    if radio_settings is None:
        from ..core.config import settings
        radio_settings = settings.radio

    backend = radio_settings.backend
    if backend == RadioBackend.EXECUTABLE.value:
        return ExecutableRadio(
            executable=radio_settings.executable,
            tune_timeout=radio_settings.tune_timeout,
            status_timeout=radio_settings.status_timeout,
        )
    elif backend == RadioBackend.MOCK.value:
        logger.warning("Using mock radio backend; no real tuning will happen")
        return MockRadio(
            tune_timeout=radio_settings.tune_timeout,
            status_timeout=radio_settings.status_timeout,
        )
    else:
        raise ConfigurationError(f"Unknown radio backend: {backend}")
