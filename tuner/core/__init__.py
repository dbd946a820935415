"""
Core Module

This module provides configuration, logging setup and the tune/status
request flow for the Radio Tuner service.
"""

from .config import settings, get_settings, Settings, RadioSettings
from .logging import setup_logging
from .tuner import Tuner, TuneOutcome

__all__ = [
    # Config
    'settings',
    'get_settings',
    'Settings',
    'RadioSettings',
    # Logging
    'setup_logging',
    # Tuner
    'Tuner',
    'TuneOutcome',
]
