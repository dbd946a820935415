"""
API Dependencies

FastAPI dependency injection functions for settings, the radio
controller and the tuner. Tests replace get_radio through
app.dependency_overrides to substitute a stub radio.
"""

from typing import Optional

from fastapi import Depends

from ..core.config import Settings, get_settings
from ..core.tuner import Tuner
from ..radio import RadioController, get_radio as create_radio


_radio: Optional[RadioController] = None


def get_app_settings() -> Settings:
    """Application settings dependency"""
    return get_settings()


def get_radio(settings: Settings = Depends(get_app_settings)) -> RadioController:
    """
    Radio controller dependency.

    The controller is created once from settings and shared; the mock
    backend keeps its tuned station between requests this way.
    """
    global _radio
    if _radio is None:
        _radio = create_radio(settings.radio)
    return _radio


def reset_radio() -> None:
    """Drop the shared controller so the next request rebuilds it"""
    global _radio
    _radio = None


def get_tuner(
    radio: RadioController = Depends(get_radio),
    settings: Settings = Depends(get_app_settings),
) -> Tuner:
    """Tuner bound to the shared radio controller"""
    return Tuner(radio, strict=settings.radio.strict)
