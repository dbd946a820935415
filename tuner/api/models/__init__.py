"""
API Models Module

Pydantic models for API request/response schemas.
"""

from .radio import (
    CommandSummary,
    StatusResponse,
    TuneResponse,
    HealthResponse,
)

__all__ = [
    'CommandSummary',
    'StatusResponse',
    'TuneResponse',
    'HealthResponse',
]
