"""
API Module

This module provides the FastAPI application and the HTTP endpoints
for the Radio Tuner.

To run the API server:
    uvicorn tuner.api.main:app --reload

Or use the convenience script:
    python -m tuner.api.main
"""

from .main import app

__all__ = ['app']
