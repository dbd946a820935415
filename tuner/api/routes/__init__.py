"""
API Routes Module

This module contains all API route definitions organized by resource.
"""

from . import tune
from . import radio

__all__ = ['tune', 'radio']
