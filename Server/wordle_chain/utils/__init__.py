"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import require_backend
from .helpers import get_user_identity, utc_timestamp
from .game_logger import game_logger

__all__ = ['require_backend', 'get_user_identity', 'utc_timestamp', 'game_logger']
