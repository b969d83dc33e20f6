"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import require_service
from .helpers import get_user_identity
from .game_logger import game_logger

__all__ = ['require_service', 'get_user_identity', 'game_logger']
