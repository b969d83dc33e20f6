"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules and constants (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config, get_config
from .game_settings import (
    WORD_LIST, WORD_LENGTH, MAX_ROWS, STORAGE_KEY_GAME, STORAGE_KEY_RANKING,
    validate_word_list_integrity, is_well_formed_word
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config', 'get_config',
    # Game rules
    'WORD_LIST', 'WORD_LENGTH', 'MAX_ROWS', 'STORAGE_KEY_GAME', 'STORAGE_KEY_RANKING',
    'validate_word_list_integrity', 'is_well_formed_word'
]
