"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Protocol constants (business logic)
"""

from .app_config import (
    Config, DevelopmentConfig, ProductionConfig, TestingConfig, config, get_config
)
from .game_settings import (
    WORD_LENGTH, ALPHABET_SIZE, PARTIAL_MATCH_BONUS, EXACT_MATCH_BONUS,
    PLACEHOLDER_GUESS, MAX_TURN_NUMBER
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config', 'get_config',
    # Protocol constants
    'WORD_LENGTH', 'ALPHABET_SIZE', 'PARTIAL_MATCH_BONUS', 'EXACT_MATCH_BONUS',
    'PLACEHOLDER_GUESS', 'MAX_TURN_NUMBER'
]
