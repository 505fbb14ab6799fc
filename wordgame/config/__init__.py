"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules and constants (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    WORD_LENGTH, MAX_ROWS, MAX_HINT_COUNT, HINT_MESSAGE_TIMEOUT_MS, FALLBACK_SECRET,
    normalize_letters, validate_word
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'WORD_LENGTH', 'MAX_ROWS', 'MAX_HINT_COUNT', 'HINT_MESSAGE_TIMEOUT_MS', 'FALLBACK_SECRET',
    'normalize_letters', 'validate_word'
]
