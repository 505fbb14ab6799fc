"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

from . import game_settings

# Load environment variables from config.env
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


class Config:
    """Base configuration class with all settings."""
    
    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    
    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))
    
    # Game Settings
    WORD_LENGTH = int(os.getenv('WORD_LENGTH', game_settings.WORD_LENGTH))
    MAX_ROWS = int(os.getenv('MAX_ROWS', game_settings.MAX_ROWS))
    MAX_HINTS = int(os.getenv('MAX_HINTS', game_settings.MAX_HINT_COUNT))
    FALLBACK_SECRET = os.getenv('FALLBACK_SECRET', game_settings.FALLBACK_SECRET)
    
    # Answer Source Settings
    ANSWER_API_URL = os.getenv('ANSWER_API_URL', 'https://random-word-api.herokuapp.com/word')
    ANSWER_API_TIMEOUT = float(os.getenv('ANSWER_API_TIMEOUT', 5))
    ANSWER_API_RETRIES = int(os.getenv('ANSWER_API_RETRIES', 3))
    ANSWER_API_BACKOFF = float(os.getenv('ANSWER_API_BACKOFF', 1))
    
    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    ANSWER_API_RETRIES = 1
    ANSWER_API_BACKOFF = 0.0


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
