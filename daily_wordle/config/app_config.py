"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

from .game_settings import REVEAL_DELAY_PER_LETTER_SECONDS, SETTLE_DELAY_SECONDS

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
    
    # Puzzle Settings
    FIRST_WORD_DATE = os.getenv('FIRST_WORD_DATE', '2026-10-01')
    SCORING_API_URL = os.getenv('SCORING_API_URL', '')
    
    # Persistence Settings
    PERSISTENCE_BACKEND = os.getenv('PERSISTENCE_BACKEND', 'json')
    STATE_FILE = os.getenv('STATE_FILE', 'data/saved_games.json')
    MONGO_URI = os.getenv('MONGO_URI')
    
    # Engine Timing Settings
    SETTLE_DELAY_SECONDS = float(os.getenv('SETTLE_DELAY_SECONDS', SETTLE_DELAY_SECONDS))
    REVEAL_DELAY_PER_LETTER_SECONDS = float(
        os.getenv('REVEAL_DELAY_PER_LETTER_SECONDS', REVEAL_DELAY_PER_LETTER_SECONDS)
    )
    
    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    PERSISTENCE_BACKEND = os.getenv('PERSISTENCE_BACKEND', 'mongo')


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    PERSISTENCE_BACKEND = 'memory'
    SCORING_API_URL = ''
    SETTLE_DELAY_SECONDS = 0.0
    REVEAL_DELAY_PER_LETTER_SECONDS = 0.0


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
