"""
Testing configuration for the FreshClean backend
"""
import os
from config.settings import Config


class TestingConfig(Config):
    """Testing configuration with isolated database and safe defaults"""

    TESTING = True
    DEBUG = False

    # Use in-memory SQLite for fast tests
    SQLALCHEMY_DATABASE_URI = os.getenv(
        'TEST_DATABASE_URL',
        'sqlite:///:memory:'
    )

    JWT_SECRET_KEY = 'test-jwt-secret'

    # Disable rate limiting in tests
    RATELIMIT_ENABLED = False
    RATELIMIT_STORAGE_URI = 'memory://'

    # Logging
    LOG_LEVEL = 'WARNING'

    CORS_ORIGINS = ['http://localhost:5500']
