"""
Configuration settings for different environments
"""
import os
import logging
from datetime import timedelta

from dotenv import load_dotenv

load_dotenv()


def _require_in_production(var_name, default):
    """Return env var value. Outside development, warn loudly if still using default."""
    value = os.environ.get(var_name, '')
    if value:
        return value
    env = os.environ.get('FLASK_ENV', 'development')
    if env not in ('development', 'testing'):
        logging.getLogger(__name__).warning(
            "%s is using an insecure default. Set it via environment variable!", var_name
        )
    return default


def _database_url(default):
    """Read DATABASE_URL, fixing postgres:// to postgresql:// for SQLAlchemy 2.x"""
    url = os.environ.get('DATABASE_URL', '')
    if not url:
        return default
    if url.startswith('postgres://'):
        url = url.replace('postgres://', 'postgresql://', 1)
    return url


class Config:
    """Base configuration"""
    SECRET_KEY = _require_in_production('SECRET_KEY', 'dev-secret-key-change-in-production')

    # Database
    SQLALCHEMY_DATABASE_URI = _database_url('sqlite:///freshclean.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # JWT Authentication
    JWT_SECRET_KEY = _require_in_production('JWT_SECRET', 'freshclean-secret-key')
    JWT_ALGORITHM = 'HS256'
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(days=7)

    # CORS - the static frontend is served from a local dev server by default
    CORS_ORIGINS = os.environ.get(
        'CORS_ORIGINS', 'http://127.0.0.1:5500,http://localhost:5500'
    ).split(',')

    API_PREFIX = '/api'

    # Wallet
    WALLET_STARTING_BALANCE = 500
    WALLET_TOPUP_MIN = 100
    WALLET_TOPUP_MAX = 10000

    # Listing limits
    TRANSACTIONS_LIMIT = 10
    FEEDBACK_LIMIT = 20

    # Rate limiting (Redis when available, otherwise in-memory)
    RATELIMIT_ENABLED = True
    RATELIMIT_STORAGE_URI = os.environ.get('REDIS_URL') or 'memory://'
    AUTH_RATE_LIMIT = os.environ.get('AUTH_RATE_LIMIT', '20 per minute')
    RATELIMIT_HEADERS_ENABLED = True

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False

    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_recycle': 3600,
        'pool_pre_ping': True,
    }
