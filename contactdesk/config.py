"""Flask configuration."""

import os
from urllib.parse import quote_plus

from dotenv import load_dotenv

load_dotenv()


def _database_uri():
    """Build the database URI from DATABASE_URL or the DB_* parts."""
    if os.environ.get('DATABASE_URL'):
        return os.environ['DATABASE_URL']
    if os.environ.get('DB_HOST'):
        return 'mysql+pymysql://{user}:{password}@{host}:{port}/{name}'.format(
            user=quote_plus(os.environ.get('DB_USER', '')),
            password=quote_plus(os.environ.get('DB_PASSWORD', '')),
            host=os.environ['DB_HOST'],
            port=os.environ.get('DB_PORT', 3306),
            name=os.environ.get('DB_NAME', 'contactdesk'),
        )
    # Relative SQLite paths resolve inside the Flask instance folder
    return 'sqlite:///contactdesk.db'


def engine_options(uri, pool_size, pool_timeout, query_timeout):
    """Pool and timeout settings for SQLAlchemy's create_engine."""
    if uri.startswith('sqlite'):
        # SQLite ignores network timeouts; only the busy timeout applies
        options = {'connect_args': {'timeout': query_timeout}}
        if ':memory:' not in uri and uri.rstrip('/') != 'sqlite:':
            # In-memory databases get a single shared connection instead
            options.update(pool_size=pool_size, max_overflow=0, pool_timeout=pool_timeout)
        return options
    options = {
        'pool_size': pool_size,
        'max_overflow': 0,
        'pool_timeout': pool_timeout,
        'pool_pre_ping': True,
        'pool_recycle': 3600,
    }
    if uri.startswith('mysql+pymysql'):
        options['connect_args'] = {
            'connect_timeout': query_timeout,
            'read_timeout': query_timeout,
            'write_timeout': query_timeout,
        }
    return options


class Config:
    """Base configuration."""
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'

    # Database
    DB_POOL_SIZE = int(os.environ.get('DB_POOL_SIZE', 10))
    DB_POOL_TIMEOUT = int(os.environ.get('DB_POOL_TIMEOUT', 10))  # seconds
    DB_QUERY_TIMEOUT = int(os.environ.get('DB_QUERY_TIMEOUT', 10))  # seconds
    SQLALCHEMY_DATABASE_URI = _database_uri()
    SQLALCHEMY_ENGINE_OPTIONS = engine_options(
        SQLALCHEMY_DATABASE_URI, DB_POOL_SIZE, DB_POOL_TIMEOUT, DB_QUERY_TIMEOUT)
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # HTTP
    API_PREFIX = os.environ.get('API_PREFIX', '/api')
    FRONTEND_URL = os.environ.get('FRONTEND_URL', '*')
    MAX_CONTENT_LENGTH = 64 * 1024  # contact payloads are small

    # Validation
    MESSAGE_MIN_LENGTH = int(os.environ.get('MESSAGE_MIN_LENGTH', 10))

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_DIR = os.environ.get('LOG_DIR')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    SQLALCHEMY_ECHO = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    LOG_LEVEL = 'WARNING'
    LOG_DIR = None


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
