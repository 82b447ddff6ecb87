import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    """Base configuration shared across all environments."""
    # Seed the rule registry with the A/B/C/D catalog at startup
    CHECKOUT_SEED_DEFAULT_RULES = True

    # Value for Access-Control-Allow-Origin on every response
    CORS_ALLOW_ORIGIN = os.environ.get('CORS_ALLOW_ORIGIN', '*')

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_TO_FILE = True

class DevelopmentConfig(Config):
    """Development environment configuration."""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')

class ProductionConfig(Config):
    """Production environment configuration."""
    DEBUG = False

    # Containers often mount the app read-only; stdout is enough there
    LOG_TO_FILE = os.environ.get('LOG_TO_FILE', 'True').lower() == 'true'


class TestingConfig(Config):
    """Testing environment configuration."""
    TESTING = True
    LOG_TO_FILE = False

config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
