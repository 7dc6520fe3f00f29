import os
import logging
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)


def _env_int(name, default):
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_float(name, default):
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return default


class Config:
    """Base configuration"""
    # Security - MUST be set in environment
    SECRET_KEY = os.environ.get('SECRET_KEY')

    # Debug mode - default to False for safety
    DEBUG = os.environ.get('DEBUG', 'False').lower() == 'true'
    TESTING = False

    # MongoDB Configuration - MUST be set in environment
    MONGO_URI = os.environ.get('MONGO_URI')
    MONGO_DB_NAME = os.environ.get('MONGO_DB_NAME', 'psychometric_assessment')

    # Session configuration
    SESSION_PERMANENT = False

    # Backend the test-taking client talks to
    API_BASE_URL = os.environ.get('API_BASE_URL', 'http://127.0.0.1:5000/api')
    REQUEST_TIMEOUT_SECONDS = _env_float('REQUEST_TIMEOUT_SECONDS', 15.0)

    # Autosave and submission retry
    AUTOSAVE_INTERVAL_SECONDS = _env_float('AUTOSAVE_INTERVAL_SECONDS', 30.0)
    SUBMIT_MAX_ATTEMPTS = _env_int('SUBMIT_MAX_ATTEMPTS', 3)
    SUBMIT_RETRY_DELAY_SECONDS = _env_float('SUBMIT_RETRY_DELAY_SECONDS', 2.0)

    # History and scoring thresholds
    HISTORY_DEFAULT_LIMIT = _env_int('HISTORY_DEFAULT_LIMIT', 10)
    SKILL_DEVELOPMENT_THRESHOLD = 3.5

    # Comma separated user ids allowed to read platform stats
    ADMIN_USER_IDS = [
        uid.strip() for uid in os.environ.get('ADMIN_USER_IDS', '').split(',') if uid.strip()
    ]

    # Configuration validation
    @classmethod
    def validate(cls):
        """Validate that all required environment variables are set"""
        errors = []

        # Check required variables
        if not cls.MONGO_URI:
            errors.append("MONGO_URI is not set in environment variables")
        if not cls.SECRET_KEY:
            errors.append("SECRET_KEY is not set in environment variables")

        # Warn about default values
        if cls.DEBUG:
            logger.warning("⚠️ WARNING: Debug mode is enabled. Disable in production!")

        if errors:
            error_msg = "\n".join(errors)
            raise ValueError(f"Configuration validation failed:\n{error_msg}")

        return True


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    SESSION_COOKIE_SECURE = True
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    PERMANENT_SESSION_LIFETIME = 1800


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True


class TestingConfig(Config):
    """Configuration used by the test suite (no database required)"""
    TESTING = True
    DEBUG = False
    SECRET_KEY = 'testing-secret'
    MONGO_URI = 'mongodb://localhost:27017'
    AUTOSAVE_INTERVAL_SECONDS = 0.05
    SUBMIT_RETRY_DELAY_SECONDS = 0.0


# Determine which configuration to use based on environment
def get_config(env=None):
    """Get the appropriate configuration based on environment"""
    env = env or os.environ.get('FLASK_ENV', 'development')

    config_map = {
        'development': DevelopmentConfig,
        'production': ProductionConfig,
        'testing': TestingConfig,
        'default': DevelopmentConfig
    }

    config_class = config_map.get(env, config_map['default'])

    # Validate configuration
    try:
        config_class.validate()
        return config_class
    except ValueError as e:
        logger.error(f"❌ Configuration Error: {e}")
        logger.error("💡 Make sure you have a .env file with all required variables")
        raise
