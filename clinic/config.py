"""
Configuration settings for the clinic website
"""
import os


def _is_production():
    env = os.environ.get('APP_ENV') or os.environ.get('FLASK_ENV') or 'development'
    return env.strip().lower() == 'production'


class Config:
    """Flask application configuration"""

    # Flask secret key for sessions
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'

    # Database configuration
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'clinic.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'

    # Toggles the `secure` flag on the admin cookie
    IS_PRODUCTION = _is_production()

    # ---------------------------------------------------------------------
    # Admin PIN gate
    # The cookie value is a fixed sentinel, not a per-user token.
    # ---------------------------------------------------------------------
    ADMIN_PIN = os.environ.get('ADMIN_PIN')
    ADMIN_COOKIE_NAME = 'admin_session'
    ADMIN_COOKIE_VALUE = 'authenticated'
    ADMIN_COOKIE_MAX_AGE = 60 * 60 * 24 * 7  # 7 days

    ADMIN_PREFIX = '/admin'
    ADMIN_LOGIN_PATH = '/admin/login'

    # Bookings
    MIN_PRICE_PLN = 50


class ProductionConfig(Config):
    """Production configuration"""
    IS_PRODUCTION = True


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    IS_PRODUCTION = False
    ADMIN_PIN = '2468'
