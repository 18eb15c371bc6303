"""
Clinic Website - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

from flask import Flask

from clinic.config import Config
from clinic.extensions import db

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    configure_logging(app)

    # Initialize extensions
    db.init_app(app)

    # Register blueprints
    from clinic.auth import auth_bp
    from clinic.admin import admin_bp, admin_api_bp
    from clinic.site import site_bp

    app.register_blueprint(auth_bp, url_prefix='/api/admin/auth')
    app.register_blueprint(admin_bp, url_prefix=app.config['ADMIN_PREFIX'])
    app.register_blueprint(admin_api_bp, url_prefix='/api/admin')
    app.register_blueprint(site_bp)

    # Session guard for every /admin page
    from clinic.auth.guard import admin_session_guard
    app.before_request(admin_session_guard)

    from clinic.responses import register_error_handlers
    register_error_handlers(app)

    if not app.config.get('ADMIN_PIN'):
        logger.error('ADMIN_PIN is not set; admin login will always fail')

    # Create database tables
    with app.app_context():
        if app.config['SQLALCHEMY_DATABASE_URI'].startswith('sqlite:///') \
                and ':memory:' not in app.config['SQLALCHEMY_DATABASE_URI']:
            os.makedirs(os.path.join(config_class.basedir, 'instance'), exist_ok=True)
        db.create_all()
        _ensure_default_data()

    return app


def configure_logging(app):
    """Root logger setup, unless the host (gunicorn, pytest) already did it."""
    level = getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO)
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(
            level=level,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        )
    logging.getLogger('clinic').setLevel(level)


def _ensure_default_data():
    """Seed the price list on an empty database."""
    from clinic.models import Service

    if Service.query.first():
        return

    default_services = [
        {'name': 'Manual therapy', 'duration_minutes': 60, 'price_weekday': 200, 'price_weekend': 250, 'sort_order': 1},
        {'name': 'Therapeutic massage', 'duration_minutes': 60, 'price_weekday': 180, 'price_weekend': 220, 'sort_order': 2},
        {'name': 'Relaxing massage', 'duration_minutes': 90, 'price_weekday': 250, 'price_weekend': None, 'sort_order': 3},
        {'name': 'Consultation', 'duration_minutes': 30, 'price_weekday': 100, 'price_weekend': None, 'sort_order': 4},
    ]

    try:
        for data in default_services:
            db.session.add(Service(is_active=True, **data))
        db.session.commit()
        logger.info('Created default services')
    except Exception:
        db.session.rollback()
        logger.exception('Could not create default services')
