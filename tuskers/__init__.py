"""Application factory for the Tuskers Cricket Club API."""

from __future__ import annotations

from flask import Flask

from tuskers.auth import init_auth
from tuskers.blueprints import admin_bp, auth_bp, content_bp, registration_bp, social_bp
from tuskers.blueprints.common import register_converters
from tuskers.config import Config
from tuskers.errors import register_error_handlers
from tuskers.extensions import db, migrate
from tuskers.security import configure_security_headers, validate_input_length


def create_app(config_class=Config):
    """Create Flask application."""
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize Flask extensions
    db.init_app(app)
    migrate.init_app(app, db)
    init_auth(app)

    # Configure security
    configure_security_headers(app)
    validate_input_length(app)
    register_error_handlers(app)

    # Ensure models are registered for migrations
    import tuskers.models  # noqa: F401

    # Register blueprints
    register_converters(app)
    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(admin_bp, url_prefix='/api/admin')
    app.register_blueprint(content_bp, url_prefix='/api')
    app.register_blueprint(social_bp, url_prefix='/api')
    app.register_blueprint(registration_bp, url_prefix='/api')

    if app.config.get('AUTO_CREATE_TABLES'):
        with app.app_context():
            db.create_all()
        app.logger.info("Created missing tables (AUTO_CREATE_TABLES)")

    # Register CLI commands
    from tuskers.commands import register_commands
    register_commands(app)

    return app


__all__ = ['create_app']
