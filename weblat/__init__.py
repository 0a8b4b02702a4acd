"""
weblat - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

from flask import Flask
from jinja2 import StrictUndefined

from weblat.config import Config
from weblat.extensions import db, login_manager


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    # app.logger is the `weblat` logger, parent of every module logger
    app.logger.setLevel(app.config['LOG_LEVEL'])

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)

    from weblat.auth.session import load_session_user
    login_manager.request_loader(load_session_user)

    # Shared handles, built once and read-only afterwards
    from weblat.services import FileStore, RecordStore, Renderer
    app.jinja_env.undefined = StrictUndefined
    renderer = Renderer(app.jinja_env)
    renderer.load()
    app.extensions['weblat.renderer'] = renderer
    app.extensions['weblat.store'] = RecordStore(db.session)
    app.extensions['weblat.files'] = FileStore(app.config['UPLOAD_DIR'])

    # Register blueprints
    from weblat.auth import auth_bp
    from weblat.admin import admin_bp
    from weblat.site import site_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(admin_bp)
    app.register_blueprint(site_bp)

    from weblat.errors import register_error_handlers
    register_error_handlers(app)

    from weblat.commands import create_admin_command
    app.cli.add_command(create_admin_command)

    # Create database tables
    with app.app_context():
        db.create_all()

    return app
