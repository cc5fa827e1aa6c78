"""
Blog - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import os

from flask import Flask, render_template
from sqlalchemy.engine import make_url

from blogapp import sessions
from blogapp.config import Config
from blogapp.extensions import db, login_manager
from blogapp.logging_config import setup_logging


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance

    Raises:
        SessionStorageError: if the session store cannot be initialised
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    setup_logging(app.config.get('LOG_LEVEL', 'INFO'))

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    login_manager.login_view = 'auth.login'
    # Identity comes only from the session store, not Flask's cookie session
    login_manager.session_protection = None

    from blogapp.auth.identity import load_user_from_request
    login_manager.request_loader(load_user_from_request)

    sessions.init_app(app)

    # Register blueprints
    from blogapp.auth import auth_bp
    from blogapp.blog import blog_bp
    from blogapp.admin import admin_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(blog_bp)
    app.register_blueprint(admin_bp)

    @app.errorhandler(403)
    def forbidden(error):
        return render_template('error.html', code=403, message='You are not allowed to view this page.'), 403

    @app.errorhandler(404)
    def not_found(error):
        return render_template('error.html', code=404, message='Page not found.'), 404

    # Create database tables
    with app.app_context():
        _ensure_database_dir(app.config['SQLALCHEMY_DATABASE_URI'])
        db.create_all()
        _ensure_default_data(app)

    return app


def _ensure_database_dir(uri):
    url = make_url(uri)
    if url.get_backend_name() == 'sqlite' and url.database not in (None, '', ':memory:'):
        os.makedirs(os.path.dirname(os.path.abspath(url.database)), exist_ok=True)


def _ensure_default_data(app):
    """Seed demo users and a post into an empty database."""
    from blogapp.seed import is_seeded, seed_demo_data

    if app.config.get('SEED_DEMO_DATA') and not is_seeded():
        seed_demo_data()
