"""
Flask Extensions

Flask-Login only resolves ``current_user``: identity comes from the
server-side session store through a request loader, never from
Flask's signed cookie session.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Database instance
db = SQLAlchemy()

# Login manager; the request loader is registered in create_app
login_manager = LoginManager()
