"""
Auth Blueprint

Login and logout backed by the server-side session store.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from blogapp.auth import routes  # noqa: E402, F401
