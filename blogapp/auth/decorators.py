"""
Authorization Decorators
"""

from functools import wraps

from flask import abort
from flask_login import current_user

from blogapp.extensions import login_manager


def admin_required(f):
    """Decorator to ensure the request comes from a session with the admin role.

    Anonymous requests get the login manager's unauthorized response
    (redirect to the login page); authenticated non-admins get 403.
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        if not current_user.is_authenticated:
            return login_manager.unauthorized()
        if not current_user.is_admin:
            abort(403)
        return f(*args, **kwargs)
    return wrapper
