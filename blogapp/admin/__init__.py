"""
Admin Blueprint

Pages restricted to sessions whose user has the admin role.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from blogapp.admin import routes  # noqa: E402, F401
