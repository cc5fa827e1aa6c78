"""
Blog Blueprint

Public pages, posting and the per-user profile.
"""

from flask import Blueprint

blog_bp = Blueprint('blog', __name__)

from blogapp.blog import routes  # noqa: E402, F401
