"""
Admin Routes
"""

from flask import render_template
from flask_login import current_user

from blogapp.admin import admin_bp
from blogapp.auth.decorators import admin_required
from blogapp.services import list_posts, list_users


@admin_bp.route('/admin')
@admin_required
def admin_dashboard():
    """Admin overview: every user and the total post count."""
    return render_template('admin.html',
                           users=list_users(),
                           total_posts=len(list_posts()),
                           admin_username=current_user.username)
