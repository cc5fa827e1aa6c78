"""
User Directory Service

User lookup and password verification used by the login flow.
"""

import logging

from flask import current_app
from werkzeug.security import check_password_hash, generate_password_hash

from blogapp.extensions import db
from blogapp.models import ROLES, User

logger = logging.getLogger(__name__)


def create_user(username, password, role='user'):
    """Create and commit a user with a hashed password."""
    if role not in ROLES:
        raise ValueError(f'Unknown role: {role!r}')

    method = current_app.config.get('PASSWORD_HASH_METHOD', 'pbkdf2:sha256')
    user = User(username=username, password_hash=generate_password_hash(password, method=method), role=role)
    try:
        db.session.add(user)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    logger.debug('Created user %s (%s)', username, role)
    return user


def find_user_by_id(user_id):
    return db.session.get(User, user_id)


def find_user_by_name(username):
    return User.query.filter_by(username=username).first()


def list_users():
    return User.query.order_by(User.id).all()


def verify_password(plaintext, password_hash):
    """Check ``plaintext`` against a werkzeug password hash."""
    return check_password_hash(password_hash, plaintext)


def set_role(user, role):
    """Change a user's role.

    Existing sessions keep the role they were created with until the
    user logs in again.
    """
    if role not in ROLES:
        raise ValueError(f'Unknown role: {role!r}')
    user.role = role
    try:
        db.session.add(user)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    return user
