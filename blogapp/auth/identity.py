"""
Session Identity

Builds Flask-Login's ``current_user`` from the session payload. The payload
holds a copy of the user row taken at login, so later changes to the row
(role, deletion) are not seen by sessions that already exist.
"""

import logging

from flask_login import UserMixin

from blogapp.sessions import SessionStorageError, get_session_store

logger = logging.getLogger(__name__)


class SessionUser(UserMixin):
    """The authenticated user as recorded in the session payload."""

    def __init__(self, id, username, role='user', password_hash=None):
        self.id = id
        self.username = username
        self.role = role
        self.password_hash = password_hash

    @property
    def is_admin(self):
        return self.role == 'admin'

    @classmethod
    def from_user(cls, user):
        return cls(id=user.id, username=user.username, role=user.role, password_hash=user.password_hash)

    @classmethod
    def from_payload(cls, payload):
        """Rebuild from a stored payload; None if it has no usable user record."""
        user = payload.get('user') if isinstance(payload, dict) else None
        if not isinstance(user, dict):
            return None
        try:
            return cls(
                id=int(user['id']),
                username=str(user['username']),
                role=user.get('role', 'user'),
                password_hash=user.get('password_hash'),
            )
        except (KeyError, TypeError, ValueError):
            return None

    def to_payload(self):
        return {
            'user': {
                'id': self.id,
                'username': self.username,
                'password_hash': self.password_hash,
                'role': self.role,
            }
        }

    def __repr__(self):
        return f'<SessionUser {self.username}>'


def load_user_from_request(request):
    """Flask-Login request loader.

    Fails closed: a storage error or an unusable payload gives an
    anonymous request, never an authenticated one.
    """
    try:
        payload = get_session_store().get_session_from_cookie(request)
    except SessionStorageError:
        logger.exception('Session lookup failed, treating request as anonymous')
        return None

    if payload is None:
        return None

    user = SessionUser.from_payload(payload)
    if user is None:
        logger.warning('Session payload has no usable user record')
    return user
