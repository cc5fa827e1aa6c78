"""
Demo data for a fresh database.
"""

import logging

from blogapp.models import User
from blogapp.services import create_post, create_user

logger = logging.getLogger(__name__)

# (username, password, role)
DEMO_USERS = [
    ('admin', 'admin', 'admin'),
    ('stephen', 'stephen', 'user'),
    ('justin', 'justin', 'user'),
    ('drake', 'drake', 'user'),
]


def is_seeded():
    return User.query.first() is not None


def seed_demo_data():
    """Create the demo users and a first post by the first of them."""
    users = [create_user(username, password, role) for username, password, role in DEMO_USERS]
    create_post(users[0].id, 'Example Post')
    logger.info('Seeded %d demo users', len(users))
    return users
