"""
Sessions Package

Cookie-referenced server-side sessions. ``init_app`` builds the store from
the Flask config and runs its one-time backend setup.
"""

import logging

from flask import current_app

from blogapp.sessions.backends import MemoryBackend, SessionBackend, SQLBackend
from blogapp.sessions.exceptions import SessionStorageError
from blogapp.sessions.store import SessionCookie, SessionStore, find_session_id

logger = logging.getLogger(__name__)

__all__ = [
    'MemoryBackend',
    'SessionBackend',
    'SQLBackend',
    'SessionStorageError',
    'SessionCookie',
    'SessionStore',
    'find_session_id',
    'backend_from_config',
    'init_app',
    'get_session_store',
]


def backend_from_config(config):
    """Build the backend named by ``SESSION_STORE_BACKEND``."""
    kind = config.get('SESSION_STORE_BACKEND', 'sql')
    if kind == 'memory':
        return MemoryBackend()
    if kind == 'sql':
        return SQLBackend(config.get('SESSION_STORE_URI', 'sqlite://'))
    raise ValueError(f'Unknown session backend: {kind!r}')


def init_app(app, backend=None):
    """Create the app's SessionStore and initialise its backend.

    Initialisation errors propagate: an app without session storage must not start.
    """
    if backend is None:
        backend = backend_from_config(app.config)
    store = SessionStore(backend, app.config['SESSION_STORE_COOKIE_NAME'])
    try:
        store.init()
    except SessionStorageError:
        logger.error('Session storage could not be initialised')
        raise
    app.extensions['session_store'] = store
    return store


def get_session_store() -> SessionStore:
    return current_app.extensions['session_store']
