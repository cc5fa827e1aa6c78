"""
Session Store

Server-side sessions referenced by a bearer cookie. The cookie carries only
the session id; the payload is kept in the backend as JSON text.

There is no expiry and no id rotation: a session lasts until logout or
until the backend is emptied (process restart for the in-memory default).
"""

import json
import logging
import secrets
from typing import Any, Optional

from blogapp.sessions.backends import SessionBackend
from blogapp.sessions.exceptions import SessionStorageError

logger = logging.getLogger(__name__)

COOKIE_ATTRIBUTES = 'SameSite=None; Secure'

# 32 random bytes, 256 bits
SESSION_ID_BYTES = 32


def new_session_id() -> str:
    return secrets.token_urlsafe(SESSION_ID_BYTES)


def find_session_id(cookie_header: Optional[str], cookie_name: str) -> Optional[str]:
    """Return the value of the first ``cookie_name`` pair in a Cookie header.

    Pairs are separated by ``"; "`` and split on their first ``=``. A matching
    pair without a value is logged and treated as no cookie at all.
    """
    if not cookie_header:
        return None

    for pair in cookie_header.split('; '):
        name, sep, value = pair.partition('=')
        if name != cookie_name:
            continue
        if not sep or not value:
            logger.warning('Malformed session cookie %r', pair)
            return None
        return value

    return None


class SessionCookie:
    """Set-Cookie directive produced when a session is created."""

    def __init__(self, name: str, session_id: str):
        self.name = name
        self.session_id = session_id

    @property
    def header_value(self) -> str:
        return f'{self.name}={self.session_id}; {COOKIE_ATTRIBUTES}'

    def apply(self, response):
        """Append a Set-Cookie header to ``response``; existing headers are kept."""
        response.headers.add('Set-Cookie', self.header_value)
        return response

    def __repr__(self):
        return f'<SessionCookie {self.name}>'


class SessionStore:
    """Maps requests to server-side session payloads through a bearer cookie.

    Args:
        backend: storage for the session records
        cookie_name: name of the cookie holding the session id

    Cookie problems (missing header, other cookie names, malformed value,
    unknown id) resolve to ``None``. Backend failures raise
    SessionStorageError; callers deciding authentication must treat that
    as "not logged in".
    """

    def __init__(self, backend: SessionBackend, cookie_name: str):
        self.backend = backend
        self.cookie_name = cookie_name

    def init(self) -> None:
        self.backend.init()

    def close(self) -> None:
        self.backend.close()

    def create_session(self, payload: Any) -> SessionCookie:
        """Persist ``payload`` under a new random id and return its cookie."""
        value = json.dumps(payload)
        session_id = new_session_id()
        self.backend.set(session_id, value)
        logger.info('Session created')
        return SessionCookie(self.cookie_name, session_id)

    def get_session_by_id(self, session_id: str) -> Optional[Any]:
        raw = self.backend.get(session_id)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError as e:
            raise SessionStorageError('Stored session payload is not valid JSON') from e

    def get_session_from_cookie(self, request) -> Optional[Any]:
        session_id = find_session_id(request.headers.get('Cookie'), self.cookie_name)
        if session_id is None:
            return None
        return self.get_session_by_id(session_id)

    def end_session(self, request) -> None:
        """Delete the session named by the request cookie, if any.

        Server-side only: the client keeps its cookie unless the caller
        also uses clear_cookie().
        """
        session_id = find_session_id(request.headers.get('Cookie'), self.cookie_name)
        if session_id is None:
            return
        self.backend.delete(session_id)
        logger.info('Session ended')

    def clear_cookie(self, response):
        """Append a Set-Cookie header that expires the session cookie."""
        response.headers.add('Set-Cookie', f'{self.cookie_name}=; Max-Age=0; {COOKIE_ATTRIBUTES}')
        return response
