"""
Session Storage Backends

A backend stores raw session values (JSON text) under string keys.
Encoding and cookie handling belong to SessionStore; backends only move strings.
"""

import logging
from abc import ABC, abstractmethod
from threading import Lock
from typing import Dict, Optional

from sqlalchemy import Column, MetaData, String, Table, Text, create_engine, delete, insert, select, update
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool

from blogapp.sessions.exceptions import SessionStorageError

logger = logging.getLogger(__name__)

# Kept off db.Model so db.create_all() never creates it; SQLBackend.init() owns it.
metadata = MetaData()

sessions_table = Table(
    'sessions',
    metadata,
    Column('key', String(128), primary_key=True),
    Column('value', Text, nullable=False),
)


class SessionBackend(ABC):
    """Key/value storage for session records."""

    @abstractmethod
    def init(self) -> None:
        """Create the storage structure. Raises SessionStorageError if it already exists."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None if there is no record for ``key``."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Insert or overwrite the record for ``key``."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove the record for ``key``. Missing keys are ignored."""

    def close(self) -> None:
        """Release any resources held by the backend."""


class MemoryBackend(SessionBackend):
    """Process-local dict backend."""

    def __init__(self):
        self._data: Optional[Dict[str, str]] = None
        self._lock = Lock()

    def init(self) -> None:
        with self._lock:
            if self._data is not None:
                raise SessionStorageError('Session storage is already initialised')
            self._data = {}

    def _records(self) -> Dict[str, str]:
        # caller holds self._lock
        if self._data is None:
            raise SessionStorageError('Session storage has not been initialised')
        return self._data

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._records().get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._records()[key] = value

    def delete(self, key: str) -> None:
        with self._lock:
            self._records().pop(key, None)

    def close(self) -> None:
        with self._lock:
            self._data = None


def _create_engine(uri):
    # bound parameters include session ids; keep them out of error messages
    url = make_url(uri)
    if url.get_backend_name() == 'sqlite' and url.database in (None, '', ':memory:'):
        # One shared connection, otherwise every checkout sees a fresh empty database
        return create_engine(url, poolclass=StaticPool, connect_args={'check_same_thread': False},
                             hide_parameters=True)
    return create_engine(url, hide_parameters=True)


class SQLBackend(SessionBackend):
    """SQLAlchemy Core backend over a two-column ``sessions`` table.

    Any database URL SQLAlchemy understands works; the default is an
    in-memory SQLite database that lives as long as the process.
    """

    def __init__(self, uri: str = 'sqlite://', engine=None):
        if engine is None:
            engine = _create_engine(uri)
        engine.hide_parameters = True
        self.engine = engine
        self._lock = Lock()

    def init(self) -> None:
        try:
            with self._lock:
                sessions_table.create(bind=self.engine)
        except SQLAlchemyError as e:
            raise SessionStorageError(f'Could not create session table: {e}') from e
        logger.debug('Session table created on %s', self.engine.url.render_as_string(hide_password=True))

    def get(self, key: str) -> Optional[str]:
        stmt = select(sessions_table.c.value).where(sessions_table.c.key == key)
        try:
            with self._lock, self.engine.connect() as conn:
                return conn.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as e:
            raise SessionStorageError(f'Session lookup failed: {e}') from e

    def set(self, key: str, value: str) -> None:
        try:
            with self._lock, self.engine.begin() as conn:
                result = conn.execute(
                    update(sessions_table)
                    .where(sessions_table.c.key == key)
                    .values(value=value)
                )
                if result.rowcount == 0:
                    conn.execute(insert(sessions_table).values(key=key, value=value))
        except SQLAlchemyError as e:
            raise SessionStorageError(f'Session write failed: {e}') from e

    def delete(self, key: str) -> None:
        try:
            with self._lock, self.engine.begin() as conn:
                conn.execute(delete(sessions_table).where(sessions_table.c.key == key))
        except SQLAlchemyError as e:
            raise SessionStorageError(f'Session delete failed: {e}') from e

    def close(self) -> None:
        self.engine.dispose()
