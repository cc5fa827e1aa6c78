"""
Session Store Exceptions
"""


class SessionStorageError(Exception):
    """Raised when the session backend cannot be initialised, read or written."""
    pass
