"""
Logging configuration.

Session ids are bearer credentials, so console output passes through a
filter that masks token-like strings.
"""

import logging
import logging.config
import re

# secrets.token_urlsafe output and similar opaque tokens
TOKEN_PATTERN = re.compile(r'[A-Za-z0-9_\-]{32,}')


def _mask(value):
    if isinstance(value, str):
        return TOKEN_PATTERN.sub('****', value)
    return value


class SessionTokenFilter(logging.Filter):
    """Mask session ids and other long tokens in log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = _mask(str(record.msg))
        if isinstance(record.args, tuple):
            record.args = tuple(_mask(a) for a in record.args)
        if record.exc_info and not record.exc_text:
            # Formatter reuses exc_text instead of formatting exc_info again
            record.exc_text = logging.Formatter().formatException(record.exc_info)
        if record.exc_text:
            record.exc_text = _mask(record.exc_text)
        return True


def setup_logging(level: str = 'INFO') -> None:
    """Configure the ``blogapp`` logger hierarchy."""
    logging.config.dictConfig({
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'standard': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                'datefmt': '%Y-%m-%d %H:%M:%S',
            },
        },
        'filters': {
            'session_tokens': {
                '()': SessionTokenFilter,
            },
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': 'standard',
                'filters': ['session_tokens'],
            },
        },
        'loggers': {
            'blogapp': {
                'level': level,
                'handlers': ['console'],
            },
        },
    })
