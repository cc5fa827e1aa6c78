"""
Configuration settings for the blog application
"""
import os


class Config:
    """Flask application configuration"""

    # Flask secret key (flash messages only; authentication uses SESSION_STORE_*)
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'

    # Application database (users and posts)
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'blog.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Server-side session store. The default in-memory database is emptied on restart.
    SESSION_STORE_BACKEND = os.environ.get('SESSION_STORE_BACKEND') or 'sql'
    SESSION_STORE_URI = os.environ.get('SESSION_STORE_URI') or 'sqlite://'
    SESSION_STORE_COOKIE_NAME = os.environ.get('SESSION_STORE_COOKIE_NAME') or 'OWASP'
    # Also expire the client cookie on logout (the session row is always deleted)
    SESSION_STORE_CLEAR_COOKIE_ON_LOGOUT = os.environ.get('SESSION_STORE_CLEAR_COOKIE_ON_LOGOUT', '').lower() in ('1', 'true', 'yes')

    # werkzeug.security hashing method for new users
    PASSWORD_HASH_METHOD = 'pbkdf2:sha256'

    # Application settings
    SEED_DEMO_DATA = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SESSION_STORE_BACKEND = 'sql'
    SESSION_STORE_URI = 'sqlite://'
    SESSION_STORE_COOKIE_NAME = 'sid'
    SESSION_STORE_CLEAR_COOKIE_ON_LOGOUT = False
    PASSWORD_HASH_METHOD = 'pbkdf2:sha256:1000'
