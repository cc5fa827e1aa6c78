"""
Auth Routes

Login issues a session cookie; logout deletes the server-side record.
"""

import logging

from flask import current_app, flash, redirect, render_template, request, url_for
from flask_login import current_user

from blogapp.auth import auth_bp
from blogapp.auth.identity import SessionUser
from blogapp.services import find_user_by_name, verify_password
from blogapp.sessions import SessionStorageError, get_session_store

logger = logging.getLogger(__name__)


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """User login route"""
    if request.method == 'GET':
        if current_user.is_authenticated:
            return redirect(url_for('blog.blog'))
        return render_template('login.html')

    username = request.form.get('username', '').strip()
    password = request.form.get('password', '')

    if not username or not password:
        flash('Please provide both username and password.', 'danger')
        return render_template('login.html'), 400

    user = find_user_by_name(username)

    if user is None or not verify_password(password, user.password_hash):
        logger.info('Failed login attempt for %r', username)
        flash('Invalid username or password. Please try again.', 'danger')
        return redirect(url_for('auth.login'))

    try:
        cookie = get_session_store().create_session(SessionUser.from_user(user).to_payload())
    except SessionStorageError:
        logger.exception('Could not create session for %s', user.username)
        flash('Login is temporarily unavailable. Please try again later.', 'danger')
        return render_template('login.html'), 503

    response = redirect(url_for('blog.blog'))
    cookie.apply(response)
    logger.info('User %s logged in', user.username)
    return response


@auth_bp.route('/logout')
def logout():
    """User logout route"""
    store = get_session_store()
    try:
        store.end_session(request)
    except SessionStorageError:
        logger.exception('Could not end session')

    response = redirect(url_for('blog.index'))
    if current_app.config.get('SESSION_STORE_CLEAR_COOKIE_ON_LOGOUT'):
        store.clear_cookie(response)
    return response
