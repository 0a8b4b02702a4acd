"""
Auth Routes

Role-based login redirects, registration and logout.
"""

import logging

from flask import request, redirect, url_for
from weblat.auth import auth_bp
from weblat.auth.session import clear_session
from weblat.errors import InvalidCredentials, InvalidRole
from weblat.services import get_store, render

logger = logging.getLogger(__name__)

HOME_BY_ROLE = {
    'admin': 'admin.home',
    'user': 'site.home',
}


@auth_bp.route('/', methods=['GET', 'POST'])
def login():
    """Login form; a successful submit redirects on role alone."""
    if request.method == 'POST':
        username = request.form.get('username', '')
        password = request.form.get('password', '')

        user = get_store().get_user_by_username(username)
        if user is None or user.password != password:
            raise InvalidCredentials(f'login failed for {username!r}')

        endpoint = HOME_BY_ROLE.get(user.role)
        if endpoint is None:
            raise InvalidRole(f'user {username!r} has role {user.role!r}')

        logger.info('User %s logged in as %s', username, user.role)
        return redirect(url_for(endpoint))

    return render('login')


@auth_bp.route('/register', methods=['GET', 'POST'])
def register():
    """User registration route"""
    if request.method == 'POST':
        username = request.form.get('username', '')
        get_store().create_user(
            name=request.form.get('name', ''),
            email=request.form.get('email', ''),
            username=username,
            password=request.form.get('password', ''),
            role='user',
        )
        logger.info('Registered user %s', username)
        return redirect(url_for('auth.login'))

    return render('register')


@auth_bp.route('/logout')
def logout():
    """Clear the session cookie and go back to the login form."""
    return clear_session(redirect(url_for('auth.login')))
