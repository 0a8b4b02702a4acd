"""
Session Gate

A request is authenticated only when it carries the cookie
``session=authenticated``. Nothing in the login flow sets that cookie, so
the gate stays closed for every client that did not forge it.
"""

from functools import wraps

from flask import redirect, url_for
from flask_login import UserMixin, current_user

SESSION_COOKIE = 'session'
AUTHENTICATED_MARKER = 'authenticated'


class SessionUser(UserMixin):
    """Anonymous identity granted by the cookie marker."""

    def get_id(self):
        return AUTHENTICATED_MARKER


def is_authenticated(request):
    return request.cookies.get(SESSION_COOKIE) == AUTHENTICATED_MARKER


def load_session_user(request):
    """Flask-Login request loader."""
    if is_authenticated(request):
        return SessionUser()
    return None


def clear_session(response):
    """Empty the gate cookie and expire it immediately."""
    response.delete_cookie(SESSION_COOKIE, path='/')
    return response


def session_required(f):
    """Decorator to send requests without the session marker to the login form.

    No route uses it: login never sets the marker, so any view wrapped by
    this decorator would be unreachable.
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        if not current_user.is_authenticated:
            return redirect(url_for('auth.login'))
        return f(*args, **kwargs)
    return wrapper
