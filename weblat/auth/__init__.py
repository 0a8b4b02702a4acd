"""
Auth Blueprint

Login, registration and logout. Passwords are stored and compared as
submitted, and no route issues the session marker.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from weblat.auth import routes  # noqa: E402, F401
