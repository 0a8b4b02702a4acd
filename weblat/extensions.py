"""
Flask Extensions

The login manager only carries the cookie-marker session gate; nothing in
the login flow issues that marker.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Database instance
db = SQLAlchemy()

# Login manager backing the session gate
login_manager = LoginManager()
