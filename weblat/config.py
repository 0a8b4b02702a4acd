"""
Configuration settings for the weblat content-management backend
"""
import os

from sqlalchemy.engine import URL


def _database_uri(db_user, db_password, db_host, db_name):
    """Build the SQLAlchemy URI from the discrete database settings."""
    if db_host:
        url = URL.create('mysql+pymysql', username=db_user, password=db_password,
                         host=db_host, database=db_name)
        return url.render_as_string(hide_password=False)
    # Relative SQLite paths resolve inside the Flask instance folder
    return f'sqlite:///{db_name}.db'


class Config:
    """Flask application configuration"""

    # Flask secret key for sessions
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'

    # Flask's signed session must not collide with the `session` gate cookie
    SESSION_COOKIE_NAME = 'weblat_flask_session'

    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))

    # Database configuration
    DB_USER = os.environ.get('DB_USER') or 'root'
    DB_PASSWORD = os.environ.get('DB_PASSWORD', '')
    DB_NAME = os.environ.get('DB_NAME') or 'weblat'
    DB_HOST = os.environ.get('DB_HOST')
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        _database_uri(DB_USER, DB_PASSWORD, DB_HOST, DB_NAME)
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Server and uploads
    LISTEN_ADDR = os.environ.get('LISTEN_ADDR') or '0.0.0.0:8080'
    UPLOAD_DIR = os.environ.get('UPLOAD_DIR') or os.path.join(basedir, 'uploads')
    # 0 disables the cap
    MAX_CONTENT_LENGTH = int(os.environ.get('MAX_UPLOAD_BYTES') or 16 * 1024 * 1024) or None

    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    LOG_LEVEL = 'DEBUG'
