import pytest

from weblat import create_app
from weblat.config import TestConfig
from weblat.extensions import db


class ContextBound:
    """Calls methods of ``target`` inside a fresh app context each time.

    Requests made by the test client then push their own contexts, so
    neither ``g`` nor ``db.session`` is shared between requests.
    """

    def __init__(self, app, target):
        self._app = app
        self._target = target

    def __getattr__(self, name):
        attr = getattr(self._target, name)
        if not callable(attr):
            return attr

        def call(*args, **kwargs):
            with self._app.app_context():
                return attr(*args, **kwargs)
        return call


@pytest.fixture()
def app(tmp_path):
    class Config(TestConfig):
        UPLOAD_DIR = str(tmp_path / 'uploads')

    app = create_app(Config)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def store(app):
    return ContextBound(app, app.extensions['weblat.store'])


@pytest.fixture()
def files(app):
    return app.extensions['weblat.files']


@pytest.fixture()
def renderer(app):
    return app.extensions['weblat.renderer']
