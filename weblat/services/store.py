"""
Record Store

Typed accessors over the users, posts, gallery and contact_entries tables.
Every statement goes through SQLAlchemy, so values are always bound
parameters. Each mutation is a single statement committed on its own.
"""

import logging
from contextlib import contextmanager

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import SQLAlchemyError

from weblat.errors import RecordNotFound, StoreError
from weblat.models import ContactEntry, Post, User, gallery

logger = logging.getLogger(__name__)


def _as_id(value):
    """Coerce a form/query id; None when it cannot name any row."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class RecordStore:
    """One method per (entity, verb) pair, bound to a SQLAlchemy session."""

    def __init__(self, session):
        self.session = session

    @contextmanager
    def _reading(self, action):
        try:
            yield
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StoreError(f'{action} failed: {exc}') from exc

    @contextmanager
    def _writing(self, action):
        try:
            yield
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StoreError(f'{action} failed: {exc}') from exc
        logger.debug('%s committed', action)

    # -------------------------------------------------------------------
    # Posts
    # -------------------------------------------------------------------

    def list_posts(self):
        with self._reading('list posts'):
            return self.session.query(Post).order_by(Post.id).all()

    def create_post(self, title, content):
        with self._writing('create post'):
            self.session.add(Post(title=title, content=content))

    def get_post(self, post_id):
        """Return the post with ``post_id`` or raise RecordNotFound."""
        pid = _as_id(post_id)
        if pid is None:
            raise RecordNotFound(f'post {post_id!r} not found')
        with self._reading('get post'):
            post = self.session.get(Post, pid)
        if post is None:
            raise RecordNotFound(f'post {post_id!r} not found')
        return post

    def update_post(self, post_id, title, content):
        """Update in place. A missing id affects zero rows and is not an error."""
        pid = _as_id(post_id)
        if pid is None:
            return
        with self._writing('update post'):
            self.session.query(Post).filter_by(id=pid).update(
                {'title': title, 'content': content}, synchronize_session=False)

    def delete_post(self, post_id):
        """Delete by id. A missing id affects zero rows and is not an error."""
        pid = _as_id(post_id)
        if pid is None:
            return
        with self._writing('delete post'):
            self.session.query(Post).filter_by(id=pid).delete(synchronize_session=False)

    # -------------------------------------------------------------------
    # Gallery
    # -------------------------------------------------------------------

    def list_images(self):
        with self._reading('list images'):
            return list(self.session.execute(select(gallery.c.imageURL)).scalars())

    def create_image(self, locator):
        with self._writing('create image'):
            self.session.execute(insert(gallery).values(imageURL=locator))

    def delete_image(self, locator):
        # Removes the row(s) only; the file stays where the File Store put it
        with self._writing('delete image'):
            self.session.execute(delete(gallery).where(gallery.c.imageURL == locator))

    # -------------------------------------------------------------------
    # Contact entries
    # -------------------------------------------------------------------

    def list_contact_entries(self):
        with self._reading('list contact entries'):
            return self.session.query(ContactEntry).order_by(ContactEntry.id).all()

    def create_contact_entry(self, name, email, message):
        with self._writing('create contact entry'):
            self.session.add(ContactEntry(name=name, email=email, message=message))

    # -------------------------------------------------------------------
    # Users
    # -------------------------------------------------------------------

    def create_user(self, name, email, username, password, role):
        with self._writing('create user'):
            self.session.add(User(name=name, email=email, username=username,
                                  password=password, role=role))

    def get_user_by_username(self, username):
        """Return the matching user, or None when no row matches."""
        with self._reading('get user'):
            return self.session.query(User).filter_by(username=username).one_or_none()
