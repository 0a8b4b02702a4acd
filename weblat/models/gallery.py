"""
Gallery Table

The gallery has no key of its own: rows are identified by their locator
and the same locator may appear more than once.
"""

import posixpath

from weblat.extensions import db

gallery = db.Table(
    'gallery',
    db.Column('imageURL', db.String(512), nullable=False),
)


class GalleryImage:
    """Read-only view of one gallery row."""

    def __init__(self, url):
        self.url = url

    @property
    def filename(self):
        return posixpath.basename(self.url)

    def __repr__(self):
        return f'<GalleryImage {self.url}>'
