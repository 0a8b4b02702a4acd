"""
Models Package

Exports all models for easy importing.
"""

from weblat.models.user import User
from weblat.models.post import Post
from weblat.models.gallery import gallery, GalleryImage
from weblat.models.contact import ContactEntry

__all__ = ['User', 'Post', 'gallery', 'GalleryImage', 'ContactEntry']
