"""
Services Package

Exports all services for easy importing.
"""

from flask import current_app

from weblat.services.files import FileStore
from weblat.services.rendering import Renderer, VIEWS
from weblat.services.store import RecordStore


def get_store():
    """Record store of the current application."""
    return current_app.extensions['weblat.store']


def get_files():
    """File store of the current application."""
    return current_app.extensions['weblat.files']


def render(view_name, **view_model):
    """Render ``view_name`` with the application's view pool."""
    return current_app.extensions['weblat.renderer'].render(view_name, **view_model)


__all__ = [
    'FileStore',
    'Renderer',
    'RecordStore',
    'VIEWS',
    'get_store',
    'get_files',
    'render',
]
