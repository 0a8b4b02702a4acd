"""
Error taxonomy and the plain-text responses it maps to.
"""

import logging

from flask import request
from werkzeug.exceptions import InternalServerError, MethodNotAllowed, RequestEntityTooLarge

logger = logging.getLogger(__name__)

PLAIN_TEXT = {'Content-Type': 'text/plain; charset=utf-8'}


class WeblatError(Exception):
    """Base class for errors that abort a request."""
    status_code = 500
    message = 'Internal Server Error'


class StoreError(WeblatError):
    """A query or statement against the record store failed."""


class RecordNotFound(StoreError):
    """A lookup that requires exactly one row found none."""


class RenderError(WeblatError):
    """A view is missing or its view model could not be bound."""


class FileStoreError(WeblatError):
    """An upload could not be written to disk."""


class AuthError(WeblatError):
    """Login could not be completed."""


class InvalidCredentials(AuthError):
    status_code = 401
    message = 'Invalid credentials'


class InvalidRole(AuthError):
    """The stored role is neither "admin" nor "user"."""


def plain_text(body, status, headers=None):
    """Build a plain-text (body, status, headers) response tuple."""
    merged = dict(PLAIN_TEXT)
    if headers:
        merged.update(headers)
    return body, status, merged


def register_error_handlers(app):
    """Install the handlers that turn errors into plain-text responses."""

    @app.errorhandler(WeblatError)
    def handle_weblat_error(error):
        if error.status_code >= 500:
            logger.exception('%s %s failed: %s', request.method, request.path, error)
        else:
            logger.info('%s %s rejected: %s', request.method, request.path, error)
        return plain_text(error.message, error.status_code)

    @app.errorhandler(MethodNotAllowed)
    def handle_method_not_allowed(error):
        headers = {}
        if error.valid_methods:
            headers['Allow'] = ', '.join(error.valid_methods)
        return plain_text('Method Not Allowed', 405, headers)

    @app.errorhandler(RequestEntityTooLarge)
    def handle_too_large(error):
        logger.warning('%s %s upload exceeds the size cap', request.method, request.path)
        return plain_text('Request Entity Too Large', 413)

    @app.errorhandler(InternalServerError)
    def handle_internal_error(error):
        # Flask has already logged the original exception
        return plain_text('Internal Server Error', 500)
