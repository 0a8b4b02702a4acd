"""
Admin Blueprint

Dashboard and content management for posts, gallery images and contact
entries.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from weblat.admin import routes  # noqa: E402, F401
