"""
Site Blueprint

Public pages: user landing, posts, gallery, contact form and profile.
"""

from flask import Blueprint

site_bp = Blueprint('site', __name__)

from weblat.site import routes  # noqa: E402, F401
