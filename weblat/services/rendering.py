"""
Rendering Engine

Maps a named view plus its view model to an HTML body. Every view is
parsed once when the application starts; rendering then only binds data.
"""

import logging

from flask import render_template
from jinja2 import TemplateError

from weblat.errors import RenderError

logger = logging.getLogger(__name__)


class View:
    """A template and the fields its view model must provide."""

    def __init__(self, template, *fields):
        self.template = template
        self.fields = fields

    def __repr__(self):
        return f'<View {self.template} {self.fields}>'


VIEWS = {
    'login': View('auth/login.html'),
    'register': View('auth/register.html'),
    'landing': View('site/landing.html'),
    'posts': View('site/posts.html', 'posts'),
    'gallery': View('site/gallery.html', 'images'),
    'contact': View('site/contact.html'),
    'success': View('site/success.html'),
    'profile': View('site/profile.html', 'user'),
    'dashboard': View('admin/dashboard.html'),
    'posts_admin': View('admin/posts.html', 'posts'),
    'create_post': View('admin/create_post.html'),
    'edit_post': View('admin/edit_post.html', 'post'),
    'gallery_admin': View('admin/gallery.html', 'images'),
    'upload_image': View('admin/upload_image.html'),
    'contact_list': View('admin/contact_list.html', 'entries'),
}


class Renderer:
    """Holds the parsed view pool for one application."""

    def __init__(self, jinja_env, views=None):
        self.jinja_env = jinja_env
        self.views = dict(VIEWS if views is None else views)
        self.pool = {}

    def load(self):
        """Parse every registered view. A missing or broken template raises."""
        for name, view in self.views.items():
            self.pool[name] = self.jinja_env.get_template(view.template)
        logger.debug('Loaded %d views', len(self.pool))

    def bind(self, view_name, view_model):
        """Check ``view_model`` against the view's fields and return its template."""
        view = self.views.get(view_name)
        template = self.pool.get(view_name)
        if view is None or template is None:
            raise RenderError(f'unknown view {view_name!r}')
        missing = [field for field in view.fields if field not in view_model]
        if missing:
            raise RenderError(f'view {view_name!r} is missing {", ".join(missing)}')
        return template

    def render(self, view_name, **view_model):
        template = self.bind(view_name, view_model)
        try:
            return render_template(template, **view_model)
        except TemplateError as exc:
            raise RenderError(f'view {view_name!r} failed to render: {exc}') from exc
