"""
Admin Routes

Form submits perform at most one store mutation and answer with a 303 redirect.
"""

import logging

from flask import request, redirect, url_for
from weblat.admin import admin_bp
from weblat.errors import plain_text
from weblat.models import GalleryImage
from weblat.services import get_files, get_store, render

logger = logging.getLogger(__name__)


def see_other(endpoint):
    return redirect(url_for(endpoint), code=303)


@admin_bp.route('/home-adm')
def home():
    """Admin dashboard"""
    return render('dashboard')


# -----------------------------------------------------------------------------
# Posts
# -----------------------------------------------------------------------------

@admin_bp.route('/posts-admin')
def posts():
    """Admin list of all posts"""
    return render('posts_admin', posts=get_store().list_posts())


@admin_bp.route('/post/create', methods=['GET', 'POST'])
def create_post():
    """New post form; the submit stores one post."""
    if request.method == 'POST':
        get_store().create_post(
            title=request.form.get('title', ''),
            content=request.form.get('content', ''),
        )
        return see_other('site.posts')

    return render('create_post')


@admin_bp.route('/post/edit', methods=['GET', 'POST'])
def edit_post():
    """Edit form for ``?id=``; the submit carries the id as a form field."""
    if request.method == 'POST':
        get_store().update_post(
            request.form.get('id'),
            title=request.form.get('title', ''),
            content=request.form.get('content', ''),
        )
        return see_other('site.posts')

    post = get_store().get_post(request.args.get('id'))
    return render('edit_post', post=post)


@admin_bp.route('/post/delete', methods=['POST'])
def delete_post():
    """Delete the post named by form field ``id``."""
    get_store().delete_post(request.form.get('id'))
    return see_other('site.posts')


# -----------------------------------------------------------------------------
# Gallery
# -----------------------------------------------------------------------------

@admin_bp.route('/galery-admin', methods=['GET', 'POST'])
def gallery():
    """Admin gallery listing"""
    if request.method == 'POST':
        return see_other('admin.gallery')

    images = [GalleryImage(url) for url in get_store().list_images()]
    return render('gallery_admin', images=images)


@admin_bp.route('/galery/create', methods=['GET', 'POST'])
def upload_image():
    """Upload form; the submit stores multipart field ``file``."""
    if request.method == 'POST':
        upload = request.files.get('file')
        if upload is None or not upload.filename:
            return plain_text('http: no such file', 400)

        locator = get_files().save_upload(upload.filename, upload.stream)
        get_store().create_image(locator)
        return see_other('admin.gallery')

    return render('upload_image')


@admin_bp.route('/galery/delete', methods=['POST'])
def delete_image():
    """Remove the gallery row. The uploaded file is left on disk."""
    locator = request.form.get('imageURL', '')
    get_store().delete_image(locator)
    logger.info('Removed gallery row %s', locator)
    return see_other('site.gallery')


# -----------------------------------------------------------------------------
# Contact entries
# -----------------------------------------------------------------------------

@admin_bp.route('/contact/list')
def contact_list():
    """List every contact form submission"""
    return render('contact_list', entries=get_store().list_contact_entries())
