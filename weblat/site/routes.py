"""
Site Routes

Public views over posts, gallery images and the contact form.
"""

from flask import request, redirect, url_for, send_from_directory
from weblat.models import GalleryImage
from weblat.services import get_files, get_store, render
from weblat.site import site_bp

# Placeholder shown by /profile; it is not read from the users table
PROFILE_USER = {'name': 'John Doe', 'email': 'john@example.com', 'username': 'johndoe'}


@site_bp.route('/home-usr')
def home():
    """User dashboard landing"""
    return render('landing')


@site_bp.route('/posts')
def posts():
    """Public list of posts"""
    return render('posts', posts=get_store().list_posts())


@site_bp.route('/gallery', methods=['GET', 'POST'])
def gallery():
    """Public gallery"""
    if request.method == 'POST':
        return redirect(url_for('site.gallery'), code=303)

    images = [GalleryImage(url) for url in get_store().list_images()]
    return render('gallery', images=images)


@site_bp.route('/uploads/<path:filename>')
def uploaded_file(filename):
    """Serve a stored upload by the locator's file name."""
    return send_from_directory(get_files().upload_dir, filename)


@site_bp.route('/contact', methods=['GET', 'POST'])
def contact():
    """Contact form; a submit stores one entry."""
    if request.method == 'POST':
        get_store().create_contact_entry(
            name=request.form.get('name', ''),
            email=request.form.get('email', ''),
            message=request.form.get('message', ''),
        )
        return redirect(url_for('site.success'), code=303)

    return render('contact')


@site_bp.route('/success')
def success():
    """Shown after a contact form submit"""
    return render('success')


@site_bp.route('/profile')
def profile():
    """Static placeholder profile"""
    return render('profile', user=PROFILE_USER)
