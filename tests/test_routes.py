import io
import os
from urllib.parse import urlparse

import pytest

from weblat.errors import StoreError


def location(response):
    return urlparse(response.headers['Location']).path


def upload(client, name, data):
    return client.post('/galery/create',
                       data={'file': (io.BytesIO(data), name)},
                       content_type='multipart/form-data')


# -----------------------------------------------------------------------------
# Auth
# -----------------------------------------------------------------------------

def test_login_form(client):
    r = client.get('/')
    assert r.status_code == 200
    assert 'name="username"' in r.get_data(as_text=True)


def test_register_form(client):
    r = client.get('/register')
    assert r.status_code == 200
    assert 'name="email"' in r.get_data(as_text=True)


def test_register_then_login_as_user(client, store):
    r = client.post('/register', data={'name': 'Jane', 'email': 'j@x.com',
                                       'username': 'jane', 'password': 'pw'})
    assert r.status_code == 302
    assert location(r) == '/'
    assert store.get_user_by_username('jane').role == 'user'

    r = client.post('/', data={'username': 'jane', 'password': 'pw'})
    assert r.status_code == 302
    assert location(r) == '/home-usr'


def test_register_ignores_submitted_role(client, store):
    client.post('/register', data={'name': 'Eve', 'email': 'e@x.com', 'username': 'eve',
                                   'password': 'pw', 'role': 'admin'})
    assert store.get_user_by_username('eve').role == 'user'


def test_register_duplicate_username_is_500(client, store):
    store.create_user('Jane', 'j@x.com', 'jane', 'pw', 'user')

    r = client.post('/register', data={'name': 'J2', 'email': 'j2@x.com',
                                       'username': 'jane', 'password': 'pw'})
    assert r.status_code == 500
    assert r.get_data(as_text=True) == 'Internal Server Error'


def test_admin_login_redirects_to_admin_home(client, store):
    store.create_user('Root', 'r@x.com', 'root', 'secret', 'admin')

    r = client.post('/', data={'username': 'root', 'password': 'secret'})
    assert r.status_code == 302
    assert location(r) == '/home-adm'


@pytest.mark.parametrize('role', ['admin', 'user'])
def test_wrong_password_is_401(client, store, role):
    store.create_user('Ann', 'a@x.com', 'ann', 'right', role)

    r = client.post('/', data={'username': 'ann', 'password': 'wrong'})
    assert r.status_code == 401
    assert r.get_data(as_text=True) == 'Invalid credentials'


def test_unknown_user_is_401(client):
    r = client.post('/', data={'username': 'ghost', 'password': 'pw'})
    assert r.status_code == 401


def test_password_compare_is_exact(client, store):
    store.create_user('Ann', 'a@x.com', 'ann', 'Secret', 'user')

    r = client.post('/', data={'username': 'ann', 'password': 'secret'})
    assert r.status_code == 401


def test_unknown_role_is_500(client, store):
    store.create_user('Odd', 'o@x.com', 'odd', 'pw', 'guest')

    r = client.post('/', data={'username': 'odd', 'password': 'pw'})
    assert r.status_code == 500
    assert r.get_data(as_text=True) == 'Internal Server Error'


# -----------------------------------------------------------------------------
# Dashboards and static views
# -----------------------------------------------------------------------------

@pytest.mark.parametrize('path, text', [
    ('/home-usr', 'Welcome'),
    ('/home-adm', 'Admin Dashboard'),
    ('/profile', 'John Doe'),
    ('/contact', 'name="message"'),
    ('/success', 'Thank you'),
    ('/post/create', 'name="title"'),
    ('/galery/create', 'enctype="multipart/form-data"'),
])
def test_static_views(client, path, text):
    r = client.get(path)
    assert r.status_code == 200
    assert text in r.get_data(as_text=True)


def test_unknown_path_is_404(client):
    assert client.get('/nope').status_code == 404


@pytest.mark.parametrize('method, path', [
    ('post', '/posts-admin'),
    ('get', '/post/delete'),
    ('get', '/galery/delete'),
    ('post', '/contact/list'),
    ('post', '/logout'),
])
def test_wrong_method_is_405(client, method, path):
    r = getattr(client, method)(path)
    assert r.status_code == 405
    assert r.get_data(as_text=True) == 'Method Not Allowed'


def test_405_lists_allowed_methods(client):
    r = client.post('/posts-admin')
    assert 'GET' in r.headers['Allow']


# -----------------------------------------------------------------------------
# Posts
# -----------------------------------------------------------------------------

def test_create_post_flow(client, store):
    r = client.post('/post/create', data={'title': 'Hello', 'content': 'World'})
    assert r.status_code == 303
    assert location(r) == '/posts'

    body = client.get('/posts').get_data(as_text=True)
    assert 'Hello' in body
    assert 'World' in body

    body = client.get('/posts-admin').get_data(as_text=True)
    post_id = store.list_posts()[0].id
    assert f'/post/edit?id={post_id}' in body


def test_posts_are_escaped(client, store):
    store.create_post('<script>x</script>', 'body')

    body = client.get('/posts').get_data(as_text=True)
    assert '<script>x</script>' not in body
    assert '&lt;script&gt;' in body


def test_edit_post_flow(client, store):
    store.create_post('Old', 'Old body')
    post_id = store.list_posts()[0].id

    r = client.get(f'/post/edit?id={post_id}')
    assert r.status_code == 200
    assert 'value="Old"' in r.get_data(as_text=True)

    r = client.post('/post/edit', data={'id': post_id, 'title': 'New', 'content': 'New body'})
    assert r.status_code == 303
    assert location(r) == '/posts'
    assert store.get_post(post_id).title == 'New'


def test_edit_missing_post_is_500(client):
    r = client.get('/post/edit?id=42')
    assert r.status_code == 500
    assert r.get_data(as_text=True) == 'Internal Server Error'


def test_edit_submit_for_missing_post_still_redirects(client):
    r = client.post('/post/edit', data={'id': '42', 'title': 't', 'content': 'c'})
    assert r.status_code == 303


def test_delete_post_flow(client, store):
    store.create_post('Doomed', 'Body')
    post_id = store.list_posts()[0].id

    r = client.post('/post/delete', data={'id': post_id})
    assert r.status_code == 303
    assert location(r) == '/posts'
    assert store.list_posts() == []

    r = client.post('/post/delete', data={'id': post_id})
    assert r.status_code == 303


# -----------------------------------------------------------------------------
# Gallery
# -----------------------------------------------------------------------------

def test_upload_image(client, store, files):
    r = upload(client, 'cat.png', b'meow')
    assert r.status_code == 303
    assert location(r) == '/galery-admin'
    assert store.list_images() == ['uploads/cat.png']

    with open(files.path_for('uploads/cat.png'), 'rb') as fh:
        assert fh.read() == b'meow'

    r = client.get('/uploads/cat.png')
    assert r.status_code == 200
    assert r.data == b'meow'


def test_upload_same_name_twice(client, store, files):
    upload(client, 'a.png', b'first')
    upload(client, 'a.png', b'second')

    assert store.list_images() == ['uploads/a.png', 'uploads/a.png']
    assert os.listdir(files.upload_dir) == ['a.png']
    assert client.get('/uploads/a.png').data == b'second'


def test_upload_without_file_is_400(client, store):
    r = client.post('/galery/create', data={}, content_type='multipart/form-data')
    assert r.status_code == 400
    assert store.list_images() == []


def test_upload_over_size_cap_is_413(app, client, store):
    app.config['MAX_CONTENT_LENGTH'] = 64

    r = upload(client, 'big.png', b'x' * 1024)
    assert r.status_code == 413
    assert store.list_images() == []


def test_delete_image_keeps_file(client, store):
    upload(client, 'a.png', b'data')

    r = client.post('/galery/delete', data={'imageURL': 'uploads/a.png'})
    assert r.status_code == 303
    assert location(r) == '/gallery'
    assert store.list_images() == []

    r = client.get('/uploads/a.png')
    assert r.status_code == 200
    assert r.data == b'data'


@pytest.mark.parametrize('path', ['/gallery', '/galery-admin'])
def test_gallery_lists_images(client, store, path):
    store.create_image('uploads/dog.jpg')

    r = client.get(path)
    assert r.status_code == 200
    assert 'src="/uploads/dog.jpg"' in r.get_data(as_text=True)


@pytest.mark.parametrize('path', ['/gallery', '/galery-admin'])
def test_gallery_post_redirects_back(client, path):
    r = client.post(path)
    assert r.status_code == 303
    assert location(r) == path


# -----------------------------------------------------------------------------
# Contact
# -----------------------------------------------------------------------------

def test_contact_flow(client, store):
    r = client.post('/contact', data={'name': 'Ann', 'email': 'a@x.com', 'message': 'Hello!'})
    assert r.status_code == 303
    assert location(r) == '/success'
    assert len(store.list_contact_entries()) == 1

    body = client.get('/contact/list').get_data(as_text=True)
    assert 'a@x.com' in body
    assert 'Hello!' in body


def test_gallery_links_are_url_quoted(client, store):
    upload(client, 'a#1.png', b'hash')

    body = client.get('/gallery').get_data(as_text=True)
    assert 'src="/uploads/a%231.png"' in body

    r = client.get('/uploads/a%231.png')
    assert r.status_code == 200
    assert r.data == b'hash'


# -----------------------------------------------------------------------------
# Failures
# -----------------------------------------------------------------------------

def test_upload_write_failure_is_500(app, client, store, files, tmp_path, monkeypatch):
    blocker = tmp_path / 'blocker'
    blocker.write_text('')
    monkeypatch.setattr(files, 'upload_dir', str(blocker))

    r = upload(client, 'a.png', b'data')
    assert r.status_code == 500
    assert r.get_data(as_text=True) == 'Internal Server Error'
    assert r.mimetype == 'text/plain'
    assert store.list_images() == []


def test_store_read_failure_is_500(app, client, monkeypatch):
    def broken_list_posts():
        raise StoreError('list posts failed: connection lost')

    monkeypatch.setattr(app.extensions['weblat.store'], 'list_posts', broken_list_posts)

    for path in ('/posts', '/posts-admin'):
        r = client.get(path)
        assert r.status_code == 500
        assert r.get_data(as_text=True) == 'Internal Server Error'
        assert r.mimetype == 'text/plain'
