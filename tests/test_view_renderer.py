"""Unit tests for the view renderer."""

import pytest

from api.models.records import Artist
from api.services.view_renderer import ViewRenderer
from app import create_app
from config import CONFIG
from utils.errors import TemplateRenderError


def test_registry_cannot_be_changed(app):
    renderer = app.extensions['view_renderer']

    with pytest.raises(TypeError):
        renderer.views['index'] = 'other.html'


def test_registry_is_a_copy_of_its_source():
    views = {'index': 'index.html'}
    renderer = ViewRenderer(views)
    views['index'] = 'changed.html'

    assert renderer.template_for('index') == 'index.html'


def test_renders_a_single_record(app):
    artist = Artist(id=5, name='Queen', members=['Freddie', 'Brian'], creation_date=1970)

    with app.test_request_context():
        html = app.extensions['view_renderer'].render('artist', artist)

    assert '<h1>Queen</h1>' in html
    assert 'Freddie' in html
    assert '1970' in html
    assert '/locations.html?id=5' in html


def test_escapes_remote_text(app):
    with app.test_request_context():
        html = app.extensions['view_renderer'].render('locations', ['<script>alert(1)</script>'])

    assert '<script>alert(1)</script>' not in html
    assert '&lt;script&gt;' in html


def test_unknown_view(app):
    with app.test_request_context():
        with pytest.raises(TemplateRenderError, match='unknown view: members'):
            app.extensions['view_renderer'].render('members', [])


def test_missing_template(remote_client):
    views = dict(CONFIG['VIEWS'], dates='missing.html')
    app = create_app({'TESTING': True, 'VIEWS': views}, remote_client=remote_client)

    with app.test_request_context():
        with pytest.raises(TemplateRenderError, match='template not found: missing.html'):
            app.extensions['view_renderer'].render('dates', [])


def test_broken_template(tmp_path, remote_client):
    (tmp_path / 'broken.html').write_text('{% for x in data %}{{ x }}')
    app = create_app({
        'TESTING': True,
        'TEMPLATE_FOLDER': str(tmp_path),
        'VIEWS': {'index': 'broken.html'},
    }, remote_client=remote_client)

    with app.test_request_context():
        with pytest.raises(TemplateRenderError, match='template broken.html'):
            app.extensions['view_renderer'].render('index', [1, 2])
