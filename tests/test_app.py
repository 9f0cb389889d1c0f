"""
Integration tests: bootstrap, mounted root screen and the web interface
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from pitodo.config import Config
from pitodo.core.backend import StaticBackendInitializer
from pitodo.main import TodoApp
from pitodo.ui.navigation import Screen


def _config(**overrides):
    data = {
        'display': {'width': 400, 'height': 240, 'output': ''},
        'theme': {'mode': 'light'},
        'backend': {'kind': 'static'},
        'bootstrap': {'failure_policy': 'fail_visible'},
        'todo': {'seed_fixtures': False},
        'web': {'host': '127.0.0.1', 'port': 5000},
        'logging': {'level': 'WARNING', 'console': False},
    }
    for path, value in overrides.items():
        section, key = path.split('__')
        data[section][key] = value
    return Config(data=data)


def _booted_app(fail_message=None, **overrides):
    app = TodoApp(_config(**overrides), initializer=StaticBackendInitializer(fail_message))
    app.boot()
    return app


def test_successful_boot_mounts_home():
    app = _booted_app()

    assert app.navigation.is_on_screen(Screen.HOME)
    assert app.splash.preserved and app.splash.released
    assert app.display.frame_count == 2, "Splash frame then home frame"
    assert len(app.todo_manager.store) == 0


def test_failed_boot_mounts_error_screen():
    app = _booted_app('backend unreachable')

    assert app.navigation.is_on_screen(Screen.ERROR)
    assert app.todo_manager is None
    assert app.error_screen.detail == 'backend unreachable'

    client = app.web_server.flask_app.test_client()
    response = client.get('/')
    assert response.status_code == 503
    assert b'restart the app' in response.data
    assert client.get('/api/todos').status_code == 404


def test_silent_degrade_mounts_home():
    app = _booted_app('backend unreachable', bootstrap__failure_policy='silent_degrade')
    assert app.navigation.is_on_screen(Screen.HOME)


def test_seed_fixtures():
    app = _booted_app(todo__seed_fixtures=True)
    assert len(app.todo_manager.store) == 4


def test_api_add_and_list():
    app = _booted_app()
    client = app.web_server.flask_app.test_client()
    frames = app.display.frame_count

    response = client.post('/api/todos', json={
        'title': 'Buy groceries',
        'description': 'Milk and eggs',
        'priority': 'Medium',
    })
    assert response.status_code == 201
    assert response.get_json()['todo']['priority'] == 'Medium'
    assert app.display.frame_count == frames + 1, "Store change re-renders the screen"

    listing = client.get('/api/todos').get_json()
    assert listing['total'] == 1
    assert listing['todos'][0]['label'] == 'Buy groceries'


def test_api_rejects_empty_title():
    app = _booted_app()
    client = app.web_server.flask_app.test_client()

    response = client.post('/api/todos', json={'title': '', 'description': 'Milk and eggs', 'priority': 'Low'})

    assert response.status_code == 400
    errors = response.get_json()['errors']
    assert [error['code'] for error in errors] == ['empty_title']
    assert len(app.todo_manager.store) == 0


def test_api_edit():
    app = _booted_app(todo__seed_fixtures=True)
    client = app.web_server.flask_app.test_client()

    response = client.put('/api/todos/2', json={
        'title': 'Go for a run',
        'description': '10 km in the park',
        'priority': 'Urgent',
    })
    assert response.status_code == 200
    assert app.todo_manager.store.all()[2].priority.title == 'Urgent'

    assert client.put('/api/todos/9', json={}).status_code == 404
    assert client.put('/api/todos/0', json={'title': 'x'}).status_code == 400


def test_api_priorities():
    app = _booted_app()
    data = app.web_server.flask_app.test_client().get('/api/priorities').get_json()
    assert data == {'priorities': ['Urgent', 'High', 'Medium', 'Low'], 'default': 'Low'}


def test_html_form_submission():
    app = _booted_app()
    client = app.web_server.flask_app.test_client()

    response = client.post('/submit', data={'title': 'Call mom', 'description': 'Birthday call', 'priority': 'High'})
    assert response.status_code == 302
    assert len(app.todo_manager.store) == 1

    page = client.get('/')
    assert page.status_code == 200
    assert b'Call mom' in page.data
    assert b'maxlength="20"' in page.data


def test_html_form_shows_errors():
    app = _booted_app()
    client = app.web_server.flask_app.test_client()

    client.post('/submit', data={'title': 'Call mom', 'description': 'abc', 'priority': 'High'})
    page = client.get('/')

    assert b'at least 5 characters' in page.data
    assert len(app.todo_manager.store) == 0


def test_screen_png():
    app = _booted_app()
    response = app.web_server.flask_app.test_client().get('/screen.png')
    assert response.status_code == 200
    assert response.mimetype == 'image/png'


def test_stop_clears_store():
    app = _booted_app(todo__seed_fixtures=True)
    frames = app.display.frame_count
    app.stop()
    assert app.display.frame_count == frames, "Teardown must not re-render"
    assert len(app.todo_manager.store) == 0
    assert app.display.last_image is None


def test_api_rejects_non_text_title():
    app = _booted_app()
    client = app.web_server.flask_app.test_client()

    response = client.post('/api/todos', json={'title': 123, 'description': 'Milk and eggs', 'priority': 'Low'})

    assert response.status_code == 400
    assert [error['code'] for error in response.get_json()['errors']] == ['empty_title']
    assert len(app.todo_manager.store) == 0


def test_api_rejects_non_object_body():
    app = _booted_app(todo__seed_fixtures=True)
    client = app.web_server.flask_app.test_client()

    assert client.post('/api/todos', json=['Buy groceries', 'Milk and eggs', 'Low']).status_code == 400
    assert client.put('/api/todos/0', json='Buy groceries').status_code == 400
    assert len(app.todo_manager.store) == 4


def test_html_submit_on_error_screen():
    app = _booted_app('backend unreachable')
    client = app.web_server.flask_app.test_client()

    response = client.post('/submit', data={'title': 'Call mom', 'description': 'Birthday call', 'priority': 'High'})

    assert response.status_code == 503
    assert b'restart the app' in response.data
    assert app.todo_manager is None


@pytest.mark.parametrize('path,value', [
    ('backend__kind', 'firebase'),
    ('backend__timeout', 'soon'),
    ('bootstrap__failure_policy', 'retry'),
])
def test_bad_config_mounts_error_screen(path, value):
    app = _booted_app(**{path: value})

    assert app.navigation.is_on_screen(Screen.ERROR)
    assert app.outcome.error.reason == 'misconfigured'
    assert app.splash.preserved and app.splash.released
    assert app.todo_manager is None
    assert app.web_server.flask_app.test_client().get('/').status_code == 503


def test_unknown_backend_kind_without_injected_initializer():
    app = TodoApp(_config(backend__kind='firebase'))
    app.boot()

    assert app.navigation.is_on_screen(Screen.ERROR)
    assert 'Unknown backend kind' in app.error_screen.detail


def test_bad_config_ignores_silent_degrade():
    app = _booted_app(backend__kind='firebase', bootstrap__failure_policy='silent_degrade')
    assert app.navigation.is_on_screen(Screen.ERROR)


def test_home_mount_failure_falls_back_to_error_screen(monkeypatch):
    app = TodoApp(_config(), initializer=StaticBackendInitializer())

    def broken_render(records, form_state):
        raise OSError("font file missing")

    monkeypatch.setattr(app.todo_screen, 'render', broken_render)
    app.boot()

    assert app.navigation.is_on_screen(Screen.ERROR)
    assert app.todo_manager is None
    assert 'font file missing' in app.error_screen.detail
    assert app.web_server.flask_app.test_client().get('/api/todos').status_code == 404
