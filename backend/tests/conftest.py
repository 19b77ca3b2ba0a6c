import os
import sys
import pytest

# Ensure the backend root (containing the `wordgame` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from wordgame import create_app, socketio


def make_test_config(data_dir, **overrides):
    attrs = {
        'TESTING': True,
        'SECRET_KEY': os.environ.get('SECRET_KEY', 'test-secret'),
        'WORDS_FILE': os.path.join(str(data_dir), 'words.json'),
        'SCORES_FILE': os.path.join(str(data_dir), 'scores.json'),
        'LEADERBOARD_LIMIT': 0,
        'SCORES_CONFLICT_ON_STALE': False,
        'CORS_ORIGINS': ['http://localhost:3000'],
    }
    attrs.update(overrides)
    return type('TestConfig', (), attrs)


@pytest.fixture()
def flask_app(tmp_path):
    application = create_app(make_test_config(tmp_path))
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/ws'
    )
    yield test_client
    if test_client.is_connected('/ws'):
        test_client.disconnect(namespace='/ws')


@pytest.fixture()
def add_word(client):
    def _add(word, category='animals', hint='A hint'):
        res = client.post('/wordEntry/add', json={'category': category, 'word': word, 'hint': hint})
        assert res.status_code == 200, res.get_json()
        return res.get_json()
    return _add
