import os
import sys

import pytest

# Ensure the backend root (containing the `mindmatch` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from mindmatch.config import Config
from mindmatch.game.models import Player, Room
from mindmatch.server import create_app


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret'
    TRUST_PROXY_HEADERS = False
    SOCKETIO_ASYNC_MODE = 'threading'
    LOG_LEVEL = 'WARNING'


@pytest.fixture()
def app_and_socketio():
    return create_app(TestConfig)


@pytest.fixture()
def flask_app(app_and_socketio):
    return app_and_socketio[0]


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def make_sio_client(app_and_socketio):
    """Factory for Socket.IO test clients; each one is its own session."""
    flask_app, socketio = app_and_socketio
    created = []

    def _make():
        c = socketio.test_client(flask_app, flask_test_client=flask_app.test_client())
        c.get_received()
        created.append(c)
        return c

    yield _make

    for c in created:
        try:
            if c.is_connected():
                c.disconnect()
        except Exception:
            pass


@pytest.fixture()
def make_room():
    """Builds a standalone room (not registered) with the given player names."""

    def _make(*names, theme='default', max_players=6, ready=True):
        room = Room(code='TEST', theme=theme, max_players=max_players)
        for i, name in enumerate(names):
            pid = f"p{i + 1}"
            room.players[pid] = Player(id=pid, name=name, ready=ready, session_id=f"sid-{pid}")
        return room

    return _make
