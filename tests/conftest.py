import pytest

from wordgame import create_app
from wordgame.config import TestingConfig
from wordgame.services.answer_source import StaticAnswerSource
from wordgame.services.attempt_tracker import AttemptTracker
from wordgame.services.game_service import initialize_game_service
from wordgame.services.game_session import GameSession
from wordgame.views.board import BoardDisplay

SECRET = "PLANET"


@pytest.fixture
def tracker():
    tracker = AttemptTracker(word_length=6, max_rows=6, max_hints=3)
    tracker.set_secret(SECRET)
    return tracker


@pytest.fixture
def session():
    secrets = iter(["PLANET", "STREAM", "GARDEN"])
    tracker = AttemptTracker(word_length=6, max_rows=6, max_hints=3)
    display = BoardDisplay(6, 6)
    session = GameSession(tracker, display, lambda length: next(secrets))
    session.start()
    return session


@pytest.fixture
def game_service():
    return initialize_game_service(TestingConfig, StaticAnswerSource(SECRET))


@pytest.fixture
def app(game_service):
    app, _ = create_app(TestingConfig)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socket_client(app):
    client = app.socketio.test_client(app)
    yield client
    if client.is_connected():
        client.disconnect()
