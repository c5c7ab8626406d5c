from datetime import date

import pytest

from daily_wordle import create_app
from daily_wordle.config import TestingConfig
from daily_wordle.services.persistence import InMemoryPersistenceAdapter
from daily_wordle.services.scoring_service import initialize_scoring_service
from daily_wordle.services.session_service import get_session_service, initialize_session_service

from .helpers import EPOCH, TEST_WORDS, ManualScheduler


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def store():
    return {}


@pytest.fixture
def socket_client(scheduler, store):
    scoring = initialize_scoring_service(TEST_WORDS, EPOCH, today=lambda: date(2026, 10, 1))
    initialize_session_service(
        TestingConfig,
        scheduler=scheduler,
        scoring_service=scoring,
        persistence_factory=lambda namespace: InMemoryPersistenceAdapter(namespace, store=store),
    )
    app, socketio = create_app(TestingConfig)
    client = socketio.test_client(app)
    yield client
    if client.is_connected():
        client.disconnect()


def events(client, name):
    return [packet["args"][0] for packet in client.get_received() if packet["name"] == name]


def current_engine():
    return next(iter(get_session_service().sessions.values()))


def test_commands_require_started_game(socket_client):
    socket_client.emit("keyboard_change", {"text": "cra"})
    errors = events(socket_client, "error")
    assert errors[0]["error_type"] == "NoSession"


def test_start_game_rejects_bad_player_id(socket_client):
    socket_client.emit("start_game", {"player_id": "../etc"})
    errors = events(socket_client, "error")
    assert errors[0]["error_type"] == "ValueError"
    assert get_session_service().sessions == {}


def test_full_game_over_socket(socket_client, scheduler, store):
    socket_client.emit("start_game", {"player_id": "alice"})
    states = events(socket_client, "game_state")
    assert states[-1]["status"] == "INITIALIZING"

    scheduler.run_pending()
    assert events(socket_client, "game_state")[-1]["status"] == "PLAYING"

    socket_client.emit("keyboard_change", {"text": "cran"})
    socket_client.emit("submit_attempt")
    errors = events(socket_client, "error")
    assert errors[-1]["error_type"] == "InvalidAttemptError"

    socket_client.emit("keyboard_change", {"text": "crane"})
    socket_client.emit("submit_attempt")
    scheduler.run_pending()

    final = events(socket_client, "game_state")[-1]
    assert final["status"] == "WON"
    assert final["result_modal_visible"] is True
    assert final["letter_history"]["c"] == "GREEN"
    assert final["share_text"].startswith("Wordle 0 1/6")
    assert store["daily_wordle:alice"]["0"]["status"] == "WON"

    socket_client.emit("dismiss_result_modal")
    assert events(socket_client, "game_state")[-1]["result_modal_visible"] is False


def test_rejected_keyboard_input_resends_state(socket_client, scheduler):
    socket_client.emit("start_game", {"player_id": "bob"})
    scheduler.run_pending()
    socket_client.get_received()

    socket_client.emit("keyboard_change", {"text": "cranes"})
    states = events(socket_client, "game_state")
    assert states[-1]["attempts"][0] == {"letters": []}


def test_resume_after_reconnect(socket_client, scheduler):
    socket_client.emit("start_game", {"player_id": "carol"})
    scheduler.run_pending()
    socket_client.emit("keyboard_change", {"text": "trace"})
    socket_client.emit("submit_attempt")
    scheduler.run_pending()
    assert current_engine().current_attempt_index == 1

    # Starting again replaces the engine and restores saved progress
    socket_client.emit("start_game", {"player_id": "carol"})
    scheduler.run_pending()
    engine = current_engine()
    assert engine.current_attempt_index == 1
    assert engine.status.value == "PLAYING"


def test_disconnect_ends_session(socket_client, scheduler):
    socket_client.emit("start_game", {"player_id": "dave"})
    assert len(get_session_service().sessions) == 1
    socket_client.disconnect()
    assert get_session_service().sessions == {}
