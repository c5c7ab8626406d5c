import pytest

from daily_wordle.config.game_settings import MAX_ATTEMPTS
from daily_wordle.models.game import Attempt, GameStatus
from daily_wordle.services.status_resolver import has_won, resolve_status

from .helpers import scored_attempt


def board(*words):
    attempts = [scored_attempt(word) for word in words]
    return attempts + [Attempt() for _ in range(MAX_ATTEMPTS - len(attempts))]


@pytest.mark.parametrize("initialized,busy,attempts,index,expected", [
    (False, True, board("crane"), 1, GameStatus.INITIALIZING),
    (True, True, board("crane"), 1, GameStatus.BUSY),
    (True, False, board("trace", "crane"), 2, GameStatus.WON),
    (True, False, board(*["trace"] * MAX_ATTEMPTS), MAX_ATTEMPTS, GameStatus.LOST),
    (True, False, board(*["trace"] * 5), 5, GameStatus.PLAYING),
    (True, False, board(), 0, GameStatus.PLAYING),
])
def test_resolve_status_precedence(initialized, busy, attempts, index, expected):
    assert resolve_status(initialized, busy, attempts, index) == expected


def test_win_on_last_attempt_beats_lost():
    attempts = board(*(["trace"] * (MAX_ATTEMPTS - 1) + ["crane"]))
    assert resolve_status(True, False, attempts, MAX_ATTEMPTS) == GameStatus.WON


def test_has_won_requires_all_green():
    assert not has_won(board("trace"))
    assert has_won(board("crane"))
    assert not has_won([Attempt()])
