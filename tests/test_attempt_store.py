import pytest

from daily_wordle.config.game_settings import MAX_ATTEMPTS
from daily_wordle.models.errors import AttemptStoreError
from daily_wordle.models.game import Attempt
from daily_wordle.services.attempt_store import AttemptStore
from daily_wordle.services.scoring_service import score_word

from .helpers import scored_attempt, typed_attempt


def test_initialize_creates_fixed_empty_board():
    store = AttemptStore()
    assert len(store.attempts) == MAX_ATTEMPTS
    assert all(attempt.letters == [] for attempt in store.attempts)
    assert store.current_attempt_index == 0


def test_set_current_guess_lowercases_and_leaves_unscored():
    store = AttemptStore()
    assert store.set_current_guess("CrA") is True
    assert store.current_attempt.word == "cra"
    assert not store.current_attempt.is_scored
    assert store.set_current_guess("") is True
    assert store.current_attempt.letters == []


def test_set_current_guess_rejects_long_text():
    store = AttemptStore()
    store.set_current_guess("cran")
    assert store.set_current_guess("cranes") is False
    assert store.current_attempt.word == "cran"


def test_append_result_is_write_once():
    store = AttemptStore()
    store.set_current_guess("trace")
    store.append_result(0, score_word("trace", "crane"))
    assert store.attempts[0].is_scored

    with pytest.raises(AttemptStoreError):
        store.append_result(0, score_word("trace", "crane"))


@pytest.mark.parametrize("index", [-1, MAX_ATTEMPTS])
def test_append_result_out_of_bounds(index):
    store = AttemptStore()
    with pytest.raises(AttemptStoreError):
        store.append_result(index, score_word("trace", "crane"))


def test_append_result_requires_complete_scored_word():
    store = AttemptStore()
    with pytest.raises(AttemptStoreError):
        store.append_result(0, score_word("tra", "crane"))
    with pytest.raises(AttemptStoreError):
        store.append_result(0, typed_attempt("trace").letters)


def test_restore_points_at_first_unscored_attempt():
    saved = [scored_attempt("trace"), scored_attempt("stare"), typed_attempt("plu")]
    saved += [Attempt() for _ in range(MAX_ATTEMPTS - len(saved))]
    store = AttemptStore()
    store.restore(saved)

    assert store.current_attempt_index == 2
    assert store.current_attempt.word == "plu"
    # Restored rows are copies
    saved[0].letters[0].char = "x"
    assert store.attempts[0].word == "trace"


def test_restore_fully_scored_board_is_exhausted():
    store = AttemptStore()
    store.restore([scored_attempt("plumb") for _ in range(MAX_ATTEMPTS)])
    assert store.current_attempt_index == MAX_ATTEMPTS
    assert store.is_exhausted
    assert store.current_attempt is None
    assert store.set_current_guess("crane") is False


def test_restore_rejects_wrong_board_size():
    store = AttemptStore()
    with pytest.raises(AttemptStoreError):
        store.restore([Attempt()])


def test_advance_index_stops_at_max():
    store = AttemptStore()
    for _ in range(MAX_ATTEMPTS + 3):
        store.advance_index()
    assert store.current_attempt_index == MAX_ATTEMPTS
