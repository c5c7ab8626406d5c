from daily_wordle.models.game import LetterGuess, LetterResult
from daily_wordle.services.letter_history import fold_letters, from_attempts

from .helpers import scored_attempt, typed_attempt

G, Y, B = LetterResult.GREEN, LetterResult.YELLOW, LetterResult.BLACK


def test_fold_records_scored_letters():
    history = fold_letters({}, scored_attempt("trace").letters)
    assert history == {"t": B, "r": G, "a": G, "c": Y, "e": G}


def test_fold_never_downgrades():
    history = fold_letters({}, scored_attempt("trace").letters)
    # "react" scores r and e YELLOW, which must not replace GREEN
    history = fold_letters(history, scored_attempt("react").letters)
    assert history["r"] == G
    assert history["e"] == G
    assert history["c"] == Y

    history = fold_letters(history, [LetterGuess("c", B)])
    assert history["c"] == Y


def test_fold_upgrades():
    history = fold_letters({"c": B}, [LetterGuess("c", Y)])
    assert history["c"] == Y
    history = fold_letters(history, [LetterGuess("C", G)])
    assert history["c"] == G


def test_fold_ignores_unscored_letters_and_returns_new_map():
    original = {"a": Y}
    history = fold_letters(original, typed_attempt("plu").letters)
    assert history == {"a": Y}
    assert history is not original


def test_from_attempts_rebuilds_history():
    history = from_attempts([scored_attempt("react"), scored_attempt("trace"), typed_attempt("xy")])
    assert history["r"] == G
    assert history["t"] == B
    assert "x" not in history
