"""
Letter History

Best-known verdict per character, used to color the on-screen keyboard.
"""

from typing import Dict, Iterable

from ..models.game import Attempt, LetterGuess, LetterResult

LetterHistory = Dict[str, LetterResult]


def fold_letters(history: LetterHistory, letters: Iterable[LetterGuess]) -> LetterHistory:
    """
    Merge one scored attempt into a history.
    
    Status can only progress in precedence order: a GREEN letter stays GREEN and
    a YELLOW letter never falls back to BLACK. Unscored letters are ignored.
    """
    updated = dict(history)
    for letter in letters:
        if letter.result is None:
            continue
        char = letter.char.lower()
        current = updated.get(char)
        if current is None or letter.result.precedence > current.precedence:
            updated[char] = letter.result
    return updated


def from_attempts(attempts: Iterable[Attempt]) -> LetterHistory:
    """Rebuild a history from every scored attempt of a restored board."""
    history: LetterHistory = {}
    for attempt in attempts:
        history = fold_letters(history, attempt.letters)
    return history
