"""
Status Resolver

Derives the game status; status is never stored as primary state.
"""

from typing import Sequence

from ..config.game_settings import MAX_ATTEMPTS
from ..models.game import Attempt, GameStatus


def has_won(attempts: Sequence[Attempt]) -> bool:
    return any(attempt.is_winning for attempt in attempts)


def resolve_status(is_initialized: bool, is_busy: bool, attempts: Sequence[Attempt],
                   current_attempt_index: int, max_attempts: int = MAX_ATTEMPTS) -> GameStatus:
    if not is_initialized:
        return GameStatus.INITIALIZING
    if is_busy:
        return GameStatus.BUSY
    if has_won(attempts):
        return GameStatus.WON
    if current_attempt_index + 1 > max_attempts:
        return GameStatus.LOST
    return GameStatus.PLAYING
