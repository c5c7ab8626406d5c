"""
Word of the Day

Maps a calendar date to a puzzle number and a secret word.
"""

from datetime import date, datetime
from typing import List, Union

from ..models.errors import WordOfDayUnavailableError

DateLike = Union[date, datetime, str]


def _as_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value)


def get_puzzle_id(current_date: DateLike, epoch_date: DateLike) -> int:
    """Number of whole days elapsed between the epoch date and the current date."""
    return (_as_date(current_date) - _as_date(epoch_date)).days


def get_word_for_puzzle(puzzle_id: int, word_list: List[str]) -> str:
    """
    Look up the secret word for a puzzle number.
    
    Raises:
        WordOfDayUnavailableError: If the puzzle number falls outside the word list
    """
    if puzzle_id < 0 or puzzle_id >= len(word_list):
        raise WordOfDayUnavailableError(f"No word defined for puzzle {puzzle_id}")
    return word_list[puzzle_id]


def get_word_of_day(current_date: DateLike, epoch_date: DateLike, word_list: List[str]) -> str:
    """Look up the secret word for a date."""
    return get_word_for_puzzle(get_puzzle_id(current_date, epoch_date), word_list)
