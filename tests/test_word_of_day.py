from datetime import date, datetime

import pytest

from daily_wordle.config.game_settings import WORD_LIST, validate_word_list_integrity
from daily_wordle.models.errors import WordOfDayUnavailableError
from daily_wordle.services.word_of_day import get_puzzle_id, get_word_of_day

WORDS = ["crane", "trace", "stare"]


def test_puzzle_id_counts_whole_days():
    assert get_puzzle_id(date(2026, 10, 19), "2026-10-01") == 18
    assert get_puzzle_id(datetime(2026, 10, 1, 23, 59), date(2026, 10, 1)) == 0
    assert get_puzzle_id("2026-10-01", "2026-10-02") == -1


def test_word_of_day_indexes_word_list():
    assert get_word_of_day(date(2026, 10, 1), "2026-10-01", WORDS) == "crane"
    assert get_word_of_day(date(2026, 10, 3), "2026-10-01", WORDS) == "stare"


@pytest.mark.parametrize("today", [date(2026, 9, 30), date(2026, 10, 4)])
def test_word_of_day_out_of_range(today):
    with pytest.raises(WordOfDayUnavailableError):
        get_word_of_day(today, "2026-10-01", WORDS)


def test_bundled_word_list_is_valid():
    assert validate_word_list_integrity()
    assert all(word == word.lower() and len(word) == 5 for word in WORD_LIST)


def test_word_list_validation_rejects_duplicates():
    with pytest.raises(ValueError):
        validate_word_list_integrity(["crane", "crane"])
