"""
Scoring Service

Scores a candidate word against the secret word of the day, either in process
or through the /api/attempt endpoint.
"""

from datetime import date
from typing import Callable, Iterable, List, Optional

import requests

from ..config.game_settings import WORD_LENGTH
from ..models.errors import (
    InvalidWordError,
    ScoringServiceUnavailableError,
    WordOfDayUnavailableError,
)
from ..models.game import LetterGuess, LetterResult
from .word_of_day import get_puzzle_id, get_word_for_puzzle, get_word_of_day


def score_word(candidate: str, secret: str) -> List[LetterGuess]:
    """
    Per-position verdicts for a candidate against the secret.
    
    GREEN when the letters match in place, YELLOW when the secret contains the
    letter anywhere, BLACK otherwise. YELLOW is plain containment and is not
    capped by how often the letter occurs in the secret.
    """
    secret_lower = secret.lower()
    letters: List[LetterGuess] = []
    for index, char in enumerate(candidate):
        char_lower = char.lower()
        if index < len(secret_lower) and secret_lower[index] == char_lower:
            result = LetterResult.GREEN
        elif char_lower in secret_lower:
            result = LetterResult.YELLOW
        else:
            result = LetterResult.BLACK
        letters.append(LetterGuess(char=char, result=result))
    return letters


class LocalScoringService:
    """
    In-process scoring against the daily word list.
    
    The word list doubles as the accepted-word dictionary, and the position of a
    word in it is the puzzle number it is played on.
    """
    
    def __init__(self, word_list: Iterable[str], first_word_date: str,
                 today: Optional[Callable[[], date]] = None):
        self.word_list = [word.strip().lower() for word in word_list]
        self._accepted = set(self.word_list)
        self.first_word_date = first_word_date
        self._today = today or date.today
    
    @property
    def puzzle_id(self) -> int:
        return get_puzzle_id(self._today(), self.first_word_date)
    
    def is_accepted(self, word: str) -> bool:
        return len(word) == WORD_LENGTH and word.lower() in self._accepted
    
    def word_of_day(self, puzzle_id: Optional[int] = None) -> str:
        """
        Secret word for today, or for an earlier puzzle still being played.
        
        Raises:
            WordOfDayUnavailableError: If no word is configured for the puzzle,
                or the puzzle has not started yet
        """
        if puzzle_id is None:
            return get_word_of_day(self._today(), self.first_word_date, self.word_list)
        if puzzle_id > self.puzzle_id:
            raise WordOfDayUnavailableError(f"Puzzle {puzzle_id} has not started yet")
        return get_word_for_puzzle(puzzle_id, self.word_list)
    
    def check_word_of_day(self) -> int:
        """Return the active puzzle number, failing if it has no secret word."""
        self.word_of_day()
        return self.puzzle_id
    
    def score(self, word: str, puzzle_id: Optional[int] = None) -> List[LetterGuess]:
        """
        Score a submitted word.
        
        A session that outlives its day passes its own puzzle number so the
        word is not scored against the next day's secret.
        
        Raises:
            InvalidWordError: If the word is not WORD_LENGTH long or not accepted
            WordOfDayUnavailableError: If no word is configured for the puzzle
        """
        if not isinstance(word, str) or not self.is_accepted(word):
            raise InvalidWordError("Submitted word is invalid")
        return score_word(word, self.word_of_day(puzzle_id))


class HttpScoringClient:
    """Scores attempts through a remote /api/attempt endpoint."""
    
    def __init__(self, base_url: str, timeout: float = 5.0, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()
    
    def _get(self, path: str, params: Optional[dict] = None) -> dict:
        try:
            response = self.session.get(f"{self.base_url}{path}", params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise ScoringServiceUnavailableError(f"Scoring service request failed: {e}") from e
        
        if response.status_code == 200:
            try:
                return response.json()
            except ValueError as e:
                raise ScoringServiceUnavailableError("Scoring service returned invalid JSON") from e
        
        message = _error_message(response)
        if response.status_code == 422:
            raise InvalidWordError(message)
        if response.status_code == 503:
            raise WordOfDayUnavailableError(message)
        raise ScoringServiceUnavailableError(
            f"Scoring service responded with {response.status_code}: {message}"
        )
    
    def check_word_of_day(self) -> int:
        data = self._get('/api/puzzle')
        return int(data['puzzle_id'])
    
    def score(self, word: str, puzzle_id: Optional[int] = None) -> List[LetterGuess]:
        params = {'word': word}
        if puzzle_id is not None:
            params['puzzle_id'] = puzzle_id
        data = self._get('/api/attempt', params=params)
        try:
            letters = [LetterGuess.from_dict(letter) for letter in data['letters']]
        except (KeyError, TypeError, ValueError) as e:
            raise ScoringServiceUnavailableError(f"Malformed scoring response: {e}") from e
        if len(letters) != WORD_LENGTH or not all(letter.is_scored for letter in letters):
            raise ScoringServiceUnavailableError("Malformed scoring response: incomplete letters")
        return letters


def _error_message(response: requests.Response) -> str:
    try:
        return response.json().get('message', response.reason)
    except ValueError:
        return response.reason or 'Unknown error'


# Global service instance
_scoring_service = None


def get_scoring_service() -> Optional[LocalScoringService]:
    """Get the global in-process scoring service instance."""
    return _scoring_service


def initialize_scoring_service(word_list: Iterable[str], first_word_date: str,
                               today: Optional[Callable[[], date]] = None) -> LocalScoringService:
    """Initialize the global in-process scoring service instance."""
    global _scoring_service
    _scoring_service = LocalScoringService(word_list, first_word_date, today=today)
    return _scoring_service
