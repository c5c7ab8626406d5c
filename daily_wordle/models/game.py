"""
Game Data Models

Contains all puzzle-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .errors import PersistenceReadError


class LetterResult(Enum):
    """Per-letter verdict returned by the scoring service."""
    GREEN = "GREEN"
    YELLOW = "YELLOW"
    BLACK = "BLACK"

    @property
    def precedence(self) -> int:
        """Display precedence: GREEN > YELLOW > BLACK > unknown (0)."""
        return _PRECEDENCE[self]


_PRECEDENCE = {
    LetterResult.GREEN: 3,
    LetterResult.YELLOW: 2,
    LetterResult.BLACK: 1,
}


class GameStatus(Enum):
    """Overall game status, always derived from the attempt state."""
    INITIALIZING = "INITIALIZING"
    BUSY = "BUSY"
    PLAYING = "PLAYING"
    WON = "WON"
    LOST = "LOST"

    @property
    def is_terminal(self) -> bool:
        return self in (GameStatus.WON, GameStatus.LOST)


@dataclass
class LetterGuess:
    """A single typed character and, once scored, its verdict."""
    char: str
    result: Optional[LetterResult] = None

    @property
    def is_scored(self) -> bool:
        return self.result is not None

    def to_dict(self) -> Dict[str, str]:
        data = {'char': self.char}
        if self.result is not None:
            data['result'] = self.result.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LetterGuess':
        result = data.get('result')
        return cls(char=data['char'], result=LetterResult(result) if result else None)


@dataclass
class Attempt:
    """One row of the board: the letters of a guess in position order."""
    letters: List[LetterGuess] = field(default_factory=list)

    @property
    def is_scored(self) -> bool:
        return any(letter.is_scored for letter in self.letters)

    @property
    def is_winning(self) -> bool:
        return bool(self.letters) and all(
            letter.result == LetterResult.GREEN for letter in self.letters
        )

    @property
    def word(self) -> str:
        return ''.join(letter.char for letter in self.letters)

    def to_dict(self) -> Dict[str, List[Dict[str, str]]]:
        return {'letters': [letter.to_dict() for letter in self.letters]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Attempt':
        return cls(letters=[LetterGuess.from_dict(letter) for letter in data.get('letters', [])])


@dataclass
class PersistedPuzzleState:
    """
    Saved progress for one puzzle.
    
    Every field is optional because saves are partial and merged into the
    existing record field by field.
    """
    attempts: Optional[List[Attempt]] = None
    status: Optional[GameStatus] = None
    winning_attempt: Optional[Attempt] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize only the fields that are set."""
        data: Dict[str, Any] = {}
        if self.attempts is not None:
            data['attempts'] = [attempt.to_dict() for attempt in self.attempts]
        if self.status is not None:
            data['status'] = self.status.value
        if self.winning_attempt is not None:
            data['winning_attempt'] = self.winning_attempt.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PersistedPuzzleState':
        """
        Rebuild a record from its JSON form.
        
        Raises:
            PersistenceReadError: If the record is not a mapping or holds malformed fields
        """
        if not isinstance(data, dict):
            raise PersistenceReadError(f"Saved puzzle record must be an object, got {type(data).__name__}")
        try:
            attempts = data.get('attempts')
            status = data.get('status')
            winning_attempt = data.get('winning_attempt')
            return cls(
                attempts=[Attempt.from_dict(a) for a in attempts] if attempts is not None else None,
                status=GameStatus(status) if status is not None else None,
                winning_attempt=Attempt.from_dict(winning_attempt) if winning_attempt is not None else None,
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise PersistenceReadError(f"Malformed saved puzzle record: {e}") from e


@dataclass
class GameSnapshot:
    """Read-only view of an engine handed to the presentation layer."""
    puzzle_id: int
    status: str
    attempts: List[Dict[str, Any]]
    current_attempt_index: int
    letter_history: Dict[str, str]
    result_modal_visible: bool
    error: Optional[str] = None
    error_type: Optional[str] = None
    share_text: Optional[str] = None  # Only included when game is over
