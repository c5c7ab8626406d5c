"""
Attempt Store

Owns the fixed board of attempts and the index of the attempt being edited.
"""

from typing import List, Optional, Sequence

from ..config.game_settings import MAX_ATTEMPTS, WORD_LENGTH
from ..models.errors import AttemptStoreError
from ..models.game import Attempt, LetterGuess


class AttemptStore:
    """
    Ordered, fixed-size list of attempts plus the current attempt index.
    
    Attempts before the index are fully scored; the attempt at the index is
    the one being typed. The index reaching MAX_ATTEMPTS means the board is
    exhausted.
    """
    
    def __init__(self, max_attempts: int = MAX_ATTEMPTS):
        self.max_attempts = max_attempts
        self.attempts: List[Attempt] = []
        self.current_attempt_index = 0
        self.initialize(max_attempts)
    
    def initialize(self, count: Optional[int] = None) -> None:
        """Reset to `count` empty attempts."""
        count = self.max_attempts if count is None else count
        self.attempts = [Attempt() for _ in range(count)]
        self.current_attempt_index = 0
    
    def restore(self, saved_attempts: Sequence[Attempt]) -> None:
        """
        Replace the board with saved attempts and recompute the index.
        
        The index lands on the first attempt with no scored letter, or on
        MAX_ATTEMPTS when every attempt is scored.
        
        Raises:
            AttemptStoreError: If the saved board does not have exactly max_attempts rows
        """
        if len(saved_attempts) != self.max_attempts:
            raise AttemptStoreError(
                f"Saved board has {len(saved_attempts)} attempts, expected {self.max_attempts}"
            )
        self.attempts = [
            Attempt(letters=[LetterGuess(l.char, l.result) for l in attempt.letters])
            for attempt in saved_attempts
        ]
        self.current_attempt_index = next(
            (index for index, attempt in enumerate(self.attempts) if not attempt.is_scored),
            self.max_attempts,
        )
    
    @property
    def is_exhausted(self) -> bool:
        return self.current_attempt_index >= self.max_attempts
    
    @property
    def current_attempt(self) -> Optional[Attempt]:
        if self.is_exhausted:
            return None
        return self.attempts[self.current_attempt_index]
    
    def set_current_guess(self, text: str) -> bool:
        """
        Replace the letters of the current attempt with `text`.
        
        Returns:
            bool: False when the text is too long or the board is exhausted
        """
        if len(text) > WORD_LENGTH or self.is_exhausted:
            return False
        self.attempts[self.current_attempt_index] = Attempt(
            letters=[LetterGuess(char=char.lower()) for char in text]
        )
        return True
    
    def append_result(self, index: int, scored_letters: Sequence[LetterGuess]) -> None:
        """
        Record the verdicts for the attempt at `index`.
        
        Raises:
            AttemptStoreError: If the index is out of bounds, the attempt is
                already scored, or the letters are not a complete scored word
        """
        if index < 0 or index >= len(self.attempts):
            raise AttemptStoreError(f"Attempt index {index} is out of bounds")
        if self.attempts[index].is_scored:
            raise AttemptStoreError(f"Attempt {index} has already been scored")
        if len(scored_letters) != WORD_LENGTH or not all(l.is_scored for l in scored_letters):
            raise AttemptStoreError(f"Attempt {index} needs {WORD_LENGTH} scored letters")
        self.attempts[index] = Attempt(
            letters=[LetterGuess(char=l.char.lower(), result=l.result) for l in scored_letters]
        )
    
    def advance_index(self) -> None:
        if self.current_attempt_index < self.max_attempts:
            self.current_attempt_index += 1
