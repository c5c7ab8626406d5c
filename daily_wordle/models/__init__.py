"""
Data Models Package

Contains all data models and error types used throughout the application.
"""

from .errors import (
    AttemptStoreError,
    InvalidAttemptError,
    InvalidWordError,
    PersistenceReadError,
    ScoringServiceUnavailableError,
    WordleError,
    WordOfDayUnavailableError,
)
from .game import Attempt, GameSnapshot, GameStatus, LetterGuess, LetterResult, PersistedPuzzleState

__all__ = [
    'Attempt', 'GameSnapshot', 'GameStatus', 'LetterGuess', 'LetterResult', 'PersistedPuzzleState',
    'WordleError', 'InvalidAttemptError', 'InvalidWordError', 'ScoringServiceUnavailableError',
    'WordOfDayUnavailableError', 'PersistenceReadError', 'AttemptStoreError',
]
