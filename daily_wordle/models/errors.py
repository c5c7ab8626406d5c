"""
Domain Errors

Every error the puzzle engine and its collaborators raise.
Only WordOfDayUnavailableError is fatal for a session; the rest are recovered locally.
"""


class WordleError(Exception):
    """Base class for all puzzle errors."""


class InvalidAttemptError(WordleError):
    """The current attempt is too short or has characters outside a-z."""


class InvalidWordError(WordleError):
    """The submitted word is not WORD_LENGTH long or not in the accepted list."""


class ScoringServiceUnavailableError(WordleError):
    """Transport or service failure while scoring an attempt."""


class WordOfDayUnavailableError(WordleError):
    """No secret word is configured for the active puzzle."""


class PersistenceReadError(WordleError):
    """Saved state could not be read; callers fall back to a fresh session."""


class AttemptStoreError(WordleError):
    """A precondition of the attempt store was violated."""
