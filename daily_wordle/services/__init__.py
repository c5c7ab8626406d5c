"""
Services Package

Contains all business logic and service classes.
"""

from .attempt_store import AttemptStore
from .game_engine import GameEngine
from .persistence import (
    InMemoryPersistenceAdapter,
    JsonFilePersistenceAdapter,
    MongoPersistenceAdapter,
    PersistenceAdapter,
)
from .scheduler import SocketIOScheduler, ThreadingScheduler
from .scoring_service import (
    HttpScoringClient,
    LocalScoringService,
    get_scoring_service,
    score_word,
)
from .session_service import SessionService, get_session_service

__all__ = [
    'AttemptStore', 'GameEngine',
    'PersistenceAdapter', 'InMemoryPersistenceAdapter', 'JsonFilePersistenceAdapter', 'MongoPersistenceAdapter',
    'ThreadingScheduler', 'SocketIOScheduler',
    'LocalScoringService', 'HttpScoringClient', 'get_scoring_service', 'score_word',
    'SessionService', 'get_session_service',
]
