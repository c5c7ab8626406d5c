"""
Session Service

Keeps one game engine per connected client.
"""

import re
from typing import Callable, Dict, Optional

from ..config import Config
from ..config.game_settings import WORD_LIST
from .game_engine import GameEngine
from .persistence import (
    DEFAULT_NAMESPACE,
    InMemoryPersistenceAdapter,
    JsonFilePersistenceAdapter,
    MongoPersistenceAdapter,
    PersistenceAdapter,
    connect_mongo_collection,
)
from .scheduler import ThreadingScheduler
from .scoring_service import HttpScoringClient, LocalScoringService, get_scoring_service

PLAYER_ID_PATTERN = re.compile(r'^[A-Za-z0-9_-]{1,64}$')


class SessionService:
    """
    Session manager for puzzle engines.
    
    This class handles:
    - One GameEngine per client session id
    - Per-player persistence namespaces so saved progress follows the player
    - Teardown of engines when clients leave
    """
    
    def __init__(self,
                 scoring_service,
                 persistence_factory: Callable[[str], PersistenceAdapter],
                 scheduler=None,
                 settle_delay: float = Config.SETTLE_DELAY_SECONDS,
                 reveal_delay_per_letter: float = Config.REVEAL_DELAY_PER_LETTER_SECONDS):
        self.scoring_service = scoring_service
        self.persistence_factory = persistence_factory
        self.scheduler = scheduler or ThreadingScheduler()
        self.settle_delay = settle_delay
        self.reveal_delay_per_letter = reveal_delay_per_letter
        self.sessions: Dict[str, GameEngine] = {}
    
    def create_session(self, session_id: str, player_id: str) -> GameEngine:
        """
        Build and start an engine for a client, replacing any previous one.
        
        Raises:
            ValueError: If the player id is not a short alphanumeric token
            WordOfDayUnavailableError: If today's puzzle has no secret word
        """
        if not isinstance(player_id, str) or not PLAYER_ID_PATTERN.match(player_id):
            raise ValueError("player_id must be 1-64 letters, digits, '-' or '_'")
        
        self.end_session(session_id)
        
        puzzle_id = self.scoring_service.check_word_of_day()
        engine = GameEngine(
            puzzle_id=puzzle_id,
            scoring_service=self.scoring_service,
            persistence=self.persistence_factory(f"{DEFAULT_NAMESPACE}:{player_id}"),
            scheduler=self.scheduler,
            settle_delay=self.settle_delay,
            reveal_delay_per_letter=self.reveal_delay_per_letter,
            player=player_id,
        )
        self.sessions[session_id] = engine
        return engine
    
    def get_session(self, session_id: str) -> Optional[GameEngine]:
        return self.sessions.get(session_id)
    
    def end_session(self, session_id: str) -> bool:
        """
        Close and forget a client's engine.
        
        Returns:
            bool: True if a session was removed, False if not found
        """
        engine = self.sessions.pop(session_id, None)
        if engine is None:
            return False
        engine.close()
        return True


def build_persistence_factory(config_class=Config) -> Callable[[str], PersistenceAdapter]:
    """Pick the storage backend named by PERSISTENCE_BACKEND."""
    backend = config_class.PERSISTENCE_BACKEND.lower()
    
    if backend == 'memory':
        shared_store: Dict[str, Dict] = {}
        return lambda namespace: InMemoryPersistenceAdapter(namespace, store=shared_store)
    
    if backend == 'json':
        return lambda namespace: JsonFilePersistenceAdapter(config_class.STATE_FILE, namespace)
    
    if backend == 'mongo':
        if not config_class.MONGO_URI:
            raise ValueError("MONGO_URI must be set when PERSISTENCE_BACKEND is 'mongo'")
        collection = connect_mongo_collection(config_class.MONGO_URI)
        return lambda namespace: MongoPersistenceAdapter(collection, namespace)
    
    raise ValueError(f"Unknown persistence backend: {config_class.PERSISTENCE_BACKEND}")


def build_scoring_service(config_class=Config):
    """Remote client when SCORING_API_URL is set, otherwise the in-process service."""
    if config_class.SCORING_API_URL:
        return HttpScoringClient(config_class.SCORING_API_URL)
    return get_scoring_service() or LocalScoringService(WORD_LIST, config_class.FIRST_WORD_DATE)


# Global service instance
_session_service = None


def get_session_service() -> Optional[SessionService]:
    """Get the global session service instance."""
    return _session_service


def initialize_session_service(config_class=Config, scheduler=None,
                               scoring_service=None, persistence_factory=None) -> SessionService:
    """Initialize the global session service instance."""
    global _session_service
    _session_service = SessionService(
        scoring_service=scoring_service or build_scoring_service(config_class),
        persistence_factory=persistence_factory or build_persistence_factory(config_class),
        scheduler=scheduler,
        settle_delay=config_class.SETTLE_DELAY_SECONDS,
        reveal_delay_per_letter=config_class.REVEAL_DELAY_PER_LETTER_SECONDS,
    )
    return _session_service
