"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import allow_methods, websocket_session_required
from .helpers import error_payload, snapshot_payload
from .game_logger import game_logger

__all__ = ['allow_methods', 'websocket_session_required', 'error_payload', 'snapshot_payload', 'game_logger']
