"""
Game Logger

Structured logging for the puzzle server. Every entry is one JSON object
(after a timestamp and level prefix) in a dated file under the log directory,
so a day's traffic can be replayed or counted line by line.
"""

import logging
import json
from collections import Counter
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from ..config import Config

ENTRY_SEPARATOR = ' | '

# Event types, in the order the health check reports them
USER_ACTION = 'USER_ACTION'
RESPONSE_OK = 'SERVER_RESPONSE_SUCCESS'
RESPONSE_FAILED = 'SERVER_RESPONSE_ERROR'
GAME_EVENT = 'GAME_EVENT'
ERROR = 'ERROR'


class GameLogger:
    """
    Writes user actions, endpoint responses and puzzle events as JSON lines.

    Warnings and errors are echoed to the console as well.
    """

    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        level_number = logging.getLevelName(level.upper())
        self.level = level_number if isinstance(level_number, int) else logging.INFO
        self.logger = self._setup_logger()

    def _log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now():%Y-%m-%d}.log"

    def _setup_logger(self) -> logging.Logger:
        logger = logging.getLogger('daily_wordle')
        logger.setLevel(self.level)
        logger.handlers.clear()

        file_handler = logging.FileHandler(self._log_file(), encoding='utf-8')
        file_handler.setLevel(self.level)
        file_handler.setFormatter(logging.Formatter(
            ENTRY_SEPARATOR.join(['%(asctime)s', '%(levelname)s', '%(message)s']),
            datefmt='%Y-%m-%d %H:%M:%S'
        ))

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)
        return logger

    @staticmethod
    def _client(request) -> Dict[str, Optional[str]]:
        """Who sent a request: the remote address and, over Socket.IO, the sid."""
        return {
            'user_ip': getattr(request, 'remote_addr', None) or 'unknown',
            'session_id': getattr(request, 'sid', None),
        }

    def _write(self, level: int, event_type: str, action: str,
               client: Dict[str, Optional[str]], details: Dict[str, Any]) -> None:
        entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'user': client,
            'details': details,
        }
        self.logger.log(level, json.dumps(entry, ensure_ascii=False, default=str))

    def log_user_action(self, request, action: str, puzzle_id: Optional[int] = None, **kwargs):
        """Record an incoming HTTP request or Socket.IO event."""
        details = {
            'puzzle_id': puzzle_id,
            'endpoint': getattr(request, 'endpoint', None),
            'method': getattr(request, 'method', None),
            **kwargs
        }
        self._write(logging.INFO, USER_ACTION, action, self._client(request), details)

    def log_server_response(self, request, action: str, success: bool,
                            response_data: Dict[str, Any], puzzle_id: Optional[int] = None, **kwargs):
        """Record what an endpoint sent back; failed responses are logged as errors."""
        details = {
            'puzzle_id': puzzle_id,
            'success': success,
            'response_data': summarize_payload(response_data),
            **kwargs
        }
        if success:
            self._write(logging.INFO, RESPONSE_OK, action, self._client(request), details)
        else:
            self._write(logging.ERROR, RESPONSE_FAILED, action, self._client(request), details)

    def log_game_event(self, puzzle_id: Optional[int], event: str, player: Optional[str],
                       level: int = logging.INFO, **kwargs):
        """
        Record something that happened inside a game session.

        Args:
            puzzle_id: Puzzle the session is playing
            event: e.g. 'attempt_scored', 'game_won', 'finished_game_restored'
            player: Player id the session belongs to
            level: Logging level for the entry
        """
        client = {'user_ip': None, 'session_id': player}
        self._write(level, GAME_EVENT, event, client, {'puzzle_id': puzzle_id, **kwargs})

    def log_error(self, request, error: Exception, action: str, puzzle_id: Optional[int] = None):
        details = {
            'puzzle_id': puzzle_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
        }
        self._write(logging.ERROR, ERROR, action, self._client(request), details)

    def get_log_stats(self) -> Dict[str, Any]:
        """Count today's entries per event type for the health endpoint."""
        log_file = self._log_file()
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        counts = Counter()
        try:
            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    counts[_event_type(line)] += 1
            size = log_file.stat().st_size
        except OSError as e:
            return {'error': f'Failed to get stats: {e}'}

        return {
            'log_file': str(log_file),
            'file_size_mb': round(size / (1024 * 1024), 2),
            'total_entries': sum(n for event, n in counts.items() if event is not None),
            'user_actions': counts[USER_ACTION],
            'server_responses': counts[RESPONSE_OK] + counts[RESPONSE_FAILED],
            'game_events': counts[GAME_EVENT],
            'errors': counts[ERROR],
        }


def _event_type(line: str) -> Optional[str]:
    """Event type of a log line, 'OTHER' for plain messages, None for blank lines."""
    if not line.strip():
        return None
    message = line.rstrip('\n').split(ENTRY_SEPARATOR, 2)[-1]
    try:
        entry = json.loads(message)
    except ValueError:
        return 'OTHER'
    return entry.get('event_type', 'OTHER') if isinstance(entry, dict) else 'OTHER'


def summarize_payload(data: Any) -> Dict[str, Any]:
    """Shrink a response payload for logging; game snapshots keep only a board summary."""
    if not isinstance(data, dict):
        return {'data_type': type(data).__name__}

    summary = {key: value for key, value in data.items() if key != 'letter_history'}
    attempts = summary.get('attempts')
    if isinstance(attempts, list):
        summary['attempts'] = {
            'scored': sum(
                1 for attempt in attempts
                if any('result' in letter for letter in attempt.get('letters', []))
            ),
            'total': len(attempts),
        }
    return summary


# Global logger instance
game_logger = GameLogger(Config.LOG_DIR, Config.LOG_LEVEL)
