"""
Game Engine

Runs one player's session of the daily puzzle: editing the current guess,
scoring submitted attempts, revealing results and saving progress.
"""

import copy
import logging
import threading
from typing import Callable, List, Optional

from ..config.game_settings import (
    ALPHABET,
    MAX_ATTEMPTS,
    REVEAL_DELAY_PER_LETTER_SECONDS,
    SETTLE_DELAY_SECONDS,
    WORD_LENGTH,
)
from ..models.errors import (
    AttemptStoreError,
    InvalidAttemptError,
    PersistenceReadError,
    WordOfDayUnavailableError,
)
from ..models.game import (
    Attempt,
    GameSnapshot,
    GameStatus,
    LetterResult,
    PersistedPuzzleState,
)
from ..utils.game_logger import game_logger
from .attempt_store import AttemptStore
from .letter_history import LetterHistory, fold_letters, from_attempts
from .persistence import PersistenceAdapter
from .status_resolver import resolve_status

SHARE_SQUARES = {
    LetterResult.GREEN: "\U0001F7E9",
    LetterResult.YELLOW: "\U0001F7E8",
    LetterResult.BLACK: "⬛",
}


class GameEngine:
    """
    State machine for a single puzzle session.

    Status is never stored; it is resolved from the initialization flag, the
    busy flag and the attempt store every time it is read. Delays run as
    scheduler continuations, so tests can drive them by hand.

    Once the engine is closed, pending continuations are cancelled and scoring
    results that arrive late are discarded.
    """

    def __init__(self,
                 puzzle_id: int,
                 scoring_service,
                 persistence: PersistenceAdapter,
                 scheduler,
                 settle_delay: float = SETTLE_DELAY_SECONDS,
                 reveal_delay_per_letter: float = REVEAL_DELAY_PER_LETTER_SECONDS,
                 player: Optional[str] = None,
                 max_attempts: int = MAX_ATTEMPTS):
        self.puzzle_id = puzzle_id
        self.scoring_service = scoring_service
        self.persistence = persistence
        self.scheduler = scheduler
        self.settle_delay = settle_delay
        self.reveal_delay_per_letter = reveal_delay_per_letter
        self.player = player

        self.store = AttemptStore(max_attempts)
        self._letter_history: LetterHistory = {}
        self._is_initialized = False
        self._is_busy = False
        self._result_modal_visible = False
        self._error: Optional[Exception] = None
        self._closed = False
        self._last_status = GameStatus.INITIALIZING
        self._restored_state: Optional[PersistedPuzzleState] = None
        self._pending = []
        self._listeners: List[Callable[['GameEngine'], None]] = []
        self._lock = threading.RLock()

    # Queries

    @property
    def status(self) -> GameStatus:
        return resolve_status(
            self._is_initialized,
            self._is_busy,
            self.store.attempts,
            self.store.current_attempt_index,
            self.store.max_attempts,
        )

    @property
    def attempts(self) -> List[Attempt]:
        return copy.deepcopy(self.store.attempts)

    @property
    def current_attempt_index(self) -> int:
        return self.store.current_attempt_index

    @property
    def letter_history(self) -> LetterHistory:
        return dict(self._letter_history)

    @property
    def result_modal_visible(self) -> bool:
        return self._result_modal_visible

    @property
    def error(self) -> Optional[Exception]:
        return self._error

    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    def winning_attempt(self) -> Optional[Attempt]:
        for attempt in self.store.attempts:
            if attempt.is_winning:
                return copy.deepcopy(attempt)
        return None

    def share_text(self) -> Optional[str]:
        """Spoiler-free summary of a finished game, one square per letter."""
        status = self.status
        if not status.is_terminal:
            return None
        scored = [attempt for attempt in self.store.attempts if attempt.is_scored]
        if status == GameStatus.WON:
            winning_index = next(i for i, a in enumerate(scored) if a.is_winning)
            scored = scored[:winning_index + 1]
            score = str(len(scored))
        else:
            score = "X"
        rows = [
            ''.join(SHARE_SQUARES[letter.result] for letter in attempt.letters)
            for attempt in scored
        ]
        header = f"Wordle {self.puzzle_id} {score}/{self.store.max_attempts}"
        return '\n'.join([header, ''] + rows)

    def snapshot(self) -> GameSnapshot:
        with self._lock:
            return GameSnapshot(
                puzzle_id=self.puzzle_id,
                status=self.status.value,
                attempts=[attempt.to_dict() for attempt in self.store.attempts],
                current_attempt_index=self.store.current_attempt_index,
                letter_history={char: result.value for char, result in self._letter_history.items()},
                result_modal_visible=self._result_modal_visible,
                error=str(self._error) if self._error else None,
                error_type=type(self._error).__name__ if self._error else None,
                share_text=self.share_text(),
            )

    # Listeners

    def add_listener(self, callback: Callable[['GameEngine'], None]) -> None:
        """Register a callback run after every state change."""
        self._listeners.append(callback)

    def _notify(self) -> None:
        for callback in list(self._listeners):
            try:
                callback(self)
            except Exception as e:
                game_logger.logger.error(f"Game engine listener failed for puzzle {self.puzzle_id}: {e}")

    # Commands

    def start(self) -> None:
        """
        Restore saved progress (or start fresh) and schedule the settle delay.

        Raises:
            WordOfDayUnavailableError: If the puzzle has no secret word; the
                engine then stays INITIALIZING
        """
        with self._lock:
            try:
                self.scoring_service.check_word_of_day()
            except WordOfDayUnavailableError as e:
                self._error = e
                game_logger.log_game_event(
                    self.puzzle_id, 'word_of_day_unavailable', self.player,
                    level=logging.ERROR, error_message=str(e)
                )
                raise

            self._prune()
            saved = self._load_saved()
            restored = False
            if saved is not None and saved.attempts is not None:
                try:
                    self.store.restore(saved.attempts)
                    self._restored_state = saved
                    restored = True
                except AttemptStoreError as e:
                    game_logger.log_game_event(
                        self.puzzle_id, 'restore_failed', self.player,
                        level=logging.WARNING, error_message=str(e)
                    )
            if not restored:
                self.store.initialize()

            self._letter_history = from_attempts(self.store.attempts)
            self._save(PersistedPuzzleState(attempts=self.store.attempts))
            self._schedule(self.settle_delay, self._finish_initialization)

            game_logger.log_game_event(
                self.puzzle_id, 'game_restored' if restored else 'game_started', self.player,
                current_attempt_index=self.store.current_attempt_index
            )
        self._notify()

    def set_current_guess(self, text: str) -> bool:
        """
        Replace the letters of the attempt being typed.

        Returns:
            bool: False when ignored (not PLAYING, or text longer than a word)
        """
        with self._lock:
            if self._closed or self.status != GameStatus.PLAYING:
                return False
            if not self.store.set_current_guess(text):
                return False
            self._save(PersistedPuzzleState(attempts=self.store.attempts))
        self._notify()
        return True

    def submit(self) -> bool:
        """
        Score the current attempt.

        Only one scoring request runs at a time: calls made while BUSY, or
        after the game is over, are ignored.

        Returns:
            bool: True when the attempt was scored and its reveal scheduled

        Raises:
            InvalidAttemptError: If the attempt is incomplete or has invalid characters
            InvalidWordError: If the scoring service rejects the word
            ScoringServiceUnavailableError: If the scoring service cannot be reached
            WordOfDayUnavailableError: If the puzzle has no secret word
        """
        with self._lock:
            if self._closed or self.status != GameStatus.PLAYING:
                return False
            self._error = None
            index = self.store.current_attempt_index
            attempt = self.store.current_attempt
            try:
                self._validate_attempt(attempt)
            except InvalidAttemptError as e:
                self._error = e
                validation_error = e
            else:
                validation_error = None
                self._is_busy = True
                self._refresh_status()
                word = attempt.word
        if validation_error is not None:
            self._notify()
            raise validation_error
        self._notify()

        try:
            letters = self.scoring_service.score(word, self.puzzle_id)
        except Exception as e:
            self._fail_submission(index, word, e)
            raise

        with self._lock:
            if self._closed:
                return False
            try:
                self.store.append_result(index, letters)
            except AttemptStoreError as e:
                failure = e
            else:
                failure = None
                self._letter_history = fold_letters(self._letter_history, letters)
                self._save(PersistedPuzzleState(attempts=self.store.attempts))
                self._schedule(WORD_LENGTH * self.reveal_delay_per_letter, self._finish_reveal)
                game_logger.log_game_event(
                    self.puzzle_id, 'attempt_scored', self.player,
                    attempt_index=index, guess=word,
                    results=[letter.result.value for letter in letters]
                )
        if failure is not None:
            self._fail_submission(index, word, failure)
            raise failure
        self._notify()
        return True

    def show_result_modal(self) -> None:
        with self._lock:
            if not self.status.is_terminal:
                return
            self._result_modal_visible = True
        self._notify()

    def dismiss_result_modal(self) -> None:
        with self._lock:
            self._result_modal_visible = False
        self._notify()

    def close(self) -> None:
        """Tear down the session; nothing mutates the engine afterwards."""
        with self._lock:
            self._closed = True
            for call in self._pending:
                call.cancel()
            self._pending = []
            self._listeners = []

    # Continuations

    def _finish_initialization(self) -> None:
        with self._lock:
            if self._closed:
                return
            self._is_initialized = True
            self._refresh_status()
        self._notify()

    def _finish_reveal(self) -> None:
        with self._lock:
            if self._closed:
                return
            self.store.advance_index()
            self._is_busy = False
            self._refresh_status()
        self._notify()

    def _schedule(self, delay: float, callback: Callable[[], None]) -> None:
        call = self.scheduler.call_later(delay, callback)
        self._pending = [c for c in self._pending if c.active] + [call]

    # Helpers

    def _fail_submission(self, index: int, word: str, error: Exception) -> None:
        """Leave the attempt unscored and editable again."""
        with self._lock:
            self._is_busy = False
            self._error = error
            self._refresh_status()
            game_logger.log_game_event(
                self.puzzle_id, 'attempt_failed', self.player, level=logging.WARNING,
                attempt_index=index, guess=word, error_type=type(error).__name__, error_message=str(error)
            )
        self._notify()

    def _validate_attempt(self, attempt: Optional[Attempt]) -> None:
        if attempt is None or len(attempt.letters) != WORD_LENGTH:
            raise InvalidAttemptError(f"Attempt must have exactly {WORD_LENGTH} letters")
        invalid = [letter.char for letter in attempt.letters if letter.char not in ALPHABET]
        if invalid:
            raise InvalidAttemptError(f"Attempt contains invalid characters: {''.join(invalid)}")

    def _refresh_status(self) -> None:
        status = self.status
        previous = self._last_status
        if status == previous:
            return
        self._last_status = status
        if not status.is_terminal or previous.is_terminal:
            return
        if previous == GameStatus.INITIALIZING:
            self._on_finished_game_restored(status)
        else:
            self._on_game_over(status)

    def _on_finished_game_restored(self, status: GameStatus) -> None:
        # Only fill in outcome fields an older save is missing
        self._result_modal_visible = True
        saved = self._restored_state or PersistedPuzzleState()
        if saved.status is None:
            self._save(PersistedPuzzleState(status=status))
        winning_attempt = self.winning_attempt
        if winning_attempt is not None and saved.winning_attempt is None:
            self._save(PersistedPuzzleState(winning_attempt=winning_attempt))
        game_logger.log_game_event(
            self.puzzle_id, 'finished_game_restored', self.player, status=status.value
        )

    def _on_game_over(self, status: GameStatus) -> None:
        self._result_modal_visible = True
        self._save(PersistedPuzzleState(status=status))
        winning_attempt = self.winning_attempt
        if winning_attempt is not None:
            self._save(PersistedPuzzleState(winning_attempt=winning_attempt))
        game_logger.log_game_event(
            self.puzzle_id, 'game_won' if status == GameStatus.WON else 'game_lost', self.player,
            attempts_used=sum(1 for attempt in self.store.attempts if attempt.is_scored),
            winning_guess=winning_attempt.word if winning_attempt else None
        )

    def _prune(self) -> None:
        try:
            self.persistence.prune(self.puzzle_id)
        except Exception as e:
            game_logger.logger.error(f"Failed to prune saved games for puzzle {self.puzzle_id}: {e}")

    def _load_saved(self) -> Optional[PersistedPuzzleState]:
        try:
            return self.persistence.load_puzzle(self.puzzle_id)
        except PersistenceReadError as e:
            game_logger.log_game_event(
                self.puzzle_id, 'saved_game_unreadable', self.player,
                level=logging.WARNING, error_message=str(e)
            )
            return None

    def _save(self, partial: PersistedPuzzleState) -> None:
        try:
            self.persistence.save(partial, self.puzzle_id)
        except Exception as e:
            game_logger.logger.error(f"Failed to save puzzle {self.puzzle_id} ({', '.join(partial.to_dict())}): {e}")
