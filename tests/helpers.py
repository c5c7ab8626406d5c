from daily_wordle.models.errors import InvalidWordError
from daily_wordle.models.game import Attempt, LetterGuess
from daily_wordle.services.scheduler import ScheduledCall
from daily_wordle.services.scoring_service import score_word

# Index 0 is the answer on the epoch date
TEST_WORDS = ["crane", "trace", "stare", "plumb", "glory", "sheep", "react", "pious", "dwarf"]
EPOCH = "2026-10-01"
SETTLE_DELAY = 0.5
REVEAL_DELAY_PER_LETTER = 0.5


class ManualScheduler:
    """Collects continuations and runs them only when told to."""

    def __init__(self):
        self.calls = []

    def call_later(self, delay, callback):
        call = ScheduledCall(callback)
        self.calls.append((delay, call))
        return call

    @property
    def pending(self):
        return [(delay, call) for delay, call in self.calls if call.active]

    def run_pending(self):
        ran = 0
        while self.pending:
            for _, call in self.pending:
                call.run()
                ran += 1
        return ran


class StubScoringService:
    """Scores against a fixed secret (or returns a canned result) and records every word it sees."""

    def __init__(self, secret="crane", accepted=TEST_WORDS, error=None, puzzle_id=0, result=None):
        self.secret = secret
        self.accepted = set(accepted)
        self.error = error
        self.puzzle_id = puzzle_id
        self.result = result
        self.scored = []
        self.scored_puzzles = []
        self.on_score = None

    def check_word_of_day(self):
        return self.puzzle_id

    def score(self, word, puzzle_id=None):
        self.scored.append(word)
        self.scored_puzzles.append(puzzle_id)
        if self.on_score is not None:
            self.on_score()
        if self.error is not None:
            raise self.error
        if word not in self.accepted:
            raise InvalidWordError("Submitted word is invalid")
        if self.result is not None:
            return self.result
        return score_word(word, self.secret)


def scored_attempt(word, secret="crane"):
    return Attempt(letters=score_word(word, secret))


def typed_attempt(word):
    return Attempt(letters=[LetterGuess(char) for char in word])


def play(engine, scheduler, word):
    """Type, submit and fully reveal one attempt."""
    engine.set_current_guess(word)
    submitted = engine.submit()
    scheduler.run_pending()
    return submitted
