from datetime import date

import pytest

from daily_wordle.services.game_engine import GameEngine
from daily_wordle.services.persistence import InMemoryPersistenceAdapter
from daily_wordle.services.scoring_service import LocalScoringService

from .helpers import (
    EPOCH,
    REVEAL_DELAY_PER_LETTER,
    SETTLE_DELAY,
    TEST_WORDS,
    ManualScheduler,
    StubScoringService,
)


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def persistence():
    return InMemoryPersistenceAdapter()


@pytest.fixture
def scoring():
    return StubScoringService()


@pytest.fixture
def local_scoring():
    return LocalScoringService(TEST_WORDS, EPOCH, today=lambda: date(2026, 10, 1))


@pytest.fixture
def make_engine(scoring, persistence, scheduler):
    def _make(**overrides):
        options = dict(
            puzzle_id=0,
            scoring_service=scoring,
            persistence=persistence,
            scheduler=scheduler,
            settle_delay=SETTLE_DELAY,
            reveal_delay_per_letter=REVEAL_DELAY_PER_LETTER,
            player="tester",
        )
        options.update(overrides)
        return GameEngine(**options)
    return _make


@pytest.fixture
def engine(make_engine, scheduler):
    """An engine that has finished its settle delay and is PLAYING."""
    game = make_engine()
    game.start()
    scheduler.run_pending()
    return game
