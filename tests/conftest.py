import logging

import pytest

from data.enums import ActionType
from data.types.bet import Bet
from tests.mocks.mock_logger import MockGameLogger
from tests.mocks.mock_player import MockPlayer


@pytest.fixture(autouse=True)
def setup_logging():
    """Automatically disable logging for all tests."""
    logging.disable(logging.CRITICAL)
    yield
    logging.disable(logging.NOTSET)


@pytest.fixture
def players():
    """Four players with equal bankrolls, in seat order."""
    return [
        MockPlayer(name="Player A", bankroll=1000),
        MockPlayer(name="Player B", bankroll=1000),
        MockPlayer(name="Player C", bankroll=1000),
        MockPlayer(name="Player D", bankroll=1000),
    ]


@pytest.fixture
def blind_bets(players):
    """Standard 1/2 blinds posted by the first two players."""
    return [
        Bet(player=players[0], action=ActionType.BET, size=1),
        Bet(player=players[1], action=ActionType.BET, size=2),
    ]


@pytest.fixture
def log_sink():
    """Log sink recording every message a game entity emits."""
    return MockGameLogger()
