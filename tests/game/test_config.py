import pytest

from data.enums import ActionType, LimitType, PlayerStatus
from exceptions import InvalidLimitError
from game.config import GameConfig
from game.pot import Pot
from tests.mocks.mock_player import MockPlayer


class TestGameConfig:
    def test_defaults(self):
        config = GameConfig()
        assert config.small_blind == 1
        assert config.big_blind == 2
        assert config.ante == 0
        assert config.straddle == 0
        assert config.min_bet == 2
        assert config.max_raises_per_round == 0
        assert config.limit_type == LimitType.NO_LIMIT

    def test_explicit_min_bet(self):
        assert GameConfig(small_blind=5, big_blind=10, min_bet=20).min_bet == 20

    def test_limit_type_from_string(self):
        assert GameConfig(limit_type="fixed-limit").limit_type == LimitType.FIXED_LIMIT

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"small_blind": -1},
            {"big_blind": -2},
            {"small_blind": 5, "big_blind": 2},
            {"ante": -1},
            {"straddle": -4},
            {"straddle": 2},
            {"min_bet": -10},
            {"max_raises_per_round": -1},
        ],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(InvalidLimitError):
            GameConfig(**kwargs)


class TestForcedBets:
    def test_blinds(self, players):
        bets = GameConfig().forced_bets(players)

        assert [(b.player, b.action, b.size) for b in bets] == [
            (players[0], ActionType.BET, 1),
            (players[1], ActionType.BET, 2),
        ]
        assert not any(b.all_in for b in bets)

    def test_antes_come_first(self, players):
        bets = GameConfig(ante=1).forced_bets(players)

        assert [b.action for b in bets[:4]] == [ActionType.CALL] * 4
        assert [b.player for b in bets[:4]] == players
        assert [b.action for b in bets[4:]] == [ActionType.BET, ActionType.BET]

    def test_straddle(self, players):
        bets = GameConfig(straddle=4).forced_bets(players)

        assert bets[-1].player is players[2]
        assert bets[-1].action == ActionType.RAISE
        assert bets[-1].size == 4

    def test_short_bankroll_posts_all_in(self):
        players = [MockPlayer("Alice", 100), MockPlayer("Bob", 3), MockPlayer("Carol", 0)]
        bets = GameConfig(small_blind=2, big_blind=4, ante=1).forced_bets(players)

        assert [(b.player.name, b.size, b.all_in) for b in bets] == [
            ("Alice", 1, False),
            ("Bob", 1, False),
            ("Alice", 2, False),
            ("Bob", 2, True),
        ]


class TestPotFromConfig:
    def test_blinds_and_antes(self, players):
        pot = Pot.from_config(players, GameConfig(ante=1))

        assert pot.total_size == 7
        assert pot.total_owed == 5
        assert pot.current_bet == 2
        assert pot.minimum_bet == 2

    def test_straddle(self, players):
        pot = Pot.from_config(
            players, GameConfig(straddle=4, max_raises_per_round=3)
        )

        assert pot.raise_limit == 3
        assert pot.raise_count == 1
        assert pot.current_bet == 4
        assert pot.total_size == 7
        assert [pot.amount_owed(p) for p in players] == [3, 2, 0, 4]

    def test_short_big_blind(self):
        players = [MockPlayer("Alice", 100), MockPlayer("Bob", 1), MockPlayer("Carol", 100)]
        pot = Pot.from_config(players, GameConfig(small_blind=1, big_blind=2))

        assert pot.player_status(players[1]) == PlayerStatus.ALL_IN
        assert pot.total_size == 2
        assert pot.current_bet == 1
        assert pot.amount_owed(players[2]) == 1
