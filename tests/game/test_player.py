import pytest

from agents.scripted_agent import ScriptedAgent
from game.player import Player


class TestPlayer:
    @pytest.fixture
    def player(self):
        return Player("TestPlayer", 1000)

    def test_player_initialization(self, player):
        """Test that a player is initialized with correct default values"""
        assert player.name == "TestPlayer"
        assert player.bankroll == 1000
        assert isinstance(player.player_id, str)
        assert player.player_id

    def test_default_bankroll(self):
        assert Player("Someone").bankroll == 1000

    def test_player_ids_are_unique(self):
        assert Player("Same").player_id != Player("Same").player_id

    def test_explicit_player_id(self):
        assert Player("Alice", player_id="seat-1").player_id == "seat-1"

    @pytest.mark.parametrize("name", ["", "   "])
    def test_empty_name(self, name):
        with pytest.raises(ValueError):
            Player(name)

    def test_negative_bankroll(self):
        with pytest.raises(ValueError):
            Player("Alice", -1)

    def test_non_integer_bankroll(self):
        with pytest.raises(ValueError):
            Player("Alice", 10.5)

    def test_decide_action_not_implemented(self, player):
        with pytest.raises(NotImplementedError):
            player.decide_action(None)

    def test_repr(self):
        assert repr(ScriptedAgent("Bob", bankroll=50)) == "ScriptedAgent(name='Bob', bankroll=50)"
