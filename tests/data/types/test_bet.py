import pytest
from pydantic import ValidationError

from data.enums import ActionType
from data.types.bet import Bet
from exceptions import InvalidActionError
from tests.mocks.mock_player import MockPlayer


@pytest.fixture
def alice():
    return MockPlayer(name="Alice")


class TestBetValidation:
    @pytest.mark.parametrize("action", [ActionType.FOLD, ActionType.CHECK])
    def test_fold_and_check_without_size(self, alice, action):
        bet = Bet(player=alice, action=action)
        assert bet.size == 0
        assert bet.all_in is False

    @pytest.mark.parametrize("action", [ActionType.FOLD, ActionType.CHECK])
    def test_fold_and_check_with_size(self, alice, action):
        with pytest.raises(InvalidActionError):
            Bet(player=alice, action=action, size=10)

    @pytest.mark.parametrize("action", [ActionType.CALL, ActionType.BET, ActionType.RAISE])
    def test_chip_actions_need_size(self, alice, action):
        with pytest.raises(InvalidActionError):
            Bet(player=alice, action=action)

    def test_negative_size(self, alice):
        with pytest.raises(InvalidActionError):
            Bet(player=alice, action=ActionType.BET, size=-5)

    def test_action_from_string(self, alice):
        assert Bet(player=alice, action="raise", size=20).action == ActionType.RAISE

    def test_unknown_action(self, alice):
        with pytest.raises(ValidationError):
            Bet(player=alice, action="shove", size=20)

    def test_bet_is_frozen(self, alice):
        bet = Bet(player=alice, action=ActionType.CALL, size=10)
        with pytest.raises(ValidationError):
            bet.size = 20


class TestBetStr:
    @pytest.mark.parametrize(
        "action,size,all_in,expected",
        [
            (ActionType.FOLD, 0, False, "Alice folds!"),
            (ActionType.CHECK, 0, False, "Alice checks!"),
            (ActionType.CALL, 10, False, "Alice calls 10!"),
            (ActionType.CALL, 7, True, "Alice calls 7 all-in!"),
            (ActionType.BET, 20, False, "Alice bets 20!"),
            (ActionType.RAISE, 40, False, "Alice raises to 40!"),
            (ActionType.RAISE, 55, True, "Alice raises to 55 all-in!"),
        ],
    )
    def test_str(self, alice, action, size, all_in, expected):
        bet = Bet(player=alice, action=action, size=size, all_in=all_in)
        assert str(bet) == expected
