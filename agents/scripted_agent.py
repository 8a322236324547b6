from collections import deque
from typing import Iterable, Optional, Tuple, Union

from data.enums import ActionType
from data.types.bet import Bet
from game.player import Player
from loggers.player_logger import PlayerLogger

ScriptedAction = Union[ActionType, Tuple[ActionType, int], Tuple[ActionType, int, bool]]


class ScriptedAgent(Player):
    """A player that replays a fixed sequence of actions.

    Useful as a test double and for replaying recorded hands. Each scripted action is
    either an ``ActionType`` or a ``(action, size)`` / ``(action, size, all_in)`` tuple.
    Once the script runs out the agent checks when it owes nothing and folds otherwise.
    """

    def __init__(
        self,
        name: str,
        actions: Iterable[ScriptedAction] = (),
        bankroll: int = 1000,
        player_id: Optional[str] = None,
    ) -> None:
        super().__init__(name, bankroll, player_id)
        self.script = deque(actions)

    def decide_action(self, pot) -> Bet:
        if not self.script:
            if pot.amount_owed(self) == 0:
                PlayerLogger.log_script_exhausted(self.name, "check")
                return Bet(player=self, action=ActionType.CHECK)
            PlayerLogger.log_script_exhausted(self.name, "fold")
            return Bet(player=self, action=ActionType.FOLD)

        step = self.script.popleft()
        if isinstance(step, ActionType):
            step = (step,)
        action, size, all_in = (tuple(step) + (0, False))[:3]
        bet = Bet(player=self, action=action, size=size, all_in=all_in)
        PlayerLogger.log_decision(self.name, str(bet))
        return bet
