import logging
import random
from typing import List, Optional

from data.enums import ActionType, LimitType
from data.types.bet import Bet
from game.player import Player

logger = logging.getLogger(__name__)


class RandomAgent(Player):
    """A poker player that makes random legal decisions.

    The agent only reads the pot through its public queries. Its bankroll is taken as
    the chips it has behind at decision time; keeping it up to date is left to the
    caller running the hand.
    """

    def __init__(
        self,
        name: str,
        bankroll: int = 1000,
        player_id: Optional[str] = None,
        rng: Optional[random.Random] = None,
    ):
        """Initialize the random agent."""
        super().__init__(name, bankroll, player_id)
        self.rng = rng or random.Random()

    def decide_action(self, pot) -> Bet:
        """Randomly pick one of the actions the pot would currently accept.

        Args:
            pot: The pot the agent is acting in

        Returns:
            Bet: Fold, check, call, bet or raise sized within the limit rules. Sizes
            that exceed the bankroll are posted all-in.
        """
        owed = pot.amount_owed(self)
        stack = self.bankroll

        if stack == 0:
            # Nothing behind, can only check or give up
            action = ActionType.CHECK if owed == 0 else ActionType.FOLD
            logger.info(f"{self.name} has no chips behind, {action.value}s")
            return Bet(player=self, action=action)

        actions: List[ActionType] = []
        if owed == 0:
            actions.append(ActionType.CHECK)
        else:
            actions.extend([ActionType.FOLD, ActionType.CALL])
        if pot.current_bet == 0:
            actions.append(ActionType.BET)
        elif stack > owed and not (pot.raise_limit and pot.raise_count >= pot.raise_limit):
            actions.append(ActionType.RAISE)

        action = self.rng.choice(actions)
        logger.info(f"{self.name} randomly decided to {action.value}")

        if action in (ActionType.FOLD, ActionType.CHECK):
            return Bet(player=self, action=action)
        if action == ActionType.CALL:
            return self._capped(ActionType.CALL, owed)
        if action == ActionType.BET:
            return self._capped(ActionType.BET, self._pick_size(pot, stack))
        return self._capped(ActionType.RAISE, owed + self._pick_size(pot, stack - owed))

    def _pick_size(self, pot, available: int) -> int:
        """Pick a bet size or raise increment allowed by the pot's limit rules."""
        if pot.limit_type == LimitType.FIXED_LIMIT:
            return pot.minimum_bet
        smallest = max(pot.minimum_bet, pot.last_raise, 1)
        if available <= smallest:
            return smallest
        return self.rng.randint(smallest, available)

    def _capped(self, action: ActionType, size: int) -> Bet:
        """Build a bet, going all-in when the bankroll doesn't cover it."""
        if size >= self.bankroll:
            return Bet(player=self, action=action, size=self.bankroll, all_in=True)
        return Bet(player=self, action=action, size=size)
