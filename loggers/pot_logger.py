import logging
from typing import List, Optional

from data.enums import GameLogLevel
from data.types.bet import Bet
from data.types.pot_types import SidePotView
from loggers.game_logger import GameLogger

logger = logging.getLogger(__name__)


class PotLogger:
    """Handles all logging operations for pot-related actions.

    Game events go to the injected sink; ledger bookkeeping goes to the module logger
    at debug level.
    """

    SOURCE = "Pot"

    def __init__(self, sink: Optional[GameLogger] = None) -> None:
        self.sink = sink if sink is not None else GameLogger()

    def log_pot_created(self, player_names: List[str]) -> None:
        """Log the creation of a pot."""
        self.sink.log(
            self.SOURCE,
            f"New pot got created! Players in the pot: {', '.join(player_names)}!",
            GameLogLevel.IMPORTANT_EVENT,
        )

    def log_bet(self, bet: Bet) -> None:
        """Log an accepted bet."""
        self.sink.log(self.SOURCE, str(bet))

    def log_next_round(self, betting_round: int) -> None:
        """Log the move to a new betting round."""
        self.sink.log(
            self.SOURCE,
            f"Advanced to betting round {betting_round}!",
            GameLogLevel.IMPORTANT_EVENT,
        )

    def log_rejection(self, message: str) -> None:
        """Log a rule violation right before it is raised."""
        self.sink.log(self.SOURCE, message, GameLogLevel.ERROR)

    def log_side_pots_info(self, side_pots: List[SidePotView]) -> None:
        """Log detailed side pot information."""
        for i, pot in enumerate(side_pots):
            label = "Main pot" if i == 0 else f"Side pot {i}"
            players_str = ", ".join(pot.eligible_players)
            self.sink.log(
                self.SOURCE, f"{label}: ${pot.amount} (Eligible: {players_str})"
            )

    @staticmethod
    def log_split(index: int, shortfall: int, eligible: List[str]) -> None:
        """Log a ledger split caused by a short all-in."""
        logger.debug(
            f"Split pot {index}: shortfall={shortfall}, new pot at {index + 1}, "
            f"eligible={eligible}"
        )

    @staticmethod
    def log_overpay(player_name: str, amount: int) -> None:
        """Log chips paid beyond the amount owed."""
        logger.debug(f"{player_name} overpaid ${amount}, added to the newest pot")

    @staticmethod
    def log_new_side_pot(eligible: List[str]) -> None:
        """Log an empty ledger opened after an all-in."""
        logger.debug(f"Opened new pot after all-in, eligible={eligible}")
