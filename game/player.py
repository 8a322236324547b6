from typing import TYPE_CHECKING, Optional
from uuid import uuid4

from loggers.player_logger import PlayerLogger

if TYPE_CHECKING:
    from data.types.bet import Bet
    from game.pot import Pot


class Player:
    """
    Represents a participant of a pot.

    The pot only uses a player as an identity (``player_id``) and a display name for
    logs. Decision making is delegated to subclasses through ``decide_action``, so a
    human input adapter, a scripted test double and an AI agent are interchangeable
    wherever a player is expected.

    Attributes:
        name (str): The player's display name
        bankroll (int): Chips the player has available outside the pot
        player_id (str): Stable identifier used as the key in pot ledgers
    """

    name: str
    bankroll: int
    player_id: str

    def __init__(
        self, name: str, bankroll: int = 1000, player_id: Optional[str] = None
    ) -> None:
        """
        Initialize a new player with a name and a bankroll.

        Args:
            name (str): The player's display name
            bankroll (int, optional): Available chips. Defaults to 1000.
            player_id (str, optional): Stable identifier. A random one is issued
                when omitted.

        Raises:
            ValueError: If name is empty or bankroll is negative
        """
        if not name or name.isspace():
            raise ValueError("Player name cannot be empty or whitespace")
        if not isinstance(bankroll, int):
            raise ValueError("Bankroll must be an integer value")
        if bankroll < 0:
            raise ValueError("Cannot initialize player with negative bankroll")

        self.name = name
        self.bankroll = bankroll
        self.player_id = player_id or uuid4().hex

        PlayerLogger.log_player_creation(name, bankroll)

    def decide_action(self, pot: "Pot") -> "Bet":
        """Produce the next action for this player.

        Args:
            pot: The pot the player is acting in. Only its read-only queries should
                be used.

        Returns:
            Bet: A validated action record for this player
        """
        raise NotImplementedError(
            f"{type(self).__name__} does not implement decide_action"
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, bankroll={self.bankroll})"
