from dataclasses import dataclass
from typing import List, Optional, Sequence

from data.enums import ActionType, LimitType
from data.types.bet import Bet
from exceptions import InvalidLimitError
from game.player import Player


@dataclass
class GameConfig:
    """
    Betting structure of a hand.

    This class defines the forced bets and limits a pot is created with.

    Attributes:
        small_blind (int): Small blind posted by the first player (default: 1)
        big_blind (int): Big blind posted by the second player (default: 2)
        ante (int): Dead money posted by every player before the blinds (default: 0)
        straddle (int): Optional straddle posted by the third player, 0 for none
            (default: 0)
        min_bet (Optional[int]): Minimum bet amount, defaults to big blind if not
            specified
        max_raises_per_round (int): Maximum number of raises per betting round,
            0 for unlimited (default: 0)
        limit_type (LimitType): Betting structure (default: no-limit)

    Raises:
        InvalidLimitError: If any of the numerical parameters are invalid
    """

    small_blind: int = 1
    big_blind: int = 2
    ante: int = 0
    straddle: int = 0
    min_bet: Optional[int] = None
    max_raises_per_round: int = 0
    limit_type: LimitType = LimitType.NO_LIMIT

    def __post_init__(self):
        """Validate configuration parameters."""
        if self.small_blind < 0 or self.big_blind < 0:
            raise InvalidLimitError("Blinds cannot be negative")
        if self.small_blind > self.big_blind:
            raise InvalidLimitError("Small blind cannot be larger than big blind")
        if self.ante < 0:
            raise InvalidLimitError("Ante cannot be negative")
        if self.straddle < 0:
            raise InvalidLimitError("Straddle cannot be negative")
        if self.straddle and self.straddle <= self.big_blind:
            raise InvalidLimitError("Straddle must be larger than big blind")
        if self.max_raises_per_round < 0:
            raise InvalidLimitError("Max raises per round cannot be negative")
        # Set min_bet to big blind if not specified
        if self.min_bet is None:
            self.min_bet = self.big_blind
        elif self.min_bet < 0:
            raise InvalidLimitError("Minimum bet cannot be negative")
        self.limit_type = LimitType(self.limit_type)

    def forced_bets(self, players: Sequence[Player]) -> List[Bet]:
        """
        Build the bets posted before the first action, in posting order.

        Antes come first (as calls), then the small and big blind from the first two
        players (as bets) and the straddle from the third player (as a raise). A
        player whose bankroll doesn't cover a posting posts it all-in.

        Args:
            players: Players in seat order starting with the small blind

        Returns:
            List[Bet]: Forced bets ready to be passed to a new pot
        """
        bets: List[Bet] = []
        remaining = {p.player_id: p.bankroll for p in players}

        def post(player: Player, action: ActionType, amount: int) -> None:
            size = min(amount, remaining[player.player_id])
            if size <= 0:
                return
            remaining[player.player_id] -= size
            bets.append(
                Bet(
                    player=player,
                    action=action,
                    size=size,
                    all_in=remaining[player.player_id] == 0,
                )
            )

        if self.ante:
            for player in players:
                post(player, ActionType.CALL, self.ante)

        blinds = [(ActionType.BET, self.small_blind), (ActionType.BET, self.big_blind)]
        if self.straddle:
            blinds.append((ActionType.RAISE, self.straddle))
        for player, (action, amount) in zip(players, blinds):
            if amount:
                post(player, action, amount)

        return bets
