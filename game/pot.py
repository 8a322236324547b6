from typing import TYPE_CHECKING, Dict, List, Optional, Sequence, Type

from data.enums import ActionType, LimitType, PlayerStatus
from data.types.bet import Bet
from data.types.pot_types import PotState, SidePot, SidePotView
from exceptions import (
    BetNotAllowedError,
    CannotCheckError,
    InsufficientCallError,
    InvalidBetSizeError,
    InvalidBlindError,
    InvalidLimitError,
    InvalidRaiseSizeError,
    OutstandingBetError,
    PlayerCannotActError,
    PotRuleError,
    RaiseLimitExceededError,
    RaiseNotAllowedError,
    UnknownOrFoldedPlayerError,
)
from game.player import Player
from loggers.game_logger import GameLogger
from loggers.pot_logger import PotLogger

if TYPE_CHECKING:
    from game.config import GameConfig


class Pot:
    """
    Tracks what every player has put into a hand and what they still owe.

    The pot is an ordered list of side pots (ledgers). Index 0 is the main pot. Each
    ledger knows which players are still eligible for it, how much each of them owes
    and how many chips it holds. When a player goes all-in for less than they owe,
    the ledger they fall short in is split in two so that the all-in player is only
    entitled to what they could match.

    The pot maintains these invariants:
    - The sum of all ledger totals equals the sum of chips of all accepted bets
    - A folded player never appears in any ledger again
    - The raise count never exceeds the raise limit (when there is one)
    - The current bet only returns to 0 when the pot moves to the next round
    - Bet history is append-only and only copies of it are handed out

    Attributes:
        minimum_bet (int): Minimum size of a bet or raise increment
        raise_limit (int): Maximum number of raises per round, 0 if unlimited
        limit_type (LimitType): Betting structure
        raise_count (int): Raises made so far in the current round
        last_raise (int): Size of the last full bet or raise increment this round
        current_bet (int): Amount every active player has to match this round

    Usage:
        pot = Pot(players, [Bet(player=sb, action=ActionType.BET, size=1),
                            Bet(player=bb, action=ActionType.BET, size=2)], 2)

        pot.add_bet(Bet(player=utg, action=ActionType.CALL, size=2))
        pot.amount_owed(sb)  # 1

        # Once nobody owes anything
        pot.next_round()

    Note:
        - Mutating calls must be serialized per pot instance
        - A rejected bet leaves the pot unchanged
        - Who wins which ledger is decided outside the pot
    """

    def __init__(
        self,
        players: Sequence[Player],
        blind_bets: Optional[Sequence[Bet]] = None,
        minimum_bet: Optional[int] = None,
        raise_limit: int = 0,
        limit_type: LimitType = LimitType.NO_LIMIT,
        logger: Optional[GameLogger] = None,
    ) -> None:
        """
        Create a new pot for a hand.

        Args:
            players: Players taking part in the hand
            blind_bets: Bets posted before the first action, in posting order. Antes
                and sleepers are calls, blinds are bets, straddles are raises.
            minimum_bet: Minimum bet size, defaults to 0. Callers posting blinds should
                pass the highest blind.
            raise_limit: Maximum number of raises per round, 0 for no limit
            limit_type: Betting structure, defaults to no-limit
            logger: Log sink, defaults to the standard logging based GameLogger

        Raises:
            InvalidLimitError: If minimum_bet or raise_limit is negative
            InvalidBlindError: If a forced bet is a fold or a check
            PotRuleError: If a forced bet breaks any other betting rule
        """
        self._logger = PotLogger(logger)

        minimum_bet = 0 if minimum_bet is None else minimum_bet
        if minimum_bet < 0:
            raise self._reject(InvalidLimitError, "Minimum bet cannot be negative!")
        if raise_limit < 0:
            raise self._reject(InvalidLimitError, "Raise limit cannot be negative!")

        self._minimum_bet = minimum_bet
        self._raise_limit = raise_limit
        self._limit_type = limit_type
        self._raise_count = 0
        self._last_raise = 0
        self._current_bet = 0
        self._bet_history: List[List[Bet]] = [[]]

        self._players: Dict[str, Player] = {p.player_id: p for p in players}
        self._statuses: Dict[str, PlayerStatus] = {
            player_id: PlayerStatus.ACTIVE for player_id in self._players
        }
        self._side_pots: List[SidePot] = [SidePot.for_players(list(self._players))]

        self._logger.log_pot_created([p.name for p in players])

        for bet in blind_bets or []:
            if bet.action in (ActionType.FOLD, ActionType.CHECK):
                raise self._reject(
                    InvalidBlindError, f"Blind bet cannot be a {bet.action.value}!"
                )
            self._apply(bet, forced=True)

    @classmethod
    def from_config(
        cls,
        players: Sequence[Player],
        config: "GameConfig",
        logger: Optional[GameLogger] = None,
    ) -> "Pot":
        """Create a pot with the forced bets and limits described by a game config."""
        return cls(
            players,
            config.forced_bets(players),
            minimum_bet=config.min_bet,
            raise_limit=config.max_raises_per_round,
            limit_type=config.limit_type,
            logger=logger,
        )

    # Simple properties

    @property
    def minimum_bet(self) -> int:
        return self._minimum_bet

    @property
    def raise_limit(self) -> int:
        return self._raise_limit

    @property
    def limit_type(self) -> LimitType:
        return self._limit_type

    @property
    def raise_count(self) -> int:
        return self._raise_count

    @property
    def last_raise(self) -> int:
        return self._last_raise

    @property
    def current_bet(self) -> int:
        return self._current_bet

    # Computed properties

    @property
    def betting_round(self) -> int:
        """Index of the current betting round, starting at 0."""
        return len(self._bet_history) - 1

    @property
    def total_size(self) -> int:
        """Total chips in all pots."""
        return sum(side_pot.total_size for side_pot in self._side_pots)

    @property
    def total_owed(self) -> int:
        """Sum of what all players still owe the pot."""
        return sum(side_pot.owed_total for side_pot in self._side_pots)

    @property
    def players(self) -> List[Player]:
        """Players still in the pot (everyone who hasn't folded)."""
        return [
            self._players[player_id]
            for player_id, status in self._statuses.items()
            if status != PlayerStatus.FOLDED
        ]

    @property
    def active_players(self) -> List[Player]:
        """Players who can still act (neither folded nor all-in)."""
        return [
            self._players[player_id]
            for player_id, status in self._statuses.items()
            if status == PlayerStatus.ACTIVE
        ]

    @property
    def bet_history(self) -> List[List[Bet]]:
        """All bets made to the pot, grouped by round, oldest first."""
        return [[bet.model_copy() for bet in bets] for bets in self._bet_history]

    @property
    def current_round_bet_history(self) -> List[Bet]:
        return [bet.model_copy() for bet in self._bet_history[-1]]

    @property
    def previous_round_bet_history(self) -> Optional[List[Bet]]:
        """Bets of the previous round, None while still in the first round."""
        if self.betting_round == 0:
            return None
        return [bet.model_copy() for bet in self._bet_history[-2]]

    @property
    def side_pots(self) -> List[SidePotView]:
        """Display-friendly copies of all ledgers, main pot first."""
        return [
            SidePotView(
                amount=side_pot.total_size,
                eligible_players=[
                    self._players[player_id].name
                    for player_id in side_pot.eligible_players
                ],
                amount_owed={
                    self._players[player_id].name: owed
                    for player_id, owed in side_pot.amount_owed.items()
                },
            )
            for side_pot in self._side_pots
        ]

    # Queries

    def player_status(self, player: Player) -> PlayerStatus:
        """
        Get the status of a player in this pot.

        Raises:
            UnknownOrFoldedPlayerError: If the player was never part of the pot
        """
        status = self._statuses.get(player.player_id)
        if status is None:
            raise self._reject(
                UnknownOrFoldedPlayerError,
                f"Player: {player.name} doesn't belong to the pot!",
            )
        return status

    def amount_owed(self, player: Player) -> int:
        """
        Get the total amount a player owes across all pots.

        Raises:
            UnknownOrFoldedPlayerError: If the player has folded or never was in the pot
        """
        if self._statuses.get(player.player_id, PlayerStatus.FOLDED) == PlayerStatus.FOLDED:
            raise self._reject(
                UnknownOrFoldedPlayerError,
                f"Player: {player.name} doesn't belong to the pot!",
            )
        return self._owed(player.player_id)

    def validate_bet_size(self, size: int) -> bool:
        """Check a bet size or raise increment against the limit rules.

        Only sizing is checked; raise counts and the betting context are not.
        """
        if self._limit_type == LimitType.FIXED_LIMIT:
            return size == self._minimum_bet
        return size >= self._last_raise and size >= self._minimum_bet

    def get_state(self) -> PotState:
        """Get the current state of all pots."""
        views = self.side_pots
        return PotState(
            main_pot=views[0].amount,
            side_pots=views[1:],
            total_pot=self.total_size,
            total_owed=self.total_owed,
            current_bet=self._current_bet,
            betting_round=self.betting_round,
        )

    def log_side_pots(self) -> None:
        """Log the current breakdown of all pots."""
        self._logger.log_side_pots_info(self.side_pots)

    # Mutators

    def add_bet(self, bet: Bet) -> int:
        """
        Apply a player action to the pot.

        Either the whole action is applied or the pot is left untouched.

        Args:
            bet: The action to apply

        Returns:
            int: Total size of the pot after the action

        Raises:
            PlayerCannotActError: If the player has folded, is all-in or is unknown
            CannotCheckError: If the player checks while owing chips
            InsufficientCallError: If a call is short and not all-in
            BetNotAllowedError: If a bet is made while a bet is live
            InvalidBetSizeError: If a bet breaks the limit rules
            RaiseNotAllowedError: If a raise is made with no live bet
            RaiseLimitExceededError: If the round's raise limit is reached
            InvalidRaiseSizeError: If a raise increment breaks the limit rules
        """
        return self._apply(bet, forced=False)

    def next_round(
        self,
        new_minimum_bet: Optional[int] = None,
        new_raise_limit: Optional[int] = None,
    ) -> int:
        """
        Move the pot into the next betting round.

        Args:
            new_minimum_bet: Optional new minimum bet for all following rounds
            new_raise_limit: Optional new raise limit for all following rounds

        Returns:
            int: Index of the new betting round

        Raises:
            OutstandingBetError: If the current bet hasn't been settled by everyone
            InvalidLimitError: If a new limit is negative
        """
        if self.total_owed > 0:
            raise self._reject(
                OutstandingBetError,
                f"Cannot advance to the next betting round with an outstanding bet of "
                f"{self._current_bet}! Players still owe {self.total_owed}.",
            )
        if new_minimum_bet is not None and new_minimum_bet < 0:
            raise self._reject(InvalidLimitError, "Minimum bet cannot be negative!")
        if new_raise_limit is not None and new_raise_limit < 0:
            raise self._reject(InvalidLimitError, "Raise limit cannot be negative!")

        if new_minimum_bet is not None:
            self._minimum_bet = new_minimum_bet
        if new_raise_limit is not None:
            self._raise_limit = new_raise_limit
        self._last_raise = 0
        self._raise_count = 0
        self._current_bet = 0
        self._bet_history.append([])

        self._logger.log_next_round(self.betting_round)
        return self.betting_round

    # Internals

    def _apply(self, bet: Bet, forced: bool) -> int:
        """Validate and apply one bet. Forced postings skip sizing rules."""
        player_id = bet.player.player_id
        if self._statuses.get(player_id) != PlayerStatus.ACTIVE:
            raise self._reject(
                PlayerCannotActError, f"Player: {bet.player.name} cannot act!"
            )

        if bet.action == ActionType.FOLD:
            self._fold(player_id)
        elif bet.action == ActionType.CHECK:
            self._check(bet)
        elif bet.action == ActionType.CALL:
            self._call(bet)
        elif bet.action == ActionType.BET:
            self._bet(bet, forced)
        elif bet.action == ActionType.RAISE:
            self._raise(bet, forced)

        self._archive(bet)
        return self.total_size

    def _fold(self, player_id: str) -> None:
        for side_pot in self._side_pots:
            side_pot.amount_owed.pop(player_id, None)
        self._statuses[player_id] = PlayerStatus.FOLDED

    def _check(self, bet: Bet) -> None:
        owed = self._owed(bet.player.player_id)
        if owed != 0:
            raise self._reject(
                CannotCheckError,
                f"Player {bet.player.name} cannot check! They owe the pot {owed}!",
            )

    def _call(self, bet: Bet) -> None:
        player_id = bet.player.player_id
        owed = self._owed(player_id)
        if bet.size < owed and not bet.all_in:
            raise self._reject(
                InsufficientCallError,
                f"Player {bet.player.name} cannot call {bet.size}! They must call at "
                f"least {owed} or go all-in!",
            )

        leftover = self._settle(player_id, bet.size)
        if leftover > 0:
            self._side_pots[-1].total_size += leftover
            PotLogger.log_overpay(bet.player.name, leftover)
        if bet.all_in:
            self._mark_all_in(player_id)

    def _bet(self, bet: Bet, forced: bool) -> None:
        if not forced:
            if self._current_bet > 0:
                raise self._reject(
                    BetNotAllowedError,
                    f"Player {bet.player.name} cannot bet! There already is a bet of "
                    f"{self._current_bet}, they must call or raise!",
                )
            if not bet.all_in and not self.validate_bet_size(bet.size):
                raise self._reject(
                    InvalidBetSizeError,
                    f"Player {bet.player.name} cannot bet {bet.size}! "
                    f"{self._size_rule()}",
                )

        player_id = bet.player.player_id
        # Only forced postings can owe here: a second blind completes the first one
        owed = self._owed(player_id)
        if bet.size < owed and not bet.all_in:
            raise self._reject(
                InvalidBlindError,
                f"Player {bet.player.name} cannot post a blind of {bet.size}! They "
                f"already owe {owed}!",
            )
        leftover = self._settle(player_id, bet.size)
        self._contribute(player_id, leftover)
        if bet.all_in:
            self._mark_all_in(player_id)
        self._last_raise = bet.size
        self._current_bet += leftover

    def _raise(self, bet: Bet, forced: bool) -> None:
        if self._current_bet == 0:
            raise self._reject(
                RaiseNotAllowedError,
                f"Player {bet.player.name} cannot raise! There is no bet to raise, "
                f"they must bet instead!",
            )
        if self._raise_limit and self._raise_count >= self._raise_limit:
            raise self._reject(
                RaiseLimitExceededError,
                f"Player {bet.player.name} cannot raise! The limit of "
                f"{self._raise_limit} raises per round was reached!",
            )
        player_id = bet.player.player_id
        owed = self._owed(player_id)
        increment = bet.size - owed
        if not bet.all_in and (
            increment <= 0 or not (forced or self.validate_bet_size(increment))
        ):
            raise self._reject(
                InvalidRaiseSizeError,
                f"Player {bet.player.name} cannot raise by {increment}! "
                f"{self._size_rule()}",
            )

        leftover = self._settle(player_id, bet.size)
        if leftover > 0:
            self._contribute(player_id, leftover)
            self._raise_count += 1
            self._last_raise = max(self._last_raise, leftover)
            self._current_bet += leftover
        if bet.all_in:
            self._mark_all_in(player_id)

    def _settle(self, player_id: str, size: int) -> int:
        """
        Pay off what a player owes, oldest pot first.

        If the chips run out part way through a pot, the player goes all-in and that
        pot is split: a new pot is inserted right after it, and the part of the other
        players' debts (and contributions) above the all-in amount moves there.

        Returns:
            int: Chips left over after every debt has been paid, 0 after a split
        """
        remaining = size
        for index, side_pot in enumerate(self._side_pots):
            if player_id not in side_pot.amount_owed:
                continue
            owed = side_pot.amount_owed[player_id]
            side_pot.amount_owed[player_id] = 0

            if remaining >= owed:
                side_pot.total_size += owed
                remaining -= owed
                continue

            side_pot.total_size += remaining
            shortfall = owed - remaining
            self._statuses[player_id] = PlayerStatus.ALL_IN

            split = SidePot()
            for other_id, other_owed in side_pot.amount_owed.items():
                if other_id == player_id:
                    continue
                moved = min(other_owed, shortfall)
                split.amount_owed[other_id] = moved
                side_pot.amount_owed[other_id] = other_owed - moved
                # Chips above the all-in amount that were already paid in
                overpaid = shortfall - moved
                side_pot.total_size -= overpaid
                split.total_size += overpaid
            self._side_pots.insert(index + 1, split)

            # The all-in player has no claim on anything after the split
            for later in self._side_pots[index + 2 :]:
                later.amount_owed.pop(player_id, None)

            PotLogger.log_split(index, shortfall, self._names(split.eligible_players))
            return 0
        return remaining

    def _contribute(self, player_id: str, size: int) -> None:
        """Put chips into the newest pot and make everyone else owe them."""
        side_pot = self._side_pots[-1]
        side_pot.total_size += size
        for other_id in side_pot.amount_owed:
            if other_id != player_id:
                side_pot.amount_owed[other_id] += size

    def _mark_all_in(self, player_id: str) -> None:
        """Mark a player all-in and open a new pot for the players still acting."""
        if self._statuses[player_id] != PlayerStatus.ACTIVE:
            return
        self._statuses[player_id] = PlayerStatus.ALL_IN
        active_ids = [
            other_id
            for other_id, status in self._statuses.items()
            if status == PlayerStatus.ACTIVE
        ]
        self._side_pots.append(SidePot.for_players(active_ids))
        PotLogger.log_new_side_pot(self._names(active_ids))

    def _owed(self, player_id: str) -> int:
        return sum(
            side_pot.amount_owed.get(player_id, 0) for side_pot in self._side_pots
        )

    def _archive(self, bet: Bet) -> None:
        self._logger.log_bet(bet)
        self._bet_history[-1].append(bet)

    def _names(self, player_ids: List[str]) -> List[str]:
        return [self._players[player_id].name for player_id in player_ids]

    def _size_rule(self) -> str:
        if self._limit_type == LimitType.FIXED_LIMIT:
            return f"Fixed limit bets must be exactly {self._minimum_bet}."
        return (
            f"No limit bets must be at least {max(self._minimum_bet, self._last_raise)}."
        )

    def _reject(self, error_type: Type[PotRuleError], message: str) -> PotRuleError:
        """Log a rule violation and build the error to raise."""
        self._logger.log_rejection(message)
        return error_type(message)
