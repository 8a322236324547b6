from typing import Callable, Optional, Tuple

from data.enums import ActionType
from data.types.bet import Bet
from exceptions import InvalidActionError
from game.player import Player
from loggers.player_logger import PlayerLogger

ALL_IN_WORDS = ("all-in", "allin", "all_in")


def parse_action(text: str) -> Tuple[ActionType, int, bool]:
    """Parse a typed action such as "call 10", "raise 40 all-in" or "fold".

    Args:
        text: Raw text typed by the player

    Returns:
        Tuple[ActionType, int, bool]: Action, size and all-in flag

    Raises:
        ValueError: If the text doesn't describe an action
    """
    parts = [part.rstrip(",!.") for part in text.lower().split()]
    if not parts:
        raise ValueError("Empty action text")

    all_in = any(part in ALL_IN_WORDS for part in parts)
    parts = [part for part in parts if part not in ALL_IN_WORDS and part != "to"]
    if not parts:
        raise ValueError("Missing action type")

    try:
        action = ActionType(parts[0])
    except ValueError:
        raise ValueError(f"Invalid action type: {parts[0]}") from None

    if len(parts) > 2:
        raise ValueError(f"Unexpected input after amount: {' '.join(parts[2:])}")
    if len(parts) == 2:
        try:
            size = int(parts[1])
        except ValueError:
            raise ValueError(f"Invalid amount: {parts[1]}") from None
    else:
        size = 0
    return action, size, all_in


class ConsoleAgent(Player):
    """A human player typing actions at a prompt.

    A bare "call" calls the amount owed, and "all-in" on its own commits the whole
    bankroll as a call, bet or raise depending on the situation. Input that can't be
    turned into a valid bet is reported and asked for again.
    """

    def __init__(
        self,
        name: str,
        bankroll: int = 1000,
        player_id: Optional[str] = None,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
        max_attempts: int = 3,
    ) -> None:
        super().__init__(name, bankroll, player_id)
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.max_attempts = max_attempts

    def decide_action(self, pot) -> Bet:
        owed = pot.amount_owed(self)
        prompt = (
            f"{self.name} (bankroll {self.bankroll}, owes {owed}, "
            f"pot {pot.total_size}) > "
        )
        for _ in range(self.max_attempts):
            text = self.input_fn(prompt)
            try:
                bet = self._to_bet(text, pot, owed)
            except (ValueError, InvalidActionError) as e:
                PlayerLogger.log_invalid_input(self.name, text, str(e))
                self.output_fn(f"Invalid action: {e}")
                continue
            PlayerLogger.log_decision(self.name, str(bet))
            return bet

        fallback = ActionType.CHECK if owed == 0 else ActionType.FOLD
        self.output_fn(f"Too many invalid attempts, {self.name} {fallback.value}s")
        return Bet(player=self, action=fallback)

    def _to_bet(self, text: str, pot, owed: int) -> Bet:
        stripped = text.strip().lower()
        if stripped in ALL_IN_WORDS:
            if owed >= self.bankroll:
                action = ActionType.CALL
            elif pot.current_bet == 0:
                action = ActionType.BET
            else:
                action = ActionType.RAISE
            return Bet(player=self, action=action, size=self.bankroll, all_in=True)

        action, size, all_in = parse_action(text)
        if action == ActionType.CALL and size == 0:
            size = min(owed, self.bankroll)
            all_in = all_in or owed >= self.bankroll
        return Bet(player=self, action=action, size=size, all_in=all_in)
