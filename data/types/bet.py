from pydantic import BaseModel, ConfigDict, model_validator

from data.enums import ActionType
from exceptions import InvalidActionError
from game.player import Player


class Bet(BaseModel):
    """
    Represents one player decision submitted to the pot.

    A bet record validates itself on construction and cannot be changed afterwards.
    Forced postings use the same record: antes and sleepers are calls, blinds are
    bets and straddles are raises.

    Attributes:
        player: The acting player
        action: The type of action taken
        size: Chips put in by this action; 0 for folds and checks
        all_in: Whether the action commits the player's whole stack

    Raises:
        InvalidActionError: If size is negative, a fold or check carries chips, or a
            call, bet or raise carries none
    """

    player: Player
    action: ActionType
    size: int = 0
    all_in: bool = False

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @model_validator(mode="after")
    def validate_size(self) -> "Bet":
        if self.size < 0:
            raise InvalidActionError("Bet size cannot be negative")
        if self.action in (ActionType.FOLD, ActionType.CHECK):
            if self.size != 0:
                raise InvalidActionError(
                    f"{self.action.value.capitalize()} cannot have a bet size associated with it"
                )
        elif self.size == 0:
            raise InvalidActionError(
                f"{self.action.value.capitalize()} needs a bet size greater than 0"
            )
        return self

    def __str__(self) -> str:
        """Human readable rendering used in logs, e.g. "Alice raises to 40 all-in!"."""
        if self.action in (ActionType.FOLD, ActionType.CHECK):
            return f"{self.player.name} {self.action.value}s!"
        all_in = " all-in" if self.all_in else ""
        if self.action == ActionType.RAISE:
            return f"{self.player.name} raises to {self.size}{all_in}!"
        return f"{self.player.name} {self.action.value}s {self.size}{all_in}!"
