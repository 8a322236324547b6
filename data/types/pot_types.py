from typing import Dict, List, Optional, Sequence

from pydantic import BaseModel, Field


class SidePot(BaseModel):
    """
    Ledger for one slice of the pot.

    Holds, for the players still eligible for this slice, how much each of them owes
    and how many chips have been collected so far. Entries are keyed by player id.
    Only the pot mutates a ledger.
    """

    amount_owed: Dict[str, int] = Field(default_factory=dict)
    total_size: int = 0

    @classmethod
    def for_players(
        cls,
        player_ids: Sequence[str],
        amounts_owed: Optional[Sequence[int]] = None,
        total_size: int = 0,
    ) -> "SidePot":
        """Create a ledger over the given players, optionally with existing debts."""
        if amounts_owed is None:
            amounts_owed = [0] * len(player_ids)
        if len(amounts_owed) != len(player_ids):
            raise ValueError("Need exactly one owed amount per eligible player")
        return cls(amount_owed=dict(zip(player_ids, amounts_owed)), total_size=total_size)

    @property
    def eligible_players(self) -> List[str]:
        return list(self.amount_owed)

    @property
    def owed_total(self) -> int:
        return sum(self.amount_owed.values())


class SidePotView(BaseModel):
    """Display-friendly copy of a ledger, keyed by player name."""

    amount: int
    eligible_players: List[str]
    amount_owed: Dict[str, int] = {}


class PotState(BaseModel):
    """Represents the state of all pots in the game."""

    main_pot: int = 0
    side_pots: List[SidePotView] = []
    total_pot: int = 0
    total_owed: int = 0
    current_bet: int = 0
    betting_round: int = 0
