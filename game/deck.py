import random
from typing import List, Optional

from exceptions import EmptyDeckError
from loggers.deck_logger import DeckLogger

from .card import Card, CardSuit, CardValue


class Deck:
    """A standard 52-card deck, shuffled on creation and dealt from the top."""

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Build and shuffle a full deck.

        Args:
            rng: Random number generator to shuffle with; pass a seeded one for
                reproducible deals
        """
        self._rng = rng or random.Random()
        self.cards: List[Card] = [
            Card(value, suit) for value in CardValue for suit in CardSuit
        ]
        self._rng.shuffle(self.cards)
        DeckLogger.log_shuffle(len(self.cards))

    def deal(self) -> Card:
        """
        Deal the top card from the deck.

        Returns:
            Card: The dealt card

        Raises:
            EmptyDeckError: If no cards are left
        """
        if not self.cards:
            DeckLogger.log_deal_error()
            raise EmptyDeckError("Trying to deal from an empty deck!")
        return self.cards.pop()

    def remaining(self) -> int:
        """Return number of cards remaining in deck."""
        return len(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __str__(self) -> str:
        """List the remaining cards one per line, in the order they will be dealt."""
        return "\n".join(str(card) for card in reversed(self.cards))
