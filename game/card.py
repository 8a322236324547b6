from enum import Enum, IntEnum


class CardValue(IntEnum):
    """Card ranks from deuce (2) to ace (14)."""

    DEUCE = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


class CardSuit(str, Enum):
    """Card suits, valued by their display symbol."""

    CLUBS = "♣"
    DIAMONDS = "♦"
    HEARTS = "♥"
    SPADES = "♠"


FACE_SYMBOLS = {
    CardValue.JACK: "J",
    CardValue.QUEEN: "Q",
    CardValue.KING: "K",
    CardValue.ACE: "A",
}


class Card:
    """
    Represents a single playing card with value and suit.

    A card is immutable after creation and provides a short string
    representation for display and logging purposes, e.g. "10♣" or "A♠".

    Attributes:
        value (CardValue): The card's rank, 2 through 14 (ace)
        suit (CardSuit): The card's suit
    """

    __slots__ = ("_value", "_suit")

    def __init__(self, value: int, suit: CardSuit):
        """
        Initialize a new card with specified value and suit.

        Args:
            value (int): The card's rank, 2 through 14
            suit (CardSuit): The card's suit

        Raises:
            ValueError: If value or suit is out of range
        """
        try:
            self._value = CardValue(value)
        except ValueError:
            raise ValueError(f"Card value {value!r} is out of range") from None
        try:
            self._suit = CardSuit(suit)
        except ValueError:
            raise ValueError(f"Card suit {suit!r} is out of range") from None

    @property
    def value(self) -> CardValue:
        return self._value

    @property
    def suit(self) -> CardSuit:
        return self._suit

    def __eq__(self, other) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self._value == other._value and self._suit == other._suit

    def __hash__(self) -> int:
        return hash((self._value, self._suit))

    def __str__(self) -> str:
        rank = FACE_SYMBOLS.get(self._value, str(int(self._value)))
        return f"{rank}{self._suit.value}"

    def __repr__(self) -> str:
        return f"Card({self._value.name}, {self._suit.name})"
