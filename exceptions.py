class PokerGameError(Exception):
    """Base exception for poker game errors."""

    pass


class InvalidActionError(PokerGameError):
    """Raised when a bet record is built with an invalid action/size combination."""

    pass


class PotRuleError(PokerGameError):
    """Base exception for betting rule violations rejected by the pot."""

    pass


class InvalidBlindError(PotRuleError):
    """Raised when a forced bet is a fold or a check."""

    pass


class UnknownOrFoldedPlayerError(PotRuleError):
    """Raised when a player is not part of the pot or has folded."""

    pass


class PlayerCannotActError(PotRuleError):
    """Raised when a folded or all-in player tries to act."""

    pass


class CannotCheckError(PotRuleError):
    """Raised when a player checks while owing the pot."""

    pass


class InsufficientCallError(PotRuleError):
    """Raised when a call is smaller than the amount owed and not all-in."""

    pass


class BetNotAllowedError(PotRuleError):
    """Raised when a player bets while a bet is already live."""

    pass


class InvalidBetSizeError(PotRuleError):
    """Raised when a bet size breaks the limit rules."""

    pass


class RaiseNotAllowedError(PotRuleError):
    """Raised when a player raises with no live bet."""

    pass


class RaiseLimitExceededError(PotRuleError):
    """Raised when the maximum number of raises for the round is reached."""

    pass


class InvalidRaiseSizeError(PotRuleError):
    """Raised when a raise increment breaks the limit rules."""

    pass


class OutstandingBetError(PotRuleError):
    """Raised when advancing the round while players still owe the pot."""

    pass


class InvalidLimitError(PotRuleError):
    """Raised when a minimum bet or raise limit is negative."""

    pass


class DeckError(PokerGameError):
    """Base exception for deck errors."""

    pass


class EmptyDeckError(DeckError):
    """Raised when dealing from an empty deck."""

    pass
