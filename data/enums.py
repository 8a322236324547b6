from enum import Enum


class ActionType(str, Enum):
    """Valid poker actions."""

    FOLD = "fold"
    CHECK = "check"
    CALL = "call"  # also any dead money posted outside the betting order
    BET = "bet"
    RAISE = "raise"


class PlayerStatus(str, Enum):
    """Player status in a pot."""

    ACTIVE = "active"
    ALL_IN = "all-in"
    FOLDED = "folded"


class LimitType(str, Enum):
    """Betting structures supported by the pot."""

    NO_LIMIT = "no-limit"
    FIXED_LIMIT = "fixed-limit"


class GameLogLevel(str, Enum):
    """Severity of a game log message."""

    EVENT = "event"
    IMPORTANT_EVENT = "important-event"
    WARNING = "warning"
    ERROR = "error"
