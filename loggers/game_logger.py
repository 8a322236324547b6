import logging

from data.enums import GameLogLevel

IMPORTANT = 25
logging.addLevelName(IMPORTANT, "IMPORTANT")

logger = logging.getLogger(__name__)

LOG_LEVELS = {
    GameLogLevel.EVENT: logging.INFO,
    GameLogLevel.IMPORTANT_EVENT: IMPORTANT,
    GameLogLevel.WARNING: logging.WARNING,
    GameLogLevel.ERROR: logging.ERROR,
}


class GameLogger:
    """
    Default log sink for game entities.

    Game entities receive a sink at construction and report through its ``log``
    method. Any object with a compatible ``log(source, message, level)`` method can be
    injected instead, e.g. a UI event feed or a test double.
    """

    def log(
        self, source: str, message: str, level: GameLogLevel = GameLogLevel.EVENT
    ) -> None:
        """Forward a game message to the standard logging module."""
        logger.log(LOG_LEVELS[GameLogLevel(level)], f"[{source}] {message}")
