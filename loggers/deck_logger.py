import logging

logger = logging.getLogger(__name__)


class DeckLogger:
    """Handles all logging operations for deck-related actions."""

    @staticmethod
    def log_shuffle(cards: int) -> None:
        """Log deck shuffling."""
        logger.debug(f"Shuffled deck with {cards} cards")

    @staticmethod
    def log_deal_error() -> None:
        """Log error when trying to deal from an empty deck."""
        logger.error("Cannot deal a card. The deck is empty.")
