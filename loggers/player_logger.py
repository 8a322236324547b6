import logging

logger = logging.getLogger(__name__)


class PlayerLogger:
    """Handles all logging operations for player-related actions."""

    @staticmethod
    def log_player_creation(name: str, bankroll: int) -> None:
        """Log when a new player is created."""
        logger.info(f"New player created: {name} with ${bankroll} bankroll")

    @staticmethod
    def log_decision(player_name: str, decision: str) -> None:
        """Log the action a player decided on."""
        logger.info(f"{player_name} decided: {decision}")

    @staticmethod
    def log_invalid_input(player_name: str, text: str, reason: str) -> None:
        """Log input that could not be turned into an action."""
        logger.warning(f"Invalid input from {player_name}: {text!r} ({reason})")

    @staticmethod
    def log_script_exhausted(player_name: str, fallback: str) -> None:
        """Log when a scripted player runs out of queued actions."""
        logger.debug(f"{player_name} has no scripted actions left, falling back to {fallback}")
