from typing import List, Tuple

from data.enums import GameLogLevel


class MockGameLogger:
    """Log sink that records every message instead of emitting it.

    Usage:
        sink = MockGameLogger()
        pot = Pot(players, [], logger=sink)
        assert sink.messages(GameLogLevel.ERROR) == []
    """

    def __init__(self) -> None:
        self.records: List[Tuple[str, str, GameLogLevel]] = []

    def log(
        self, source: str, message: str, level: GameLogLevel = GameLogLevel.EVENT
    ) -> None:
        self.records.append((source, message, level))

    def messages(self, level: GameLogLevel = None) -> List[str]:
        """Messages logged so far, optionally filtered by level."""
        return [
            message
            for _, message, logged_level in self.records
            if level is None or logged_level == level
        ]
