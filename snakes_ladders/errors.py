"""Exceptions raised when a caller breaks the rules engine's contract."""

from __future__ import annotations


class GameRuleError(ValueError):
    """Base class for rejected engine input."""


class InvalidDiceValue(GameRuleError):
    def __init__(self, value: int):
        self.value = value
        super().__init__(f"Dice value must be between 1 and 6, got {value!r}.")


class InvalidPlayerIndex(GameRuleError):
    def __init__(self, index: int, player_count: int):
        self.index = index
        self.player_count = player_count
        super().__init__(
            f"Player index {index!r} is out of range for {player_count} player(s)."
        )


class InvalidPlayerCount(GameRuleError):
    def __init__(self, count: int):
        self.count = count
        super().__init__(f"A game needs at least one player, got {count!r}.")


class GameNotActive(GameRuleError):
    """Raised when a finished (or unstarted) game is asked to keep playing."""
