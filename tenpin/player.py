"""A named player owning one game."""

from __future__ import annotations

from .frame import Frame
from .game import BowlingGame


class Player:
    """A player with a name and a game in progress."""

    def __init__(self, name):
        self.name: str = name
        self._game = BowlingGame()

    def roll(self, pins: int) -> None:
        """Record a roll in this player's game."""
        self._game.roll(pins)

    def score(self) -> int:
        """Current score of this player's game."""
        return self._game.score()

    def is_game_complete(self) -> bool:
        """True once the player's tenth frame is finished."""
        return self._game.is_complete()

    @property
    def frames(self) -> tuple[Frame, ...]:
        """The frames of this player's game."""
        return self._game.frames