"""A single bowling frame and the errors raised for illegal rolls."""

from __future__ import annotations

PINS = 10


class InvalidRollError(ValueError):
    """A roll knocks down a number of pins that cannot be standing."""


class GameOverError(Exception):
    """A roll was attempted where no further roll is allowed."""


class Frame:
    """The rolls of one frame; the final frame allows up to three rolls."""

    def __init__(self, final=False):
        self.final = final
        self._rolls: list[int] = []

    def __repr__(self) -> str:
        return f"Frame(final={self.final!r}, rolls={self._rolls!r})"

    @property
    def rolls(self) -> tuple[int, ...]:
        """The pins knocked down by each roll so far."""
        return tuple(self._rolls)

    def roll(self, pins: int) -> None:
        """Record a roll, raising if it is not allowed in this frame."""
        if not 0 <= pins <= PINS:
            raise InvalidRollError("Pin count must be between 0 and 10.")

        if not self.final and len(self._rolls) == 1 and self._rolls[0] + pins > PINS:
            raise InvalidRollError(
                "Cannot knock down more than 10 pins in a standard frame."
            )

        if self.final:
            if len(self._rolls) == 2 and sum(self._rolls) < PINS:
                raise GameOverError(
                    "Only two rolls allowed if no strike/spare in final frame."
                )
            if len(self._rolls) >= 3:
                raise GameOverError("Maximum of three rolls allowed in final frame.")
        elif self.is_complete():
            raise GameOverError("Cannot roll in a completed frame.")

        self._rolls.append(pins)

    def score(self) -> int:
        """Raw pin count of this frame, without bonuses."""
        return sum(self._rolls)

    def is_strike(self) -> bool:
        """True for a standard frame closed by one roll of ten."""
        return not self.final and self._rolls == [PINS]

    def is_spare(self) -> bool:
        """True for a standard frame whose two rolls make ten."""
        return not self.final and len(self._rolls) == 2 and sum(self._rolls) == PINS

    def is_complete(self) -> bool:
        """True once no more rolls belong to this frame."""
        if self.final:
            if len(self._rolls) == 3:
                return True
            return len(self._rolls) == 2 and sum(self._rolls) < PINS
        return self.is_strike() or len(self._rolls) == 2