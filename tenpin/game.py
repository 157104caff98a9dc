"""Ten-pin game scoring across ten frames."""

from __future__ import annotations

from itertools import chain, islice

from .frame import PINS, Frame, InvalidRollError

FRAME_COUNT = 10


class BowlingGame:
    """A ten-frame game that accepts rolls and computes the score."""

    def __init__(self):
        self._frames: list[Frame] = [Frame()]

    @property
    def frames(self) -> tuple[Frame, ...]:
        """The frames started so far."""
        return tuple(self._frames)

    def roll(self, pins: int) -> None:
        """Record a roll, opening a new frame when the current one is done."""
        if not 0 <= pins <= PINS:
            raise InvalidRollError("Pins must be between 0 and 10.")

        if len(self._frames) < FRAME_COUNT and self._frames[-1].is_complete():
            self._frames.append(Frame(final=len(self._frames) == FRAME_COUNT - 1))

        self._frames[-1].roll(pins)

    def score(self) -> int:
        """Total score including strike and spare bonuses."""
        total = 0
        for index, frame in enumerate(self._frames):
            total += frame.score()
            if index < FRAME_COUNT - 1:
                if frame.is_strike():
                    total += self._strike_bonus(index)
                elif frame.is_spare():
                    total += self._spare_bonus(index)
        return total

    def is_complete(self) -> bool:
        """True once the tenth frame is finished."""
        return len(self._frames) == FRAME_COUNT and self._frames[-1].is_complete()

    def _strike_bonus(self, index: int) -> int:
        following = chain.from_iterable(f.rolls for f in self._frames[index + 1 :])
        return sum(islice(following, 2))

    def _spare_bonus(self, index: int) -> int:
        if index + 1 < len(self._frames) and self._frames[index + 1].rolls:
            return self._frames[index + 1].rolls[0]
        return 0