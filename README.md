# tenpin

Keep score for one player's game of ten-pin bowling. You can use it as a
library or play a game at the console.

## Installation

```
pip install .
```

## Playing at the console

```
tenpin
```

The game first asks for the player's name. An empty name ends the program
with exit status 1. After that, the game asks for the number of pins knocked
down on each roll and shows the frame and roll number. You can type several
numbers on one line. Each one counts as the next roll.

- If a value is not a whole number, the game prints an error, drops the rest
  of that line and asks again.
- If a roll is not allowed, the game prints the reason and asks again. This
  covers a pin count outside 0–10 and a second roll that would take the frame
  past ten pins.

The game ends when the tenth frame is finished or when input runs out. In
either case it prints the final score.

You can run the same loop with your own input and output functions:

```python
from tenpin.cli import play
from tenpin.player import Player

lines = iter(["10 3 4\n"])
score = play(Player("Alex"), lambda: next(lines, ""), print, print)
```

`play(player, read_line, write, write_error)` returns the final score.
`read_line` must return an empty string when there is no more input.

## Using the library

```python
from tenpin.player import Player

player = Player("Alex")
for pins in (10, 3, 4):
    player.roll(pins)
print(player.score())             # 24
print(player.is_game_complete())  # False
```

The classes:

- `tenpin.frame.Frame` is one frame.
  - `roll(pins)` records a roll.
  - `rolls` is a tuple of the pins from each roll so far.
  - `score()` is the raw pin count, without bonuses.
  - `is_strike()`, `is_spare()` and `is_complete()` report the frame's state.
  - Pass `final=True` for the tenth frame. The tenth frame allows a third roll
    only after a strike or a spare in its first two rolls. A final frame never
    reports itself as a strike or a spare.
- `tenpin.game.BowlingGame` is a full ten-frame game.
  - `roll(pins)` records a roll and opens the next frame when the current
    frame is complete.
  - `score()` adds strike bonuses (the next two rolls) and spare bonuses (the
    next roll) for frames one to nine.
  - `is_complete()` reports whether the tenth frame is finished.
  - `frames` is a tuple of the frames started so far.
- `tenpin.player.Player` is a player with a `name` who owns one
  `BowlingGame`. It has `roll(pins)`, `score()`, `is_game_complete()` and
  `frames`.

## Errors

- `tenpin.frame.InvalidRollError` is a subclass of `ValueError`. It is raised
  for a pin count outside 0–10. It is also raised when the two rolls of a
  standard frame together knock down more than ten pins.
- `tenpin.frame.GameOverError` is raised for a roll into a frame that is
  already complete, or a roll after the tenth frame is finished.

## What it does not do

tenpin keeps score for a single player. It does not run a game for several
players, and it does not save scores or games anywhere.

## Running the tests

```
pip install .[test]
pytest
```