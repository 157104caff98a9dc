"""Interactive console game for a single player."""

from __future__ import annotations

import sys
from collections import deque
from typing import Callable

from .frame import GameOverError, InvalidRollError
from .player import Player


def _next_token(tokens: deque, read_line: Callable[[], str]) -> str | None:
    while not tokens:
        line = read_line()
        if not line:
            return None
        tokens.extend(line.split())
    return tokens.popleft()


def play(player, read_line, write, write_error):
    """Run the roll prompt loop for ``player`` and return the final score.

    ``read_line`` returns one line of input, or an empty string once input is
    exhausted; ``write`` and ``write_error`` receive output text.
    """
    write(f"Hello, {player.name}. Let's begin.\n")
    write("Enter pins knocked down per roll (0-10):\n")

    tokens: deque[str] = deque()
    frame_number = 0
    roll_in_frame = 0
    new_frame = True

    while True:
        if new_frame:
            frame_number += 1
            roll_in_frame = 1
            write(f"Frame #{frame_number}\n")
            new_frame = False

        write(f"  Roll #{roll_in_frame}: ")

        token = _next_token(tokens, read_line)
        if token is None:
            write("\n")
            break

        try:
            pins = int(token)
        except ValueError:
            tokens.clear()
            write_error("Invalid input. Enter a number between 0 and 10.\n")
            continue

        try:
            player.roll(pins)
        except GameOverError as exc:
            write(f"Game over: {exc}\n")
            break
        except InvalidRollError as exc:
            write_error(f"Invalid roll: {exc}\n")
            continue

        roll_in_frame += 1
        if player.frames[frame_number - 1].is_complete():
            new_frame = True
        if player.is_game_complete():
            write("Game complete.\n")
            break

    final = player.score()
    write(f"\nFinal score for {player.name}: {final}\n")
    return final


def main(argv=None):
    """Ask for a name, play one game on the console and return an exit code."""
    def write(text: str) -> None:
        sys.stdout.write(text)
        sys.stdout.flush()

    write("Welcome to the Bowling Game.\n")
    write("Enter player name: ")
    name = sys.stdin.readline().rstrip("\n")

    if not name:
        sys.stderr.write("Name cannot be empty. Exiting.\n")
        return 1

    play(Player(name), sys.stdin.readline, write, sys.stderr.write)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())