"""Ten-pin bowling frames, game scoring, players and a console game."""

__version__ = "0.1.0"
__all__ = ["cli", "frame", "game", "player"]