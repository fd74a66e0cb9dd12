"""Player framework, game-state model and sample players for the Crematoria strategy game."""

__version__ = "1.2.0"