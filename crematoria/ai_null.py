"""A player that issues no commands."""

from __future__ import annotations

from .player import Player, register_player


@register_player("Null")
class NullPlayer(Player):
    """Stays still every round."""

    def play(self) -> None:
        """Issue no commands."""