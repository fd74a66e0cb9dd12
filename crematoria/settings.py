"""Game settings that stay fixed during a game."""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import ClassVar

from .structs import GameError


def version() -> str:
    """Return the game name and version."""
    return "Crematoria 1.2"


@dataclass(frozen=True)
class Settings:
    """Settings read from the game description, plus fixed rules."""

    nb_players: int
    nb_rounds: int
    nb_furyans: int
    nb_pioneers: int
    max_nb_necromongers: int
    nb_hellhounds: int
    nb_elevators: int
    gem_value: int
    turns_to_land: int
    rows: int
    cols: int

    furyans_health: ClassVar[int] = 100
    pioneers_health: ClassVar[int] = 50
    necromongers_health: ClassVar[int] = 75
    min_damage_furyans: ClassVar[int] = 25
    max_damage_furyans: ClassVar[int] = 50
    min_damage_necromongers: ClassVar[int] = 20
    max_damage_necromongers: ClassVar[int] = 40
    inv_prob_gem: ClassVar[int] = 4
    inv_prob_necromonger: ClassVar[int] = 2
    health_recovery: ClassVar[int] = 5

    def player_ok(self, player: int) -> bool:
        """Return whether player is a valid player identifier."""
        return 0 <= player < self.nb_players

    def pos_ok(self, pos) -> bool:
        """Return whether pos lies inside the board."""
        return 0 <= pos.i < self.rows and 0 <= pos.j < self.cols and 0 <= pos.k < 2


_CHECKS = (
    ("nb_players", lambda v: v == 4),
    ("nb_rounds", lambda v: v >= 1),
    ("nb_furyans", lambda v: v >= 1),
    ("nb_pioneers", lambda v: v >= 1),
    ("max_nb_necromongers", lambda v: v >= 1),
    ("nb_hellhounds", lambda v: v >= 1),
    ("nb_elevators", lambda v: v >= 1),
    ("gem_value", lambda v: v >= 1),
    ("turns_to_land", lambda v: v >= 1),
    ("rows", lambda v: v == 40),
    ("cols", lambda v: v == 80),
)


def _tokens(stream):
    for line in stream:
        yield from line.split()


def read_settings(stream) -> Settings:
    """Read the version line and the settings from a text stream or string."""
    if isinstance(stream, str):
        stream = io.StringIO(stream)
    tokens = _tokens(stream)

    for expected in version().split():
        found = next(tokens, None)
        if found != expected:
            raise GameError(f"expected {expected!r} in version, found {found!r}")

    values = {}
    for name, valid in _CHECKS:
        key = next(tokens, None)
        if key != name:
            raise GameError(f"expected {name!r}, found {key!r}")
        raw = next(tokens, None)
        try:
            value = int(raw)
        except (TypeError, ValueError):
            raise GameError(f"missing or non-integer value for {name}: {raw!r}") from None
        if not valid(value):
            raise GameError(f"invalid value {value} for {name}")
        values[name] = value
    return Settings(**values)