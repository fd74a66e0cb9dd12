"""Basic game types: directions, positions, cells and units."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

_COLS = 80


class GameError(Exception):
    """Raised when game data or a request breaks the rules of the game."""


class Dir(IntEnum):
    """Movement directions."""

    BOTTOM = 0
    BR = 1
    RIGHT = 2
    RT = 3
    TOP = 4
    TL = 5
    LEFT = 6
    LB = 7
    UP = 8
    DOWN = 9
    NONE = 10


def dir_ok(d) -> bool:
    """Return whether d is a valid direction."""
    return Dir.BOTTOM <= int(d) <= Dir.NONE


_STEPS = {
    Dir.BOTTOM: (1, 0, 0),
    Dir.BR: (1, 1, 0),
    Dir.RIGHT: (0, 1, 0),
    Dir.RT: (-1, 1, 0),
    Dir.TOP: (-1, 0, 0),
    Dir.TL: (-1, -1, 0),
    Dir.LEFT: (0, -1, 0),
    Dir.LB: (1, -1, 0),
    Dir.UP: (0, 0, 1),
    Dir.DOWN: (0, 0, -1),
    Dir.NONE: (0, 0, 0),
}


@dataclass(frozen=True, order=True)
class Pos:
    """A position (row, column, layer); columns wrap around."""

    i: int = 0
    j: int = 0
    k: int = 0

    def __add__(self, other):
        if isinstance(other, Dir):
            di, dj, dk = _STEPS[other]
            j = self.j + dj
            if dj > 0 and j == _COLS:
                j = 0
            elif dj < 0 and j == -1:
                j = _COLS - 1
            return Pos(self.i + di, j, self.k + dk)
        if isinstance(other, Pos):
            j = self.j + other.j
            if j >= _COLS:
                j -= _COLS
            if j < 0:
                j += _COLS
            return Pos(self.i + other.i, j, self.k + other.k)
        return NotImplemented

    def __str__(self) -> str:
        return f"({self.i}, {self.j}, {self.k})"


class CellType(IntEnum):
    """Kinds of cell."""

    OUTSIDE = 0
    CAVE = 1
    ROCK = 2
    ELEVATOR = 3


@dataclass
class Cell:
    """A cell of the board and its contents."""

    type: CellType = CellType.CAVE
    owner: int = -1
    id: int = -1
    gem: bool = False


class UnitType(IntEnum):
    """Kinds of unit."""

    PIONEER = 0
    FURYAN = 1
    NECROMONGER = 2
    HELLHOUND = 3


_UNIT_CHARS = {
    UnitType.PIONEER: "p",
    UnitType.FURYAN: "f",
    UnitType.NECROMONGER: "n",
    UnitType.HELLHOUND: "h",
}
_CHAR_UNITS = {c: t for t, c in _UNIT_CHARS.items()}


def unit_type_to_char(unit_type) -> str:
    """Return the character that encodes a unit type."""
    try:
        return _UNIT_CHARS[unit_type]
    except KeyError:
        raise GameError(f"unknown unit type {unit_type!r}") from None


def char_to_unit_type(c: str) -> UnitType:
    """Return the unit type encoded by a character."""
    try:
        return _CHAR_UNITS[c]
    except KeyError:
        raise GameError(f"unknown unit type character {c!r}") from None


@dataclass
class Unit:
    """A unit on the board and its properties."""

    type: UnitType = UnitType.PIONEER
    id: int = -1
    player: int = -1
    health: int = 0
    turns: int = -1
    pos: Pos = Pos(-1, -1, -1)

    def __str__(self) -> str:
        return (
            f"{unit_type_to_char(self.type)} {self.player} {self.health} "
            f"{self.turns} {self.pos.i} {self.pos.j} {self.pos.k}"
        )