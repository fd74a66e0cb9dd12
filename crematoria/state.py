"""Game state visible to the players: grid, units, scores and daylight."""

from __future__ import annotations

import io
import logging
from dataclasses import replace

from .structs import Cell, CellType, GameError, Pos, Unit, UnitType

_log = logging.getLogger(__name__)


def char_to_cell(c: str) -> Cell:
    """Return the cell described by one character of a grid definition."""
    if len(c) == 1:
        if c == "R":
            return Cell(type=CellType.ROCK)
        if c == "C":
            return Cell(type=CellType.CAVE)
        if c == "E":
            return Cell(type=CellType.ELEVATOR)
        if c in "OG":
            return Cell(type=CellType.OUTSIDE, gem=c == "G")
        if "0" <= c <= "3":
            return Cell(type=CellType.CAVE, owner=int(c))
    raise GameError(f"{c} in grid definition.")


def _as_tokens(source):
    """Turn a string, a text stream or an iterator of tokens into a token iterator."""
    if isinstance(source, str):
        source = io.StringIO(source)
    if isinstance(source, io.IOBase):
        return (token for line in source for token in line.split())
    return iter(source)


class State:
    """The current state of a game."""

    def __init__(self, settings) -> None:
        self.settings = settings
        self.round = 0
        self._grid: list[list[list[Cell]]] = []
        self._unit_data: list[Unit] = []
        self._furyans: list[list[int]] = []
        self._pioneers: list[list[int]] = []
        self._necromongers: list[int] = []
        self._hellhounds: list[int] = []
        self._nb_cells: list[int] = []
        self._nb_gems: list[int] = []
        self._cpu_status: list[float] = []

    def _unit_ok(self, unit_id: int) -> bool:
        if not 0 <= unit_id < self.nb_units():
            return False
        u = self._unit_data[unit_id]
        return u.type == UnitType.HELLHOUND or u.health > 0

    def cell(self, pos: Pos) -> Cell:
        """Return a copy of the cell at pos, or a default cell if pos is off the board."""
        inside = (
            0 <= pos.i < len(self._grid)
            and 0 <= pos.j < len(self._grid[pos.i])
            and 0 <= pos.k <= 1
        )
        if not inside:
            _log.warning("cell requested for position %s", pos)
            return Cell()
        return replace(self._grid[pos.i][pos.j][pos.k])

    def nb_units(self) -> int:
        """Return the total number of units in the game."""
        return len(self._unit_data)

    def unit(self, unit_id: int) -> Unit:
        """Return a copy of a unit, or a default unit if the id is not valid."""
        if not self._unit_ok(unit_id):
            _log.warning("unit requested for identifier %s", unit_id)
            return Unit()
        return replace(self._unit_data[unit_id])

    @staticmethod
    def _per_player(values, player: int, what: str, missing):
        if not 0 <= player < len(values):
            _log.warning("%s requested for player %s", what, player)
            return missing
        return values[player]

    def nb_cells(self, player: int) -> int:
        """Return the number of cells a player owns now, or -1."""
        return self._per_player(self._nb_cells, player, "num_cells", -1)

    def nb_gems(self, player: int) -> int:
        """Return the number of gems a player has gathered, or -1."""
        return self._per_player(self._nb_gems, player, "gems", -1)

    def status(self, player: int) -> float:
        """Return the share of cpu time a player has used, negative if dead."""
        return self._per_player(self._cpu_status, player, "status", -1)

    def furyans(self, player: int) -> list[int]:
        """Return the ids of the furyans of a player."""
        return list(self._per_player(self._furyans, player, "furyans", []))

    def pioneers(self, player: int) -> list[int]:
        """Return the ids of the pioneers of a player."""
        return list(self._per_player(self._pioneers, player, "pioneers", []))

    def necromongers(self) -> list[int]:
        """Return the ids of the alive necromongers, landed or not."""
        return list(self._necromongers)

    def hellhounds(self) -> list[int]:
        """Return the ids of the hellhounds."""
        return list(self._hellhounds)

    def daylight(self, pos: Pos) -> bool:
        """Return whether pos is under the sun this round."""
        if pos.k == 0:
            return False
        c = self.settings.cols
        m = c >> 1
        t1 = (self.round << 1) % c
        t2 = t1 + m - 1
        if t2 < c:
            return pos.j < t1 or pos.j > t2
        return t2 - c < pos.j < t1

    def read_grid(self, stream) -> None:
        """Read both layers of the grid, underground first."""
        rows, cols = self.settings.rows, self.settings.cols
        tokens = _as_tokens(stream)
        grid = [
            [[char_to_cell("O"), char_to_cell("O")] for _ in range(cols)]
            for _ in range(rows)
        ]
        for k in (0, 1):
            for i in range(rows):
                line = next(tokens, "")
                if len(line) != cols:
                    raise GameError("The read map has a line with incorrect length.")
                for j, ch in enumerate(line):
                    grid[i][j][k] = char_to_cell(ch)
        self._grid = grid

    def update_vectors_by_player(self) -> None:
        """Rebuild the per-player unit lists from the units."""
        nb_players = len(self._nb_cells)
        self._furyans = [[] for _ in range(nb_players)]
        self._pioneers = [[] for _ in range(nb_players)]
        self._necromongers = []
        self._hellhounds = []
        for u in self._unit_data:
            if u.type in (UnitType.FURYAN, UnitType.PIONEER):
                if not 0 <= u.player < nb_players:
                    raise GameError("Player unit of wrong group.")
            elif u.player != -1:
                raise GameError("Enemy unit of player != -1.")
            if u.type == UnitType.FURYAN:
                self._furyans[u.player].append(u.id)
            elif u.type == UnitType.PIONEER:
                self._pioneers[u.player].append(u.id)
            elif u.type == UnitType.HELLHOUND:
                self._hellhounds.append(u.id)
            elif u.health > 0:
                self._necromongers.append(u.id)