"""A player that hunts gems outside and flees or fights underground."""

from __future__ import annotations

from collections import deque

from .player import Player, register_player
from .structs import CellType, Dir, Pos, UnitType

_ROWS = 40
_COLS = 80
_FREE = "."

# Planar steps, indexed like the first eight directions.
_STEPS = [(1, 0), (1, 1), (0, 1), (-1, 1), (-1, 0), (-1, -1), (0, -1), (1, -1)]
_STEP_DIR = {step: Dir(n) for n, step in enumerate(_STEPS)}
_FLEE_OFFSETS = (0, 1, -1, 2, -2)
_HELLHOUND_RANGE = 6
_CLOSE = 3


def _sign(x: int) -> int:
    return (x > 0) - (x < 0)


def _direction(start: Pos, end: Pos) -> Dir:
    """Return the direction that leads from start towards end."""
    if start.k == end.k:
        return _STEP_DIR.get((_sign(end.i - start.i), _sign(end.j - start.j)), Dir.NONE)
    if start.i == end.i and start.j == end.j:
        return Dir.UP if start.k < end.k else Dir.DOWN
    return Dir.NONE


def _inside(i: int, j: int) -> bool:
    return 0 <= i < _ROWS and 0 <= j < _COLS


@register_player("LaLali")
class LaLaliPlayer(Player):
    """Sends outside pioneers to gems and steers underground units by breadth-first search."""

    def __init__(self) -> None:
        super().__init__()
        self._underground: list[list[str]] = []
        self._official: list[list[str]] = []
        self._outside_pioneers: list[int] = []
        self._underground_pioneers: list[int] = []
        self._outside_furyans: list[int] = []
        self._underground_furyans: list[int] = []
        self._sun_right = -1
        self._sun_left = -1
        self._gems: set[Pos] = set()

    def play(self) -> None:
        """Command own units for this round."""
        if self.round == 0 or not self._official:
            self._underground = [[_FREE] * _COLS for _ in range(_ROWS)]
            self._read_board()
            self._official = [row[:] for row in self._underground]
        else:
            self._sun_right += 2
            self._sun_left += 2
        self._read_units()
        self._seek_gems()
        for hid in self.hellhounds()[:3]:
            p = self.unit(hid).pos
            self._underground[p.i][p.j] = "H"

        for pl in range(4):
            if pl == self.me():
                continue
            for uid in self.pioneers(pl):
                p = self.unit(uid).pos
                if p.k == 0:
                    self._underground[p.i][p.j] = "P"
            for uid in self.furyans(pl):
                p = self.unit(uid).pos
                if p.k == 0:
                    self._underground[p.i][p.j] = "F"

        self._move_pioneers()
        self._move_furyans()

        self._outside_furyans.clear()
        self._underground_furyans.clear()
        self._outside_pioneers.clear()
        self._underground_pioneers.clear()
        self._underground = [row[:] for row in self._official]

    def _read_board(self) -> None:
        for i in range(_ROWS):
            for j in range(_COLS):
                if i == 0 and j != 0:
                    if not self.daylight(Pos(i, j - 1, 1)) and self.daylight(Pos(i, j, 1)):
                        self._sun_left = j
                        self._sun_right = (j + 39) % _COLS
                    if self._sun_right == -1 and j == _COLS - 1:
                        self._sun_left = 0
                        self._sun_right = 39
                c = self.cell(Pos(i, j, 0))
                if c.type == CellType.ROCK:
                    self._underground[i][j] = "R"
                elif c.type == CellType.ELEVATOR:
                    self._underground[i][j] = "E"
                if c.gem:
                    self._gems.add(Pos(i, j, 1))

    def _read_units(self) -> None:
        for uid in self.pioneers(self.me()):
            target = self._underground_pioneers if self.unit(uid).pos.k == 0 else self._outside_pioneers
            target.append(uid)
        for uid in self.furyans(self.me()):
            target = self._underground_furyans if self.unit(uid).pos.k == 0 else self._outside_furyans
            target.append(uid)

    def _flee(self, actual: Pos, best: Dir) -> Pos:
        """Return the free neighbour closest in direction to best, or actual."""
        if not 0 <= int(best) < len(_STEPS):
            return actual
        idx = int(best)
        for offset in _FLEE_OFFSETS:
            di, dj = _STEPS[(idx + offset) % len(_STEPS)]
            p = Pos(actual.i + di, actual.j + dj, actual.k)
            if _inside(p.i, p.j):
                c = self.cell(p)
                if p.k == 1 or (self._underground[p.i][p.j] == _FREE and c.id == -1):
                    return p
        return actual

    def _seek_gems(self) -> None:
        candidates = self._outside_pioneers[:4]
        if not candidates:
            return
        for g in sorted(self._gems):
            def distance(uid: int) -> int:
                p = self.unit(uid).pos
                return max(abs(g.i - p.i), abs(g.j - p.j))

            nearest = min(candidates, key=distance)
            self.command(nearest, _direction(self.unit(nearest).pos, g))

    def _bfs(self, board, start: Pos, target: str):
        """Return (distance, end, predecessors) of the nearest cell marked target."""
        if board[start.i][start.j] == target:
            return 0, start, {}
        dist = {(start.i, start.j): 0}
        prev: dict[tuple[int, int], Pos] = {}
        queue = deque([start])
        while queue:
            act = queue.popleft()
            for di, dj in _STEPS:
                aux = Pos(act.i + di, act.j + dj, act.k)
                key = (aux.i, aux.j)
                if not _inside(aux.i, aux.j) or key in dist or self._underground[aux.i][aux.j] == "R":
                    continue
                queue.append(aux)
                dist[key] = dist[(act.i, act.j)] + 1
                prev[key] = act
                if board[aux.i][aux.j] == target:
                    return dist[key], aux, prev
        return -1, Pos(-1, -1, -1), prev

    def _path_dir(self, board, start: Pos, target: str) -> Dir:
        u = self.unit(self.cell(start).id)
        d, end, prev = self._bfs(board, start, target)
        if d == -1 or (target == "H" and d > _HELLHOUND_RANGE):
            return Dir.NONE
        if target == "E" and d == 0:
            return Dir.UP
        if target == "F" and d < _CLOSE:
            weaker = u.type == UnitType.FURYAN and u.health <= self.unit(self.cell(end).id).health
            if u.type == UnitType.PIONEER or weaker:
                return _direction(start, self._flee(start, _direction(end, start)))
            if u.type == UnitType.FURYAN:
                return _direction(start, end)
        if target == "F" and u.type in (UnitType.PIONEER, UnitType.FURYAN):
            return Dir.NONE

        step = end
        previous = prev.get((step.i, step.j))
        while previous is not None and (previous.i, previous.j) != (start.i, start.j):
            step = previous
            previous = prev.get((step.i, step.j))
        if target == "H":
            return _direction(start, self._flee(start, _direction(step, start)))
        return _direction(start, step)

    def _move_pioneers(self) -> None:
        board = self._underground
        for uid in self._underground_pioneers:
            pos = self.unit(uid).pos
            direction = self._path_dir(board, pos, "H")
            if direction != Dir.NONE:
                self.command(uid, direction)
                continue
            direction = self._path_dir(board, pos, "F")
            if direction != Dir.NONE:
                self.command(uid, direction)
                continue
            for di, dj in _STEPS:
                aux = Pos(pos.i + di, pos.j + dj, pos.k)
                if not _inside(aux.i, aux.j) or board[aux.i][aux.j] in ("R", "E"):
                    continue
                c = self.cell(aux)
                if c.owner != self.me() and c.id == -1:
                    self.command(uid, _direction(pos, aux))
            # Any planar step from pos points back to the step's own direction.
            self.command(uid, Dir(self.random(0, 7)))

    def _move_furyans(self) -> None:
        board = self._underground
        for uid in self._underground_furyans:
            pos = self.unit(uid).pos
            direction = self._path_dir(board, pos, "H")
            if direction != Dir.NONE:
                self.command(uid, direction)
                continue
            direction = self._path_dir(board, pos, "F")
            if direction != Dir.NONE:
                self.command(uid, direction)
            self.command(uid, self._path_dir(board, pos, "P"))