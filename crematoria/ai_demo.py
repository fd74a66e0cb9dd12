"""A demonstration player that shows how the player interface is used."""

from __future__ import annotations

import logging

from .player import Player, register_player
from .structs import CellType, Dir, Pos

_log = logging.getLogger(__name__)


@register_player("Demo")
class DemoPlayer(Player):
    """Moves its units in mostly arbitrary ways to exercise the interface."""

    def __init__(self) -> None:
        super().__init__()
        self._kind: dict[int, int] = {}  # pioneers: 0 -> random, 1 -> cyclic

    def play(self) -> None:
        """Command all own furyans, then all own pioneers."""
        self._move_furyans()
        self._move_pioneers()

    def _move_furyans(self) -> None:
        own = self.furyans(self.me())
        for index in self.random_permutation(len(own)):
            uid = own[index]
            if self.random(0, 2) == 0:
                self.command(uid, Dir(self.random(0, 9)))
            elif not self._attack(uid):
                self._wander(uid)

    def _attack(self, uid: int) -> bool:
        for k in range(8):
            p = self.unit(uid).pos
            if self.settings.pos_ok(p):
                other = self.cell(p).id
                if other != -1 and self.unit(other).player != self.me():
                    self.command(uid, Dir(k))
                    return True
        return False

    def _wander(self, uid: int) -> None:
        if self.cell(self.unit(uid).pos).type == CellType.ELEVATOR:
            self.command(uid, Dir.UP)
        elif self.round < 40:
            self.command(uid, Dir.LEFT)
        elif self.round > 180:
            self.command(uid, Dir.NONE)
        elif self.random(0, 1):
            chosen: set[Pos] = set()
            while len(chosen) < 4:
                chosen.add(Pos(self.random(0, 39), self.random(0, 79), 0))
            ordered = sorted(chosen)
            south = ordered[self.random(0, 3)].i >= 30
            self.command(uid, Dir.BOTTOM if south else Dir.RT)
        elif self.status(0) > 0.8:
            self.command(uid, Dir.LEFT)
        elif self.unit(uid).health < 20:
            self.command(uid, Dir(2 * self.random(0, 3)))
        elif self.cell(Pos(10, 20, 0)).owner == 2:
            self.command(uid, Dir.TL)
        elif self.nb_cells(3) > 50:
            self.command(uid, Dir.LB)
        elif self.nb_gems(self.me()) < 4:
            self.command(uid, Dir.BR)
        elif self.cell(Pos(20, 30, 0)).type == CellType.CAVE:
            self.command(uid, Dir.BOTTOM)
        elif self.cell(Pos(2, 2, 1)).gem:
            self.command(uid, Dir.TOP)
        elif self.daylight(Pos(0, 0, 1)):
            self.command(uid, Dir.RT)
        else:
            _log.debug("%s", self.unit(uid).pos)

    def _move_pioneers(self) -> None:
        for uid in self.pioneers(self.me()):
            _log.debug("%s", self.unit(uid))
            if uid not in self._kind:
                self._kind[uid] = self.random(0, 1)
            if self._kind[uid] == 0:
                self.command(uid, Dir(self.random(0, 7)))
            else:
                self.command(uid, Dir(2 * (self.round % 4)))