"""Movements requested by a player during a round, and their text form."""

from __future__ import annotations

import io
import logging
import re
from dataclasses import dataclass

from .structs import Dir, GameError, dir_ok

_log = logging.getLogger(__name__)

_DIR_CHARS = {
    Dir.BOTTOM: "b",
    Dir.BR: "w",
    Dir.RIGHT: "r",
    Dir.RT: "x",
    Dir.TOP: "t",
    Dir.TL: "y",
    Dir.LEFT: "l",
    Dir.LB: "z",
    Dir.UP: "u",
    Dir.DOWN: "d",
    Dir.NONE: "n",
}
_CHAR_DIRS = {c: d for d, c in _DIR_CHARS.items()}


def char_to_dir(c: str) -> Dir:
    """Return the direction encoded by a character."""
    try:
        return _CHAR_DIRS[c]
    except KeyError:
        raise GameError(f"unknown direction character {c!r}") from None


def dir_to_char(d) -> str:
    """Return the character that encodes a direction."""
    try:
        return _DIR_CHARS[d]
    except KeyError:
        raise GameError(f"unknown direction {d!r}") from None


@dataclass(frozen=True)
class Movement:
    """A unit id and the direction it is to move."""

    id: int
    dir: Dir


class Action:
    """The movements requested by one player in one round."""

    MAX_MOVEMENTS = 1000

    def __init__(self) -> None:
        self._attempts = 0
        self._units: set[int] = set()
        self._movements: list[Movement] = []

    def command(self, unit_id: int, direction) -> None:
        """Request a movement; repeated units and bad directions are ignored."""
        self._attempts += 1
        if self._attempts > self.MAX_MOVEMENTS:
            raise GameError("Too many commands.")
        if unit_id in self._units:
            _log.warning("action already requested for unit %s", unit_id)
            return
        num = int(direction)
        if not dir_ok(num):
            _log.warning("wrong direction %s", num)
            return
        self._record(Movement(unit_id, Dir(num)))

    def _record(self, movement: Movement) -> None:
        self._units.add(movement.id)
        self._movements.append(movement)

    def movements(self) -> list[Movement]:
        """Return the accepted movements in request order."""
        return list(self._movements)


_INT = re.compile(r"\s*([+-]?\d+)")
_CHAR = re.compile(r"\s*(\S)")


class _Scanner:
    """Reads integers and single characters from a text stream, line by line."""

    def __init__(self, stream) -> None:
        self._lines = iter(stream)
        self._rest = ""

    def _take(self, pattern: re.Pattern) -> str | None:
        while not self._rest.strip():
            line = next(self._lines, None)
            if line is None:
                return None
            self._rest = line
        match = pattern.match(self._rest)
        if match is None:
            return None
        self._rest = self._rest[match.end():]
        return match.group(1)

    def next_int(self) -> int | None:
        token = self._take(_INT)
        return None if token is None else int(token)

    def next_char(self) -> str | None:
        return self._take(_CHAR)


def parse_actions(stream) -> Action:
    """Read "id dir" pairs up to a -1 terminator from a text stream or string."""
    if isinstance(stream, str):
        stream = io.StringIO(stream)
    scanner = _Scanner(stream)
    action = Action()
    while (unit_id := scanner.next_int()) is not None and unit_id != -1:
        c = scanner.next_char()
        if c is None:
            _log.warning("only half an operation given for unit %s", unit_id)
            break
        action._record(Movement(unit_id, char_to_dir(c)))
    return action


def format_actions(movements) -> str:
    """Return the text form of movements, ending with a -1 line."""
    body = "".join(f"{m.id} {dir_to_char(m.dir)}\n" for m in movements)
    return body + "-1\n"