"""Base class for players and the registry of player kinds."""

from __future__ import annotations

import copy
import io

from .action import Action
from .random_gen import RandomGenerator
from .state import State
from .structs import CellType, GameError, Pos, Unit, UnitType, char_to_unit_type

_STATE_FIELDS = (
    "round",
    "_grid",
    "_unit_data",
    "_furyans",
    "_pioneers",
    "_necromongers",
    "_hellhounds",
    "_nb_cells",
    "_nb_gems",
    "_cpu_status",
)


def _tokens(stream):
    if isinstance(stream, str):
        stream = io.StringIO(stream)
    for line in stream:
        yield from line.split()


def _check(condition: bool, message: str) -> None:
    if not condition:
        raise GameError(message)


def _expect(tokens, keyword: str) -> None:
    found = next(tokens, None)
    _check(found == keyword, f"expected {keyword!r}, found {found!r}")


def _read_numbers(tokens, count: int, kind, what: str) -> list:
    values = []
    for _ in range(count):
        raw = next(tokens, None)
        try:
            values.append(kind(raw))
        except (TypeError, ValueError):
            raise GameError(f"could not read {what}: {raw!r}") from None
    return values


class Player(State, RandomGenerator, Action):
    """A player: sees the game state, draws random numbers and issues commands."""

    def __init__(self) -> None:
        State.__init__(self, None)
        RandomGenerator.__init__(self, 0)
        Action.__init__(self)
        self._me = 0

    def _join(self, me: int, seed: int) -> None:
        self._me = me
        self.set_random_seed(seed)

    def play(self) -> None:
        """Decide the commands for this round; the base player issues none."""

    def me(self) -> int:
        """Return the identifier of this player."""
        return self._me

    def reset(self, state: State) -> None:
        """Forget the commands issued so far and take a copy of a game state."""
        Action.__init__(self)
        self.settings = state.settings
        for name in _STATE_FIELDS:
            setattr(self, name, copy.deepcopy(getattr(state, name)))

    def read_state(self, stream) -> None:
        """Forget the commands issued so far and read the game state from text."""
        s = self.settings
        _check(s is not None, "settings are needed to read a state")
        Action.__init__(self)
        tokens = _tokens(stream)
        self.read_grid(tokens)

        _expect(tokens, "round")
        (self.round,) = _read_numbers(tokens, 1, int, "round")
        _check(0 <= self.round < s.nb_rounds, f"round {self.round} out of range")

        np_ = s.nb_players
        _expect(tokens, "nb_cells")
        self._nb_cells = _read_numbers(tokens, np_, int, "nb_cells")
        _check(all(n >= 0 for n in self._nb_cells), "negative nb_cells")

        _expect(tokens, "nb_gems")
        self._nb_gems = _read_numbers(tokens, np_, int, "nb_gems")
        _check(all(n >= 0 for n in self._nb_gems), "negative nb_gems")

        _expect(tokens, "status")
        self._cpu_status = _read_numbers(tokens, np_, float, "status")
        _check(
            all(st == -1 or 0 <= st <= 1 for st in self._cpu_status),
            "status out of range",
        )

        count = np_ * (s.nb_furyans + s.nb_pioneers) + s.max_nb_necromongers + s.nb_hellhounds
        self._unit_data = [self._read_unit(tokens, uid) for uid in range(count)]
        self.update_vectors_by_player()

    def _read_unit(self, tokens, uid: int) -> Unit:
        raw = [next(tokens, None) for _ in range(7)]
        try:
            ut = char_to_unit_type(raw[0])
            player, health, turns, i, j, k = (int(x) for x in raw[1:])
        except (TypeError, ValueError, GameError):
            raise GameError(f"Could not read info for unit {uid}.") from None

        s = self.settings
        if ut in (UnitType.FURYAN, UnitType.PIONEER):
            _check(s.player_ok(player), f"unit {uid} of wrong player {player}")
        else:
            _check(player == -1, f"enemy unit {uid} of player {player}")

        pos = Pos(i, j, k)
        if ut == UnitType.NECROMONGER and health == 0:
            _check(pos == Pos(-1, -1, -1), f"dead unit {uid} with a position")
        else:
            _check(s.pos_ok(pos), f"unit {uid} off the board")
            cell = self._grid[i][j][k]
            if cell.type != CellType.OUTSIDE or ut == UnitType.PIONEER:
                _check(not cell.gem, f"unit {uid} on a gem")
            _check(cell.type != CellType.ROCK, f"unit {uid} on a rock")
            if ut == UnitType.HELLHOUND:
                _check(k == 0 and health == -1, f"bad hellhound {uid}")
            else:
                _check(health > 0, f"unit {uid} without health")
                if ut == UnitType.FURYAN:
                    _check(health <= s.furyans_health, f"unit {uid} too healthy")
                elif ut == UnitType.PIONEER:
                    _check(health <= s.pioneers_health, f"unit {uid} too healthy")
                else:
                    _check(
                        health <= s.necromongers_health and k == 1,
                        f"bad necromonger {uid}",
                    )
            if ut == UnitType.NECROMONGER and turns > 0:
                _check(
                    turns <= s.turns_to_land
                    and health == s.necromongers_health
                    and cell.type == CellType.OUTSIDE
                    and not cell.gem,
                    f"bad descending necromonger {uid}",
                )
            else:
                _check(cell.id == -1, f"unit {uid} on an occupied cell")
                cell.id = uid
        return Unit(ut, uid, player, health, turns, pos)


_REGISTRY: dict[str, type] = {}


def register_player(name: str):
    """Class decorator that registers a player kind under a name."""

    def decorator(cls):
        _REGISTRY[name] = cls
        return cls

    return decorator


def new_player(name: str) -> Player:
    """Create a new player of the kind registered under name."""
    try:
        cls = _REGISTRY[name]
    except KeyError:
        raise GameError(f"Player {name} not registered.") from None
    return cls()


def registered_players() -> list[str]:
    """Return the registered player names in sorted order."""
    return sorted(_REGISTRY)