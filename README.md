# crematoria

Building blocks for writing players of Crematoria, a four-player, turn-based
strategy game. The game is played on a 40 × 80 board with two levels: the caves
underground (layer `k = 0`) and the surface above them (layer `k = 1`). Columns
wrap around. Each player controls furyans and pioneers. Necromongers and
hellhounds are hostile units that belong to nobody. A sun sweeps across the
surface, two columns per round.

## Modules

- `crematoria.structs`: the `Dir`, `CellType` and `UnitType` enums, the `Pos`,
  `Cell` and `Unit` dataclasses, `dir_ok`, `unit_type_to_char`,
  `char_to_unit_type`, and the `GameError` exception that every module raises
  for malformed data or broken rules. Adding a `Dir` or another `Pos` to a
  `Pos` gives a new position, with the column wrapped to the range 0–79.
- `crematoria.random_gen`: `RandomGenerator`, a deterministic linear
  congruential generator with `random(low, high)`, `uniform()`,
  `random_permutation(n)` and `set_random_seed(seed)`.
- `crematoria.action`: `Movement` and `Action`, which collect one player's
  commands for one round, together with `char_to_dir`, `dir_to_char`,
  `parse_actions` and `format_actions` for the textual movement format
  (`id dir` pairs ended by `-1`).
- `crematoria.settings`: the frozen `Settings` dataclass, `read_settings` and
  `version()` (`"Crematoria 1.2"`).
- `crematoria.state`: `State`, which holds the grid, the units, the scores and
  the round number and answers `cell`, `unit`, `nb_units`, `nb_cells`,
  `nb_gems`, `status`, `furyans`, `pioneers`, `necromongers`, `hellhounds` and
  `daylight`. Also `char_to_cell` for the grid characters `R`, `C`, `E`, `O`,
  `G` and `0`–`3`.
- `crematoria.player`: the `Player` base class (a `State`, a
  `RandomGenerator` and an `Action` in one), and the registry
  `register_player`, `new_player` and `registered_players`.
- Sample players, each registered when its module is imported:
  - `crematoria.ai_null.NullPlayer` (`"Null"`) issues no commands.
  - `crematoria.ai_demo.DemoPlayer` (`"Demo"`) moves its units in mostly
    arbitrary ways to show the player interface.
  - `crematoria.ai_lalali.LaLaliPlayer` (`"LaLali"`) sends the nearest surface
    pioneer towards each known gem, and steers its underground units with
    breadth-first searches: away from nearby hellhounds and enemy furyans, and
    furyans towards enemy pioneers.

## Writing a player

Subclass `Player`, register it under a name and implement `play`, which is
meant to be called once per round. Inside it, the game state is available
through the player's own query methods, and moves are issued with `command`:

```python
from crematoria.player import Player, register_player
from crematoria.structs import Dir


@register_player("Eastward")
class EastwardPlayer(Player):
    def play(self):
        for unit_id in self.pioneers(self.me()):
            self.command(unit_id, Dir.RIGHT)
```

A registered player can be created by name:

```python
from crematoria.player import new_player, registered_players

print(registered_players())   # sorted names of the players imported so far
player = new_player("Eastward")
```

`new_player` raises `GameError` for a name that is not registered.

Each unit can receive at most one command per round: a second command for the
same unit, or a direction outside `Dir`, is ignored and logged as a warning.
More than 1000 calls to `command` in one round raise `GameError`. The accepted
commands are returned, in order, by `movements()`, and `format_actions` turns
them into text:

```python
from crematoria.action import format_actions

print(format_actions(player.movements()), end="")
```

## Feeding a player the game state

A player learns the state in one of two ways:

- `player.reset(state)` clears its commands and takes a deep copy of another
  `State` (which carries its `settings`).
- `player.read_state(stream)` clears its commands and reads the state as text.
  The player's `settings` must be set first:

```python
from crematoria.settings import read_settings

player.settings = read_settings(open("game.cnf"))
player.read_state(open("round.txt"))
player.play()
```

The state text holds 40 lines of 80 characters for the caves, 40 for the
surface, then `round N`, `nb_cells` with four numbers, `nb_gems` with four
numbers, `status` with four numbers, and one line per unit:
`type player health turns i j k`, where the type is `p`, `f`, `n` or `h`. Any
inconsistency raises `GameError`.

## Settings

A game description starts with the words `Crematoria 1.2` and then the
settings, each as a name followed by an integer, in this order: `nb_players`
(must be 4), `nb_rounds`, `nb_furyans`, `nb_pioneers`, `max_nb_necromongers`,
`nb_hellhounds`, `nb_elevators`, `gem_value`, `turns_to_land` (each at least
1), `rows` (must be 40) and `cols` (must be 80). `read_settings` takes a text
stream or a string and raises `GameError` if anything is out of place. The
fixed rules (health, damage ranges, probabilities, health recovery) are class
attributes of `Settings`.

## Randomness

Players should draw from their own generator rather than Python's `random`
module, so that their choices are reproducible:

```python
from crematoria.random_gen import RandomGenerator

rng = RandomGenerator(42)
roll = rng.random(0, 7)            # integer in [0, 7]
order = rng.random_permutation(5)  # permutation of range(5)
```

`random` returns `low` when the interval is empty or longer than 10⁶ values,
and `random_permutation` returns `[]` for `n` outside 0–10⁶.

## What this package does not do

It has no game engine: nothing here generates maps, applies the players'
movements, resolves fights, moves the sun, necromongers or hellhounds, or
computes scores. There is no command that runs a match. The package models
the state a player sees, lets players decide and record their commands, and
reads and writes the text formats involved.