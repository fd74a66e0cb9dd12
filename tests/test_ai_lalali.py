import pytest

from crematoria.ai_lalali import LaLaliPlayer
from crematoria.player import new_player, registered_players
from crematoria.settings import Settings
from crematoria.structs import CellType, Dir, Pos

SETTINGS = Settings(
    nb_players=4,
    nb_rounds=10,
    nb_furyans=1,
    nb_pioneers=1,
    max_nb_necromongers=1,
    nb_hellhounds=3,
    nb_elevators=1,
    gem_value=1,
    turns_to_land=1,
    rows=40,
    cols=80,
)

PLANAR = set(Dir(n) for n in range(8))


def default_units():
    units = []
    for pl in range(4):
        units.append(f"f {pl} 100 0 30 {pl * 10 + 5} 1")
        units.append(f"p {pl} 50 0 35 {pl * 10 + 5} 1")
    units.append("n -1 0 0 -1 -1 -1")
    units.append("h -1 -1 0 39 60 0")
    units.append("h -1 -1 0 39 70 0")
    units.append("h -1 -1 0 39 75 0")
    return units


def state_text(round_=0, overrides=None, underground=None):
    units = default_units()
    for idx, line in (overrides or {}).items():
        units[idx] = line
    underground = underground or {}
    rows = []
    for i in range(40):
        rows.append("".join(underground.get((i, j), "C") for j in range(80)))
    rows.extend("O" * 80 for _ in range(40))
    rows.append(f"round {round_}")
    rows.append("nb_cells 0 0 0 0")
    rows.append("nb_gems 0 0 0 0")
    rows.append("status 0 0 0 0")
    rows.extend(units)
    return "\n".join(rows) + "\n"


def make_player(me=0):
    player = LaLaliPlayer()
    player.settings = SETTINGS
    player._join(me, 1)
    return player


def play(player, text):
    player.read_state(text)
    player.play()
    return {m.id: m.dir for m in player.movements()}


def cheb(a, b):
    return max(abs(a.i - b.i), abs(a.j - b.j))


def test_registered_under_name():
    assert "LaLali" in registered_players()
    assert isinstance(new_player("LaLali"), LaLaliPlayer)


def test_no_underground_units_and_no_gems_means_no_commands():
    player = make_player()
    assert play(player, state_text()) == {}


def test_pioneer_flees_nearby_hellhound():
    player = make_player()
    moves = play(player, state_text(overrides={1: "p 0 50 0 10 10 0", 9: "h -1 -1 0 10 12 0"}))
    start, hound = Pos(10, 10, 0), Pos(10, 12, 0)
    assert moves[1] in PLANAR
    assert cheb(start + moves[1], hound) > cheb(start, hound)


def test_pioneer_flees_adjacent_enemy_furyan():
    player = make_player()
    overrides = {1: "p 0 50 0 10 10 0", 2: "f 1 100 0 10 11 0"}
    moves = play(player, state_text(overrides=overrides))
    start, enemy = Pos(10, 10, 0), Pos(10, 11, 0)
    assert cheb(start + moves[1], enemy) > cheb(start, enemy)


def test_stronger_furyan_attacks_adjacent_enemy():
    player = make_player()
    overrides = {0: "f 0 100 0 10 10 0", 2: "f 1 50 0 10 11 0"}
    moves = play(player, state_text(overrides=overrides))
    assert moves[0] == Dir.RIGHT


def test_weaker_furyan_flees_adjacent_enemy():
    player = make_player()
    overrides = {0: "f 0 40 0 10 10 0", 2: "f 1 100 0 10 11 0"}
    moves = play(player, state_text(overrides=overrides))
    start, enemy = Pos(10, 10, 0), Pos(10, 11, 0)
    assert cheb(start + moves[0], enemy) > cheb(start, enemy)


def test_calm_pioneer_avoids_rock():
    player = make_player()
    moves = play(
        player,
        state_text(overrides={1: "p 0 50 0 10 10 0"}, underground={(11, 10): "R"}),
    )
    target = Pos(10, 10, 0) + moves[1]
    assert moves[1] in PLANAR
    assert player.cell(target).type != CellType.ROCK


def test_outside_pioneer_heads_for_gem():
    player = make_player()
    moves = play(
        player,
        state_text(overrides={1: "p 0 50 0 5 8 1"}, underground={(5, 5): "G"}),
    )
    start, gem = Pos(5, 8, 1), Pos(5, 5, 1)
    assert cheb(start + moves[1], gem) < cheb(start, gem)


def test_second_round_uses_fresh_threats():
    player = make_player()
    play(player, state_text(overrides={1: "p 0 50 0 10 10 0", 9: "h -1 -1 0 10 12 0"}))
    moves = play(
        player,
        state_text(round_=1, overrides={1: "p 0 50 0 20 20 0", 9: "h -1 -1 0 20 22 0"}),
    )
    start, hound = Pos(20, 20, 0), Pos(20, 22, 0)
    assert cheb(start + moves[1], hound) > cheb(start, hound)


@pytest.mark.parametrize("me", [0, 2])
def test_each_own_underground_unit_gets_one_command(me):
    player = make_player(me)
    overrides = {2 * me: f"f {me} 100 0 15 15 0", 2 * me + 1: f"p {me} 50 0 25 25 0"}
    moves = play(player, state_text(overrides=overrides))
    assert set(moves) == {2 * me, 2 * me + 1}