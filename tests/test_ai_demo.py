import pytest

from crematoria.ai_demo import DemoPlayer
from crematoria.player import new_player
from crematoria.settings import Settings
from crematoria.state import State
from crematoria.structs import Dir

SETTINGS = Settings(
    nb_players=4,
    nb_rounds=200,
    nb_furyans=1,
    nb_pioneers=1,
    max_nb_necromongers=1,
    nb_hellhounds=1,
    nb_elevators=1,
    gem_value=4,
    turns_to_land=5,
    rows=40,
    cols=80,
)


def state_text(round_=0, under=None):
    under = under or {}
    lines = ["".join(under.get((i, j), "C") for j in range(80)) for i in range(40)]
    lines += ["O" * 80] * 40
    lines += [f"round {round_}", "nb_cells 0 0 0 0", "nb_gems 0 0 0 0", "status 0 0 0 0"]
    for pl in range(4):
        lines.append(f"f {pl} 100 0 5 {10 * pl + 5} 0")
        lines.append(f"p {pl} 50 0 6 {10 * pl + 5} 0")
    lines += ["n -1 0 0 -1 -1 -1", "h -1 -1 0 30 30 0"]
    return "\n".join(lines) + "\n"


def played(seed, me=0, round_=0, under=None, player=None):
    player = player if player is not None else DemoPlayer()
    player._join(me, seed)
    player.reset(State(SETTINGS))
    player.read_state(state_text(round_, under))
    player.play()
    return {m.id: m.dir for m in player.movements()}


def test_registered_as_demo():
    moves = played(seed=11, player=new_player("Demo"))
    assert moves == played(seed=11)
    assert set(moves) == {0, 1}


@pytest.mark.parametrize("me", [0, 1, 3])
def test_commands_every_own_unit_once(me):
    moves = played(seed=11, me=me)
    assert set(moves) == {2 * me, 2 * me + 1}


def test_same_seed_same_moves():
    for seed in range(10):
        moves = played(seed)
        assert set(moves) == {0, 1}
        assert moves == played(seed)


def test_pioneer_moves_stay_on_the_plane():
    for seed in range(20):
        for round_ in (0, 1, 2, 3, 100):
            assert played(seed, round_=round_)[1] <= Dir.LB


def test_early_furyans_mostly_go_left():
    dirs = [played(seed)[0] for seed in range(30)]
    assert Dir.NONE not in dirs
    assert Dir.LEFT in dirs


def test_furyan_on_elevator_goes_up():
    dirs = [played(seed, under={(5, 5): "E"})[0] for seed in range(20)]
    assert Dir.UP in dirs
    assert all(d <= Dir.DOWN for d in dirs)


def test_late_furyans_stay_still():
    dirs = [played(seed, round_=190)[0] for seed in range(20)]
    assert Dir.NONE in dirs