import io

import pytest

from crematoria.settings import Settings, read_settings, version
from crematoria.structs import GameError, Pos

SAMPLE = """Crematoria 1.2
nb_players 4
nb_rounds 200
nb_furyans 20
nb_pioneers 10
max_nb_necromongers 20
nb_hellhounds 3
nb_elevators 20
gem_value 30
turns_to_land 10
rows 40
cols 80
"""


def test_version():
    assert version() == "Crematoria 1.2"


def test_read_settings_values():
    s = read_settings(SAMPLE)
    assert s.nb_players == 4
    assert s.nb_rounds == 200
    assert s.nb_furyans == 20
    assert s.nb_hellhounds == 3
    assert s.turns_to_land == 10
    assert (s.rows, s.cols) == (40, 80)


def test_read_settings_leaves_rest_of_stream():
    stream = io.StringIO(SAMPLE + "GRID\n")
    read_settings(stream)
    assert stream.read() == "GRID\n"


def test_fixed_rule_constants():
    s = read_settings(SAMPLE)
    assert s.furyans_health == 100
    assert s.pioneers_health == 50
    assert s.necromongers_health == 75
    assert s.health_recovery == 5


def test_wrong_version_raises():
    with pytest.raises(GameError):
        read_settings(SAMPLE.replace("1.2", "1.1"))


@pytest.mark.parametrize(
    "old,new",
    [
        ("nb_players 4", "nb_players 3"),
        ("nb_rounds 200", "nb_rounds 0"),
        ("rows 40", "rows 41"),
        ("cols 80", "cols 79"),
        ("gem_value 30", "gem_value 0"),
    ],
)
def test_invalid_value_raises(old, new):
    with pytest.raises(GameError):
        read_settings(SAMPLE.replace(old, new))


def test_wrong_key_raises():
    with pytest.raises(GameError):
        read_settings(SAMPLE.replace("nb_pioneers", "nb_settlers"))


def test_non_integer_value_raises():
    with pytest.raises(GameError):
        read_settings(SAMPLE.replace("nb_elevators 20", "nb_elevators many"))


def test_truncated_input_raises():
    with pytest.raises(GameError):
        read_settings(SAMPLE.split("rows")[0])


def test_player_ok():
    s = read_settings(SAMPLE)
    assert [s.player_ok(p) for p in (-1, 0, 3, 4)] == [False, True, True, False]


def test_pos_ok():
    s = read_settings(SAMPLE)
    assert s.pos_ok(Pos(0, 0, 0))
    assert s.pos_ok(Pos(39, 79, 1))
    assert not s.pos_ok(Pos(40, 0, 0))
    assert not s.pos_ok(Pos(0, 80, 0))
    assert not s.pos_ok(Pos(0, 0, 2))
    assert not s.pos_ok(Pos(-1, 0, 0))


def test_settings_is_immutable():
    s = read_settings(SAMPLE)
    with pytest.raises(AttributeError):
        s.nb_rounds = 5
    assert s == Settings(4, 200, 20, 10, 20, 3, 20, 30, 10, 40, 80)