import pytest

from dungeoncrawl.model import ESCAPE_KEY_COUNT, Coord, Enemy, GameMap, Player


def small_map():
    return GameMap(
        "Test",
        [
            ["x", 0, "x"],
            ["x", "K", "x"],
            ["x", "0", 7],
        ],
    )


def test_bottom_row_is_y_zero():
    room = small_map()
    assert room.tile(1, 0) == "0"
    assert room.tile(2, 0) == 7
    assert room.tile(1, 2) == 0
    assert room.tile(1, 1) == "K"


def test_dimensions():
    room = small_map()
    assert (room.width, room.height) == (3, 3)


def test_set_tile_round_trip():
    room = small_map()
    room.set_tile(1, 1, "0")
    assert room.tile(1, 1) == "0"
    assert room.rows[1][1] == "0"


def test_out_of_bounds_access_raises():
    room = small_map()
    with pytest.raises(IndexError):
        room.tile(-1, 0)
    with pytest.raises(IndexError):
        room.set_tile(0, 3, "0")
    with pytest.raises(IndexError):
        room.reveal(3, 0)


def test_in_bounds():
    room = small_map()
    assert room.in_bounds(0, 0)
    assert room.in_bounds(2, 2)
    assert not room.in_bounds(3, 0)
    assert not room.in_bounds(0, -1)


def test_reveal():
    room = small_map()
    assert not room.is_revealed(1, 1)
    room.reveal(1, 1)
    assert room.is_revealed(1, 1)
    assert not room.is_revealed(0, 1)


def test_doors_in_column_order():
    room = small_map()
    assert list(room.doors()) == [(0, Coord(1, 2)), (7, Coord(2, 0))]


def test_rows_are_copied():
    rows = [["x", "0"], ["0", "x"]]
    room = GameMap("Copy", rows)
    room.set_tile(0, 0, "K")
    assert rows[1][0] == "0"


def test_ragged_rows_rejected():
    with pytest.raises(ValueError):
        GameMap("Bad", [["x", "x"], ["x"]])


def test_empty_map_rejected():
    with pytest.raises(ValueError):
        GameMap("Empty", [])


def test_player_defaults():
    player = Player()
    assert (player.hp, player.mp, player.atk, player.defense, player.keys) == (
        10,
        10,
        3,
        0,
        0,
    )
    assert player.location == Coord(1, 1)
    assert player.game_over is False


def test_enemy_defaults_and_key_count():
    enemy = Enemy()
    assert (enemy.atk, enemy.mp, enemy.hp, enemy.defense) == (5, 0, 2, 0)
    assert ESCAPE_KEY_COUNT == 14


def test_coord_is_hashable_value():
    assert {Coord(1, 2), Coord(1, 2)} == {Coord(1, 2)}