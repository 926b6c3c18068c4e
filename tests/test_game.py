import pytest

from solong.game import Direction, Game
from solong.mapfile import parse_map

SIMPLE = "1111111\n1P0C0E1\n1111111\n"
BLOCKED = "111111\n1PEC01\n100001\n111111\n"
OPEN = "1111111\n1C000E1\n100P001\n1000001\n1111111\n"


def make_game(text):
    return Game(parse_map(text))


def test_initial_state():
    game = make_game(SIMPLE)
    assert game.player == parse_map(SIMPLE).player
    assert game.coins == parse_map(SIMPLE).coins
    assert game.moves == 0
    assert not game.exit_open
    assert not game.won
    assert game.rows == parse_map(SIMPLE).rows


def test_move_right_updates_tiles():
    game = make_game(SIMPLE)
    x, y = game.player
    assert game.move(Direction.RIGHT) is True
    assert game.player == (x + 1, y)
    assert game.tile_at(x, y) == "0"
    assert game.tile_at(x + 1, y) == "P"
    assert game.moves == 1


def test_move_into_wall_is_refused():
    game = make_game(SIMPLE)
    before = game.rows
    assert game.move(Direction.UP) is False
    assert game.move(Direction.LEFT) is False
    assert game.rows == before
    assert game.moves == 0


def test_prints_move_count(capsys):
    game = make_game(SIMPLE)
    game.move(Direction.RIGHT)
    game.move(Direction.UP)
    game.move(Direction.RIGHT)
    assert capsys.readouterr().out == "Move: 1\nMove: 2\n"


def test_collect_coin_and_win():
    game = make_game(SIMPLE)
    game.move(Direction.RIGHT)
    game.move(Direction.RIGHT)
    assert game.coins == 0
    assert game.exit_open
    game.move(Direction.RIGHT)
    assert not game.won
    assert game.move(Direction.RIGHT) is True
    assert game.won
    assert game.moves == 4
    assert game.move(Direction.LEFT) is False


def test_exit_blocked_until_coins_collected():
    game = make_game(BLOCKED)
    start = game.player
    assert game.move(Direction.RIGHT) is False
    assert game.player == start
    for direction in (Direction.DOWN, Direction.RIGHT, Direction.RIGHT, Direction.UP):
        assert game.move(direction)
    assert game.coins == 0
    assert game.exit_open
    assert game.move(Direction.LEFT) is True
    assert game.won


def test_rows_keep_exactly_one_player():
    game = make_game(BLOCKED)
    for direction in (Direction.DOWN, Direction.RIGHT, Direction.UP, Direction.LEFT):
        game.move(direction)
        assert sum(row.count("P") for row in game.rows) == 1
        x, y = game.player
        assert game.tile_at(x, y) == "P"


@pytest.mark.parametrize("direction", list(Direction))
def test_move_steps_one_tile_in_direction(direction):
    game = make_game(OPEN)
    x, y = game.player
    assert game.move(direction) is True
    assert abs(direction.dx) + abs(direction.dy) == 1
    assert game.player == (x + direction.dx, y + direction.dy)
    assert game.tile_at(x + direction.dx, y + direction.dy) == "P"
    assert game.tile_at(x, y) == "0"
    assert game.moves == 1