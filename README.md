# solong

A small top-down tile game. You walk a character around a walled map
and pick up every coin. Once the last coin is taken the exit opens;
step onto it to win. Each move is counted and printed to the terminal
as `Move: <n>`.

## Installing

```
pip install .
```

This pulls in `pygame`, which opens the window and draws the tiles.

## Playing

```
so_long path/to/level.ber
```

The same command is available as `python -m solong.cli path/to/level.ber`.

The map file name must end in `.ber`. With the wrong number of
arguments, or a name without `.ber`, an `Error` line is printed and
nothing else happens.

The game reads its textures from a `textures` directory in the current
working directory. It must hold these six files, each in a format
pygame can load:

| File           | Drawn for                      |
|----------------|--------------------------------|
| `player1.xpm`  | the player                     |
| `coin1.xpm`    | a coin                         |
| `wall1.xpm`    | a wall                         |
| `floor1.xpm`   | floor                          |
| `horcajo1.xpm` | the exit while coins remain    |
| `exit1.xpm`    | the exit once every coin is taken |

If any of them is missing or cannot be loaded, the game prints
`Error` / `loading textures` and exits with status 1.

Controls:

| Key                | Action     |
|--------------------|------------|
| `W` / Up arrow     | move up    |
| `A` / Left arrow   | move left  |
| `S` / Down arrow   | move down  |
| `D` / Right arrow  | move right |
| `Esc`              | quit       |

Closing the window or pressing `Esc` prints `You close the game` and
exits with status 1. Reaching the open exit prints `!!!!YOU WIN!!!!`
and exits with status 0.

## Map format

A map is a plain text file of equal-length lines, separated by `\n`,
made of these characters:

| Char | Meaning |
|------|---------|
| `1`  | wall    |
| `0`  | floor   |
| `P`  | player  |
| `C`  | coin    |
| `E`  | exit    |

Example:

```
1111111
1P0C0E1
1111111
```

A map is rejected, with an `Error` message and exit status 1, when:

- it is empty or its lines are not all the same length
  (`It is not rectangular`);
- it is not enclosed by walls on every side (`Invalid map`);
- it contains any other character, or does not have exactly one
  player, exactly one exit, at least one wall and at least one coin
  (`Invalid characters`);
- the player cannot reach every coin and the exit (`Not playable`).
  The exit counts as reached but cannot be walked through while
  checking this.

## Using it from Python

```python
from solong.mapfile import load_map, parse_map, MapError
from solong.game import Game, Direction

game_map = load_map("level.ber")      # or parse_map(text)
game = Game(game_map)
game.move(Direction.RIGHT)            # True if the player moved
print(game.tile_at(2, 1), game.player, game.coins, game.moves, game.won)
```

- `solong.mapfile` holds `load_map`, `parse_map` and the individual
  checks (`check_rectangular`, `check_walls`, `check_characters`,
  `find_player`, `check_playable`); each raises `MapError` on failure.
  A valid map is a `GameMap` with `rows`, `player`, `coins`, `width`
  and `height`.
- `solong.game.Game` tracks the grid, the player's position, the coins
  left, the move count, whether the exit is open and whether the game
  is won. Moving into a wall, or into the exit while coins remain,
  leaves the player where it is.
- `solong.render` holds `Renderer`, which draws a `Game` with pygame
  and runs the event loop, along with `check_texture_files` and
  `tile_image_name`.
- `solong.printf.format_printf` and `solong.printf.printf` are a small
  printf-style formatter supporting `%c %s %d %i %u %x %X %p` and `%%`,
  used for the game's messages.

## What it does not include

No texture images ship with the package; you supply the `textures`
directory yourself. There are no levels bundled either, and no
sound, menus, saved games or score keeping beyond the move count.

## Running the tests

```
pip install ".[test]"
pytest
```