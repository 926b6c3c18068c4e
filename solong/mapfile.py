"""Loading and validating map files for the game."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from os import PathLike
from typing import Union

WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COIN = "C"
VALID_TILES = frozenset({WALL, FLOOR, PLAYER, EXIT, COIN})


class MapError(Exception):
    """Raised when a map cannot be read or is not a valid, playable map."""


@dataclass(frozen=True)
class GameMap:
    """A validated map: its rows, the player's start and the number of coins."""

    rows: tuple[str, ...]
    player: tuple[int, int]
    coins: int

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)


def load_map(path: Union[str, PathLike]) -> GameMap:
    """Read and validate the map stored in the file at ``path``."""
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            text = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise MapError("Opening map") from exc
    return parse_map(text)


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def parse_map(text: str) -> GameMap:
    """Validate map text and return the resulting map."""
    rows = check_rectangular(_split_lines(text))
    check_walls(rows)
    coins = check_characters(rows)
    start = find_player(rows)
    check_playable(rows, start)
    return GameMap(rows=tuple(rows), player=start, coins=coins)


def check_rectangular(lines: list[str]) -> list[str]:
    """Strip line endings and check every line has the same length."""
    rows = [line[:-1] if line.endswith("\n") else line for line in lines]
    if not rows:
        raise MapError("It is not rectangular")
    width = len(rows[0])
    if any(len(row) != width for row in rows[1:]):
        raise MapError("It is not rectangular")
    return rows


def check_walls(rows: list[str]) -> None:
    """Check that the map is closed by walls on every side."""
    last = len(rows) - 1
    for index, row in enumerate(rows):
        if index in (0, last):
            if any(tile != WALL for tile in row):
                raise MapError("Invalid map")
        elif not row or row[0] != WALL or row[-1] != WALL:
            raise MapError("Invalid map")


def check_characters(rows: list[str]) -> int:
    """Check the tiles used and their counts; return the number of coins."""
    counts: Counter[str] = Counter()
    for row in rows:
        for tile in row:
            if tile not in VALID_TILES:
                raise MapError("Invalid characters")
            counts[tile] += 1
    if (
        counts[PLAYER] != 1
        or counts[EXIT] != 1
        or counts[WALL] == 0
        or counts[COIN] == 0
    ):
        raise MapError("Invalid characters")
    return counts[COIN]


def find_player(rows: list[str]) -> tuple[int, int]:
    """Return the (x, y) position of the first player tile."""
    for y, row in enumerate(rows):
        x = row.find(PLAYER)
        if x >= 0:
            return x, y
    raise MapError("Invalid characters")


def check_playable(rows: list[str], start: tuple[int, int]) -> None:
    """Check that every coin and the exit can be reached from ``start``.

    The exit is reachable but cannot be walked through.
    """
    height = len(rows)
    width = len(rows[0]) if rows else 0
    grid = [list(row) for row in rows]
    stack = [start]
    while stack:
        x, y = stack.pop()
        if not (0 <= x < width and 0 <= y < height):
            raise MapError("Out of limits")
        tile = grid[y][x]
        if tile == EXIT:
            grid[y][x] = "e"
            continue
        if tile in ("F", WALL, "e"):
            continue
        grid[y][x] = "F"
        stack.extend([(x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)])
    if any(COIN in row or EXIT in row for row in grid):
        raise MapError("Not playable")