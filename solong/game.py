"""Game state and player movement."""

from __future__ import annotations

from enum import Enum

from solong.mapfile import COIN, EXIT, FLOOR, PLAYER, WALL, GameMap
from solong.printf import printf


class Direction(Enum):
    """A direction of movement as an (dx, dy) offset."""

    RIGHT = (1, 0)
    LEFT = (-1, 0)
    DOWN = (0, 1)
    UP = (0, -1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class Game:
    """The state of a game in progress on a validated map."""

    def __init__(self, game_map: GameMap) -> None:
        self._grid = [list(row) for row in game_map.rows]
        self.width = game_map.width
        self.height = game_map.height
        self.player_x, self.player_y = game_map.player
        self.coins = game_map.coins
        self.moves = 0
        self.exit_open = self.coins == 0
        self.won = False

    @property
    def player(self) -> tuple[int, int]:
        return self.player_x, self.player_y

    @property
    def rows(self) -> tuple[str, ...]:
        return tuple("".join(row) for row in self._grid)

    def tile_at(self, x: int, y: int) -> str:
        """Return the tile at column ``x`` and row ``y``."""
        return self._grid[y][x]

    def move(self, direction: Direction) -> bool:
        """Try to move the player one step; return whether the player moved."""
        if self.won:
            return False
        moved = False
        target_x = self.player_x + direction.dx
        target_y = self.player_y + direction.dy
        target = self._grid[target_y][target_x]
        if target != WALL and (target != EXIT or self.exit_open):
            self._grid[self.player_y][self.player_x] = FLOOR
            if target == COIN:
                self.coins -= 1
            self.player_x, self.player_y = target_x, target_y
            self.won = target == EXIT
            self._grid[target_y][target_x] = PLAYER
            self.moves += 1
            printf("Move: %d\n", self.moves)
            moved = True
        if self.coins == 0:
            self.exit_open = True
        return moved