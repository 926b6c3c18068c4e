"""Drawing the game in a window and turning key presses into moves."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from solong.game import Direction, Game  # noqa: E402
from solong.mapfile import COIN, EXIT, FLOOR, PLAYER, WALL  # noqa: E402
from solong.printf import printf  # noqa: E402

TILE_SIZE = 64
DEFAULT_TEXTURE_DIR = "textures"
WINDOW_TITLE = "so_long"

PLAYER_IMAGE = "player1.xpm"
COIN_IMAGE = "coin1.xpm"
WALL_IMAGE = "wall1.xpm"
OPEN_EXIT_IMAGE = "exit1.xpm"
CLOSED_EXIT_IMAGE = "horcajo1.xpm"
FLOOR_IMAGE = "floor1.xpm"

TEXTURE_FILES = (
    PLAYER_IMAGE,
    COIN_IMAGE,
    WALL_IMAGE,
    OPEN_EXIT_IMAGE,
    CLOSED_EXIT_IMAGE,
    FLOOR_IMAGE,
)

CLOSE_MESSAGE = "\nYou close the game\n"
WIN_MESSAGE = "\n!!!!YOU WIN!!!!\n"

_KEY_DIRECTIONS = {
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
}


class TextureError(Exception):
    """Raised when the texture files cannot be found or loaded."""

    def __init__(self, message: str = "loading textures") -> None:
        super().__init__(message)


def check_texture_files(directory: Union[str, os.PathLike]) -> dict[str, Path]:
    """Check that every texture file can be opened; return their paths by name."""
    base = Path(directory)
    paths = {}
    for name in TEXTURE_FILES:
        path = base / name
        try:
            with open(path, "rb"):
                pass
        except OSError as exc:
            raise TextureError() from exc
        paths[name] = path
    if not base.is_dir():
        raise TextureError()
    return paths


def tile_image_name(tile: str, exit_open: bool) -> Optional[str]:
    """Return the texture file used to draw ``tile``, or None if it has none."""
    if tile == WALL:
        return WALL_IMAGE
    if tile == PLAYER:
        return PLAYER_IMAGE
    if tile == EXIT:
        return OPEN_EXIT_IMAGE if exit_open else CLOSED_EXIT_IMAGE
    if tile == COIN:
        return COIN_IMAGE
    if tile == FLOOR:
        return FLOOR_IMAGE
    return None


class Renderer:
    """A window showing a game, driven by the keyboard."""

    def __init__(
        self, game: Game, texture_dir: Union[str, os.PathLike] = DEFAULT_TEXTURE_DIR
    ) -> None:
        paths = check_texture_files(texture_dir)
        self.game = game
        pygame.init()
        self.screen = pygame.display.set_mode(
            (TILE_SIZE * game.width, TILE_SIZE * game.height)
        )
        pygame.display.set_caption(WINDOW_TITLE)
        try:
            self.images = {
                name: pygame.image.load(str(path)) for name, path in paths.items()
            }
        except pygame.error as exc:
            pygame.quit()
            raise TextureError() from exc

    def draw(self) -> None:
        """Draw every tile of the map and show the result."""
        for y, row in enumerate(self.game.rows):
            for x, tile in enumerate(row):
                name = tile_image_name(tile, self.game.coins == 0)
                if name is not None:
                    self.screen.blit(self.images[name], (x * TILE_SIZE, y * TILE_SIZE))
        pygame.display.flip()

    def _close(self) -> int:
        printf("%s\n", CLOSE_MESSAGE)
        return 1

    def handle_key(self, key: int) -> Optional[int]:
        """Act on a key press; return an exit status once the game is over."""
        direction = _KEY_DIRECTIONS.get(key)
        if direction is not None:
            self.game.move(direction)
        if key == pygame.K_ESCAPE:
            return self._close()
        self.draw()
        if self.game.coins == 0 and self.game.won:
            printf("%s\n", WIN_MESSAGE)
            return 0
        return None

    def run(self) -> int:
        """Run the event loop until the game ends; return the exit status."""
        self.draw()
        try:
            while True:
                event = pygame.event.wait()
                if event.type == pygame.QUIT:
                    return self._close()
                if event.type == pygame.KEYDOWN:
                    status = self.handle_key(event.key)
                    if status is not None:
                        return status
        finally:
            pygame.quit()