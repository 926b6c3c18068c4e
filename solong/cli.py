"""Command line entry point: load a map and play it."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from solong.game import Game
from solong.mapfile import MapError, load_map
from solong.printf import printf
from solong.render import DEFAULT_TEXTURE_DIR, Renderer, TextureError, check_texture_files


def check_ber(path: str) -> bool:
    """Return whether ``path`` names a .ber file, reporting when it does not."""
    if not path.endswith(".ber"):
        printf("Error\n you need .ber\n")
        return False
    return True


def _fail(message: str) -> int:
    printf("%s\n", f"Error\n {message}\n")
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play the map named on the command line; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        printf("Error\n invalid number of arguments\n")
        return 0
    if not check_ber(args[0]):
        return 0
    try:
        check_texture_files(DEFAULT_TEXTURE_DIR)
        game = Game(load_map(args[0]))
        renderer = Renderer(game, DEFAULT_TEXTURE_DIR)
    except (TextureError, MapError) as exc:
        return _fail(str(exc))
    return renderer.run()


if __name__ == "__main__":
    raise SystemExit(main())