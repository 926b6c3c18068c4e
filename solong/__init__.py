"""A tile-based puzzle game: collect the coins and reach the exit."""

__version__ = "0.1.0"
__all__ = ["cli", "game", "mapfile", "printf", "render"]