"""A falling-block puzzle game built on pygame: pieces, grid, game state, drawing and the main loop."""

__version__ = "0.1.0"
__all__ = ["__version__"]