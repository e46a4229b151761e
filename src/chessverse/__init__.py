"""chessverse: chess rules engine and game layer for a browser chess app."""

__version__ = "1.0.0"
