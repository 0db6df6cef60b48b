"""Grid-based jigsaw puzzle game logic: board, pieces, tray, game state and input handling."""

__version__ = "0.1.0"
__all__ = ["data", "grid", "piece", "game", "hud", "controller"]