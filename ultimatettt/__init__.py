"""Ultimate Tic-Tac-Toe for the terminal: board, move history, save files, game loop and CLI."""

__version__ = "0.1.0"

__all__ = ["board", "cli", "game", "plays", "savefile", "utils"]