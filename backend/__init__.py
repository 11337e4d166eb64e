# backend/__init__.py

from .board import MINE, MinesweeperBoard, NoSafeRevealError, Token
from .game import GridSession

__all__ = ["MINE", "MinesweeperBoard", "NoSafeRevealError", "Token", "GridSession"]
