# backend/utils.py

import random
from typing import List, Optional, Tuple

import numpy as np

MINE = -1


def make_rng(seed: Optional[int] = None) -> random.Random:
    """
    Build a private random source. A None seed draws from OS entropy.
    """
    return random.Random(seed)


def get_neighbors(row: int, col: int, width: int, height: int) -> List[Tuple[int, int]]:
    """
    Return a list of valid neighboring coordinates (8-way) for (row, col).
    """
    neighbors = []
    for dr in [-1, 0, 1]:
        for dc in [-1, 0, 1]:
            nr, nc = row + dr, col + dc
            if (dr != 0 or dc != 0) and 0 <= nr < height and 0 <= nc < width:
                neighbors.append((nr, nc))
    return neighbors


def format_board_debug(board: List[List[int]], revealed: List[List[bool]] = None) -> str:
    """
    Text dump of the raw board for debugging.
    Shows mines and numbers; unrevealed tiles are bracketed when `revealed` is given.
    """
    lines = []
    for r in range(len(board)):
        row_str = ""
        for c in range(len(board[0])):
            symbol = "*" if board[r][c] == MINE else str(board[r][c])
            if revealed and not revealed[r][c]:
                row_str += f"[{symbol}]"
            else:
                row_str += f" {symbol} "
        lines.append(row_str)
    return "\n".join(lines)


def encode_board(board: List[List[int]], revealed: List[List[bool]] = None) -> np.ndarray:
    """
    Encode the board as an integer array: -1 for mines, 0–8 for counts.
    When `revealed` is given, hidden tiles are encoded as -2.
    """
    encoded = np.array(board, dtype=int)
    if revealed is not None:
        encoded = np.where(np.array(revealed, dtype=bool), encoded, -2)
    return encoded


def deep_copy_board(board: List[List[int]]) -> List[List[int]]:
    """
    Deep copy a 2D list of the board state.
    """
    return [row[:] for row in board]
