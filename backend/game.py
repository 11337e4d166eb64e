# backend/game.py

import logging

from .board import MinesweeperBoard
from .config import load_config
from .glyphs import render_view
from .utils import deep_copy_board

logger = logging.getLogger(__name__)


class GridSession:
    """
    Runs the generate pipeline on a MinesweeperBoard:
    empty board -> mines -> one random safe reveal -> snapshot.
    """

    def __init__(self, width: int, height: int, difficulty: int, seed: int = None, config: dict = None):
        self.width = width
        self.height = height
        self.difficulty = difficulty
        self.seed = seed
        self.config = config if config is not None else load_config()

        self.reset()

    def reset(self):
        """
        Start over with a fresh empty board and the same parameters.
        """
        self.board = MinesweeperBoard(
            self.height,
            self.width,
            seed=self.seed,
            placement=self.config["placement"],
        )
        self.num_mines = 0
        self.origin = None

    def generate(self) -> dict:
        """
        Place mines and open one safe zone. NoSafeRevealError propagates.
        """
        self.num_mines = self.board.bombify(self.difficulty)
        self.origin = self.board.reveal_random(max_attempts=self.config["reveal"]["max_attempts"])
        logger.info(
            "Generated %dx%d grid at difficulty %d: %d mines, %d cells revealed from %s",
            self.width, self.height, self.difficulty, self.num_mines,
            self.board.revealed_count(), self.origin,
        )
        return self.get_state()

    def view(self):
        return self.board.view(self.config["glyph_table"])

    def get_state(self) -> dict:
        """
        JSON-safe snapshot: glyphs for revealed tiles, None for hidden ones.
        """
        return {
            "board": [
                [token.glyph if token.revealed else None for token in row]
                for row in self.view()
            ],
            "dimensions": (self.height, self.width),
            "difficulty": self.difficulty,
            "num_mines": self.num_mines,
            "revealed": self.board.revealed_count(),
            "origin": self.origin,
        }

    def render(self) -> str:
        return render_view(self.view(), hidden=self.config["hidden"])

    def get_score(self) -> float:
        """
        Fraction of the board opened by the initial reveal.
        """
        return self.board.revealed_count() / (self.height * self.width)

    def reveal_full_board(self):
        """
        Return the complete board (including mines), useful for debugging.
        """
        return deep_copy_board(self.board.board)
