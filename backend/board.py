# backend/board.py

import logging
from collections import deque, namedtuple

from .glyphs import DEFAULT_GLYPHS
from .utils import MINE, get_neighbors, make_rng

logger = logging.getLogger(__name__)

PLACEMENT_STRATEGIES = ("unique", "draws")

DEFAULT_MAX_ATTEMPTS = 100

Token = namedtuple("Token", ["glyph", "revealed"])


class NoSafeRevealError(RuntimeError):
    """Raised when the board holds no zero-count cell to start a flood fill from."""


class MinesweeperBoard:
    def __init__(self, height, width, seed=None, rng=None, placement="unique"):
        """
        height, width:
            Board dimensions, both >= 1.
        seed / rng:
            Randomness is injected. Pass a ready random.Random-like object as
            `rng`, or a `seed` to build a private one. The global random
            module is never touched.
        placement:
            "unique" samples distinct coordinates, so exactly the requested
            number of mines lands. "draws" makes independent draws and lets
            collisions silently drop mines.
        """
        if placement not in PLACEMENT_STRATEGIES:
            raise ValueError(
                f"Unknown placement strategy {placement!r}; "
                f"expected one of {', '.join(PLACEMENT_STRATEGIES)}"
            )

        self.height = height
        self.width = width
        self.seed = seed
        self.placement = placement
        self.rng = rng if rng is not None else make_rng(seed)

        self.board = [[0 for _ in range(self.width)] for _ in range(self.height)]   # -1 = mine, 0–8 = adjacent mine counts
        self.revealed = [[False for _ in range(self.width)] for _ in range(self.height)]

    # ------------------------------------------------------------------
    # Mine placement
    # ------------------------------------------------------------------
    def bombify(self, difficulty: int) -> int:
        """
        Turn roughly `difficulty` percent of the tiles into mines.
        Always places at least one. Returns how many mines actually landed.
        """
        mine_count = max(1, self.height * self.width * difficulty // 100)

        if self.placement == "unique":
            all_coords = [(r, c) for r in range(self.height) for c in range(self.width)]
            targets = self.rng.sample(all_coords, min(mine_count, len(all_coords)))
        else:
            targets = [
                (self.rng.randrange(self.height), self.rng.randrange(self.width))
                for _ in range(mine_count)
            ]

        placed = sum(1 for r, c in targets if self.place_mine(r, c))
        logger.debug(
            "bombify(%s): requested %d mines, placed %d on %dx%d board",
            difficulty, mine_count, placed, self.height, self.width,
        )
        return placed

    def place_mine(self, row: int, col: int) -> bool:
        """
        Place a single mine and bump the counts around it.
        Returns False when the cell already holds a mine.
        """
        if self.board[row][col] == MINE:
            return False

        self.board[row][col] = MINE
        for nr, nc in get_neighbors(row, col, self.width, self.height):
            if self.board[nr][nc] != MINE:
                self.board[nr][nc] += 1
        return True

    # ------------------------------------------------------------------
    # Reveal
    # ------------------------------------------------------------------
    def reveal(self, row: int, col: int) -> bool:
        """
        Flood-fill reveal seeded at (row, col).

        Only a zero-count cell can seed the fill; mines, numbered cells,
        off-board and non-integral coordinates are rejected with False and
        nothing changes.
        On success the connected zero region and its numbered border end up
        revealed.
        """
        if not self.is_valid_coord(row, col):
            return False
        row, col = int(row), int(col)
        if self.board[row][col] != 0:
            return False

        visited = {(row, col)}
        queue = deque([(row, col)])

        while queue:
            r, c = queue.popleft()
            if self.board[r][c] == MINE:
                raise RuntimeError(f"Flood fill reached a mine at ({r}, {c})")

            self.revealed[r][c] = True
            if self.board[r][c] != 0:
                continue

            for nr, nc in get_neighbors(r, c, self.width, self.height):
                if (nr, nc) not in visited:
                    visited.add((nr, nc))
                    queue.append((nr, nc))

        return True

    def reveal_random(self, max_attempts: int = None):
        """
        Reveal a random safe zone and return its seed coordinate.

        Draws random cells until one seeds a flood fill. After
        `max_attempts` misses it picks directly among the zero-count cells.
        Raises NoSafeRevealError if there are none.
        """
        if max_attempts is None:
            max_attempts = DEFAULT_MAX_ATTEMPTS

        candidates = self.safe_cells()
        if not candidates:
            raise NoSafeRevealError("no safe reveal available")

        for attempt in range(1, max_attempts + 1):
            row, col = self.rng.randrange(self.height), self.rng.randrange(self.width)
            if self.reveal(row, col):
                logger.debug("Revealed safe zone at (%d, %d) on attempt %d", row, col, attempt)
                return row, col

        row, col = self.rng.choice(candidates)
        logger.debug(
            "No hit after %d random draws, falling back to (%d, %d) out of %d safe cells",
            max_attempts, row, col, len(candidates),
        )
        self.reveal(row, col)
        return row, col

    def safe_cells(self):
        return [
            (r, c)
            for r in range(self.height)
            for c in range(self.width)
            if self.board[r][c] == 0
        ]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def is_valid_coord(self, row, col):
        try:
            r = int(row)
            c = int(col)
        except (ValueError, TypeError, OverflowError):
            return False
        # 0.7 or "1" would truncate/convert to a different cell
        if r != row or c != col:
            return False
        return 0 <= r < self.height and 0 <= c < self.width

    def is_mine(self, row, col):
        return self.is_valid_coord(row, col) and self.board[int(row)][int(col)] == MINE

    def is_revealed(self, row, col):
        return self.is_valid_coord(row, col) and self.revealed[int(row)][int(col)]

    def count_at(self, row, col):
        """Adjacency count of an empty cell, or None for a mine."""
        value = self.board[row][col]
        return None if value == MINE else value

    def mine_count(self):
        return sum(1 for row in self.board for cell in row if cell == MINE)

    def revealed_count(self):
        return sum(1 for row in self.revealed for flag in row if flag)

    def view(self, glyphs=None):
        """
        Snapshot of the board as rows of Token(glyph, revealed).
        Hidden tiles still carry their glyph; renderers decide how to mask it.
        """
        glyphs = glyphs or DEFAULT_GLYPHS
        return [
            [Token(glyphs.glyph_for(self.board[r][c]), self.revealed[r][c]) for c in range(self.width)]
            for r in range(self.height)
        ]

