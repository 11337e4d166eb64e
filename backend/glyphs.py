# backend/glyphs.py

from typing import Dict, List, Sequence

from .utils import MINE

DEFAULT_MINE_GLYPH = "*"
DEFAULT_COUNT_GLYPHS = (".", "1", "2", "3", "4", "5", "6", "7", "8")
DEFAULT_HIDDEN = "#"


class GlyphTable:
    """
    Explicit mapping from cell values to display symbols:
    MINE -> mine glyph, 0..8 -> count glyphs.
    """

    def __init__(self, mine: str = DEFAULT_MINE_GLYPH, counts: Sequence[str] = DEFAULT_COUNT_GLYPHS):
        counts = list(counts)
        if len(counts) != 9:
            raise ValueError(f"Expected 9 count glyphs (0-8), got {len(counts)}")
        for symbol in [mine] + counts:
            if not isinstance(symbol, str) or not symbol:
                raise ValueError(f"Glyphs must be non-empty strings, got {symbol!r}")

        self.mine = mine
        self.counts = counts
        self._table: Dict[int, str] = {MINE: mine}
        self._table.update(enumerate(counts))

    def glyph_for(self, value: int) -> str:
        try:
            return self._table[value]
        except KeyError:
            raise KeyError(f"No glyph for cell value {value!r}") from None

    def __eq__(self, other):
        if not isinstance(other, GlyphTable):
            return NotImplemented
        return self._table == other._table

    def __repr__(self):
        return f"GlyphTable(mine={self.mine!r}, counts={self.counts!r})"


DEFAULT_GLYPHS = GlyphTable()


def render_view(view: List[List], hidden: str = DEFAULT_HIDDEN) -> str:
    """
    Render a board view to text: tokens joined by spaces, rows by newlines.
    Hidden tiles print `hidden`, which may reference the tile as {glyph}.
    """
    lines = []
    for row in view:
        cells = [
            token.glyph if token.revealed else hidden.format(glyph=token.glyph)
            for token in row
        ]
        lines.append(" ".join(cells))
    return "\n".join(lines)
