# tests/test_glyphs.py

import unittest

from backend.board import MinesweeperBoard, Token
from backend.glyphs import DEFAULT_GLYPHS, GlyphTable, render_view
from backend.utils import MINE


class TestGlyphTable(unittest.TestCase):

    def test_default_table(self):
        self.assertEqual(DEFAULT_GLYPHS.glyph_for(MINE), "*")
        self.assertEqual(DEFAULT_GLYPHS.glyph_for(0), ".")
        self.assertEqual(DEFAULT_GLYPHS.glyph_for(8), "8")

    def test_wrong_number_of_counts(self):
        with self.assertRaises(ValueError):
            GlyphTable(counts=["0", "1", "2"])

    def test_empty_glyph_rejected(self):
        with self.assertRaises(ValueError):
            GlyphTable(mine="")
        with self.assertRaises(ValueError):
            GlyphTable(counts=[".", "1", "2", "3", "", "5", "6", "7", "8"])

    def test_out_of_range_value_fails_loudly(self):
        with self.assertRaises(KeyError):
            DEFAULT_GLYPHS.glyph_for(9)
        with self.assertRaises(KeyError):
            DEFAULT_GLYPHS.glyph_for(-2)

    def test_custom_table_used_by_view(self):
        table = GlyphTable(mine="X", counts=["_", "a", "b", "c", "d", "e", "f", "g", "h"])
        board = MinesweeperBoard(height=1, width=3)
        board.place_mine(0, 0)
        view = board.view(table)
        self.assertEqual([token.glyph for token in view[0]], ["X", "a", "_"])


class TestRenderView(unittest.TestCase):

    def test_rows_joined_by_spaces_and_newlines(self):
        view = [
            [Token(".", True), Token("1", True)],
            [Token("*", False), Token("1", False)],
        ]
        self.assertEqual(render_view(view), ". 1\n# #")

    def test_hidden_placeholder_can_wrap_glyph(self):
        view = [[Token("*", False), Token(".", True)]]
        self.assertEqual(render_view(view, hidden="({glyph})"), "(*) .")

    def test_rendered_board_shape(self):
        board = MinesweeperBoard(height=4, width=6, seed=5)
        board.bombify(10)
        lines = render_view(board.view()).split("\n")
        self.assertEqual(len(lines), 4)
        self.assertTrue(all(len(line.split(" ")) == 6 for line in lines))


if __name__ == "__main__":
    unittest.main()
