import unittest

from app_state import AppState
from default_context_initializer import DefaultContextInitializer
from formal_context import FormalContext
from grid_pane import GridPane


class DummyWin:
    def __init__(self, h=24, w=120):
        self._h = h
        self._w = w

    def getmaxyx(self):
        return self._h, self._w


class GridPaneGeometryTests(unittest.TestCase):
    def _grid(self, context=None):
        if context is None:
            context = DefaultContextInitializer().seeded()
        return GridPane(AppState(context, None, None))

    def test_cell_at_matches_drawn_positions(self):
        grid = self._grid()
        for r in range(4):
            for c in range(4):
                self.assertEqual(grid.cell_at(grid.row_y(r), grid.col_x(c)), (r, c))
                self.assertEqual(
                    grid.cell_at(grid.row_y(r), grid.col_x(c) + grid.cell_width() - 1),
                    (r, c),
                )

    def test_cell_at_outside_grid(self):
        grid = self._grid()
        self.assertIsNone(grid.cell_at(0, grid.col_x(0)))
        self.assertIsNone(grid.cell_at(grid.row_y(0), 0))
        self.assertIsNone(grid.cell_at(grid.row_y(4), grid.col_x(0)))
        self.assertIsNone(grid.cell_at(grid.row_y(0), grid.col_x(4)))

    def test_one_column_pitch_is_one_cell_size(self):
        grid = self._grid()
        ux, uy = grid.units_per_char(60)
        self.assertAlmostEqual(ux * grid.col_pitch(), 60)
        self.assertEqual(uy, 60)

    def test_widths_follow_names(self):
        ctx = FormalContext.from_names(["a"], ["b"])
        grid = self._grid(ctx)
        self.assertEqual(grid.label_width(), 3)
        self.assertEqual(grid.cell_width(), GridPane.MIN_COL_WIDTH)
        ctx = ctx.set_attribute_name(0, "x" * 40)
        grid.state.context = ctx
        self.assertEqual(grid.cell_width(), GridPane.MAX_COL_WIDTH)

    def test_adjust_viewport_keeps_cursor_visible(self):
        ctx = FormalContext()
        for _ in range(40):
            ctx = ctx.add_row().add_column()
        grid = self._grid(ctx)
        win = DummyWin(12, 60)
        grid.curr_row, grid.curr_col = 39, 39
        grid.adjust_viewport(win)
        vis_rows, vis_cols = grid.visible_counts(win)
        self.assertEqual(grid.row_offset, 39 - vis_rows + 1)
        self.assertEqual(grid.col_offset, 39 - vis_cols + 1)
        grid.curr_row, grid.curr_col = 0, 0
        grid.adjust_viewport(win)
        self.assertEqual((grid.row_offset, grid.col_offset), (0, 0))

    def test_cursor_clamps_after_shrink(self):
        grid = self._grid()
        grid.curr_row, grid.curr_col = 3, 3
        grid.state.context = grid.state.context.remove_row().remove_column()
        grid.clamp_cursor()
        self.assertEqual((grid.curr_row, grid.curr_col), (2, 2))


if __name__ == "__main__":
    unittest.main()
