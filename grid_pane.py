import curses


class GridPane:
    PAIR_CELL_TEXT = 1
    PAIR_HEADER = 2
    MAX_COL_WIDTH = 14
    MIN_COL_WIDTH = 5
    MAX_LABEL_WIDTH = 20
    HEADER_H = 1

    def __init__(self, state):
        self.state = state
        try:
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(self.PAIR_CELL_TEXT, curses.COLOR_WHITE, -1)
            curses.init_pair(self.PAIR_HEADER, curses.COLOR_CYAN, -1)
        except curses.error:
            pass

        self.curr_row = 0
        self.curr_col = 0
        self.row_offset = 0
        self.col_offset = 0

        # ("row", idx) | ("column", idx) while a drag is committed to an axis
        self.drag_highlight = None

    @property
    def context(self):
        return self.state.context

    # ---------- geometry ----------
    def label_width(self):
        names = self.context.object_names()
        longest = max((len(n) for n in names), default=0)
        return max(3, min(self.MAX_LABEL_WIDTH, longest))

    def cell_width(self):
        names = self.context.attribute_names()
        longest = max((len(n) for n in names), default=0)
        return max(self.MIN_COL_WIDTH, min(self.MAX_COL_WIDTH, longest + 2))

    def col_pitch(self):
        return self.cell_width() + 1

    def col_x(self, col):
        return self.label_width() + 1 + (col - self.col_offset) * self.col_pitch()

    def row_y(self, row):
        return self.HEADER_H + (row - self.row_offset)

    def visible_counts(self, win=None):
        if win is not None:
            h, w = win.getmaxyx()
        else:
            h, w = 24, 120
        rows = max(1, h - self.HEADER_H - 1)
        cols = max(1, (w - self.label_width() - 1) // self.col_pitch())
        return rows, cols

    def cell_at(self, y, x):
        """Hit-test a screen position; returns (row, col) or None."""
        rows, cols = self.state.shape()
        if y < self.HEADER_H or x < self.label_width() + 1:
            return None
        row = self.row_offset + (y - self.HEADER_H)
        col = self.col_offset + (x - self.label_width() - 1) // self.col_pitch()
        if not (0 <= row < rows and 0 <= col < cols):
            return None
        return row, col

    def units_per_char(self, cell_size):
        """Scale factors turning (dx, dy) character deltas into drag units."""
        return cell_size / self.col_pitch(), float(cell_size)

    def clamp_cursor(self):
        rows, cols = self.state.shape()
        self.curr_row = min(max(0, self.curr_row), max(0, rows - 1))
        self.curr_col = min(max(0, self.curr_col), max(0, cols - 1))

    def adjust_viewport(self, win=None):
        self.clamp_cursor()
        vis_rows, vis_cols = self.visible_counts(win)
        if self.curr_row < self.row_offset:
            self.row_offset = self.curr_row
        elif self.curr_row >= self.row_offset + vis_rows:
            self.row_offset = self.curr_row - vis_rows + 1
        if self.curr_col < self.col_offset:
            self.col_offset = self.curr_col
        elif self.curr_col >= self.col_offset + vis_cols:
            self.col_offset = self.curr_col - vis_cols + 1
        self.row_offset = max(0, self.row_offset)
        self.col_offset = max(0, self.col_offset)

    # ---------- navigation ----------
    def move_left(self):
        self.curr_col = max(0, self.curr_col - 1)

    def move_right(self):
        _, cols = self.state.shape()
        self.curr_col = max(0, min(cols - 1, self.curr_col + 1))

    def move_down(self):
        rows, _ = self.state.shape()
        self.curr_row = max(0, min(rows - 1, self.curr_row + 1))

    def move_up(self):
        self.curr_row = max(0, self.curr_row - 1)

    # ---------- rendering ----------
    def _is_dragged(self, r, c):
        if not self.drag_highlight:
            return False
        axis, idx = self.drag_highlight
        return (axis == "row" and r == idx) or (axis == "column" and c == idx)

    def draw(self, win, active=False):
        win.erase()
        try:
            win.bkgd(" ", curses.color_pair(self.PAIR_CELL_TEXT))
        except curses.error:
            pass
        h, w = win.getmaxyx()
        self.adjust_viewport(win)

        rows, cols = self.state.shape()
        label_w = self.label_width()
        cell_w = self.cell_width()
        vis_rows, vis_cols = self.visible_counts(win)
        row_range = range(self.row_offset, min(rows, self.row_offset + vis_rows))
        col_range = range(self.col_offset, min(cols, self.col_offset + vis_cols))

        if rows == 0 and cols == 0:
            try:
                win.addnstr(0, 0, "(empty context: ,ar adds a row, ,ac a column)", w - 1)
            except curses.error:
                pass
            win.refresh()
            return

        header_attr = curses.color_pair(self.PAIR_HEADER) | curses.A_BOLD
        for c in col_range:
            name = self.context.get_attribute_name(c) or ""
            attr = header_attr
            if self._is_dragged(-1, c):
                attr |= curses.A_STANDOUT
            try:
                win.addnstr(0, self.col_x(c), name[:cell_w].center(cell_w), cell_w, attr)
            except curses.error:
                pass

        for r in row_range:
            y = self.row_y(r)
            if y >= h - 1:
                break
            name = self.context.get_object_name(r) or ""
            label_attr = header_attr
            if self._is_dragged(r, -1):
                label_attr |= curses.A_STANDOUT
            try:
                win.addnstr(y, 0, name[:label_w].ljust(label_w), label_w, label_attr)
            except curses.error:
                pass
            for c in col_range:
                mark = "X" if self.context.in_relation(r, c) else "."
                attr = curses.color_pair(self.PAIR_CELL_TEXT)
                if active and r == self.curr_row and c == self.curr_col:
                    attr |= curses.A_REVERSE
                elif self._is_dragged(r, c):
                    attr |= curses.A_STANDOUT
                try:
                    win.addnstr(y, self.col_x(c), mark.center(cell_w), cell_w, attr)
                except curses.error:
                    pass

        # footer line
        try:
            win.hline(h - 1, 0, " ", w)
        except curses.error:
            pass

        win.refresh()
