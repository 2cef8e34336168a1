import curses

from context_editor_undo import ContextEditorUndo
from reorder_engine import (
    DraggingColumn,
    DraggingRow,
    NoSwap,
    ReorderEngine,
    SwapColumns,
    SwapRows,
    apply_swap,
    move_column,
    move_row,
)


class ContextEditor:
    """Translates keys and mouse drags into context operations."""

    def __init__(self, state, grid, set_status_cb, name_prompt=None, engine=None):
        self.state = state
        self.grid = grid
        self._set_status = set_status_cb
        self.name_prompt = name_prompt
        self.engine = engine if engine is not None else ReorderEngine()
        self.undo_mgr = ContextEditorUndo(state, grid, set_status_cb)
        self._leader_ttl = 1.5

        self.leader_state = None  # None | leader | a | d | r | rn
        self._last_mouse = None

    # ---------- helpers ----------
    def _push_undo(self):
        self.undo_mgr.push_undo()

    def _commit(self, updated, message=None):
        if updated is self.state.context:
            return False
        self._push_undo()
        self.state.context = updated
        self.grid.clamp_cursor()
        if message:
            self._set_status(message, 2)
        return True

    def _show_leader_status(self, seq: str):
        if self.name_prompt is not None and getattr(self.name_prompt, "active", False):
            return
        self._set_status(f"Leader: {seq}", self._leader_ttl)

    # ---------- context operations ----------
    def toggle_current(self):
        rows, cols = self.state.shape()
        r, c = self.grid.curr_row, self.grid.curr_col
        if not (0 <= r < rows and 0 <= c < cols):
            self._set_status("No cell", 2)
            return
        self._commit(self.state.context.toggle_cell(r, c))

    def add_row(self):
        ctx = self.state.context
        self._commit(ctx.add_row(), f"Added object {ctx.object_count()}")
        self.grid.curr_row = self.state.context.object_count() - 1

    def add_column(self):
        ctx = self.state.context
        self._commit(ctx.add_column(), f"Added attribute {ctx.attribute_count()}")
        self.grid.curr_col = self.state.context.attribute_count() - 1

    def remove_row(self):
        if self.state.context.object_count() == 0:
            self._set_status("No rows", 3)
            return
        self._commit(self.state.context.remove_row(), "Removed last object")

    def remove_column(self):
        if self.state.context.attribute_count() == 0:
            self._set_status("No columns", 3)
            return
        self._commit(self.state.context.remove_column(), "Removed last attribute")

    def apply(self, swap):
        if isinstance(swap, NoSwap):
            return False
        if not self._commit(apply_swap(swap, self.state.context)):
            return False
        if isinstance(swap, SwapRows):
            self.grid.curr_row = swap.to_index
            self._set_status(f"Moved object {swap.from_index} to {swap.to_index}", 2)
        elif isinstance(swap, SwapColumns):
            self.grid.curr_col = swap.to_index
            self._set_status(f"Moved attribute {swap.from_index} to {swap.to_index}", 2)
        return True

    def _start_rename(self, target):
        if self.name_prompt is None:
            self._set_status("Rename prompt unavailable", 3)
            return
        if target == "object":
            self.name_prompt.start_rename_object(self.grid.curr_row)
        else:
            self.name_prompt.start_rename_attribute(self.grid.curr_col)

    # ---------- keys ----------
    def _handle_leader(self, ch):
        state = self.leader_state
        self.leader_state = None

        if state == "leader":
            if ch in (ord("a"), ord("d"), ord("r")):
                self.leader_state = chr(ch)
                self._show_leader_status("," + chr(ch))
            return

        if state == "a":
            if ch == ord("r"):
                self.add_row()
            elif ch == ord("c"):
                self.add_column()
            return

        if state == "d":
            if ch == ord("r"):
                self.remove_row()
            elif ch == ord("c"):
                self.remove_column()
            return

        if state == "r":
            if ch == ord("n"):
                self.leader_state = "rn"
                self._show_leader_status(",rn")
            return

        if state == "rn":
            if ch == ord("o"):
                self._start_rename("object")
            elif ch == ord("a"):
                self._start_rename("attribute")

    def handle_key(self, ch):
        if ch == -1:
            return

        if self.leader_state:
            self._handle_leader(ch)
            return

        if ch == ord(","):
            self.leader_state = "leader"
            self._show_leader_status(",")
            return

        if ch in (ord("h"), curses.KEY_LEFT):
            self.grid.move_left()
        elif ch in (ord("l"), curses.KEY_RIGHT):
            self.grid.move_right()
        elif ch in (ord("j"), curses.KEY_DOWN):
            self.grid.move_down()
        elif ch in (ord("k"), curses.KEY_UP):
            self.grid.move_up()
        elif ch in (ord(" "), ord("x")):
            self.toggle_current()
        elif ch == ord("J"):
            self.apply(move_row(self.state.context, self.grid.curr_row, 1))
        elif ch == ord("K"):
            self.apply(move_row(self.state.context, self.grid.curr_row, -1))
        elif ch == ord("L"):
            self.apply(move_column(self.state.context, self.grid.curr_col, 1))
        elif ch == ord("H"):
            self.apply(move_column(self.state.context, self.grid.curr_col, -1))
        elif ch == ord("u"):
            self.undo_mgr.undo()
        elif ch == 18:  # Ctrl+R
            self.undo_mgr.redo()

    # ---------- mouse ----------
    def _drag_delta(self, y, x):
        ly, lx = self._last_mouse
        ux, uy = self.grid.units_per_char(self.engine.cell_size)
        self._last_mouse = (y, x)
        return (x - lx) * ux, (y - ly) * uy

    def _sync_drag_highlight(self):
        state = self.engine.state
        if isinstance(state, DraggingRow):
            self.grid.drag_highlight = ("row", state.row)
        elif isinstance(state, DraggingColumn):
            self.grid.drag_highlight = ("column", state.col)
        else:
            self.grid.drag_highlight = None

    def handle_mouse(self, y, x, bstate):
        if bstate & curses.BUTTON1_PRESSED:
            cell = self.grid.cell_at(y, x)
            if cell is None:
                return
            self.grid.curr_row, self.grid.curr_col = cell
            self.engine.on_drag_start(cell)
            self._last_mouse = (y, x)
            return

        if not self.engine.is_dragging():
            if bstate & curses.BUTTON1_CLICKED:
                cell = self.grid.cell_at(y, x)
                if cell is not None:
                    self.grid.curr_row, self.grid.curr_col = cell
            return

        dx, dy = self._drag_delta(y, x)
        if dx or dy:
            self.engine.on_drag_by(dx, dy)

        if bstate & curses.BUTTON1_RELEASED:
            swap = self.engine.on_drag_end(self.state.context)
            self._last_mouse = None
            self.grid.drag_highlight = None
            self.apply(swap)
            return

        self._sync_drag_highlight()

    def cancel_drag(self):
        self.engine.cancel()
        self._last_mouse = None
        self.grid.drag_highlight = None
