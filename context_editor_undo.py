class ContextEditorUndo:
    """Manages undo/redo stacks of context snapshots."""

    def __init__(self, state, grid, set_status_cb):
        self.state = state
        self.grid = grid
        self._set_status = set_status_cb

    # ---------- snapshots ----------
    def snapshot_state(self):
        # contexts are immutable, no copy needed
        return {
            "context": self.state.context,
            "curr_row": self.grid.curr_row,
            "curr_col": self.grid.curr_col,
        }

    def restore_state(self, snap):
        self.state.context = snap["context"]
        rows, cols = self.state.shape()
        self.grid.curr_row = min(max(0, snap.get("curr_row", 0)), max(0, rows - 1))
        self.grid.curr_col = min(max(0, snap.get("curr_col", 0)), max(0, cols - 1))

    # ---------- stack helpers ----------
    def _max_depth(self):
        return getattr(self.state, "undo_max_depth", 50)

    def push_undo(self):
        stack = self.state.undo_stack
        stack.append(self.snapshot_state())
        if len(stack) > self._max_depth():
            stack.pop(0)
        self.state.redo_stack.clear()

    # ---------- undo/redo ----------
    def undo(self):
        stack = self.state.undo_stack
        if not stack:
            self._set_status("Nothing to undo", 2)
            return
        self.state.redo_stack.append(self.snapshot_state())
        self.restore_state(stack.pop())
        remaining = len(stack)
        self._set_status(f"Undone ({remaining} more)" if remaining else "Undone", 2)

    def redo(self):
        redo_stack = self.state.redo_stack
        if not redo_stack:
            self._set_status("Nothing to redo", 2)
            return
        undo_stack = self.state.undo_stack
        undo_stack.append(self.snapshot_state())
        if len(undo_stack) > self._max_depth():
            undo_stack.pop(0)
        self.restore_state(redo_stack.pop())
        remaining = len(redo_stack)
        self._set_status(f"Redone ({remaining} more)" if remaining else "Redone", 2)
