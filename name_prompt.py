import curses
from typing import Callable, Optional


class NamePrompt:
    """Inline prompt that renames the object or attribute at an index."""

    def __init__(self, state, set_status_cb: Callable[[str, int], None], push_undo_cb: Optional[Callable[[], None]] = None):
        self.state = state
        self._set_status = set_status_cb
        self._push_undo_cb = push_undo_cb

        self.active = False
        self.target: Optional[str] = None  # object | attribute
        self.index: Optional[int] = None
        self.buffer = ""
        self.cursor = 0
        self.hscroll = 0

    # ---------- public API ----------
    def set_push_undo(self, cb: Optional[Callable[[], None]]):
        self._push_undo_cb = cb

    def start_rename_object(self, row: int):
        self._start("object", row, self.state.context.get_object_name(row))

    def start_rename_attribute(self, col: int):
        self._start("attribute", col, self.state.context.get_attribute_name(col))

    def handle_key(self, ch):
        if not self.active:
            return

        if ch in (10, 13):  # Enter
            self._confirm()
            return

        if ch == 27:  # Esc
            self._set_status("Rename canceled", 3)
            self._reset()
            return

        if ch in (curses.KEY_BACKSPACE, 127, 8):
            if self.cursor > 0:
                self.buffer = self.buffer[: self.cursor - 1] + self.buffer[self.cursor :]
                self.cursor -= 1
            return

        if ch == curses.KEY_LEFT:
            self.cursor = max(0, self.cursor - 1)
            return

        if ch == curses.KEY_RIGHT:
            self.cursor = min(len(self.buffer), self.cursor + 1)
            return

        if ch == curses.KEY_HOME:
            self.cursor = 0
            return

        if ch == curses.KEY_END:
            self.cursor = len(self.buffer)
            return

        if 32 <= ch <= 126:
            self.buffer = self.buffer[: self.cursor] + chr(ch) + self.buffer[self.cursor :]
            self.cursor += 1
            return

    def draw(self, win):
        if not self.active:
            return

        prompt = f"Rename {self.target} {self.index}: "
        h, w = win.getmaxyx()
        text_w = max(1, w - len(prompt) - 1)

        if self.cursor < self.hscroll:
            self.hscroll = self.cursor
        elif self.cursor > self.hscroll + text_w:
            self.hscroll = self.cursor - text_w

        visible = self.buffer[self.hscroll : self.hscroll + text_w]

        try:
            win.addnstr(0, 0, prompt, len(prompt))
            win.addnstr(0, len(prompt), visible, text_w)
            win.move(0, len(prompt) + (self.cursor - self.hscroll))
        except curses.error:
            pass
        win.refresh()

    # ---------- internals ----------
    def _start(self, target: str, index: int, current: Optional[str]):
        if current is None:
            self._set_status(f"No {target} at {index}", 3)
            return
        self.active = True
        self.target = target
        self.index = index
        self.buffer = current
        self.cursor = len(self.buffer)
        self.hscroll = 0

    def _confirm(self):
        name = self.buffer.strip()
        if not name:
            self._set_status("Name required", 3)
            return

        ctx = self.state.context
        if self.target == "object":
            old = ctx.get_object_name(self.index)
            updated = ctx.set_object_name(self.index, name)
        else:
            old = ctx.get_attribute_name(self.index)
            updated = ctx.set_attribute_name(self.index, name)

        if old is None:
            # the slot disappeared while the prompt was open
            self._set_status(f"No {self.target} at {self.index}", 4)
        elif old != name:
            if self._push_undo_cb:
                self._push_undo_cb()
            self.state.context = updated
            self._set_status(f"Renamed {self.target} '{old}' to '{name}'", 3)
        self._reset()

    def _reset(self):
        self.active = False
        self.target = None
        self.index = None
        self.buffer = ""
        self.cursor = 0
        self.hscroll = 0
