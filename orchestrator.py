import curses
import sys
import time

from config_paths import load_config
from context_editor import ContextEditor
from file_type_handler import FileTypeHandler
from grid_pane import GridPane
from name_prompt import NamePrompt
from overlay import OverlayView
from reorder_engine import ReorderEngine
from save_prompt import SavePrompt
from screen_layout import ScreenLayout
from shortcut_help_handler import ShortcutHelpHandler
from status_bar import render_status

# xterm "any event" mouse tracking, needed for motion reports while dragging
_MOUSE_MOTION_ON = "\033[?1003h"
_MOUSE_MOTION_OFF = "\033[?1003l"


class Orchestrator:
    def __init__(self, stdscr, app_state, config=None):
        self.stdscr = stdscr
        curses.curs_set(0)
        curses.raw()
        self.stdscr.keypad(True)
        self.stdscr.nodelay(False)
        self.stdscr.timeout(100)

        self.config = config if config is not None else load_config()
        self.state = app_state
        self.state.undo_max_depth = self.config.get("UNDO_MAX_DEPTH", 50)

        self.layout = ScreenLayout(stdscr)
        self.grid = GridPane(app_state)
        self.overlay = OverlayView(self.layout)
        self.save_prompt = SavePrompt(self.state, FileTypeHandler, self._set_status)
        self.name_prompt = NamePrompt(self.state, self._set_status)

        engine = ReorderEngine(
            cell_size=self.config.get("CELL_SIZE", 60),
            threshold=self.config.get("DRAG_THRESHOLD", 5),
        )
        self.editor = ContextEditor(
            self.state, self.grid, self._set_status, self.name_prompt, engine
        )
        # wire undo into name prompt
        self.name_prompt.set_push_undo(self.editor._push_undo)

        self.exit_requested = False

        # ---- status ----
        self.status_msg = None
        self.status_msg_until = 0

    # ---------------- helpers ----------------

    def _set_status(self, msg, seconds=3):
        self.status_msg = msg
        self.status_msg_until = time.time() + seconds

    def _enable_mouse(self):
        try:
            curses.mousemask(curses.ALL_MOUSE_EVENTS | curses.REPORT_MOUSE_POSITION)
            curses.mouseinterval(0)
        except curses.error:
            return
        sys.stdout.write(_MOUSE_MOTION_ON)
        sys.stdout.flush()

    def _disable_mouse(self):
        sys.stdout.write(_MOUSE_MOTION_OFF)
        sys.stdout.flush()

    # ---------------- UI ----------------

    def redraw(self):
        if self.overlay.visible:
            self.overlay.draw()
            return

        try:
            prompt_active = self.save_prompt.active or self.name_prompt.active
            curses.curs_set(1 if prompt_active else 0)
        except curses.error:
            pass

        self.grid.draw(self.layout.table_win, active=True)

        sw = self.layout.status_win
        sw.erase()
        h, w = sw.getmaxyx()

        if self.name_prompt.active:
            self.name_prompt.draw(sw)
            return
        if self.save_prompt.active:
            self.save_prompt.draw(sw)
            return

        text = render_status(
            {
                "status_msg": self.status_msg,
                "status_until": self.status_msg_until,
                "file_path": self.state.file_path,
                "dirty": self.state.dirty,
                "shape": self.state.shape(),
                "cursor": (self.grid.curr_row, self.grid.curr_col),
                "dragging": self.editor.engine.is_dragging(),
            },
            w,
        )
        try:
            sw.addnstr(0, 0, text, w - 1)
        except curses.error:
            pass
        sw.refresh()

    # ---------------- saving ----------------

    def _save(self, save_and_exit=False):
        handler = getattr(self.state, "file_handler", None)
        if handler is None:
            self.save_prompt.start(self.state.file_path, save_and_exit=save_and_exit)
            return False

        try:
            handler.save(self.state.context)
        except OSError as e:
            msg = f"Save failed: {e}"[: self.layout.W - 2]
            self._set_status(msg, 4)
            return False
        self.state.dirty = False
        fname = self.state.file_path or ""
        self._set_status(f"Saved {fname}" if fname else "Saved", 3)
        if save_and_exit:
            self.exit_requested = True
        return True

    # ---------------- main loop ----------------

    def _handle_mouse(self):
        try:
            _, x, y, _, bstate = curses.getmouse()
        except curses.error:
            return
        self.editor.handle_mouse(y, x, bstate)

    def run(self):
        self._enable_mouse()
        try:
            self._loop()
        finally:
            self._disable_mouse()

    def _loop(self):
        self.stdscr.clear()
        self.stdscr.refresh()
        self.redraw()

        while True:
            ch = self.stdscr.getch()

            if ch in (3, 24):
                break

            if self.overlay.visible:
                self.overlay.handle_key(ch)
                self.redraw()
                continue

            if self.name_prompt.active:
                self.name_prompt.handle_key(ch)
                self.redraw()
                continue

            if self.save_prompt.active:
                self.save_prompt.handle_key(ch)
                if self.save_prompt.exit_requested:
                    break
                self.redraw()
                continue

            if ch == -1:
                self.redraw()
                continue

            if ch == curses.KEY_MOUSE:
                self._handle_mouse()
            elif ch == 27 and self.editor.engine.is_dragging():
                self.editor.cancel_drag()
                self._set_status("Drag canceled", 2)
            elif ch in (19, 20):  # Ctrl+S / Ctrl+T
                saved = self._save(save_and_exit=(ch == 20))
                if saved and ch == 20:
                    break
            elif ch == ord("?"):
                self.overlay.open_help(ShortcutHelpHandler.get_lines())
            else:
                self.editor.handle_key(ch)

            self.redraw()

            if self.exit_requested:
                break
