import sys
import os
import curses

from config_paths import load_config
from default_context_initializer import DefaultContextInitializer
from file_type_handler import FileTypeHandler

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")
from orchestrator import Orchestrator
from app_state import AppState

try:
    from _version import __version__
except Exception:
    __version__ = "0.0.0"


USAGE = (
    "fcaedit - terminal formal context editor\n\n"
    "Usage:\n  fcaedit [path.cxt|path.csv]\n  fcaedit -v\n  fcaedit -h\n"
)


def load_context(path, config):
    variant = config.get("INITIAL_CONTEXT", "seeded")
    if path:
        handler = FileTypeHandler(path, initial_variant=variant)
        return handler.load_or_create(), handler
    return DefaultContextInitializer().create(variant), None


def main():
    args = sys.argv[1:]

    if "-v" in args or "-V" in args:
        print(__version__)
        return

    if "-h" in args or len(args) > 1:
        print(USAGE)
        return

    config = load_config()
    path = args[0] if args else None
    try:
        context, handler = load_context(path, config)
    except (OSError, ValueError) as exc:
        print(f"Load failed: {exc}", file=sys.stderr)
        sys.exit(1)

    state = AppState(
        context, path, handler, undo_max_depth=config.get("UNDO_MAX_DEPTH", 50)
    )

    def curses_main(stdscr):
        Orchestrator(stdscr, state, config).run()

    curses.wrapper(curses_main)


if __name__ == "__main__":
    main()
