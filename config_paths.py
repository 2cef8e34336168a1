import os

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "fcaedit")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")

# default settings
CELL_SIZE_DEFAULT = 60
DRAG_THRESHOLD_DEFAULT = 5
UNDO_MAX_DEPTH_DEFAULT = 50
INITIAL_CONTEXT_DEFAULT = "seeded"
INITIAL_CONTEXT_CHOICES = {"seeded", "empty"}


def ensure_config_dirs():
    os.makedirs(CONFIG_DIR, exist_ok=True)


def _positive_number(value):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value if value > 0 else None


def load_config():
    cfg = {
        "CELL_SIZE": CELL_SIZE_DEFAULT,
        "DRAG_THRESHOLD": DRAG_THRESHOLD_DEFAULT,
        "UNDO_MAX_DEPTH": UNDO_MAX_DEPTH_DEFAULT,
        "INITIAL_CONTEXT": INITIAL_CONTEXT_DEFAULT,
    }

    if os.path.exists(CONFIG_JSON):
        try:
            import json

            with open(CONFIG_JSON, "r", encoding="utf-8") as f:
                data = json.load(f)
            if isinstance(data, dict):
                cell_size = _positive_number(data.get("cell_size"))
                if cell_size is not None:
                    cfg["CELL_SIZE"] = cell_size

                threshold = _positive_number(data.get("drag_threshold"))
                if threshold is not None:
                    cfg["DRAG_THRESHOLD"] = threshold

                depth = data.get("undo_max_depth")
                if isinstance(depth, int) and not isinstance(depth, bool) and depth > 0:
                    cfg["UNDO_MAX_DEPTH"] = depth

                initial = data.get("initial_context")
                if initial in INITIAL_CONTEXT_CHOICES:
                    cfg["INITIAL_CONTEXT"] = initial
        except Exception:
            pass

    return cfg
