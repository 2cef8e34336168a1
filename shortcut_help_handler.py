class ShortcutHelpHandler:
    LINES = [
        "fcaedit - formal context editor",
        "",
        "Navigation",
        "  h j k l / arrows   move cursor",
        "",
        "Relation",
        "  space / x          toggle the current cell",
        "",
        "Objects and attributes",
        "  ,ar  ,ac           add object / attribute",
        "  ,dr  ,dc           remove last object / attribute",
        "  ,rno ,rna          rename current object / attribute",
        "",
        "Reordering",
        "  J / K              move current object down / up",
        "  L / H              move current attribute right / left",
        "  mouse drag         drag a cell past half a cell to move its row or column",
        "",
        "History and files",
        "  u / Ctrl+R         undo / redo",
        "  Ctrl+S / Ctrl+T    save / save and exit",
        "  Ctrl+C / Ctrl+X    quit",
        "",
        "  ? / q / Esc        close this help",
    ]

    @classmethod
    def get_lines(cls):
        return list(cls.LINES)
