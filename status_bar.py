import os
import time


def render_status(context, width):
    """
    context keys: status_msg, status_until, file_path, shape, dirty,
                  cursor, dragging
    """
    text = ""
    now = time.time()
    if context.get('status_msg') and now < context.get('status_until', 0):
        text = f" {context['status_msg']}"
    else:
        mode = 'DRAG' if context.get('dragging') else 'CXT'
        fname = context.get('file_path') or '[no file]'
        fname = os.path.basename(fname)
        if context.get('dirty'):
            fname += ' [+]'
        rows, cols = context.get('shape', (0, 0))
        r, c = context.get('cursor', (0, 0))
        text = f" {mode} | {fname} | {rows} objects x {cols} attributes | cell {r},{c} | ? help"

    return text.ljust(width)[:width]
