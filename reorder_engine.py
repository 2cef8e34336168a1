import math
from dataclasses import dataclass, replace

from formal_context import FormalContext


class DragProtocolError(RuntimeError):
    """A drag event arrived that the current drag state cannot accept."""


# ---------- swap commands ----------
@dataclass(frozen=True)
class NoSwap:
    pass


@dataclass(frozen=True)
class SwapRows:
    from_index: int
    to_index: int


@dataclass(frozen=True)
class SwapColumns:
    from_index: int
    to_index: int


NO_SWAP = NoSwap()


# ---------- drag states ----------
@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class DirectionUndecided:
    origin: tuple  # (row, col)
    dx: float = 0.0
    dy: float = 0.0


@dataclass(frozen=True)
class DraggingRow:
    row: int
    offset: float = 0.0


@dataclass(frozen=True)
class DraggingColumn:
    col: int
    offset: float = 0.0


IDLE = Idle()

DEFAULT_CELL_SIZE = 60
DEFAULT_DRAG_THRESHOLD = 5


# ---------- index math ----------
def remap(from_index: int, to_index: int, x: int) -> int:
    """Where index ``x`` lands after moving ``from_index`` to ``to_index``.

    The moved element is reinserted; everything strictly between the two
    positions slides one slot toward the gap it left.
    """
    if x == from_index:
        return to_index
    if from_index < x <= to_index:
        return x - 1
    if to_index <= x < from_index:
        return x + 1
    return x


def index_shift(offset: float, cell_size: float) -> int:
    """Whole cells covered by ``offset``, rounding half away from zero."""
    if cell_size <= 0 or offset == 0:
        return 0
    half = math.copysign(cell_size / 2, offset)
    return int((offset + half) / cell_size)


def _clamped_target(index: int, shift: int, count: int) -> int:
    return max(0, min(index + shift, count - 1))


def _swap_for(kind, index: int, shift: int, count: int):
    if shift == 0 or count <= 0:
        return NO_SWAP
    target = _clamped_target(index, shift, count)
    if target == index:
        return NO_SWAP
    return kind(index, target)


# ---------- drag transitions ----------
def drag_start(state, cell) -> DirectionUndecided:
    row, col = cell
    return DirectionUndecided((row, col), 0.0, 0.0)


def drag_by(state, dx: float, dy: float, threshold: float = DEFAULT_DRAG_THRESHOLD):
    if isinstance(state, DirectionUndecided):
        acc_x = state.dx + dx
        acc_y = state.dy + dy
        if abs(acc_x) < threshold and abs(acc_y) < threshold:
            return replace(state, dx=acc_x, dy=acc_y)
        row, col = state.origin
        if abs(acc_x) >= abs(acc_y):
            return DraggingColumn(col, acc_x)
        return DraggingRow(row, acc_y)
    if isinstance(state, DraggingRow):
        return replace(state, offset=state.offset + dy)
    if isinstance(state, DraggingColumn):
        return replace(state, offset=state.offset + dx)
    # drag_by before drag_start is a caller bug
    raise DragProtocolError(f"drag_by received in state {state!r}")


def drag_end(state, context: FormalContext, cell_size: float = DEFAULT_CELL_SIZE):
    if isinstance(state, DraggingRow):
        shift = index_shift(state.offset, cell_size)
        return _swap_for(SwapRows, state.row, shift, context.object_count())
    if isinstance(state, DraggingColumn):
        shift = index_shift(state.offset, cell_size)
        return _swap_for(SwapColumns, state.col, shift, context.attribute_count())
    return NO_SWAP


# ---------- applying swaps ----------
def _reorder(seq: tuple, from_index: int, to_index: int) -> tuple:
    return tuple(seq[remap(to_index, from_index, i)] for i in range(len(seq)))


def apply_swap(swap, context: FormalContext) -> FormalContext:
    if isinstance(swap, SwapRows):
        count = context.object_count()
    elif isinstance(swap, SwapColumns):
        count = context.attribute_count()
    else:
        return context

    a, b = swap.from_index, swap.to_index
    if a == b or not (0 <= a < count and 0 <= b < count):
        return context

    if isinstance(swap, SwapRows):
        return replace(
            context,
            objects=_reorder(context.objects, a, b),
            relation=frozenset((remap(a, b, o), t) for o, t in context.relation),
        )
    return replace(
        context,
        attributes=_reorder(context.attributes, a, b),
        relation=frozenset((o, remap(a, b, t)) for o, t in context.relation),
    )


def move_row(context: FormalContext, row: int, delta: int):
    if not 0 <= row < context.object_count():
        return NO_SWAP
    return _swap_for(SwapRows, row, delta, context.object_count())


def move_column(context: FormalContext, col: int, delta: int):
    if not 0 <= col < context.attribute_count():
        return NO_SWAP
    return _swap_for(SwapColumns, col, delta, context.attribute_count())


class ReorderEngine:
    """Tracks one drag gesture and turns it into a swap at release."""

    def __init__(
        self,
        cell_size: float = DEFAULT_CELL_SIZE,
        threshold: float = DEFAULT_DRAG_THRESHOLD,
    ):
        self.cell_size = cell_size
        self.threshold = threshold
        self.state = IDLE

    def is_dragging(self) -> bool:
        return not isinstance(self.state, Idle)

    def on_drag_start(self, cell):
        self.state = drag_start(self.state, cell)

    def on_drag_by(self, dx: float, dy: float):
        self.state = drag_by(self.state, dx, dy, self.threshold)

    def on_drag_end(self, context: FormalContext):
        swap = drag_end(self.state, context, self.cell_size)
        self.state = IDLE
        return swap

    def cancel(self):
        self.state = IDLE
