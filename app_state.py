from formal_context import FormalContext


class AppState:
    def __init__(self, context, file_path, file_handler, undo_max_depth=50):
        self.file_path = file_path
        self.file_handler = file_handler

        self._context = context if context is not None else FormalContext()
        self.undo_stack: list = []
        self.redo_stack: list = []
        self.undo_max_depth = undo_max_depth
        self.dirty = False

    @property
    def context(self) -> FormalContext:
        return self._context

    @context.setter
    def context(self, value: FormalContext):
        if value is None:
            value = FormalContext()
        if value is not self._context:
            self.dirty = True
        self._context = value

    def shape(self) -> tuple[int, int]:
        return self._context.object_count(), self._context.attribute_count()
