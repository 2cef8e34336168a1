from dataclasses import dataclass, field, replace

import numpy as np
import pandas as pd


@dataclass(frozen=True)
class ObjectRecord:
    name: str


@dataclass(frozen=True)
class AttributeRecord:
    name: str


@dataclass(frozen=True)
class FormalContext:
    """Binary relation between objects (rows) and attributes (columns).

    Values are immutable: every mutation returns a new context, so callers
    may keep old snapshots around (undo stack, renderer) without copying.

    Rows and columns are identified by position only. Any index held across
    an add/remove/swap refers to whatever now sits at that position; there
    are deliberately no stable ids.
    """

    objects: tuple = ()
    attributes: tuple = ()
    relation: frozenset = field(default_factory=frozenset)

    # ---------- constructors ----------
    @classmethod
    def from_names(cls, objects, attributes, relation=()):
        objs = tuple(ObjectRecord(str(n)) for n in objects)
        attrs = tuple(AttributeRecord(str(n)) for n in attributes)
        pairs = frozenset(
            (int(o), int(a))
            for o, a in relation
            if 0 <= int(o) < len(objs) and 0 <= int(a) < len(attrs)
        )
        return cls(objs, attrs, pairs)

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame) -> "FormalContext":
        values = df.to_numpy(dtype=object)
        flags = np.array(
            [not pd.isna(v) and bool(v) for v in values.ravel()], dtype=bool
        ).reshape(values.shape)
        rows, cols = np.nonzero(flags)
        return cls.from_names(
            [str(i) for i in df.index],
            [str(c) for c in df.columns],
            zip(rows.tolist(), cols.tolist()),
        )

    # ---------- queries ----------
    def object_count(self) -> int:
        return len(self.objects)

    def attribute_count(self) -> int:
        return len(self.attributes)

    def get_object_name(self, row: int) -> str | None:
        if 0 <= row < len(self.objects):
            return self.objects[row].name
        return None

    def get_attribute_name(self, col: int) -> str | None:
        if 0 <= col < len(self.attributes):
            return self.attributes[col].name
        return None

    def in_relation(self, row: int, col: int) -> bool:
        return (row, col) in self.relation

    def object_names(self) -> tuple:
        return tuple(o.name for o in self.objects)

    def attribute_names(self) -> tuple:
        return tuple(a.name for a in self.attributes)

    # ---------- structural mutations ----------
    def add_row(self) -> "FormalContext":
        n = len(self.objects)
        return replace(self, objects=self.objects + (ObjectRecord(f"Object {n}"),))

    def add_column(self) -> "FormalContext":
        n = len(self.attributes)
        return replace(
            self, attributes=self.attributes + (AttributeRecord(f"Attribute {n}"),)
        )

    def remove_row(self) -> "FormalContext":
        count = max(0, len(self.objects) - 1)
        return replace(
            self,
            objects=self.objects[:count],
            relation=frozenset((o, a) for o, a in self.relation if o < count),
        )

    def remove_column(self) -> "FormalContext":
        count = max(0, len(self.attributes) - 1)
        return replace(
            self,
            attributes=self.attributes[:count],
            relation=frozenset((o, a) for o, a in self.relation if a < count),
        )

    # ---------- cell / name edits ----------
    def toggle_cell(self, row: int, col: int) -> "FormalContext":
        # callers only toggle cells drawn from the current counts
        pair = (row, col)
        if pair in self.relation:
            return replace(self, relation=self.relation - {pair})
        return replace(self, relation=self.relation | {pair})

    def set_object_name(self, row: int, name: str) -> "FormalContext":
        if not 0 <= row < len(self.objects):
            return self
        objects = list(self.objects)
        objects[row] = ObjectRecord(name)
        return replace(self, objects=tuple(objects))

    def set_attribute_name(self, col: int, name: str) -> "FormalContext":
        if not 0 <= col < len(self.attributes):
            return self
        attributes = list(self.attributes)
        attributes[col] = AttributeRecord(name)
        return replace(self, attributes=tuple(attributes))

    # ---------- interop ----------
    def to_dataframe(self) -> pd.DataFrame:
        grid = np.zeros((len(self.objects), len(self.attributes)), dtype=bool)
        for o, a in self.relation:
            grid[o, a] = True
        return pd.DataFrame(
            grid,
            index=pd.Index(self.object_names(), dtype=object),
            columns=pd.Index(self.attribute_names(), dtype=object),
        )
