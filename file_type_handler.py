import os
import sys

import numpy as np
import pandas as pd

from default_context_initializer import DefaultContextInitializer
from formal_context import FormalContext


class FileTypeHandler:
    SUPPORTED = {".cxt", ".csv"}
    TRUTHY = {"x", "1", "true", "t", "yes", "y"}

    def __init__(self, path: str, initial_variant: str = "seeded"):
        self.path = path
        self.initial_variant = initial_variant
        _, ext = os.path.splitext(path)
        self.ext = ext.lower()

        if self.ext not in self.SUPPORTED:
            print("Unsupported file type (use .cxt or .csv)")
            sys.exit(1)

    def load_or_create(self) -> FormalContext:
        if not os.path.exists(self.path) or os.path.getsize(self.path) == 0:
            return self._default_context()

        if self.ext == ".cxt":
            with open(self.path, "r", encoding="utf-8") as f:
                return self.parse_cxt(f.read())
        return self._load_csv()

    def save(self, context: FormalContext) -> None:
        if self.ext == ".cxt":
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(self.format_cxt(context))
        else:
            self._write_csv(context)

    def _default_context(self) -> FormalContext:
        return DefaultContextInitializer().create(self.initial_variant)

    # ---------- burmeister .cxt ----------
    @staticmethod
    def format_cxt(context: FormalContext) -> str:
        n, m = context.object_count(), context.attribute_count()
        lines = ["B", "", str(n), str(m), ""]
        lines.extend(context.object_names())
        lines.extend(context.attribute_names())
        for o in range(n):
            lines.append(
                "".join("X" if context.in_relation(o, a) else "." for a in range(m))
            )
        return "\n".join(lines) + "\n"

    @staticmethod
    def parse_cxt(text: str) -> FormalContext:
        lines = text.splitlines()
        if not lines or lines[0].strip() != "B":
            raise ValueError("Malformed .cxt: missing 'B' header")

        pos = 1
        counts = []
        while len(counts) < 2:
            if pos >= len(lines):
                raise ValueError("Malformed .cxt: missing object/attribute counts")
            line = lines[pos].strip()
            pos += 1
            if not line:
                continue
            if line.isdigit():
                counts.append(int(line))
            elif counts:
                raise ValueError(f"Malformed .cxt: bad count '{line}'")
            # a non-numeric line before the counts is the context name
        n, m = counts

        # one separator line; blank lines after it are empty names
        if pos < len(lines) and not lines[pos].strip():
            pos += 1

        body = lines[pos:]
        if len(body) < n + m + n:
            raise ValueError("Malformed .cxt: truncated body")
        objects = body[:n]
        attributes = body[n : n + m]
        relation = []
        for o, row in enumerate(body[n + m : n + m + n]):
            row = row.strip()
            if len(row) != m:
                raise ValueError(f"Malformed .cxt: row {o} has {len(row)} cells, expected {m}")
            for a, ch in enumerate(row):
                if ch in "Xx":
                    relation.append((o, a))
                elif ch != ".":
                    raise ValueError(f"Malformed .cxt: unexpected cell '{ch}'")
        return FormalContext.from_names(objects, attributes, relation)

    # ---------- csv cross table ----------
    def _load_csv(self) -> FormalContext:
        # header=None keeps repeated attribute names as written
        try:
            raw = pd.read_csv(self.path, header=None, dtype=str, keep_default_na=False)
        except pd.errors.EmptyDataError:
            return self._default_context()
        attributes = raw.iloc[0, 1:].tolist()
        objects = raw.iloc[1:, 0].tolist()
        values = raw.iloc[1:, 1:].to_numpy(dtype=object)
        flags = np.array(
            [str(v).strip().lower() in self.TRUTHY for v in values.ravel()],
            dtype=bool,
        ).reshape(values.shape)
        rows, cols = np.nonzero(flags)
        return FormalContext.from_names(
            objects, attributes, zip(rows.tolist(), cols.tolist())
        )

    def _write_csv(self, context: FormalContext) -> None:
        table = context.to_dataframe()
        out = pd.DataFrame(
            np.where(table.to_numpy(), "X", ""),
            index=table.index,
            columns=table.columns,
        )
        out.to_csv(self.path, index_label="object")
