import unittest

import numpy as np
import pandas as pd

from default_context_initializer import DefaultContextInitializer
from formal_context import FormalContext


SEED = {(0, 0), (1, 0), (2, 1), (1, 2), (2, 2), (3, 0), (3, 3)}


def _assert_in_bounds(test, ctx):
    for o, a in ctx.relation:
        test.assertTrue(0 <= o < ctx.object_count())
        test.assertTrue(0 <= a < ctx.attribute_count())


class SeededContextTests(unittest.TestCase):
    def setUp(self):
        self.ctx = DefaultContextInitializer().seeded()

    def test_seed_shape_and_names(self):
        self.assertEqual(self.ctx.object_count(), 4)
        self.assertEqual(self.ctx.attribute_count(), 4)
        self.assertEqual(self.ctx.relation, SEED)
        self.assertEqual(self.ctx.get_object_name(2), "Object 2")
        self.assertEqual(self.ctx.get_attribute_name(3), "Attribute 3")

    def test_empty_variant(self):
        ctx = DefaultContextInitializer().create("empty")
        self.assertEqual((ctx.object_count(), ctx.attribute_count()), (0, 0))
        self.assertEqual(ctx.relation, frozenset())

    def test_toggle_twice_restores_seed(self):
        once = self.ctx.toggle_cell(0, 0)
        self.assertFalse(once.in_relation(0, 0))
        twice = once.toggle_cell(0, 0)
        self.assertEqual(twice.relation, SEED)
        self.assertEqual(twice, self.ctx)

    def test_toggle_adds_missing_pair(self):
        ctx = self.ctx.toggle_cell(0, 3)
        self.assertTrue(ctx.in_relation(0, 3))
        # original value untouched
        self.assertFalse(self.ctx.in_relation(0, 3))

    def test_remove_column_filters_relation(self):
        ctx = self.ctx.remove_column()
        self.assertEqual(ctx.attribute_count(), 3)
        self.assertEqual(
            ctx.relation, {(0, 0), (1, 0), (2, 1), (1, 2), (2, 2), (3, 0)}
        )

    def test_remove_row_filters_relation(self):
        ctx = self.ctx.remove_row()
        self.assertEqual(ctx.object_count(), 3)
        self.assertNotIn((3, 0), ctx.relation)
        self.assertNotIn((3, 3), ctx.relation)
        _assert_in_bounds(self, ctx)

    def test_remove_on_empty_is_clamped(self):
        ctx = FormalContext().remove_row().remove_column()
        self.assertEqual(ctx.object_count(), 0)
        self.assertEqual(ctx.attribute_count(), 0)

    def test_add_then_remove_keeps_count(self):
        ctx = self.ctx.add_row().remove_row()
        self.assertEqual(ctx.object_count(), self.ctx.object_count())
        ctx = self.ctx.add_column().remove_column()
        self.assertEqual(ctx.attribute_count(), self.ctx.attribute_count())

    def test_default_names_use_index_at_creation(self):
        ctx = self.ctx.set_object_name(1, "cat").add_row()
        self.assertEqual(ctx.get_object_name(1), "cat")
        self.assertEqual(ctx.get_object_name(4), "Object 4")
        ctx = ctx.add_column()
        self.assertEqual(ctx.get_attribute_name(4), "Attribute 4")

    def test_rename_out_of_range_is_noop(self):
        self.assertIs(self.ctx.set_object_name(4, "x"), self.ctx)
        self.assertIs(self.ctx.set_attribute_name(-1, "x"), self.ctx)

    def test_reads_out_of_range_are_absent(self):
        self.assertIsNone(self.ctx.get_object_name(4))
        self.assertIsNone(self.ctx.get_object_name(-1))
        self.assertIsNone(self.ctx.get_attribute_name(99))
        self.assertFalse(self.ctx.in_relation(10, 10))

    def test_invariant_holds_across_mutations(self):
        ctx = self.ctx
        for op in (
            lambda c: c.remove_row(),
            lambda c: c.remove_column(),
            lambda c: c.add_column(),
            lambda c: c.toggle_cell(2, 3),
            lambda c: c.remove_column(),
            lambda c: c.remove_row(),
            lambda c: c.remove_row(),
        ):
            ctx = op(ctx)
            _assert_in_bounds(self, ctx)


class DataFrameInteropTests(unittest.TestCase):
    def test_to_dataframe_marks_relation(self):
        df = DefaultContextInitializer().seeded().to_dataframe()
        self.assertEqual(df.shape, (4, 4))
        self.assertTrue(df.loc["Object 3", "Attribute 3"])
        self.assertFalse(df.loc["Object 0", "Attribute 1"])
        self.assertEqual(int(df.to_numpy().sum()), len(SEED))

    def test_from_dataframe_treats_nan_as_false(self):
        df = pd.DataFrame(
            {"fly": [True, np.nan], "swim": [0, 1]}, index=["duck", "fish"]
        )
        ctx = FormalContext.from_dataframe(df)
        self.assertEqual(ctx.object_names(), ("duck", "fish"))
        self.assertEqual(ctx.attribute_names(), ("fly", "swim"))
        self.assertEqual(ctx.relation, {(0, 0), (1, 1)})

    def test_from_dataframe_treats_pd_na_as_false(self):
        df = pd.DataFrame(
            {"fly": pd.array([True, pd.NA], dtype="boolean")}, index=["duck", "fish"]
        )
        ctx = FormalContext.from_dataframe(df)
        self.assertEqual(ctx.relation, {(0, 0)})

    def test_from_names_drops_out_of_range_pairs(self):
        ctx = FormalContext.from_names(["a"], ["b"], [(0, 0), (1, 0), (0, 5)])
        self.assertEqual(ctx.relation, {(0, 0)})


if __name__ == "__main__":
    unittest.main()
