import sys
import os
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from ordering import OrderingPolicy


class TestOrderingPolicy(unittest.TestCase):

    def test_exactly_two_variants(self):
        self.assertEqual(
            list(OrderingPolicy), [OrderingPolicy.MIN_ON_TOP, OrderingPolicy.MAX_ON_TOP]
        )

    def test_min_on_top_parent_must_be_smaller(self):
        self.assertTrue(OrderingPolicy.MIN_ON_TOP.dominates(1, 2))
        self.assertFalse(OrderingPolicy.MIN_ON_TOP.dominates(2, 1))

    def test_max_on_top_parent_must_be_larger(self):
        self.assertTrue(OrderingPolicy.MAX_ON_TOP.dominates(2, 1))
        self.assertFalse(OrderingPolicy.MAX_ON_TOP.dominates(1, 2))

    def test_equal_values_dominate_each_other(self):
        for ordering in OrderingPolicy:
            self.assertTrue(ordering.dominates(3, 3))
            self.assertTrue(ordering.dominates("a", "a"))

    def test_repr_is_variant_name(self):
        self.assertEqual(repr(OrderingPolicy.MIN_ON_TOP), "MIN_ON_TOP")
        self.assertEqual(repr(OrderingPolicy.MAX_ON_TOP), "MAX_ON_TOP")


if __name__ == "__main__":
    unittest.main()
