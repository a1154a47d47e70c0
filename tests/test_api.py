"""Tests for the high-level functional API.

These mirror the examples in the documentation so the documented usage
stays correct.
"""

import unittest
import sys
from collections import deque
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from ordertreelib import (
    build_tree,
    tree_sort,
    frange,
    collect,
    format_tree,
    print_tree,
    DequeCollector,
    RangeConfig,
    TreeConfig,
    TraversalMode,
    CollectionLimitExceeded,
)


class TestTreeHelpers(unittest.TestCase):
    """Test tree construction and rendering helpers."""

    def test_build_tree(self):
        tree = build_tree(["root", "one", "two", "four"])
        self.assertEqual(list(tree), ["four", "one", "root", "two"])
        self.assertEqual(tree.root.payload, "root")

    def test_build_tree_from_generator(self):
        tree = build_tree(word for word in ("b", "a", "c"))
        self.assertEqual(list(tree), ["a", "b", "c"])

    def test_build_tree_requires_payload(self):
        with self.assertRaises(ValueError):
            build_tree([])

    def test_build_tree_with_config(self):
        tree = build_tree(range(10), config=TreeConfig.deep_safe())
        self.assertEqual(tree.config.mode, TraversalMode.ITERATIVE)
        self.assertEqual(tree.height(), 10)

    def test_tree_sort(self):
        self.assertEqual(tree_sort([3, 1, 2, 1]), [1, 1, 2, 3])
        self.assertEqual(tree_sort([]), [])

    def test_tree_sort_is_stable(self):
        pairs = [(2, "a"), (1, "b"), (2, "c"), (1, "d")]
        result = tree_sort(pairs, less=lambda a, b: a[0] < b[0])
        self.assertEqual(result, [(1, "b"), (1, "d"), (2, "a"), (2, "c")])

    def test_format_tree(self):
        tree = build_tree(["root", "one", "two", "four"])
        self.assertEqual(format_tree(tree), "four\none\nroot\ntwo")
        self.assertEqual(
            format_tree(tree, render=str.upper, separator=", "),
            "FOUR, ONE, ROOT, TWO",
        )

    def test_print_tree(self):
        lines = []
        print_tree(build_tree([2, 1, 3]), render=lambda n: f"<{n}>", out=lines.append)
        self.assertEqual(lines, ["<1>", "<2>", "<3>"])


class TestRangeHelpers(unittest.TestCase):
    """Test range creation and collection helpers."""

    def test_frange_collect(self):
        self.assertEqual(collect(frange(0.0, 2.0, 0.5)), [0.0, 0.5, 1.0, 1.5])

    def test_frange_default_step(self):
        self.assertEqual(collect(frange(0.0, 3.0)), [0.0, 1.0, 2.0])

    def test_collect_adapts_iterables(self):
        self.assertEqual(collect(iter("ab")), ["a", "b"])
        self.assertEqual(collect([3, 4]), [3, 4])

    def test_collect_rejects_none_in_iterable(self):
        """A None element must not silently truncate the result."""
        with self.assertRaises(ValueError):
            collect([1, None, 2])

    def test_collect_tree(self):
        """A tree is an iterable, so it can feed any collector."""
        tree = build_tree([5, 2, 8])
        self.assertEqual(collect(tree), [2, 5, 8])

    def test_collect_with_collector(self):
        values = collect(frange(0, 3), collector=DequeCollector())
        self.assertEqual(values, deque([0, 1, 2]))

    def test_collect_max_items(self):
        with self.assertRaises(CollectionLimitExceeded):
            collect(frange(0, 100), max_items=10)

    def test_collect_uses_range_config_bound(self):
        producer = frange(0.0, 1.0, 0.0, config=RangeConfig(max_items=20))
        with self.assertRaises(CollectionLimitExceeded):
            collect(producer)


if __name__ == '__main__':
    unittest.main()
