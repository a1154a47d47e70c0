"""Unit tests for the Node abstraction.

Covers the recursive insert/visit reference behavior, the ties-go-right
policy, and the difference between taking and borrowing a payload.
"""

import unittest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from ordertreelib import Node, PayloadView, ConsumedNodeError, AttachedNodeError


class TestNodeInsert(unittest.TestCase):
    """Test structural insertion on bare nodes."""

    def test_new_node_is_leaf(self):
        """A fresh node has no children."""
        node = Node("root")
        self.assertTrue(node.is_leaf())
        self.assertIsNone(node.left)
        self.assertIsNone(node.right)
        self.assertEqual(node.payload, "root")

    def test_smaller_goes_left(self):
        node = Node("m")
        depth = node.insert("a")
        self.assertEqual(depth, 1)
        self.assertEqual(node.left.payload, "a")
        self.assertIsNone(node.right)

    def test_larger_goes_right(self):
        node = Node("m")
        node.insert("z")
        self.assertIsNone(node.left)
        self.assertEqual(node.right.payload, "z")

    def test_ties_go_right(self):
        """Equal payloads are routed into the right subtree."""
        node = Node("m")
        node.insert("m")
        self.assertIsNone(node.left)
        self.assertEqual(node.right.payload, "m")

    def test_insert_returns_depth(self):
        """Strictly increasing input builds a right-leaning chain."""
        node = Node(1)
        depths = [node.insert(value) for value in (2, 3, 4)]
        self.assertEqual(depths, [1, 2, 3])

    def test_custom_predicate(self):
        """A reversed predicate mirrors the tree."""
        node = Node(5)
        node.insert(9, less=lambda a, b: a > b)
        self.assertEqual(node.left.payload, 9)


class TestNodeVisit(unittest.TestCase):
    """Test in-order visiting on bare nodes."""

    def test_worked_example(self):
        """The classic root/one/two/four example visits in sorted order."""
        node = Node("root")
        for word in ("one", "two", "four"):
            node.insert(word)

        seen = []
        node.visit(seen.append)
        self.assertEqual(seen, ["four", "one", "root", "two"])

    def test_duplicate_root_follows_root(self):
        node = Node("root")
        for word in ("one", "two", "four", "root"):
            node.insert(word)

        seen = []
        node.visit(seen.append)
        self.assertEqual(seen, ["four", "one", "root", "root", "two"])

    def test_visit_does_not_mutate(self):
        node = Node(2)
        node.insert(1)
        node.insert(3)

        first, second = [], []
        node.visit(first.append)
        node.visit(second.append)
        self.assertEqual(first, second)
        self.assertEqual(node.left.payload, 1)
        self.assertEqual(node.right.payload, 3)

    def test_reentrant_visit(self):
        """An action may start another traversal of the same node."""
        node = Node(2)
        node.insert(1)
        node.insert(3)

        counts = []
        node.visit(lambda _: node.visit(counts.append))
        self.assertEqual(len(counts), 9)


class TestTakeAndBorrow(unittest.TestCase):
    """Test the consuming and borrowing payload accessors."""

    def test_take_returns_payload(self):
        node = Node("root")
        node.insert("leaf")
        self.assertEqual(node.take(), "root")
        self.assertTrue(node.is_consumed)
        self.assertIsNone(node.left)
        self.assertIsNone(node.right)

    def test_take_twice_fails(self):
        node = Node("root")
        node.take()
        with self.assertRaises(ConsumedNodeError):
            node.take()

    def test_consumed_node_rejects_operations(self):
        node = Node("root")
        node.take()
        with self.assertRaises(ConsumedNodeError):
            node.insert("x")
        with self.assertRaises(ConsumedNodeError):
            node.visit(print)
        with self.assertRaises(ConsumedNodeError):
            node.payload
        with self.assertRaises(ConsumedNodeError):
            node.borrow()

    def test_borrow_keeps_node_alive(self):
        node = Node("root")
        view = node.borrow()
        self.assertIsInstance(view, PayloadView)
        self.assertEqual(view.value, "root")
        self.assertEqual(str(view), "root")
        self.assertTrue(view.is_valid)
        # Borrowing twice is fine
        self.assertEqual(node.borrow(), view)
        self.assertFalse(node.is_consumed)

    def test_view_expires_with_node(self):
        """A view must not outlive the node it was borrowed from."""
        node = Node("root")
        view = node.borrow()
        node.take()
        self.assertFalse(view.is_valid)
        with self.assertRaises(ConsumedNodeError):
            view.value
        self.assertIn("expired", repr(view))

    def test_repr(self):
        node = Node("root")
        self.assertEqual(repr(node), "Node(payload='root')")
        self.assertEqual(str(node), "root")
        node.take()
        self.assertEqual(repr(node), "Node(<consumed>)")

    def test_expired_view_equals_nothing(self):
        node = Node("root")
        view = node.borrow()
        other = Node("root").borrow()
        self.assertEqual(view, other)
        node.take()
        self.assertNotEqual(view, other)
        self.assertNotEqual(other, view)
        self.assertNotEqual(view, "root")

    def test_views_are_unhashable(self):
        with self.assertRaises(TypeError):
            hash(Node("root").borrow())


class TestDismantling(unittest.TestCase):
    """Test that taking a payload dismantles the whole subtree."""

    def setUp(self):
        #     m
        #    / \
        #   c   t
        #  /
        # a
        self.root = Node("m")
        for word in ("c", "t", "a"):
            self.root.insert(word)

    def test_take_expires_descendant_views(self):
        leaf_view = self.root.left.left.borrow()
        right_view = self.root.right.borrow()
        self.root.take()
        self.assertFalse(leaf_view.is_valid)
        self.assertFalse(right_view.is_valid)
        with self.assertRaises(ConsumedNodeError):
            leaf_view.value

    def test_take_refuses_attached_node(self):
        child = self.root.left
        self.assertTrue(child.is_attached)
        with self.assertRaises(AttachedNodeError):
            child.take()
        # Nothing was consumed
        self.assertFalse(child.is_consumed)
        seen = []
        self.root.visit(seen.append)
        self.assertEqual(seen, ["a", "c", "m", "t"])

    def test_take_left_clears_slot(self):
        leaf_view = self.root.left.left.borrow()
        self.assertEqual(self.root.take_left(), "c")
        self.assertIsNone(self.root.left)
        self.assertFalse(leaf_view.is_valid)

        # The parent stays usable
        self.root.insert("b")
        seen = []
        self.root.visit(seen.append)
        self.assertEqual(seen, ["b", "m", "t"])

    def test_take_right(self):
        self.assertEqual(self.root.take_right(), "t")
        self.assertIsNone(self.root.right)
        self.assertIsNone(self.root.take_right())

    def test_take_long_chain(self):
        """Dismantling does not recurse, so deep chains are fine."""
        root = Node(0)
        current = root
        for value in range(1, sys.getrecursionlimit() * 2):
            current.right = Node.new_child(value)
            current = current.right
        tail_view = current.borrow()
        self.assertEqual(root.take(), 0)
        self.assertFalse(tail_view.is_valid)


if __name__ == '__main__':
    unittest.main()
