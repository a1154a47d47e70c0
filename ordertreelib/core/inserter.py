"""Insertion strategies for OrderTreeLib.

Inserters attach a new leaf beneath a root node following the tree's
ordering policy: strictly-less goes left, everything else (ties included)
goes right. The strategies differ only in how they use the call stack.
"""

import operator
from abc import ABC, abstractmethod
from typing import Any

from .node import Less, Node


class Inserter(ABC):
    """Abstract base class for insertion strategies."""

    def __init__(self, less: Less = operator.lt):
        """Initialize inserter with an ordering predicate.

        Args:
            less: Strict total-order predicate over payloads
        """
        self.less = less

    @abstractmethod
    def insert(self, root: Node, data: Any) -> int:
        """Insert ``data`` beneath ``root``.

        Args:
            root: Root of the subtree to insert into
            data: Value to insert

        Returns:
            Depth of the new leaf, where ``root`` is depth 0
        """
        pass


class RecursiveInserter(Inserter):
    """Recursive insertion.

    Delegates to ``Node.insert``; stack depth equals the tree height.
    """

    def insert(self, root: Node, data: Any) -> int:
        return root.insert(data, self.less)


class IterativeInserter(Inserter):
    """Iterative insertion that walks down without native recursion.

    Produces exactly the same shape as RecursiveInserter for the same
    input sequence.
    """

    def insert(self, root: Node, data: Any) -> int:
        """Walk from root to the first empty slot and attach a leaf there."""
        current = root
        depth = 1
        while True:
            # payload access also rejects consumed nodes
            if self.less(data, current.payload):
                if current.left is None:
                    current.left = Node.new_child(data)
                    return depth
                current = current.left
            else:
                if current.right is None:
                    current.right = Node.new_child(data)
                    return depth
                current = current.right
            depth += 1


# Factory function for creating inserters by name
def create_inserter(mode: str, less: Less = operator.lt) -> Inserter:
    """Create an inserter instance by mode name.

    Args:
        mode: Name of insertion mode (recursive, iterative)
        less: Strict total-order predicate over payloads

    Returns:
        Inserter instance

    Raises:
        ValueError: If mode name is not recognized
    """
    modes = {
        'recursive': RecursiveInserter,
        'iterative': IterativeInserter,
    }

    mode_lower = mode.lower()
    if mode_lower not in modes:
        raise ValueError(
            f"Unknown insertion mode: {mode}. "
            f"Choose from: {', '.join(modes.keys())}"
        )

    return modes[mode_lower](less)
