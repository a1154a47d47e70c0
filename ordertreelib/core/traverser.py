"""In-order traversal strategies for OrderTreeLib.

Traversers walk an ordered tree left subtree first, then the node, then the
right subtree, which yields payloads in sorted order. They never mutate the
tree.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterator, List, Optional

from .node import Node


class InOrderTraverser(ABC):
    """Abstract base class for in-order traversal strategies."""

    @abstractmethod
    def iter_nodes(self, root: Node) -> Iterator[Node]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal

        Yields:
            Nodes in in-order sequence
        """
        pass

    def traverse(self, root: Node) -> Iterator[Any]:
        """Yield payloads in sorted order."""
        for node in self.iter_nodes(root):
            yield node.payload

    def visit(self, root: Node, action: Callable[[Any], Any]) -> None:
        """Apply ``action`` to each payload in sorted order."""
        for payload in self.traverse(root):
            action(payload)


class RecursiveInOrderTraverser(InOrderTraverser):
    """Recursive in-order traversal.

    Uses recursion (via generator) for natural in-order behavior; generator
    nesting depth equals the tree height.
    """

    def iter_nodes(self, root: Node) -> Iterator[Node]:
        def _traverse_recursive(node: Node) -> Iterator[Node]:
            if node.left is not None:
                yield from _traverse_recursive(node.left)
            yield node
            if node.right is not None:
                yield from _traverse_recursive(node.right)

        yield from _traverse_recursive(root)

    def visit(self, root: Node, action: Callable[[Any], Any]) -> None:
        """Delegate to ``Node.visit`` to skip generator overhead."""
        root.visit(action)


class IterativeInOrderTraverser(InOrderTraverser):
    """In-order traversal with an explicit stack.

    Memory is O(height) on the heap instead of on the native call stack,
    so arbitrarily skewed trees can be walked.
    """

    def iter_nodes(self, root: Node) -> Iterator[Node]:
        stack: List[Node] = []
        current: Optional[Node] = root

        while stack or current is not None:
            # Descend as far left as possible
            while current is not None:
                stack.append(current)
                current = current.left

            node = stack.pop()
            yield node
            current = node.right


def measure_height(root: Node) -> int:
    """Count the nodes on the longest root-to-leaf path.

    Uses an explicit stack so it is safe on skewed trees.
    """
    height = 0
    stack = [(root, 1)]
    while stack:
        node, depth = stack.pop()
        if depth > height:
            height = depth
        if node.left is not None:
            stack.append((node.left, depth + 1))
        if node.right is not None:
            stack.append((node.right, depth + 1))
    return height


# Factory function for creating traversers by name
def create_traverser(mode: str) -> InOrderTraverser:
    """Create a traverser instance by mode name.

    Args:
        mode: Name of traversal mode (recursive, iterative)

    Returns:
        InOrderTraverser instance

    Raises:
        ValueError: If mode name is not recognized
    """
    modes = {
        'recursive': RecursiveInOrderTraverser,
        'iterative': IterativeInOrderTraverser,
    }

    mode_lower = mode.lower()
    if mode_lower not in modes:
        raise ValueError(
            f"Unknown traversal mode: {mode}. "
            f"Choose from: {', '.join(modes.keys())}"
        )

    return modes[mode_lower]()
