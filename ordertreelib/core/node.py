"""Node abstraction for OrderTreeLib.

A Node owns one payload and at most two children. Ownership is strictly
downward: a child is reachable from exactly one parent slot, so a tree can
never contain a cycle or share a subtree between two places.

The recursive ``insert`` and ``visit`` here are the reference behavior. Their
native stack depth equals the tree height, so strictly increasing input
builds an O(n)-deep chain and costs O(n) stack per call; past the interpreter
recursion limit Python raises RecursionError. That is an accepted limitation
of the recursive form. The iterative strategies in ``inserter`` and
``traverser`` walk the same shape without native recursion.
"""

import operator
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar('T')

Less = Callable[[Any, Any], bool]


class ConsumedNodeError(Exception):
    """Raised when a node (or tree) is used after its payload was taken."""
    pass


class AttachedNodeError(Exception):
    """Raised when take() is called on a node still held by a parent slot.

    Use the parent's take_left() or take_right() instead.
    """
    pass


class Node(Generic[T]):
    """One element of an ordered binary tree.

    Every payload in ``left``'s subtree compares strictly less than
    ``payload``; every payload in ``right``'s subtree compares
    greater-than-or-equal. Ties go right.
    """

    __slots__ = ('_payload', 'left', 'right', '_consumed', '_attached')

    def __init__(self, payload: T):
        """Create a leaf node.

        Args:
            payload: The value this node owns
        """
        self._payload = payload
        self.left: Optional['Node[T]'] = None
        self.right: Optional['Node[T]'] = None
        self._consumed = False
        self._attached = False

    @classmethod
    def new_child(cls, payload: T) -> 'Node[T]':
        """Create a leaf that will be owned by a parent slot."""
        child = cls(payload)
        child._attached = True
        return child

    @property
    def payload(self) -> T:
        """The owned payload (read access)."""
        self._check_alive()
        return self._payload

    @property
    def is_consumed(self) -> bool:
        return self._consumed

    @property
    def is_attached(self) -> bool:
        return self._attached

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        self._check_alive()
        return self.left is None and self.right is None

    def insert(self, data: T, less: Less = operator.lt) -> int:
        """Insert ``data`` into the subtree rooted here.

        Routes left when ``less(data, payload)``, otherwise right, and
        attaches a new leaf at the first empty slot. Never rebalances,
        never rejects a value.

        Args:
            data: Value to insert
            less: Strict total-order predicate over payloads

        Returns:
            Depth of the new leaf relative to this node (a direct child is 1)
        """
        self._check_alive()
        if less(data, self._payload):
            if self.left is None:
                self.left = Node.new_child(data)
                return 1
            return self.left.insert(data, less) + 1
        if self.right is None:
            self.right = Node.new_child(data)
            return 1
        return self.right.insert(data, less) + 1

    def visit(self, action: Callable[[T], Any]) -> None:
        """Apply ``action`` to every payload in sorted (in-order) order.

        Performs no mutation; re-entrant to the extent ``action`` is.

        Args:
            action: Callable receiving each payload
        """
        self._check_alive()
        if self.left is not None:
            self.left.visit(action)
        action(self._payload)
        if self.right is not None:
            self.right.visit(action)

    def borrow(self) -> 'PayloadView[T]':
        """Return a read-only view of the payload without consuming the node.

        The view is valid only while this node is alive.
        """
        self._check_alive()
        return PayloadView(self)

    def take(self) -> T:
        """Consume this node and return its owned payload.

        The whole subtree is dismantled with it: every descendant is
        consumed too, so views borrowed anywhere below expire. Only a
        detached node (a tree root, or one released through
        ``take_left``/``take_right``) can be taken.

        Returns:
            The payload, moved out of the node

        Raises:
            AttachedNodeError: If a parent slot still owns this node
        """
        self._check_alive()
        if self._attached:
            raise AttachedNodeError(
                "node is owned by a parent slot; use take_left() or take_right()"
            )
        payload = self._payload
        # Explicit stack so chains deeper than the recursion limit are fine
        stack = [self]
        while stack:
            node = stack.pop()
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
            node.left = None
            node.right = None
            node._payload = None
            node._attached = False
            node._consumed = True
        return payload

    def take_left(self) -> Optional[T]:
        """Detach and consume the left child, returning its payload.

        The left slot is cleared, so this node stays fully usable. The
        child's own subtree is consumed with it.

        Returns:
            The left child's payload, or None if the slot is empty
        """
        self._check_alive()
        child, self.left = self.left, None
        return self._release(child)

    def take_right(self) -> Optional[T]:
        """Detach and consume the right child, returning its payload."""
        self._check_alive()
        child, self.right = self.right, None
        return self._release(child)

    @staticmethod
    def _release(child: Optional['Node[T]']) -> Optional[T]:
        if child is None:
            return None
        child._attached = False
        return child.take()

    def _check_alive(self) -> None:
        if self._consumed:
            raise ConsumedNodeError("node has been consumed by take()")

    def __str__(self) -> str:
        """String representation defaults to the payload."""
        if self._consumed:
            return "<consumed>"
        return str(self._payload)

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        if self._consumed:
            return f"{self.__class__.__name__}(<consumed>)"
        return f"{self.__class__.__name__}(payload={self._payload!r})"


class PayloadView(Generic[T]):
    """Read-only view of a node's payload, scoped to the node's lifetime."""

    __slots__ = ('_node',)

    def __init__(self, node: Node[T]):
        self._node = node

    @property
    def value(self) -> T:
        """The viewed payload.

        Raises:
            ConsumedNodeError: If the owning node has been consumed
        """
        return self._node.payload

    @property
    def is_valid(self) -> bool:
        return not self._node.is_consumed

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        if not self.is_valid:
            return f"{self.__class__.__name__}(<expired>)"
        return f"{self.__class__.__name__}({self.value!r})"

    def __eq__(self, other: object) -> bool:
        """Views compare by payload; an expired view equals nothing."""
        if not self.is_valid:
            return False
        if isinstance(other, PayloadView):
            return other.is_valid and self.value == other.value
        return self.value == other

    __hash__ = None
