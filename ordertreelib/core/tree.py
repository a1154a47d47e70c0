"""OrderedTree handle for OrderTreeLib.

The OrderedTree exclusively owns a root Node and, through it, every node in
the tree. It selects insertion and traversal strategies from a TreeConfig and
keeps track of size and height so callers can spot skewed input early.
"""

import logging
import operator
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

from ..config import TreeConfig, ensure_valid
from .inserter import Inserter, create_inserter
from .node import ConsumedNodeError, Less, Node, PayloadView
from .traverser import InOrderTraverser, create_traverser, measure_height

logger = logging.getLogger(__name__)

T = TypeVar('T')


class OrderedTree(Generic[T]):
    """Unbalanced ordered binary tree with a ties-go-right policy.

    Example:
        >>> tree = OrderedTree("root")
        >>> for word in ("one", "two", "four"):
        ...     tree.insert(word)
        >>> list(tree)
        ['four', 'one', 'root', 'two']
    """

    def __init__(self,
                 payload: T,
                 less: Less = operator.lt,
                 config: Optional[TreeConfig] = None):
        """Create a tree holding a single node.

        Args:
            payload: Payload of the root node
            less: Strict total-order predicate over payloads
            config: Tree configuration (defaults to TreeConfig())

        Raises:
            ConfigurationError: If the config fails validation
        """
        self.config = config or TreeConfig()
        ensure_valid(self.config)

        self.less = less
        self._root: Optional[Node[T]] = Node(payload)
        self._size = 1
        self._height = 1
        self._warned_height = False

        mode = self.config.mode.value
        self._inserter: Inserter = create_inserter(mode, less)
        self._traverser: InOrderTraverser = create_traverser(mode)
        logger.debug("Created OrderedTree (mode=%s, root=%r)", mode, payload)

    @property
    def root(self) -> Node[T]:
        """The root node owned by this tree."""
        return self._require_root()

    @property
    def is_consumed(self) -> bool:
        return self._root is None

    def insert(self, data: T) -> None:
        """Insert a payload, routing ties to the right.

        Never rebalances, never rejects a value.
        """
        root = self._require_root()
        depth = self._inserter.insert(root, data)
        self._size += 1
        if depth + 1 > self._height:
            self._height = depth + 1
            self._check_height()

    def extend(self, payloads: Iterable[T]) -> None:
        """Insert every payload from ``payloads`` in iteration order."""
        for payload in payloads:
            self.insert(payload)

    def visit(self, action: Callable[[T], Any]) -> None:
        """Apply ``action`` to every payload in sorted order.

        Args:
            action: Callable receiving a read-only payload
        """
        self._traverser.visit(self._require_root(), action)

    def borrow(self) -> PayloadView[T]:
        """Read-only view of the root payload, valid while the tree lives."""
        return self._require_root().borrow()

    def drain(self) -> List[T]:
        """Consume the tree and return its payloads in sorted order.

        Every node is taken, so views borrowed from the tree expire and
        further operations on the tree raise ConsumedNodeError.

        Returns:
            Owned payloads in in-order sequence
        """
        root = self._require_root()
        # Materialize the order before dismantling anything
        payloads = list(self._traverser.traverse(root))
        root.take()
        self._root = None
        self._size = 0
        self._height = 0
        logger.debug("Drained OrderedTree of %d payloads", len(payloads))
        return payloads

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path."""
        return measure_height(self._require_root())

    def _require_root(self) -> Node[T]:
        if self._root is None:
            raise ConsumedNodeError("tree has been consumed by drain()")
        return self._root

    def _check_height(self) -> None:
        limit = self.config.height_warning
        if limit is None or self._warned_height or self._height <= limit:
            return
        self._warned_height = True
        logger.warning(
            "OrderedTree height reached %d with %d nodes (mode=%s); "
            "skewed input makes insert and visit O(n) deep. "
            "Consider TreeConfig.deep_safe() for sorted input.",
            self._height, self._size, self.config.mode.value
        )

    def __iter__(self) -> Iterator[T]:
        """Lazily yield payloads in sorted order."""
        return self._traverser.traverse(self._require_root())

    def __len__(self) -> int:
        """Number of payloads inserted through this handle."""
        return self._size

    def __repr__(self) -> str:
        if self._root is None:
            return f"{self.__class__.__name__}(<consumed>)"
        return (
            f"{self.__class__.__name__}(root={self._root.payload!r}, "
            f"size={self._size}, mode={self.config.mode.value})"
        )
