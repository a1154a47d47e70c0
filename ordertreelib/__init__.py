"""OrderTreeLib - Ordered Trees and Lazy-Pull Producers.

OrderTreeLib provides two small cores:

Ordered tree:
    from ordertreelib import OrderedTree
    tree = OrderedTree("root")
    tree.insert("one")
    tree.visit(print)

Lazy-pull producers:
    from ordertreelib import LazyRange, ListCollector
    values = ListCollector().collect(LazyRange(0.0, 1.0, 0.1))

Both run synchronously on the caller's thread with no shared state. Callers
sharing a structure between threads must guard it themselves.
"""

__version__ = "0.1.0"

# Core components
from .core.node import Node, PayloadView, ConsumedNodeError, AttachedNodeError
from .core.tree import OrderedTree
from .core.inserter import RecursiveInserter, IterativeInserter
from .core.traverser import RecursiveInOrderTraverser, IterativeInOrderTraverser
from .core.producer import SupportsNext, Producer, LazyRange, IteratorProducer, InvalidStepError
from .core.collector import (
    SequenceCollector,
    ListCollector,
    DequeCollector,
    CustomCollector,
    CollectionLimitExceeded,
)

# Configuration
from .config import TraversalMode, TreeConfig, RangeConfig, ConfigurationError

# High-level API
from .api import (
    build_tree,
    tree_sort,
    frange,
    collect,
    format_tree,
    print_tree,
)

__all__ = [
    "__version__",
    # Core
    'Node',
    'PayloadView',
    'ConsumedNodeError',
    'AttachedNodeError',
    'OrderedTree',
    'RecursiveInserter',
    'IterativeInserter',
    'RecursiveInOrderTraverser',
    'IterativeInOrderTraverser',
    'SupportsNext',
    'Producer',
    'LazyRange',
    'IteratorProducer',
    'InvalidStepError',
    'SequenceCollector',
    'ListCollector',
    'DequeCollector',
    'CustomCollector',
    'CollectionLimitExceeded',
    # Config
    'TraversalMode',
    'TreeConfig',
    'RangeConfig',
    'ConfigurationError',
    # API
    'build_tree',
    'tree_sort',
    'frange',
    'collect',
    'format_tree',
    'print_tree',
]
