"""Core abstractions for OrderTreeLib.

This module contains the two cores: the ordered tree (nodes, insertion and
traversal strategies) and the lazy-pull protocol (producers and collectors).
"""

from .node import Node, PayloadView, ConsumedNodeError, AttachedNodeError
from .inserter import Inserter, RecursiveInserter, IterativeInserter, create_inserter
from .traverser import (
    InOrderTraverser,
    RecursiveInOrderTraverser,
    IterativeInOrderTraverser,
    create_traverser,
    measure_height,
)
from .tree import OrderedTree
from .producer import SupportsNext, Producer, LazyRange, IteratorProducer, InvalidStepError
from .collector import (
    SequenceCollector,
    ListCollector,
    DequeCollector,
    CustomCollector,
    CollectionLimitExceeded,
)

__all__ = [
    "Node",
    "PayloadView",
    "ConsumedNodeError",
    "AttachedNodeError",
    "Inserter",
    "RecursiveInserter",
    "IterativeInserter",
    "create_inserter",
    "InOrderTraverser",
    "RecursiveInOrderTraverser",
    "IterativeInOrderTraverser",
    "create_traverser",
    "measure_height",
    "OrderedTree",
    "SupportsNext",
    "Producer",
    "LazyRange",
    "IteratorProducer",
    "InvalidStepError",
    "SequenceCollector",
    "ListCollector",
    "DequeCollector",
    "CustomCollector",
    "CollectionLimitExceeded",
]
