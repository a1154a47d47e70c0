"""High-level API for OrderTreeLib.

This module provides simple, functional interfaces for common operations.
These functions wrap the object-oriented core for ease of use in simple
cases.
"""

import operator
from typing import Any, Callable, Iterable, List, Optional, Sequence

from .config import RangeConfig, TreeConfig
from .core.collector import ListCollector, SequenceCollector
from .core.node import Less
from .core.producer import IteratorProducer, LazyRange, SupportsNext
from .core.tree import OrderedTree


def build_tree(
    payloads: Iterable[Any],
    less: Less = operator.lt,
    config: Optional[TreeConfig] = None,
) -> OrderedTree:
    """Build a tree from payloads, the first one becoming the root.

    Args:
        payloads: Values to insert, in insertion order
        less: Strict total-order predicate over payloads
        config: Tree configuration

    Returns:
        OrderedTree holding every payload

    Raises:
        ValueError: If payloads is empty (a tree always has a root)

    Example:
        >>> tree = build_tree(["root", "one", "two", "four"])
        >>> list(tree)
        ['four', 'one', 'root', 'two']
    """
    iterator = iter(payloads)
    try:
        first = next(iterator)
    except StopIteration:
        raise ValueError("build_tree() needs at least one payload") from None

    tree = OrderedTree(first, less=less, config=config)
    tree.extend(iterator)
    return tree


def tree_sort(
    payloads: Iterable[Any],
    less: Less = operator.lt,
    config: Optional[TreeConfig] = None,
) -> List[Any]:
    """Stable sort by inserting into a tree and draining it.

    Equal payloads keep their insertion order because ties go right.

    Args:
        payloads: Values to sort
        less: Strict total-order predicate over payloads
        config: Tree configuration (use TreeConfig.deep_safe() for
            mostly-sorted input)

    Returns:
        Sorted list (empty for empty input)
    """
    items = list(payloads)
    if not items:
        return []
    return build_tree(items, less=less, config=config).drain()


def frange(
    start: float,
    end: float,
    step: float = 1.0,
    config: Optional[RangeConfig] = None,
) -> LazyRange:
    """Create a lazy floating-point range ``[start, end)``.

    Example:
        >>> collect(frange(0.0, 2.0, 0.5))
        [0.0, 0.5, 1.0, 1.5]
    """
    return LazyRange(start, end, step, config=config)


def collect(
    producer: Any,
    collector: Optional[SequenceCollector] = None,
    max_items: Optional[int] = None,
) -> Sequence[Any]:
    """Drain a producer into a new sequence.

    Plain Python iterables are adapted automatically.

    Args:
        producer: Object with a ``next()`` method, or any iterable
        collector: Collection strategy (defaults to ListCollector)
        max_items: Bound for the default collector. When None, a
            producer carrying a RangeConfig with max_items uses that bound.

    Returns:
        Collected values in production order

    Raises:
        ValueError: If an adapted iterable yields None
    """
    if not isinstance(producer, SupportsNext):
        producer = IteratorProducer(producer)

    if collector is None:
        collector = ListCollector(max_items=max_items)

    return collector.collect(producer)


def format_tree(
    tree: OrderedTree,
    render: Callable[[Any], str] = str,
    separator: str = "\n",
) -> str:
    """Render a tree's payloads in sorted order as one string.

    Args:
        tree: Tree to render
        render: Payload formatter
        separator: Text placed between rendered payloads

    Returns:
        Joined rendering
    """
    parts: List[str] = []
    tree.visit(lambda payload: parts.append(render(payload)))
    return separator.join(parts)


def print_tree(
    tree: OrderedTree,
    render: Callable[[Any], str] = str,
    out: Callable[[str], Any] = print,
) -> None:
    """Emit each payload in sorted order through ``out``.

    Example:
        >>> print_tree(build_tree(["root", "one", "two", "four"]))
        four
        one
        root
        two
    """
    tree.visit(lambda payload: out(render(payload)))
