"""Sequence collection strategies for OrderTreeLib.

SequenceCollectors drain a producer into a freshly constructed ordered
sequence. They work with anything that has a ``next()`` method, so the same
collector serves a LazyRange, an adapted Python iterable, or any custom
producer.
"""

import logging
from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Callable, Deque, Generic, List, MutableSequence, Optional, TypeVar

from ..config import RangeConfig
from .producer import SupportsNext

logger = logging.getLogger(__name__)

T = TypeVar('T')
S = TypeVar('S')


class CollectionLimitExceeded(Exception):
    """Raised when a bounded collector receives more than max_items values."""

    def __init__(self, max_items: int, partial: Any):
        super().__init__(
            f"Producer yielded more than max_items={max_items} values"
        )
        self.max_items = max_items
        self.partial = partial


class SequenceCollector(ABC, Generic[S]):
    """Abstract base class for collection strategies.

    Subclasses decide what kind of sequence is built; the draining loop
    is shared. By default there is no bound, so a producer that never
    reports exhaustion keeps the collector running.
    """

    def __init__(self, max_items: Optional[int] = None):
        """Initialize collector.

        Args:
            max_items: Largest number of values to accept (None = unlimited)
        """
        if max_items is not None and max_items < 0:
            raise ValueError("max_items cannot be negative")
        self.max_items = max_items

    @abstractmethod
    def new_sequence(self) -> S:
        """Create the empty sequence a collection run appends into."""
        pass

    @abstractmethod
    def append(self, sequence: S, item: Any) -> None:
        """Append one produced value to the sequence."""
        pass

    def collect(self, producer: SupportsNext) -> S:
        """Pull ``producer`` dry into a new sequence.

        Args:
            producer: Any object whose ``next()`` returns a value or None

        Returns:
            Values in production order

        Raises:
            TypeError: If producer has no callable ``next``
            CollectionLimitExceeded: If the bound is exceeded. The bound is
                this collector's max_items, or when that is None the
                producer's RangeConfig.max_items
        """
        if not isinstance(producer, SupportsNext):
            raise TypeError(
                f"{type(producer).__name__} does not provide a next() method"
            )

        limit = self._limit_for(producer)
        sequence = self.new_sequence()
        count = 0

        while True:
            item = producer.next()
            if item is None:
                break
            if limit is not None and count >= limit:
                raise CollectionLimitExceeded(limit, sequence)
            self.append(sequence, item)
            count += 1

        logger.debug(
            "%s collected %d values from %s",
            self.__class__.__name__, count, type(producer).__name__
        )
        return sequence

    def _limit_for(self, producer: SupportsNext) -> Optional[int]:
        """Own bound first, else the producer's RangeConfig.max_items."""
        if self.max_items is not None:
            return self.max_items
        config = getattr(producer, 'config', None)
        if isinstance(config, RangeConfig):
            return config.max_items
        return None


class ListCollector(SequenceCollector[List[Any]]):
    """Collects values into a list.

    The default collector and the usual choice.
    """

    def new_sequence(self) -> List[Any]:
        return []

    def append(self, sequence: List[Any], item: Any) -> None:
        sequence.append(item)


class DequeCollector(SequenceCollector[Deque[Any]]):
    """Collects values into a deque, optionally keeping only the last N.

    With ``maxlen`` set the deque silently discards the oldest values,
    which bounds memory without raising.
    """

    def __init__(self, max_items: Optional[int] = None, maxlen: Optional[int] = None):
        super().__init__(max_items)
        self.maxlen = maxlen

    def new_sequence(self) -> Deque[Any]:
        return deque(maxlen=self.maxlen)

    def append(self, sequence: Deque[Any], item: Any) -> None:
        sequence.append(item)


class CustomCollector(SequenceCollector[Any]):
    """Collector that uses user-provided functions.

    Allows custom sequence types without subclassing.
    """

    def __init__(self,
                 factory: Callable[[], MutableSequence],
                 append_func: Optional[Callable[[Any, Any], None]] = None,
                 max_items: Optional[int] = None):
        """Initialize with custom construction functions.

        Args:
            factory: Function() -> empty sequence
            append_func: Function(sequence, item) (default: sequence.append)
            max_items: Largest number of values to accept (None = unlimited)
        """
        super().__init__(max_items)
        self.factory = factory
        self.append_func = append_func or (lambda seq, item: seq.append(item))

    def new_sequence(self) -> Any:
        return self.factory()

    def append(self, sequence: Any, item: Any) -> None:
        self.append_func(sequence, item)
